"""corrector.py
============
Applies the decoded Pauli back onto the faulty qubit. Pauli gates are
involutions, so one application cancels a single prior error of the same type
on the same qubit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..backends.base import QuantumBackend, QubitRegister
from .code import ErrorEvent

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Corrector:
    backend: QuantumBackend

    def apply_correction(self, register: QubitRegister, event: Optional[ErrorEvent]) -> QubitRegister:
        """Apply ``event.pauli`` to ``event.qubit``; no-op for ``None``."""
        if event is None:
            return register
        self.backend.apply_pauli(register, event.qubit, event.pauli)
        logger.info("Corrected %s error on qubit %d", event.pauli, event.qubit)
        return register


__all__ = ["Corrector"]
