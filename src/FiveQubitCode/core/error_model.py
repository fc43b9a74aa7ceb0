"""
error_model.py
==============
Single-qubit Pauli error channel for one correction round.

Responsibilities
----------------
• Draw a qubit uniformly from {0..4} and an error type uniformly from
  (X, Z, Y), in that order, from an injected RandomnessProvider.
• Apply the drawn Pauli through the backend.
• Report the injected event on the module logger.

Core API
--------
class ErrorChannel:
    def inject_error(register, randomness=None) -> ErrorEvent
    def apply_error(register, event) -> ErrorEvent
    def draw_event(randomness=None) -> ErrorEvent

Used By
-------
`core/correction_round.py` and the Monte Carlo experiment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..backends.base import QuantumBackend, QubitRegister
from .code import ERROR_TYPES, N_QUBITS, ErrorEvent
from .randomness import RandomnessProvider, SeededRandomness

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ErrorChannel:
    """Injects exactly one uniformly random single-qubit Pauli error."""

    backend: QuantumBackend
    randomness: RandomnessProvider = field(default_factory=SeededRandomness)

    def draw_event(self, randomness: Optional[RandomnessProvider] = None) -> ErrorEvent:
        source = randomness if randomness is not None else self.randomness
        qubit = source.draw_int(0, N_QUBITS - 1)
        pauli = ERROR_TYPES[source.draw_int(0, len(ERROR_TYPES) - 1)]
        return ErrorEvent(qubit, pauli)

    def apply_error(self, register: QubitRegister, event: ErrorEvent) -> ErrorEvent:
        self.backend.apply_pauli(register, event.qubit, event.pauli)
        logger.info("Injected %s error on qubit %d", event.pauli, event.qubit)
        return event

    def inject_error(self, register: QubitRegister, randomness: Optional[RandomnessProvider] = None) -> ErrorEvent:
        """Draw an event and apply it to ``register``."""
        return self.apply_error(register, self.draw_event(randomness))


__all__ = ["ErrorChannel"]
