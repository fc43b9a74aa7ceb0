"""syndrome.py
===========
Stabilizer measurement for the 5-qubit code.

Each generator is measured as one joint Pauli-product observable on all
five qubits. On a codeword carrying at most a single Pauli error every
generator has a definite eigenvalue, so the measurement is deterministic and
leaves the encoded logical information untouched. Measuring the qubits
individually would collapse it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from ..backends.base import QuantumBackend, QubitRegister
from ..pauli import PauliString
from .code import STABILIZER_GENERATORS, Syndrome

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SyndromeExtractor:
    backend: QuantumBackend
    generators: Tuple[PauliString, ...] = STABILIZER_GENERATORS

    def measure_syndrome(self, register: QubitRegister) -> Syndrome:
        """Measure g1..g4 and pack the outcomes (g4 most significant)."""
        bits = tuple(self.backend.measure_pauli_product(register, g) for g in self.generators)
        syndrome = Syndrome(bits)
        logger.info(
            "Syndrome %s: %s",
            " ".join(f"s{k + 1}={b}" for k, b in enumerate(syndrome.bits)),
            syndrome.value,
        )
        return syndrome


__all__ = ["SyndromeExtractor"]
