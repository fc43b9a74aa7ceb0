"""encoder.py
==========
Runs the fixed encoding circuit and its inverse against a backend register.

``encode`` maps |psi> on qubit 4 (qubits 0-3 in |0>) into the codeword
stabilised by g1..g4 with eigenvalue +1. ``decode`` undoes it exactly, so a
clean or fully corrected codeword returns |psi> on qubit 4 and |0000> on
qubits 0-3.

``check_encoder`` ties the circuit to the code definition: conjugating Z on
each ancilla must give a +1 stabilizer, and X and Z on qubit 4 must land on
LOGICAL_X and LOGICAL_Z (sign included) up to a stabilizer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import stim

from ..backends.base import QuantumBackend, QubitRegister
from ..gates.circuit import ENCODER_CIRCUIT, LOGICAL_QUBIT, Gate, invert_circuit, to_stim_circuit
from ..pauli import PauliString
from .code import (
    LOGICAL_X,
    LOGICAL_Z,
    N_QUBITS,
    STABILIZER_GENERATORS,
    CodeConsistencyError,
    stabilizer_group,
    verify_code,
)


def check_encoder(
    circuit: Tuple[Gate, ...] = ENCODER_CIRCUIT,
    generators: Tuple[PauliString, ...] = STABILIZER_GENERATORS,
    logical_x: PauliString = LOGICAL_X,
    logical_z: PauliString = LOGICAL_Z,
) -> None:
    """Raise CodeConsistencyError unless ``circuit`` encodes into the code of ``generators``."""
    verify_code(generators)
    tableau = stim.Tableau.from_circuit(to_stim_circuit(circuit))
    if len(tableau) != N_QUBITS:
        raise CodeConsistencyError(f"Encoder acts on {len(tableau)} qubits, expected {N_QUBITS}.")
    group = stabilizer_group(generators)

    for q in range(N_QUBITS):
        if q == LOGICAL_QUBIT:
            continue
        image = PauliString.from_str(str(tableau.z_output(q)))
        if image not in group:
            raise CodeConsistencyError(f"Encoder maps Z{q} to {image}, not a stabilizer.")

    for name, output, logical in (
        ("X", tableau.x_output(LOGICAL_QUBIT), logical_x),
        ("Z", tableau.z_output(LOGICAL_QUBIT), logical_z),
    ):
        image = PauliString.from_str(str(output))
        if not image.commutes_with(logical) or image * logical not in group:
            raise CodeConsistencyError(
                f"Encoder maps {name}{LOGICAL_QUBIT} to {image}, not {logical} times a stabilizer."
            )


@dataclass(slots=True)
class Encoder:
    backend: QuantumBackend
    circuit: Tuple[Gate, ...] = ENCODER_CIRCUIT

    def __post_init__(self) -> None:
        check_encoder(self.circuit)

    @property
    def inverse_circuit(self) -> Tuple[Gate, ...]:
        return invert_circuit(self.circuit)

    def encode(self, register: QubitRegister) -> QubitRegister:
        self._run(register, self.circuit)
        return register

    def decode(self, register: QubitRegister) -> QubitRegister:
        self._run(register, self.inverse_circuit)
        return register

    def _run(self, register: QubitRegister, gates: Tuple[Gate, ...]) -> None:
        if register.size != N_QUBITS:
            raise ValueError(f"Encoder needs a {N_QUBITS}-qubit register, got {register.size}.")
        for g in gates:
            self.backend.apply_gate(register, g)


__all__ = ["Encoder", "check_encoder"]
