"""
circuit.py
==========
Declarative gate records and the fixed encoding circuit of the 5-qubit code.

Responsibilities
----------------
• Name the gate kinds understood by every backend (stim naming).
• Describe circuits as ordered tuples of ``Gate(kind, qubits)`` records.
• Derive inverse circuits mechanically: reverse order, invert each gate.
• Hold the 14-gate encoder mapping |psi>_4 |0000>_{0..3} onto the codeword.

Encoder construction
--------------------
The stabilizer group in standard form has pivots on qubits 0..3:

    h0 = Y Z I Z Y      (= g4 g1 g3)
    h1 = I X Z Z X      (= g3)
    h2 = Z Z X I X      (= g2 g4 g1 g3)
    h3 = Z I Z Y Y      (= g1 g3)

Each pivot i is rotated from |0> onto the +1 eigenstate of its own factor
(H, plus S when that factor is Y) and then controls the rest of h_i. Controlled-Z
gates that would land on a pivot still in |0> act trivially and are omitted,
which leaves 14 gates.

Used By
-------
`core/encoder.py`, backends (`apply_gate`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

import stim


class GateKind(Enum):
    H = "H"
    S = "S"
    S_DAG = "S_DAG"
    X = "X"
    Y = "Y"
    Z = "Z"
    CX = "CX"
    CY = "CY"
    CZ = "CZ"

    @property
    def arity(self) -> int:
        return 2 if self in (GateKind.CX, GateKind.CY, GateKind.CZ) else 1

    @property
    def inverse(self) -> "GateKind":
        """Adjoint gate kind. Only the phase gate is not Hermitian."""
        if self == GateKind.S:
            return GateKind.S_DAG
        if self == GateKind.S_DAG:
            return GateKind.S
        return self


@dataclass(frozen=True)
class Gate:
    """A single gate application: ``kind`` acting on ``qubits`` (control first)."""
    kind: GateKind
    qubits: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.kind, GateKind):
            raise TypeError(f"Gate kind must be GateKind, got {type(self.kind).__name__}.")
        if len(self.qubits) != self.kind.arity:
            raise ValueError(f"{self.kind.value} acts on {self.kind.arity} qubit(s), got {self.qubits}.")
        if len(set(self.qubits)) != len(self.qubits):
            raise ValueError(f"{self.kind.value} needs distinct qubits, got {self.qubits}.")
        if any(q < 0 for q in self.qubits):
            raise ValueError(f"Negative qubit index in {self.qubits}.")

    def inverse(self) -> "Gate":
        return Gate(self.kind.inverse, self.qubits)

    def __str__(self) -> str:
        return f"{self.kind.value} {' '.join(str(q) for q in self.qubits)}"


def gate(name: str, *qubits: int) -> Gate:
    """Shorthand: ``gate("CX", 1, 4)``."""
    try:
        kind = GateKind(name.upper())
    except ValueError:
        raise ValueError(f"Unknown gate '{name}'. Supported: {[k.value for k in GateKind]}") from None
    return Gate(kind, tuple(qubits))


def invert_circuit(gates: Iterable[Gate]) -> Tuple[Gate, ...]:
    """Reverse the order and replace every gate by its inverse."""
    return tuple(g.inverse() for g in reversed(tuple(gates)))


def to_stim_circuit(gates: Iterable[Gate]) -> stim.Circuit:
    circuit = stim.Circuit()
    for g in gates:
        circuit.append(g.kind.value, list(g.qubits))
    return circuit


LOGICAL_QUBIT = 4

ENCODER_CIRCUIT: Tuple[Gate, ...] = (
    # pivot 0: h0 = Y Z I Z Y
    gate("H", 0),
    gate("S", 0),
    gate("CY", 0, 4),
    # pivot 1: h1 = I X Z Z X
    gate("H", 1),
    gate("CX", 1, 4),
    # pivot 2: h2 = Z Z X I X
    gate("H", 2),
    gate("CZ", 2, 0),
    gate("CZ", 2, 1),
    gate("CX", 2, 4),
    # pivot 3: h3 = Z I Z Y Y
    gate("H", 3),
    gate("S", 3),
    gate("CZ", 3, 0),
    gate("CZ", 3, 2),
    gate("CY", 3, 4),
)

DECODER_CIRCUIT: Tuple[Gate, ...] = invert_circuit(ENCODER_CIRCUIT)


__all__ = [
    "GateKind",
    "Gate",
    "gate",
    "invert_circuit",
    "to_stim_circuit",
    "LOGICAL_QUBIT",
    "ENCODER_CIRCUIT",
    "DECODER_CIRCUIT",
]
