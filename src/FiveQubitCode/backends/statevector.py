"""
statevector.py
==============
Dense state-vector backend written with numpy.

The register state is a complex tensor of shape ``(2,) * n`` where axis ``q``
is qubit ``q``. Single-qubit gates contract a 2x2 matrix into one axis;
controlled gates act on the control=1 slice only. Pauli-product
measurements project with ``(I +/- P) / 2`` and renormalise, so the outcome
is sampled with the Born probability and the post-measurement state is the
exact projection. Intended for 5-qubit debugging, not for scale.
"""

from __future__ import annotations

from typing import Dict, Optional

import numpy as np
from numpy.typing import NDArray

from ..gates.circuit import Gate, GateKind
from ..pauli import Pauli, PauliString
from .base import QuantumBackend, QubitRegister

_SQRT1_2 = 1 / np.sqrt(2)

PAULI_MATRICES: Dict[Pauli, NDArray[np.complex128]] = {
    Pauli.I: np.eye(2, dtype=np.complex128),
    Pauli.X: np.array([[0, 1], [1, 0]], dtype=np.complex128),
    Pauli.Y: np.array([[0, -1j], [1j, 0]], dtype=np.complex128),
    Pauli.Z: np.array([[1, 0], [0, -1]], dtype=np.complex128),
}

SINGLE_QUBIT_MATRICES: Dict[GateKind, NDArray[np.complex128]] = {
    GateKind.H: np.array([[1, 1], [1, -1]], dtype=np.complex128) * _SQRT1_2,
    GateKind.S: np.array([[1, 0], [0, 1j]], dtype=np.complex128),
    GateKind.S_DAG: np.array([[1, 0], [0, -1j]], dtype=np.complex128),
    GateKind.X: PAULI_MATRICES[Pauli.X],
    GateKind.Y: PAULI_MATRICES[Pauli.Y],
    GateKind.Z: PAULI_MATRICES[Pauli.Z],
}

# Matrix applied to the target when the control is |1>.
CONTROLLED_TARGETS: Dict[GateKind, NDArray[np.complex128]] = {
    GateKind.CX: PAULI_MATRICES[Pauli.X],
    GateKind.CY: PAULI_MATRICES[Pauli.Y],
    GateKind.CZ: PAULI_MATRICES[Pauli.Z],
}

_PROB_TOL = 1e-9


def _apply_1q(psi: NDArray[np.complex128], matrix: NDArray[np.complex128], axis: int) -> NDArray[np.complex128]:
    out = np.tensordot(matrix, psi, axes=([1], [axis]))
    return np.moveaxis(out, 0, axis)


def apply_pauli_string(psi: NDArray[np.complex128], observable: PauliString) -> NDArray[np.complex128]:
    """Return ``P |psi>`` including the string's sign."""
    out = psi
    for q, op in enumerate(observable.ops):
        if op != Pauli.I:
            out = _apply_1q(out, PAULI_MATRICES[op], q)
    return out * observable.sign


class StateVectorBackend(QuantumBackend):
    """Backend storing the full ``2**n`` amplitude tensor per register."""

    name = "statevector"

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def _new_state(self, n: int) -> NDArray[np.complex128]:
        psi = np.zeros((2,) * n, dtype=np.complex128)
        psi[(0,) * n] = 1.0
        return psi

    def _apply(self, register: QubitRegister, gate: Gate) -> None:
        psi = register.state
        if gate.kind in SINGLE_QUBIT_MATRICES:
            register.state = _apply_1q(psi, SINGLE_QUBIT_MATRICES[gate.kind], gate.qubits[0])
            return
        control, target = gate.qubits
        idx = [slice(None)] * register.size
        idx[control] = 1
        sub = psi[tuple(idx)]
        # Slicing removes the control axis, shifting later axes down by one.
        t_axis = target if target < control else target - 1
        psi = psi.copy()
        psi[tuple(idx)] = _apply_1q(sub, CONTROLLED_TARGETS[gate.kind], t_axis)
        register.state = psi

    def _measure(self, register: QubitRegister, observable: PauliString) -> int:
        psi = register.state
        p_psi = apply_pauli_string(psi, observable)
        expectation = float(np.real(np.vdot(psi, p_psi)))
        prob_minus = min(max((1.0 - expectation) / 2.0, 0.0), 1.0)
        if prob_minus < _PROB_TOL:
            outcome = 0
        elif prob_minus > 1.0 - _PROB_TOL:
            outcome = 1
        else:
            outcome = int(self.rng.random() < prob_minus)
        sign = -1.0 if outcome else 1.0
        projected = (psi + sign * p_psi) / 2.0
        register.state = projected / np.linalg.norm(projected)
        return outcome

    def _reset(self, register: QubitRegister) -> None:
        register.state = self._new_state(register.size)

    def _state_vector(self, register: QubitRegister) -> NDArray[np.complex128]:
        # Reversing the axes puts qubit 0 on the fastest-varying index bit.
        return np.transpose(register.state).reshape(-1).copy()

    def __repr__(self) -> str:
        return f"StateVectorBackend(seed={self.seed})"


__all__ = ["StateVectorBackend", "PAULI_MATRICES", "apply_pauli_string"]
