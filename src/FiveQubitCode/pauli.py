"""Pauli operators and Pauli strings with phase-aware multiplication.

Single-qubit Pauli multiplication rules:
    X * Y =  i Z
    Y * X = -i Z
    Y * Z =  i X
    Z * Y = -i X
    Z * X =  i Y
    X * Z = -i Y

All operators square to identity: P * P = I (phase +1).
Identity acts neutrally: I * P = P * I = P.

``PauliWithPhase`` carries an overall complex phase in {+1, -1, +1j, -1j}
alongside the resulting Pauli enum element. ``PauliString`` is the n-qubit
tensor product used for stabilizer generators and logical operators; its sign
is always real (+1 or -1) because the operators we build are Hermitian.

Examples:
    >>> from FiveQubitCode import Pauli, PauliString
    >>> print(Pauli.X * Pauli.Y)  # iZ
    >>> g = PauliString.from_str("XZZXI")
    >>> g.commutes_with(PauliString.from_str("IXZZX"))  # True
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union

import stim

_PHASE_TYPE = complex


@dataclass(frozen=True)
class PauliWithPhase:
    """Container for a Pauli operator with an accumulated phase.

    Attributes:
        phase: complex in {1, -1, 1j, -1j}
        op:    Pauli enum element
    """
    phase: _PHASE_TYPE
    op: "Pauli"

    def __mul__(self, other: Union["Pauli", "PauliWithPhase"]) -> "PauliWithPhase":
        if isinstance(other, Pauli):
            phase_delta, op_res = self.op._mul_no_wrap(other)
            return PauliWithPhase(self.phase * phase_delta, op_res)
        if isinstance(other, PauliWithPhase):
            phase_delta, op_res = self.op._mul_no_wrap(other.op)
            return PauliWithPhase(self.phase * other.phase * phase_delta, op_res)
        return NotImplemented

    @property
    def phase_str(self) -> str:
        if self.phase == 1:
            return ""
        if self.phase == -1:
            return "-"
        if self.phase == 1j:
            return "i"
        if self.phase == -1j:
            return "-i"
        return f"({self.phase})"

    def __str__(self) -> str:
        return f"{self.phase_str}{self.op}"

    def __repr__(self) -> str:
        return f"PauliWithPhase(phase={self.phase}, op={self.op})"


class Pauli(Enum):
    I = 0
    Z = 1
    X = 2
    Y = 3

    # --- Public API -----------------------------------------------------
    @classmethod
    def from_label(cls, label: Union[str, "Pauli"]) -> "Pauli":
        """Parse 'I', 'X', 'Y', 'Z' (case-insensitive); '_' is accepted as identity."""
        if isinstance(label, Pauli):
            return label
        if not isinstance(label, str):
            raise TypeError(f"Expected str or Pauli, got {type(label).__name__}.")
        key = label.strip().upper()
        if key == "_":
            return cls.I
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Invalid Pauli label '{label}'. Expected one of I, X, Y, Z.") from None

    def __mul__(self, other: Union["Pauli", PauliWithPhase]) -> PauliWithPhase:
        """Phase-aware Pauli multiplication."""
        if isinstance(other, Pauli):
            phase, op = self._mul_no_wrap(other)
            return PauliWithPhase(phase, op)
        if isinstance(other, PauliWithPhase):
            phase_delta, op_res = self._mul_no_wrap(other.op)
            return PauliWithPhase(other.phase * phase_delta, op_res)
        return NotImplemented

    def commutes_with(self, other: "Pauli") -> bool:
        """Identity commutes with everything; distinct non-identity Paulis anticommute."""
        if self == Pauli.I or other == Pauli.I:
            return True
        return self == other

    # --- Internal helpers -----------------------------------------------
    def _mul_no_wrap(self, other: "Pauli") -> Tuple[_PHASE_TYPE, "Pauli"]:
        """Internal raw multiplication returning (phase, Pauli)."""
        if self == other:
            return 1, Pauli.I
        if self == Pauli.I:
            return 1, other
        if other == Pauli.I:
            return 1, self
        # Explicit table for the six distinct ordered pairs that produce ±i * third.
        table: dict[tuple[Pauli, Pauli], tuple[_PHASE_TYPE, Pauli]] = {
            (Pauli.X, Pauli.Y): (1j, Pauli.Z),
            (Pauli.Y, Pauli.X): (-1j, Pauli.Z),
            (Pauli.Y, Pauli.Z): (1j, Pauli.X),
            (Pauli.Z, Pauli.Y): (-1j, Pauli.X),
            (Pauli.Z, Pauli.X): (1j, Pauli.Y),
            (Pauli.X, Pauli.Z): (-1j, Pauli.Y),
        }
        try:
            return table[(self, other)]
        except KeyError:
            raise ValueError(f"Unhandled Pauli multiplication: {self} * {other}")

    # --- Representation --------------------------------------------------
    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name

    @property
    def color(self) -> str:
        """Plot colour per Pauli operator."""
        match self:
            case Pauli.I:
                return "#FFFFFF"
            case Pauli.Z:
                return "#D15567"
            case Pauli.X:
                return "#6188b2"
            case Pauli.Y:
                return "#F28EBF"


@dataclass(frozen=True)
class PauliString:
    """Signed tensor product of single-qubit Paulis, one per qubit position.

    Attributes:
        ops:  tuple of Pauli, index i acts on qubit i
        sign: +1 or -1
    """
    ops: Tuple[Pauli, ...]
    sign: int = 1

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f"PauliString sign must be +1 or -1, got {self.sign}.")
        if not all(isinstance(op, Pauli) for op in self.ops):
            raise TypeError("PauliString ops must all be Pauli members.")

    @classmethod
    def from_str(cls, text: str) -> "PauliString":
        """Parse strings such as ``"XZZXI"``, ``"+ZXIXZ"`` or ``"-X_X__"``."""
        body = text.strip()
        sign = 1
        if body[:1] in ("+", "-"):
            sign = -1 if body[0] == "-" else 1
            body = body[1:]
        if not body:
            raise ValueError("PauliString text must contain at least one operator.")
        return cls(tuple(Pauli.from_label(ch) for ch in body), sign)

    @classmethod
    def single(cls, n: int, qubit: int, pauli: Union[str, Pauli]) -> "PauliString":
        """Weight-one string acting with ``pauli`` on ``qubit`` of an n-qubit register."""
        if not 0 <= qubit < n:
            raise ValueError(f"Qubit index {qubit} out of range for {n} qubits.")
        ops = [Pauli.I] * n
        ops[qubit] = Pauli.from_label(pauli)
        return cls(tuple(ops))

    @classmethod
    def product(cls, strings: Iterable["PauliString"]) -> "PauliString":
        """Left-to-right product of several strings."""
        it = iter(strings)
        acc = next(it)
        for s in it:
            acc = acc * s
        return acc

    def __len__(self) -> int:
        return len(self.ops)

    def __getitem__(self, qubit: int) -> Pauli:
        return self.ops[qubit]

    @property
    def weight(self) -> int:
        return sum(op != Pauli.I for op in self.ops)

    def support(self) -> Tuple[int, ...]:
        return tuple(i for i, op in enumerate(self.ops) if op != Pauli.I)

    def commutes_with(self, other: "PauliString") -> bool:
        """Multi-qubit commutation: even number of anticommuting positions."""
        self._check_length(other)
        anti = sum(not a.commutes_with(b) for a, b in zip(self.ops, other.ops))
        return anti % 2 == 0

    def __mul__(self, other: "PauliString") -> "PauliString":
        if not isinstance(other, PauliString):
            return NotImplemented
        self._check_length(other)
        phase: complex = self.sign * other.sign
        ops = []
        for a, b in zip(self.ops, other.ops):
            prod = a * b
            phase *= prod.phase
            ops.append(prod.op)
        if phase not in (1, -1):
            # Product of anticommuting Hermitian strings is anti-Hermitian.
            raise ValueError(f"Product {self} * {other} is not Hermitian (phase {phase}).")
        return PauliString(tuple(ops), int(phase.real))

    def to_stim(self) -> stim.PauliString:
        text = "".join("_" if op == Pauli.I else op.name for op in self.ops)
        return stim.PauliString(("-" if self.sign < 0 else "+") + text)

    def _check_length(self, other: "PauliString") -> None:
        if len(self) != len(other):
            raise ValueError(f"Length mismatch between {self} and {other}.")

    def __str__(self) -> str:
        return ("-" if self.sign < 0 else "+") + "".join(op.name for op in self.ops)

    def __repr__(self) -> str:
        return f"PauliString('{self}')"


__all__ = ["Pauli", "PauliWithPhase", "PauliString"]
