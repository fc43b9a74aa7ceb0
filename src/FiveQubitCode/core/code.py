"""code.py
=======
Static definition of the [[5,1,3]] perfect code: four stabilizer generators,
the logical operators, and the error model that the decoder is built for.

Conceptual Model
----------------
A generator outcome flips (becomes 1) iff the error anticommutes with that
generator, i.e. iff the error's Pauli and the generator's factor on the same
qubit are distinct and both non-identity. The syndrome integer packs the four
outcomes with generator 4 as the most significant bit:

    value = s4 * 8 + s3 * 4 + s2 * 2 + s1

Every single-qubit error (5 qubits x {X, Y, Z}) produces a distinct nonzero
syndrome, so syndromes 1..15 identify errors uniquely.

Public API
----------
STABILIZER_GENERATORS : tuple[PauliString, ...]   (g1, g2, g3, g4)
LOGICAL_X, LOGICAL_Z  : PauliString
ErrorEvent(qubit, pauli)
Syndrome(bits)        -> .value, .from_value(v)
syndrome_of(event)    -> Syndrome
derive_lookup_table() -> dict[int, ErrorEvent | None]
verify_code()         -> None, raises CodeConsistencyError
stabilizer_group()    -> frozenset[PauliString]
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, Optional, Tuple

from ..pauli import Pauli, PauliString

N_QUBITS = 5
N_STABILIZERS = 4
ERROR_TYPES: Tuple[Pauli, ...] = (Pauli.X, Pauli.Z, Pauli.Y)

STABILIZER_GENERATORS: Tuple[PauliString, ...] = (
    PauliString.from_str("ZXIXZ"),  # g1 -> syndrome bit 1 (LSB)
    PauliString.from_str("XIXZZ"),  # g2
    PauliString.from_str("IXZZX"),  # g3
    PauliString.from_str("XZZXI"),  # g4 -> syndrome bit 4 (MSB)
)

# Sign fixed by the encoder: X on qubit 4 maps to -XXXXX times g1 g2.
LOGICAL_X = PauliString.from_str("-XXXXX")
LOGICAL_Z = PauliString.from_str("ZZZZZ")


class CodeConsistencyError(ValueError):
    """Raised when the generators, the decoding table or the encoder disagree."""


@dataclass(frozen=True)
class ErrorEvent:
    """A single-qubit Pauli error: ``pauli`` acting on ``qubit``."""
    qubit: int
    pauli: Pauli

    def __post_init__(self) -> None:
        if not isinstance(self.pauli, Pauli):
            object.__setattr__(self, "pauli", Pauli.from_label(self.pauli))
        if isinstance(self.qubit, bool) or not isinstance(self.qubit, numbers.Integral):
            raise TypeError(f"Qubit index must be int, got {type(self.qubit).__name__}.")
        object.__setattr__(self, "qubit", int(self.qubit))
        if not 0 <= self.qubit < N_QUBITS:
            raise ValueError(f"Qubit index {self.qubit} out of range [0, {N_QUBITS - 1}].")
        if self.pauli == Pauli.I:
            raise ValueError("Identity is not an error.")

    def as_pauli_string(self) -> PauliString:
        return PauliString.single(N_QUBITS, self.qubit, self.pauli)

    def __lt__(self, other: "ErrorEvent") -> bool:
        return (self.qubit, self.pauli.value) < (other.qubit, other.pauli.value)

    def __str__(self) -> str:
        return f"{self.pauli}{self.qubit}"


@dataclass(frozen=True)
class Syndrome:
    """Four measured generator outcomes ``(s1, s2, s3, s4)``."""
    bits: Tuple[int, int, int, int]

    def __post_init__(self) -> None:
        if len(self.bits) != N_STABILIZERS:
            raise ValueError(f"Syndrome needs {N_STABILIZERS} bits, got {len(self.bits)}.")
        if any(b not in (0, 1) for b in self.bits):
            raise ValueError(f"Syndrome bits must be 0 or 1, got {self.bits}.")
        object.__setattr__(self, "bits", tuple(int(b) for b in self.bits))

    @property
    def value(self) -> int:
        return sum(bit << k for k, bit in enumerate(self.bits))

    @classmethod
    def from_value(cls, value: int) -> "Syndrome":
        if not 0 <= value < 2 ** N_STABILIZERS:
            raise ValueError(f"Syndrome value {value} out of range [0, {2 ** N_STABILIZERS - 1}].")
        return cls(tuple((value >> k) & 1 for k in range(N_STABILIZERS)))

    def msb_first(self) -> str:
        """Bit string ``s4 s3 s2 s1`` as printed in tables."""
        return "".join(str(b) for b in reversed(self.bits))

    def __str__(self) -> str:
        return f"{self.msb_first()} ({self.value})"


def all_error_events() -> Iterator[ErrorEvent]:
    """The 15 correctable events, ordered by qubit then X, Z, Y."""
    for q in range(N_QUBITS):
        for p in ERROR_TYPES:
            yield ErrorEvent(q, p)


def syndrome_of(event: Optional[ErrorEvent], generators: Tuple[PauliString, ...] = STABILIZER_GENERATORS) -> Syndrome:
    """Syndrome that ``event`` produces on a clean codeword (None -> all zeros)."""
    if event is None:
        return Syndrome((0,) * len(generators))
    err = event.as_pauli_string()
    return Syndrome(tuple(int(not g.commutes_with(err)) for g in generators))


def derive_lookup_table(generators: Tuple[PauliString, ...] = STABILIZER_GENERATORS) -> Dict[int, Optional[ErrorEvent]]:
    """Build ``{syndrome value: event}`` from the generators.

    Raises CodeConsistencyError if two events share a syndrome or an event is
    undetectable.
    """
    table: Dict[int, Optional[ErrorEvent]] = {0: None}
    for event in all_error_events():
        value = syndrome_of(event, generators).value
        if value == 0:
            raise CodeConsistencyError(f"Error {event} is undetectable by the generators.")
        if value in table:
            raise CodeConsistencyError(f"Errors {table[value]} and {event} share syndrome {value}.")
        table[value] = event
    return table


def verify_code(generators: Tuple[PauliString, ...] = STABILIZER_GENERATORS) -> None:
    """Check the algebraic invariants of the code definition."""
    if len(generators) != N_STABILIZERS or any(len(g) != N_QUBITS for g in generators):
        raise CodeConsistencyError(f"Expected {N_STABILIZERS} generators on {N_QUBITS} qubits.")
    for i, a in enumerate(generators):
        for b in generators[i + 1:]:
            if not a.commutes_with(b):
                raise CodeConsistencyError(f"Generators {a} and {b} anticommute.")
        for logical in (LOGICAL_X, LOGICAL_Z):
            if not a.commutes_with(logical):
                raise CodeConsistencyError(f"Generator {a} anticommutes with logical {logical}.")
    if LOGICAL_X.commutes_with(LOGICAL_Z):
        raise CodeConsistencyError("Logical X and Z must anticommute.")
    derive_lookup_table(generators)


def stabilizer_group(generators: Tuple[PauliString, ...] = STABILIZER_GENERATORS) -> FrozenSet[PauliString]:
    """All 2**k signed products of the (mutually commuting) generators, identity included."""
    group = {PauliString((Pauli.I,) * len(generators[0]))}
    for g in generators:
        group |= {s * g for s in group}
    return frozenset(group)


__all__ = [
    "N_QUBITS",
    "N_STABILIZERS",
    "ERROR_TYPES",
    "STABILIZER_GENERATORS",
    "LOGICAL_X",
    "LOGICAL_Z",
    "CodeConsistencyError",
    "ErrorEvent",
    "Syndrome",
    "all_error_events",
    "syndrome_of",
    "stabilizer_group",
    "derive_lookup_table",
    "verify_code",
]
