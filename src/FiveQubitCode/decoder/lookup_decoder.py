"""
lookup_decoder.py
=================
Syndrome decoder for the 5-qubit code.

Responsibilities
----------------
• Map a 4-bit syndrome value to the single-qubit error that produced it.
• Cross-check the hand-written table against the stabilizer generators on
  construction, so the two can never drift apart silently.
• Report (but never raise on) syndrome values outside [0, 15].

Decoder Algorithm
-----------------
Pure lookup. Syndrome 0 means no error; each of 1..15 names exactly one
(qubit, Pauli) pair. Bit order: s4 s3 s2 s1 with s4 most significant.

Core API
--------
SYNDROME_TABLE : dict[int, ErrorEvent | None]
class SyndromeDecoder:
    def decode_syndrome(value: int) -> ErrorEvent | None
    def in_range(value) -> bool

Used By
-------
`core/correction_round.py`.
"""

from __future__ import annotations

import logging
import numbers
from typing import Dict, Mapping, Optional, Tuple

from ..core.code import (
    N_STABILIZERS,
    STABILIZER_GENERATORS,
    CodeConsistencyError,
    ErrorEvent,
    derive_lookup_table,
    verify_code,
)
from ..pauli import Pauli, PauliString

logger = logging.getLogger(__name__)

SYNDROME_TABLE: Dict[int, Optional[ErrorEvent]] = {
    0: None,
    1: ErrorEvent(0, Pauli.X),
    10: ErrorEvent(0, Pauli.Z),
    11: ErrorEvent(0, Pauli.Y),
    8: ErrorEvent(1, Pauli.X),
    5: ErrorEvent(1, Pauli.Z),
    13: ErrorEvent(1, Pauli.Y),
    12: ErrorEvent(2, Pauli.X),
    2: ErrorEvent(2, Pauli.Z),
    14: ErrorEvent(2, Pauli.Y),
    6: ErrorEvent(3, Pauli.X),
    9: ErrorEvent(3, Pauli.Z),
    15: ErrorEvent(3, Pauli.Y),
    3: ErrorEvent(4, Pauli.X),
    4: ErrorEvent(4, Pauli.Z),
    7: ErrorEvent(4, Pauli.Y),
}

MAX_SYNDROME = 2 ** N_STABILIZERS - 1


def check_table(
    table: Mapping[int, Optional[ErrorEvent]],
    generators: Tuple[PauliString, ...] = STABILIZER_GENERATORS,
) -> None:
    """Raise CodeConsistencyError unless ``table`` equals the table derived from ``generators``."""
    verify_code(generators)
    derived = derive_lookup_table(generators)
    if set(table) != set(derived):
        raise CodeConsistencyError(
            f"Table keys {sorted(table)} do not cover syndromes 0..{MAX_SYNDROME}."
        )
    mismatches = [v for v in sorted(derived) if table[v] != derived[v]]
    if mismatches:
        details = ", ".join(f"{v}: table={table[v]} generators={derived[v]}" for v in mismatches)
        raise CodeConsistencyError(f"Decoding table disagrees with generators at {details}.")


class SyndromeDecoder:
    """Static lookup decoder, validated against the generators at construction."""

    def __init__(
        self,
        table: Optional[Mapping[int, Optional[ErrorEvent]]] = None,
        generators: Tuple[PauliString, ...] = STABILIZER_GENERATORS,
    ) -> None:
        self.table: Dict[int, Optional[ErrorEvent]] = dict(SYNDROME_TABLE if table is None else table)
        check_table(self.table, generators)

    @staticmethod
    def in_range(value: object) -> bool:
        return isinstance(value, numbers.Integral) and not isinstance(value, bool) and 0 <= value <= MAX_SYNDROME

    def decode_syndrome(self, value: int) -> Optional[ErrorEvent]:
        """Return the error for ``value``, or None for 0 and for out-of-range input."""
        if not self.in_range(value):
            logger.warning("Syndrome value %r out of expected range [0, %d]", value, MAX_SYNDROME)
            return None
        return self.table[int(value)]

    def __repr__(self) -> str:
        return f"SyndromeDecoder(entries={len(self.table)})"


__all__ = ["SYNDROME_TABLE", "MAX_SYNDROME", "SyndromeDecoder", "check_table"]
