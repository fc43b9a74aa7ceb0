"""
measurements.py
===============
Utility functions for turning round results into summary numbers.

Responsibilities
----------------
• Logical fidelity (fraction of successful rounds) with a Wilson interval
• Syndrome histograms over the 16 possible values
• Human-readable syndrome tables

Core API
--------
def compute_logical_fidelity(results) -> float
def wilson_interval(k, n, z=1.96) -> (lo, hi)
def syndrome_histogram(values) -> np.ndarray[16]
def pretty_print_syndrome(syndrome) -> str
def format_syndrome_table(table) -> str

Used By
-------
`experiments/run_five_qubit_code.py`, `visualizer.py`.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from ..core.code import N_STABILIZERS, ErrorEvent, Syndrome
from ..core.correction_round import RoundResult

N_SYNDROMES = 2 ** N_STABILIZERS


def compute_logical_fidelity(results: Sequence[RoundResult]) -> float:
    if not results:
        return 0.0
    return sum(r.success for r in results) / len(results)


def wilson_interval(k: int, n: int, z: float = 1.96) -> Tuple[float, float]:
    """Wilson score interval for a binomial proportion.

    Parameters
    - k: number of successes
    - n: number of trials
    - z: z-score for desired confidence (1.96 ≈ 95%)
    """
    if n <= 0:
        return (0.0, 0.0)
    if not 0 <= k <= n:
        raise ValueError(f"Successes k={k} must lie in [0, n={n}].")
    p = k / n
    denom = 1.0 + (z ** 2) / n
    center = (p + (z ** 2) / (2 * n)) / denom
    half = (z * np.sqrt((p * (1 - p) / n) + (z ** 2) / (4 * n ** 2))) / denom
    lo = max(0.0, float(center - half))
    hi = min(1.0, float(center + half))
    return (lo, hi)


def syndrome_histogram(values: Iterable[int]) -> NDArray[np.int64]:
    """Counts of each syndrome value 0..15."""
    arr = np.fromiter(values, dtype=np.int64)
    if arr.size and (arr.min() < 0 or arr.max() >= N_SYNDROMES):
        raise ValueError(f"Syndrome values must lie in [0, {N_SYNDROMES - 1}].")
    return np.bincount(arr, minlength=N_SYNDROMES)


def pretty_print_syndrome(syndrome: Syndrome) -> str:
    """E.g. ``s4 s3 s2 s1 = 0 1 0 1 -> 5``."""
    bits = " ".join(str(b) for b in reversed(syndrome.bits))
    return f"s4 s3 s2 s1 = {bits} -> {syndrome.value}"


def format_syndrome_table(table: Mapping[int, Optional[ErrorEvent]]) -> str:
    lines = ["value  bits  error"]
    for value in sorted(table):
        event = table[value]
        bits = Syndrome.from_value(value).msb_first()
        lines.append(f"{value:>5}  {bits}  {event if event is not None else '-'}")
    return "\n".join(lines)


__all__ = [
    "N_SYNDROMES",
    "compute_logical_fidelity",
    "wilson_interval",
    "syndrome_histogram",
    "pretty_print_syndrome",
    "format_syndrome_table",
]
