"""randomness.py
=============
Injectable integer sources for the error channel.

``RandomnessProvider`` is the only capability the channel needs:
``draw_int(low, high)`` with an inclusive range. ``SeededRandomness`` wraps
:class:`random.Random` for Monte Carlo runs; ``ScriptedRandomness`` replays
a fixed list of draws so a round can be reproduced exactly in tests.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class RandomnessProvider(Protocol):
    def draw_int(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]`` (both inclusive)."""
        ...


class SeededRandomness:
    """Pseudo-random draws from a private :class:`random.Random` instance."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def draw_int(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}].")
        return self.rng.randint(low, high)


class ScriptedRandomness:
    """Replays ``values`` in order; each must fall inside the requested range."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._pos

    def draw_int(self, low: int, high: int) -> int:
        if self._pos >= len(self._values):
            raise ValueError(f"Scripted randomness exhausted after {len(self._values)} draws.")
        value = self._values[self._pos]
        if not low <= value <= high:
            raise ValueError(f"Scripted value {value} outside requested range [{low}, {high}].")
        self._pos += 1
        return value


__all__ = ["RandomnessProvider", "SeededRandomness", "ScriptedRandomness"]
