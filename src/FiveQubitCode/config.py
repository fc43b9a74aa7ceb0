"""config.py
=========
Run configuration for Monte Carlo experiments.

All knobs live on one validated dataclass; invalid values raise ValueError
on construction.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .backends import BACKENDS
from .core.correction_round import parse_logical_state

DEFAULT_TRIALS = 1000
DEFAULT_SEED = 42
DEFAULT_OUT_PATH = Path("./simulation_data") / "five_qubit_code_results.h5"


@dataclass(slots=True)
class SimulationConfig:
    n_trials: int = DEFAULT_TRIALS
    seed: Optional[int] = DEFAULT_SEED
    backend: str = "stim"
    logical_state: str = "0"
    inject_errors: bool = True
    out_path: Optional[Union[str, Path]] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if isinstance(self.n_trials, bool) or not isinstance(self.n_trials, int) or self.n_trials < 1:
            raise ValueError(f"n_trials must be a positive int, got {self.n_trials!r}.")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0):
            raise ValueError(f"seed must be a non-negative int or None, got {self.seed!r}.")
        self.backend = self.backend.lower()
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend '{self.backend}'. Available: {sorted(BACKENDS)}")
        self.logical_state = parse_logical_state(self.logical_state)[0]
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{self.log_level}'.")
        self.log_level = level
        if self.out_path is not None:
            self.out_path = Path(self.out_path)

    def to_metadata(self) -> Dict[str, Any]:
        """Flat dict suitable for HDF5 attributes."""
        meta = asdict(self)
        meta["seed"] = -1 if self.seed is None else self.seed
        meta["out_path"] = "" if self.out_path is None else str(self.out_path)
        return meta


__all__ = ["SimulationConfig", "DEFAULT_TRIALS", "DEFAULT_SEED", "DEFAULT_OUT_PATH"]
