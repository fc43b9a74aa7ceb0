"""
run_five_qubit_code.py
======================
Monte Carlo driver for the 5-qubit code: run many independent correction
rounds, each on its own register, and aggregate the outcomes.

Workflow
--------
1. Build a backend and a seeded randomness provider from the config
2. For each trial: encode, inject one random Pauli error, measure the
   syndrome, decode, correct, decode back, read out
3. Tally successes, syndromes and injected events
4. Optionally append the summary to an HDF5 file

Outputs
-------
• Logical fidelity with a Wilson 95% interval
• Syndrome histogram over 0..15 and per-event success counts
• HDF5 groups under ``CodeDistance/3/<0001>`` (the [[5,1,3]] code has d=3)

Usage example
-------------
    python -m FiveQubitCode.experiments.run_five_qubit_code \\
        --trials 2000 --backend stim --logical-state + --out results.h5
"""

from __future__ import annotations

import argparse
import json
import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import h5py
import numpy as np
from numpy.typing import NDArray
from tqdm import tqdm

from ..backends import make_backend
from ..config import DEFAULT_OUT_PATH, DEFAULT_SEED, DEFAULT_TRIALS, SimulationConfig
from ..core.code import all_error_events
from ..core.correction_round import LOGICAL_STATES, CorrectionRound, RoundResult
from ..core.randomness import SeededRandomness
from ..decoder.lookup_decoder import SYNDROME_TABLE
from ..utils.measurements import (
    compute_logical_fidelity,
    format_syndrome_table,
    syndrome_histogram,
    wilson_interval,
)

logger = logging.getLogger(__name__)

CODE_DISTANCE = 3


@dataclass(slots=True)
class TrialSummary:
    n_trials: int
    successes: int
    syndrome_counts: NDArray[np.int64]
    event_counts: Dict[str, int] = field(default_factory=dict)
    event_failures: Dict[str, int] = field(default_factory=dict)
    runtime: float = 0.0

    @property
    def logical_fidelity(self) -> float:
        return self.successes / self.n_trials if self.n_trials else 0.0

    @property
    def confidence_interval(self) -> Tuple[float, float]:
        return wilson_interval(self.successes, self.n_trials)

    def to_results(self) -> Dict[str, Any]:
        lo, hi = self.confidence_interval
        return {
            "n_trials": self.n_trials,
            "successes": self.successes,
            "logical_fidelity": self.logical_fidelity,
            "fidelity_ci_low": lo,
            "fidelity_ci_high": hi,
            "runtime": self.runtime,
        }


def now():
    # Time stamp
    return datetime.now().isoformat()


def summarize(results: Sequence[RoundResult], runtime: float = 0.0) -> TrialSummary:
    """Aggregate per-round results into a :class:`TrialSummary`."""
    events = Counter(str(r.injected) if r.injected is not None else "none" for r in results)
    failures = Counter(
        str(r.injected) if r.injected is not None else "none" for r in results if not r.success
    )
    return TrialSummary(
        n_trials=len(results),
        successes=sum(r.success for r in results),
        syndrome_counts=syndrome_histogram(r.syndrome.value for r in results),
        event_counts=dict(events),
        event_failures=dict(failures),
        runtime=runtime,
    )


def run_trials(config: SimulationConfig, progress: bool = True) -> Tuple[TrialSummary, List[RoundResult]]:
    """Run ``config.n_trials`` independent rounds."""
    backend = make_backend(config.backend, seed=config.seed)
    round_ = CorrectionRound(backend, SeededRandomness(config.seed))
    results: List[RoundResult] = []
    t0 = time.time()
    for _ in tqdm(range(config.n_trials), desc="Rounds", disable=not progress):
        results.append(round_.run(config.logical_state, inject=config.inject_errors))
    summary = summarize(results, runtime=time.time() - t0)
    lo, hi = summary.confidence_interval
    logger.info(
        "%d rounds on %s: fidelity=%.4f (95%% CI %.4f-%.4f) in %.2fs",
        summary.n_trials, config.backend, summary.logical_fidelity, lo, hi, summary.runtime,
    )
    return summary, results


def run_exhaustive(backend_name: str = "stim", logical_states: Sequence[str] = LOGICAL_STATES) -> List[RoundResult]:
    """One round for every (logical state, single-qubit error) pair, plus the clean round."""
    backend = make_backend(backend_name)
    round_ = CorrectionRound(backend)
    results: List[RoundResult] = []
    for state in logical_states:
        results.append(round_.run(state, inject=False))
        for event in all_error_events():
            results.append(round_.run(state, error=event))
    logger.info("Exhaustive sweep: %d rounds, fidelity=%.4f", len(results), compute_logical_fidelity(results))
    return results


def next_dataset_name(h5grp):
    """Get the next name for hdf5 saving"""
    existing = [n for n in h5grp.keys()]
    if not existing:
        return "0001"
    nums = [int(n) for n in existing if n.isdigit()]
    nxt = (max(nums) + 1) if nums else 1
    return f"{nxt:04d}"


def save_results(path: Union[str, Path], metadata: dict, summary: TrialSummary) -> str:
    """Append one dataset group under ``CodeDistance/3/``; returns its HDF5 path.

    Layout::

        CodeDistance/
            - 3/
                 - 0001/   scalars, syndrome_counts, event_* attrs
                 - 0002/
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with h5py.File(path, "a") as f:
        root = f.require_group("CodeDistance")
        grp_d = root.require_group(str(CODE_DISTANCE))
        name = next_dataset_name(grp_d)
        grp = grp_d.create_group(name)

        for k, v in summary.to_results().items():
            grp.create_dataset(k, data=float(v))
        grp.create_dataset("syndrome_counts", data=summary.syndrome_counts)

        for k, v in metadata.items():
            if isinstance(v, (str, int, float, bool, np.number)):
                grp.attrs[k] = v
            else:
                grp.attrs[k] = json.dumps(v)
        grp.attrs["event_counts"] = json.dumps(summary.event_counts)
        grp.attrs["event_failures"] = json.dumps(summary.event_failures)
        grp.attrs["saved_at"] = now()
        f.flush()
        return grp.name


# ── CLI ───────────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Monte Carlo simulation of single-error correction with the 5-qubit code.",
    )
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="number of rounds")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="random seed")
    parser.add_argument("--backend", default="stim", choices=["stim", "statevector"])
    parser.add_argument("--logical-state", default="0", choices=list(LOGICAL_STATES))
    parser.add_argument("--no-errors", action="store_true", help="skip error injection")
    parser.add_argument(
        "--out", type=Path, nargs="?", const=DEFAULT_OUT_PATH, default=None,
        help=f"append results to an HDF5 file (default path: {DEFAULT_OUT_PATH})",
    )
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--no-progress", action="store_true")
    parser.add_argument("--exhaustive", action="store_true", help="run every single-qubit error once per logical state")
    parser.add_argument("--plot", action="store_true", help="show the syndrome histogram")
    parser.add_argument("--show-table", action="store_true", help="print the syndrome decoding table first")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> TrialSummary:
    args = build_parser().parse_args(argv)
    config = SimulationConfig(
        n_trials=args.trials,
        seed=args.seed,
        backend=args.backend,
        logical_state=args.logical_state,
        inject_errors=not args.no_errors,
        out_path=args.out,
        log_level=args.log_level,
    )
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Per-round events are INFO on the component loggers; keep bulk runs quiet.
    core_logger = logging.getLogger("FiveQubitCode.core")
    previous_level = core_logger.level
    if config.n_trials > 1 and config.log_level == "INFO":
        core_logger.setLevel(logging.WARNING)
    try:
        return _run_cli(args, config)
    finally:
        core_logger.setLevel(previous_level)


def _run_cli(args: argparse.Namespace, config: SimulationConfig) -> TrialSummary:
    if args.show_table:
        print(format_syndrome_table(SYNDROME_TABLE))
    if args.exhaustive:
        results = run_exhaustive(config.backend)
        for r in results:
            print(r.summary())
        summary = summarize(results)
    else:
        summary, _ = run_trials(config, progress=not args.no_progress)
    lo, hi = summary.confidence_interval
    print(f"Rounds: {summary.n_trials}  successes: {summary.successes}")
    print(f"Logical fidelity: {summary.logical_fidelity:.4f}  (95% CI {lo:.4f}-{hi:.4f})")
    print("Syndrome counts:", summary.syndrome_counts.tolist())

    if config.out_path is not None:
        where = save_results(config.out_path, config.to_metadata(), summary)
        print(f"Saved results to {config.out_path}:{where}")
    if args.plot:
        from ..visualizer import plot_syndrome_counts
        plot_syndrome_counts(summary.syndrome_counts, show=True)
    return summary


if __name__ == "__main__":
    main()
