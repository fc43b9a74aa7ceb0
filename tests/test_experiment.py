import json
import logging

import h5py
import pytest

from FiveQubitCode.config import SimulationConfig
from FiveQubitCode.experiments.run_five_qubit_code import (
    build_parser,
    main,
    run_exhaustive,
    run_trials,
    save_results,
    summarize,
)


@pytest.mark.parametrize("backend", ["stim", "statevector"])
def test_run_trials(backend):
    summary, results = run_trials(SimulationConfig(n_trials=40, seed=1, backend=backend), progress=False)
    assert len(results) == 40
    assert summary.successes == 40
    assert summary.logical_fidelity == 1.0
    assert summary.syndrome_counts.sum() == 40
    assert summary.syndrome_counts[0] == 0
    assert sum(summary.event_counts.values()) == 40
    assert summary.event_failures == {}


def test_run_trials_is_reproducible():
    config = SimulationConfig(n_trials=20, seed=5)
    a, _ = run_trials(config, progress=False)
    b, _ = run_trials(config, progress=False)
    assert a.syndrome_counts.tolist() == b.syndrome_counts.tolist()


def test_clean_runs():
    summary, _ = run_trials(SimulationConfig(n_trials=5, inject_errors=False), progress=False)
    assert summary.syndrome_counts[0] == 5
    assert summary.event_counts == {"none": 5}


def test_run_exhaustive():
    results = run_exhaustive("statevector")
    assert len(results) == 4 * 16
    assert all(r.success for r in results)
    summary = summarize(results)
    assert summary.syndrome_counts.tolist() == [4] * 16


def test_save_results(tmp_path):
    path = tmp_path / "out" / "results.h5"
    config = SimulationConfig(n_trials=10, seed=3)
    summary, _ = run_trials(config, progress=False)
    first = save_results(path, config.to_metadata(), summary)
    second = save_results(path, config.to_metadata(), summary)
    assert first == "/CodeDistance/3/0001"
    assert second == "/CodeDistance/3/0002"
    with h5py.File(path, "r") as f:
        grp = f[first]
        assert grp["logical_fidelity"][()] == 1.0
        assert grp["n_trials"][()] == 10
        assert list(grp["syndrome_counts"][()]) == summary.syndrome_counts.tolist()
        assert grp.attrs["backend"] == "stim"
        assert json.loads(grp.attrs["event_counts"]) == summary.event_counts


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.backend == "stim" and args.out is None and not args.exhaustive


def test_main(tmp_path, capsys):
    out = tmp_path / "cli.h5"
    summary = main(["--trials", "5", "--no-progress", "--backend", "statevector", "--out", str(out), "--show-table"])
    assert summary.n_trials == 5 and summary.successes == 5
    assert out.exists()
    printed = capsys.readouterr().out
    assert "Logical fidelity: 1.0000" in printed
    assert "    5  0101  Z1" in printed


def test_main_exhaustive(capsys):
    summary = main(["--exhaustive", "--logical-state", "+", "--log-level", "WARNING"])
    assert summary.n_trials == 64
    assert "success=True" in capsys.readouterr().out


def test_main_restores_core_log_level():
    core = logging.getLogger("FiveQubitCode.core")
    before = core.level
    main(["--trials", "3", "--no-progress"])
    assert core.level == before
