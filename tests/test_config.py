from pathlib import Path

import pytest

from FiveQubitCode.config import DEFAULT_TRIALS, SimulationConfig


def test_defaults():
    config = SimulationConfig()
    assert config.n_trials == DEFAULT_TRIALS
    assert config.backend == "stim"
    assert config.out_path is None


def test_normalisation(tmp_path):
    config = SimulationConfig(backend="StateVector", logical_state="plus", log_level="debug", out_path=str(tmp_path / "r.h5"))
    assert config.backend == "statevector"
    assert config.logical_state == "+"
    assert config.log_level == "DEBUG"
    assert isinstance(config.out_path, Path)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n_trials": 0},
        {"n_trials": True},
        {"seed": -1},
        {"seed": True},
        {"backend": "qiskit"},
        {"logical_state": "2"},
        {"log_level": "LOUD"},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        SimulationConfig(**kwargs)


def test_metadata_is_flat():
    meta = SimulationConfig(seed=None).to_metadata()
    assert meta["seed"] == -1
    assert meta["out_path"] == ""
    assert all(isinstance(v, (str, int, bool)) for v in meta.values())
