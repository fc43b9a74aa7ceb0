import os

os.environ.setdefault("MPLBACKEND", "Agg")

import numpy as np
import pytest

from FiveQubitCode import StateVectorBackend, StimBackend


@pytest.fixture(params=["stim", "statevector"])
def backend(request):
    if request.param == "stim":
        return StimBackend(seed=7)
    return StateVectorBackend(seed=7)


def assert_same_state(a, b, atol=1e-5):
    """Equal up to a global phase."""
    a = np.asarray(a, dtype=np.complex128)
    b = np.asarray(b, dtype=np.complex128)
    assert a.shape == b.shape
    assert abs(abs(np.vdot(a, b)) - 1.0) < atol
