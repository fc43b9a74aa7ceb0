import logging

import numpy as np

from FiveQubitCode import Corrector, Encoder, ErrorEvent, SyndromeExtractor
from FiveQubitCode.core.error_model import ErrorChannel

from conftest import assert_same_state


def test_none_is_a_noop(backend, caplog):
    caplog.set_level(logging.INFO)
    with backend.allocated(5) as reg:
        Encoder(backend).encode(reg)
        before = backend.state_vector(reg)
        assert Corrector(backend).apply_correction(reg, None) is reg
        np.testing.assert_allclose(before, backend.state_vector(reg), atol=1e-6)
    assert "Corrected" not in caplog.text


def test_correction_undoes_the_error(backend, caplog):
    caplog.set_level(logging.INFO)
    event = ErrorEvent(1, "Z")
    with backend.allocated(5) as reg:
        Encoder(backend).encode(reg)
        encoded = backend.state_vector(reg)
        ErrorChannel(backend).apply_error(reg, event)
        assert abs(np.vdot(encoded, backend.state_vector(reg))) < 1e-5
        Corrector(backend).apply_correction(reg, event)
        assert_same_state(encoded, backend.state_vector(reg))
    assert "Corrected Z error on qubit 1" in caplog.text


def test_syndrome_is_logged(backend, caplog):
    caplog.set_level(logging.INFO)
    with backend.allocated(5) as reg:
        Encoder(backend).encode(reg)
        ErrorChannel(backend).apply_error(reg, ErrorEvent(1, "Z"))
        syndrome = SyndromeExtractor(backend).measure_syndrome(reg)
    assert syndrome.value == 5
    assert "Syndrome s1=1 s2=0 s3=1 s4=0: 5" in caplog.text
