import logging

import numpy as np
import pytest

from FiveQubitCode import SYNDROME_TABLE, CodeConsistencyError, ErrorEvent, SyndromeDecoder, syndrome_of
from FiveQubitCode.core.code import all_error_events
from FiveQubitCode.decoder.lookup_decoder import MAX_SYNDROME


@pytest.fixture
def decoder():
    return SyndromeDecoder()


def test_every_single_error_is_decoded(decoder):
    for event in all_error_events():
        assert decoder.decode_syndrome(syndrome_of(event).value) == event


def test_table_is_bijection():
    events = [e for e in SYNDROME_TABLE.values() if e is not None]
    assert len(SYNDROME_TABLE) == MAX_SYNDROME + 1 == 16
    assert len(set(events)) == 15


def test_trivial_syndrome(decoder):
    assert decoder.decode_syndrome(0) is None


@pytest.mark.parametrize("value, expected", [(5, (1, "Z")), (1, (0, "X")), (7, (4, "Y")), (6, (3, "X"))])
def test_known_entries(decoder, value, expected):
    assert decoder.decode_syndrome(value) == ErrorEvent(*expected)


def test_numpy_integers_accepted(decoder):
    assert decoder.decode_syndrome(np.int64(5)) == ErrorEvent(1, "Z")


@pytest.mark.parametrize("value", [16, -1, 255, "5", 2.0, True])
def test_out_of_range_warns_and_returns_none(decoder, value, caplog):
    caplog.set_level(logging.WARNING)
    assert decoder.decode_syndrome(value) is None
    assert any("out of expected range" in rec.getMessage() for rec in caplog.records)
    assert all(rec.levelno == logging.WARNING for rec in caplog.records)


def test_in_range_does_not_warn(decoder, caplog):
    caplog.set_level(logging.WARNING)
    for v in range(16):
        decoder.decode_syndrome(v)
    assert not caplog.records


def test_tampered_table_rejected():
    table = dict(SYNDROME_TABLE)
    table[5], table[9] = table[9], table[5]
    with pytest.raises(CodeConsistencyError):
        SyndromeDecoder(table)


def test_incomplete_table_rejected():
    table = dict(SYNDROME_TABLE)
    del table[15]
    with pytest.raises(CodeConsistencyError):
        SyndromeDecoder(table)


def test_decoder_owns_a_copy():
    table = dict(SYNDROME_TABLE)
    decoder = SyndromeDecoder(table)
    table[5] = None
    assert decoder.decode_syndrome(5) == ErrorEvent(1, "Z")
