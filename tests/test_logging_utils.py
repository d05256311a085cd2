import logging

import numpy as np
import pytest

from trisolve import SlotRing, classify, solve
from trisolve.logging_utils import _safe_repr, debug_log_call


def test_classify_is_traced_at_debug_level(caplog):
    ring = SlotRing.from_named(a=3.0, b=4.0, c=5.0)

    with caplog.at_level(logging.DEBUG, logger='trisolve.classifier'):
        classify(ring)

    assert 'Entering classify' in caplog.text
    assert 'Exiting classify' in caplog.text


def test_solve_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger='trisolve.solver'):
        solve(a=7, alpha=30, b=10)

    assert 'Solving SSA@alpha from 3 parameter(s)' in caplog.text
    assert 'Found 2 solution(s)' in caplog.text


def test_traced_exception_is_logged_and_reraised(caplog):
    logger = logging.getLogger('trisolve.tests')

    @debug_log_call(logger)
    def fail():
        raise ValueError('boom')

    with caplog.at_level(logging.DEBUG, logger='trisolve.tests'):
        with pytest.raises(ValueError):
            fail()

    assert 'Leaving' in caplog.text and 'ValueError: boom' in caplog.text


def test_safe_repr_summarises_arrays_and_floats():
    assert _safe_repr(np.array([1.0, 2.0])) == "ndarray(shape=(2,), dtype=float64) values=['1', '2']"
    assert _safe_repr(float('nan')) == 'nan'
    assert _safe_repr(list(range(10))).endswith('...]')
