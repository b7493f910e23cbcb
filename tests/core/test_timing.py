"""
Tests for Timer and timed().
"""

import pytest

from pylinear.core.compute.timing import Timer, timed
from pylinear.core.compute.tolerances import FLOAT_FP64, INT_EXACT, select_tolerance
from pylinear.core.scalar import FLOAT_DTYPE, INT_DTYPE


class TestTimer:

    def test_result_has_total_and_sections(self):
        timer = Timer()
        timer.start()
        with timer.section('compute'):
            sum(range(100))
        timer.stop()
        result = timer.result()
        assert result['total_seconds'] >= 0.0
        assert 'compute' in result

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('step'):
            pass
        first = timer._sections['step']
        with timer.section('step'):
            pass
        timer.stop()
        assert timer.result()['step'] >= first

    def test_section_recorded_when_body_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ZeroDivisionError):
            with timer.section('boom'):
                1 / 0
        timer.stop()
        assert 'boom' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context_manager(self):
        with timed() as timer:
            pass
        assert timer.result()['total_seconds'] >= 0.0


class TestSelectTolerance:

    def test_int_is_exact(self):
        assert select_tolerance(INT_DTYPE) is INT_EXACT
        assert INT_EXACT.rtol == 0.0 and INT_EXACT.atol == 0.0

    def test_float_tier(self):
        assert select_tolerance(FLOAT_DTYPE) is FLOAT_FP64
