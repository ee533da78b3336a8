"""Tests for the score-to-period curve."""

from datetime import timedelta

import pytest

from snake_engine.speed import (
    DEFAULT_SPEED_CURVE,
    period_for_score,
    validate_speed_curve,
)

# (scores, expected period in ms)
_TABLE = [
    ((0, 1), 2000),
    ((2, 3), 1000),
    ((4, 5), 750),
    ((6, 7, 8), 500),
    ((9, 10, 11), 300),
    ((12, 13, 50, 1000), 200),
]


class TestPeriodForScore:
    def test_default_table(self):
        for scores, expected_ms in _TABLE:
            for score in scores:
                assert period_for_score(score) == timedelta(
                    milliseconds=expected_ms,
                ), score

    def test_custom_curve(self):
        curve = ((0, 100), (5, 50))
        assert period_for_score(4, curve) == timedelta(milliseconds=100)
        assert period_for_score(5, curve) == timedelta(milliseconds=50)


class TestValidateSpeedCurve:
    def test_default_is_valid(self):
        validate_speed_curve(DEFAULT_SPEED_CURVE)

    def test_empty(self):
        with pytest.raises(ValueError, match="at least 1"):
            validate_speed_curve(())

    def test_must_start_at_zero(self):
        with pytest.raises(ValueError, match="start at score 0"):
            validate_speed_curve(((1, 100),))

    def test_must_ascend(self):
        with pytest.raises(ValueError, match="ascending"):
            validate_speed_curve(((0, 100), (3, 50), (3, 20)))

    def test_positive_periods(self):
        with pytest.raises(ValueError, match="positive"):
            validate_speed_curve(((0, 0),))
