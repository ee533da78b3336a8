"""Score-to-tick-period curve."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import timedelta

# (minimum score, period in milliseconds), ascending by score.
DEFAULT_SPEED_CURVE: tuple[tuple[int, int], ...] = (
    (0, 2000),
    (2, 1000),
    (4, 750),
    (6, 500),
    (9, 300),
    (12, 200),
)


def validate_speed_curve(curve: Sequence[tuple[int, int]]) -> None:
    """Raise ``ValueError`` unless *curve* is a usable step function."""
    if not curve:
        raise ValueError("speed_curve must have at least 1 step.")
    if curve[0][0] != 0:
        raise ValueError("speed_curve must start at score 0.")
    previous = -1
    for min_score, period_ms in curve:
        if min_score <= previous:
            raise ValueError("speed_curve scores must be strictly ascending.")
        if period_ms <= 0:
            raise ValueError("speed_curve periods must be positive.")
        previous = min_score


def period_for_score(
    score: int,
    curve: Sequence[tuple[int, int]] = DEFAULT_SPEED_CURVE,
) -> timedelta:
    """Return the tick period for *score*: the last step it reaches."""
    period_ms = curve[0][1]
    for min_score, step_ms in curve:
        if score < min_score:
            break
        period_ms = step_ms
    return timedelta(milliseconds=period_ms)
