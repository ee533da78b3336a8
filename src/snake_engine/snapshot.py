"""Immutable per-tick game record."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import timedelta

from snake_engine.snake import Point


class GameOverReason(str, enum.Enum):
    """Collision facts a caller may treat as the end of a session."""

    WALL = "wall"
    EAT_ITSELF = "eat_itself"


@dataclass(frozen=True)
class Snapshot:
    """Facts observed after a tick.

    ``snake`` lists the head first, then the body in buffer order.
    The engine keeps ticking regardless of the flags; deciding that a
    session is over belongs to the caller.
    """

    on_food: bool
    on_wall: bool
    eat_itself: bool
    food_position: Point
    snake: tuple[Point, ...]
    score: int
    period_duration: timedelta

    @property
    def head(self) -> Point:
        return self.snake[0]

    @property
    def period_ms(self) -> int:
        return int(self.period_duration / timedelta(milliseconds=1))

    @property
    def game_over_reason(self) -> GameOverReason | None:
        """Return why a caller would end the session, if it would."""
        if self.on_wall:
            return GameOverReason.WALL
        if self.eat_itself:
            return GameOverReason.EAT_ITSELF
        return None

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary."""
        reason = self.game_over_reason
        return {
            "on_food": self.on_food,
            "on_wall": self.on_wall,
            "eat_itself": self.eat_itself,
            "food_position": list(self.food_position),
            "snake": [list(p) for p in self.snake],
            "score": self.score,
            "period_ms": self.period_ms,
            "game_over_reason": reason.value if reason is not None else None,
        }
