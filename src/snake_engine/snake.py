"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from typing import NamedTuple


class Point(NamedTuple):
    """Grid coordinate; ``y`` grows upward, ``(0, 0)`` is bottom-left."""

    x: int
    y: int


class Direction(enum.Enum):
    """Cardinal movement directions with (x_delta, y_delta) values."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def is_compatible_with(self, other: Direction) -> bool:
        """Return False only for an exact 180° reversal."""
        return _OPPOSITES[self] is not other

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake stored as a head plus a circular buffer of trailing segments.

    ``body`` holds every segment except the head. ``index`` is the slot of
    the most recently written segment; each move overwrites the slot after
    it with the old head position, so no segment is ever shifted.
    """

    def __init__(self, head: Point, body: list[Point]) -> None:
        if not body:
            raise ValueError("Snake body must have at least 1 segment.")
        self.head = Point(*head)
        self.body: list[Point] = [Point(*seg) for seg in body]
        self.index = 0

    def __len__(self) -> int:
        return len(self.body) + 1

    def contains(self, point: Point) -> bool:
        """Check whether the head or any body segment is at *point*."""
        return point == self.head or point in self.body

    def on_body(self, point: Point) -> bool:
        """Check whether a trailing segment (head excluded) is at *point*."""
        return point in self.body

    def segments(self) -> list[Point]:
        """Return head followed by the body in buffer order."""
        return [self.head, *self.body]

    def move(
        self, direction: Direction, grow: bool, width: int, height: int,
    ) -> Point:
        """Advance one cell with toroidal wraparound.

        Returns the new head position.
        """
        self._move_body(grow)
        self._move_head(direction, width, height)
        return self.head

    def _move_body(self, grow: bool) -> None:
        if grow:
            self.body.append(self.body[self.index])
        next_index = (self.index + 1) % len(self.body)
        self.body[next_index] = self.head
        self.index = next_index

    def _move_head(self, direction: Direction, width: int, height: int) -> None:
        x, y = self.head
        if direction is Direction.UP:
            y = (y + 1) % height
        elif direction is Direction.DOWN:
            y = height - 1 if y == 0 else y - 1
        elif direction is Direction.RIGHT:
            x = (x + 1) % width
        else:
            x = width - 1 if x == 0 else x - 1
        self.head = Point(x, y)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": list(self.head),
            "body": [list(seg) for seg in self.body],
            "index": self.index,
        }
