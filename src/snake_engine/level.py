"""Level text parsing and the built-in level set.

A level is a rectangular block of text. The last line is ``y = 0`` and
characters map left-to-right to increasing ``x``:

- ``#`` wall
- ``' '`` (space) empty cell
- ``h`` snake head, exactly one
- ``b`` snake body segment, at least one
- ``f`` food, exactly one

Body segments keep their scan order (bottom-to-top, left-to-right) as
the initial order of the snake's body buffer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from snake_engine.errors import (
    DuplicateMarkerError,
    EmptyLevelError,
    InconsistentRowWidthError,
    InvalidCharacterError,
    MissingBodyError,
    MissingFoodError,
    MissingHeadError,
)
from snake_engine.snake import Point

logger = logging.getLogger(__name__)

WALL = "#"
EMPTY = " "
HEAD = "h"
BODY = "b"
FOOD = "f"


@dataclass(frozen=True)
class Level:
    """Initial layout extracted from level text."""

    width: int
    height: int
    walls: tuple[Point, ...]
    head: Point
    body: tuple[Point, ...]
    food: Point


def _split_rows(text: str) -> list[str]:
    """Split on line feeds only, dropping one trailing carriage return per row."""
    rows = text.split("\n")
    if rows[-1] == "":
        rows.pop()
    return [row[:-1] if row.endswith("\r") else row for row in rows]


def parse_level(text: str) -> Level:
    """Parse level *text* into a :class:`Level`.

    Raises a :class:`~snake_engine.errors.LevelError` subclass on any
    malformed input.
    """
    lines = _split_rows(text)
    if not lines or not lines[0]:
        raise EmptyLevelError()

    height = len(lines)
    width = len(lines[0])

    walls: list[Point] = []
    body: list[Point] = []
    head: Point | None = None
    food: Point | None = None

    for y, line in enumerate(reversed(lines)):
        if len(line) != width:
            raise InconsistentRowWidthError(height - y, width, len(line))
        for x, char in enumerate(line):
            index = y * width + x
            point = Point(x, y)
            if char == WALL:
                walls.append(point)
            elif char == EMPTY:
                continue
            elif char == HEAD:
                if head is not None:
                    raise DuplicateMarkerError(char, index)
                head = point
            elif char == BODY:
                body.append(point)
            elif char == FOOD:
                if food is not None:
                    raise DuplicateMarkerError(char, index)
                food = point
            else:
                raise InvalidCharacterError(char, index)

    if head is None:
        raise MissingHeadError()
    if food is None:
        raise MissingFoodError()
    if not body:
        raise MissingBodyError()

    logger.debug(
        "Parsed %dx%d level: %d walls, snake length %d.",
        width, height, len(walls), len(body) + 1,
    )
    return Level(
        width=width,
        height=height,
        walls=tuple(walls),
        head=head,
        body=tuple(body),
        food=food,
    )


SNAKE_1 = (
    "##########\n"
    "#        #\n"
    "#        #\n"
    "#   h    #\n"
    "#   b f  #\n"
    "##########"
)

# Open board; the snake wraps around every edge.
SNAKE_2 = (
    "          \n"
    "          \n"
    "    h     \n"
    "    b     \n"
    "      f   \n"
    "          "
)

LEVELS: dict[str, str] = {
    "snake1": SNAKE_1,
    "snake2": SNAKE_2,
}


def load_level(source: str | Path) -> Level:
    """Parse a built-in level by name, or a level file by path."""
    if isinstance(source, str) and source in LEVELS:
        return parse_level(LEVELS[source])
    return parse_level(Path(source).read_text(encoding="utf-8"))
