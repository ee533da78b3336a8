"""Wall layout of a level."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from snake_engine.snake import Point


class Grid:
    """NumPy-backed wall mask with fixed dimensions.

    ``walls[y, x]`` is True where a wall stands. Row 0 is the bottom of
    the board, matching the engine's upward-growing ``y`` axis.
    """

    def __init__(
        self,
        width: int,
        height: int,
        walls: Iterable[Point] = (),
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self.width = width
        self.height = height
        self.walls = np.zeros((height, width), dtype=bool)
        for x, y in walls:
            self.walls[y, x] = True

    def in_bounds(self, point: Point) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def is_wall(self, point: Point) -> bool:
        return bool(self.walls[point.y, point.x])

    def wall_points(self) -> list[Point]:
        """Return wall coordinates in scan order (``y * width + x``)."""
        ys, xs = np.nonzero(self.walls)
        return [
            Point(x, y)
            for y, x in zip(ys.tolist(), xs.tolist(), strict=True)
        ]

    def free_cells(self, occupied: Iterable[Point] = ()) -> list[Point]:
        """Return every non-wall cell not listed in *occupied*."""
        mask = ~self.walls
        for x, y in occupied:
            mask[y, x] = False
        ys, xs = np.nonzero(mask)
        return [
            Point(x, y)
            for y, x in zip(ys.tolist(), xs.tolist(), strict=True)
        ]

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "walls": [list(p) for p in self.wall_points()],
        }
