"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snake_engine.errors import NoFreeCellError
from snake_engine.snake import Point

if TYPE_CHECKING:
    from snake_engine.grid import Grid
    from snake_engine.snake import Snake

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on cells free of walls and snake segments.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Rejection sampling is capped at *max_attempts* draws; past that the
    free cells are enumerated and one is picked uniformly.
    """

    def __init__(
        self,
        grid: Grid,
        max_attempts: int = 1_000,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else np.random.default_rng()

    def is_free(self, point: Point, snake: Snake) -> bool:
        return not self.grid.is_wall(point) and not snake.contains(point)

    def place(self, snake: Snake) -> Point:
        """Return a new food position.

        Raises :class:`NoFreeCellError` when the board is full.
        """
        for _ in range(self.max_attempts):
            candidate = Point(
                int(self.rng.integers(self.grid.width)),
                int(self.rng.integers(self.grid.height)),
            )
            if self.is_free(candidate, snake):
                return candidate

        logger.warning(
            "Food sampling rejected %d draws; enumerating free cells.",
            self.max_attempts,
        )
        free = self.grid.free_cells(snake.segments())
        if not free:
            raise NoFreeCellError(self.grid.width, self.grid.height)
        return free[int(self.rng.integers(len(free)))]
