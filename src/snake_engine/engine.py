"""Step-based game engine composing level, snake, and food logic."""

from __future__ import annotations

import logging

import numpy as np

from snake_engine.config import EngineConfig
from snake_engine.food import FoodSpawner
from snake_engine.grid import Grid
from snake_engine.level import Level, parse_level
from snake_engine.snake import Direction, Point, Snake
from snake_engine.snapshot import Snapshot
from snake_engine.speed import period_for_score

logger = logging.getLogger(__name__)


class Game:
    """Single-snake, step-based game engine.

    The game owns the wall grid, the snake, and the food spawner. Each
    call to :meth:`tick` advances the snake by one cell and replaces the
    snapshot returned by :meth:`last_snapshot`. Wall hits and self-bites
    are only reported; the game keeps ticking until the caller stops.
    """

    def __init__(
        self,
        level: Level,
        config: EngineConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else EngineConfig()
        self.rng = rng if rng is not None else np.random.default_rng(
            self.config.seed,
        )

        self.width = level.width
        self.height = level.height
        self.grid = Grid(self.width, self.height, level.walls)
        self.snake = Snake(level.head, list(level.body))
        self.food_spawner = FoodSpawner(
            self.grid, max_attempts=self.config.food_max_attempts, rng=self.rng,
        )
        self.food = level.food

        self.previous_direction = Direction.UP
        self.pending_growth = 0
        self.score = 0
        self.ticks = 0
        self.period_duration = period_for_score(0, self.config.speed_curve)
        self._last_snapshot = self._make_snapshot(
            on_food=False, on_wall=False, eat_itself=False,
        )

    @classmethod
    def from_text(
        cls,
        text: str,
        config: EngineConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> Game:
        """Parse level *text* and start a game on it."""
        return cls(parse_level(text), config=config, rng=rng)

    def dim(self) -> tuple[int, int]:
        """Return ``(width, height)``."""
        return self.width, self.height

    def walls(self) -> list[Point]:
        """Return wall coordinates in scan order."""
        return self.grid.wall_points()

    def last_snapshot(self) -> Snapshot:
        return self._last_snapshot

    def tick(self, direction: Direction) -> None:
        """Advance the game by one step.

        A request to reverse straight back is replaced by the previous
        direction.
        """
        if direction.is_compatible_with(self.previous_direction):
            self.previous_direction = direction

        grow = self.pending_growth > 0
        if grow:
            self.pending_growth -= 1

        head = self.snake.move(
            self.previous_direction, grow, self.width, self.height,
        )
        self.ticks += 1

        on_wall = self.grid.is_wall(head)
        on_food = head == self.food
        eat_itself = self.snake.on_body(head)

        if on_food:
            self._eat()
        if on_wall or eat_itself:
            logger.info(
                "Collision at tick %d (wall=%s, self=%s) with score %d.",
                self.ticks, on_wall, eat_itself, self.score,
            )

        self._last_snapshot = self._make_snapshot(
            on_food=on_food, on_wall=on_wall, eat_itself=eat_itself,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.ticks,
            "grid": self.grid.to_dict(),
            "direction": self.previous_direction.name,
            "pending_growth": self.pending_growth,
            "snapshot": self._last_snapshot.to_dict(),
        }

    def _eat(self) -> None:
        self.pending_growth += 1
        self.score += 1
        period = period_for_score(self.score, self.config.speed_curve)
        if period != self.period_duration:
            logger.info(
                "Score %d: tick period %s -> %s.",
                self.score, self.period_duration, period,
            )
            self.period_duration = period
        self.food = self.food_spawner.place(self.snake)
        logger.debug(
            "Food eaten at tick %d; next food at %s.", self.ticks, self.food,
        )

    def _make_snapshot(
        self, *, on_food: bool, on_wall: bool, eat_itself: bool,
    ) -> Snapshot:
        return Snapshot(
            on_food=on_food,
            on_wall=on_wall,
            eat_itself=eat_itself,
            food_position=self.food,
            snake=tuple(self.snake.segments()),
            score=self.score,
            period_duration=self.period_duration,
        )
