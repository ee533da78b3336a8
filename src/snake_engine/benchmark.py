"""Headless tick throughput measurement."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from snake_engine.config import EngineConfig
from snake_engine.engine import Game
from snake_engine.level import load_level
from snake_engine.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    level: str
    total_ticks: int
    total_games: int
    wall_time_seconds: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: level {self.level}, "
            f"{self.total_ticks} ticks over {self.total_games} game(s) in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def benchmark_throughput(
    *,
    level: str = "snake1",
    ticks: int = 10_000,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw tick throughput with random directions.

    A new game is started whenever the snapshot reports a game-over
    reason, the way an interactive host would end a session.
    """
    if ticks < 1:
        raise ValueError("ticks must be at least 1.")
    parsed = load_level(level)
    rng = np.random.default_rng(seed)
    config = EngineConfig(seed=seed)

    game = Game(parsed, config=config, rng=rng)
    total_games = 1
    start = time.perf_counter()

    for _ in range(ticks):
        game.tick(_DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))])
        if game.last_snapshot().game_over_reason is not None:
            game = Game(parsed, config=config, rng=rng)
            total_games += 1

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        level=level,
        total_ticks=ticks,
        total_games=total_games,
        wall_time_seconds=elapsed,
        ticks_per_second=ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
