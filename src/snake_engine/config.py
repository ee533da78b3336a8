"""Engine configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snake_engine.speed import DEFAULT_SPEED_CURVE, validate_speed_curve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """Tunable engine settings.

    Supports JSON serialization for reproducible sessions.
    """

    # Seed for the food placement RNG; None draws fresh OS entropy.
    seed: int | None = None

    # Random draws before falling back to enumerating free cells.
    food_max_attempts: int = 1_000

    speed_curve: tuple[tuple[int, int], ...] = DEFAULT_SPEED_CURVE

    def __post_init__(self) -> None:
        if self.food_max_attempts < 1:
            raise ValueError("food_max_attempts must be at least 1.")
        validate_speed_curve(self.speed_curve)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> EngineConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if "speed_curve" in raw:
            raw["speed_curve"] = tuple(
                (int(score), int(ms)) for score, ms in raw["speed_curve"]
            )
        return cls(**raw)
