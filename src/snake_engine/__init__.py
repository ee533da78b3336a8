"""Snake engine — deterministic grid snake simulation."""

from snake_engine.config import EngineConfig
from snake_engine.engine import Game
from snake_engine.errors import (
    DuplicateMarkerError,
    EmptyLevelError,
    InconsistentRowWidthError,
    InvalidCharacterError,
    LevelError,
    MissingBodyError,
    MissingFoodError,
    MissingHeadError,
    NoFreeCellError,
    SnakeEngineError,
)
from snake_engine.level import LEVELS, Level, load_level, parse_level
from snake_engine.snake import Direction, Point, Snake
from snake_engine.snapshot import GameOverReason, Snapshot

__all__ = [
    "LEVELS",
    "Direction",
    "DuplicateMarkerError",
    "EmptyLevelError",
    "EngineConfig",
    "Game",
    "GameOverReason",
    "InconsistentRowWidthError",
    "InvalidCharacterError",
    "Level",
    "LevelError",
    "MissingBodyError",
    "MissingFoodError",
    "MissingHeadError",
    "NoFreeCellError",
    "Point",
    "Snake",
    "SnakeEngineError",
    "Snapshot",
    "load_level",
    "parse_level",
]
