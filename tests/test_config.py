"""Tests for the engine configuration dataclass."""

import json

import pytest

from snake_engine.config import EngineConfig
from snake_engine.speed import DEFAULT_SPEED_CURVE


class TestEngineConfig:
    def test_defaults(self):
        cfg = EngineConfig()
        assert cfg.seed is None
        assert cfg.food_max_attempts == 1_000
        assert cfg.speed_curve == DEFAULT_SPEED_CURVE

    def test_invalid_attempts(self):
        with pytest.raises(ValueError, match="at least 1"):
            EngineConfig(food_max_attempts=0)

    def test_invalid_curve(self):
        with pytest.raises(ValueError, match="start at score 0"):
            EngineConfig(speed_curve=((2, 100),))

    def test_to_dict_serializable(self):
        serialized = json.dumps(EngineConfig(seed=3).to_dict())
        assert '"seed": 3' in serialized

    def test_save_and_load(self, tmp_path):
        cfg = EngineConfig(
            seed=9, food_max_attempts=50, speed_curve=((0, 400), (3, 100)),
        )
        path = tmp_path / "engine.json"
        cfg.save(path)
        assert path.exists()

        loaded = EngineConfig.load(path)
        assert loaded == cfg
        assert loaded.speed_curve == ((0, 400), (3, 100))
