"""
Tests for environment-driven configuration and logging setup.
"""

import logging

import pytest

from shared import AppConfig, get_logger, load_config


class TestLoadConfig:

    def test_defaults(self):
        cfg = load_config({})
        assert isinstance(cfg, AppConfig)
        assert cfg.log_level == "INFO"
        assert cfg.max_array == 128
        assert cfg.max_kept_frames == 50_000
        assert cfg.default_speed == "medium"
        assert cfg.port == 5000
        assert len(cfg.secret_key) == 64

    def test_random_secret_per_load(self):
        assert load_config({}).secret_key != load_config({}).secret_key

    def test_overrides(self):
        cfg = load_config({
            "VISUALIZER_SECRET_KEY": "s3cret",
            "VISUALIZER_LOG_LEVEL": "debug",
            "VISUALIZER_MAX_ARRAY": "64",
            "VISUALIZER_MAX_KEPT_FRAMES": "1000",
            "VISUALIZER_DEFAULT_SPEED": "fast",
            "VISUALIZER_PORT": "8080",
        })
        assert cfg == AppConfig(
            secret_key="s3cret", log_level="DEBUG", max_array=64, max_kept_frames=1000,
            default_speed="fast", port=8080,
        )

    @pytest.mark.parametrize("env", [
        {"VISUALIZER_MAX_ARRAY": "lots"},
        {"VISUALIZER_MAX_ARRAY": "0"},
        {"VISUALIZER_MAX_KEPT_FRAMES": "-5"},
        {"VISUALIZER_PORT": "http"},
    ])
    def test_bad_values(self, env):
        with pytest.raises(ValueError):
            load_config(env)


def test_get_logger_is_named():
    logger = get_logger("engine.recorder")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "engine.recorder"
