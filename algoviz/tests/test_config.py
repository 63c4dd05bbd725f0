"""
Tests for environment-driven settings and logging setup.
"""

import json
import logging

from algoviz.config import PlaybackSettings
from algoviz.logging_config import get_logger, setup_logging


def test_settings_defaults(monkeypatch):
    for name in ("ALGOVIZ_FPS", "ALGOVIZ_SPEED", "ALGOVIZ_RANDOM_SIZE", "ALGOVIZ_RANDOM_SEED", "ALGOVIZ_MAX_FRAMES"):
        monkeypatch.delenv(name, raising=False)

    assert PlaybackSettings.from_env() == PlaybackSettings()


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("ALGOVIZ_FPS", "60")
    monkeypatch.setenv("ALGOVIZ_SPEED", "2.5")
    monkeypatch.setenv("ALGOVIZ_RANDOM_SIZE", "5")
    monkeypatch.setenv("ALGOVIZ_RANDOM_SEED", "42")
    monkeypatch.setenv("ALGOVIZ_MAX_FRAMES", "10")

    settings = PlaybackSettings.from_env()

    assert settings.fps == 60
    assert settings.speed == 2.5
    assert settings.random_size == 5
    assert settings.random_seed == 42
    assert settings.max_frames == 10


def test_settings_ignore_unparsable_values(monkeypatch):
    monkeypatch.setenv("ALGOVIZ_FPS", "fast")
    monkeypatch.setenv("ALGOVIZ_SPEED", "-1")

    settings = PlaybackSettings.from_env()

    assert settings.fps == 30
    assert settings.speed == 1.0


def test_json_logging_carries_trace_id(capsys):
    setup_logging(level="DEBUG", fmt="json")
    get_logger("algoviz.test", trace_id="bubble").info("Produced log")

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["message"] == "Produced log"
    assert record["trace_id"] == "bubble"
    assert record["level"] == "INFO"

    setup_logging(level="WARNING", fmt="text")
    assert logging.getLogger().level == logging.WARNING
