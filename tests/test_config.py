"""
Tests for settings loading.
"""
import pytest
from pydantic import ValidationError

from swarm_defense.config import Settings


def test_defaults():
    settings = Settings()
    assert settings.tick_rate_ms == 16
    assert (settings.viewport_width, settings.viewport_height) == (800, 600)
    assert settings.random_seed is None


def test_environment_override(monkeypatch):
    monkeypatch.setenv("SWARM_TICK_RATE_MS", "10")
    monkeypatch.setenv("SWARM_RANDOM_SEED", "42")

    settings = Settings()

    assert settings.tick_rate_ms == 10
    assert settings.random_seed == 42


def test_invalid_tick_rate(monkeypatch):
    monkeypatch.setenv("SWARM_TICK_RATE_MS", "0")
    with pytest.raises(ValidationError):
        Settings()
