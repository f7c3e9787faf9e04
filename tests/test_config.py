"""Tests for environment-driven configuration."""

import pytest

from caffeine_dose.config import Config

_VARS = ["alfred_time_format", "CAFFEINE_PROCESS_NAME", "CAFFEINE_QUERY_TIMEOUT", "CAFFEINE_ICON_PATH", "CAFFEINE_DEBUG"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    cfg = Config()
    assert cfg.use_24h is False
    assert cfg.process_name == "caffeinate"
    assert cfg.process_query_timeout == 2.0
    assert cfg.icon_path == "icon.png"
    assert cfg.debug is False
    assert cfg.poll_threshold_seconds == 3600


def test_overrides(clean_env):
    clean_env.setenv("alfred_time_format", "1")
    clean_env.setenv("CAFFEINE_PROCESS_NAME", "systemd-inhibit")
    clean_env.setenv("CAFFEINE_QUERY_TIMEOUT", "0.5")
    clean_env.setenv("CAFFEINE_DEBUG", "yes")

    cfg = Config()
    assert cfg.use_24h is True
    assert cfg.process_name == "systemd-inhibit"
    assert cfg.process_query_timeout == 0.5
    assert cfg.debug is True


@pytest.mark.parametrize("value, use_24h", [
    ("0", False),
    ("", False),
    ("  ", False),
    ("1", True),
    ("24", True),
    ("yes", True),
])
def test_time_format_mapping(clean_env, value, use_24h):
    clean_env.setenv("alfred_time_format", value)
    assert Config().use_24h is use_24h


@pytest.mark.parametrize("value", ["soon", "0", "-1", ""])
def test_bad_query_timeout_uses_default(clean_env, value):
    clean_env.setenv("CAFFEINE_QUERY_TIMEOUT", value)
    assert Config().process_query_timeout == 2.0
