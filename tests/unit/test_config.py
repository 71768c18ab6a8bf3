"""Configuration tests."""

import pytest
from otui.core import get_settings
from otui.core.config import Settings


def test_settings_defaults():
    """Test default settings load correctly."""
    settings = Settings()

    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.max_source_length == 1024 * 1024
    assert settings.max_tree_depth == 64
    assert settings.service_name == "otui-service"


def test_settings_from_environment(monkeypatch):
    """Test OTUI_ environment variables override defaults."""
    monkeypatch.setenv("OTUI_PORT", "9090")
    monkeypatch.setenv("OTUI_JSON_LOGS", "true")

    settings = Settings()
    assert settings.port == 9090
    assert settings.json_logs is True


def test_settings_validation():
    """Test settings validation."""
    settings = Settings(max_tree_depth=5)
    assert settings.max_tree_depth == 5

    with pytest.raises(Exception):
        Settings(max_tree_depth=0)

    with pytest.raises(Exception):
        Settings(port=70000)


def test_get_settings_cached():
    """Test settings instance is cached."""
    assert get_settings() is get_settings()
