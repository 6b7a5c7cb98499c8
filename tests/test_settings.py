import pytest
from pydantic import ValidationError

from settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("HOST", "PORT", "LOG_LEVEL", "MOUNT_MCP"):
        monkeypatch.delenv(f"COLOR_TOOLS_{name}", raising=False)


def test_defaults():
    settings = Settings.from_env()
    assert settings.host == "0.0.0.0"
    assert settings.port == 8973
    assert settings.log_level == "INFO"
    assert settings.mount_mcp is True


def test_from_env(monkeypatch):
    monkeypatch.setenv("COLOR_TOOLS_HOST", "127.0.0.1")
    monkeypatch.setenv("COLOR_TOOLS_PORT", "9000")
    monkeypatch.setenv("COLOR_TOOLS_LOG_LEVEL", "debug")
    monkeypatch.setenv("COLOR_TOOLS_MOUNT_MCP", "false")
    settings = Settings.from_env()
    assert settings.host == "127.0.0.1"
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"
    assert settings.mount_mcp is False


def test_blank_values_keep_defaults(monkeypatch):
    monkeypatch.setenv("COLOR_TOOLS_PORT", "  ")
    assert Settings.from_env().port == 8973


@pytest.mark.parametrize("name, value", [("PORT", "abc"), ("PORT", "70000"), ("LOG_LEVEL", "LOUD")])
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(f"COLOR_TOOLS_{name}", value)
    with pytest.raises(ValidationError):
        Settings.from_env()
