"""Tests for runtime settings loading and startup validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from registry_dashboard.config import DashboardSettings, SettingsLoadError, config_load_settings


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test without inherited settings or a dotenv file."""

    monkeypatch.chdir(tmp_path)
    for variable_name in ("LACONIC_API_URL", "ENVIRONMENT_NAME", "LOG_LEVEL", "APPLICATION_PORT"):
        monkeypatch.delenv(variable_name, raising=False)


def test_config_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Load the registry endpoint and normalize the log level.

    Args:
        monkeypatch: Pytest environment patch fixture.

    Returns:
        None: Assertions validate loaded values.

    Raises:
        AssertionError: Raised when loaded values differ.
    """

    monkeypatch.setenv("LACONIC_API_URL", " https://registry.example.test/api ")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = config_load_settings()

    assert settings.laconic_api_url == "https://registry.example.test/api"
    assert settings.log_level == "DEBUG"
    assert settings.environment_name == "development"
    assert settings.application_port == 8000


def test_config_load_settings_reads_dotenv_file(tmp_path: Path) -> None:
    """Load settings from a `.env` file in the working directory."""

    (tmp_path / ".env").write_text("LACONIC_API_URL=http://localhost:9473/api\n", encoding="utf-8")

    assert config_load_settings().laconic_api_url == "http://localhost:9473/api"


def test_config_load_settings_requires_registry_endpoint() -> None:
    """Fail startup when the registry endpoint is not configured."""

    with pytest.raises(SettingsLoadError, match="laconic_api_url"):
        config_load_settings()


@pytest.mark.parametrize("api_url", ["   ", "registry.example.test/api", "ftp://registry.example.test"])
def test_config_load_settings_rejects_invalid_registry_endpoint(
    api_url: str,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Reject blank and non-HTTP registry endpoints.

    Args:
        api_url: Invalid endpoint value.
        monkeypatch: Pytest environment patch fixture.

    Returns:
        None: Assertions validate rejection.

    Raises:
        AssertionError: Raised when invalid values are accepted.
    """

    monkeypatch.setenv("LACONIC_API_URL", api_url)

    with pytest.raises(SettingsLoadError):
        config_load_settings()


def test_config_settings_reject_unknown_log_level() -> None:
    """Reject log levels outside the standard level names."""

    with pytest.raises(ValueError, match="unsupported log_level"):
        DashboardSettings(laconic_api_url="https://registry.example.test/api", log_level="verbose")
