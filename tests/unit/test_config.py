"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from agentflow_cli.marketplace.config import AgentFlowSettings

_ENV_VARS = (
    "LOG_LEVEL",
    "AGENTFLOW_INSTALL_DELAY",
    "AGENTFLOW_BACKGROUND_INSTALL",
    "AGENTFLOW_CLEAR_SCREEN",
)


@pytest.fixture(autouse=True)
def _clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_settings_defaults() -> None:
    settings = AgentFlowSettings()

    assert settings.log_level == "WARNING"
    assert settings.install_delay_seconds == 1.5
    assert settings.background_install is False
    assert settings.clear_screen is True


def test_settings_loads_from_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "LOG_LEVEL=debug",
                "AGENTFLOW_INSTALL_DELAY=0.25",
                "AGENTFLOW_BACKGROUND_INSTALL=true",
                "UNRELATED_SETTING=ignored",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = AgentFlowSettings()

    assert settings.log_level == "DEBUG"
    assert settings.install_delay_seconds == 0.25
    assert settings.background_install is True


def test_environment_overrides_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("AGENTFLOW_CLEAR_SCREEN=true\n", encoding="utf-8")
    monkeypatch.setenv("AGENTFLOW_CLEAR_SCREEN", "false")

    assert AgentFlowSettings().clear_screen is False


def test_negative_install_delay_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AGENTFLOW_INSTALL_DELAY", "-1")
    with pytest.raises(ValidationError):
        AgentFlowSettings()


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        AgentFlowSettings()
