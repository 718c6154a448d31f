"""Configuration for the marketplace CLI.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Every setting has a default, so the CLI runs with no configuration at all.
"""

from __future__ import annotations

import logging

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AgentFlowSettings(BaseSettings):
    """Settings for the AgentFlow CLI.

    Environment variables:
    - LOG_LEVEL                     (optional)
    - AGENTFLOW_INSTALL_DELAY       (optional)
    - AGENTFLOW_BACKGROUND_INSTALL  (optional)
    - AGENTFLOW_CLEAR_SCREEN        (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `AgentFlowSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Root logging level; logs go to stderr",
    )

    install_delay_seconds: float = Field(
        default=1.5,
        ge=0,
        validation_alias="AGENTFLOW_INSTALL_DELAY",
        description="Delay before a simulated install reports success",
    )

    background_install: bool = Field(
        default=False,
        validation_alias="AGENTFLOW_BACKGROUND_INSTALL",
        description=(
            "Finish simulated installs on a background timer instead of waiting. "
            "The continue prompt may then appear before the success message."
        ),
    )

    clear_screen: bool = Field(
        default=True,
        validation_alias="AGENTFLOW_CLEAR_SCREEN",
        description="Clear the terminal before showing the main menu again",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _normalize_log_level(self) -> AgentFlowSettings:
        level = self.log_level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {self.log_level!r}")
        self.log_level = level
        return self
