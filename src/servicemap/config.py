"""Runtime settings loaded from the environment."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from SERVICEMAP_* variables and the GitHub runner environment."""

    model_config = SettingsConfigDict(env_prefix="SERVICEMAP_", extra="ignore")

    region: str | None = None
    endpoint_url: str | None = None
    user_agent: str = "amazon-servicediscovery-service-for-github-actions"
    log_level: str = "INFO"

    # set by the GitHub Actions runner, so read without the prefix
    github_output: Path | None = Field(default=None, alias="GITHUB_OUTPUT")
    runner_debug: bool = Field(default=False, alias="RUNNER_DEBUG")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.runner_debug else self.log_level.upper()
