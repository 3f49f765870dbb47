"""Library configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "info"

    # Hull defaults
    concavity: float = 1.0
    collinear_tolerance: float = 0.0
    degenerate_policy: Literal["drop", "keep"] = "drop"

    model_config = SettingsConfigDict(
        env_prefix="TILEHULL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
