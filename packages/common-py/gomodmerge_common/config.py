"""Runtime settings, read from GOMODMERGE_* environment variables."""

from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_GO_BINARY, LOG_LEVELS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GOMODMERGE_")

    go_binary: str = DEFAULT_GO_BINARY
    log_level: str = "warning"
    scratch_parent: Optional[Path] = None

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.strip().lower()
        if value == "warn":
            value = "warning"
        if value not in LOG_LEVELS:
            raise ValueError(f"must be one of: {', '.join(LOG_LEVELS)}")
        return value


def get_settings(**overrides) -> Settings:
    """Build settings from the environment, with explicit overrides applied last."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
