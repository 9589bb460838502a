"""Application settings loaded from environment variables."""

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_file() -> str | None:
    if os.getenv("PYTEST_CURRENT_TEST"):
        return None
    return ".env"


class Settings(BaseSettings):
    """multinotify configuration. All values come from environment variables."""

    # Logging
    log_level: str = Field(default="WARNING")

    # Fan-out
    fanout_fail_fast: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_file=_env_file(), env_file_encoding="utf-8", validate_assignment=True
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise to upper case and reject names logging doesn't define."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            msg = f"Invalid log level: {v}. Must be one of {LOG_LEVELS}"
            raise ValueError(msg)
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        if os.getenv("PYTEST_CURRENT_TEST"):
            return (init_settings,)
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)


settings = Settings()
