"""Runtime configuration for maybekit, backed by Pydantic Settings (v2).

Sources, highest precedence first:
- process environment variables,
- `.env` / `.env.local` in the working directory.

The library has almost nothing to configure. The settings decide how chatty
`get_logger()` loggers are and what the CLI prints for an absent result.
"""

from __future__ import annotations

import logging
import os
import sys
from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class Settings(BaseSettings):
    """Typed configuration read from the environment.

    Attributes
    ----------
    environment : EnvName
        Deployment flag; maps from `MAYBEKIT_ENV`.
    log_level : LogLevelName
        Level applied by `get_logger()`; maps from `LOG_LEVEL`. Case-insensitive.
    log_format : str
        `logging.Formatter` pattern; maps from `MAYBEKIT_LOG_FORMAT`.
    nothing_marker : str
        What the CLI prints for an absent result; maps from
        `MAYBEKIT_CLI_NOTHING_MARKER`. Must not be blank.
    """

    environment: EnvName = Field(default="dev", alias="MAYBEKIT_ENV")
    log_level: LogLevelName = Field(default="WARNING", alias="LOG_LEVEL")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, alias="MAYBEKIT_LOG_FORMAT")
    nothing_marker: str = Field(default="(nothing)", alias="MAYBEKIT_CLI_NOTHING_MARKER")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("nothing_marker")
    @classmethod
    def _marker_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("nothing marker must not be blank")
        return value

    @property
    def is_test(self) -> bool:
        """True when running under the test environment flag."""
        return self.environment == "test"

    def log_level_numeric(self) -> int:
        return logging.getLevelName(self.log_level)  # type: ignore[no-any-return]


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Build the `Settings` once per process.

    Call `load_settings.cache_clear()` after changing `os.environ` to pick up
    the new values.
    """
    os.environ.setdefault("MAYBEKIT_ENV", "dev")
    return Settings()


settings: Settings = load_settings()


def get_logger(name: str = "maybekit") -> logging.Logger:
    """Return a named logger writing to stderr at the configured level.

    The handler is attached once per logger name; the level is re-applied on
    every call so a cleared settings cache takes effect.
    """
    current = load_settings()
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(current.log_format))
        logger.addHandler(handler)
    logger.setLevel(current.log_level_numeric())
    logger.propagate = False
    return logger


__all__ = ["DEFAULT_LOG_FORMAT", "Settings", "get_logger", "load_settings", "settings"]
