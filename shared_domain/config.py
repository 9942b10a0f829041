"""Library configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Library settings, read from SHARED_DOMAIN_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="SHARED_DOMAIN_", extra="ignore"
    )

    PROJECT_NAME: str = "shared-domain"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Overrides the environment's default level when set
    LOG_LEVEL: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def use_json_logs(self) -> bool:
        """Whether log records are rendered as JSON."""
        return self.ENVIRONMENT == "production"

    @field_validator("LOG_LEVEL", mode="after")
    @classmethod
    def normalize_log_level(cls, value: str | None) -> str | None:
        """Upper-case the log level and reject unknown names."""
        if value is None:
            return None
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            msg = f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}"
            raise ValueError(msg)
        return level


def configure_logging(environment: str = "development", log_level: str | None = None) -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    if log_level is None:
        log_level = "DEBUG" if environment == "development" else "INFO"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level),
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: Console output with colors
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    """Configure logging from the (cached) settings."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
