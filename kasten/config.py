"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import SecretStr, computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Document store
    COUCHDB_URL: str = "http://localhost:5984"
    COUCHDB_USER: str | None = None
    COUCHDB_PASSWORD: SecretStr | None = None
    DATABASE_NAME: str = "lernen"

    # Seconds before a store request is abandoned
    REQUEST_TIMEOUT: float = 30.0

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Views as "design/view"
    VIEW_BY_USER_AND_DECK: str = "kasten/gelernt-von"
    VIEW_BY_USER: str = "user/nach-user"
    VIEW_CARD_SUBJECT: str = "karten/fach-nach-karte"
    VIEW_BY_DECK: str = "kasten/nach-id"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def couchdb_auth_enabled(self) -> bool:
        """Whether requests to the store carry basic auth credentials."""
        return self.COUCHDB_USER is not None

    @field_validator("COUCHDB_URL", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Strip trailing slashes from the store URL."""
        return value.rstrip("/")

    @field_validator(
        "VIEW_BY_USER_AND_DECK", "VIEW_BY_USER", "VIEW_CARD_SUBJECT", "VIEW_BY_DECK", mode="after"
    )
    @classmethod
    def validate_view_location(cls, value: str) -> str:
        """Views are addressed as '<design document>/<view name>'."""
        design, _, view = value.partition("/")
        if not design or not view or "/" in view:
            msg = f"View location '{value}' must look like 'design/view'"
            raise ValueError(msg)
        return value

    @field_validator("REQUEST_TIMEOUT", mode="after")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            msg = "REQUEST_TIMEOUT must be positive"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def validate_credentials(self) -> "Settings":
        """Validate store credentials."""
        if self.COUCHDB_USER is not None and self.COUCHDB_PASSWORD is None:
            msg = "COUCHDB_PASSWORD is required when COUCHDB_USER is set"
            raise ValueError(msg)
        return self


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
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


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
