"""Configuration utilities for environment-based setup."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from fuel_surcharge_feed.exceptions import ConfigurationException
from fuel_surcharge_feed.transport.http import DEFAULT_TIMEOUT

FEED_URL_ENV = "FUEL_SURCHARGE_FEED_URL"
TIMEOUT_ENV = "FUEL_SURCHARGE_FEED_TIMEOUT"
LOG_LEVEL_ENV = "FUEL_SURCHARGE_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FeedSettings(BaseModel):
    """Resolved settings for a feed run.

    Attributes:
        feed_url: URL of the XML feed
        timeout_seconds: Timeout for the feed download
        log_level: Logging level name for the console handler
    """

    feed_url: str = Field(description="URL of the XML feed")
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="Timeout for the feed download"
    )
    log_level: str = Field(
        default="INFO", description="Logging level name for the console handler"
    )

    @field_validator("feed_url")  # type: ignore[misc]
    @classmethod
    def validate_feed_url(cls, v: str) -> str:
        """Require an http(s) URL."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("Feed URL must start with http:// or https://")
        return v

    @field_validator("log_level")  # type: ignore[misc]
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the level name."""
        v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'")
        return v

    @property
    def log_level_number(self) -> int:
        """Numeric level for ``logging``."""
        return logging.getLevelNamesMapping()[self.log_level]


def load_environment() -> None:
    """Load environment variables from .env file if it exists."""
    load_dotenv()


def load_feed_settings(
    url: str | None = None,
    timeout: float | None = None,
    log_level: str | None = None,
) -> FeedSettings:
    """Build feed settings from arguments and the environment.

    Explicit arguments win over environment variables.

    Args:
        url: Feed URL (if None, loads from FUEL_SURCHARGE_FEED_URL env var)
        timeout: Timeout in seconds (if None, loads from
            FUEL_SURCHARGE_FEED_TIMEOUT, default 10.0)
        log_level: Logging level name (if None, loads from
            FUEL_SURCHARGE_LOG_LEVEL, default INFO)

    Returns:
        Validated FeedSettings

    Raises:
        ConfigurationException: If no feed URL is found or a value is invalid
    """
    load_environment()

    if url is None:
        url = os.getenv(FEED_URL_ENV)

    if not url:
        raise ConfigurationException(
            f"Feed URL not found. Set {FEED_URL_ENV} environment variable "
            "or pass url parameter.",
            config_key=FEED_URL_ENV,
        )

    values: dict[str, object] = {"feed_url": url}

    if timeout is None:
        raw_timeout = os.getenv(TIMEOUT_ENV)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigurationException(
                    f"{TIMEOUT_ENV} must be a number of seconds",
                    config_key=TIMEOUT_ENV,
                    config_value=raw_timeout,
                ) from exc
    if timeout is not None:
        values["timeout_seconds"] = timeout

    if log_level is None:
        log_level = os.getenv(LOG_LEVEL_ENV)
    if log_level:
        values["log_level"] = log_level

    try:
        return FeedSettings(**values)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else None
        env_key = {
            "feed_url": FEED_URL_ENV,
            "timeout_seconds": TIMEOUT_ENV,
            "log_level": LOG_LEVEL_ENV,
        }.get(field or "")
        raise ConfigurationException(
            f"Invalid configuration: {first['msg']}",
            config_key=env_key,
            config_value=str(values.get(field or "")),
        ) from exc
