# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, CLOCK__TICK_INTERVAL_MS.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from listing_engine.models.duration_policy import ListingDuration, NamedPolicy


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "listing-engine"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/listing_engine.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class ListingSettings(BaseSettings):
    """Listing codec and lifecycle defaults (from env LISTINGS__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    default_duration: ListingDuration = Field(
        default=ListingDuration.WEEKLY,
        description="Named cadence used when a policy is missing or invalid.",
    )
    platform_category: str = Field(
        default="shopstr",
        min_length=1,
        description="Category marker appended to every published listing.",
    )
    client_name: str = Field(default="Shopstr", description="Client name written to the client tag.")
    listing_kind: int = Field(default=30402, ge=0, description="Event kind of listing events.")
    cache_maxsize: int = Field(
        default=4096,
        ge=1,
        le=1_000_000,
        description="Maximum number of listings kept by the in-memory cache.",
    )

    @property
    def default_policy(self) -> NamedPolicy:
        return NamedPolicy(self.default_duration)


class ClockSettings(BaseSettings):
    """Shared time source (from env CLOCK__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    tick_interval_ms: int = Field(
        default=1000,
        ge=250,
        le=3_600_000,
        description="Tick interval for countdown consumers.",
    )
    enabled: bool = Field(
        default=True,
        description="If False, consumers read the clock statically and receive no ticks.",
    )


class CountdownSettings(BaseSettings):
    """Countdown badge presentation (from env COUNTDOWN__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    urgent_threshold_seconds: int = Field(default=86_400, ge=0)
    prefix: str = "Expires in"


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, LISTINGS__DEFAULT_DURATION.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    listings: ListingSettings = Field(default_factory=ListingSettings)
    clock: ClockSettings = Field(default_factory=ClockSettings)
    countdown: CountdownSettings = Field(default_factory=CountdownSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as flat keys or nested dicts, e.g.:
        - from_env(clock__tick_interval_ms=500)
        - from_env(clock={"tick_interval_ms": 500})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from listing_engine.config import get_settings

        settings = get_settings()
        interval = settings.clock.tick_interval_ms
        console_level = settings.logging.console_level
    """
    return Settings()
