# core/config.py

"""
Runtime settings for the Student Records CLI.

Settings are read from `STUDENT_RECORDS_*` environment variables through
pydantic-settings, which validates and coerces each value. The registry itself
only ever receives the `LoaderConfig` built from these settings.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.loader import LoaderConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppConfig(BaseSettings):
    """
    Configuration for a CLI session.

    Attributes:
        log_level: Name of the root logging level (default "WARNING").
        ticks: Number of pauses in the simulated loading work.
        tick_interval: Seconds per pause; must be finite and non-negative.

    Notes:
        - Recognized variables: `STUDENT_RECORDS_LOG_LEVEL`, `STUDENT_RECORDS_TICKS`,
          and `STUDENT_RECORDS_TICK_INTERVAL`.
        - Invalid values raise `pydantic.ValidationError` at construction.
    """

    model_config = SettingsConfigDict(
        env_prefix="STUDENT_RECORDS_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    log_level: LogLevel = "WARNING"
    ticks: int = Field(default=5, ge=0)
    tick_interval: float = Field(default=0.3, ge=0, allow_inf_nan=False)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def loader(self) -> LoaderConfig:
        return LoaderConfig(ticks=self.ticks, tick_interval=self.tick_interval)
