"""Environment configuration and validation.

This module defines strongly-typed defaults for the interval filters, loaded from environment
variables (optionally via a local `.env` file).

Only defaults live here. The core functions never read settings; callers pass every value
explicitly, so a locale chosen per request always wins over `INTERVAL_LOCALE`.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.interval.errors import UnsupportedLocaleError
from src.interval.grammar import get_grammar

DateOrder = Literal["DMY", "MDY", "YMD"]
UnitAlignment = Literal["unit", "right"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Interval filter settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    locale: str = Field(default="en", alias="INTERVAL_LOCALE")
    max_units: int = Field(default=3, ge=1, le=6, alias="INTERVAL_MAX_UNITS")
    separator: str = Field(default=" ", alias="INTERVAL_SEPARATOR")
    date_order: DateOrder = Field(default="DMY", alias="INTERVAL_DATE_ORDER")
    unit_alignment: UnitAlignment = Field(default="unit", alias="INTERVAL_UNIT_ALIGNMENT")
    log_level: LogLevel = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept level names in any case (`LOG_LEVEL=debug`)."""

        return value.upper() if isinstance(value, str) else value

    @field_validator("locale")
    @classmethod
    def validate_locale_is_supported(cls, value: str) -> str:
        """Validate that the default locale has a grammar table.

        A default locale without plural forms would fail on the first rendered filter, so it is
        rejected at startup instead.
        """

        try:
            return get_grammar(value).code
        except UnsupportedLocaleError as exc:
            raise ValueError(str(exc)) from exc


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
