"""Input normalization: turn template values into points in time.

Accepted inputs:
    - `datetime` values are returned unchanged;
    - `date` values become midnight of that day;
    - strings are parsed with `dateparser` and must survive a canonical round-trip.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any

import dateparser
from dateparser.conf import Settings as DateparserSettings

from src.interval.errors import InvalidInputError

CANONICAL_FORMAT = "%Y-%m-%d %H:%M:%S"
_CANONICAL_TAIL = "%m-%d %H:%M:%S"

# Parsing is independent of the display locale; numeric dates follow the configured order.
_LANGUAGES: list[str] = ["en"]

_PARSE_SETTINGS: dict[str, DateparserSettings] = {
    order: DateparserSettings().replace(DATE_ORDER=order) for order in ("DMY", "MDY", "YMD")
}

_CANONICAL_SETTINGS = DateparserSettings().replace(DATE_ORDER="YMD")
_CANONICAL_UTC_SETTINGS = DateparserSettings().replace(
    DATE_ORDER="YMD",
    TIMEZONE="UTC",
    TO_TIMEZONE="UTC",
    RETURN_AS_TIMEZONE_AWARE=True,
)


def _parse(text: str, date_order: str) -> datetime | None:
    settings = _PARSE_SETTINGS.get(date_order)
    if settings is None:
        raise InvalidInputError(f"Unsupported date order: {date_order}")
    try:
        return dateparser.parse(text, languages=_LANGUAGES, settings=settings)
    except OverflowError:
        return None


def format_canonical(value: datetime) -> str:
    """Render `value` as `YYYY-MM-DD HH:MM:SS`, zero-padding years below 1000."""

    return f"{value.year:04d}-{value.strftime(_CANONICAL_TAIL)}"


def _round_trips(value: datetime) -> bool:
    """Whether `value` survives formatting with the canonical formatter and parsing back."""

    if value.tzinfo is None:
        canonical = format_canonical(value)
        settings = _CANONICAL_SETTINGS
    else:
        try:
            canonical = format_canonical(value.astimezone(UTC))
        except OverflowError:
            return False
        settings = _CANONICAL_UTC_SETTINGS

    reparsed = dateparser.parse(
        canonical,
        date_formats=[CANONICAL_FORMAT],
        languages=_LANGUAGES,
        settings=settings,
    )
    return reparsed is not None and reparsed == value


def parse_timestamp(text: str, *, date_order: str = "DMY") -> datetime:
    """Parse a textual timestamp with whole-second precision.

    Raises:
        InvalidInputError: If the text yields no timestamp or fails round-trip validation.
    """

    parsed = _parse(text.strip(), date_order)
    if parsed is None:
        raise InvalidInputError("Not valid date string.")

    parsed = parsed.replace(microsecond=0)
    if not _round_trips(parsed):
        raise InvalidInputError("Not valid date string.")
    return parsed


def normalize(value: Any, *, date_order: str = "DMY") -> datetime:
    """Normalize a date-like value into a `datetime`.

    Raises:
        InvalidInputError: If the value is neither a date/datetime nor a valid date string.
    """

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise InvalidInputError("Expected formatted string or datetime object.")
    return parse_timestamp(value, date_order=date_order)
