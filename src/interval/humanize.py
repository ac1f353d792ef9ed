"""Interval entry points used by templates.

Both functions take the locale as an argument. The caller (a template filter, a request handler)
decides which locale applies to the current request; nothing here keeps it between calls.
"""

from __future__ import annotations

from typing import Any

from src.interval.decompose import decompose
from src.interval.formatter import Alignment, format_components
from src.interval.normalize import normalize


def interval(
        date_from: Any,
        date_till: Any = None,
        max_units: int = 3,
        separator: str = " ",
        *,
        locale: str,
        alignment: Alignment = "unit",
        date_order: str = "DMY",
) -> str:
    """Humanize the span between `date_from` and `date_till` (default: now).

    Dates may be `datetime`/`date` objects or parseable strings.

    Example:
        `interval("01.01.2020", "15.03.2021", locale="en")` -> "1 year 2 months 14 days"
    """

    start = normalize(date_from, date_order=date_order)
    end = None if date_till is None else normalize(date_till, date_order=date_order)
    return format_components(
        decompose(start, end),
        max_units,
        separator,
        locale,
        alignment=alignment,
    )


def age(
        date: Any,
        max_units: int = 3,
        separator: str = " ",
        *,
        locale: str,
        alignment: Alignment = "unit",
        date_order: str = "DMY",
) -> str:
    """Humanize the time elapsed since `date` (convenience wrapper around `interval`)."""

    return interval(
        date,
        None,
        max_units,
        separator,
        locale=locale,
        alignment=alignment,
        date_order=date_order,
    )
