"""Jinja2 filters exposing the interval humanizer.

Templates use them as `{{ birthday|age }}` or `{{ started|interval(finished, 2, ", ") }}`.
The locale comes from the `locale` variable of the render context, which the web layer sets from
the current request; without it the configured default applies.
"""

from __future__ import annotations

import logging
from typing import Any

from jinja2 import Environment, pass_context
from jinja2.runtime import Context

from src.config.settings import Settings
from src.interval.humanize import age, interval

logger = logging.getLogger(__name__)

LOCALE_CONTEXT_KEY = "locale"


def _context_locale(context: Context, settings: Settings) -> str:
    locale = context.get(LOCALE_CONTEXT_KEY)
    if not locale:
        logger.debug("no locale in render context, using default=%s", settings.locale)
        return settings.locale
    return str(locale)


def register_filters(env: Environment, settings: Settings) -> Environment:
    """Install the `interval` and `age` filters on a Jinja2 environment."""

    @pass_context
    def interval_filter(
            context: Context,
            date_from: Any,
            date_till: Any = None,
            max_units: int | None = None,
            separator: str | None = None,
    ) -> str:
        return interval(
            date_from,
            date_till,
            settings.max_units if max_units is None else max_units,
            settings.separator if separator is None else separator,
            locale=_context_locale(context, settings),
            alignment=settings.unit_alignment,
            date_order=settings.date_order,
        )

    @pass_context
    def age_filter(
            context: Context,
            date: Any,
            max_units: int | None = None,
            separator: str | None = None,
    ) -> str:
        return age(
            date,
            settings.max_units if max_units is None else max_units,
            settings.separator if separator is None else separator,
            locale=_context_locale(context, settings),
            alignment=settings.unit_alignment,
            date_order=settings.date_order,
        )

    env.filters["interval"] = interval_filter
    env.filters["age"] = age_filter
    logger.debug("registered interval filters default_locale=%s", settings.locale)
    return env
