"""Logging configuration for processes rendering interval filters."""

from __future__ import annotations

import logging

# Loggers that only matter when debugging why a date string was rejected.
_DATE_PARSING_LOGGERS: tuple[str, ...] = ("dateparser", "tzlocal")


def configure_logging(level: str = "INFO") -> None:
    """Configure Python logging for the process.

    The interval core never logs; the templating adapter and the CLI do. dateparser's language
    detection chatter is kept only at DEBUG, where it explains rejected date strings.
    """

    log_level = level.upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    parsing_level = logging.DEBUG if log_level == "DEBUG" else logging.WARNING
    for name in _DATE_PARSING_LOGGERS:
        logging.getLogger(name).setLevel(parsing_level)
