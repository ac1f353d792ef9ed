"""Command line entry point for humanizing dates outside templates.

Examples:
    python -m src.cli age 28.06.1986 --locale ru
    python -m src.cli interval 01.01.2020 15.03.2021 --max-units 2 --separator ", "
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.interval.errors import DateIntervalError
from src.interval.humanize import age, interval

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a date interval as localized text.")
    parser.add_argument("--locale", help="Locale code (default: INTERVAL_LOCALE).")
    parser.add_argument("--max-units", type=int, help="Number of units to print, 1..6.")
    parser.add_argument("--separator", help="Text placed between units.")
    parser.add_argument("--verbose", action="store_true", help="Log date parsing details.")

    commands = parser.add_subparsers(dest="command", required=True)

    age_cmd = commands.add_parser("age", help="Time elapsed since a date.")
    age_cmd.add_argument("date")

    interval_cmd = commands.add_parser("interval", help="Time between two dates.")
    interval_cmd.add_argument("date_from")
    interval_cmd.add_argument("date_till", nargs="?")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return a process exit code."""

    args = _build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    locale = args.locale or settings.locale
    max_units = settings.max_units if args.max_units is None else args.max_units
    separator = settings.separator if args.separator is None else args.separator
    options = {
        "locale": locale,
        "alignment": settings.unit_alignment,
        "date_order": settings.date_order,
    }

    try:
        if args.command == "age":
            text = age(args.date, max_units, separator, **options)
        else:
            text = interval(args.date_from, args.date_till, max_units, separator, **options)
    except DateIntervalError as exc:
        logger.info("rejected command=%s reason=%s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logger.debug("humanized command=%s locale=%s", args.command, locale)
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
