"""Calendar-aware decomposition of the span between two points in time."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from datetime import datetime

from dateutil.relativedelta import relativedelta

from src.interval.errors import InvalidInputError
from src.interval.grammar import UNITS, Unit


@dataclass(frozen=True)
class DurationComponents:
    """Civil-calendar difference, most significant unit first.

    Magnitudes are non-negative and roll over like calendar arithmetic: applying them to the
    earlier endpoint with `relativedelta` yields the later one.
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        if any(value < 0 for value in astuple(self)):
            raise ValueError("duration components must be non-negative")

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        return astuple(self)

    def non_zero(self) -> list[tuple[Unit, int]]:
        """Non-zero magnitudes paired with their units, in order; every zero is dropped."""

        return [(unit, value) for unit, value in zip(UNITS, self.as_tuple()) if value]

    def as_relativedelta(self) -> relativedelta:
        return relativedelta(
            years=self.years,
            months=self.months,
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
        )


def now_for(reference: datetime) -> datetime:
    """Current instant, aware only when `reference` is."""

    return datetime.now(reference.tzinfo)


def decompose(start: datetime, end: datetime | None = None) -> DurationComponents:
    """Break the span between `start` and `end` (default: now) into calendar components.

    Endpoints given in reverse order are swapped, so the result is always the absolute span.

    Raises:
        InvalidInputError: If one endpoint is timezone-aware and the other is not.
    """

    if end is None:
        end = now_for(start)
    if (start.tzinfo is None) != (end.tzinfo is None):
        raise InvalidInputError("Cannot compare timezone-aware and naive dates.")

    start = start.replace(microsecond=0)
    end = end.replace(microsecond=0)
    if start > end:
        start, end = end, start

    delta = relativedelta(end, start)
    return DurationComponents(
        years=delta.years,
        months=delta.months,
        days=delta.days,
        hours=delta.hours,
        minutes=delta.minutes,
        seconds=delta.seconds,
    )
