"""Tests for calendar-aware decomposition of date spans."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from src.interval import decompose as decompose_module
from src.interval.decompose import DurationComponents, decompose
from src.interval.errors import InvalidInputError
from src.interval.grammar import Unit


def test_exact_year_and_two_months() -> None:
    components = decompose(datetime(2012, 4, 28), datetime(2013, 6, 28))
    assert components.as_tuple() == (1, 2, 0, 0, 0, 0)
    assert components.non_zero() == [(Unit.years, 1), (Unit.months, 2)]


def test_all_units() -> None:
    components = decompose(datetime(2010, 1, 1), datetime(2012, 4, 5, 6, 7, 8))
    assert components == DurationComponents(2, 3, 4, 6, 7, 8)


def test_interior_zeros_are_dropped_from_non_zero_view() -> None:
    components = decompose(datetime(2010, 1, 1), datetime(2011, 1, 4, 0, 0, 9))
    assert components.non_zero() == [(Unit.years, 1), (Unit.days, 3), (Unit.seconds, 9)]


@pytest.mark.parametrize(
    ("start", "end"),
    [
        (datetime(2020, 1, 31), datetime(2020, 3, 1)),
        (datetime(2019, 2, 28, 23, 59, 59), datetime(2024, 2, 29, 0, 0, 1)),
        (datetime(1986, 6, 28), datetime(2013, 6, 27, 12, 30)),
    ],
)
def test_components_reconstruct_end(start: datetime, end: datetime) -> None:
    components = decompose(start, end)
    assert start + components.as_relativedelta() == end


def test_reversed_endpoints_give_absolute_span() -> None:
    forward = decompose(datetime(2012, 4, 28), datetime(2013, 6, 28))
    backward = decompose(datetime(2013, 6, 28), datetime(2012, 4, 28))
    assert backward == forward


def test_microseconds_are_ignored() -> None:
    components = decompose(datetime(2020, 1, 1, 0, 0, 0, 999999), datetime(2020, 1, 1, 0, 0, 1))
    assert components.as_tuple() == (0, 0, 0, 0, 0, 1)


def test_missing_end_defaults_to_now(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(decompose_module, "now_for", lambda reference: datetime(2013, 6, 28))
    assert decompose(datetime(1986, 6, 28)).as_tuple() == (27, 0, 0, 0, 0, 0)


def test_mixed_naive_and_aware_are_rejected() -> None:
    with pytest.raises(InvalidInputError):
        decompose(datetime(2020, 1, 1), datetime(2021, 1, 1, tzinfo=UTC))


def test_components_must_be_non_negative() -> None:
    with pytest.raises(ValueError):
        DurationComponents(years=-1)
