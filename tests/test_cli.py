"""Tests for the command line entry point."""

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from src.cli import main
from src.interval import decompose as decompose_module


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in ("INTERVAL_LOCALE", "INTERVAL_MAX_UNITS", "INTERVAL_SEPARATOR", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(decompose_module, "now_for", lambda reference: datetime(2013, 6, 28))


def test_age_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--locale", "ru", "age", "28.06.1986"]) == 0
    assert capsys.readouterr().out == "27 лет\n"


def test_interval_command(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--max-units", "2", "--separator", ", ", "interval", "01.01.2020", "15.03.2021"])
    assert code == 0
    assert capsys.readouterr().out == "1 year, 2 months\n"


def test_locale_from_environment(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("INTERVAL_LOCALE", "ru")
    assert main(["interval", "28.06.2012"]) == 0
    assert capsys.readouterr().out == "1 год\n"


def test_invalid_date_reports_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["age", "not-a-date"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Not valid date string" in captured.err


def test_verbose_enables_date_parsing_logs(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--verbose", "age", "28.06.1986"]) == 0
    assert capsys.readouterr().out == "27 years\n"
    assert logging.getLogger("dateparser").level == logging.DEBUG
