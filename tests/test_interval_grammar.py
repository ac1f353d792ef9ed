"""Tests for locale grammar tables and locale resolution."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.interval.errors import UnsupportedLocaleError
from src.interval.grammar import GRAMMARS, UNITS, LocaleGrammar, Unit, get_grammar, supported_languages


def test_builtin_grammars_cover_all_units() -> None:
    for grammar in GRAMMARS.values():
        assert set(grammar.forms) == set(UNITS)


def test_locale_resolution_ignores_case_and_region() -> None:
    assert get_grammar("ru").code == "ru"
    assert get_grammar("ru_RU").code == "ru"
    assert get_grammar("EN-gb").code == "en"


def test_unsupported_locale_lists_supported_languages() -> None:
    with pytest.raises(UnsupportedLocaleError, match=r"\(eng, rus\)"):
        get_grammar("fr")


def test_empty_locale_is_unsupported() -> None:
    with pytest.raises(UnsupportedLocaleError):
        get_grammar("")


def test_supported_languages() -> None:
    assert supported_languages() == "eng, rus"


def test_grammar_rejects_wrong_number_of_forms() -> None:
    forms = {unit: ("one", "two") for unit in UNITS}
    with pytest.raises(ValidationError):
        LocaleGrammar(code="xx", iso_code="xxx", plural_rule="east_slavic", forms=forms)


def test_grammar_rejects_missing_units() -> None:
    with pytest.raises(ValidationError):
        LocaleGrammar(
            code="xx",
            iso_code="xxx",
            plural_rule="one_other",
            forms={Unit.years: ("year", "years")},
        )


def test_grammar_rejects_unknown_plural_rule() -> None:
    forms = {unit: ("a", "b") for unit in UNITS}
    with pytest.raises(ValidationError):
        LocaleGrammar(code="xx", iso_code="xxx", plural_rule="dual", forms=forms)
