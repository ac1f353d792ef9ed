"""Locale grammar tables (Pydantic models).

Each supported locale lists, for every calendar unit, the word forms its plural rule chooses from.
Adding a language means adding a `LocaleGrammar` entry here; the formatter itself is locale-blind.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator

from src.interval.errors import UnsupportedLocaleError
from src.interval.plural import PLURAL_RULES


class Unit(StrEnum):
    """Calendar units, most significant first."""

    years = "years"
    months = "months"
    days = "days"
    hours = "hours"
    minutes = "minutes"
    seconds = "seconds"


UNITS: tuple[Unit, ...] = tuple(Unit)


class LocaleGrammar(BaseModel):
    """Plural word forms of the six calendar units for one locale."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str
    iso_code: str
    plural_rule: str
    forms: dict[Unit, tuple[str, ...]]

    @model_validator(mode="after")
    def validate_forms(self) -> LocaleGrammar:
        """Validate that every unit has exactly as many forms as the plural rule selects from."""

        rule = PLURAL_RULES.get(self.plural_rule)
        if rule is None:
            raise ValueError(f"unknown plural rule: {self.plural_rule}")

        missing = [unit.value for unit in UNITS if unit not in self.forms]
        if missing:
            raise ValueError(f"missing word forms for: {', '.join(missing)}")

        for unit, forms in self.forms.items():
            if len(forms) != rule.form_count:
                raise ValueError(
                    f"{unit.value} needs {rule.form_count} forms for rule {rule.name}, got {len(forms)}"
                )
        return self

    def forms_in_order(self) -> tuple[tuple[str, ...], ...]:
        """Word form groups ordered from years to seconds."""

        return tuple(self.forms[unit] for unit in UNITS)


GRAMMARS: dict[str, LocaleGrammar] = {
    grammar.code: grammar
    for grammar in (
        LocaleGrammar(
            code="en",
            iso_code="eng",
            plural_rule="one_other",
            forms={
                Unit.years: ("year", "years"),
                Unit.months: ("month", "months"),
                Unit.days: ("day", "days"),
                Unit.hours: ("hour", "hours"),
                Unit.minutes: ("minute", "minutes"),
                Unit.seconds: ("second", "seconds"),
            },
        ),
        LocaleGrammar(
            code="ru",
            iso_code="rus",
            plural_rule="east_slavic",
            forms={
                Unit.years: ("год", "года", "лет"),
                Unit.months: ("месяц", "месяца", "месяцев"),
                Unit.days: ("день", "дня", "дней"),
                Unit.hours: ("час", "часа", "часов"),
                Unit.minutes: ("минута", "минуты", "минут"),
                Unit.seconds: ("секунда", "секунды", "секунд"),
            },
        ),
    )
}


def supported_languages() -> str:
    """Comma separated ISO 639-2 codes of the supported locales (e.g. "eng, rus")."""

    return ", ".join(grammar.iso_code for grammar in GRAMMARS.values())


def get_grammar(locale: str) -> LocaleGrammar:
    """Return the grammar for a locale code.

    Codes are matched case-insensitively on the primary language subtag, so "ru_RU" and "en-GB"
    resolve to "ru" and "en".

    Raises:
        UnsupportedLocaleError: If no grammar exists for the locale.
    """

    value = (locale or "").strip().lower().replace("-", "_")
    grammar = GRAMMARS.get(value.split("_", 1)[0])
    if grammar is None:
        raise UnsupportedLocaleError(
            f"Wrong language argument passed. Supported languages are ({supported_languages()})"
        )
    return grammar
