"""Plural form selection rules.

A rule maps a non-negative magnitude to the index of a word form. Locales refer to rules by name
in the grammar table, so a new language reusing an existing rule needs no code.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class PluralRule:
    """A named plural rule and the number of word forms it selects from."""

    name: str
    form_count: int
    select: Callable[[int], int]


def _one_other(number: int) -> int:
    return 0 if number == 1 else 1


_EAST_SLAVIC_CASES: tuple[int, ...] = (2, 0, 1, 1, 1, 2)


def _east_slavic(number: int) -> int:
    """Select singular (0), few (1) or many (2).

    21 -> "год", 22 -> "года", 25 -> "лет"; 11..14 always take the "many" form.
    """

    if 5 <= number % 100 <= 19:
        return 2
    return _EAST_SLAVIC_CASES[min(number % 10, 5)]


PLURAL_RULES: dict[str, PluralRule] = {
    rule.name: rule
    for rule in (
        PluralRule(name="one_other", form_count=2, select=_one_other),
        PluralRule(name="east_slavic", form_count=3, select=_east_slavic),
    )
}


def select_form(rule_name: str, number: int, forms: tuple[str, ...]) -> str:
    """Return the word form matching `number` under the named rule."""

    return forms[PLURAL_RULES[rule_name].select(number)]
