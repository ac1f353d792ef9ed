"""Pluralize and join decomposed duration components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from src.interval.decompose import DurationComponents
from src.interval.errors import InvalidArgumentError
from src.interval.grammar import LocaleGrammar, get_grammar
from src.interval.plural import select_form

MIN_UNITS = 1
MAX_UNITS = 6

Alignment = Literal["unit", "right"]


@dataclass(frozen=True)
class FormatRequest:
    """Everything the formatter needs to render one duration."""

    components: DurationComponents
    max_units: int
    separator: str
    locale: str
    alignment: Alignment = "unit"


def _whole_number(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_max_units(value: Any) -> int:
    """Coerce `value` into an int within [1, 6].

    Whole numbers are accepted as ints, floats or numeric strings ("3", "3.0"), since template
    arguments often arrive as text.

    Raises:
        InvalidArgumentError: If the value is not an integer in range.
    """

    number = _whole_number(value)
    if number is None or number < MIN_UNITS or number > MAX_UNITS:
        raise InvalidArgumentError(
            f"Max number of units should be a number between {MIN_UNITS} and {MAX_UNITS}."
        )
    return number


def pair_units(
        components: DurationComponents,
        grammar: LocaleGrammar,
        alignment: Alignment = "unit",
) -> list[tuple[int, tuple[str, ...]]]:
    """Pair every non-zero magnitude with the word forms it is rendered with.

    `alignment="unit"` keeps each magnitude with its own unit.

    `alignment="right"` reproduces the legacy pairing: the last `n` word groups of the locale are
    matched, in order, to the `n` non-zero magnitudes. It only agrees with "unit" when all
    dropped zeros precede the first non-zero unit (1 year 0 months 3 days would read as
    "1 minute 3 seconds").
    """

    non_zero = components.non_zero()
    if alignment == "unit":
        return [(value, grammar.forms[unit]) for unit, value in non_zero]
    if alignment == "right":
        groups = grammar.forms_in_order()[len(grammar.forms) - len(non_zero):]
        return [(value, forms) for (_, value), forms in zip(non_zero, groups)]
    raise InvalidArgumentError(f"Unknown unit alignment: {alignment}")


def render_unit(number: int, forms: tuple[str, ...], grammar: LocaleGrammar) -> str:
    """Render `"<number> <word>"` with the plural form the locale requires."""

    return f"{number} {select_form(grammar.plural_rule, number, forms)}"


def format_request(request: FormatRequest) -> str:
    """Render at most `max_units` leading non-zero components joined by `separator`.

    Raises:
        InvalidArgumentError: If `max_units` is outside [1, 6].
        UnsupportedLocaleError: If the locale has no grammar table.
    """

    max_units = validate_max_units(request.max_units)
    grammar = get_grammar(request.locale)

    pairs = pair_units(request.components, grammar, request.alignment)[:max_units]
    return request.separator.join(render_unit(number, forms, grammar) for number, forms in pairs)


def format_components(
        components: DurationComponents,
        max_units: int,
        separator: str,
        locale: str,
        *,
        alignment: Alignment = "unit",
) -> str:
    """Format decomposed components (convenience wrapper around `format_request`)."""

    return format_request(
        FormatRequest(
            components=components,
            max_units=max_units,
            separator=separator,
            locale=locale,
            alignment=alignment,
        )
    )

