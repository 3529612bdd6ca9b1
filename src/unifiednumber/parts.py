"""Assembly of typed output parts from a selected pattern."""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping

from unifiednumber.config import FormatterConfig
from unifiednumber.exceptions import (
    DataIntegrityError,
    InvalidTokenError,
    UnsupportedFeatureError,
)
from unifiednumber.locale_data import LocaleData, PluralForms, lookup
from unifiednumber.patterns import Literal, tokenize_pattern
from unifiednumber.rounding import to_raw_fixed
from unifiednumber.types import (
    CURRENCY_TOKENS,
    UNIT_TOKENS,
    FormatPart,
    PartType,
    PluralSelector,
    Style,
    TokenKind,
)


_SYMBOL_PARTS = {
    TokenKind.PLUS_SIGN: (PartType.PLUS_SIGN, "plus_sign"),
    TokenKind.MINUS_SIGN: (PartType.MINUS_SIGN, "minus_sign"),
    TokenKind.PERCENT_SIGN: (PartType.PERCENT_SIGN, "percent_sign"),
    TokenKind.SCIENTIFIC_SEPARATOR: (PartType.EXPONENT_SEPARATOR, "exponential"),
}


def assemble_parts(
    config: FormatterConfig,
    locale_data: LocaleData,
    plural_selector: PluralSelector,
    digits: str,
    rounded_value: float,
    exponent: int,
    pattern: str,
) -> list[FormatPart]:
    """Walk ``pattern`` and resolve each placeholder into parts.

    Args:
        config: Resolved formatter settings
        locale_data: Locale tables
        plural_selector: Chooses plural forms of unit and currency names
        digits: Unsigned ASCII digit string with at most one ``.``
        rounded_value: Scaled and rounded value (NaN/inf allowed)
        exponent: Power of ten the value was scaled by
        pattern: Template chosen by ``select_pattern``

    Returns:
        Parts in output order

    Raises:
        InvalidTokenError: If the pattern has an unknown placeholder
        UnsupportedFeatureError: For compact placeholders
        DataIntegrityError: If a unit name is missing
    """
    symbols = locale_data.symbols
    parts: list[FormatPart] = []
    for token in tokenize_pattern(pattern):
        if isinstance(token, Literal):
            parts.append(FormatPart(PartType.LITERAL, token.text))
            continue

        kind = token.kind
        if kind == TokenKind.NUMBER:
            parts.extend(_number_parts(config, locale_data, digits, rounded_value))
        elif kind in _SYMBOL_PARTS:
            part_type, attr = _SYMBOL_PARTS[kind]
            parts.append(FormatPart(part_type, getattr(symbols, attr)))
        elif kind == TokenKind.SCIENTIFIC_EXPONENT:
            if exponent < 0:
                parts.append(FormatPart(PartType.EXPONENT_MINUS_SIGN, symbols.minus_sign))
                exponent = -exponent
            exponent_digits = to_raw_fixed(exponent, 0, 0).formatted_string
            parts.append(FormatPart(PartType.EXPONENT_INTEGER, exponent_digits))
        elif kind in UNIT_TOKENS:
            if config.style == Style.UNIT:
                name = _unit_name(config, locale_data, kind)
                value = select_plural(plural_selector, rounded_value, name)
                parts.append(FormatPart(PartType.UNIT, value))
        elif kind in CURRENCY_TOKENS:
            if config.style == Style.CURRENCY:
                value = _currency_name(config, locale_data, plural_selector, rounded_value, kind)
                parts.append(FormatPart(PartType.UNIT, value))
        elif kind in (TokenKind.COMPACT_SYMBOL, TokenKind.COMPACT_NAME):
            raise UnsupportedFeatureError("compact notation")
        else:
            raise InvalidTokenError(kind.value, pattern)
    return parts


def _number_parts(
    config: FormatterConfig,
    locale_data: LocaleData,
    digits: str,
    x: float,
) -> Iterator[FormatPart]:
    symbols = locale_data.symbols
    if math.isnan(x):
        yield FormatPart(PartType.NAN, symbols.nan)
        return
    if math.isinf(x):
        yield FormatPart(PartType.INFINITY, symbols.infinity)
        return

    table = locale_data.digits_for(config.numbering_system)
    if table is not None:
        digits = "".join(table[int(c)] if "0" <= c <= "9" else c for c in digits)

    integer, point, fraction = digits.partition(".")
    if config.use_grouping:
        groups = []
        i = len(integer) - 3
        while i > 0:
            groups.append(integer[i:i + 3])
            i -= 3
        groups.append(integer[:i + 3])
        for index, group in enumerate(reversed(groups)):
            if index:
                yield FormatPart(PartType.GROUP, symbols.group)
            yield FormatPart(PartType.INTEGER, group)
    else:
        yield FormatPart(PartType.INTEGER, integer)

    if point:
        yield FormatPart(PartType.DECIMAL, symbols.decimal)
        yield FormatPart(PartType.FRACTION, fraction)


def select_plural(selector: PluralSelector, x: float, forms: PluralForms) -> str:
    """Pick ``one`` or ``other`` from ``forms``; any other category is ``other``."""
    if isinstance(forms, str):
        return forms
    key = "one" if selector.select(x) == "one" else "other"
    try:
        return forms[key]
    except KeyError:
        raise DataIntegrityError("Missing plural form", (key,)) from None


def _unit_name(config: FormatterConfig, locale_data: LocaleData, kind: TokenKind) -> PluralForms:
    names = lookup(locale_data.units, config.unit)
    if kind.value in names:
        return names[kind.value]
    return lookup(locale_data.units, config.unit, TokenKind.UNIT_SYMBOL.value)


def _currency_name(
    config: FormatterConfig,
    locale_data: LocaleData,
    selector: PluralSelector,
    x: float,
    kind: TokenKind,
) -> str:
    code = config.currency or ""
    if kind == TokenKind.CURRENCY_CODE:
        return code
    names: Mapping[str, PluralForms] = locale_data.currencies.get(code, {})
    forms = names.get(kind.value)
    if not forms:
        return code
    return select_plural(selector, x, forms)
