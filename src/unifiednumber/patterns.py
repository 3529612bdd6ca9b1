"""Pattern selection and tokenization.

A pattern is a locale template such as ``"{minusSign}{number} {unitName}"``
chosen by style, sign display policy, notation and the sign of the rounded
value. ``tokenize_pattern`` splits it once into literal runs and typed
placeholders; results are cached per template string.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from functools import lru_cache

from unifiednumber.config import FormatterConfig
from unifiednumber.exceptions import (
    DataIntegrityError,
    InvalidTokenError,
    UnsupportedFeatureError,
)
from unifiednumber.locale_data import LocaleData, lookup
from unifiednumber.types import (
    CompactDisplay,
    Notation,
    NotationCategory,
    SignClass,
    Style,
    TokenKind,
)


_PLACEHOLDER_RE = re.compile(r"(\{\w+\})")


@dataclass(frozen=True)
class Literal:
    """Verbatim text between placeholders."""
    text: str


@dataclass(frozen=True)
class Placeholder:
    """A ``{token}`` slot in a pattern."""
    kind: TokenKind


PatternToken = Literal | Placeholder


@lru_cache(maxsize=256)
def tokenize_pattern(pattern: str) -> tuple[PatternToken, ...]:
    """Split ``pattern`` into literal runs and placeholders.

    Raises:
        InvalidTokenError: If a placeholder is not a known TokenKind
    """
    tokens: list[PatternToken] = []
    for chunk in _PLACEHOLDER_RE.split(pattern):
        if not chunk:
            continue
        if chunk[0] == "{" and chunk[-1] == "}":
            name = chunk[1:-1]
            try:
                tokens.append(Placeholder(TokenKind(name)))
            except ValueError:
                raise InvalidTokenError(name, pattern) from None
        else:
            tokens.append(Literal(chunk))
    return tuple(tokens)


def sign_class(x: float) -> SignClass:
    """Sign bucket of a rounded value; negative zero counts as negative."""
    if not math.isnan(x) and (x < 0 or math.copysign(1.0, x) < 0):
        return SignClass.NEGATIVE
    if x == 0:
        return SignClass.ZERO
    return SignClass.POSITIVE


def notation_category(config: FormatterConfig, exponent: int) -> NotationCategory:
    if config.notation in (Notation.SCIENTIFIC, Notation.ENGINEERING):
        return NotationCategory.SCIENTIFIC
    if exponent != 0:
        if config.compact_display == CompactDisplay.LONG:
            return NotationCategory.COMPACT_LONG
        return NotationCategory.COMPACT_SHORT
    return NotationCategory.STANDARD


def select_pattern(
    config: FormatterConfig,
    locale_data: LocaleData,
    rounded_value: float,
    exponent: int,
) -> str:
    """Pick the template for the final scaled and rounded value.

    Args:
        config: Resolved formatter settings
        locale_data: Locale tables
        rounded_value: Value after scaling and rounding (NaN/inf allowed)
        exponent: Power of ten the value was scaled by

    Returns:
        Template string

    Raises:
        UnsupportedFeatureError: For currency style or compact notation
        DataIntegrityError: If the table has no entry for the combination
    """
    if config.style == Style.CURRENCY:
        raise UnsupportedFeatureError("currency style")
    if config.notation == Notation.COMPACT:
        raise UnsupportedFeatureError("compact notation")

    if config.style == Style.UNIT:
        path = (config.unit, config.unit_display)
        tables = lookup(locale_data.unit_patterns, *path)
    else:
        path = (config.style,)
        tables = lookup(locale_data.patterns, *path)

    keys = (
        config.sign_display,
        notation_category(config, exponent),
        sign_class(rounded_value),
    )
    try:
        return lookup(tables, *keys)
    except DataIntegrityError:
        raise DataIntegrityError("Missing pattern", path + keys) from None
