"""Core type definitions for number formatting.

This module defines the closed enumerations used as keys in locale data
tables, together with the small value objects that flow through the
formatting pipeline.

Enums:
- Style, SignDisplay, Notation, RoundingType: formatter options
- UnitDisplay, CurrencyDisplay, CurrencySign, CompactDisplay: display variants
- NotationCategory, SignClass: pattern table keys
- TokenKind: placeholders allowed inside pattern templates
- PartType: tags of the produced output fragments
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


# ==============================================================================
# Options
# ==============================================================================

class Style(str, Enum):
    """Number formatting style."""
    DECIMAL = "decimal"
    PERCENT = "percent"
    CURRENCY = "currency"
    UNIT = "unit"


class SignDisplay(str, Enum):
    """When to display the sign."""
    AUTO = "auto"              # negative numbers only
    ALWAYS = "always"
    NEVER = "never"
    EXCEPT_ZERO = "exceptZero"


class Notation(str, Enum):
    """Magnitude display mode."""
    STANDARD = "standard"
    SCIENTIFIC = "scientific"
    ENGINEERING = "engineering"
    COMPACT = "compact"


class RoundingType(str, Enum):
    """Which digit bounds drive rounding."""
    FRACTION_DIGITS = "fractionDigits"
    SIGNIFICANT_DIGITS = "significantDigits"
    COMPACT_ROUNDING = "compactRounding"


class UnitDisplay(str, Enum):
    SHORT = "short"
    NARROW = "narrow"
    LONG = "long"


class CurrencyDisplay(str, Enum):
    SYMBOL = "symbol"
    NARROW_SYMBOL = "narrowSymbol"
    CODE = "code"
    NAME = "name"


class CurrencySign(str, Enum):
    STANDARD = "standard"
    ACCOUNTING = "accounting"


class CompactDisplay(str, Enum):
    SHORT = "short"
    LONG = "long"


# ==============================================================================
# Pattern table keys
# ==============================================================================

class NotationCategory(str, Enum):
    """Notation bucket of a pattern table."""
    STANDARD = "standard"
    SCIENTIFIC = "scientific"
    COMPACT_SHORT = "compactShort"
    COMPACT_LONG = "compactLong"


class SignClass(str, Enum):
    """Sign bucket of a pattern table, chosen from the rounded value."""
    POSITIVE = "positivePattern"
    ZERO = "zeroPattern"
    NEGATIVE = "negativePattern"


class TokenKind(str, Enum):
    """Placeholders recognised inside ``{...}`` in a pattern template."""
    NUMBER = "number"
    PLUS_SIGN = "plusSign"
    MINUS_SIGN = "minusSign"
    PERCENT_SIGN = "percentSign"
    UNIT_SYMBOL = "unitSymbol"
    UNIT_NARROW_SYMBOL = "unitNarrowSymbol"
    UNIT_NAME = "unitName"
    CURRENCY_CODE = "currencyCode"
    CURRENCY_SYMBOL = "currencySymbol"
    CURRENCY_NARROW_SYMBOL = "currencyNarrowSymbol"
    CURRENCY_NAME = "currencyName"
    SCIENTIFIC_SEPARATOR = "scientificSeparator"
    SCIENTIFIC_EXPONENT = "scientificExponent"
    COMPACT_SYMBOL = "compactSymbol"
    COMPACT_NAME = "compactName"


UNIT_TOKENS = frozenset({
    TokenKind.UNIT_SYMBOL,
    TokenKind.UNIT_NARROW_SYMBOL,
    TokenKind.UNIT_NAME,
})

CURRENCY_TOKENS = frozenset({
    TokenKind.CURRENCY_CODE,
    TokenKind.CURRENCY_SYMBOL,
    TokenKind.CURRENCY_NARROW_SYMBOL,
    TokenKind.CURRENCY_NAME,
})


# ==============================================================================
# Output
# ==============================================================================

class PartType(str, Enum):
    """Type tag of a formatted fragment."""
    LITERAL = "literal"
    INTEGER = "integer"
    GROUP = "group"
    DECIMAL = "decimal"
    FRACTION = "fraction"
    PLUS_SIGN = "plusSign"
    MINUS_SIGN = "minusSign"
    PERCENT_SIGN = "percentSign"
    UNIT = "unit"
    EXPONENT_SEPARATOR = "exponentSeparator"
    EXPONENT_MINUS_SIGN = "exponentMinusSign"
    EXPONENT_INTEGER = "exponentInteger"
    NAN = "nan"
    INFINITY = "infinity"


@dataclass(frozen=True)
class FormatPart:
    """One typed fragment of a formatted number.

    Attributes:
        type: Fragment tag
        value: Localized text of the fragment
    """
    type: PartType
    value: str

    def to_dict(self) -> dict[str, str]:
        """Convert to a plain ``{"type", "value"}`` mapping."""
        return {"type": self.type.value, "value": self.value}


@dataclass(frozen=True)
class RawFormatResult:
    """Result of rounding a non-negative number to a digit string.

    Attributes:
        formatted_string: ASCII digits with at most one ``.``
        rounded_number: The value after rounding
        integer_digits_count: Digits before the decimal point
    """
    formatted_string: str
    rounded_number: float
    integer_digits_count: int


@runtime_checkable
class PluralSelector(Protocol):
    """Anything that maps a number to a CLDR plural category name."""

    def select(self, number: float) -> str:
        ...
