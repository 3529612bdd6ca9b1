"""CLDR plural category selection.

The formatter only needs something satisfying ``PluralSelector``; this
module supplies a default implementation covering the cardinal rules of
common languages.

Usage:
    from unifiednumber.plural import CLDRPluralSelector

    CLDRPluralSelector("en").select(1)    # "one"
    CLDRPluralSelector("ru").select(5)    # "many"
    CLDRPluralSelector("ja").select(1)    # "other"
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable


class PluralCategory(str, Enum):
    """CLDR plural categories.

    Based on Unicode CLDR plural rules:
    https://cldr.unicode.org/index/cldr-spec/plural-rules
    """
    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


PluralRuleFunc = Callable[["PluralOperands"], PluralCategory]


@dataclass(frozen=True)
class PluralOperands:
    """CLDR plural operands for a number.

    See: https://unicode.org/reports/tr35/tr35-numbers.html#Operands

    Attributes:
        n: Absolute value of the source number
        i: Integer digits of n
        v: Number of visible fraction digits with trailing zeros
        w: Number of visible fraction digits without trailing zeros
        f: Visible fraction digits with trailing zeros
        t: Visible fraction digits without trailing zeros
    """
    n: float
    i: int
    v: int
    w: int
    f: int
    t: int

    @classmethod
    def from_number(cls, number: float | int | Decimal) -> "PluralOperands":
        """Create operands from a number.

        Integral floats have no visible fraction digits, so ``1.0`` and ``1``
        share operands.
        """
        if isinstance(number, float) and (math.isnan(number) or math.isinf(number)):
            return cls(n=abs(number), i=0, v=0, w=0, f=0, t=0)
        abs_n = abs(number)
        if isinstance(abs_n, float):
            # Shortest round-tripping text, never exponent form.
            text = format(Decimal(repr(abs_n)), "f")
        else:
            text = format(Decimal(abs_n), "f")
        integer, _, fraction = text.partition(".")
        if isinstance(number, float) and fraction.strip("0") == "":
            fraction = ""
        trimmed = fraction.rstrip("0")
        return cls(
            n=float(abs_n),
            i=int(integer),
            v=len(fraction),
            w=len(trimmed),
            f=int(fraction) if fraction else 0,
            t=int(trimmed) if trimmed else 0,
        )


# ==========================================
# CARDINAL RULES
# ==========================================

def _english(op: PluralOperands) -> PluralCategory:
    # one: i = 1 and v = 0
    if op.i == 1 and op.v == 0:
        return PluralCategory.ONE
    return PluralCategory.OTHER


def _french(op: PluralOperands) -> PluralCategory:
    # one: i = 0,1
    if op.i in (0, 1):
        return PluralCategory.ONE
    return PluralCategory.OTHER


def _no_plural(op: PluralOperands) -> PluralCategory:
    return PluralCategory.OTHER


def _slavic(op: PluralOperands) -> PluralCategory:
    i10 = op.i % 10
    i100 = op.i % 100
    if op.v == 0 and i10 == 1 and i100 != 11:
        return PluralCategory.ONE
    if op.v == 0 and 2 <= i10 <= 4 and not 12 <= i100 <= 14:
        return PluralCategory.FEW
    if op.v == 0 and (i10 == 0 or 5 <= i10 <= 9 or 11 <= i100 <= 14):
        return PluralCategory.MANY
    return PluralCategory.OTHER


def _polish(op: PluralOperands) -> PluralCategory:
    i10 = op.i % 10
    i100 = op.i % 100
    if op.i == 1 and op.v == 0:
        return PluralCategory.ONE
    if op.v == 0 and 2 <= i10 <= 4 and not 12 <= i100 <= 14:
        return PluralCategory.FEW
    if op.v == 0 and (op.i != 1 and i10 in (0, 1) or 5 <= i10 <= 9 or 12 <= i100 <= 14):
        return PluralCategory.MANY
    return PluralCategory.OTHER


def _czech(op: PluralOperands) -> PluralCategory:
    if op.i == 1 and op.v == 0:
        return PluralCategory.ONE
    if 2 <= op.i <= 4 and op.v == 0:
        return PluralCategory.FEW
    if op.v != 0:
        return PluralCategory.MANY
    return PluralCategory.OTHER


def _arabic(op: PluralOperands) -> PluralCategory:
    n100 = op.n % 100
    if op.n == 0:
        return PluralCategory.ZERO
    if op.n == 1:
        return PluralCategory.ONE
    if op.n == 2:
        return PluralCategory.TWO
    if op.n.is_integer() and 3 <= n100 <= 10:
        return PluralCategory.FEW
    if op.n.is_integer() and 11 <= n100 <= 99:
        return PluralCategory.MANY
    return PluralCategory.OTHER


def _hebrew(op: PluralOperands) -> PluralCategory:
    if op.i == 1 and op.v == 0:
        return PluralCategory.ONE
    if op.i == 2 and op.v == 0:
        return PluralCategory.TWO
    return PluralCategory.OTHER


def _romanian(op: PluralOperands) -> PluralCategory:
    n100 = op.n % 100
    if op.i == 1 and op.v == 0:
        return PluralCategory.ONE
    if op.v != 0 or op.n == 0 or (op.n.is_integer() and 1 <= n100 <= 19):
        return PluralCategory.FEW
    return PluralCategory.OTHER


_CARDINAL_RULES: dict[str, PluralRuleFunc] = {}

for _lang in ("en", "de", "nl", "it", "es", "ca", "gl", "da", "no", "nb", "nn",
              "sv", "fi", "et", "hu", "tr", "el", "bg", "ms", "tl"):
    _CARDINAL_RULES[_lang] = _english
for _lang in ("fr", "pt"):
    _CARDINAL_RULES[_lang] = _french
for _lang in ("ja", "ko", "zh", "vi", "th", "id", "lo", "my"):
    _CARDINAL_RULES[_lang] = _no_plural
for _lang in ("ru", "uk", "be", "sr", "hr", "bs"):
    _CARDINAL_RULES[_lang] = _slavic
_CARDINAL_RULES["pl"] = _polish
_CARDINAL_RULES["cs"] = _czech
_CARDINAL_RULES["sk"] = _czech
_CARDINAL_RULES["ar"] = _arabic
_CARDINAL_RULES["he"] = _hebrew
_CARDINAL_RULES["ro"] = _romanian


def register_rule(language: str, rule: PluralRuleFunc) -> None:
    """Register a custom cardinal rule for ``language``."""
    _CARDINAL_RULES[language] = rule


def get_supported_languages() -> list[str]:
    """Languages with a registered cardinal rule."""
    return sorted(_CARDINAL_RULES)


class CLDRPluralSelector:
    """Cardinal plural selector for one locale.

    Example:
        selector = CLDRPluralSelector("ru-RU")
        selector.select(2)   # "few"

    Unknown languages always select ``other``.
    """

    def __init__(self, locale: str) -> None:
        self.locale = locale
        language = locale.replace("_", "-").split("-")[0].lower()
        self._rule = _CARDINAL_RULES.get(language, _no_plural)

    def category(self, number: float | int | Decimal) -> PluralCategory:
        """Plural category as an enum member."""
        return self._rule(PluralOperands.from_number(number))

    def select(self, number: float | int | Decimal) -> str:
        """Plural category name, e.g. ``"one"``."""
        return self.category(number).value

    def __repr__(self) -> str:
        return f"CLDRPluralSelector({self.locale!r})"
