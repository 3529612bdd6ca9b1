"""Resolved formatter configuration."""

from __future__ import annotations

from dataclasses import dataclass

from unifiednumber.exceptions import InvalidOptionError
from unifiednumber.types import (
    CompactDisplay,
    CurrencyDisplay,
    CurrencySign,
    Notation,
    RoundingType,
    SignDisplay,
    Style,
    UnitDisplay,
)


@dataclass(frozen=True)
class FormatterConfig:
    """Immutable, fully resolved formatter settings.

    Built once (usually by ``resolve_options``) and threaded through every
    stage of the pipeline. Exactly one digit pair is active: the fraction
    pair for ``FRACTION_DIGITS``, the significant pair for
    ``SIGNIFICANT_DIGITS``, neither for ``COMPACT_ROUNDING``. Inactive
    bounds are reset to None.

    Attributes:
        locale: Resolved locale tag
        numbering_system: Numbering system id used for digit substitution
        style: Formatting style
        currency: ISO 4217 code (currency style only)
        currency_display: Currency display variant
        currency_sign: Currency sign variant
        unit: Unit identifier (unit style only)
        unit_display: Unit display variant
        notation: Magnitude notation
        compact_display: Compact display variant (compact notation only)
        sign_display: Sign display policy
        rounding_type: Which digit bounds drive rounding
        minimum_integer_digits: Left zero-padding target
        minimum_fraction_digits: Lower fraction bound
        maximum_fraction_digits: Upper fraction bound
        minimum_significant_digits: Lower significant bound
        maximum_significant_digits: Upper significant bound
        use_grouping: Whether to insert group separators
    """
    locale: str = "en"
    numbering_system: str = "latn"
    style: Style = Style.DECIMAL
    currency: str | None = None
    currency_display: CurrencyDisplay = CurrencyDisplay.SYMBOL
    currency_sign: CurrencySign = CurrencySign.STANDARD
    unit: str | None = None
    unit_display: UnitDisplay = UnitDisplay.SHORT
    notation: Notation = Notation.STANDARD
    compact_display: CompactDisplay | None = None
    sign_display: SignDisplay = SignDisplay.AUTO
    rounding_type: RoundingType = RoundingType.FRACTION_DIGITS
    minimum_integer_digits: int = 1
    minimum_fraction_digits: int | None = 0
    maximum_fraction_digits: int | None = 3
    minimum_significant_digits: int | None = None
    maximum_significant_digits: int | None = None
    use_grouping: bool = True

    def __post_init__(self) -> None:
        if self.minimum_integer_digits < 1:
            raise InvalidOptionError(
                "minimumIntegerDigits", f"must be >= 1, got {self.minimum_integer_digits}"
            )
        if self.rounding_type == RoundingType.FRACTION_DIGITS:
            self._check_pair(
                "FractionDigits",
                self.minimum_fraction_digits,
                self.maximum_fraction_digits,
                lowest=0,
            )
        elif self.rounding_type == RoundingType.SIGNIFICANT_DIGITS:
            self._check_pair(
                "SignificantDigits",
                self.minimum_significant_digits,
                self.maximum_significant_digits,
                lowest=1,
            )

        # Only the pair that drives rounding stays set.
        if self.rounding_type != RoundingType.FRACTION_DIGITS:
            object.__setattr__(self, "minimum_fraction_digits", None)
            object.__setattr__(self, "maximum_fraction_digits", None)
        if self.rounding_type != RoundingType.SIGNIFICANT_DIGITS:
            object.__setattr__(self, "minimum_significant_digits", None)
            object.__setattr__(self, "maximum_significant_digits", None)

    @staticmethod
    def _check_pair(name: str, low: int | None, high: int | None, lowest: int) -> None:
        if low is None or high is None:
            raise InvalidOptionError(
                f"minimum{name}", f"minimum and maximum {name} are both required"
            )
        if not lowest <= low <= high:
            raise InvalidOptionError(
                f"minimum{name}",
                f"expected {lowest} <= minimum <= maximum, got {low} and {high}",
            )
