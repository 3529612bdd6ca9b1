"""Locale-aware number formatter.

``NumberFormat`` ties the pipeline together: scale for percent style,
compute the notation exponent, round, select the pattern, and assemble the
parts.

Usage:
    from unifiednumber import NumberFormat, LocaleData

    fmt = NumberFormat.create("en", style="unit", unit="kilometer",
                              unit_display="long")
    fmt.format(1)        # "1 kilometer"
    fmt.format(1234.5)   # "1,234.5 kilometers"

    NumberFormat.create("en", notation="scientific").format_to_parts(-0.00123)
    # [minusSign "-", integer "1", decimal ".", fraction "23",
    #  exponentSeparator "E", exponentMinusSign "-", exponentInteger "3"]
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from unifiednumber.config import FormatterConfig
from unifiednumber.exponent import compute_exponent
from unifiednumber.loader import LocaleRegistry, get_registry, normalize_tag
from unifiednumber.locale_data import LocaleData
from unifiednumber.options import resolve_options
from unifiednumber.parts import assemble_parts
from unifiednumber.patterns import select_pattern
from unifiednumber.plural import CLDRPluralSelector
from unifiednumber.rounding import format_number_to_string, scale, to_decimal
from unifiednumber.types import FormatPart, PluralSelector, Style


_RESOLVED_OPTION_NAMES = (
    ("locale", "locale"),
    ("numberingSystem", "numbering_system"),
    ("style", "style"),
    ("currency", "currency"),
    ("currencyDisplay", "currency_display"),
    ("currencySign", "currency_sign"),
    ("unit", "unit"),
    ("unitDisplay", "unit_display"),
    ("minimumIntegerDigits", "minimum_integer_digits"),
    ("minimumFractionDigits", "minimum_fraction_digits"),
    ("maximumFractionDigits", "maximum_fraction_digits"),
    ("minimumSignificantDigits", "minimum_significant_digits"),
    ("maximumSignificantDigits", "maximum_significant_digits"),
    ("useGrouping", "use_grouping"),
    ("notation", "notation"),
    ("compactDisplay", "compact_display"),
    ("signDisplay", "sign_display"),
)


class NumberFormat:
    """Formats numbers for one locale and one set of options.

    Instances are immutable and safe to share between threads.

    Args:
        locale_data: Locale tables
        config: Resolved settings
        plural_selector: Plural rules for unit/currency names; defaults to
            ``CLDRPluralSelector`` for the config locale
    """

    def __init__(
        self,
        locale_data: LocaleData,
        config: FormatterConfig,
        plural_selector: PluralSelector | None = None,
    ) -> None:
        self._locale_data = locale_data
        self._config = config
        self._plural_selector = plural_selector or CLDRPluralSelector(config.locale)

    @classmethod
    def create(
        cls,
        locales: str | Iterable[str],
        *,
        registry: LocaleRegistry | None = None,
        plural_selector: PluralSelector | None = None,
        **options: Any,
    ) -> "NumberFormat":
        """Build a formatter from registered locale data and raw options.

        Args:
            locales: Requested locale tag, or tags in preference order
            registry: Where to find locale data (module registry by default)
            plural_selector: Override the default plural rules
            **options: Formatter options, see ``resolve_options``

        Raises:
            DataIntegrityError: If no requested locale has data
            InvalidOptionError: If options are invalid
        """
        registry = registry if registry is not None else get_registry()
        requested = [locales] if isinstance(locales, str) else list(locales)
        locale_data = registry.lookup(requested)
        if locale_data is None:
            # Raises with the first requested tag in the message.
            locale_data = registry.get(requested[0] if requested else "")
        config = resolve_options(normalize_tag(locale_data.locale), locale_data, **options)
        return cls(locale_data, config, plural_selector)

    @staticmethod
    def supported_locales_of(
        locales: str | Iterable[str],
        registry: LocaleRegistry | None = None,
    ) -> list[str]:
        """Requested locales that have registered data."""
        registry = registry if registry is not None else get_registry()
        requested = [locales] if isinstance(locales, str) else list(locales)
        return registry.supported(requested)

    @property
    def config(self) -> FormatterConfig:
        return self._config

    @property
    def locale_data(self) -> LocaleData:
        return self._locale_data

    def format(self, number: float | int | Decimal) -> str:
        """Format ``number`` to a string."""
        return "".join(part.value for part in self.format_to_parts(number))

    def format_to_parts(self, number: float | int | Decimal) -> list[FormatPart]:
        """Format ``number`` to typed parts.

        NaN and infinities are valid input and produce ``nan`` and
        ``infinity`` parts.

        Raises:
            UnsupportedFeatureError: Currency style or compact notation
            DataIntegrityError: Locale data lacks a needed entry
            InvalidTokenError: A pattern has an unknown placeholder
        """
        config = self._config
        x = float(number)
        exponent = 0
        digits = ""
        if math.isfinite(x):
            value = to_decimal(x)
            if config.style == Style.PERCENT:
                value = scale(value, 2)
            exponent = compute_exponent(config, value)
            result = format_number_to_string(config, scale(value, -exponent))
            digits = result.formatted_string
            x = result.rounded_number

        pattern = select_pattern(config, self._locale_data, x, exponent)
        return assemble_parts(
            config,
            self._locale_data,
            self._plural_selector,
            digits,
            x,
            exponent,
            pattern,
        )

    def resolved_options(self) -> dict[str, Any]:
        """Resolved settings under their camelCase option names."""
        resolved = {}
        for name, attr in _RESOLVED_OPTION_NAMES:
            value = getattr(self._config, attr)
            if value is None:
                continue
            resolved[name] = getattr(value, "value", value)
        return resolved

    def __repr__(self) -> str:
        return (
            f"NumberFormat(locale={self._config.locale!r}, "
            f"style={self._config.style.value!r}, "
            f"notation={self._config.notation.value!r})"
        )
