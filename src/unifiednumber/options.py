"""Resolution of user-facing options into a ``FormatterConfig``.

Options use the snake_case spelling of the ECMA-402 option names
(``minimum_fraction_digits``, ``sign_display``, ...). Values may be enum
members or their string values.

Usage:
    config = resolve_options("en", style="percent", maximum_fraction_digits=1)
    config.rounding_type       # RoundingType.FRACTION_DIGITS
    config.minimum_fraction_digits, config.maximum_fraction_digits  # (0, 1)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from unifiednumber.config import FormatterConfig
from unifiednumber.exceptions import InvalidOptionError
from unifiednumber.locale_data import LocaleData
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


E = TypeVar("E", bound=Enum)

KNOWN_OPTIONS = frozenset({
    "numbering_system",
    "style",
    "currency",
    "currency_display",
    "currency_sign",
    "unit",
    "unit_display",
    "notation",
    "compact_display",
    "sign_display",
    "use_grouping",
    "minimum_integer_digits",
    "minimum_fraction_digits",
    "maximum_fraction_digits",
    "minimum_significant_digits",
    "maximum_significant_digits",
})


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(word.capitalize() for word in rest)


def get_enum_option(options: dict[str, Any], name: str, enum_cls: type[E], default: E) -> E:
    """Read an enum option, accepting members or their values."""
    value = options.get(name)
    if value is None:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(repr(member.value) for member in enum_cls)
        raise InvalidOptionError(
            _camel(name), f"expected one of {allowed}, got {value!r}"
        ) from None


def get_number_option(
    options: dict[str, Any],
    name: str,
    minimum: int,
    maximum: int,
    default: int | None,
) -> int | None:
    """Read an integer option within ``[minimum, maximum]``."""
    return default_number_option(options.get(name), name, minimum, maximum, default)


def default_number_option(
    value: Any,
    name: str,
    minimum: int,
    maximum: int,
    default: int | None,
) -> int | None:
    if value is None:
        return default
    if isinstance(value, bool):
        raise InvalidOptionError(_camel(name), f"expected an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidOptionError(_camel(name), f"expected an integer, got {value!r}") from None
    if number != value and not isinstance(value, str):
        raise InvalidOptionError(_camel(name), f"expected an integer, got {value!r}")
    if not minimum <= number <= maximum:
        raise InvalidOptionError(
            _camel(name), f"must be between {minimum} and {maximum}, got {number}"
        )
    return number


def resolve_options(
    locale: str,
    locale_data: LocaleData | None = None,
    **options: Any,
) -> FormatterConfig:
    """Apply defaults and range checks to formatter options.

    Args:
        locale: Resolved locale tag
        locale_data: Locale tables; supplies the default numbering system
        **options: Formatter options, see ``KNOWN_OPTIONS``

    Returns:
        The immutable resolved configuration

    Raises:
        InvalidOptionError: For unknown options, bad enum values, out of range
            digits, or a missing currency/unit for those styles
    """
    unknown = set(options) - KNOWN_OPTIONS
    if unknown:
        raise InvalidOptionError(sorted(unknown)[0], "unknown option")

    style = get_enum_option(options, "style", Style, Style.DECIMAL)
    currency = options.get("currency")
    unit = options.get("unit")
    if style == Style.CURRENCY:
        if not currency:
            raise InvalidOptionError("currency", "currency code is required with currency style")
        currency = str(currency).upper()
    elif style == Style.UNIT and not unit:
        raise InvalidOptionError("unit", "unit is required with unit style")

    if style == Style.CURRENCY:
        # Minor-unit digits are not looked up per currency.
        mnfd_default, mxfd_default = 2, 2
    else:
        mnfd_default = 0
        mxfd_default = 0 if style == Style.PERCENT else 3

    notation = get_enum_option(options, "notation", Notation, Notation.STANDARD)

    digits: dict[str, Any] = {
        "minimum_integer_digits": get_number_option(options, "minimum_integer_digits", 1, 21, 1),
        "minimum_fraction_digits": None,
        "maximum_fraction_digits": None,
    }
    mnsd = options.get("minimum_significant_digits")
    mxsd = options.get("maximum_significant_digits")
    mnfd = options.get("minimum_fraction_digits")
    mxfd = options.get("maximum_fraction_digits")
    if mnsd is not None or mxsd is not None:
        mnsd = default_number_option(mnsd, "minimum_significant_digits", 1, 21, 1)
        digits.update(
            rounding_type=RoundingType.SIGNIFICANT_DIGITS,
            minimum_significant_digits=mnsd,
            maximum_significant_digits=default_number_option(
                mxsd, "maximum_significant_digits", mnsd, 21, 21
            ),
        )
    elif mnfd is not None or mxfd is not None:
        mnfd = default_number_option(mnfd, "minimum_fraction_digits", 0, 20, mnfd_default)
        digits.update(
            rounding_type=RoundingType.FRACTION_DIGITS,
            minimum_fraction_digits=mnfd,
            maximum_fraction_digits=default_number_option(
                mxfd, "maximum_fraction_digits", mnfd, 20, max(mnfd, mxfd_default)
            ),
        )
    elif notation == Notation.COMPACT:
        digits["rounding_type"] = RoundingType.COMPACT_ROUNDING
    else:
        digits.update(
            rounding_type=RoundingType.FRACTION_DIGITS,
            minimum_fraction_digits=mnfd_default,
            maximum_fraction_digits=mxfd_default,
        )

    compact_display = None
    if notation == Notation.COMPACT:
        compact_display = get_enum_option(
            options, "compact_display", CompactDisplay, CompactDisplay.SHORT
        )

    numbering_system = options.get("numbering_system")
    if numbering_system is None:
        numbering_system = locale_data.default_numbering_system if locale_data else "latn"

    use_grouping = options.get("use_grouping")
    return FormatterConfig(
        locale=locale,
        numbering_system=numbering_system,
        style=style,
        currency=currency,
        currency_display=get_enum_option(
            options, "currency_display", CurrencyDisplay, CurrencyDisplay.SYMBOL
        ),
        currency_sign=get_enum_option(
            options, "currency_sign", CurrencySign, CurrencySign.STANDARD
        ),
        unit=unit,
        unit_display=get_enum_option(options, "unit_display", UnitDisplay, UnitDisplay.SHORT),
        notation=notation,
        compact_display=compact_display,
        sign_display=get_enum_option(options, "sign_display", SignDisplay, SignDisplay.AUTO),
        use_grouping=True if use_grouping is None else bool(use_grouping),
        **digits,
    )
