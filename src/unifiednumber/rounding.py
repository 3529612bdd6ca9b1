"""Raw digit-string generation.

Converts a non-negative number into a decimal digit string under either
fixed fraction-digit bounds or significant-digit bounds.

Floats enter as their shortest round-tripping decimal text (``0.1`` is
``Decimal("0.1")``, not its binary expansion), and all arithmetic from there
on is exact, so scaling by a power of ten never picks up binary artifacts.
Ties are broken upward: a scaled value that sits exactly halfway between
two integers rounds to the larger one.

Usage:
    from unifiednumber.rounding import to_raw_fixed, to_raw_precision

    to_raw_fixed(1234.5678, 0, 2).formatted_string     # "1234.57"
    to_raw_precision(0.000123456, 1, 3).formatted_string  # "0.000123"
"""

from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Context, Decimal

from unifiednumber.config import FormatterConfig
from unifiednumber.types import RawFormatResult, RoundingType


# Wide enough for any scaled double, subnormals included.
_CONTEXT = Context(prec=2000, rounding=ROUND_HALF_UP, Emax=MAX_EMAX, Emin=MIN_EMIN)

Number = float | int | Decimal


def to_decimal(x: Number) -> Decimal:
    """Decimal value of ``x``; floats use their shortest repr."""
    if isinstance(x, Decimal):
        return x
    if isinstance(x, float):
        return Decimal(repr(x))
    return Decimal(x)


def scale(x: Number, exponent: int) -> Decimal:
    """Exact value of ``x * 10**exponent``."""
    return to_decimal(x).scaleb(exponent, context=_CONTEXT)


def _round_half_up(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_HALF_UP, context=_CONTEXT))


def _trim_zeros(digits: str, cut: int) -> str:
    while cut > 0 and digits.endswith("0"):
        digits = digits[:-1]
        cut -= 1
    if digits.endswith("."):
        digits = digits[:-1]
    return digits


def to_raw_fixed(x: Number, min_fraction: int, max_fraction: int) -> RawFormatResult:
    """Round ``x`` to at most ``max_fraction`` fraction digits.

    Trailing zeros are removed down to ``min_fraction`` digits, and a
    dangling decimal point is dropped.

    Args:
        x: Non-negative finite number
        min_fraction: Fraction digits always kept
        max_fraction: Fraction digits rounded to

    Returns:
        RawFormatResult with the rounded value ``n / 10**max_fraction``
    """
    f = max_fraction
    n = _round_half_up(to_decimal(x).scaleb(f, context=_CONTEXT))
    rounded = float(Decimal(n).scaleb(-f, context=_CONTEXT))

    digits = str(n)
    if f != 0:
        k = len(digits)
        if k <= f:
            digits = "0" * (f + 1 - k) + digits
            k = f + 1
        integer, fraction = digits[: k - f], digits[k - f:]
        digits = f"{integer}.{fraction}"
        integer_digits = len(integer)
    else:
        integer_digits = len(digits)

    digits = _trim_zeros(digits, max_fraction - min_fraction)
    return RawFormatResult(digits, rounded, integer_digits)


def to_raw_precision(x: Number, min_precision: int, max_precision: int) -> RawFormatResult:
    """Round ``x`` to ``max_precision`` significant digits.

    Trailing fraction zeros are removed down to ``min_precision``
    significant digits. Integral results are padded with zeros instead.

    Args:
        x: Non-negative finite number
        min_precision: Significant digits always kept
        max_precision: Significant digits rounded to

    Returns:
        RawFormatResult with the rounded value ``n * 10**(e - p + 1)``
    """
    p = max_precision
    if x == 0:
        digits = "0" * p
        e = 0
        rounded = 0.0
    else:
        d = to_decimal(x)
        e = d.adjusted()
        n = _round_half_up(d.scaleb(p - 1 - e, context=_CONTEXT))
        if n >= 10 ** p:
            # Rounding carried into a new leading digit (9.99 -> 10.0).
            n //= 10
            e += 1
        digits = str(n)
        rounded = float(Decimal(n).scaleb(e - p + 1, context=_CONTEXT))

    if e >= p - 1:
        digits = digits + "0" * (e - p + 1)
        integer_digits = e + 1
    elif e >= 0:
        digits = f"{digits[: e + 1]}.{digits[e + 1:]}"
        integer_digits = e + 1
    else:
        digits = f"0.{'0' * (-e - 1)}{digits}"
        integer_digits = 1

    if "." in digits and max_precision > min_precision:
        digits = _trim_zeros(digits, max_precision - min_precision)
    return RawFormatResult(digits, rounded, integer_digits)


def format_number_to_string(config: FormatterConfig, x: Number) -> RawFormatResult:
    """Round a signed finite number according to ``config``.

    The sign is stripped before rounding and restored on the rounded value,
    so negative zero survives. The digit string is unsigned and left-padded
    to ``minimum_integer_digits``.
    """
    d = to_decimal(x)
    is_negative = d.is_signed()
    if is_negative:
        d = d.copy_abs()

    if config.rounding_type == RoundingType.SIGNIFICANT_DIGITS:
        result = to_raw_precision(
            d, config.minimum_significant_digits, config.maximum_significant_digits
        )
    elif config.rounding_type == RoundingType.FRACTION_DIGITS:
        result = to_raw_fixed(
            d, config.minimum_fraction_digits, config.maximum_fraction_digits
        )
    else:
        result = to_raw_fixed(d, 0, 0)
        if result.integer_digits_count == 1:
            result = to_raw_precision(d, 1, 2)

    digits = result.formatted_string
    integer_digits = result.integer_digits_count
    if integer_digits < config.minimum_integer_digits:
        digits = "0" * (config.minimum_integer_digits - integer_digits) + digits
        integer_digits = config.minimum_integer_digits

    rounded = -result.rounded_number if is_negative else result.rounded_number
    return RawFormatResult(digits, rounded, integer_digits)
