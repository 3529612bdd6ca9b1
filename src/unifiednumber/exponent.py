"""Power-of-ten scaling for scientific and engineering notation."""

from __future__ import annotations

from unifiednumber.config import FormatterConfig
from unifiednumber.exceptions import UnsupportedFeatureError
from unifiednumber.rounding import Number, format_number_to_string, scale, to_decimal
from unifiednumber.types import Notation


def compute_exponent_for_magnitude(notation: Notation, magnitude: int) -> int:
    """Exponent used to scale a number whose leading digit is at ``magnitude``.

    Raises:
        UnsupportedFeatureError: For compact notation
    """
    if notation == Notation.STANDARD:
        return 0
    if notation == Notation.SCIENTIFIC:
        return magnitude
    if notation == Notation.ENGINEERING:
        return (magnitude // 3) * 3
    raise UnsupportedFeatureError("compact notation")


def compute_exponent(config: FormatterConfig, x: Number) -> int:
    """Exponent by which to scale ``x`` before rounding.

    The first guess comes from the magnitude of ``x``. If rounding the
    scaled value carries it into the next power of ten (999.95 -> 1000),
    the exponent is recomputed for ``magnitude + 1``.

    Args:
        config: Resolved formatter settings
        x: Finite number, any sign

    Returns:
        The exponent; 0 for zero input
    """
    if x == 0:
        return 0
    d = to_decimal(x).copy_abs()
    magnitude = d.adjusted()
    exponent = compute_exponent_for_magnitude(config.notation, magnitude)

    result = format_number_to_string(config, scale(d, -exponent))
    if result.rounded_number == 0:
        return exponent
    new_magnitude = to_decimal(result.rounded_number).adjusted()
    if new_magnitude == magnitude - exponent:
        return exponent
    return compute_exponent_for_magnitude(config.notation, magnitude + 1)
