"""Tests for scientific and engineering exponent resolution."""

import pytest

from unifiednumber import (
    FormatterConfig,
    Notation,
    UnsupportedFeatureError,
    compute_exponent,
    compute_exponent_for_magnitude,
)


class TestComputeExponentForMagnitude:
    """Test the magnitude-to-exponent mapping per notation."""

    @pytest.mark.parametrize("magnitude", [-5, 0, 3, 7])
    def test_standard_is_zero(self, magnitude):
        """Test standard notation never scales."""
        assert compute_exponent_for_magnitude(Notation.STANDARD, magnitude) == 0

    @pytest.mark.parametrize("magnitude", [-5, 0, 3, 7])
    def test_scientific_is_magnitude(self, magnitude):
        """Test scientific notation scales to one integer digit."""
        assert compute_exponent_for_magnitude(Notation.SCIENTIFIC, magnitude) == magnitude

    @pytest.mark.parametrize(
        "magnitude,expected",
        [(0, 0), (2, 0), (3, 3), (5, 3), (6, 6), (-1, -3), (-3, -3), (-4, -6)],
    )
    def test_engineering_is_multiple_of_three(self, magnitude, expected):
        """Test engineering notation floors to a multiple of three."""
        assert compute_exponent_for_magnitude(Notation.ENGINEERING, magnitude) == expected

    def test_compact_is_unsupported(self):
        """Test compact notation raises."""
        with pytest.raises(UnsupportedFeatureError):
            compute_exponent_for_magnitude(Notation.COMPACT, 3)
        with pytest.raises(NotImplementedError):
            compute_exponent_for_magnitude(Notation.COMPACT, 3)


class TestComputeExponent:
    """Test exponent resolution including rounding carries."""

    def test_zero(self):
        """Test zero always has exponent zero."""
        config = FormatterConfig(notation=Notation.SCIENTIFIC)
        assert compute_exponent(config, 0) == 0

    def test_standard(self):
        """Test standard notation returns zero."""
        assert compute_exponent(FormatterConfig(), 123456) == 0
        assert compute_exponent(FormatterConfig(), 0.0001) == 0

    def test_scientific(self):
        """Test scientific exponents of plain values."""
        config = FormatterConfig(notation=Notation.SCIENTIFIC)
        assert compute_exponent(config, 123456) == 5
        assert compute_exponent(config, 0.00123) == -3
        assert compute_exponent(config, -0.00123) == -3

    def test_rounding_carry_bumps_exponent(self):
        """Test a mantissa that rounds up to ten moves to the next power."""
        config = FormatterConfig(
            notation=Notation.SCIENTIFIC,
            minimum_fraction_digits=0,
            maximum_fraction_digits=0,
        )
        assert compute_exponent(config, 999.5) == 3
        assert compute_exponent(config, -999.5) == 3
        assert compute_exponent(config, 949) == 2

        default = FormatterConfig(notation=Notation.SCIENTIFIC)
        assert compute_exponent(default, 999.95) == 3

    def test_engineering(self):
        """Test engineering exponents including a carry."""
        config = FormatterConfig(notation=Notation.ENGINEERING)
        assert compute_exponent(config, 12345) == 3
        assert compute_exponent(config, 0.05) == -3

        no_fraction = FormatterConfig(
            notation=Notation.ENGINEERING,
            minimum_fraction_digits=0,
            maximum_fraction_digits=0,
        )
        assert compute_exponent(no_fraction, 999999) == 6
