"""Tests for pattern tokenization and selection."""

import math

import pytest

from unifiednumber import (
    DataIntegrityError,
    FormatterConfig,
    InvalidTokenError,
    LocaleData,
    Notation,
    RoundingType,
    SignClass,
    SignDisplay,
    Style,
    TokenKind,
    UnitDisplay,
    UnsupportedFeatureError,
    select_pattern,
    tokenize_pattern,
)
from unifiednumber.patterns import Literal, Placeholder, sign_class


@pytest.fixture
def marked_data():
    """Locale data whose templates name their own sign class."""
    signs = {
        "positivePattern": "P{number}",
        "zeroPattern": "Z{number}",
        "negativePattern": "N{number}",
    }
    table = {display: {"standard": signs} for display in ("auto", "always", "never", "exceptZero")}
    return LocaleData.from_dict({"locale": "xx", "patterns": {"decimal": table}})


class TestTokenizePattern:
    """Test splitting templates into literals and placeholders."""

    def test_mixed_pattern(self):
        """Test a pattern with placeholders and a literal."""
        tokens = tokenize_pattern("{minusSign}{number} {unitName}")
        assert tokens == (
            Placeholder(TokenKind.MINUS_SIGN),
            Placeholder(TokenKind.NUMBER),
            Literal(" "),
            Placeholder(TokenKind.UNIT_NAME),
        )

    def test_literal_only(self):
        """Test a pattern without placeholders."""
        assert tokenize_pattern("abc") == (Literal("abc"),)

    def test_empty(self):
        """Test an empty pattern has no tokens."""
        assert tokenize_pattern("") == ()

    def test_unknown_placeholder(self):
        """Test unknown placeholders raise InvalidTokenError."""
        with pytest.raises(InvalidTokenError) as exc_info:
            tokenize_pattern("{number}{bogus}")
        assert exc_info.value.token == "bogus"

    def test_results_are_cached(self):
        """Test repeated tokenization returns the cached tuple."""
        assert tokenize_pattern("{number}%") is tokenize_pattern("{number}%")


class TestSignClass:
    """Test the sign bucket of rounded values."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1.0, SignClass.POSITIVE),
            (math.inf, SignClass.POSITIVE),
            (math.nan, SignClass.POSITIVE),
            (0.0, SignClass.ZERO),
            (-0.0, SignClass.NEGATIVE),
            (-1.0, SignClass.NEGATIVE),
            (-math.inf, SignClass.NEGATIVE),
        ],
    )
    def test_sign_class(self, value, expected):
        """Test each kind of value maps to its bucket."""
        assert sign_class(value) == expected


class TestSelectPattern:
    """Test template selection from locale tables."""

    @pytest.mark.parametrize(
        "value,expected",
        [(5.0, "P{number}"), (0.0, "Z{number}"), (-0.0, "N{number}"), (-5.0, "N{number}")],
    )
    def test_sign_class_picks_template(self, marked_data, value, expected):
        """Test the rounded value's sign picks the template."""
        config = FormatterConfig(sign_display=SignDisplay.ALWAYS)
        assert select_pattern(config, marked_data, value, 0) == expected

    def test_decimal_auto(self, en_data):
        """Test default decimal templates."""
        config = FormatterConfig()
        assert select_pattern(config, en_data, 1.0, 0) == "{number}"
        assert select_pattern(config, en_data, -1.0, 0) == "{minusSign}{number}"

    def test_scientific_category(self, en_data):
        """Test scientific notation selects the scientific table."""
        config = FormatterConfig(notation=Notation.SCIENTIFIC)
        pattern = select_pattern(config, en_data, 1.5, 3)
        assert pattern == "{number}{scientificSeparator}{scientificExponent}"

    def test_engineering_uses_scientific_table(self, en_data):
        """Test engineering notation shares the scientific table."""
        config = FormatterConfig(notation=Notation.ENGINEERING)
        pattern = select_pattern(config, en_data, -12.5, 3)
        assert pattern == "{minusSign}{number}{scientificSeparator}{scientificExponent}"

    def test_unit_table(self, en_data):
        """Test unit style looks up the unit and display."""
        config = FormatterConfig(style=Style.UNIT, unit="kilometer", unit_display=UnitDisplay.LONG)
        assert select_pattern(config, en_data, 2.0, 0) == "{number} {unitName}"

    def test_currency_is_unsupported(self, en_data):
        """Test currency style raises before any lookup."""
        config = FormatterConfig(
            style=Style.CURRENCY,
            currency="USD",
            minimum_fraction_digits=2,
            maximum_fraction_digits=2,
        )
        with pytest.raises(UnsupportedFeatureError):
            select_pattern(config, en_data, 1.0, 0)

    def test_compact_is_unsupported(self, en_data):
        """Test compact notation raises."""
        config = FormatterConfig(
            notation=Notation.COMPACT,
            rounding_type=RoundingType.COMPACT_ROUNDING,
        )
        with pytest.raises(UnsupportedFeatureError):
            select_pattern(config, en_data, 1.0, 0)

    def test_missing_style(self, marked_data):
        """Test a style absent from the tables raises DataIntegrityError."""
        config = FormatterConfig(style=Style.PERCENT)
        with pytest.raises(DataIntegrityError):
            select_pattern(config, marked_data, 1.0, 0)

    def test_missing_notation(self, marked_data):
        """Test a missing notation entry names the full path."""
        config = FormatterConfig(notation=Notation.SCIENTIFIC)
        with pytest.raises(DataIntegrityError) as exc_info:
            select_pattern(config, marked_data, 1.0, 0)
        assert exc_info.value.path == (
            Style.DECIMAL,
            SignDisplay.AUTO,
            "scientific",
            SignClass.POSITIVE,
        )
        assert "decimal -> auto -> scientific -> positivePattern" in str(exc_info.value)

    def test_missing_unit(self, en_data):
        """Test an unknown unit raises DataIntegrityError."""
        config = FormatterConfig(style=Style.UNIT, unit="furlong")
        with pytest.raises(DataIntegrityError):
            select_pattern(config, en_data, 1.0, 0)

    def test_missing_unit_display(self, en_data):
        """Test a unit without the requested display raises."""
        config = FormatterConfig(style=Style.UNIT, unit="second", unit_display=UnitDisplay.LONG)
        with pytest.raises(DataIntegrityError):
            select_pattern(config, en_data, 1.0, 0)
