"""Tests for CLDR plural selection."""

import math
from decimal import Decimal

import pytest

from unifiednumber import CLDRPluralSelector, PluralCategory, PluralSelector
from unifiednumber.plural import PluralOperands, get_supported_languages, register_rule


class TestPluralOperands:
    """Test operand extraction."""

    def test_integer(self):
        """Test integer operands."""
        op = PluralOperands.from_number(5)
        assert (op.n, op.i, op.v, op.w, op.f, op.t) == (5.0, 5, 0, 0, 0, 0)

    def test_integral_float(self):
        """Test integral floats have no visible fraction digits."""
        assert PluralOperands.from_number(1.0) == PluralOperands.from_number(1)

    def test_float_fraction(self):
        """Test float fraction digits come from the shortest repr."""
        op = PluralOperands.from_number(1.5)
        assert (op.i, op.v, op.w, op.f, op.t) == (1, 1, 1, 5, 5)

    def test_decimal_keeps_trailing_zeros(self):
        """Test Decimal input keeps visible trailing zeros."""
        op = PluralOperands.from_number(Decimal("1.50"))
        assert (op.i, op.v, op.w, op.f, op.t) == (1, 2, 1, 50, 5)

    def test_small_float(self):
        """Test exponent-form reprs are expanded."""
        op = PluralOperands.from_number(1e-7)
        assert op.i == 0
        assert op.v == 7

    def test_negative(self):
        """Test the sign is ignored."""
        assert PluralOperands.from_number(-2) == PluralOperands.from_number(2)

    def test_non_finite(self):
        """Test NaN and infinity have zero digit operands."""
        op = PluralOperands.from_number(math.inf)
        assert (op.i, op.v) == (0, 0)


class TestCardinalRules:
    """Test cardinal rules per language."""

    @pytest.mark.parametrize(
        "locale,number,expected",
        [
            ("en", 1, "one"),
            ("en", 1.0, "one"),
            ("en", -1, "one"),
            ("en", 0, "other"),
            ("en", 2, "other"),
            ("en", 1.5, "other"),
            ("en-US", 1, "one"),
            ("fr", 0, "one"),
            ("fr", 1.5, "one"),
            ("fr", 2, "other"),
            ("ru", 1, "one"),
            ("ru", 21, "one"),
            ("ru", 2, "few"),
            ("ru", 5, "many"),
            ("ru", 11, "many"),
            ("ru", 1.5, "other"),
            ("pl", 1, "one"),
            ("pl", 3, "few"),
            ("pl", 22, "few"),
            ("pl", 5, "many"),
            ("pl", 12, "many"),
            ("cs", 3, "few"),
            ("cs", 1.5, "many"),
            ("cs", 5, "other"),
            ("ar", 0, "zero"),
            ("ar", 1, "one"),
            ("ar", 2, "two"),
            ("ar", 5, "few"),
            ("ar", 11, "many"),
            ("ar", 100, "other"),
            ("he", 2, "two"),
            ("ro", 0, "few"),
            ("ro", 20, "other"),
            ("ja", 1, "other"),
            ("xx", 1, "other"),
        ],
    )
    def test_select(self, locale, number, expected):
        """Test the category chosen for a number."""
        assert CLDRPluralSelector(locale).select(number) == expected

    def test_category_enum(self):
        """Test category returns an enum member."""
        assert CLDRPluralSelector("en").category(1) is PluralCategory.ONE

    def test_satisfies_protocol(self):
        """Test the selector is a PluralSelector."""
        assert isinstance(CLDRPluralSelector("en"), PluralSelector)

    def test_repr(self):
        """Test repr shows the locale."""
        assert repr(CLDRPluralSelector("de")) == "CLDRPluralSelector('de')"


class TestRegisterRule:
    """Test custom rule registration."""

    def test_register(self):
        """Test a registered rule is used by new selectors."""
        register_rule("qq", lambda op: PluralCategory.FEW)
        assert "qq" in get_supported_languages()
        assert CLDRPluralSelector("qq-XX").select(7) == "few"
