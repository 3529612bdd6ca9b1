"""Shared fixtures for number formatting tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from unifiednumber import LocaleData, LocaleRegistry, NumberFormat


FIXTURES_DIR = Path(__file__).parent / "fixtures"
LOCALES_DIR = FIXTURES_DIR / "locales"


def sign_patterns(number_pattern: str) -> dict[str, dict[str, str]]:
    """Sign display tables for a template containing ``{number}``."""
    bare = number_pattern
    plus = number_pattern.replace("{number}", "{plusSign}{number}")
    minus = number_pattern.replace("{number}", "{minusSign}{number}")
    return {
        "auto": {"positivePattern": bare, "zeroPattern": bare, "negativePattern": minus},
        "always": {"positivePattern": plus, "zeroPattern": plus, "negativePattern": minus},
        "never": {"positivePattern": bare, "zeroPattern": bare, "negativePattern": bare},
        "exceptZero": {"positivePattern": plus, "zeroPattern": bare, "negativePattern": minus},
    }


def pattern_table(number_pattern: str) -> dict[str, Any]:
    """Full ``signDisplay -> notation -> signClass`` table."""
    standard = sign_patterns(number_pattern)
    scientific = sign_patterns(
        number_pattern.replace("{number}", "{number}{scientificSeparator}{scientificExponent}")
    )
    return {
        display: {"standard": standard[display], "scientific": scientific[display]}
        for display in standard
    }


def locale_document(
    locale: str,
    *,
    decimal: str = ".",
    group: str = ",",
    percent: str = "{number}{percentSign}",
    numbering_systems: tuple[str, ...] = ("latn",),
) -> dict[str, Any]:
    return {
        "locale": locale,
        "numbering_systems": list(numbering_systems),
        "symbols": {
            "decimal": decimal,
            "group": group,
            "plusSign": "+",
            "minusSign": "-",
            "percentSign": "%",
            "exponential": "E",
            "nan": "NaN",
            "infinity": "∞",
        },
        "patterns": {
            "decimal": pattern_table("{number}"),
            "percent": pattern_table(percent),
            "unit": {
                "kilometer": {
                    "short": pattern_table("{number} {unitSymbol}"),
                    "narrow": pattern_table("{number}{unitNarrowSymbol}"),
                    "long": pattern_table("{number} {unitName}"),
                },
                "second": {
                    "narrow": pattern_table("{number}{unitNarrowSymbol}"),
                },
            },
        },
        "units": {
            "kilometer": {
                "unitSymbol": "km",
                "unitNarrowSymbol": "km",
                "unitName": {"one": "kilometer", "other": "kilometers"},
            },
            "second": {
                "unitSymbol": "sec",
                "unitName": {"one": "second", "other": "seconds"},
            },
        },
        "currencies": {
            "USD": {
                "currencySymbol": "$",
                "currencyNarrowSymbol": "$",
                "currencyName": {"one": "US dollar", "other": "US dollars"},
            },
        },
    }


@pytest.fixture
def en_document() -> dict[str, Any]:
    return locale_document("en")


@pytest.fixture
def en_data(en_document) -> LocaleData:
    return LocaleData.from_dict(en_document)


@pytest.fixture
def de_data() -> LocaleData:
    return LocaleData.from_dict(
        locale_document("de", decimal=",", group=".", percent="{number} {percentSign}")
    )


@pytest.fixture
def ar_data() -> LocaleData:
    return LocaleData.from_dict(
        locale_document("ar", decimal="٫", group="٬", numbering_systems=("arab", "latn"))
    )


@pytest.fixture
def registry(en_data, de_data, ar_data) -> LocaleRegistry:
    registry = LocaleRegistry()
    for data in (en_data, de_data, ar_data):
        registry.register(data)
    return registry


@pytest.fixture
def make_format(registry) -> Callable[..., NumberFormat]:
    """Factory: ``make_format("en", style="percent")``."""

    def _make(locale: str = "en", **options: Any) -> NumberFormat:
        return NumberFormat.create(locale, registry=registry, **options)

    return _make


class FixedPluralSelector:
    """Plural selector that always answers the same category."""

    def __init__(self, category: str) -> None:
        self.category = category
        self.calls: list[float] = []

    def select(self, number: float) -> str:
        self.calls.append(number)
        return self.category


@pytest.fixture
def fixed_selector() -> Callable[[str], FixedPluralSelector]:
    return FixedPluralSelector
