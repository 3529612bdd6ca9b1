"""Locale-aware number formatting with typed parts.

This package formats numbers in decimal, percent and unit styles with
standard, scientific or engineering notation, producing an ordered list of
typed parts (integer digits, group separators, signs, unit names, ...).

Example:
    from unifiednumber import NumberFormat, register_locale_data

    register_locale_data(en_data)          # a mapping or LocaleData
    fmt = NumberFormat.create("en", maximum_fraction_digits=2)
    fmt.format(1234567.891)                # "1,234,567.89"
    fmt.format_to_parts(-1234.5)
    # [minusSign "-", integer "1", group ",", integer "234",
    #  decimal ".", fraction "5"]
"""

from unifiednumber.config import FormatterConfig
from unifiednumber.exceptions import (
    DataIntegrityError,
    InvalidOptionError,
    InvalidTokenError,
    UnifiedNumberError,
    UnsupportedFeatureError,
)
from unifiednumber.exponent import compute_exponent, compute_exponent_for_magnitude
from unifiednumber.formatter import NumberFormat
from unifiednumber.loader import (
    LocaleDataLoader,
    LocaleRegistry,
    get_locale_data,
    get_registry,
    load_locale_data_file,
    register_locale_data,
)
from unifiednumber.locale_data import NUMBERING_SYSTEM_DIGITS, LocaleData, NumberSymbols
from unifiednumber.options import resolve_options
from unifiednumber.parts import assemble_parts
from unifiednumber.patterns import select_pattern, tokenize_pattern
from unifiednumber.plural import CLDRPluralSelector, PluralCategory
from unifiednumber.rounding import format_number_to_string, to_raw_fixed, to_raw_precision
from unifiednumber.types import (
    CompactDisplay,
    CurrencyDisplay,
    CurrencySign,
    FormatPart,
    Notation,
    NotationCategory,
    PartType,
    PluralSelector,
    RawFormatResult,
    RoundingType,
    SignClass,
    SignDisplay,
    Style,
    TokenKind,
    UnitDisplay,
)

__version__ = "0.1.0"

__all__ = [
    # Formatter
    "NumberFormat",
    "FormatterConfig",
    "resolve_options",
    # Pipeline
    "to_raw_fixed",
    "to_raw_precision",
    "format_number_to_string",
    "compute_exponent",
    "compute_exponent_for_magnitude",
    "select_pattern",
    "tokenize_pattern",
    "assemble_parts",
    # Locale data
    "LocaleData",
    "NumberSymbols",
    "NUMBERING_SYSTEM_DIGITS",
    "LocaleDataLoader",
    "LocaleRegistry",
    "get_registry",
    "get_locale_data",
    "register_locale_data",
    "load_locale_data_file",
    # Plurals
    "CLDRPluralSelector",
    "PluralCategory",
    "PluralSelector",
    # Types
    "Style",
    "SignDisplay",
    "Notation",
    "RoundingType",
    "UnitDisplay",
    "CurrencyDisplay",
    "CurrencySign",
    "CompactDisplay",
    "NotationCategory",
    "SignClass",
    "TokenKind",
    "PartType",
    "FormatPart",
    "RawFormatResult",
    # Exceptions
    "UnifiedNumberError",
    "UnsupportedFeatureError",
    "DataIntegrityError",
    "InvalidTokenError",
    "InvalidOptionError",
]
