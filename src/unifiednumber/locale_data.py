"""Locale data records consumed by the formatter.

The formatter never produces locale data; it reads an immutable
``LocaleData`` built from a plain mapping with this layout::

    locale: en
    numbering_systems: [latn]
    symbols:
      decimal: "."
      group: ","
      plusSign: "+"
      minusSign: "-"
      percentSign: "%"
      exponential: "E"
      nan: NaN
      infinity: "∞"
    patterns:
      decimal:  {<signDisplay>: {<notation>: {<signClass>: <template>}}}
      percent:  {...same shape...}
      currency: {...same shape, optional...}
      unit:     {<unit>: {<unitDisplay>: {...same shape...}}}
    units:
      kilometer:
        unitSymbol: km
        unitName: {one: kilometer, other: kilometers}
    currencies:
      USD:
        currencySymbol: $
        currencyName: {one: US dollar, other: US dollars}
    digits:
      custom: ["0", "1", ...]   # optional numbering-system overrides

Sign display keys are ``auto``, ``always``, ``never``, ``exceptZero``;
notation keys ``standard``, ``scientific``, ``compactShort``,
``compactLong``; sign class keys ``positivePattern``, ``zeroPattern``,
``negativePattern``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeVar, Union

from unifiednumber.exceptions import DataIntegrityError
from unifiednumber.types import NotationCategory, SignClass, SignDisplay, Style, UnitDisplay


# A display name: either invariant, or keyed by plural category.
PluralForms = Union[str, Mapping[str, str]]

# signDisplay -> notation -> signClass -> template
SignPatterns = Mapping[SignDisplay, Mapping[NotationCategory, Mapping[SignClass, str]]]

E = TypeVar("E", bound=Enum)


def _digits_from(zero: int) -> tuple[str, ...]:
    return tuple(chr(zero + i) for i in range(10))


# Digit glyphs for numbering systems with a contiguous 0-9 block.
NUMBERING_SYSTEM_DIGITS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "arab": _digits_from(0x0660),
    "arabext": _digits_from(0x06F0),
    "bali": _digits_from(0x1B50),
    "beng": _digits_from(0x09E6),
    "deva": _digits_from(0x0966),
    "fullwide": _digits_from(0xFF10),
    "gujr": _digits_from(0x0AE6),
    "guru": _digits_from(0x0A66),
    "hanidec": tuple("〇一二三四五六七八九"),
    "khmr": _digits_from(0x17E0),
    "knda": _digits_from(0x0CE6),
    "laoo": _digits_from(0x0ED0),
    "latn": _digits_from(0x0030),
    "limb": _digits_from(0x1946),
    "mlym": _digits_from(0x0D66),
    "mong": _digits_from(0x1810),
    "mymr": _digits_from(0x1040),
    "orya": _digits_from(0x0B66),
    "tamldec": _digits_from(0x0BE6),
    "telu": _digits_from(0x0C66),
    "thai": _digits_from(0x0E50),
    "tibt": _digits_from(0x0F20),
})


@dataclass(frozen=True)
class NumberSymbols:
    """Locale-specific number symbols.

    Based on CLDR number symbols data.
    """
    decimal: str = "."
    group: str = ","
    plus_sign: str = "+"
    minus_sign: str = "-"
    percent_sign: str = "%"
    exponential: str = "E"
    nan: str = "NaN"
    infinity: str = "∞"

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> "NumberSymbols":
        """Build from CLDR-style camelCase keys; absent keys keep defaults."""
        kwargs = {
            attr: data[key]
            for key, attr in _SYMBOL_KEYS.items()
            if key in data
        }
        return cls(**kwargs)


_SYMBOL_KEYS = {
    "decimal": "decimal",
    "group": "group",
    "plusSign": "plus_sign",
    "minusSign": "minus_sign",
    "percentSign": "percent_sign",
    "exponential": "exponential",
    "nan": "nan",
    "infinity": "infinity",
}


@dataclass(frozen=True)
class LocaleData:
    """Everything the formatter needs to know about one locale.

    Attributes:
        locale: Locale tag the data belongs to
        symbols: Number symbols
        patterns: Sign pattern tables keyed by style (not unit)
        unit_patterns: Sign pattern tables keyed by unit then display
        units: Unit display names keyed by unit then token name
        currencies: Currency display names keyed by code then token name
        numbering_systems: Supported numbering systems, default first
        digits: Numbering-system digit overrides for this locale
    """
    locale: str
    symbols: NumberSymbols = field(default_factory=NumberSymbols)
    patterns: Mapping[Style, SignPatterns] = field(default_factory=dict)
    unit_patterns: Mapping[str, Mapping[UnitDisplay, SignPatterns]] = field(default_factory=dict)
    units: Mapping[str, Mapping[str, PluralForms]] = field(default_factory=dict)
    currencies: Mapping[str, Mapping[str, PluralForms]] = field(default_factory=dict)
    numbering_systems: tuple[str, ...] = ("latn",)
    digits: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def default_numbering_system(self) -> str:
        return self.numbering_systems[0] if self.numbering_systems else "latn"

    def digits_for(self, numbering_system: str) -> tuple[str, ...] | None:
        """Digit glyphs for ``numbering_system``, or None if unmapped."""
        if numbering_system in self.digits:
            return self.digits[numbering_system]
        return NUMBERING_SYSTEM_DIGITS.get(numbering_system)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LocaleData":
        """Parse the documented mapping layout.

        Raises:
            DataIntegrityError: If a table key is not a known enum value, or
                the mapping has no locale tag
        """
        locale = data.get("locale")
        if not locale:
            raise DataIntegrityError("Locale data has no 'locale' tag")

        patterns: dict[Style, SignPatterns] = {}
        unit_patterns: dict[str, Mapping[UnitDisplay, SignPatterns]] = {}
        for style_key, table in (data.get("patterns") or {}).items():
            style = _enum(Style, style_key, ("patterns",))
            if style == Style.UNIT:
                for unit, displays in table.items():
                    unit_patterns[unit] = MappingProxyType({
                        _enum(UnitDisplay, display, ("patterns", style, unit)):
                            _sign_patterns(signs, ("patterns", style, unit, display))
                        for display, signs in displays.items()
                    })
            else:
                patterns[style] = _sign_patterns(table, ("patterns", style))

        digits = {}
        for system, glyphs in (data.get("digits") or {}).items():
            glyphs = tuple(glyphs)
            if len(glyphs) != 10:
                raise DataIntegrityError("Digit table must have 10 entries", ("digits", system))
            digits[system] = glyphs

        return cls(
            locale=locale,
            symbols=NumberSymbols.from_dict(data.get("symbols") or {}),
            patterns=MappingProxyType(patterns),
            unit_patterns=MappingProxyType(unit_patterns),
            units=_names(data.get("units") or {}),
            currencies=_names(data.get("currencies") or {}),
            numbering_systems=_systems(data.get("numbering_systems")),
            digits=MappingProxyType(digits),
        )


def _systems(value: Any) -> tuple[str, ...]:
    if not value:
        return ("latn",)
    if isinstance(value, str):
        return (value,)
    return tuple(str(system) for system in value)


def _enum(enum_cls: type[E], key: str, path: tuple[Any, ...]) -> E:
    try:
        return enum_cls(key)
    except ValueError:
        raise DataIntegrityError(
            f"Unknown {enum_cls.__name__} key {key!r}", path
        ) from None


def _sign_patterns(table: Mapping[str, Any], path: tuple[Any, ...]) -> SignPatterns:
    result = {}
    for display_key, notations in table.items():
        display = _enum(SignDisplay, display_key, path)
        result[display] = MappingProxyType({
            _enum(NotationCategory, notation_key, path + (display,)): MappingProxyType({
                _enum(SignClass, sign_key, path + (display, notation_key)): str(template)
                for sign_key, template in signs.items()
            })
            for notation_key, signs in notations.items()
        })
    return MappingProxyType(result)


def _names(table: Mapping[str, Mapping[str, Any]]) -> Mapping[str, Mapping[str, PluralForms]]:
    return MappingProxyType({
        key: MappingProxyType({
            token: MappingProxyType(dict(value)) if isinstance(value, Mapping) else str(value)
            for token, value in entries.items()
        })
        for key, entries in table.items()
    })


def lookup(table: Mapping[Any, Any], *path: Any) -> Any:
    """Walk nested ``table`` along ``path``.

    Raises:
        DataIntegrityError: Naming the full path, if any key is missing
    """
    node = table
    for key in path:
        try:
            node = node[key]
        except (KeyError, TypeError):
            raise DataIntegrityError("Missing locale data entry", path) from None
    return node
