"""Locale data loading and registration.

This module loads ``LocaleData`` records from JSON and YAML files and keeps
them in a registry keyed by locale tag.

Usage:
    from unifiednumber.loader import LocaleDataLoader, get_locale_data

    loader = LocaleDataLoader()
    loader.load_directory(Path("locales/"), pattern="*.yaml")

    data = get_locale_data("de-AT")   # falls back to "de" if needed
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from unifiednumber.exceptions import DataIntegrityError
from unifiednumber.locale_data import LocaleData


logger = logging.getLogger(__name__)


def normalize_tag(tag: str) -> str:
    """Canonical registry key: ``en_us`` -> ``en-US``."""
    parts = tag.replace("_", "-").split("-")
    result = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 2 and part.isalpha():
            result.append(part.upper())
        elif len(part) == 4 and part.isalpha():
            result.append(part.title())
        else:
            result.append(part)
    return "-".join(result)


def fallback_chain(tag: str) -> list[str]:
    """Candidate tags from most to least specific: ``zh-Hant-TW``, ``zh-Hant``, ``zh``."""
    parts = normalize_tag(tag).split("-")
    return ["-".join(parts[:i]) for i in range(len(parts), 0, -1)]


class LocaleRegistry:
    """Thread-safe registry of locale data.

    Example:
        registry = LocaleRegistry()
        registry.register(LocaleData.from_dict({...}))
        registry.get("en-GB")   # exact match, or "en" fallback
    """

    def __init__(self) -> None:
        self._data: dict[str, LocaleData] = {}
        self._lock = threading.RLock()

    def register(self, data: LocaleData) -> None:
        """Add or replace the data for ``data.locale``."""
        key = normalize_tag(data.locale)
        with self._lock:
            self._data[key] = data
        logger.debug("Registered locale data for %s", key)

    def unregister(self, locale: str) -> None:
        with self._lock:
            self._data.pop(normalize_tag(locale), None)

    def find(self, locale: str) -> LocaleData | None:
        """Best match for ``locale`` along its fallback chain, or None."""
        with self._lock:
            for candidate in fallback_chain(locale):
                if candidate in self._data:
                    return self._data[candidate]
        return None

    def get(self, locale: str) -> LocaleData:
        """Best match for ``locale``.

        Raises:
            DataIntegrityError: If no registered data matches
        """
        data = self.find(locale)
        if data is None:
            raise DataIntegrityError(f"No locale data registered for {locale!r}")
        return data

    def lookup(self, locales: Iterable[str]) -> LocaleData | None:
        """First of ``locales`` that has data."""
        for locale in locales:
            data = self.find(locale)
            if data is not None:
                return data
        return None

    def supported(self, locales: Iterable[str]) -> list[str]:
        """Subset of ``locales`` that resolve to some registered data."""
        return [normalize_tag(locale) for locale in locales if self.find(locale) is not None]

    @property
    def available_locales(self) -> list[str]:
        with self._lock:
            return sorted(self._data)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __contains__(self, locale: str) -> bool:
        return self.find(locale) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class LocaleDataLoader:
    """Loader for locale data files.

    Supports JSON and YAML formats.

    Example:
        loader = LocaleDataLoader()

        # Load single file
        loader.load_file(Path("locales/en.yaml"))

        # Load directory of locale files
        loader.load_directory(Path("locales/"))
    """

    def __init__(self, registry: LocaleRegistry | None = None, auto_register: bool = True) -> None:
        """Initialize loader.

        Args:
            registry: Registry to fill (defaults to the module registry)
            auto_register: Register loaded data automatically
        """
        self._registry = registry if registry is not None else get_registry()
        self._auto_register = auto_register
        self._loaded: dict[str, LocaleData] = {}

    def load_file(self, path: Path) -> LocaleData:
        """Load a locale data file.

        The locale tag defaults to the file stem when the document has none.

        Raises:
            ValueError: If file format is unsupported
            FileNotFoundError: If file doesn't exist
            DataIntegrityError: If the document is malformed
        """
        if not path.exists():
            raise FileNotFoundError(f"Locale data file not found: {path}")

        suffix = path.suffix.lower()
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                document = json.load(f)
            elif suffix in (".yaml", ".yml"):
                document = yaml.safe_load(f)
            else:
                raise ValueError(f"Unsupported locale data format: {suffix}")

        if not isinstance(document, Mapping):
            raise DataIntegrityError(f"Locale data file {path} is not a mapping")

        data = self.load_dict({"locale": path.stem, **document})
        logger.debug("Loaded locale data %s from %s", data.locale, path)
        return data

    def load_dict(self, document: Mapping[str, Any]) -> LocaleData:
        """Parse and (optionally) register a locale data mapping."""
        data = LocaleData.from_dict(document)
        self._loaded[normalize_tag(data.locale)] = data
        if self._auto_register:
            self._registry.register(data)
        return data

    def load_directory(self, directory: Path, pattern: str = "*.yaml") -> dict[str, LocaleData]:
        """Load all locale data files in ``directory`` matching ``pattern``.

        Files that fail to parse are logged and skipped.
        """
        if not directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory}")

        loaded = {}
        for file_path in sorted(directory.glob(pattern)):
            try:
                data = self.load_file(file_path)
            except (ValueError, DataIntegrityError, yaml.YAMLError) as e:
                logger.warning("Skipping locale data file %s: %s", file_path, e)
                continue
            loaded[normalize_tag(data.locale)] = data
        return loaded

    def get_loaded(self) -> dict[str, LocaleData]:
        return dict(self._loaded)


# Global instance
_registry = LocaleRegistry()


def get_registry() -> LocaleRegistry:
    """Get the module-level registry."""
    return _registry


def register_locale_data(data: LocaleData | Mapping[str, Any]) -> LocaleData:
    """Register ``data`` (a record or its mapping form) globally."""
    if not isinstance(data, LocaleData):
        data = LocaleData.from_dict(data)
    _registry.register(data)
    return data


def get_locale_data(locale: str) -> LocaleData:
    """Best registered match for ``locale``."""
    return _registry.get(locale)


def load_locale_data_file(path: Path | str) -> LocaleData:
    """Load and register a locale data file."""
    return LocaleDataLoader().load_file(Path(path))
