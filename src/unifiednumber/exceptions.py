"""Exceptions raised by the number formatting pipeline."""

from __future__ import annotations

from typing import Any


class UnifiedNumberError(Exception):
    """Base exception for all number formatting errors."""

    pass


class UnsupportedFeatureError(UnifiedNumberError, NotImplementedError):
    """Raised for paths that are deliberately not implemented.

    Compact notation and currency style pattern selection end here.
    """

    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(f"{feature} is not implemented")


class DataIntegrityError(UnifiedNumberError, LookupError):
    """Raised when locale data lacks a required entry."""

    def __init__(self, message: str, path: tuple[Any, ...] = ()) -> None:
        self.path = path
        if path:
            keys = " -> ".join(getattr(p, "value", str(p)) for p in path)
            message = f"{message}: {keys}"
        super().__init__(message)


class InvalidTokenError(UnifiedNumberError):
    """Raised when a pattern contains an unknown placeholder."""

    def __init__(self, token: str, pattern: str) -> None:
        self.token = token
        self.pattern = pattern
        super().__init__(f"Unknown placeholder {{{token}}} in pattern {pattern!r}")


class InvalidOptionError(UnifiedNumberError, ValueError):
    """Raised when formatter options cannot be resolved."""

    def __init__(self, option: str, message: str) -> None:
        self.option = option
        super().__init__(f"Invalid option {option!r}: {message}")
