"""Exceptions raised by the theming helpers."""

from __future__ import annotations


class ThemrError(Exception):
    """Base class for every themr-lite error."""


class TypeMismatchError(ThemrError, TypeError):
    """A slot is a nested theme in one source and a token string in another."""


class InvalidNamespaceError(ThemrError, ValueError):
    """A theme namespace was given without an ad-hoc theme to filter."""


class InvalidConfigurationError(ThemrError, ValueError):
    """Composition mode or priority outside the accepted values."""


class ThemeFormatError(ThemrError, ValueError):
    """A theme document does not have the expected shape."""


__all__ = [
    "InvalidConfigurationError",
    "InvalidNamespaceError",
    "ThemeFormatError",
    "ThemrError",
    "TypeMismatchError",
]
