"""Themr Lite package initialization."""

from .errors import (
    InvalidConfigurationError,
    InvalidNamespaceError,
    ThemeFormatError,
    ThemrError,
    TypeMismatchError,
)
from .loaders import dump_theme, load_options, load_theme, validate_theme
from .merge import Theme, combine, merge
from .options import (
    DEFAULT_OPTIONS,
    Compose,
    Priority,
    ThemrOptions,
    make_options,
    options_from_env,
)
from .resolve import base_theme, namespaced_theme, remove_namespace, resolve
from .themed import (
    ThemeConfig,
    ThemeContext,
    Themed,
    ThemedInstance,
    default_map_themr_props,
    themr,
)

__version__ = "0.1.0"

__all__ = [
    "Compose",
    "DEFAULT_OPTIONS",
    "InvalidConfigurationError",
    "InvalidNamespaceError",
    "Priority",
    "Theme",
    "ThemeConfig",
    "ThemeContext",
    "ThemeFormatError",
    "Themed",
    "ThemedInstance",
    "ThemrError",
    "ThemrOptions",
    "TypeMismatchError",
    "base_theme",
    "combine",
    "default_map_themr_props",
    "dump_theme",
    "load_options",
    "load_theme",
    "make_options",
    "merge",
    "namespaced_theme",
    "options_from_env",
    "remove_namespace",
    "resolve",
    "themr",
    "validate_theme",
]
