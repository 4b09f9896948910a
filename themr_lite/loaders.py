"""Helpers for loading theme and option files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal, Mapping

import yaml

from .errors import ThemeFormatError
from .options import ThemrOptions, make_options

logger = logging.getLogger(__name__)

OutputFormat = Literal["yaml", "json"]
YAML_SUFFIXES = {".yaml", ".yml"}


def _read_document(path: Path) -> Any:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Theme file not found: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ThemeFormatError(f"{path.name}: invalid YAML ({exc})") from exc
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ThemeFormatError(f"{path.name}: invalid JSON ({exc})") from exc


def validate_theme(data: Any, *, where: str = "theme") -> dict[str, Any]:
    """Check that ``data`` is a theme and return it as a plain dict."""

    if not isinstance(data, Mapping):
        raise ThemeFormatError(f"{where} must be a mapping")
    theme: dict[str, Any] = {}
    for key, value in data.items():
        if not isinstance(key, str):
            raise ThemeFormatError(f"{where}: slot names must be strings, got {key!r}")
        if isinstance(value, Mapping):
            theme[key] = validate_theme(value, where=f"{where}.{key}")
        elif isinstance(value, str):
            theme[key] = value
        else:
            raise ThemeFormatError(
                f"{where}.{key} must be a class string or a nested theme"
            )
    return theme


def load_theme(path: Path | str) -> dict[str, Any]:
    """Load and validate a YAML or JSON theme file."""

    data = _read_document(Path(path))
    if data is None:
        return {}
    theme = validate_theme(data, where=Path(path).name)
    logger.debug("Loaded theme %s with %d slots", path, len(theme))
    return theme


def load_options(path: Path | str, *, section: str | None = "themr") -> ThemrOptions:
    """Load composition options from a YAML or JSON file.

    When ``section`` names a top-level mapping of the document, the options
    are read from it; otherwise the whole document is used.
    """

    data = _read_document(Path(path)) or {}
    if not isinstance(data, Mapping):
        raise ThemeFormatError("Options document must contain a mapping")
    if section and isinstance(data.get(section), Mapping):
        data = data[section]
    return make_options(data)


def dump_theme(theme: Mapping[str, Any], fmt: OutputFormat = "yaml") -> str:
    """Serialise ``theme`` as YAML or JSON text."""

    if fmt == "json":
        return json.dumps(theme, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(dict(theme), sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unsupported output format: {fmt}")


__all__ = ["dump_theme", "load_options", "load_theme", "validate_theme"]
