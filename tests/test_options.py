"""Tests for option validation and configuration sources."""

from __future__ import annotations

import pytest
from themr_lite.errors import InvalidConfigurationError
from themr_lite.options import (
    DEFAULT_OPTIONS,
    Compose,
    Priority,
    make_options,
    options_from_env,
)


def test_default_options() -> None:
    assert DEFAULT_OPTIONS.compose_adhoc_theme is Compose.DEEP
    assert DEFAULT_OPTIONS.compose_context_theme is Compose.SOFT
    assert DEFAULT_OPTIONS.theme_priority is Priority.ADHOC_CONTEXT_DEFAULT


def test_make_options_accepts_values_and_aliases() -> None:
    options = make_options(
        compose_adhoc_theme="softly",
        compose_context_theme=False,
        theme_priority="adhoc-default-context",
    )
    assert options.compose_adhoc_theme is Compose.SOFT
    assert options.compose_context_theme is Compose.SWAP
    assert options.theme_priority is Priority.ADHOC_DEFAULT_CONTEXT


def test_make_options_ignores_none_overrides() -> None:
    base = {"compose_adhoc_theme": "swap"}
    options = make_options(base, compose_adhoc_theme=None)
    assert options.compose_adhoc_theme is Compose.SWAP


@pytest.mark.parametrize(
    "values",
    [
        {"compose_adhoc_theme": "sideways"},
        {"compose_adhoc_theme": True},
        {"compose_adhoc_theme": "SOFTLY"},
        {"compose_adhoc_theme": " deeply "},
        {"theme_priority": "Adhoc-Context-Default"},
        {"compose_context_theme": "deeply"},
        {"theme_priority": "context-first"},
        {"unknown_option": 1},
    ],
)
def test_make_options_rejects_invalid_values(values: dict) -> None:
    with pytest.raises(InvalidConfigurationError):
        make_options(values)


def test_options_are_frozen_and_replace_validates() -> None:
    options = make_options()
    swapped = options.replace(compose_adhoc_theme=Compose.SWAP)
    assert swapped.compose_adhoc_theme is Compose.SWAP
    assert options.compose_adhoc_theme is Compose.DEEP
    with pytest.raises(InvalidConfigurationError):
        options.replace(theme_priority="nope")


def test_options_from_env() -> None:
    env = {
        "THEMR_COMPOSE_ADHOC_THEME": "softly",
        "THEMR_THEME_PRIORITY": "adhoc-default-context",
        "UNRELATED": "x",
    }
    options = options_from_env(env)
    assert options.compose_adhoc_theme is Compose.SOFT
    assert options.compose_context_theme is Compose.SOFT
    assert options.theme_priority is Priority.ADHOC_DEFAULT_CONTEXT


def test_options_from_env_rejects_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("THEMR_COMPOSE_CONTEXT_THEME", "deeply")
    with pytest.raises(InvalidConfigurationError):
        options_from_env()
