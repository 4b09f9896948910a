"""Tests for the ``themr`` decorator and memoised instances."""

from __future__ import annotations

from typing import Any

import pytest
from themr_lite.errors import InvalidConfigurationError, InvalidNamespaceError
from themr_lite.options import Compose, Priority
from themr_lite.themed import Themed, default_map_themr_props, themr

DEFAULT_THEME = {"root": "button", "icon": "button-icon"}


def Button(**props: Any) -> dict[str, Any]:
    return props


def test_decorator_builds_wrapper() -> None:
    themed = themr("Button", DEFAULT_THEME)(Button)
    assert isinstance(themed, Themed)
    assert themed.display_name == "ThemedButton"
    assert themed.component_name == "Button"
    assert themed.default_theme == DEFAULT_THEME


def test_render_passes_resolved_theme_and_strips_themr_props() -> None:
    themed = themr("Button", DEFAULT_THEME)(Button)
    props = themed(
        theme_context={"Button": {"root": "ctx"}},
        label="Go",
        theme={"root": "adhoc"},
        compose_adhoc_theme="deeply",
    )
    assert props == {
        "label": "Go",
        "theme": {"root": "adhoc ctx", "icon": "button-icon"},
    }


def test_context_theme_is_looked_up_by_component_name() -> None:
    themed = themr("Button", DEFAULT_THEME)(Button)
    context = {"Button": {"root": "ctx"}, "Card": {"root": "card"}}
    assert themed.context_theme(context) == {"root": "ctx"}
    assert themed.context_theme({"Card": {"root": "card"}}) == {}
    assert themed.context_theme(None) == {}


def test_decoration_options_are_validated_immediately() -> None:
    with pytest.raises(InvalidConfigurationError):
        themr("Button", DEFAULT_THEME, compose_adhoc_theme="loosely")
    with pytest.raises(InvalidConfigurationError):
        themr("Button", DEFAULT_THEME, compose_context_theme=Compose.DEEP)
    with pytest.raises(InvalidConfigurationError):
        themr("Button", DEFAULT_THEME, theme_priority="random")
    with pytest.raises(InvalidConfigurationError):
        themr("Button", DEFAULT_THEME, map_themr_props="nope")


def test_decoration_options_apply_as_defaults() -> None:
    themed = themr(
        "Button",
        DEFAULT_THEME,
        compose_context_theme=Compose.SWAP,
        theme_priority=Priority.ADHOC_DEFAULT_CONTEXT,
    )(Button)
    instance = themed.bind(theme_context={"Button": {"root": "ctx"}})
    assert instance.theme == DEFAULT_THEME


def test_instance_props_override_options() -> None:
    themed = themr("Button", DEFAULT_THEME)(Button)
    instance = themed.bind(theme={"root": "only"}, compose_adhoc_theme=False)
    assert instance.theme == {"root": "only"}
    with pytest.raises(InvalidConfigurationError):
        themed.bind(theme_priority="whatever")


def test_redecoration_with_same_name_merges_default_themes() -> None:
    inner = themr("Button", {"root": "base"})(Button)
    outer = themr("Button", {"root": "extra", "icon": "ico"})(inner)
    assert outer is not inner
    assert outer.component is Button
    assert outer.default_theme == {"root": "base extra", "icon": "ico"}
    assert inner.default_theme == {"root": "base"}


def test_redecoration_with_other_name_wraps_again() -> None:
    inner = themr("Button", {"root": "base"})(Button)
    outer = themr("Link", {"root": "link"})(inner)
    assert outer.component is inner
    assert outer.display_name == "ThemedThemedButton"


def test_nested_wrapper_receives_theme_context() -> None:
    inner = themr("Button", {"root": "btn"})(Button)
    outer = themr("Link", {"root": "link"})(inner)
    props = outer(theme_context={"Button": {"icon": "ctx-icon"}, "Link": {}})
    assert props == {"theme": {"root": "link btn", "icon": "ctx-icon"}}


def test_context_is_an_ordinary_prop() -> None:
    themed = themr("Button", DEFAULT_THEME)(Button)
    props = themed(theme_context={"Button": {"root": "ctx"}}, context="form")
    assert props["context"] == "form"
    assert props["theme"]["root"] == "ctx"
    with pytest.raises(TypeError):
        themed({"Button": {"root": "ctx"}})  # type: ignore[misc]


def test_receive_props_recomputes_only_on_relevant_changes() -> None:
    themed = themr("Button", DEFAULT_THEME)(Button)
    instance = themed.bind(label="A", theme={"root": "x"})
    first = instance.theme

    assert instance.receive_props(label="B", theme={"root": "x"}) is False
    assert instance.theme is first
    assert instance.render()["label"] == "B"

    assert instance.receive_props(label="B", theme={"root": "y"}) is True
    assert instance.theme["root"] == "y button"

    assert instance.receive_props(
        label="B", theme={"root": "y"}, compose_context_theme="swap"
    ) is True
    assert instance.receive_props(
        label="B", theme={"root": "y"}, compose_context_theme="swap"
    ) is False


def test_namespace_requires_adhoc_theme() -> None:
    themed = themr("Button", DEFAULT_THEME)(Button)
    with pytest.raises(InvalidNamespaceError):
        themed.bind(theme_namespace="button")
    props = themed(theme={"buttonRoot": "ns", "cardRoot": "no"}, theme_namespace="button")
    assert props["theme"]["root"] == "ns button"
    assert "theme_namespace" not in props


def test_custom_map_themr_props() -> None:
    def mapper(props: dict[str, Any], theme: dict[str, Any]) -> dict[str, Any]:
        return {"classes": theme, "label": props.get("label")}

    themed = themr("Button", DEFAULT_THEME, map_themr_props=mapper)(Button)
    assert themed(label="x") == {"classes": DEFAULT_THEME, "label": "x"}


def test_default_map_themr_props() -> None:
    props = {
        "label": "x",
        "compose_adhoc_theme": Compose.DEEP,
        "compose_context_theme": Compose.SOFT,
        "theme_priority": Priority.ADHOC_CONTEXT_DEFAULT,
        "theme_namespace": None,
        "map_themr_props": default_map_themr_props,
        "theme": {"root": "adhoc"},
    }
    assert default_map_themr_props(props, {"root": "final"}) == {
        "label": "x",
        "theme": {"root": "final"},
    }
