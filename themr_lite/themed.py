"""Framework-agnostic ``themr`` decorator.

A *component* is any callable accepting keyword props. Decorating it binds a
component name, a default theme and composition options; the resulting
:class:`Themed` wrapper resolves the final theme for every use and hands it to
the component through the ``theme`` prop. Contextual themes travel in the
keyword-only ``theme_context`` argument, leaving ``context`` free as a prop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Hashable, Mapping

from .errors import InvalidConfigurationError
from .merge import merge
from .options import OPTION_NAMES, ThemrOptions, make_options
from .resolve import resolve

logger = logging.getLogger(__name__)

ThemeContext = Mapping[Hashable, Mapping[str, Any]]
MapThemrProps = Callable[[Mapping[str, Any], Mapping[str, Any]], Mapping[str, Any]]

THEMR_PROPS = (*OPTION_NAMES, "map_themr_props", "theme_namespace")
MEMO_PROPS = (*OPTION_NAMES, "theme", "theme_namespace")


def default_map_themr_props(
    props: Mapping[str, Any], theme: Mapping[str, Any]
) -> dict[str, Any]:
    """Drop the themr-only props and pass ``theme`` down."""

    mapped = {key: value for key, value in props.items() if key not in THEMR_PROPS}
    mapped["theme"] = theme
    return mapped


def _check_mapper(mapper: Any) -> MapThemrProps:
    if not callable(mapper):
        raise InvalidConfigurationError(
            f"map_themr_props must be callable, got {type(mapper).__name__}"
        )
    return mapper


@dataclass(frozen=True)
class ThemeConfig:
    """Name and default theme bound by one or more ``themr`` calls."""

    component_name: Hashable
    default_theme: Mapping[str, Any] = field(default_factory=dict)


class Themed:
    """Component wrapper produced by :func:`themr`."""

    def __init__(
        self,
        component: Callable[..., Any],
        config: ThemeConfig,
        options: ThemrOptions,
        map_themr_props: MapThemrProps = default_map_themr_props,
    ) -> None:
        self.component = component
        self.config = config
        self.options = options
        self.map_themr_props = _check_mapper(map_themr_props)
        inner_name = getattr(component, "display_name", None) or getattr(
            component, "__name__", type(component).__name__
        )
        self.display_name = f"Themed{inner_name}"

    @property
    def component_name(self) -> Hashable:
        return self.config.component_name

    @property
    def default_theme(self) -> Mapping[str, Any]:
        return self.config.default_theme

    def extend(self, default_theme: Mapping[str, Any] | None) -> "Themed":
        """Return a wrapper whose default theme also merges ``default_theme``."""

        config = replace(
            self.config, default_theme=merge(self.config.default_theme, default_theme)
        )
        return Themed(self.component, config, self.options, self.map_themr_props)

    def context_theme(self, context: ThemeContext | None) -> Mapping[str, Any]:
        """Return the theme ``context`` provides for this component."""

        if not context:
            return {}
        return context.get(self.component_name) or {}

    def bind(
        self, *, theme_context: ThemeContext | None = None, **props: Any
    ) -> "ThemedInstance":
        """Create a memoising instance for ``props`` within ``theme_context``."""

        return ThemedInstance(self, theme_context, props)

    def __call__(
        self, *, theme_context: ThemeContext | None = None, **props: Any
    ) -> Any:
        return self.bind(theme_context=theme_context, **props).render()

    def __repr__(self) -> str:
        return f"<{self.display_name} component_name={self.component_name!r}>"


class ThemedInstance:
    """One use of a :class:`Themed` component holding its resolved theme."""

    def __init__(
        self, themed: Themed, context: ThemeContext | None, props: Mapping[str, Any]
    ) -> None:
        self.themed = themed
        self.context = context
        self.props = self._with_defaults(props)
        self._theme = self._calc_theme(self.props)

    @property
    def theme(self) -> dict[str, Any]:
        return self._theme

    def _with_defaults(self, props: Mapping[str, Any]) -> dict[str, Any]:
        options = self.themed.options.replace(
            **{name: props.get(name) for name in OPTION_NAMES}
        )
        mapper = props.get("map_themr_props") or self.themed.map_themr_props
        return {
            **props,
            **dict(options),
            "map_themr_props": _check_mapper(mapper),
        }

    def _calc_theme(self, props: Mapping[str, Any]) -> dict[str, Any]:
        return resolve(
            props.get("theme"),
            props.get("theme_namespace"),
            self.themed.context_theme(self.context),
            self.themed.default_theme,
            props["compose_adhoc_theme"],
            props["compose_context_theme"],
            props["theme_priority"],
        )

    def receive_props(self, **props: Any) -> bool:
        """Replace the props, recomputing the theme only when needed.

        Returns ``True`` when the theme was recomputed.
        """

        next_props = self._with_defaults(props)
        changed = any(next_props.get(key) != self.props.get(key) for key in MEMO_PROPS)
        if changed:
            logger.debug("Recomputing theme for %s", self.themed.display_name)
            self._theme = self._calc_theme(next_props)
        self.props = next_props
        return changed

    def render(self) -> Any:
        mapped = self.props["map_themr_props"](self.props, self._theme)
        if isinstance(self.themed.component, Themed):
            # nested wrappers read their own slot of the same context
            return self.themed.component(theme_context=self.context, **mapped)
        return self.themed.component(**mapped)


def themr(
    component_name: Hashable,
    default_theme: Mapping[str, Any] | None = None,
    *,
    map_themr_props: MapThemrProps = default_map_themr_props,
    **options: Any,
) -> Callable[[Callable[..., Any]], Themed]:
    """Decorate a component with a default theme and composition options.

    Options are validated here rather than when the component is used.
    Decorating a :class:`Themed` wrapper that carries the same
    ``component_name`` composes both calls: the result is a new wrapper whose
    default theme merges the existing default theme with ``default_theme``.

    Raises
    ------
    InvalidConfigurationError
        For unknown options or values outside the enumerated modes.
    """

    themr_options = make_options(options)
    _check_mapper(map_themr_props)

    def decorator(component: Callable[..., Any]) -> Themed:
        if isinstance(component, Themed) and component.component_name == component_name:
            logger.debug("Extending default theme of %r", component_name)
            return component.extend(default_theme)
        config = ThemeConfig(component_name, dict(default_theme or {}))
        return Themed(component, config, themr_options, map_themr_props)

    return decorator


__all__ = [
    "MEMO_PROPS",
    "THEMR_PROPS",
    "ThemeConfig",
    "ThemeContext",
    "Themed",
    "ThemedInstance",
    "default_map_themr_props",
    "themr",
]
