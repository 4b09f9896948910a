"""Resolve the final theme of a component from its three theme sources."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .errors import InvalidNamespaceError
from .merge import merge
from .options import Compose, Priority, make_options

logger = logging.getLogger(__name__)


def remove_namespace(key: str, namespace: str) -> str:
    """Strip ``namespace`` from ``key`` and lower-case the next character."""

    rest = key[len(namespace) :]
    return rest[:1].lower() + rest[1:]


def namespaced_theme(
    theme: Mapping[str, Any] | None, namespace: str | None
) -> Mapping[str, Any] | None:
    """Return the slots of ``theme`` prefixed with ``namespace``, unprefixed.

    Without a namespace the theme is returned untouched.

    Raises
    ------
    InvalidNamespaceError
        When ``namespace`` is set but no ``theme`` was supplied.
    """

    if not namespace:
        return theme
    if theme is None:
        raise InvalidNamespaceError(
            "Invalid theme_namespace use: theme_namespace should be used only "
            "together with an ad-hoc theme."
        )
    return {
        remove_namespace(key, namespace): value
        for key, value in theme.items()
        if key.startswith(namespace)
    }


def base_theme(
    context: Mapping[str, Any] | None,
    default: Mapping[str, Any] | None,
    compose_context: Compose,
    priority: Priority,
) -> dict[str, Any]:
    """Combine the contextual and default themes.

    This is a plain top-level overwrite, not a :func:`merge`: the source named
    first by ``priority`` either replaces the other (``SWAP``) or overrides its
    slots (``SOFT``).
    """

    context = dict(context or {})
    default = dict(default or {})
    context_first = priority is Priority.ADHOC_CONTEXT_DEFAULT
    if compose_context is Compose.SWAP:
        return context if context_first else default
    if context_first:
        return {**default, **context}
    return {**context, **default}


def resolve(
    adhoc: Mapping[str, Any] | None = None,
    namespace: str | None = None,
    context: Mapping[str, Any] | None = None,
    default: Mapping[str, Any] | None = None,
    compose_adhoc: Compose | str | bool = Compose.DEEP,
    compose_context: Compose | str | bool = Compose.SOFT,
    priority: Priority | str = Priority.ADHOC_CONTEXT_DEFAULT,
) -> dict[str, Any]:
    """Compute the theme handed to a wrapped component.

    Parameters
    ----------
    adhoc
        Theme supplied at the point of use.
    namespace
        Optional prefix selecting the ad-hoc slots meant for this component.
    context
        Theme inherited from an ancestor.
    default
        Theme bound when the component was decorated.
    compose_adhoc
        ``SWAP`` uses the ad-hoc theme alone, ``SOFT`` overrides the base
        theme's top-level slots, ``DEEP`` merges the base theme into it.
    compose_context
        ``SOFT`` or ``SWAP``, see :func:`base_theme`.
    priority
        Whether the contextual or the default theme wins.

    Raises
    ------
    InvalidConfigurationError
        For composition modes or priorities outside the enumerated values.
    InvalidNamespaceError
        When ``namespace`` is set without an ad-hoc theme.
    """

    options = make_options(
        compose_adhoc_theme=compose_adhoc,
        compose_context_theme=compose_context,
        theme_priority=priority,
    )
    adhoc = namespaced_theme(adhoc, namespace)

    if options.compose_adhoc_theme is Compose.SWAP:
        logger.debug("Ad-hoc theme swaps context and default themes")
        return dict(adhoc or {})

    base = base_theme(
        context, default, options.compose_context_theme, options.theme_priority
    )
    if options.compose_adhoc_theme is Compose.SOFT:
        return {**base, **(adhoc or {})}
    return merge(adhoc, base)


__all__ = ["base_theme", "namespaced_theme", "remove_namespace", "resolve"]
