"""Deep merge of CSS themes with class token concatenation."""

from __future__ import annotations

from typing import Any, Mapping, Union

from .errors import TypeMismatchError

Theme = Mapping[str, Union[str, "Theme"]]


def _join_tokens(original: Any, mixin: Any) -> str:
    tokens = str(original).split(" ") + str(mixin).split(" ")
    return " ".join(token for token in dict.fromkeys(tokens) if token)


def combine(
    original: Mapping[str, Any] | None, mixin: Mapping[str, Any] | None
) -> dict[str, Any]:
    """Merge ``mixin`` into a copy of ``original``.

    Token strings present in both themes are concatenated original-first with
    duplicates removed, nested themes are merged recursively. Callable values
    (helpers injected by style loaders) are dropped from ``original`` and
    ignored in ``mixin``, as are ``None`` values in ``mixin``. A slot whose
    original value was a callable is therefore treated as absent.

    Raises
    ------
    TypeMismatchError
        When a slot is a nested theme on one side and a plain value on the
        other.
    """

    result = {
        key: value for key, value in (original or {}).items() if not callable(value)
    }

    for key, value in (mixin or {}).items():
        current = result.get(key)

        if isinstance(value, Mapping):
            if isinstance(current, Mapping):
                result[key] = combine(current, value)
            elif current is None:
                result[key] = value
            else:
                raise TypeMismatchError(
                    f"You are merging object {key!r} with a non-object {current!r}"
                )
            continue

        if value is None or callable(value):
            continue

        if isinstance(current, Mapping):
            raise TypeMismatchError(
                f"You are merging non-object {value!r} with an object {key!r}"
            )
        if current is None:
            result[key] = value
        else:
            result[key] = _join_tokens(current, value)

    return result


def merge(*themes: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge ``themes`` left to right with :func:`combine`."""

    result: dict[str, Any] = {}
    for theme in themes:
        result = combine(result, theme)
    return result


__all__ = ["Theme", "combine", "merge"]
