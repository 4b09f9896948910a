"""Composition modes, priorities and validated themr options."""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "THEMR_"
OPTION_NAMES = ("compose_adhoc_theme", "compose_context_theme", "theme_priority")


class Compose(str, Enum):
    """How two theme layers are combined."""

    DEEP = "deeply"
    SOFT = "softly"
    SWAP = "swap"


class Priority(str, Enum):
    """Which of the contextual and default themes wins."""

    ADHOC_CONTEXT_DEFAULT = "adhoc-context-default"
    ADHOC_DEFAULT_CONTEXT = "adhoc-default-context"


class ThemrOptions(BaseModel):
    """Composition settings shared by a decorated component."""

    compose_adhoc_theme: Compose = Compose.DEEP
    compose_context_theme: Compose = Compose.SOFT
    theme_priority: Priority = Priority.ADHOC_CONTEXT_DEFAULT

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("compose_adhoc_theme", "compose_context_theme", mode="before")
    @classmethod
    def _swap_alias(cls, value: Any) -> Any:
        # ``False`` is the legacy spelling of "don't compose"
        if value is False:
            return Compose.SWAP
        return value

    @field_validator("compose_context_theme")
    @classmethod
    def _context_not_deep(cls, value: Compose) -> Compose:
        if value is Compose.DEEP:
            raise ValueError("context themes compose softly or swap")
        return value

    def replace(self, **changes: Any) -> "ThemrOptions":
        """Return a validated copy with ``changes`` applied."""

        return make_options(self.model_dump(), **changes)


def make_options(
    values: Mapping[str, Any] | None = None, **overrides: Any
) -> ThemrOptions:
    """Build :class:`ThemrOptions`, failing fast on invalid values.

    ``None`` values are ignored so callers can forward optional arguments.

    Raises
    ------
    InvalidConfigurationError
        When a composition mode or priority is not one of the enumerated
        values, or an unknown option name is given.
    """

    payload = {key: value for key, value in (values or {}).items() if value is not None}
    payload.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ThemrOptions(**payload)
    except ValidationError as exc:
        raise InvalidConfigurationError(f"Invalid themr options: {exc}") from exc


def options_from_env(environ: Mapping[str, str] | None = None) -> ThemrOptions:
    """Read option defaults from ``THEMR_*`` environment variables."""

    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    for name in OPTION_NAMES:
        raw = env.get(f"{ENV_PREFIX}{name.upper()}")
        if raw:
            values[name] = raw
    if values:
        logger.debug("Options from environment: %s", values)
    return make_options(values)


DEFAULT_OPTIONS = ThemrOptions()

__all__ = [
    "Compose",
    "DEFAULT_OPTIONS",
    "OPTION_NAMES",
    "Priority",
    "ThemrOptions",
    "make_options",
    "options_from_env",
]
