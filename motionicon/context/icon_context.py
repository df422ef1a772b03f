"""Scoped icon configuration.

A provider publishes an ``AmbientConfig`` to everything resolved inside its
``with`` block. Individual icon props still override it.

Nested providers do not inherit from the enclosing provider: each one merges
its own fields against the library defaults before publishing, so a key the
inner provider omits comes from the defaults, not from the outer scope.

    with icon_provider(animated=False, default_size=32):
        state = use_icon_animation()       # is_animated == False
        with icon_provider(default_size=16):
            get_icon_context().animated    # None again (library default)
"""
from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from motionicon.utils.config import settings


class AmbientConfig(BaseModel):
    """Configuration for icon behaviour and defaults within a scope.

    ``animated`` left as ``None`` defers to the system reduced-motion
    preference: icons animate unless the user asked for less motion. An
    explicit ``True`` or ``False`` wins over that preference.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    animated: Optional[bool] = None
    default_size: float = Field(default=24, gt=0, alias="defaultSize")
    default_stroke_width: float = Field(default=2, ge=0, alias="defaultStrokeWidth")


def default_config() -> AmbientConfig:
    """The library-wide defaults, as configured through settings."""
    return AmbientConfig(
        animated=settings.default_animated,
        default_size=settings.default_size,
        default_stroke_width=settings.default_stroke_width,
    )


_current_config: ContextVar[Optional[AmbientConfig]] = ContextVar("motionicon_icon_config", default=None)


def merge_config(config: Optional[AmbientConfig | dict] = None, **fields: Any) -> AmbientConfig:
    """Merge partial configuration against the library defaults."""
    merged = default_config().model_dump()
    if isinstance(config, AmbientConfig):
        merged.update(config.model_dump(exclude_unset=True))
    elif config:
        merged.update(AmbientConfig.model_validate(config).model_dump(exclude_unset=True))
    if fields:
        merged.update(AmbientConfig.model_validate(fields).model_dump(exclude_unset=True))
    return AmbientConfig(**merged)


@contextmanager
def icon_provider(config: Optional[AmbientConfig | dict] = None, **fields: Any) -> Iterator[AmbientConfig]:
    """Publish icon configuration for the duration of the block."""
    published = merge_config(config, **fields)
    token = _current_config.set(published)
    try:
        yield published
    finally:
        _current_config.reset(token)


def get_icon_context() -> AmbientConfig:
    """Return the nearest published configuration, or the defaults outside any provider."""
    return _current_config.get() or default_config()
