"""Closed enumerations for motion types, trigger modes and animation modes.

Each enum exposes a total ``parse()``: any input, including ``None`` and
unrecognised strings, maps to a member. Unknown values fall back to the
default member instead of raising.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class MotionType(str, Enum):
    """Named animation styles available to every icon."""
    SCALE = "scale"
    ROTATE = "rotate"
    TRANSLATE = "translate"
    SHAKE = "shake"
    PULSE = "pulse"
    BOUNCE = "bounce"
    DRAW = "draw"
    SPIN = "spin"
    RING = "ring"
    WIGGLE = "wiggle"
    HEARTBEAT = "heartbeat"
    SWING = "swing"
    FLOAT = "float"
    NONE = "none"

    @classmethod
    def parse(cls, value: Any) -> "MotionType":
        return _parse(cls, value, cls.SCALE)


class TriggerType(str, Enum):
    """Condition under which an icon animation activates."""
    HOVER = "hover"
    LOOP = "loop"
    MOUNT = "mount"
    IN_VIEW = "inView"

    @classmethod
    def parse(cls, value: Any) -> "TriggerType":
        return _parse(cls, value, cls.HOVER)


class AnimationMode(str, Enum):
    """How an icon is animated: motion bindings, CSS classes, or not at all."""
    MOTION = "motion"
    CSS = "css"
    NONE = "none"

    @classmethod
    def parse(cls, value: Any) -> "AnimationMode":
        return _parse(cls, value, cls.MOTION)


def _parse(enum_cls, value, default):
    if value is None:
        return default
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        logger.warning(f"Unknown {enum_cls.__name__} {value!r}, using '{default.value}'")
        return default
