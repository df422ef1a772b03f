"""Motion presets - predefined variants and transitions for each motion type."""
from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from motionicon.animation.motion_types import MotionType

# A property target is a single number or a keyframe sequence.
PropertyTarget = Union[float, Tuple[float, ...]]
PropertyDelta = Mapping[str, PropertyTarget]
Variants = Mapping[str, PropertyDelta]

INITIAL = "initial"
HOVER = "hover"

REPEAT_INFINITE = math.inf


class TransitionKind(str, Enum):
    SPRING = "spring"
    TWEEN = "tween"


@dataclass(frozen=True)
class TransitionProfile:
    """Timing parameters for a variant change.

    ``ease`` is either a named curve ("easeInOut", "linear") or a cubic-bezier
    control tuple. ``repeat`` is ``None`` for a single run, ``REPEAT_INFINITE``
    for endless repetition.
    """
    kind: TransitionKind = TransitionKind.TWEEN
    duration: Optional[float] = None
    ease: Optional[Union[str, Tuple[float, float, float, float]]] = None
    stiffness: Optional[float] = None
    damping: Optional[float] = None
    times: Optional[Tuple[float, ...]] = None
    repeat: Optional[float] = None
    repeat_type: Optional[str] = None

    @property
    def repeats_forever(self) -> bool:
        return self.repeat == REPEAT_INFINITE

    def looping(self) -> "TransitionProfile":
        """Return a copy that repeats endlessly."""
        return replace(self, repeat=REPEAT_INFINITE, repeat_type="loop")

    def single_run(self) -> "TransitionProfile":
        """Return a copy that plays exactly once."""
        return replace(self, repeat=None, repeat_type=None)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.kind.value}
        for key in ("duration", "stiffness", "damping"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.ease is not None:
            data["ease"] = self.ease if isinstance(self.ease, str) else list(self.ease)
        if self.times is not None:
            data["times"] = list(self.times)
        if self.repeat is not None:
            data["repeat"] = "Infinity" if self.repeats_forever else self.repeat
        if self.repeat_type is not None:
            data["repeatType"] = self.repeat_type
        return data


def freeze_variants(variants: Mapping[str, Mapping[str, Any]]) -> Variants:
    """Copy variants into read-only mappings with tuple keyframes."""
    frozen = {}
    for state, delta in variants.items():
        frozen[state] = MappingProxyType(
            {prop: tuple(target) if isinstance(target, (list, tuple)) else target for prop, target in delta.items()}
        )
    return MappingProxyType(frozen)


def variants_to_dict(variants: Optional[Variants]) -> Optional[Dict[str, Dict[str, Any]]]:
    if variants is None:
        return None
    return {state: delta_to_dict(delta) for state, delta in variants.items()}


def delta_to_dict(delta: Optional[PropertyDelta]) -> Optional[Dict[str, Any]]:
    if delta is None:
        return None
    return {prop: list(target) if isinstance(target, tuple) else target for prop, target in delta.items()}


@dataclass(frozen=True)
class MotionPreset:
    """Variants plus the transition that drives them."""
    variants: Variants
    transition: TransitionProfile
    name: str = ""

    @property
    def initial(self) -> PropertyDelta:
        return self.variants.get(INITIAL, MappingProxyType({}))

    @property
    def hover(self) -> PropertyDelta:
        return self.variants.get(HOVER, MappingProxyType({}))

    @property
    def is_noop(self) -> bool:
        return not self.initial and not self.hover


@dataclass
class CustomMotionPreset:
    """User-defined preset that replaces the catalog lookup for one icon."""
    name: str
    variants: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    transition: TransitionProfile = field(default_factory=TransitionProfile)

    def to_preset(self) -> MotionPreset:
        variants = {INITIAL: {}, HOVER: {}}
        variants.update(self.variants)
        return MotionPreset(variants=freeze_variants(variants), transition=self.transition, name=self.name)


# === Transition feels ===

SPRING_BOUNCY = TransitionProfile(kind=TransitionKind.SPRING, stiffness=400, damping=10)
SPRING_SOFT = TransitionProfile(kind=TransitionKind.SPRING, stiffness=300, damping=20)
SPRING_SNAPPY = TransitionProfile(kind=TransitionKind.SPRING, stiffness=500, damping=25)
EASE_SMOOTH = TransitionProfile(duration=0.3, ease="easeInOut")
NO_TRANSITION = TransitionProfile(duration=0)


def _preset(name: str, initial: Dict[str, Any], hover: Dict[str, Any], transition: TransitionProfile) -> MotionPreset:
    return MotionPreset(variants=freeze_variants({INITIAL: initial, HOVER: hover}), transition=transition, name=name)


MOTION_PRESETS: Mapping[MotionType, MotionPreset] = MappingProxyType({
    MotionType.SCALE: _preset("scale", {"scale": 1}, {"scale": 1.15}, SPRING_BOUNCY),
    MotionType.ROTATE: _preset("rotate", {"rotate": 0}, {"rotate": 180}, SPRING_SOFT),
    MotionType.TRANSLATE: _preset("translate", {"x": 0, "y": 0}, {"x": 2, "y": -2}, SPRING_SNAPPY),
    MotionType.SHAKE: _preset(
        "shake",
        {"x": 0},
        {"x": [0, -3, 3, -3, 3, 0]},
        TransitionProfile(duration=0.4),
    ),
    MotionType.PULSE: _preset(
        "pulse",
        {"scale": 1, "opacity": 1},
        {"scale": [1, 1.1, 1], "opacity": [1, 0.8, 1]},
        TransitionProfile(duration=0.6, ease="easeInOut", repeat=REPEAT_INFINITE),
    ),
    MotionType.BOUNCE: _preset(
        "bounce",
        {"y": 0},
        {"y": [0, -6, 0]},
        TransitionProfile(duration=0.4, ease=(0.22, 1, 0.36, 1), times=(0, 0.5, 1)),
    ),
    MotionType.DRAW: _preset(
        "draw",
        {"opacity": 0.4, "scale": 0.9},
        {"opacity": 1, "scale": 1},
        TransitionProfile(duration=0.5, ease=(0.4, 0, 0.2, 1)),
    ),
    MotionType.SPIN: _preset(
        "spin",
        {"rotate": 0},
        {"rotate": 360},
        TransitionProfile(duration=0.8, ease="linear", repeat=REPEAT_INFINITE),
    ),
    MotionType.RING: _preset(
        "ring",
        {"rotate": 0},
        {"rotate": [0, 14, -12, 8, -6, 3, 0]},
        TransitionProfile(duration=0.6, ease=(0.36, 0, 0.66, 1)),
    ),
    MotionType.WIGGLE: _preset(
        "wiggle",
        {"rotate": 0},
        {"rotate": [0, -12, 12, -8, 8, -4, 4, 0]},
        TransitionProfile(duration=0.6, ease="easeOut"),
    ),
    MotionType.HEARTBEAT: _preset(
        "heartbeat",
        {"scale": 1},
        {"scale": [1, 1.15, 1, 1.1, 1]},
        TransitionProfile(duration=0.8, ease="easeInOut", times=(0, 0.14, 0.28, 0.42, 1)),
    ),
    MotionType.SWING: _preset(
        "swing",
        {"rotate": 0},
        {"rotate": [0, 15, -10, 5, -5, 0]},
        TransitionProfile(duration=0.6, ease="easeOut"),
    ),
    MotionType.FLOAT: _preset(
        "float",
        {"y": 0},
        {"y": [0, -8, 0]},
        TransitionProfile(duration=1.5, ease="easeInOut", repeat=REPEAT_INFINITE),
    ),
    MotionType.NONE: _preset("none", {}, {}, NO_TRANSITION),
})


def get_motion_preset(motion_type: Any = MotionType.SCALE) -> MotionPreset:
    """Get the motion preset for a type; unknown types resolve to ``scale``."""
    return MOTION_PRESETS[MotionType.parse(motion_type)]


@dataclass(frozen=True)
class MotionTypeInfo:
    type: MotionType
    label: str
    description: str


# Listing for pickers and developer tools
MOTION_TYPE_LIST: List[MotionTypeInfo] = [
    MotionTypeInfo(MotionType.SCALE, "Scale", "Grow on hover"),
    MotionTypeInfo(MotionType.ROTATE, "Rotate", "Spin on hover"),
    MotionTypeInfo(MotionType.TRANSLATE, "Translate", "Slide on hover"),
    MotionTypeInfo(MotionType.SHAKE, "Shake", "Wobble effect"),
    MotionTypeInfo(MotionType.PULSE, "Pulse", "Heartbeat effect"),
    MotionTypeInfo(MotionType.BOUNCE, "Bounce", "Bouncy spring"),
    MotionTypeInfo(MotionType.DRAW, "Draw", "Fade reveal"),
    MotionTypeInfo(MotionType.SPIN, "Spin", "Continuous rotation"),
    MotionTypeInfo(MotionType.RING, "Ring", "Bell swing"),
    MotionTypeInfo(MotionType.WIGGLE, "Wiggle", "Playful wiggle"),
    MotionTypeInfo(MotionType.HEARTBEAT, "Heartbeat", "Double pulse"),
    MotionTypeInfo(MotionType.SWING, "Swing", "Pendulum swing"),
    MotionTypeInfo(MotionType.FLOAT, "Float", "Gentle hover"),
    MotionTypeInfo(MotionType.NONE, "None", "No animation"),
]
