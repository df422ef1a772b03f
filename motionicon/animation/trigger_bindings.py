"""Bind a motion preset to a trigger mode.

A ``BindingSet`` is what a rendering layer wires onto an element: the state it
starts in, the state it is driven to, the transition used, and the condition
under which the drive happens.

Trigger semantics:
- hover: active while the pointer is over the element, reverts on leave
- loop: active as soon as the element is mounted, repeating forever
- mount: active once on first appearance, never reverts or repeats
- inView: active the first time half the element is visible, never re-fires
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from motionicon.animation.motion_presets import (
    MotionPreset,
    PropertyDelta,
    TransitionProfile,
    Variants,
    delta_to_dict,
    variants_to_dict,
)
from motionicon.animation.motion_types import TriggerType

VIEWPORT_AMOUNT = 0.5


class ActivationKind(str, Enum):
    NEVER = "never"
    POINTER_OVER = "pointer_over"
    ALWAYS = "always"
    FIRST_MOUNT = "first_mount"
    VIEWPORT_ENTRY = "viewport_entry"


@dataclass(frozen=True)
class ActivationCondition:
    """When a binding's ``activate`` state applies."""
    kind: ActivationKind
    once: bool = False
    viewport_amount: Optional[float] = None

    def is_met(self, hovered: bool = False, mounted: bool = True, seen: bool = False) -> bool:
        """Evaluate the condition for an element's current interaction state.

        ``seen`` must already be latched by the caller (see ``ElementActivation``).
        """
        if self.kind == ActivationKind.POINTER_OVER:
            return mounted and hovered
        if self.kind in (ActivationKind.ALWAYS, ActivationKind.FIRST_MOUNT):
            return mounted
        if self.kind == ActivationKind.VIEWPORT_ENTRY:
            return mounted and seen
        return False

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind.value, "once": self.once}
        if self.viewport_amount is not None:
            data["viewport"] = {"once": self.once, "amount": self.viewport_amount}
        return data


NEVER_ACTIVE = ActivationCondition(ActivationKind.NEVER)


@dataclass
class BindingSet:
    trigger: Optional[TriggerType] = None
    initial: Optional[PropertyDelta] = None
    activate: Optional[PropertyDelta] = None
    variants: Optional[Variants] = None
    transition: Optional[TransitionProfile] = None
    activation: ActivationCondition = NEVER_ACTIVE

    @property
    def is_noop(self) -> bool:
        """True when no property would ever change."""
        return not self.initial and not self.activate

    def to_dict(self) -> Dict[str, Any]:
        return {
            "trigger": self.trigger.value if self.trigger else None,
            "initial": delta_to_dict(self.initial),
            "activate": delta_to_dict(self.activate),
            "variants": variants_to_dict(self.variants),
            "transition": self.transition.to_dict() if self.transition else None,
            "activation": self.activation.to_dict(),
        }


def activation_for(trigger: TriggerType) -> ActivationCondition:
    if trigger == TriggerType.LOOP:
        return ActivationCondition(ActivationKind.ALWAYS)
    if trigger == TriggerType.MOUNT:
        return ActivationCondition(ActivationKind.FIRST_MOUNT, once=True)
    if trigger == TriggerType.IN_VIEW:
        return ActivationCondition(ActivationKind.VIEWPORT_ENTRY, once=True, viewport_amount=VIEWPORT_AMOUNT)
    return ActivationCondition(ActivationKind.POINTER_OVER)


def transition_for(trigger: TriggerType, transition: TransitionProfile) -> TransitionProfile:
    if trigger == TriggerType.LOOP:
        return transition.looping()
    if trigger == TriggerType.MOUNT:
        return transition.single_run()
    return transition


def bind(is_animated: bool, preset: MotionPreset, trigger: Any = TriggerType.HOVER) -> BindingSet:
    """Produce the bindings for ``preset`` under ``trigger``.

    With animation disabled the result is a no-op whatever the preset or
    trigger, identical at the binding level to the ``none`` motion type.
    """
    trigger = TriggerType.parse(trigger)
    if not is_animated:
        return BindingSet(trigger=trigger)

    return BindingSet(
        trigger=trigger,
        initial=preset.initial,
        activate=preset.hover,
        variants=preset.variants,
        transition=transition_for(trigger, preset.transition),
        activation=activation_for(trigger),
    )


class ElementActivation:
    """Interaction state of one rendered element, evaluated against a condition.

    Viewport entry is latched: once the element has been seen it stays seen,
    so scrolling away and back never re-triggers a ``once`` activation.
    """

    def __init__(self, condition: ActivationCondition) -> None:
        self.condition = condition
        self.hovered = False
        self.mounted = False
        self.seen = False

    def on_mount(self) -> None:
        self.mounted = True

    def on_unmount(self) -> None:
        self.mounted = False
        self.hovered = False

    def on_pointer_enter(self) -> None:
        self.hovered = True

    def on_pointer_leave(self) -> None:
        self.hovered = False

    def on_intersection(self, visible_ratio: float) -> None:
        threshold = self.condition.viewport_amount or 0.0
        if visible_ratio > 0 and visible_ratio >= threshold:
            self.seen = True

    @property
    def active(self) -> bool:
        return self.condition.is_met(hovered=self.hovered, mounted=self.mounted, seen=self.seen)
