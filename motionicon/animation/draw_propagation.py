"""Path-drawing support for the ``draw`` motion type.

Drawing animates ``pathLength`` on each inner path rather than transforming the
whole icon. The outer element keeps the activation condition (it is the one
that receives hover or viewport events) and hands the very same condition
object to the path bindings, so every path animates in lockstep with it.
"""
from __future__ import annotations

from motionicon.animation.motion_presets import (
    HOVER,
    INITIAL,
    REPEAT_INFINITE,
    TransitionProfile,
    freeze_variants,
)
from motionicon.animation.motion_types import TriggerType
from motionicon.animation.trigger_bindings import BindingSet

DRAW_TRANSITION = TransitionProfile(duration=1.5, ease="easeInOut")

# Starts fully drawn, redraws on hover
DRAW_HOVER_VARIANTS = freeze_variants({
    INITIAL: {"pathLength": 1, "opacity": 1},
    HOVER: {"pathLength": [1, 0, 1], "opacity": 1},
})
DRAW_HOVER_TRANSITION = TransitionProfile(duration=0.8, ease="easeInOut")

# Draws in then out, forever
DRAW_LOOP_VARIANTS = freeze_variants({
    INITIAL: {"pathLength": 0, "opacity": 0.5},
    HOVER: {"pathLength": [0, 1, 1, 0], "opacity": [0.5, 1, 1, 0.5]},
})
DRAW_LOOP_TRANSITION = TransitionProfile(
    duration=3,
    ease="easeInOut",
    times=(0, 0.4, 0.6, 1),
    repeat=REPEAT_INFINITE,
)

# Draws in once, on mount or on first sight
DRAW_IN_VARIANTS = freeze_variants({
    INITIAL: {"pathLength": 0, "opacity": 0.3},
    HOVER: {"pathLength": 1, "opacity": 1},
})


def _path_profile(trigger: TriggerType):
    if trigger == TriggerType.LOOP:
        return DRAW_LOOP_VARIANTS, DRAW_LOOP_TRANSITION
    if trigger in (TriggerType.MOUNT, TriggerType.IN_VIEW):
        return DRAW_IN_VARIANTS, DRAW_TRANSITION
    return DRAW_HOVER_VARIANTS, DRAW_HOVER_TRANSITION


def adapt(wrapper: BindingSet) -> BindingSet:
    """Derive the per-path bindings from the outer element's bindings.

    A disabled wrapper (no ``activate`` state) yields disabled paths sharing
    its inert condition.
    """
    if wrapper.activate is None:
        return BindingSet(trigger=wrapper.trigger, activation=wrapper.activation)

    variants, transition = _path_profile(TriggerType.parse(wrapper.trigger))
    return BindingSet(
        trigger=wrapper.trigger,
        initial=variants[INITIAL],
        activate=variants[HOVER],
        variants=variants,
        transition=transition,
        activation=wrapper.activation,
    )


def wrapper_bindings(wrapper: BindingSet) -> BindingSet:
    """Bindings for the outer element of a drawn icon.

    It has no visual animation of its own, only the activation condition
    that its paths follow.
    """
    return BindingSet(trigger=wrapper.trigger, activation=wrapper.activation)
