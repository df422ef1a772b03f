"""Motion presets, trigger bindings and CSS animation support for icons.

Components:
- motion_types: closed enumerations for motion type, trigger and mode
- motion_presets: catalog of variants and transitions per motion type
- trigger_bindings: binds a preset to a trigger mode
- draw_propagation: per-path bindings for the draw motion type
- css_animations: CSS-only keyframes, classes and SVG injection
"""

from motionicon.animation.motion_types import (
    AnimationMode,
    MotionType,
    TriggerType,
)

from motionicon.animation.motion_presets import (
    MOTION_PRESETS,
    MOTION_TYPE_LIST,
    REPEAT_INFINITE,
    CustomMotionPreset,
    MotionPreset,
    TransitionKind,
    TransitionProfile,
    get_motion_preset,
)

from motionicon.animation.trigger_bindings import (
    ActivationCondition,
    ActivationKind,
    BindingSet,
    ElementActivation,
    bind,
)

from motionicon.animation.css_animations import (
    build_stylesheet,
    get_css_animation_classes,
    inject_css_animations,
    remove_css_animations,
)

__all__ = [
    # Enumerations
    "AnimationMode",
    "MotionType",
    "TriggerType",
    # Presets
    "MOTION_PRESETS",
    "MOTION_TYPE_LIST",
    "REPEAT_INFINITE",
    "CustomMotionPreset",
    "MotionPreset",
    "TransitionKind",
    "TransitionProfile",
    "get_motion_preset",
    # Bindings
    "ActivationCondition",
    "ActivationKind",
    "BindingSet",
    "ElementActivation",
    "bind",
    # CSS
    "build_stylesheet",
    "get_css_animation_classes",
    "inject_css_animations",
    "remove_css_animations",
]
