"""Icon animation resolution.

Given an icon's animation props, the ambient provider configuration and the
system reduced-motion preference, resolve whether the icon animates, which
motion preset applies and how it is bound to its trigger.
"""

from motionicon.animation import (
    AnimationMode,
    CustomMotionPreset,
    MotionType,
    TransitionProfile,
    TriggerType,
    get_motion_preset,
)
from motionicon.context import AmbientConfig, get_icon_context, icon_provider
from motionicon.schemas import IconProps
from motionicon.services.icon_animation import (
    IconRenderState,
    ResolvedAnimationState,
    resolve_icon,
    use_icon_animation,
)
from motionicon.services.reduced_motion import (
    ReducedMotionSignal,
    SystemPreferenceObserver,
    get_system_preference_observer,
    set_reduced_motion_source,
    use_reduced_motion,
)

__all__ = [
    "AmbientConfig",
    "AnimationMode",
    "CustomMotionPreset",
    "IconProps",
    "IconRenderState",
    "MotionType",
    "ReducedMotionSignal",
    "ResolvedAnimationState",
    "SystemPreferenceObserver",
    "TransitionProfile",
    "TriggerType",
    "get_icon_context",
    "get_motion_preset",
    "get_system_preference_observer",
    "icon_provider",
    "resolve_icon",
    "set_reduced_motion_source",
    "use_icon_animation",
    "use_reduced_motion",
]
