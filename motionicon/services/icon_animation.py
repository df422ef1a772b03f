"""Icon animation facade.

The only entry point rendering code needs. Reads the ambient configuration
and the system reduced-motion preference, then composes preset lookup,
animation resolution, trigger binding and draw propagation into one result.
Nothing is cached: each call recomputes from its inputs.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from motionicon.animation import draw_propagation
from motionicon.animation.css_animations import DRAW_PATH_CLASS, get_css_animation_classes
from motionicon.animation.motion_presets import (
    CustomMotionPreset,
    TransitionProfile,
    Variants,
    get_motion_preset,
    variants_to_dict,
)
from motionicon.animation.motion_types import AnimationMode, MotionType, TriggerType
from motionicon.animation.trigger_bindings import BindingSet, bind
from motionicon.context.icon_context import AmbientConfig, get_icon_context
from motionicon.schemas import IconProps
from motionicon.services.config_resolver import ResolvedGeometry, resolve_animated, resolve_geometry
from motionicon.services.reduced_motion import use_reduced_motion

VIEW_BOX = "0 0 24 24"
DRAW_ROOT_CLASS = "draw-animation"
DRAW_CHILD_CLASS = "draw-path"


@dataclass
class ResolvedAnimationState:
    """Everything a renderer needs to wire up one icon's animation."""
    is_animated: bool
    motion_type: MotionType
    trigger: TriggerType
    variants: Optional[Variants]
    transition: Optional[TransitionProfile]
    preset_transition: TransitionProfile
    wrapper_bindings: BindingSet
    path_bindings: BindingSet = field(default_factory=BindingSet)
    draw_wrapper_bindings: BindingSet = field(default_factory=BindingSet)

    @property
    def preset_variants(self) -> Optional[Variants]:
        return self.variants

    def get_variants(self, variants: Any) -> Optional[Any]:
        """Return ``variants`` when animated, else ``None``."""
        return variants if self.is_animated else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isAnimated": self.is_animated,
            "motionType": self.motion_type.value,
            "trigger": self.trigger.value,
            "variants": variants_to_dict(self.variants),
            "transition": self.transition.to_dict() if self.transition else None,
            "presetTransition": self.preset_transition.to_dict(),
            "wrapperBindings": self.wrapper_bindings.to_dict(),
            "pathBindings": self.path_bindings.to_dict(),
            "drawWrapperBindings": self.draw_wrapper_bindings.to_dict(),
        }


def use_icon_animation(
    animated: Optional[bool] = None,
    motion_type: Any = MotionType.SCALE,
    trigger: Any = TriggerType.HOVER,
    *,
    motion_preset: Optional[CustomMotionPreset] = None,
    ambient: Optional[AmbientConfig] = None,
    reduced_motion: Optional[bool] = None,
) -> ResolvedAnimationState:
    """Resolve animation state for one icon.

    Priority for ``is_animated``: ``animated`` > ambient ``animated`` >
    system reduced-motion preference. ``ambient`` and ``reduced_motion``
    default to the current provider scope and the process-wide observer.
    A ``motion_preset`` replaces the catalog entry for ``motion_type``.
    """
    motion_type = MotionType.parse(motion_type)
    trigger = TriggerType.parse(trigger)
    if ambient is None:
        ambient = get_icon_context()
    if reduced_motion is None:
        reduced_motion = use_reduced_motion()

    preset = motion_preset.to_preset() if motion_preset is not None else get_motion_preset(motion_type)
    is_animated = resolve_animated(animated, ambient, reduced_motion)
    wrapper = bind(is_animated, preset, trigger)

    state = ResolvedAnimationState(
        is_animated=is_animated,
        motion_type=motion_type,
        trigger=trigger,
        variants=preset.variants if is_animated else None,
        transition=wrapper.transition,
        preset_transition=preset.transition,
        wrapper_bindings=wrapper,
    )
    if motion_type == MotionType.DRAW and motion_preset is None:
        state.path_bindings = draw_propagation.adapt(wrapper)
        state.draw_wrapper_bindings = draw_propagation.wrapper_bindings(wrapper)
    return state


@dataclass
class IconRenderState:
    """Resolved props for one icon: root attributes plus animation wiring."""
    attributes: Dict[str, str]
    geometry: ResolvedGeometry
    animation: ResolvedAnimationState
    mode: AnimationMode
    root_bindings: BindingSet
    path_bindings: BindingSet
    path_class: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attributes": dict(self.attributes),
            "size": self.geometry.size,
            "strokeWidth": self.geometry.stroke_width,
            "mode": self.mode.value,
            "pathClass": self.path_class,
            "rootBindings": self.root_bindings.to_dict(),
            "pathBindings": self.path_bindings.to_dict(),
            "animation": self.animation.to_dict(),
        }


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def resolve_icon(props: Optional[IconProps | Dict[str, Any]] = None, **kwargs: Any) -> IconRenderState:
    """Resolve props for one icon render.

    Accepts an ``IconProps``, a props dict, or keyword props. The ``css``
    animation mode swaps motion bindings for class names; ``none`` renders
    statically.
    """
    if not isinstance(props, IconProps) or kwargs:
        data = props.model_dump(exclude_unset=True) if isinstance(props, IconProps) else dict(props or {})
        data.update(kwargs)
        props = IconProps.model_validate(data)

    ambient = get_icon_context()
    mode = props.animation_mode
    animation = use_icon_animation(
        False if mode == AnimationMode.NONE else props.animated,
        props.motion_type,
        props.trigger,
        motion_preset=props.motion_preset,
        ambient=ambient,
    )
    geometry = resolve_geometry(ambient, props.size, props.stroke_width)
    is_draw = animation.motion_type == MotionType.DRAW and props.motion_preset is None

    classes = [props.class_name or ""]
    root_bindings = BindingSet()
    path_bindings = BindingSet()
    path_class = ""
    if mode == AnimationMode.MOTION:
        if is_draw:
            classes.append(DRAW_ROOT_CLASS)
            root_bindings = animation.draw_wrapper_bindings
            path_bindings = animation.path_bindings
            path_class = DRAW_CHILD_CLASS
        else:
            root_bindings = animation.wrapper_bindings
    elif mode == AnimationMode.CSS and animation.is_animated:
        classes.append(get_css_animation_classes(animation.motion_type, animation.trigger))
        if is_draw:
            path_class = DRAW_PATH_CLASS

    attributes = {
        "width": _fmt(geometry.size),
        "height": _fmt(geometry.size),
        "viewBox": VIEW_BOX,
        "fill": "none",
        "stroke": "currentColor",
        "stroke-width": _fmt(geometry.stroke_width),
        "stroke-linecap": "round",
        "stroke-linejoin": "round",
    }
    class_attr = " ".join(c for c in classes if c).strip()
    if class_attr:
        attributes["class"] = class_attr
    if props.aria_label:
        attributes["role"] = "img"
        attributes["aria-label"] = props.aria_label
    else:
        attributes["aria-hidden"] = "true"

    return IconRenderState(
        attributes=attributes,
        geometry=geometry,
        animation=animation,
        mode=mode,
        root_bindings=root_bindings,
        path_bindings=path_bindings,
        path_class=path_class,
    )
