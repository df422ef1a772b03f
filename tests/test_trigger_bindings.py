import itertools
import math

import pytest

from motionicon.animation.motion_presets import get_motion_preset
from motionicon.animation.motion_types import MotionType, TriggerType
from motionicon.animation.trigger_bindings import (
    ActivationKind,
    BindingSet,
    ElementActivation,
    bind,
)


@pytest.mark.parametrize("motion_type,trigger", list(itertools.product(MotionType, TriggerType)))
def test_disabled_animation_is_noop_for_every_combination(motion_type, trigger):
    bindings = bind(False, get_motion_preset(motion_type), trigger)
    assert bindings.initial is None
    assert bindings.activate is None
    assert bindings.transition is None
    assert bindings.is_noop
    assert bindings.activation.kind == ActivationKind.NEVER


@pytest.mark.parametrize("trigger", list(TriggerType))
def test_none_motion_type_is_noop_when_enabled(trigger):
    assert bind(True, get_motion_preset(MotionType.NONE), trigger).is_noop


def test_hover_binding():
    preset = get_motion_preset(MotionType.SCALE)
    bindings = bind(True, preset, "hover")
    assert bindings.initial == preset.initial
    assert bindings.activate == preset.hover
    assert bindings.transition == preset.transition
    assert bindings.activation.kind == ActivationKind.POINTER_OVER
    assert not bindings.activation.once


def test_loop_forces_infinite_repeat_on_finite_transition():
    preset = get_motion_preset(MotionType.SCALE)
    assert preset.transition.repeat is None

    bindings = bind(True, preset, TriggerType.LOOP)
    assert bindings.transition.repeat == math.inf
    assert bindings.transition.stiffness == preset.transition.stiffness
    assert bindings.activation.kind == ActivationKind.ALWAYS
    # Catalog entry is left untouched
    assert preset.transition.repeat is None


def test_mount_plays_once():
    preset = get_motion_preset(MotionType.PULSE)
    bindings = bind(True, preset, TriggerType.MOUNT)
    assert bindings.activation.kind == ActivationKind.FIRST_MOUNT
    assert bindings.activation.once
    assert bindings.transition.repeat is None
    assert bindings.activate == preset.hover


def test_in_view_fires_once_at_half_visibility():
    bindings = bind(True, get_motion_preset(MotionType.BOUNCE), TriggerType.IN_VIEW)
    assert bindings.activation.kind == ActivationKind.VIEWPORT_ENTRY
    assert bindings.activation.once
    assert bindings.activation.viewport_amount == 0.5


def test_unknown_trigger_is_treated_as_hover():
    bindings = bind(True, get_motion_preset(MotionType.SCALE), "on-click")
    assert bindings.trigger == TriggerType.HOVER
    assert bindings.activation.kind == ActivationKind.POINTER_OVER


def test_hover_activation_reverts_on_leave():
    element = ElementActivation(bind(True, get_motion_preset(MotionType.SCALE), "hover").activation)
    element.on_mount()
    assert not element.active
    element.on_pointer_enter()
    assert element.active
    element.on_pointer_leave()
    assert not element.active


def test_loop_and_mount_activate_once_mounted():
    for trigger in (TriggerType.LOOP, TriggerType.MOUNT):
        element = ElementActivation(bind(True, get_motion_preset(MotionType.SPIN), trigger).activation)
        assert not element.active
        element.on_mount()
        assert element.active
        element.on_pointer_leave()
        assert element.active


def test_in_view_does_not_retrigger_after_scrolling_away():
    element = ElementActivation(bind(True, get_motion_preset(MotionType.FLOAT), "inView").activation)
    element.on_mount()
    element.on_intersection(0.2)
    assert not element.active
    element.on_intersection(0.6)
    assert element.active
    element.on_intersection(0.0)
    assert element.active


def test_disabled_element_never_activates():
    element = ElementActivation(bind(False, get_motion_preset(MotionType.SCALE), "hover").activation)
    element.on_mount()
    element.on_pointer_enter()
    element.on_intersection(1.0)
    assert not element.active


def test_binding_set_to_dict():
    data = bind(True, get_motion_preset(MotionType.SHAKE), "inView").to_dict()
    assert data["trigger"] == "inView"
    assert data["activate"] == {"x": [0, -3, 3, -3, 3, 0]}
    assert data["activation"]["viewport"] == {"once": True, "amount": 0.5}
    assert BindingSet().to_dict()["activation"] == {"kind": "never", "once": False}
