import math

import pytest

from motionicon.animation import draw_propagation
from motionicon.animation.motion_presets import get_motion_preset
from motionicon.animation.motion_types import MotionType, TriggerType
from motionicon.animation.trigger_bindings import ActivationKind, bind


@pytest.fixture
def draw_preset():
    return get_motion_preset(MotionType.DRAW)


@pytest.mark.parametrize("trigger", list(TriggerType))
@pytest.mark.parametrize("animated", [True, False])
def test_paths_share_wrapper_activation(draw_preset, trigger, animated):
    wrapper = bind(animated, draw_preset, trigger)
    paths = draw_propagation.adapt(wrapper)
    outer = draw_propagation.wrapper_bindings(wrapper)
    assert paths.activation is outer.activation
    assert paths.activation is wrapper.activation


@pytest.mark.parametrize("trigger", list(TriggerType))
def test_draw_wrapper_has_no_visual_animation(draw_preset, trigger):
    outer = draw_propagation.wrapper_bindings(bind(True, draw_preset, trigger))
    assert outer.initial is None and outer.activate is None
    assert outer.activation.kind != ActivationKind.NEVER


def test_hover_redraws_paths(draw_preset):
    paths = draw_propagation.adapt(bind(True, draw_preset, TriggerType.HOVER))
    assert dict(paths.initial) == {"pathLength": 1, "opacity": 1}
    assert dict(paths.activate) == {"pathLength": (1, 0, 1), "opacity": 1}
    assert paths.transition.duration == 0.8


def test_loop_draws_in_and_out_forever(draw_preset):
    paths = draw_propagation.adapt(bind(True, draw_preset, TriggerType.LOOP))
    assert paths.activate["pathLength"] == (0, 1, 1, 0)
    assert paths.transition.repeat == math.inf
    assert paths.transition.times == (0, 0.4, 0.6, 1)


@pytest.mark.parametrize("trigger", [TriggerType.MOUNT, TriggerType.IN_VIEW])
def test_mount_and_in_view_draw_in(draw_preset, trigger):
    paths = draw_propagation.adapt(bind(True, draw_preset, trigger))
    assert dict(paths.initial) == {"pathLength": 0, "opacity": 0.3}
    assert dict(paths.activate) == {"pathLength": 1, "opacity": 1}
    assert paths.transition.duration == 1.5


def test_disabled_draw_paths_are_noop(draw_preset):
    paths = draw_propagation.adapt(bind(False, draw_preset, TriggerType.LOOP))
    assert paths.is_noop
    assert paths.activation.kind == ActivationKind.NEVER
