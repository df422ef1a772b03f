import pytest

from motionicon.animation.css_animations import (
    CSS_KEYFRAMES,
    CSS_TIMING,
    STYLE_ELEMENT_ID,
    build_stylesheet,
    get_css_animation_classes,
    inject_css_animations,
    remove_css_animations,
)
from motionicon.animation.motion_types import MotionType

SAMPLE_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M8 6v6" /></svg>'


def test_every_animated_motion_type_has_keyframes_and_timing():
    animated_types = set(MotionType) - {MotionType.NONE}
    assert set(CSS_KEYFRAMES) == animated_types
    assert set(CSS_TIMING) == animated_types


def test_stylesheet_contents():
    css = build_stylesheet()
    assert "@keyframes motionicon-heartbeat" in css
    assert ".motionicon-spin { animation: motionicon-spin 0.8s linear infinite; }" in css
    assert ".motionicon-scale:hover" in css
    assert "@keyframes motionicon-draw-path-loop" in css
    assert "@media (prefers-reduced-motion: reduce)" in css


def test_classes_for_hover_scale():
    assert get_css_animation_classes() == "motionicon-animated motionicon-scale motionicon-trigger-hover"


def test_classes_for_none_omit_motion_class():
    assert get_css_animation_classes("none", "loop") == "motionicon-animated motionicon-trigger-loop"


def test_in_view_falls_back_to_mount_class():
    assert "motionicon-trigger-mount" in get_css_animation_classes("bounce", "inView")


@pytest.mark.parametrize(
    "trigger,expected",
    [("hover", "motionicon-draw-path-hover"), ("loop", "motionicon-draw-path-loop"), ("mount", "motionicon-draw-path-mount"), ("inView", "motionicon-draw-path-mount")],
)
def test_draw_classes_per_trigger(trigger, expected):
    assert expected in get_css_animation_classes("draw", trigger).split()


def test_unknown_inputs_fall_back():
    assert get_css_animation_classes("zoom", "whenever") == get_css_animation_classes("scale", "hover")


def test_inject_is_idempotent():
    once = inject_css_animations(SAMPLE_SVG)
    twice = inject_css_animations(once)
    assert once.count(STYLE_ELEMENT_ID) == 1
    assert twice == once
    assert "motionicon-pulse" in once
    assert "<path" in once


def test_remove_restores_document():
    injected = inject_css_animations(SAMPLE_SVG)
    removed = remove_css_animations(injected)
    assert STYLE_ELEMENT_ID not in removed
    assert "<path" in removed


def test_remove_without_injection_is_unchanged():
    assert remove_css_animations(SAMPLE_SVG) == SAMPLE_SVG


def test_invalid_svg_raises():
    with pytest.raises(ValueError):
        inject_css_animations("<svg")
