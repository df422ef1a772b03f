"""CSS-only animation mode.

Keyframes and classes mirroring the motion presets, for renderers that apply
class names instead of motion bindings. The stylesheet can be injected into an
SVG document as a single ``<style>`` element.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple
from xml.etree import ElementTree as ET

from motionicon.animation.motion_types import MotionType, TriggerType

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
STYLE_ELEMENT_ID = "motionicon-css-animations"
CLASS_PREFIX = "motionicon"

# Keyframe stops per motion type: (stop selector, declarations)
CSS_KEYFRAMES: Dict[MotionType, List[Tuple[str, str]]] = {
    MotionType.SCALE: [("0%, 100%", "transform: scale(1);"), ("50%", "transform: scale(1.15);")],
    MotionType.ROTATE: [("from", "transform: rotate(0deg);"), ("to", "transform: rotate(180deg);")],
    MotionType.TRANSLATE: [("0%, 100%", "transform: translate(0, 0);"), ("50%", "transform: translate(2px, -2px);")],
    MotionType.SHAKE: [
        ("0%, 100%", "transform: translateX(0);"),
        ("20%", "transform: translateX(-3px);"),
        ("40%", "transform: translateX(3px);"),
        ("60%", "transform: translateX(-3px);"),
        ("80%", "transform: translateX(3px);"),
    ],
    MotionType.PULSE: [
        ("0%, 100%", "transform: scale(1); opacity: 1;"),
        ("50%", "transform: scale(1.1); opacity: 0.8;"),
    ],
    MotionType.BOUNCE: [("0%, 100%", "transform: translateY(0);"), ("50%", "transform: translateY(-6px);")],
    MotionType.DRAW: [("0%", "opacity: 0.4; transform: scale(0.9);"), ("100%", "opacity: 1; transform: scale(1);")],
    MotionType.SPIN: [("from", "transform: rotate(0deg);"), ("to", "transform: rotate(360deg);")],
    MotionType.RING: [
        ("0%, 100%", "transform: rotate(0deg);"),
        ("15%", "transform: rotate(14deg);"),
        ("30%", "transform: rotate(-12deg);"),
        ("45%", "transform: rotate(8deg);"),
        ("60%", "transform: rotate(-6deg);"),
        ("75%", "transform: rotate(3deg);"),
    ],
    MotionType.WIGGLE: [
        ("0%, 100%", "transform: rotate(0deg);"),
        ("15%", "transform: rotate(-12deg);"),
        ("30%", "transform: rotate(12deg);"),
        ("45%", "transform: rotate(-8deg);"),
        ("60%", "transform: rotate(8deg);"),
        ("75%", "transform: rotate(-4deg);"),
        ("90%", "transform: rotate(4deg);"),
    ],
    MotionType.HEARTBEAT: [
        ("0%, 100%", "transform: scale(1);"),
        ("14%", "transform: scale(1.15);"),
        ("28%", "transform: scale(1);"),
        ("42%", "transform: scale(1.1);"),
    ],
    MotionType.SWING: [
        ("0%, 100%", "transform: rotate(0deg);"),
        ("20%", "transform: rotate(15deg);"),
        ("40%", "transform: rotate(-10deg);"),
        ("60%", "transform: rotate(5deg);"),
        ("80%", "transform: rotate(-5deg);"),
    ],
    MotionType.FLOAT: [("0%, 100%", "transform: translateY(0);"), ("50%", "transform: translateY(-8px);")],
}

# (animation shorthand after the keyframe name, continuous?)
# Continuous types run without hover; the rest play on hover.
CSS_TIMING: Dict[MotionType, Tuple[str, bool]] = {
    MotionType.SCALE: ("0.3s ease forwards", False),
    MotionType.ROTATE: ("0.4s ease forwards", False),
    MotionType.TRANSLATE: ("0.3s ease forwards", False),
    MotionType.SHAKE: ("0.4s ease", False),
    MotionType.PULSE: ("0.6s ease-in-out infinite", True),
    MotionType.BOUNCE: ("0.4s ease", False),
    MotionType.DRAW: ("0.5s ease forwards", False),
    MotionType.SPIN: ("0.8s linear infinite", True),
    MotionType.RING: ("0.6s ease", False),
    MotionType.WIGGLE: ("0.6s ease", False),
    MotionType.HEARTBEAT: ("0.8s ease", False),
    MotionType.SWING: ("0.6s ease", False),
    MotionType.FLOAT: ("1.5s ease-in-out infinite", True),
}

TRIGGER_CLASSES: Dict[TriggerType, str] = {
    TriggerType.HOVER: f"{CLASS_PREFIX}-trigger-hover",
    TriggerType.LOOP: f"{CLASS_PREFIX}-trigger-loop",
    TriggerType.MOUNT: f"{CLASS_PREFIX}-trigger-mount",
    TriggerType.IN_VIEW: f"{CLASS_PREFIX}-trigger-mount",  # No viewport detection in plain CSS
}

DRAW_PATH_CLASS = f"{CLASS_PREFIX}-draw-path"


def motion_class(motion_type: Any) -> str:
    motion_type = MotionType.parse(motion_type)
    if motion_type == MotionType.NONE:
        return ""
    return f"{CLASS_PREFIX}-{motion_type.value}"


def _keyframe_lines() -> List[str]:
    lines: List[str] = []
    for motion_type, stops in CSS_KEYFRAMES.items():
        lines.append(f"@keyframes {motion_class(motion_type)} {{")
        lines.extend(f"  {stop} {{ {decls} }}" for stop, decls in stops)
        lines.append("}")
    lines.extend([
        f"@keyframes {DRAW_PATH_CLASS} {{",
        "  0% { stroke-dashoffset: var(--path-length, 100); opacity: 0.3; }",
        "  100% { stroke-dashoffset: 0; opacity: 1; }",
        "}",
        f"@keyframes {DRAW_PATH_CLASS}-loop {{",
        "  0% { stroke-dashoffset: var(--path-length, 100); opacity: 0.5; }",
        "  40% { stroke-dashoffset: 0; opacity: 1; }",
        "  60% { stroke-dashoffset: 0; opacity: 1; }",
        "  100% { stroke-dashoffset: var(--path-length, 100); opacity: 0.5; }",
        "}",
    ])
    return lines


def _class_lines() -> List[str]:
    lines: List[str] = [f".{CLASS_PREFIX}-animated {{ transition: transform 0.2s ease; }}"]
    for motion_type, (timing, continuous) in CSS_TIMING.items():
        name = motion_class(motion_type)
        selector = f".{name}" if continuous else f".{name}:hover"
        lines.append(f"{selector} {{ animation: {name} {timing}; }}")

    lines.extend([
        f".{TRIGGER_CLASSES[TriggerType.HOVER]}:hover {{ animation-play-state: running; }}",
        f".{TRIGGER_CLASSES[TriggerType.LOOP]} {{ animation-iteration-count: infinite; }}",
        f".{TRIGGER_CLASSES[TriggerType.MOUNT]} {{ animation-iteration-count: 1; animation-fill-mode: forwards; }}",
        f".{DRAW_PATH_CLASS} {{ stroke-dasharray: var(--path-length, 100); stroke-dashoffset: var(--path-length, 100); }}",
        f".{DRAW_PATH_CLASS}-hover:hover .{DRAW_PATH_CLASS} {{ animation: {DRAW_PATH_CLASS} 1.5s ease-in-out forwards; }}",
        f".{DRAW_PATH_CLASS}-loop .{DRAW_PATH_CLASS} {{ animation: {DRAW_PATH_CLASS}-loop 3s ease-in-out infinite; }}",
        f".{DRAW_PATH_CLASS}-mount .{DRAW_PATH_CLASS} {{ animation: {DRAW_PATH_CLASS} 1.5s ease-in-out forwards; }}",
    ])

    reduced = [f".{CLASS_PREFIX}-animated"] + [f".{motion_class(t)}" for t in CSS_TIMING]
    lines.append("@media (prefers-reduced-motion: reduce) {")
    lines.append(f"  {', '.join(reduced)}, .{DRAW_PATH_CLASS} {{ animation: none !important; transition: none !important; }}")
    lines.append("}")
    return lines


def build_stylesheet() -> str:
    """Complete stylesheet: keyframes, classes and the reduced-motion override."""
    lines = ["/* motionicon CSS animations */"]
    lines.extend(_keyframe_lines())
    lines.extend(_class_lines())
    return "\n".join(lines)


def get_css_animation_classes(motion_type: Any = MotionType.SCALE, trigger: Any = TriggerType.HOVER) -> str:
    """Space-separated classes for an icon root."""
    motion_type = MotionType.parse(motion_type)
    trigger = TriggerType.parse(trigger)

    classes = [f"{CLASS_PREFIX}-animated"]
    name = motion_class(motion_type)
    if name:
        classes.append(name)
    classes.append(TRIGGER_CLASSES[trigger])

    if motion_type == MotionType.DRAW:
        if trigger == TriggerType.HOVER:
            classes.append(f"{DRAW_PATH_CLASS}-hover")
        elif trigger == TriggerType.LOOP:
            classes.append(f"{DRAW_PATH_CLASS}-loop")
        else:
            classes.append(f"{DRAW_PATH_CLASS}-mount")

    return " ".join(classes)


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _parse_svg(svg_text: str) -> ET.Element:
    try:
        return ET.fromstring(svg_text)
    except ET.ParseError as exc:
        raise ValueError(f"Invalid SVG: {exc}") from exc


def _find_style_element(root: ET.Element):
    for parent in root.iter():
        for child in list(parent):
            if _strip_ns(child.tag) == "style" and child.get("id") == STYLE_ELEMENT_ID:
                return parent, child
    return None, None


def inject_css_animations(svg_text: str) -> str:
    """Insert the stylesheet into an SVG; a second call leaves the document as is."""
    root = _parse_svg(svg_text)
    _, existing = _find_style_element(root)
    if existing is not None:
        logger.debug("CSS animations already injected")
        return svg_text

    style_el = ET.Element(f"{{{SVG_NS}}}style" if root.tag.startswith(f"{{{SVG_NS}}}") else "style")
    style_el.set("id", STYLE_ELEMENT_ID)
    style_el.text = f"\n{build_stylesheet()}\n"
    root.insert(0, style_el)
    ET.register_namespace("", SVG_NS)
    return ET.tostring(root, encoding="unicode")


def remove_css_animations(svg_text: str) -> str:
    """Remove a previously injected stylesheet, if any."""
    root = _parse_svg(svg_text)
    parent, existing = _find_style_element(root)
    if existing is None:
        return svg_text
    parent.remove(existing)
    ET.register_namespace("", SVG_NS)
    return ET.tostring(root, encoding="unicode")
