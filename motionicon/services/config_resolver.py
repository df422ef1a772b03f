"""Resolve whether an icon animates and which geometry it uses."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from motionicon.context.icon_context import AmbientConfig, default_config


@dataclass(frozen=True)
class ResolvedGeometry:
    size: float
    stroke_width: float


def resolve_animated(
    override: Optional[bool],
    ambient: Optional[AmbientConfig],
    system_reduced_motion: bool,
) -> bool:
    """Decide if animation is active.

    Priority, highest first:
    1. the component's own ``animated`` prop (overrides everything, including
       the accessibility preference)
    2. the ambient ``animated`` setting, when the scope sets one
    3. the system reduced-motion preference
    """
    if override is not None:
        return bool(override)
    if ambient is not None and ambient.animated is not None:
        return ambient.animated
    return not system_reduced_motion


def resolve_geometry(
    ambient: Optional[AmbientConfig],
    size: Optional[float] = None,
    stroke_width: Optional[float] = None,
) -> ResolvedGeometry:
    """Component value if given, else the ambient default."""
    ambient = ambient or default_config()
    return ResolvedGeometry(
        size=ambient.default_size if size is None else size,
        stroke_width=ambient.default_stroke_width if stroke_width is None else stroke_width,
    )
