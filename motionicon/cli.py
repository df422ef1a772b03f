"""CLI interface for inspecting resolved icon animations."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from motionicon.animation.css_animations import build_stylesheet, inject_css_animations
from motionicon.animation.motion_presets import MOTION_TYPE_LIST, get_motion_preset
from motionicon.services.icon_animation import resolve_icon
from motionicon.services.reduced_motion import ReducedMotionSignal, set_reduced_motion_source
from motionicon.utils.config import settings

app = typer.Typer(add_completion=False)


@app.callback()
def main() -> None:
    """Resolve icon animation props from the command line."""
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@app.command()
def presets():
    """List motion types with their transitions."""
    for info in MOTION_TYPE_LIST:
        transition = get_motion_preset(info.type).transition
        typer.echo(f"{info.type.value:<10} {info.label:<10} {info.description:<20} {json.dumps(transition.to_dict())}")


@app.command()
def resolve(
    motion_type: str = typer.Option("scale", "--motion-type", "-m", help="Motion type, e.g. pulse."),
    trigger: str = typer.Option("hover", "--trigger", "-t", help="hover, loop, mount or inView."),
    animated: Optional[bool] = typer.Option(None, "--animated/--static", help="Per-icon override.", show_default=False),
    reduced_motion: bool = typer.Option(False, "--reduced-motion", help="Simulate the OS reduced-motion preference."),
    mode: str = typer.Option("motion", "--mode", help="motion, css or none."),
    size: Optional[float] = typer.Option(None, "--size"),
    stroke_width: Optional[float] = typer.Option(None, "--stroke-width"),
    label: Optional[str] = typer.Option(None, "--label", help="Accessible label."),
):
    """Print the resolved render state as JSON."""
    set_reduced_motion_source(ReducedMotionSignal(reduced_motion))
    state = resolve_icon(
        motion_type=motion_type,
        trigger=trigger,
        animated=animated,
        animation_mode=mode,
        size=size,
        stroke_width=stroke_width,
        aria_label=label,
    )
    typer.echo(json.dumps(state.to_dict(), indent=2))


@app.command()
def css(
    svg: Optional[Path] = typer.Option(None, "--svg", help="SVG file to inject the stylesheet into.", show_default=False),
):
    """Print the CSS stylesheet, or an SVG with it injected."""
    if svg is None:
        typer.echo(build_stylesheet())
        return
    if not svg.exists():
        raise typer.BadParameter(f"Missing file: {svg}")
    try:
        typer.echo(inject_css_animations(svg.read_text(encoding="utf-8")))
    except ValueError as exc:
        raise typer.BadParameter(str(exc))


if __name__ == "__main__":
    app()
