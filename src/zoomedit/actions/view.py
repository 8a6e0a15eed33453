"""Viewport actions: panning, zooming and re-centering."""

from __future__ import annotations

from zoomedit.keymaps import ResolutionMatch
from zoomedit.modes.base_mode import FULL_REDRAW, ModeContext, ModeResult


def pan_view(
    context: ModeContext,
    match: ResolutionMatch,
    *,
    dx: int,
    dy: int,
    stepped: bool = False,
) -> ModeResult:
    """Shift the view origin; ``stepped`` multiplies by the configured pan step."""

    del match
    step = context.config.pan_step if stepped else 1
    context.view.pan(dx * step, dy * step)
    return ModeResult(consumed=True, redraw=FULL_REDRAW)


def recenter_view(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.view.center_on(context.buffer.cursor)
    return ModeResult(consumed=True, redraw=FULL_REDRAW)


def zoom(context: ModeContext, match: ResolutionMatch, *, direction: int) -> ModeResult:
    """Grow (``direction=1``, zoom out) or shrink the scale by one step."""

    del match
    view = context.view
    view.set_scale(view.scale + direction * context.config.scale_step)
    loc = view.location
    context.log = f"set scale to {view.scale:g}: position: {loc.x:g}:{loc.y:g}"
    return ModeResult(consumed=True, redraw=FULL_REDRAW)


def reset_zoom(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.view.set_scale(1.0)
    context.log = "reset render scale to 1"
    return ModeResult(consumed=True, redraw=FULL_REDRAW)


__all__ = ["pan_view", "recenter_view", "reset_zoom", "zoom"]
