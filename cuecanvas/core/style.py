"""
CueCanvas Draw Styles

Optional per-shape styling applied to a drawing context.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .context import DrawingContext


@dataclass
class DrawStyle:
    """
    Styling for a shape. Fields left as None leave the context untouched.
    """
    fill_style: Optional[str] = None
    stroke_style: Optional[str] = None
    line_width: Optional[float] = None
    dashed: Optional[Sequence[float]] = None  # dash/gap lengths in pixels
    alpha: Optional[float] = None             # 0.0 (transparent) - 1.0


def apply_style(ctx: DrawingContext, style: Optional[DrawStyle]) -> None:
    """Write the fields present in style onto ctx."""
    if style is None:
        return
    if style.fill_style is not None:
        ctx.fill_style = style.fill_style
    if style.stroke_style is not None:
        ctx.stroke_style = style.stroke_style
    if style.line_width is not None:
        ctx.line_width = style.line_width
    if style.dashed is not None:
        ctx.set_line_dash(style.dashed)
    if style.alpha is not None:
        ctx.global_alpha = style.alpha


def reset_style(ctx: DrawingContext) -> None:
    """Clear dash pattern and alpha so they cannot leak into the next shape."""
    ctx.set_line_dash([])
    ctx.global_alpha = 1
