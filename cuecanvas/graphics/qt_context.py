"""
Qt Drawing Context for CueCanvas

Adapts a PyQt6 QPainter to the canvas-style DrawingContext the core
renders through, plus a helper that renders a Window into a QImage.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple
import logging
import math

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QPainter, QPainterPath, QPen, QBrush, QColor, QImage

from ..core.window import Window

logger = logging.getLogger(__name__)


@dataclass
class _PaintState:
    """Attributes saved and restored by save()/restore()."""
    fill_style: str = "#000000"
    stroke_style: str = "#000000"
    line_width: float = 1.0
    global_alpha: float = 1.0
    line_dash: Tuple[float, ...] = ()


class QPainterContext:
    """
    Canvas-style drawing on a QPainter.
    
    Path calls build a QPainterPath that fill() and stroke() paint with
    the current attributes. Angles passed to arc() are radians,
    clockwise on screen (y grows downward), as on an HTML canvas.
    Colours are any string QColor understands ("red", "#1b5e20",
    "#80ffffff").
    """
    
    def __init__(self, painter: QPainter):
        self._painter = painter
        self._path = QPainterPath()
        self._has_current_point = False
        self._state = _PaintState()
        self._stack: List[_PaintState] = []
    
    @property
    def painter(self) -> QPainter:
        return self._painter
    
    @property
    def width(self) -> int:
        return self._painter.device().width()
    
    @property
    def height(self) -> int:
        return self._painter.device().height()
    
    # Attribute state
    
    @property
    def fill_style(self) -> str:
        return self._state.fill_style
    
    @fill_style.setter
    def fill_style(self, value: str) -> None:
        self._state.fill_style = value
    
    @property
    def stroke_style(self) -> str:
        return self._state.stroke_style
    
    @stroke_style.setter
    def stroke_style(self, value: str) -> None:
        self._state.stroke_style = value
    
    @property
    def line_width(self) -> float:
        return self._state.line_width
    
    @line_width.setter
    def line_width(self, value: float) -> None:
        # Canvas ignores non-positive widths
        if value > 0 and math.isfinite(value):
            self._state.line_width = float(value)
    
    @property
    def global_alpha(self) -> float:
        return self._state.global_alpha
    
    @global_alpha.setter
    def global_alpha(self, value: float) -> None:
        if 0.0 <= value <= 1.0:
            self._state.global_alpha = float(value)
    
    def set_line_dash(self, segments: Sequence[float]) -> None:
        """Set dash/gap lengths in pixels; an empty sequence means solid."""
        values = [float(s) for s in segments]
        if any(v < 0 or not math.isfinite(v) for v in values):
            return
        if len(values) % 2:
            values = values * 2
        self._state.line_dash = tuple(values)
    
    def get_line_dash(self) -> Tuple[float, ...]:
        return self._state.line_dash
    
    def save(self) -> None:
        self._stack.append(replace(self._state))
        self._painter.save()
    
    def restore(self) -> None:
        if not self._stack:
            return
        self._state = self._stack.pop()
        self._painter.restore()
    
    # Path construction
    
    def begin_path(self) -> None:
        self._path = QPainterPath()
        self._has_current_point = False
    
    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(x, y)
        self._has_current_point = True
    
    def line_to(self, x: float, y: float) -> None:
        if not self._has_current_point:
            self.move_to(x, y)
            return
        self._path.lineTo(x, y)
    
    def arc(self, x: float, y: float, radius: float,
            start_angle: float, end_angle: float,
            anticlockwise: bool = False) -> None:
        if radius < 0:
            raise ValueError(f"arc radius must not be negative, got {radius}")
        
        full = 2 * math.pi
        sweep = end_angle - start_angle
        if not anticlockwise:
            sweep = full if sweep >= full else sweep % full
        else:
            sweep = -full if sweep <= -full else -((-sweep) % full)
        
        sx = x + radius * math.cos(start_angle)
        sy = y + radius * math.sin(start_angle)
        if self._has_current_point:
            self._path.lineTo(sx, sy)
        else:
            self._path.moveTo(sx, sy)
        
        # Qt measures degrees counter-clockwise on screen
        bounds = QRectF(x - radius, y - radius, 2 * radius, 2 * radius)
        self._path.arcTo(bounds, -math.degrees(start_angle), -math.degrees(sweep))
        self._has_current_point = True
    
    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._path.addRect(QRectF(x, y, w, h))
        self._path.moveTo(x, y)
        self._has_current_point = True
    
    # Painting
    
    def fill(self) -> None:
        self._painter.setOpacity(self._state.global_alpha)
        self._painter.fillPath(self._path, QBrush(QColor(self._state.fill_style)))
    
    def stroke(self) -> None:
        self._painter.setOpacity(self._state.global_alpha)
        self._painter.strokePath(self._path, self._make_pen())
    
    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self._painter.save()
        self._painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
        self._painter.fillRect(QRectF(x, y, w, h), Qt.GlobalColor.transparent)
        self._painter.restore()
    
    def _make_pen(self) -> QPen:
        pen = QPen(QColor(self._state.stroke_style))
        pen.setWidthF(self._state.line_width)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
        if self._state.line_dash and any(self._state.line_dash):
            # QPen dash lengths are in units of the pen width
            width = self._state.line_width
            pen.setDashPattern([max(d / width, 1e-3) for d in self._state.line_dash])
        return pen


def render_to_image(window: Window, width: int, height: int,
                    background: Optional[str] = None,
                    antialias: bool = True) -> QImage:
    """
    Render a window into a new ARGB image.
    
    Args:
        window: The viewport to render
        width: Image width in pixels
        height: Image height in pixels
        background: Optional fill colour; transparent when None
        antialias: Enable QPainter antialiasing
    
    Returns:
        The rendered QImage
    """
    image = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)
    
    painter = QPainter(image)
    try:
        if antialias:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        if background is not None:
            painter.fillRect(QRectF(0, 0, width, height), QColor(background))
        ctx = QPainterContext(painter)
        window.render(ctx)
    finally:
        painter.end()
    
    logger.debug(f"Rendered {width}x{height} image with {len(window.layers)} layers")
    return image
