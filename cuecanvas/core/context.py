"""
CueCanvas Drawing Context Protocol

The drawing capability the core renders through. Any 2D immediate-mode
backend that provides these members can be used: see
graphics.recording.RecordingContext and graphics.qt_context.QPainterContext.
The member names follow the HTML canvas 2D API in snake_case.
"""

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class DrawingContext(Protocol):
    """Immediate-mode 2D drawing surface."""
    
    fill_style: str
    stroke_style: str
    line_width: float
    global_alpha: float
    
    @property
    def width(self) -> int:
        """Width of the whole bound surface in pixels."""
        ...
    
    @property
    def height(self) -> int:
        """Height of the whole bound surface in pixels."""
        ...
    
    def begin_path(self) -> None: ...
    
    def move_to(self, x: float, y: float) -> None: ...
    
    def line_to(self, x: float, y: float) -> None: ...
    
    def arc(self, x: float, y: float, radius: float,
            start_angle: float, end_angle: float,
            anticlockwise: bool = False) -> None: ...
    
    def rect(self, x: float, y: float, w: float, h: float) -> None: ...
    
    def fill(self) -> None: ...
    
    def stroke(self) -> None: ...
    
    def save(self) -> None: ...
    
    def restore(self) -> None: ...
    
    def set_line_dash(self, segments: Sequence[float]) -> None: ...
    
    def clear_rect(self, x: float, y: float, w: float, h: float) -> None: ...
