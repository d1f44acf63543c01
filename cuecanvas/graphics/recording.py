"""
Recording Drawing Context

An in-memory DrawingContext that records every call instead of
drawing. Used for headless runs (--dry-run) and for inspecting what a
frame would draw.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple


@dataclass
class DrawCall:
    """One recorded context call and the attribute state it ran under."""
    name: str
    args: Tuple[Any, ...] = ()
    state: Dict[str, Any] = field(default_factory=dict)


class RecordingContext:
    """
    Records draw calls with canvas-like state handling.
    
    fill_style, stroke_style, line_width, global_alpha and the dash
    pattern are saved by save() and brought back by restore(). A
    restore() without a matching save() is ignored.
    """
    
    _DEFAULT_STATE = {
        'fill_style': '#000000',
        'stroke_style': '#000000',
        'line_width': 1.0,
        'global_alpha': 1.0,
        'line_dash': (),
    }
    
    def __init__(self, width: int = 0, height: int = 0):
        self._width = width
        self._height = height
        self._state: Dict[str, Any] = dict(self._DEFAULT_STATE)
        self._stack: List[Dict[str, Any]] = []
        self.calls: List[DrawCall] = []
    
    @property
    def width(self) -> int:
        return self._width
    
    @property
    def height(self) -> int:
        return self._height
    
    # Attribute state
    
    @property
    def fill_style(self) -> str:
        return self._state['fill_style']
    
    @fill_style.setter
    def fill_style(self, value: str) -> None:
        self._state['fill_style'] = value
    
    @property
    def stroke_style(self) -> str:
        return self._state['stroke_style']
    
    @stroke_style.setter
    def stroke_style(self, value: str) -> None:
        self._state['stroke_style'] = value
    
    @property
    def line_width(self) -> float:
        return self._state['line_width']
    
    @line_width.setter
    def line_width(self, value: float) -> None:
        self._state['line_width'] = value
    
    @property
    def global_alpha(self) -> float:
        return self._state['global_alpha']
    
    @global_alpha.setter
    def global_alpha(self, value: float) -> None:
        self._state['global_alpha'] = value
    
    def set_line_dash(self, segments: Sequence[float]) -> None:
        self._state['line_dash'] = tuple(segments)
    
    def get_line_dash(self) -> Tuple[float, ...]:
        return self._state['line_dash']
    
    def save(self) -> None:
        self._stack.append(dict(self._state))
        self._record('save')
    
    def restore(self) -> None:
        # Recorded with the state being discarded
        self._record('restore')
        if self._stack:
            self._state = self._stack.pop()
    
    @property
    def save_depth(self) -> int:
        return len(self._stack)
    
    # Path and paint calls
    
    def begin_path(self) -> None:
        self._record('begin_path')
    
    def move_to(self, x: float, y: float) -> None:
        self._record('move_to', x, y)
    
    def line_to(self, x: float, y: float) -> None:
        self._record('line_to', x, y)
    
    def arc(self, x: float, y: float, radius: float,
            start_angle: float, end_angle: float,
            anticlockwise: bool = False) -> None:
        self._record('arc', x, y, radius, start_angle, end_angle, anticlockwise)
    
    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._record('rect', x, y, w, h)
    
    def fill(self) -> None:
        self._record('fill')
    
    def stroke(self) -> None:
        self._record('stroke')
    
    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self._record('clear_rect', x, y, w, h)
    
    # Inspection
    
    def names(self) -> List[str]:
        """Names of all recorded calls, in order."""
        return [call.name for call in self.calls]
    
    def calls_named(self, name: str) -> List[DrawCall]:
        return [call for call in self.calls if call.name == name]
    
    def reset(self) -> None:
        """Forget recorded calls and return to the default state."""
        self.calls.clear()
        self._stack.clear()
        self._state = dict(self._DEFAULT_STATE)
    
    def _record(self, name: str, *args: Any) -> None:
        self.calls.append(DrawCall(name, args, dict(self._state)))
