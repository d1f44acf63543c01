"""
CueCanvas Graphics Module

Drawing backends for the core DrawingContext protocol:
- RecordingContext: headless, records calls
- QPainterContext: PyQt6 raster backend (import from .qt_context,
  which loads Qt)
"""

from .recording import RecordingContext, DrawCall

__all__ = [
    'RecordingContext',
    'DrawCall',
]
