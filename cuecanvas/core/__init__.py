"""
CueCanvas Core Module

Contains the scene graph:
- Geometry: Point, BoundingBox
- Entity: positioned base object
- Shapes: Circle, Rectangle, Line
- Layer: z-ordered entity collection
- Window: viewport transform and layer registry
"""

# Import order matters - entity and shapes first, then layer, then window
from .geometry import Point, BoundingBox
from .observable import Cell, CellGroup
from .context import DrawingContext
from .style import DrawStyle, apply_style, reset_style
from .entity import Entity, EntityConfig
from .shapes import Anchor, Circle, Rectangle, Line
from .layer import Layer
from .window import Window, MIN_RATIO, MAX_RATIO, ZOOM_STEP

__all__ = [
    'Point', 'BoundingBox',
    'Cell', 'CellGroup',
    'DrawingContext',
    'DrawStyle', 'apply_style', 'reset_style',
    'Entity', 'EntityConfig',
    'Anchor', 'Circle', 'Rectangle', 'Line',
    'Layer',
    'Window', 'MIN_RATIO', 'MAX_RATIO', 'ZOOM_STEP',
]
