"""
CueCanvas - 2D scene graph and viewport rendering for a cue-sports
aiming visualizer.
"""

__version__ = "0.1.0"

from .core import (
    Point, BoundingBox, DrawStyle,
    Entity, Anchor, Circle, Rectangle, Line,
    Layer, Window
)

__all__ = [
    'Point', 'BoundingBox', 'DrawStyle',
    'Entity', 'Anchor', 'Circle', 'Rectangle', 'Line',
    'Layer', 'Window',
]
