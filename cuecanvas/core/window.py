"""
CueCanvas Window (viewport)

Owns the world <-> screen transform and the ordered list of layers
that make up one rendered frame.

    screen_x = (world_x - horizon.x) * horizon.ratio + pos.x
    screen_y = (world_y - horizon.y) * horizon.ratio + pos.y

horizon.x/y is the world point shown at the window's screen origin
`pos`, and horizon.ratio is screen pixels per world unit (one factor
for both axes, so shapes never distort).
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .context import DrawingContext
from .entity import Entity
from .geometry import Point, BoundingBox
from .layer import Layer
from .observable import CellGroup

logger = logging.getLogger(__name__)

# Zoom limits (screen pixels per world unit)
MIN_RATIO = 0.01
MAX_RATIO = 100.0
ZOOM_STEP = 1.25


class Window:
    """
    A viewport onto the world.
    
    Layers are drawn in registration order (back to front); inside a
    layer, entities are drawn by z. The two orderings are independent.
    
    pos, rect and horizon are CellGroups: read and write them like plain
    attributes (window.horizon.ratio = 2) or bind to their cells
    (window.horizon.cell('ratio').subscribe(...)).
    """
    
    def __init__(self, x: float = 0, y: float = 0,
                 width: float = 0, height: float = 0):
        self.pos = CellGroup(x=x, y=y)
        self.rect = CellGroup(width=width, height=height)
        self.horizon = CellGroup(x=0.0, y=0.0, ratio=1.0)
        self._layers: List[Layer] = []
    
    @property
    def layers(self) -> Tuple[Layer, ...]:
        return tuple(self._layers)
    
    # Layer registry
    
    def add_layer(self, layer: Layer) -> None:
        """Register a layer on top of the existing ones."""
        if any(l is layer for l in self._layers):
            return
        self._layers.append(layer)
        logger.debug(f"Window: registered {layer!r}")
    
    def remove_layer(self, layer: Layer) -> None:
        """Unregister a layer. Does nothing if it is not registered."""
        remaining = [l for l in self._layers if l is not layer]
        if len(remaining) != len(self._layers):
            logger.debug(f"Window: unregistered {layer!r}")
        self._layers = remaining
    
    def get_layer_by_name(self, name: str) -> Optional[Layer]:
        """Find a layer by name."""
        for layer in self._layers:
            if layer.name == name:
                return layer
        return None
    
    # Entity membership
    
    def add_entity(self, entity: Entity, layer: Layer) -> None:
        layer.add_entity(entity)
    
    def remove_entity(self, entity: Entity, layer: Layer) -> None:
        layer.remove_entity(entity)
    
    def transport_entity(self, entity: Entity, from_layer: Layer, to_layer: Layer) -> None:
        """
        Move an entity between layers.
        
        This is two steps, remove then add. If the add raises, the entity
        is left in neither layer.
        """
        from_layer.remove_entity(entity)
        to_layer.add_entity(entity)
    
    # World -> screen
    
    def to_screen_x(self, x: float) -> float:
        return (x - self.horizon.x) * self.horizon.ratio + self.pos.x
    
    def to_screen_y(self, y: float) -> float:
        return (y - self.horizon.y) * self.horizon.ratio + self.pos.y
    
    def to_screen(self, p: Point) -> Point:
        return Point(self.to_screen_x(p.x), self.to_screen_y(p.y))
    
    # Screen -> world
    
    def screen_to_world_x(self, sx: float) -> float:
        return (sx - self.pos.x) / self.horizon.ratio + self.horizon.x
    
    def screen_to_world_y(self, sy: float) -> float:
        return (sy - self.pos.y) / self.horizon.ratio + self.horizon.y
    
    def screen_to_world(self, p: Point) -> Point:
        return Point(self.screen_to_world_x(p.x), self.screen_to_world_y(p.y))
    
    def to_screen_array(self, points) -> np.ndarray:
        """
        Transform many world points at once.
        
        Args:
            points: array-like of shape (N, 2)
        
        Returns:
            float array of shape (N, 2) in screen pixels
        """
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        origin = np.array([self.horizon.x, self.horizon.y])
        offset = np.array([self.pos.x, self.pos.y])
        return (pts - origin) * self.horizon.ratio + offset
    
    def screen_to_world_array(self, points) -> np.ndarray:
        """Inverse of to_screen_array()."""
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        origin = np.array([self.horizon.x, self.horizon.y])
        offset = np.array([self.pos.x, self.pos.y])
        return (pts - offset) / self.horizon.ratio + origin
    
    # Pan / zoom
    
    def pan(self, dx: float, dy: float) -> None:
        """Scroll the content by a screen-space delta in pixels."""
        ratio = self.horizon.ratio
        self.horizon.x = self.horizon.x - dx / ratio
        self.horizon.y = self.horizon.y - dy / ratio
    
    def zoom_at(self, sx: float, sy: float, factor: float) -> None:
        """
        Zoom by factor keeping the world point under (sx, sy) in place.
        
        The resulting ratio is clamped to [MIN_RATIO, MAX_RATIO].
        """
        anchor = self.screen_to_world(Point(sx, sy))
        ratio = self.horizon.ratio * factor
        ratio = max(MIN_RATIO, min(MAX_RATIO, ratio))
        self.horizon.ratio = ratio
        self.horizon.x = anchor.x - (sx - self.pos.x) / ratio
        self.horizon.y = anchor.y - (sy - self.pos.y) / ratio
    
    def zoom_in(self) -> None:
        self.zoom_at(*self._screen_center(), ZOOM_STEP)
    
    def zoom_out(self) -> None:
        self.zoom_at(*self._screen_center(), 1 / ZOOM_STEP)
    
    def world_bounds(self) -> BoundingBox:
        """The world rectangle currently covered by this window."""
        top_left = self.screen_to_world(Point(self.pos.x, self.pos.y))
        ratio = self.horizon.ratio
        return BoundingBox(
            min_x=top_left.x,
            min_y=top_left.y,
            max_x=top_left.x + self.rect.width / ratio,
            max_y=top_left.y + self.rect.height / ratio
        )
    
    def fit_to(self, bounds: BoundingBox, margin: float = 0) -> None:
        """
        Zoom and pan so bounds is fully visible and centred.
        
        Args:
            bounds: World box to show
            margin: Free space around the box, in screen pixels
        """
        avail_w = self.rect.width - 2 * margin
        avail_h = self.rect.height - 2 * margin
        if avail_w <= 0 or avail_h <= 0:
            return
        candidates = []
        if bounds.width > 0:
            candidates.append(avail_w / bounds.width)
        if bounds.height > 0:
            candidates.append(avail_h / bounds.height)
        if candidates:
            ratio = max(MIN_RATIO, min(MAX_RATIO, min(candidates)))
            self.horizon.ratio = ratio
        ratio = self.horizon.ratio
        center = bounds.center
        self.horizon.x = center.x - self.rect.width / 2 / ratio
        self.horizon.y = center.y - self.rect.height / 2 / ratio
        logger.debug(f"Window: fit to {bounds}, ratio={ratio:.4f}")
    
    def _screen_center(self) -> Tuple[float, float]:
        return (self.pos.x + self.rect.width / 2,
                self.pos.y + self.rect.height / 2)
    
    # Drawing
    
    def clear(self, ctx: DrawingContext) -> None:
        """
        Erase the whole surface bound to ctx.
        
        Note: this is not limited to this window's rect, so with several
        windows on one surface each clear() wipes the others too.
        """
        ctx.clear_rect(0, 0, ctx.width, ctx.height)
    
    def render(self, ctx: DrawingContext) -> None:
        """Render every visible layer in registration order."""
        drawn = 0
        for layer in self._layers:
            if not layer.get_visible():
                continue
            layer.render(ctx, self)
            drawn += 1
        logger.debug(f"Window: rendered {drawn}/{len(self._layers)} layers "
                     f"(horizon={self.horizon.as_dict()})")
