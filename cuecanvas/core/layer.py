"""
CueCanvas Layer System

An ordered, visibility-gated collection of entities.
"""

import logging
from typing import List, Optional, Tuple, TYPE_CHECKING
from uuid import UUID, uuid4

from .context import DrawingContext
from .entity import Entity
from .geometry import BoundingBox
from .observable import Cell

if TYPE_CHECKING:
    from .window import Window

logger = logging.getLogger(__name__)


class Layer:
    """
    A layer of entities rendered in ascending z order.
    
    The layer is the only owner of membership: add_entity() and
    remove_entity() keep each entity's back-reference in step with the
    storage. Entities with equal z keep their insertion order.
    """
    
    def __init__(self, name: str = "Layer", visible: bool = True):
        self.id: UUID = uuid4()
        self.name = name
        self.visible_cell = Cell(visible)
        self._entities: List[Entity] = []
    
    @property
    def entities(self) -> Tuple[Entity, ...]:
        """Snapshot of the members in insertion order."""
        return tuple(self._entities)
    
    def add_entity(self, entity: Entity) -> None:
        """Add an entity, detaching it from any other layer first."""
        current = entity.get_layer()
        if current is self and self._contains(entity):
            return
        if current is not None and current is not self:
            current.remove_entity(entity)
        self._entities.append(entity)
        entity.set_layer(self)
        logger.debug(f"Layer '{self.name}': added {entity!r}")
    
    def remove_entity(self, entity: Entity) -> None:
        """Remove an entity. Does nothing if it is not in this layer."""
        before = len(self._entities)
        self._entities = [e for e in self._entities if e is not entity]
        if entity.get_layer() is self:
            entity.set_layer(None)
        if len(self._entities) != before:
            logger.debug(f"Layer '{self.name}': removed {entity!r}")
    
    def set_visible(self, visible: bool) -> None:
        self.visible_cell.set(visible)
    
    def get_visible(self) -> bool:
        return self.visible_cell.get()
    
    def get_entity_by_id(self, entity_id: UUID) -> Optional[Entity]:
        """Find an entity by its ID."""
        for entity in self._entities:
            if entity.id == entity_id:
                return entity
        return None
    
    def get_bounds(self) -> Optional[BoundingBox]:
        """
        Calculate the world bounding box of all visible entities.
        
        Returns:
            BoundingBox of the visible entities, or None if there are none
        """
        bounds = None
        for entity in self._entities:
            if entity.config.visible is False:
                continue
            bb = entity.get_bounding_box()
            bounds = bb if bounds is None else bounds.union(bb)
        return bounds
    
    def render(self, ctx: DrawingContext, window: 'Window') -> None:
        """Render visible members back to front by z."""
        if not self.get_visible():
            return
        # Sort a copy so renders that add/remove entities don't disturb this pass.
        # sorted() is stable: equal z keeps insertion order.
        snapshot = sorted(list(self._entities), key=lambda e: e.config.z)
        for entity in snapshot:
            if entity.config.visible is False:
                continue
            render = getattr(entity, 'render', None)
            if callable(render):
                render(ctx, window)
    
    def _contains(self, entity: Entity) -> bool:
        return any(e is entity for e in self._entities)
    
    def __contains__(self, entity: Entity) -> bool:
        return self._contains(entity)
    
    def __len__(self) -> int:
        return len(self._entities)
    
    def __repr__(self) -> str:
        return f"Layer(name={self.name!r}, entities={len(self._entities)}, visible={self.get_visible()})"
