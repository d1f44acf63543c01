"""
CueCanvas Entity

Base class for everything that can be placed on a Layer.
"""

from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4
import weakref

from .context import DrawingContext
from .geometry import Point, BoundingBox

if TYPE_CHECKING:
    from .layer import Layer
    from .window import Window


class EntityConfig:
    """
    Render settings of an entity.
    
    `layer` is read-only here; it only changes through Layer.add_entity()
    and Layer.remove_entity().
    """
    
    def __init__(self, visible: bool = True, z: float = 0):
        self.visible: bool = visible
        self.z: float = z
        self._layer_ref: Optional[weakref.ReferenceType] = None
    
    @property
    def layer(self) -> Optional['Layer']:
        if self._layer_ref is None:
            return None
        return self._layer_ref()


class Entity:
    """
    A positioned object in world coordinates.
    
    Entities are created unattached. Once added to a Layer they are
    rendered by every Window that has that layer registered. The base
    class draws nothing; Circle, Rectangle and Line override render().
    """
    
    def __init__(self, x: float = 0, y: float = 0):
        self.id: UUID = uuid4()
        self.name: str = ""
        self.position: Point = Point(x, y)
        self.config: EntityConfig = EntityConfig()
    
    def distance(self, other: 'Entity') -> float:
        """Euclidean distance between the two positions."""
        return self.position.distance_to(other.position)
    
    def move(self, dx: float, dy: float) -> None:
        """Translate by (dx, dy)."""
        self.position.x += dx
        self.position.y += dy
    
    def move_to(self, x: float, y: float) -> None:
        self.position.x = x
        self.position.y = y
    
    def move_to_entity(self, other: 'Entity') -> None:
        """Copy the other entity's current position (not a binding)."""
        self.position.x = other.position.x
        self.position.y = other.position.y
    
    def set_layer(self, layer: Optional['Layer']) -> None:
        """Set the layer back-reference. Only Layer should call this."""
        self.config._layer_ref = weakref.ref(layer) if layer is not None else None
    
    def get_layer(self) -> Optional['Layer']:
        return self.config.layer
    
    def get_bounding_box(self) -> BoundingBox:
        """World-space bounds; a bare entity is a point."""
        return BoundingBox(self.position.x, self.position.y,
                           self.position.x, self.position.y)
    
    def render(self, ctx: DrawingContext, window: 'Window') -> None:
        """Draw this entity. The base entity has nothing to draw."""
        pass
    
    def __repr__(self) -> str:
        return (f"{type(self).__name__}(x={self.position.x}, y={self.position.y}, "
                f"z={self.config.z}, visible={self.config.visible})")
