"""
CueCanvas Shapes

The drawable entity types: Circle, Rectangle and Line.

Every shape renders the same way:
- skip when config.visible is False
- save the context and apply the optional DrawStyle
- build the path in screen coordinates via Window.to_screen()
- fill (only when the style has a fill_style), then stroke
- reset dash/alpha and restore the context
"""

from enum import Enum
from typing import Optional, Union, TYPE_CHECKING
import math

from .context import DrawingContext
from .entity import Entity
from .geometry import BoundingBox
from .style import DrawStyle, apply_style, reset_style

if TYPE_CHECKING:
    from .window import Window


class Anchor(Enum):
    """Which point of a rectangle its position names."""
    CENTER = "center"
    TOPLEFT = "topleft"


def _wants_fill(style: Optional[DrawStyle]) -> bool:
    return style is not None and bool(style.fill_style)


class Circle(Entity):
    """A circle centred on the entity position."""
    
    def __init__(self, x: float = 0, y: float = 0, radius: float = 10,
                 style: Optional[DrawStyle] = None):
        super().__init__(x, y)
        self.radius = radius
        self.style = style
    
    def get_bounding_box(self) -> BoundingBox:
        return BoundingBox(
            min_x=self.position.x - self.radius,
            min_y=self.position.y - self.radius,
            max_x=self.position.x + self.radius,
            max_y=self.position.y + self.radius
        )
    
    def render(self, ctx: DrawingContext, window: 'Window') -> None:
        if self.config.visible is False:
            return
        p = window.to_screen(self.position)
        r = self.radius * window.horizon.ratio
        
        ctx.save()
        apply_style(ctx, self.style)
        
        ctx.begin_path()
        ctx.arc(p.x, p.y, r, 0, math.pi * 2)
        if _wants_fill(self.style):
            ctx.fill()
        ctx.stroke()
        
        reset_style(ctx)
        ctx.restore()


class Rectangle(Entity):
    """
    An axis-aligned rectangle.
    
    With Anchor.CENTER the position is the rectangle's centre, with
    Anchor.TOPLEFT it is the top-left corner.
    """
    
    def __init__(self, x: float = 0, y: float = 0,
                 width: float = 10, height: float = 10,
                 style: Optional[DrawStyle] = None,
                 anchor: Union[Anchor, str] = Anchor.CENTER):
        super().__init__(x, y)
        self.width = width
        self.height = height
        self.style = style
        self.anchor = anchor

    @property
    def anchor(self) -> Anchor:
        return self._anchor

    @anchor.setter
    def anchor(self, value: Union[Anchor, str]) -> None:
        # Accepts "center"/"topleft"; anything else raises ValueError
        self._anchor = Anchor(value)

    def _top_left(self):
        if self.anchor is Anchor.CENTER:
            return (self.position.x - self.width / 2,
                    self.position.y - self.height / 2)
        return self.position.x, self.position.y
    
    def get_bounding_box(self) -> BoundingBox:
        x, y = self._top_left()
        return BoundingBox(x, y, x + self.width, y + self.height)
    
    def render(self, ctx: DrawingContext, window: 'Window') -> None:
        if self.config.visible is False:
            return
        ratio = window.horizon.ratio
        w = self.width * ratio
        h = self.height * ratio
        p = window.to_screen(self.position)
        
        x, y = p.x, p.y
        if self.anchor is Anchor.CENTER:
            x = p.x - w / 2
            y = p.y - h / 2
        
        ctx.save()
        apply_style(ctx, self.style)
        
        ctx.begin_path()
        ctx.rect(x, y, w, h)
        if _wants_fill(self.style):
            ctx.fill()
        ctx.stroke()
        
        reset_style(ctx)
        ctx.restore()


class Line(Entity):
    """
    A segment connecting two other entities.
    
    The endpoints are read from a.position and b.position on every
    render, so the line follows its entities without any update call.
    The line's own position is not used for drawing.
    """
    
    def __init__(self, a: Entity, b: Entity, style: Optional[DrawStyle] = None):
        super().__init__()
        self.a = a
        self.b = b
        self.style = style
    
    def length(self) -> float:
        return self.a.distance(self.b)
    
    def get_bounding_box(self) -> BoundingBox:
        pa, pb = self.a.position, self.b.position
        return BoundingBox(
            min_x=min(pa.x, pb.x),
            min_y=min(pa.y, pb.y),
            max_x=max(pa.x, pb.x),
            max_y=max(pa.y, pb.y)
        )
    
    def render(self, ctx: DrawingContext, window: 'Window') -> None:
        if self.config.visible is False:
            return
        p1 = window.to_screen(self.a.position)
        p2 = window.to_screen(self.b.position)
        
        ctx.save()
        apply_style(ctx, self.style)
        
        # Lines are stroke-only; a fill_style in the style is ignored
        ctx.begin_path()
        ctx.move_to(p1.x, p1.y)
        ctx.line_to(p2.x, p2.y)
        ctx.stroke()
        
        reset_style(ctx)
        ctx.restore()
