"""Circle shape: center x, center y, radius."""

from typing import Sequence
from shape_record.render.base import RenderSurface
from shape_record.shapes.base import Shape
from shape_record.shapes.kinds import ShapeKind


class Circle(Shape):
    """Circle defined by its center and radius."""
    
    KIND = ShapeKind.CIRCLE
    
    def _draw(self, surface: RenderSurface, params: Sequence[float]):
        center_x, center_y, radius = (float(value) for value in params[:3])
        surface.circle(center_x, center_y, radius)
