"""Square shape: four (x, y) vertices."""

from shape_record.shapes.base import PolygonShape
from shape_record.shapes.kinds import ShapeKind


class Square(PolygonShape):
    """Square given as four vertices in drawing order.
    
    The vertices are passed through as-is; no check is made that they
    actually form a square.
    """
    
    KIND = ShapeKind.SQUARE
