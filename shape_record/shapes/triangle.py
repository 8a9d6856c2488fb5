"""Triangle shape: three (x, y) vertices."""

from shape_record.shapes.base import PolygonShape
from shape_record.shapes.kinds import ShapeKind


class Triangle(PolygonShape):
    """Triangle given as x0, y0, x1, y1, x2, y2."""
    
    KIND = ShapeKind.TRIANGLE
