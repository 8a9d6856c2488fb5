"""Shape kinds, variants and the shape registry."""

from shape_record.shapes.kinds import ShapeKind, ShortParamsPolicy
from shape_record.shapes.base import Shape, PolygonShape
from shape_record.shapes.circle import Circle
from shape_record.shapes.triangle import Triangle
from shape_record.shapes.square import Square
from shape_record.shapes.registry import ShapeRegistry, default_registry

__all__ = [
    "ShapeKind",
    "ShortParamsPolicy",
    "Shape",
    "PolygonShape",
    "Circle",
    "Triangle",
    "Square",
    "ShapeRegistry",
    "default_registry",
]
