"""Closed set of shape kinds understood by the record decoder."""

from enum import Enum, IntEnum


class ShapeKind(IntEnum):
    """Shape variants; the integer value is the tag written on the wire."""
    
    CIRCLE = 0
    TRIANGLE = 1
    SQUARE = 2
    
    @property
    def required_param_count(self) -> int:
        """Number of float64 parameters following the tag."""
        return _PARAM_COUNTS[self]
    
    @classmethod
    def from_tag(cls, tag: int) -> "ShapeKind":
        """Map a raw tag value to a kind.
        
        Raises:
            ValueError: If the tag is not a known kind
        """
        return cls(int(tag))
    
    @classmethod
    def from_name(cls, name: str) -> "ShapeKind":
        """Look up a kind by case-insensitive name (e.g. 'circle')."""
        try:
            return cls[name.upper()]
        except KeyError:
            available = [kind.name.lower() for kind in cls]
            raise ValueError(f"Unknown shape kind '{name}'. Available: {available}") from None


_PARAM_COUNTS = {
    ShapeKind.CIRCLE: 3,
    ShapeKind.TRIANGLE: 6,
    ShapeKind.SQUARE: 8,
}


class ShortParamsPolicy(str, Enum):
    """What a shape does when asked to render with too few parameters."""
    
    SKIP = "skip"
    ERROR = "error"
