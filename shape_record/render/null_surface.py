"""Surface that discards every draw request."""

from typing import Sequence
from shape_record.render.base import RenderSurface


class NullSurface(RenderSurface):
    """No-op surface, useful when only decoding matters."""
    
    def circle(self, center_x: float, center_y: float, radius: float):
        pass
    
    def polygon(self, points: Sequence[float]):
        pass
