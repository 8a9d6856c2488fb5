"""Render surface interface."""

from abc import ABC, abstractmethod
from typing import Sequence


class RenderSurface(ABC):
    """Abstract sink for primitive draw requests."""
    
    @abstractmethod
    def circle(self, center_x: float, center_y: float, radius: float):
        """Draw a circle.
        
        Args:
            center_x: Center X coordinate
            center_y: Center Y coordinate
            radius: Circle radius
        """
        pass
    
    @abstractmethod
    def polygon(self, points: Sequence[float]):
        """Draw a closed polygon.
        
        Args:
            points: Flat coordinate sequence x0, y0, x1, y1, ...
        """
        pass
    
    def close(self):
        """Release any resources held by the surface."""
        pass
