"""Render manager selecting a surface by mode name."""

import logging
from typing import Optional, Sequence
from shape_record.render.base import RenderSurface
from shape_record.render.logging_surface import LoggingSurface
from shape_record.render.null_surface import NullSurface
from shape_record.render.surface_2d import Surface2D

logger = logging.getLogger(__name__)

RENDER_MODES = ("null", "log", "2d")


class RenderManager(RenderSurface):
    """Owns the active surface and forwards draw calls to it."""
    
    def __init__(self, mode: str = "null", **surface_kwargs):
        """Initialize render manager.
        
        Args:
            mode: Rendering mode ('null', 'log' or '2d')
            **surface_kwargs: Additional arguments for the surface
        """
        self.mode = mode
        self.surface: Optional[RenderSurface] = None
        self.surface_kwargs = surface_kwargs
        self._create_surface()
    
    def _create_surface(self):
        """Create appropriate surface based on mode."""
        if self.surface is not None:
            self.surface.close()
        
        if self.mode == "null":
            self.surface = NullSurface()
        elif self.mode == "log":
            self.surface = LoggingSurface(**self.surface_kwargs)
        elif self.mode == "2d":
            self.surface = Surface2D(**self.surface_kwargs)
        else:
            self.surface = None
            raise ValueError(f"Unknown render mode: {self.mode}. Available: {list(RENDER_MODES)}")
        logger.debug("Render surface: %s", type(self.surface).__name__)
    
    def set_mode(self, mode: str, **surface_kwargs):
        """Switch rendering mode.
        
        Args:
            mode: New mode
            **surface_kwargs: Arguments for the new surface (replace the old ones)
        """
        if mode != self.mode or surface_kwargs:
            self.mode = mode
            self.surface_kwargs = surface_kwargs
            self._create_surface()
    
    def _require_surface(self) -> RenderSurface:
        if self.surface is None:
            raise RuntimeError("Render surface not initialized")
        return self.surface
    
    def circle(self, center_x: float, center_y: float, radius: float):
        self._require_surface().circle(center_x, center_y, radius)
    
    def polygon(self, points: Sequence[float]):
        self._require_surface().polygon(points)
    
    def save(self, output_path: str):
        """Save the drawing to a file. Only supported by the '2d' surface."""
        surface = self._require_surface()
        if not isinstance(surface, Surface2D):
            raise RuntimeError(f"Render mode '{self.mode}' cannot save images")
        surface.save(output_path)
    
    def close(self):
        """Close surface."""
        if self.surface is not None:
            self.surface.close()
            self.surface = None
