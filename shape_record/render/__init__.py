"""Render surfaces for decoded shapes."""

from shape_record.render.base import RenderSurface
from shape_record.render.null_surface import NullSurface
from shape_record.render.logging_surface import LoggingSurface
from shape_record.render.surface_2d import Surface2D
from shape_record.render.manager import RenderManager, RENDER_MODES

__all__ = [
    "RenderSurface",
    "NullSurface",
    "LoggingSurface",
    "Surface2D",
    "RenderManager",
    "RENDER_MODES",
]
