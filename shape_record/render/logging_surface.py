"""Surface that reports draw requests through logging."""

import logging
from typing import Optional, Sequence
from shape_record.render.base import RenderSurface

logger = logging.getLogger(__name__)


class LoggingSurface(RenderSurface):
    """Logs every draw call instead of drawing it."""
    
    def __init__(self, level: int = logging.INFO, log: Optional[logging.Logger] = None):
        """Initialize logging surface.
        
        Args:
            level: Log level used for draw calls
            log: Logger to write to (default: this module's logger)
        """
        self.level = level
        self.log = log or logger
    
    def circle(self, center_x: float, center_y: float, radius: float):
        self.log.log(
            self.level,
            "circle: center=(%g, %g) radius=%g",
            center_x, center_y, radius
        )
    
    def polygon(self, points: Sequence[float]):
        self.log.log(
            self.level,
            "polygon: %d vertices { %s }",
            len(points) // 2, " ".join(f"{float(p):g}" for p in points)
        )
