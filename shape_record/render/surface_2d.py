"""2D render surface using matplotlib."""

from pathlib import Path
from typing import Optional, Sequence, Tuple, Union
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Circle as CirclePatch, Polygon as PolygonPatch
from shape_record.render.base import RenderSurface


class Surface2D(RenderSurface):
    """Draws shapes as matplotlib patches on a single axes."""
    
    def __init__(
        self,
        figsize: Tuple[float, float] = (6, 6),
        dpi: int = 100,
        title: str = "Shape Record",
        edgecolor: str = "black",
        facecolor: str = "tab:blue",
        alpha: float = 0.6
    ):
        """Initialize 2D surface.
        
        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            title: Axes title
            edgecolor: Outline color of drawn shapes
            facecolor: Fill color of drawn shapes
            alpha: Fill transparency
        """
        self.figsize = figsize
        self.dpi = dpi
        self.title = title
        self.edgecolor = edgecolor
        self.facecolor = facecolor
        self.alpha = alpha
        
        self.fig: Optional[Figure] = None
        self.ax = None
        self.patches = []
    
    def _initialize(self):
        """Create the figure if not already done."""
        if self.fig is None:
            self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
            self._setup_axes()
    
    def _setup_axes(self):
        self.ax.set_aspect('equal')
        self.ax.set_xlabel('X')
        self.ax.set_ylabel('Y')
        self.ax.set_title(self.title)
        self.ax.grid(True, alpha=0.3)
    
    def _add_patch(self, patch):
        self._initialize()
        self.ax.add_patch(patch)
        self.patches.append(patch)
        self.ax.relim()
        self.ax.autoscale_view()
        self.ax.margins(0.1)
    
    def circle(self, center_x: float, center_y: float, radius: float):
        self._add_patch(CirclePatch(
            (center_x, center_y), radius,
            edgecolor=self.edgecolor, facecolor=self.facecolor, alpha=self.alpha
        ))
    
    def polygon(self, points: Sequence[float]):
        vertices = np.array(points, dtype=np.float64).reshape(-1, 2)
        self._add_patch(PolygonPatch(
            vertices, closed=True,
            edgecolor=self.edgecolor, facecolor=self.facecolor, alpha=self.alpha
        ))
    
    def capture_frame(self) -> np.ndarray:
        """Capture the current drawing as an image array.
        
        Returns:
            Image array (H, W, 3) uint8
        """
        if self.fig is None:
            raise RuntimeError("Surface not initialized. Draw a shape first.")
        
        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return rgba[:, :, :3].copy()
    
    def save(self, output_path: Union[str, Path]):
        """Save the current drawing to an image file (format from suffix)."""
        if self.fig is None:
            raise RuntimeError("Surface not initialized. Draw a shape first.")
        self.fig.savefig(output_path, dpi=self.dpi)
    
    def show(self):
        """Show the drawing in a window (blocks until closed)."""
        self._initialize()
        plt.show()
    
    def clear(self):
        """Remove everything drawn so far."""
        if self.ax is not None:
            self.ax.clear()
            self._setup_axes()
        self.patches = []
    
    def close(self):
        """Close the figure."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
        self.patches = []
