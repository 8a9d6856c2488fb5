"""Shared test fixtures."""

import matplotlib
matplotlib.use("Agg")

import pytest
from shape_record.render.base import RenderSurface


class RecordingSurface(RenderSurface):
    """Surface that records every draw call."""
    
    def __init__(self):
        self.calls = []
    
    def circle(self, center_x, center_y, radius):
        self.calls.append(("circle", (center_x, center_y, radius)))
    
    def polygon(self, points):
        self.calls.append(("polygon", list(points)))


@pytest.fixture
def surface():
    return RecordingSurface()
