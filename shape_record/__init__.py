"""
Shape Record - decode a binary shape record and render it.

Features:
- Closed set of shape kinds (circle, triangle, square) with fixed parameter counts
- Shape registry with duplicate detection
- One cached shape instance per kind
- Pluggable render surfaces (null, logging, matplotlib 2D)
- CLI and config file support
"""

__version__ = "0.1.0"

from shape_record.shapes import ShapeKind, ShapeRegistry, default_registry
from shape_record.pipeline import RecordPipeline

__all__ = [
    "ShapeKind",
    "ShapeRegistry",
    "default_registry",
    "RecordPipeline",
]
