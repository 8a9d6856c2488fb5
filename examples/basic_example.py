"""Basic example: write a record, decode it and log the draw calls."""

import tempfile
from pathlib import Path
from shape_record import RecordPipeline, ShapeKind
from shape_record.io import FileByteSource, write_record
from shape_record.render import LoggingSurface
from shape_record.utils import setup_logging


def main():
    """Round-trip a triangle record through a file."""
    setup_logging("INFO")
    
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "features.dat"
        write_record(path, ShapeKind.TRIANGLE, [0.0, 0.0, 4.0, 0.0, 2.0, 3.0])
        
        pipeline = RecordPipeline()
        with FileByteSource(path) as source:
            pipeline.try_decode(source)
    
    pipeline.render(LoggingSurface())
    print(f"Loaded: {pipeline.is_loaded}, kind: {pipeline.current_kind.name}")


if __name__ == "__main__":
    main()
