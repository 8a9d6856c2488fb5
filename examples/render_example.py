"""Example of drawing decoded records with matplotlib."""

from shape_record import RecordPipeline, ShapeKind
from shape_record.io import BufferByteSource, encode_record
from shape_record.render import Surface2D


def main():
    """Draw one record of each kind on the same figure and save it."""
    records = [
        (ShapeKind.CIRCLE, [0.0, 0.0, 2.0]),
        (ShapeKind.TRIANGLE, [3.0, 0.0, 6.0, 0.0, 4.5, 2.5]),
        (ShapeKind.SQUARE, [-5.0, -1.0, -3.0, -1.0, -3.0, 1.0, -5.0, 1.0]),
    ]
    
    pipeline = RecordPipeline()
    surface = Surface2D(title="Decoded shapes")
    
    for kind, params in records:
        pipeline.decode(BufferByteSource(encode_record(kind, params)))
        pipeline.render(surface)
    
    surface.save("shapes.png")
    surface.close()
    print("Saved shapes.png")


if __name__ == "__main__":
    main()
