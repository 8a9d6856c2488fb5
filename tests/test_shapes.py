"""Tests for shape kinds and shape variants."""

import pytest
import numpy as np
from shape_record.errors import InsufficientParametersError
from shape_record.shapes import Circle, Triangle, Square, ShapeKind, ShortParamsPolicy


def test_kind_param_counts():
    """Test required parameter counts and wire tags."""
    assert ShapeKind.CIRCLE.required_param_count == 3
    assert ShapeKind.TRIANGLE.required_param_count == 6
    assert ShapeKind.SQUARE.required_param_count == 8
    assert [int(kind) for kind in ShapeKind] == [0, 1, 2]


def test_kind_lookup():
    """Test kind lookup by tag and by name."""
    assert ShapeKind.from_tag(1) is ShapeKind.TRIANGLE
    assert ShapeKind.from_name("Square") is ShapeKind.SQUARE
    
    with pytest.raises(ValueError):
        ShapeKind.from_tag(3)
    with pytest.raises(ValueError):
        ShapeKind.from_name("hexagon")


def test_shape_kinds():
    """Test that each variant reports its own kind and count."""
    for shape_class, kind in [(Circle, ShapeKind.CIRCLE), (Triangle, ShapeKind.TRIANGLE), (Square, ShapeKind.SQUARE)]:
        shape = shape_class()
        assert shape.kind is kind
        assert shape.required_param_count == kind.required_param_count


def test_circle_render(surface):
    """Test circle dispatch to the circle primitive."""
    Circle().render(surface, np.array([1.0, 2.0, 5.0]))
    
    assert surface.calls == [("circle", (1.0, 2.0, 5.0))]
    assert all(isinstance(value, float) for value in surface.calls[0][1])


def test_circle_ignores_extra_params(surface):
    """Test that a circle only uses its first three parameters."""
    Circle().render(surface, [1.0, 2.0, 5.0, 9.0])
    
    assert surface.calls == [("circle", (1.0, 2.0, 5.0))]


def test_polygon_render(surface):
    """Test triangle and square dispatch the full flat sequence."""
    triangle = [0.0, 0.0, 4.0, 0.0, 2.0, 3.0]
    square = [0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0]
    
    Triangle().render(surface, triangle)
    Square().render(surface, square)
    
    assert surface.calls == [("polygon", triangle), ("polygon", square)]
    assert Triangle().vertex_count == 3
    assert Square().vertex_count == 4


def test_short_params_skipped(surface):
    """Test that too few parameters is a silent no-op by default."""
    Circle().render(surface, [1.0, 2.0])
    Triangle().render(surface, [0.0] * 5)
    Square().render(surface, [])
    
    assert surface.calls == []


def test_short_params_error(surface):
    """Test the strict policy raises instead of skipping."""
    with pytest.raises(InsufficientParametersError) as excinfo:
        Square().render(surface, [0.0] * 7, policy=ShortParamsPolicy.ERROR)
    
    assert excinfo.value.required == 8
    assert excinfo.value.received == 7
    assert surface.calls == []
    
    with pytest.raises(InsufficientParametersError):
        Circle().render(surface, [1.0], policy="error")
