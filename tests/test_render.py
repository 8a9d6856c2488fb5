"""Tests for render surfaces."""

import logging
import pytest
import numpy as np
from shape_record.render import LoggingSurface, NullSurface, RenderManager, Surface2D


def test_null_surface():
    """Test the null surface accepts draw calls."""
    surface = NullSurface()
    surface.circle(0.0, 0.0, 1.0)
    surface.polygon([0.0, 0.0, 1.0, 0.0, 0.0, 1.0])
    surface.close()


def test_logging_surface(caplog):
    """Test draw calls are written to the log."""
    surface = LoggingSurface()
    
    with caplog.at_level(logging.INFO):
        surface.circle(1.0, 2.0, 5.0)
        surface.polygon([0.0, 0.0, 4.0, 0.0, 2.0, 3.0])
    
    assert "circle: center=(1, 2) radius=5" in caplog.text
    assert "polygon: 3 vertices { 0 0 4 0 2 3 }" in caplog.text


def test_surface_2d_draws_patches(tmp_path):
    """Test the matplotlib surface draws and saves shapes."""
    surface = Surface2D(figsize=(2, 2), dpi=50)
    try:
        surface.circle(1.0, 2.0, 5.0)
        surface.polygon(np.array([0.0, 0.0, 4.0, 0.0, 2.0, 3.0]))
        
        assert len(surface.patches) == 2
        assert np.allclose(surface.patches[1].get_xy()[:3], [[0, 0], [4, 0], [2, 3]])
        
        frame = surface.capture_frame()
        assert frame.shape == (100, 100, 3)
        assert frame.dtype == np.uint8
        
        output = tmp_path / "shape.png"
        surface.save(output)
        assert output.exists()
        
        surface.clear()
        assert surface.patches == []
    finally:
        surface.close()
    
    assert surface.fig is None


def test_surface_2d_requires_drawing():
    """Test capture and save need a drawing."""
    surface = Surface2D()
    with pytest.raises(RuntimeError):
        surface.capture_frame()
    with pytest.raises(RuntimeError):
        surface.save("unused.png")


def test_render_manager_modes():
    """Test surface selection and mode switching."""
    manager = RenderManager()
    assert isinstance(manager.surface, NullSurface)
    
    manager.set_mode("log")
    assert isinstance(manager.surface, LoggingSurface)
    
    manager.set_mode("2d", figsize=(2, 2), dpi=50)
    assert isinstance(manager.surface, Surface2D)
    manager.circle(0.0, 0.0, 1.0)
    assert len(manager.surface.patches) == 1
    
    manager.close()
    assert manager.surface is None
    with pytest.raises(RuntimeError):
        manager.polygon([0.0, 0.0, 1.0, 1.0, 0.0, 1.0])


def test_render_manager_unknown_mode():
    """Test that unknown modes are rejected."""
    with pytest.raises(ValueError):
        RenderManager(mode="3d")


def test_render_manager_save_unsupported():
    """Test saving is only possible in 2d mode."""
    manager = RenderManager(mode="log")
    with pytest.raises(RuntimeError):
        manager.save("unused.png")
