"""
Pytest fixtures shared across test modules.
"""
import pytest

from tilemesh import MeshBuffers, TileParameters
from tilemesh.mesh import build_plane


@pytest.fixture
def square_params():
    """2 x 2 tile with 2 x 2 cells and a skirt."""
    return TileParameters(2.0, 2.0, 2, 2, skirt=True, skirt_depth=10.0)


@pytest.fixture
def rect_params():
    """Rectangular tile with different segment counts along X and Z."""
    return TileParameters(3.0, 2.0, 3, 2, skirt=True, skirt_depth=5.0)


@pytest.fixture
def plane_buffers(rect_params):
    """Buffers holding the plane grid of ``rect_params``."""
    buffers = MeshBuffers.for_parameters(rect_params)
    build_plane(rect_params, buffers)
    return buffers
