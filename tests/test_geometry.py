"""Tests for TileGeometry and make_tile_mesh."""

import numpy as np
import pytest

from tilemesh import (
    InvalidTileParameterError,
    SkirtEdge,
    TileGeometry,
    TileParameters,
    make_tile_mesh,
)
from tilemesh.mesh import validate_mesh_buffers


def test_defaults():
    geometry = make_tile_mesh()
    assert isinstance(geometry, TileGeometry)
    assert geometry.vertex_count == 4
    assert geometry.triangle_count == 2
    assert not geometry.has_skirt
    assert geometry.skirt_offsets == {}
    assert geometry.parameters == TileParameters()


def test_attributes():
    geometry = make_tile_mesh(2.0, 2.0, 2, 2, skirt=True)
    assert set(geometry.attributes) == {"position", "normal", "uv"}
    assert geometry.item_size("position") == 3
    assert geometry.item_size("normal") == 3
    assert geometry.item_size("uv") == 2
    for values in geometry.attributes.values():
        assert len(values) == geometry.vertex_count
        assert values.dtype == np.float32
    assert geometry.index.dtype == np.uint32
    assert geometry.triangles.shape == (geometry.triangle_count, 3)


def test_unknown_attribute():
    with pytest.raises(KeyError, match="color"):
        make_tile_mesh().get_attribute("color")


def test_example_tile():
    geometry = make_tile_mesh(width=2, height=2, width_segments=2, height_segments=2)
    assert geometry.vertex_count == 9
    assert len(geometry.index) == 24
    np.testing.assert_array_equal(geometry.get_attribute("position")[4], [0, 0, 0])


def test_skirted_tile():
    geometry = make_tile_mesh(1.0, 1.0, 16, 16, skirt=True, skirt_depth=10.0)
    assert geometry.vertex_count == 289 + 4 * 17
    assert len(geometry.index) == 6 * 256 + 12 * 32
    assert geometry.has_skirt
    assert geometry.skirt_offsets[SkirtEdge.POS_X] == 340

    min_corner, max_corner = geometry.bounding_box()
    np.testing.assert_allclose(min_corner, [-0.5, -10.0, -0.5])
    np.testing.assert_allclose(max_corner, [0.5, 0.0, 0.5])


def test_buffers_satisfy_invariants():
    geometry = make_tile_mesh(3.0, 5.0, 4, 7, skirt=True, skirt_depth=1.5)
    is_valid, message = validate_mesh_buffers(
        geometry.get_attribute("position"),
        geometry.get_attribute("normal"),
        geometry.get_attribute("uv"),
        geometry.index,
    )
    assert is_valid, message


def test_idempotent():
    first = make_tile_mesh(3.0, 2.0, 5, 4, skirt=True, skirt_depth=2.5)
    second = make_tile_mesh(3.0, 2.0, 5, 4, skirt=True, skirt_depth=2.5)
    for name in ("position", "normal", "uv"):
        assert first.get_attribute(name).tobytes() == second.get_attribute(name).tobytes()
    assert first.index.tobytes() == second.index.tobytes()


def test_plane_faces_up_with_skirt():
    geometry = make_tile_mesh(2.0, 2.0, 3, 3, skirt=True)
    normals = geometry.compute_face_normals()
    assert np.all(normals[: 2 * 9, 1] > 0)


def test_attributes_are_read_only():
    geometry = make_tile_mesh()
    with pytest.raises(ValueError):
        geometry.get_attribute("uv")[0, 0] = 0.5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0.0},
        {"height": -2.0},
        {"width_segments": 0},
        {"height_segments": 2.5},
        {"skirt": True, "skirt_depth": float("inf")},
    ],
)
def test_invalid_arguments(kwargs):
    with pytest.raises(InvalidTileParameterError):
        make_tile_mesh(**kwargs)


def test_repr():
    assert repr(make_tile_mesh(skirt=True)) == (
        "TileGeometry(vertices=12, triangles=10, skirt=True)"
    )
