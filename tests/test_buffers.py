"""Tests for MeshBuffers."""

import numpy as np
import pytest

from tilemesh import MeshBuffers


def _quad():
    positions = np.array([[0, 0, 0], [1, 0, 0], [0, 0, 1], [1, 0, 1]], dtype=float)
    uvs = np.array([[0, 1], [1, 1], [0, 0], [1, 0]], dtype=float)
    return positions, uvs


def test_append_returns_start_offset():
    buffers = MeshBuffers()
    positions, uvs = _quad()
    assert buffers.append_vertices(positions, (0, 1, 0), uvs) == 0
    assert buffers.append_vertices(positions, (0, 1, 0), uvs) == 4
    assert buffers.vertex_count == 8


def test_grows_past_capacity():
    buffers = MeshBuffers(vertex_capacity=1, index_capacity=3)
    positions, uvs = _quad()
    buffers.append_vertices(positions, (0, 1, 0), uvs)
    buffers.append_indices([0, 2, 1, 2, 3, 1])

    np.testing.assert_array_equal(buffers.positions, positions)
    np.testing.assert_array_equal(buffers.indices, [0, 2, 1, 2, 3, 1])
    assert buffers.index_count == 6


def test_normal_broadcast_and_dtypes():
    buffers = MeshBuffers(4, 6)
    positions, uvs = _quad()
    buffers.append_vertices(positions, (0, 1, 0), uvs)

    np.testing.assert_array_equal(buffers.normals, np.tile([0, 1, 0], (4, 1)))
    assert buffers.positions.dtype == np.float32
    assert buffers.uvs.dtype == np.float32
    assert buffers.indices.dtype == np.uint32


def test_views_are_read_only():
    buffers = MeshBuffers()
    positions, uvs = _quad()
    buffers.append_vertices(positions, (0, 1, 0), uvs)
    with pytest.raises(ValueError):
        buffers.positions[0, 0] = 5.0


def test_length_mismatch():
    buffers = MeshBuffers()
    positions, uvs = _quad()
    with pytest.raises(ValueError, match="same length"):
        buffers.append_vertices(positions, (0, 1, 0), uvs[:3])


def test_index_out_of_range():
    buffers = MeshBuffers()
    positions, uvs = _quad()
    buffers.append_vertices(positions, (0, 1, 0), uvs)
    with pytest.raises(ValueError, match="out of range"):
        buffers.append_indices([0, 1, 4])
    assert buffers.index_count == 0


def test_partial_triangle_rejected():
    buffers = MeshBuffers()
    positions, uvs = _quad()
    buffers.append_vertices(positions, (0, 1, 0), uvs)
    with pytest.raises(ValueError, match="multiple of 3"):
        buffers.append_indices([0, 1])
