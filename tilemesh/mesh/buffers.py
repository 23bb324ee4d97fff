"""Append-only vertex and index buffers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from tilemesh.mesh.parameters import TileParameters

POSITION_DTYPE = np.float32
INDEX_DTYPE = np.uint32


class MeshBuffers:
    """Growable position, normal, uv and index buffers.

    Vertices are stored as rows of ``(n, 3)`` position and normal arrays and an
    ``(n, 2)`` uv array; indices as a flat array where each consecutive triple
    names one triangle. Storage is preallocated to the given capacity and
    doubles when an append does not fit.

    Args:
        vertex_capacity: Number of vertices to preallocate.
        index_capacity: Number of indices to preallocate.

    Example:
        >>> buffers = MeshBuffers.for_parameters(params)
        >>> build_plane(params, buffers)
        >>> buffers.vertex_count == params.grid_vertex_count
        True
    """

    def __init__(self, vertex_capacity: int = 0, index_capacity: int = 0):
        self._positions = np.zeros((vertex_capacity, 3), dtype=POSITION_DTYPE)
        self._normals = np.zeros((vertex_capacity, 3), dtype=POSITION_DTYPE)
        self._uvs = np.zeros((vertex_capacity, 2), dtype=POSITION_DTYPE)
        self._indices = np.zeros(index_capacity, dtype=INDEX_DTYPE)
        self._n_vertices = 0
        self._n_indices = 0

    @classmethod
    def for_parameters(cls, params: TileParameters) -> MeshBuffers:
        """Create empty buffers sized for the final mesh of ``params``."""
        return cls(params.vertex_count, params.index_count)

    @property
    def vertex_count(self) -> int:
        return self._n_vertices

    @property
    def index_count(self) -> int:
        return self._n_indices

    @property
    def positions(self) -> np.ndarray:
        """Read-only view of the appended positions, shape (n, 3)."""
        return self._view(self._positions[: self._n_vertices])

    @property
    def normals(self) -> np.ndarray:
        """Read-only view of the appended normals, shape (n, 3)."""
        return self._view(self._normals[: self._n_vertices])

    @property
    def uvs(self) -> np.ndarray:
        """Read-only view of the appended uvs, shape (n, 2)."""
        return self._view(self._uvs[: self._n_vertices])

    @property
    def indices(self) -> np.ndarray:
        """Read-only view of the appended indices, shape (m,)."""
        return self._view(self._indices[: self._n_indices])

    def append_vertices(
        self,
        positions: np.ndarray,
        normals: np.ndarray,
        uvs: np.ndarray,
    ) -> int:
        """Append a block of vertices.

        Args:
            positions: Positions, shape (k, 3).
            normals: Normals, shape (k, 3) or (3,) to use one normal for all.
            uvs: Texture coordinates, shape (k, 2).

        Returns:
            Index of the first appended vertex.
        """
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
        uvs = np.asarray(uvs, dtype=np.float64).reshape(-1, 2)
        n = len(positions)
        if len(uvs) != n:
            raise ValueError(
                f"positions and uvs must have same length, got {n} and {len(uvs)}"
            )
        normals = np.broadcast_to(np.asarray(normals, dtype=np.float64), (n, 3))

        start = self._n_vertices
        self._reserve_vertices(start + n)
        self._positions[start : start + n] = positions
        self._normals[start : start + n] = normals
        self._uvs[start : start + n] = uvs
        self._n_vertices += n
        return start

    def append_indices(self, indices: np.ndarray) -> None:
        """Append a flat block of triangle indices.

        Raises:
            ValueError: If the block is not a whole number of triangles or
                references a vertex that has not been appended.
        """
        indices = np.asarray(indices, dtype=np.int64).ravel()
        if len(indices) % 3 != 0:
            raise ValueError(
                f"Index block length must be a multiple of 3, got {len(indices)}"
            )
        if len(indices) and (indices.min() < 0 or indices.max() >= self._n_vertices):
            raise ValueError(
                f"Index out of range for {self._n_vertices} vertices "
                f"(min {indices.min()}, max {indices.max()})"
            )

        start = self._n_indices
        self._reserve_indices(start + len(indices))
        self._indices[start : start + len(indices)] = indices
        self._n_indices += len(indices)

    def _reserve_vertices(self, required: int) -> None:
        capacity = len(self._positions)
        if required <= capacity:
            return
        capacity = max(required, 2 * capacity)
        self._positions = self._grow(self._positions, capacity)
        self._normals = self._grow(self._normals, capacity)
        self._uvs = self._grow(self._uvs, capacity)

    def _reserve_indices(self, required: int) -> None:
        capacity = len(self._indices)
        if required <= capacity:
            return
        self._indices = self._grow(self._indices, max(required, 2 * capacity))

    @staticmethod
    def _grow(array: np.ndarray, capacity: int) -> np.ndarray:
        grown = np.zeros((capacity,) + array.shape[1:], dtype=array.dtype)
        grown[: len(array)] = array
        return grown

    @staticmethod
    def _view(array: np.ndarray) -> np.ndarray:
        view = array.view()
        view.flags.writeable = False
        return view

    def __repr__(self) -> str:
        return (
            f"MeshBuffers(vertices={self._n_vertices}/{len(self._positions)}, "
            f"indices={self._n_indices}/{len(self._indices)})"
        )
