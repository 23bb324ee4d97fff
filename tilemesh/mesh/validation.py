"""Face normal computation and buffer invariant checks."""

from __future__ import annotations

import numpy as np


def compute_face_normals(
    positions: np.ndarray,
    index: np.ndarray,
    normalize: bool = True,
) -> np.ndarray:
    """Compute one normal per triangle from its winding.

    For a triangle (p0, p1, p2) the normal is ``(p1 - p0) x (p2 - p0)``, so a
    counter-clockwise triangle seen from above has a positive Y component.

    Args:
        positions: Vertex positions, shape (n, 3).
        index: Flat triangle index array, length a multiple of 3.
        normalize: If True, scale normals to unit length. Degenerate
            triangles keep a zero normal.

    Returns:
        Face normals, shape (n_triangles, 3).

    Raises:
        ValueError: If input shapes are incompatible.
    """
    positions = np.asarray(positions, dtype=np.float64)
    index = np.asarray(index)

    if positions.ndim != 2 or positions.shape[1] != 3:
        raise ValueError("positions must have shape (n_vertices, 3)")
    if index.size % 3 != 0:
        raise ValueError(
            f"index length ({index.size}) must be a multiple of 3"
        )

    triangles = positions[index.reshape(-1, 3)]
    p0, p1, p2 = triangles[:, 0], triangles[:, 1], triangles[:, 2]
    normals = np.cross(p1 - p0, p2 - p0)

    if normalize:
        lengths = np.linalg.norm(normals, axis=1, keepdims=True)
        np.divide(normals, lengths, out=normals, where=lengths > 0)

    return normals


def validate_mesh_buffers(
    positions: np.ndarray,
    normals: np.ndarray,
    uvs: np.ndarray,
    index: np.ndarray,
) -> tuple[bool, str]:
    """Validate tile mesh buffers.

    Checks that:
    - Positions, normals and uvs describe the same number of vertices
    - The index array holds whole triangles
    - Every index addresses an existing vertex
    - No NaN or infinite values
    - Texture coordinates lie in [0, 1]

    Args:
        positions: Vertex positions, shape (n, 3).
        normals: Vertex normals, shape (n, 3).
        uvs: Texture coordinates, shape (n, 2).
        index: Flat triangle index array.

    Returns:
        Tuple of (is_valid, message).
    """
    positions = np.asarray(positions)
    normals = np.asarray(normals)
    uvs = np.asarray(uvs)
    index = np.asarray(index)

    if positions.ndim != 2 or positions.shape[1] != 3:
        return False, "positions must have shape (n, 3)"
    if normals.shape != positions.shape:
        return False, (
            f"normals shape {normals.shape} does not match "
            f"positions shape {positions.shape}"
        )
    if uvs.shape != (len(positions), 2):
        return False, (
            f"uvs shape {uvs.shape} does not match "
            f"{len(positions)} vertices"
        )

    # Check for NaN/inf
    for name, values in (("positions", positions), ("normals", normals), ("uvs", uvs)):
        if np.any(~np.isfinite(values)):
            return False, f"{name} contains NaN or infinite values"

    if index.ndim != 1:
        return False, "index must be a flat array"
    if len(index) % 3 != 0:
        return False, f"index length ({len(index)}) is not a multiple of 3"
    if len(index) and (index.min() < 0 or index.max() >= len(positions)):
        return False, (
            f"index references vertex {index.max()} but only "
            f"{len(positions)} vertices exist"
        )

    if np.any((uvs < 0) | (uvs > 1)):
        return False, "uvs outside [0, 1]"

    return True, "Mesh buffers are valid"
