"""Flat subdivided grid in the X/Z plane."""

from __future__ import annotations

import logging

import numpy as np

from tilemesh.mesh.buffers import MeshBuffers
from tilemesh.mesh.parameters import TileParameters

logger = logging.getLogger(__name__)

UP = (0.0, 1.0, 0.0)


def build_plane(params: TileParameters, buffers: MeshBuffers) -> None:
    """Append the tile's top grid to ``buffers``.

    Vertices lie at ``y = 0`` and are emitted row-major, Z in the outer loop
    and X in the inner loop, so vertex ``params.index(ix, iz)`` sits at grid
    position (ix, iz) when the buffers start empty. Every vertex gets the up
    normal and uv ``(ix / width_segments, 1 - iz / height_segments)``.

    Each cell is split into triangles ``(a, b, d)`` and ``(b, c, d)`` where
    ``a`` is (ix, iz), ``b`` is (ix, iz+1), ``c`` is (ix+1, iz+1) and ``d`` is
    (ix+1, iz). This winding faces +Y.

    Args:
        params: Tile parameters.
        buffers: Buffers to append to. The grid is addressed relative to the
            vertex count found in the buffers on entry.
    """
    ix = np.arange(params.grid_x)
    iz = np.arange(params.grid_z)
    gx, gz = np.meshgrid(ix, iz)  # rows follow z, columns follow x
    gx = gx.ravel()
    gz = gz.ravel()

    positions = np.column_stack(
        [params.x_at(gx), np.zeros(len(gx)), params.z_at(gz)]
    )
    uvs = np.column_stack(
        [gx / params.width_segments, 1 - gz / params.height_segments]
    )
    start = buffers.append_vertices(positions, UP, uvs)

    cx, cz = np.meshgrid(ix[:-1], iz[:-1])
    cx = cx.ravel()
    cz = cz.ravel()
    a = start + params.index(cx, cz)
    b = start + params.index(cx, cz + 1)
    c = start + params.index(cx + 1, cz + 1)
    d = start + params.index(cx + 1, cz)
    buffers.append_indices(np.column_stack([a, b, d, b, c, d]))

    logger.debug(
        f"Built plane grid {params.grid_x}x{params.grid_z}: "
        f"{len(positions)} vertices, {6 * len(cx)} indices"
    )
