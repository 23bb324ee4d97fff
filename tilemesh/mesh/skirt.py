"""Skirt strips hanging from the tile's four edges.

A skirt is a vertical apron below the border of the tile grid. When adjacent
tiles are rendered at different resolutions, or displaced independently, the
skirt covers the cracks that open up between their borders.

Each edge gets one strip: a row of vertices directly below the boundary
vertices of the grid, offset to ``y = -skirt_depth``, stitched to that
boundary with two triangles per grid cell along the edge. Strips are appended
in the order of :class:`SkirtEdge`.
"""

from __future__ import annotations

import enum
import logging
from typing import NamedTuple

import numpy as np

from tilemesh.exceptions import MeshGenerationError
from tilemesh.mesh.buffers import MeshBuffers
from tilemesh.mesh.parameters import TileParameters
from tilemesh.mesh.plane import UP

logger = logging.getLogger(__name__)


class SkirtEdge(enum.Enum):
    """Tile edges in strip append order."""

    NEG_Z = "-z"
    POS_Z = "+z"
    NEG_X = "-x"
    POS_X = "+x"


class _EdgeLayout(NamedTuple):
    # Axis the strip runs along ("x" or "z").
    axis: str
    # Whether the fixed grid coordinate is the far boundary (last row/column).
    far: bool
    # Triangle winding (d, b, a), (d, c, b) instead of (a, b, d), (b, c, d).
    flipped: bool


_LAYOUTS = {
    SkirtEdge.NEG_Z: _EdgeLayout(axis="x", far=False, flipped=True),
    SkirtEdge.POS_Z: _EdgeLayout(axis="x", far=True, flipped=False),
    SkirtEdge.NEG_X: _EdgeLayout(axis="z", far=False, flipped=False),
    SkirtEdge.POS_X: _EdgeLayout(axis="z", far=True, flipped=True),
}


def build_skirt(params: TileParameters, buffers: MeshBuffers) -> dict[SkirtEdge, int]:
    """Append the four skirt strips to buffers holding the tile grid.

    Must run right after :func:`~tilemesh.mesh.plane.build_plane` on the
    same buffers. Skirt vertices reuse the up normal of the grid so shading
    stays continuous across the tile border.

    Args:
        params: Tile parameters used to build the grid.
        buffers: Buffers holding exactly the grid built from ``params``.

    Returns:
        Mapping of each edge to the index of the first vertex of its strip.

    Raises:
        MeshGenerationError: If ``buffers`` does not hold the grid of ``params``.
    """
    if buffers.vertex_count != params.grid_vertex_count:
        raise MeshGenerationError(
            f"Skirt needs the {params.grid_vertex_count}-vertex grid in the "
            f"buffers, found {buffers.vertex_count} vertices"
        )

    offsets = {}
    for edge in SkirtEdge:
        offsets[edge] = _build_strip(params, buffers, _LAYOUTS[edge])

    starts = {edge.value: start for edge, start in offsets.items()}
    logger.debug(f"Built skirt (depth {params.skirt_depth}): strip offsets {starts}")
    return offsets


def _build_strip(
    params: TileParameters,
    buffers: MeshBuffers,
    layout: _EdgeLayout,
) -> int:
    """Append one edge strip and its stitching triangles, return its offset."""
    if layout.axis == "x":
        i = np.arange(params.grid_x)
        iz = params.height_segments if layout.far else 0
        x = params.x_at(i)
        z = np.full(len(i), params.z_at(iz))
        uvs = np.column_stack(
            [i / params.width_segments, np.full(len(i), 1 - iz / params.height_segments)]
        )
        boundary = params.index(i, iz)
    else:
        i = np.arange(params.grid_z)
        ix = params.width_segments if layout.far else 0
        x = np.full(len(i), params.x_at(ix))
        z = params.z_at(i)
        uvs = np.column_stack(
            [np.full(len(i), ix / params.width_segments), 1 - i / params.height_segments]
        )
        boundary = params.index(ix, i)

    positions = np.column_stack([x, np.full(len(i), -params.skirt_depth), z])
    start = buffers.append_vertices(positions, UP, uvs)

    a = boundary[:-1]
    d = boundary[1:]
    b = start + i[:-1]
    c = start + i[1:]
    if layout.flipped:
        faces = np.column_stack([d, b, a, d, c, b])
    else:
        faces = np.column_stack([a, b, d, b, c, d])
    buffers.append_indices(faces)
    return start
