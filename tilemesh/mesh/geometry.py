"""Renderable tile geometry."""

from __future__ import annotations

import logging

import numpy as np

from tilemesh.mesh.buffers import MeshBuffers
from tilemesh.mesh.parameters import TileParameters
from tilemesh.mesh.plane import build_plane
from tilemesh.mesh.skirt import SkirtEdge, build_skirt
from tilemesh.mesh.validation import compute_face_normals

logger = logging.getLogger(__name__)


class TileGeometry:
    """Indexed triangle geometry of one map tile.

    Exposes the vertex attributes under the names a renderer binds them by:
    ``position`` and ``normal`` with 3 floats per vertex and ``uv`` with 2,
    plus a flat triangle index array.

    Args:
        parameters: Parameters the geometry was built from.
        buffers: Filled mesh buffers. The geometry keeps read-only views.
        skirt_offsets: First vertex of each skirt strip, empty without skirt.
    """

    ITEM_SIZES = {"position": 3, "normal": 3, "uv": 2}

    def __init__(
        self,
        parameters: TileParameters,
        buffers: MeshBuffers,
        skirt_offsets: dict[SkirtEdge, int] | None = None,
    ):
        self._parameters = parameters
        self._attributes = {
            "position": buffers.positions,
            "normal": buffers.normals,
            "uv": buffers.uvs,
        }
        self._index = buffers.indices
        self._skirt_offsets = dict(skirt_offsets or {})

    @property
    def parameters(self) -> TileParameters:
        return self._parameters

    @property
    def attributes(self) -> dict[str, np.ndarray]:
        """Mapping of attribute name to array of shape (n, item_size)."""
        return dict(self._attributes)

    @property
    def index(self) -> np.ndarray:
        """Flat triangle index array."""
        return self._index

    @property
    def triangles(self) -> np.ndarray:
        """Index array viewed as shape (n_triangles, 3)."""
        return self._index.reshape(-1, 3)

    @property
    def vertex_count(self) -> int:
        return len(self._attributes["position"])

    @property
    def triangle_count(self) -> int:
        return len(self._index) // 3

    @property
    def skirt_offsets(self) -> dict[SkirtEdge, int]:
        """First vertex index of each skirt strip."""
        return dict(self._skirt_offsets)

    @property
    def has_skirt(self) -> bool:
        return bool(self._skirt_offsets)

    def get_attribute(self, name: str) -> np.ndarray:
        """Return the attribute array registered under ``name``.

        Raises:
            KeyError: If no such attribute exists.
        """
        try:
            return self._attributes[name]
        except KeyError:
            raise KeyError(
                f"Unknown attribute: {name}. "
                f"Available: {', '.join(self._attributes)}"
            ) from None

    def item_size(self, name: str) -> int:
        """Number of components per vertex of attribute ``name``."""
        return self.get_attribute(name).shape[1]

    def bounding_box(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (min_corner, max_corner) of the vertex positions."""
        positions = self._attributes["position"]
        return positions.min(axis=0), positions.max(axis=0)

    def compute_face_normals(self) -> np.ndarray:
        """Return unit normals of all triangles, shape (n_triangles, 3)."""
        return compute_face_normals(self._attributes["position"], self._index)

    def __repr__(self) -> str:
        return (
            f"TileGeometry(vertices={self.vertex_count}, "
            f"triangles={self.triangle_count}, skirt={self.has_skirt})"
        )


def build_tile_geometry(params: TileParameters) -> TileGeometry:
    """Build the geometry described by ``params``.

    Args:
        params: Validated tile parameters.

    Returns:
        TileGeometry holding the plane grid and, if enabled, the skirt.
    """
    buffers = MeshBuffers.for_parameters(params)
    build_plane(params, buffers)

    offsets = None
    if params.skirt:
        offsets = build_skirt(params, buffers)

    geometry = TileGeometry(params, buffers, offsets)
    logger.debug(f"Built {geometry!r} from {params!r}")
    return geometry


def make_tile_mesh(
    width: float = 1.0,
    height: float = 1.0,
    width_segments: int = 1,
    height_segments: int = 1,
    skirt: bool = False,
    skirt_depth: float = 10.0,
) -> TileGeometry:
    """Build a tile mesh: a subdivided X/Z plane with an optional skirt.

    Args:
        width: Extent of the tile along X.
        height: Extent of the tile along Z.
        width_segments: Number of grid cells along X.
        height_segments: Number of grid cells along Z.
        skirt: If True, hang a skirt from the four tile edges.
        skirt_depth: Downward offset of the skirt vertices.

    Returns:
        TileGeometry with ``position``, ``normal`` and ``uv`` attributes and
        a triangle index.

    Raises:
        InvalidTileParameterError: If any argument is out of range. Raised
            before any buffer is allocated.

    Example:
        >>> geometry = make_tile_mesh(2.0, 2.0, 2, 2)
        >>> geometry.vertex_count, len(geometry.index)
        (9, 24)
    """
    params = TileParameters(
        width=width,
        height=height,
        width_segments=width_segments,
        height_segments=height_segments,
        skirt=skirt,
        skirt_depth=skirt_depth,
    )
    return build_tile_geometry(params)
