"""Tile mesh parameters and grid layout."""

from __future__ import annotations

import math
from numbers import Integral, Real

from tilemesh.exceptions import InvalidTileParameterError


def _check_extent(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidTileParameterError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidTileParameterError(f"{name} must be positive and finite, got {value}")
    return value


def _check_segments(name: str, value) -> int:
    if isinstance(value, bool):
        raise InvalidTileParameterError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, Integral):
        value = int(value)
    elif isinstance(value, Real) and float(value).is_integer():
        value = int(value)
    else:
        raise InvalidTileParameterError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidTileParameterError(f"{name} must be at least 1, got {value}")
    return value


def _check_depth(value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidTileParameterError(
            f"skirt_depth must be a real number, got {value!r}"
        )
    value = float(value)
    if not math.isfinite(value):
        raise InvalidTileParameterError(f"skirt_depth must be finite, got {value}")
    return value


class TileParameters:
    """Validated configuration of a tile mesh.

    Holds the tile extent in the X/Z plane, the number of grid subdivisions
    along each axis and the optional skirt. Also provides the grid layout
    arithmetic shared by the plane and skirt builders.

    Args:
        width: Extent of the tile along X.
        height: Extent of the tile along Z.
        width_segments: Number of grid cells along X.
        height_segments: Number of grid cells along Z.
        skirt: If True, the mesh gets a skirt around its four edges.
        skirt_depth: Downward offset of the skirt vertices. Skirt vertices are
            placed at ``y = -skirt_depth``.

    Raises:
        InvalidTileParameterError: If any value is out of range.

    Example:
        >>> params = TileParameters(width=2.0, height=2.0,
        ...                         width_segments=2, height_segments=2)
        >>> params.grid_vertex_count
        9
        >>> params.index(1, 1)
        4
    """

    def __init__(
        self,
        width: float = 1.0,
        height: float = 1.0,
        width_segments: int = 1,
        height_segments: int = 1,
        skirt: bool = False,
        skirt_depth: float = 10.0,
    ):
        self._width = _check_extent("width", width)
        self._height = _check_extent("height", height)
        self._width_segments = _check_segments("width_segments", width_segments)
        self._height_segments = _check_segments("height_segments", height_segments)
        self._skirt = bool(skirt)
        self._skirt_depth = _check_depth(skirt_depth)

    @classmethod
    def square(
        cls,
        size: float,
        segments: int,
        skirt: bool = False,
        skirt_depth: float = 10.0,
    ) -> TileParameters:
        """Create parameters for a square tile.

        Args:
            size: Extent of the tile along both X and Z.
            segments: Number of grid cells along both axes.
            skirt: If True, the mesh gets a skirt.
            skirt_depth: Downward offset of the skirt vertices.

        Returns:
            TileParameters with equal extents and segment counts.
        """
        return cls(size, size, segments, segments, skirt, skirt_depth)

    def replace(self, **changes) -> TileParameters:
        """Return a copy with the given fields replaced."""
        values = self.as_dict()
        values.update(changes)
        return TileParameters(**values)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def width_segments(self) -> int:
        return self._width_segments

    @property
    def height_segments(self) -> int:
        return self._height_segments

    @property
    def skirt(self) -> bool:
        return self._skirt

    @property
    def skirt_depth(self) -> float:
        return self._skirt_depth

    @property
    def width_half(self) -> float:
        return self._width / 2

    @property
    def height_half(self) -> float:
        return self._height / 2

    @property
    def grid_x(self) -> int:
        """Number of grid vertices along X."""
        return self._width_segments + 1

    @property
    def grid_z(self) -> int:
        """Number of grid vertices along Z."""
        return self._height_segments + 1

    @property
    def segment_width(self) -> float:
        return self._width / self._width_segments

    @property
    def segment_height(self) -> float:
        return self._height / self._height_segments

    @property
    def grid_vertex_count(self) -> int:
        return self.grid_x * self.grid_z

    @property
    def grid_index_count(self) -> int:
        return 6 * self._width_segments * self._height_segments

    @property
    def skirt_vertex_count(self) -> int:
        """Vertices added by the four skirt strips (zero without skirt)."""
        if not self._skirt:
            return 0
        return 2 * self.grid_x + 2 * self.grid_z

    @property
    def skirt_index_count(self) -> int:
        if not self._skirt:
            return 0
        return 12 * (self._width_segments + self._height_segments)

    @property
    def vertex_count(self) -> int:
        """Final vertex count of the mesh."""
        return self.grid_vertex_count + self.skirt_vertex_count

    @property
    def index_count(self) -> int:
        """Final index count of the mesh."""
        return self.grid_index_count + self.skirt_index_count

    def index(self, ix, iz):
        """Return the flat vertex index of grid position (ix, iz).

        Works element-wise on numpy integer arrays as well as on ints.
        """
        return ix + self.grid_x * iz

    def x_at(self, ix):
        """X coordinate of grid column ``ix``."""
        return ix * self.segment_width - self.width_half

    def z_at(self, iz):
        """Z coordinate of grid row ``iz``."""
        return iz * self.segment_height - self.height_half

    def as_dict(self) -> dict:
        return {
            "width": self._width,
            "height": self._height,
            "width_segments": self._width_segments,
            "height_segments": self._height_segments,
            "skirt": self._skirt,
            "skirt_depth": self._skirt_depth,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, TileParameters):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self) -> int:
        return hash(tuple(self.as_dict().values()))

    def __repr__(self) -> str:
        return (
            f"TileParameters(width={self._width}, height={self._height}, "
            f"segments=({self._width_segments}, {self._height_segments}), "
            f"skirt={self._skirt}, skirt_depth={self._skirt_depth})"
        )
