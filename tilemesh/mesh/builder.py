"""High-level TileMeshBuilder API for tile mesh generation."""

from __future__ import annotations

from tilemesh.exceptions import MeshGenerationError
from tilemesh.mesh.geometry import TileGeometry, build_tile_geometry
from tilemesh.mesh.parameters import TileParameters
from tilemesh.mesh.validation import validate_mesh_buffers


class TileMeshBuilder:
    """Fluent API for building tile meshes.

    Starts from the default tile (1 x 1, one cell, no skirt). Every setter
    validates its arguments immediately, so an invalid configuration fails
    before any geometry is built.

    Example:
        >>> from tilemesh import TileMeshBuilder
        >>> geometry = (
        ...     TileMeshBuilder()
        ...     .set_size(256.0, 256.0)
        ...     .set_segments(16, 16)
        ...     .set_skirt(depth=20.0)
        ...     .build()
        ... )
    """

    def __init__(self):
        self._parameters = TileParameters()
        self._geometry: TileGeometry | None = None

    @property
    def parameters(self) -> TileParameters:
        """Return the current tile parameters."""
        return self._parameters

    def set_size(self, width: float, height: float) -> TileMeshBuilder:
        """Set tile extent along X (width) and Z (height).

        Returns:
            Self for method chaining.
        """
        self._parameters = self._parameters.replace(width=width, height=height)
        return self

    def set_segments(
        self,
        width_segments: int,
        height_segments: int | None = None,
    ) -> TileMeshBuilder:
        """Set number of grid cells along X and Z.

        Args:
            width_segments: Cells along X.
            height_segments: Cells along Z. Defaults to ``width_segments``.

        Returns:
            Self for method chaining.
        """
        if height_segments is None:
            height_segments = width_segments
        self._parameters = self._parameters.replace(
            width_segments=width_segments,
            height_segments=height_segments,
        )
        return self

    def set_skirt(self, depth: float = 10.0, enabled: bool = True) -> TileMeshBuilder:
        """Configure the skirt.

        Args:
            depth: Downward offset of the skirt vertices.
            enabled: Set to False to build the plane only.

        Returns:
            Self for method chaining.
        """
        self._parameters = self._parameters.replace(skirt=enabled, skirt_depth=depth)
        return self

    def set_parameters(self, parameters: TileParameters) -> TileMeshBuilder:
        """Set all tile parameters directly.

        Returns:
            Self for method chaining.
        """
        self._parameters = parameters
        return self

    def build(self, validate: bool = True) -> TileGeometry:
        """Build the tile geometry.

        Args:
            validate: If True, check the finished buffers (matching attribute
                lengths, whole triangles, indices in range, finite values,
                uvs in [0, 1]).

        Returns:
            TileGeometry object.

        Raises:
            MeshGenerationError: If validation fails.
        """
        geometry = build_tile_geometry(self._parameters)

        if validate:
            is_valid, message = validate_mesh_buffers(
                geometry.get_attribute("position"),
                geometry.get_attribute("normal"),
                geometry.get_attribute("uv"),
                geometry.index,
            )
            if not is_valid:
                raise MeshGenerationError(f"Invalid tile mesh: {message}")

        self._geometry = geometry
        return geometry

    def get_geometry(self) -> TileGeometry | None:
        """Return the last built geometry (available after build)."""
        return self._geometry

    def get_mesh_info(self) -> dict:
        """Return information about the configured and built mesh.

        Returns:
            Dictionary with tile parameters and, after build, mesh statistics.
        """
        info = self._parameters.as_dict()
        info["expected_vertices"] = self._parameters.vertex_count
        info["expected_indices"] = self._parameters.index_count

        if self._geometry is not None:
            info["n_vertices"] = self._geometry.vertex_count
            info["n_triangles"] = self._geometry.triangle_count
            min_corner, max_corner = self._geometry.bounding_box()
            info["bounds"] = (tuple(min_corner.tolist()), tuple(max_corner.tolist()))

        return info
