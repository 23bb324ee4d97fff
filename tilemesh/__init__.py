"""tilemesh - vertex buffers for tiled terrain map renderers.

Generates the position, normal, uv and index buffers of a rectangular map
tile: a subdivided plane in X/Z at y = 0, ready for height displacement,
optionally surrounded by a skirt that hides the seams between neighbouring
tiles.

Example:
    >>> from tilemesh import make_tile_mesh
    >>> geometry = make_tile_mesh(
    ...     width=1.0,
    ...     height=1.0,
    ...     width_segments=16,
    ...     height_segments=16,
    ...     skirt=True,
    ...     skirt_depth=10.0,
    ... )
    >>> geometry.get_attribute("position").shape
    (357, 3)
"""

from tilemesh.exceptions import (
    InvalidTileParameterError,
    MeshGenerationError,
    TileMeshError,
)
from tilemesh.mesh import (
    MeshBuffers,
    SkirtEdge,
    TileGeometry,
    TileMeshBuilder,
    TileParameters,
    make_tile_mesh,
)

__version__ = "0.1.0"

__all__ = [
    # Main API
    "make_tile_mesh",
    "TileMeshBuilder",
    "TileGeometry",
    "TileParameters",
    "MeshBuffers",
    "SkirtEdge",
    # Exceptions
    "TileMeshError",
    "InvalidTileParameterError",
    "MeshGenerationError",
]
