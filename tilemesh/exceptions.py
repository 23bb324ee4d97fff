"""Custom exceptions for the tilemesh package."""


class TileMeshError(Exception):
    """Base exception for tilemesh package."""

    pass


class InvalidTileParameterError(TileMeshError, ValueError):
    """Invalid tile dimensions, segment counts or skirt depth."""

    pass


class MeshGenerationError(TileMeshError):
    """Mesh generation failed."""

    pass
