"""Tile mesh generation."""

from tilemesh.mesh.buffers import MeshBuffers
from tilemesh.mesh.builder import TileMeshBuilder
from tilemesh.mesh.geometry import TileGeometry, build_tile_geometry, make_tile_mesh
from tilemesh.mesh.parameters import TileParameters
from tilemesh.mesh.plane import build_plane
from tilemesh.mesh.skirt import SkirtEdge, build_skirt
from tilemesh.mesh.validation import compute_face_normals, validate_mesh_buffers

__all__ = [
    "MeshBuffers",
    "TileMeshBuilder",
    "TileGeometry",
    "TileParameters",
    "SkirtEdge",
    "build_plane",
    "build_skirt",
    "build_tile_geometry",
    "make_tile_mesh",
    "compute_face_normals",
    "validate_mesh_buffers",
]
