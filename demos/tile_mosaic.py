"""
Tile Mosaic Demo

This script demonstrates using tilemesh to build the meshes of a small
mosaic of map tiles, as a quadtree terrain renderer would at two levels of
detail, and to save their buffers for inspection.

Usage:
    python tile_mosaic.py

The script will:
1. Build a coarse tile and a fine tile of the same footprint
2. Hang skirts below both so the seam between them stays covered
3. Check every plane triangle faces up
4. Save the buffers of both tiles to a .npz archive
"""

import logging
from pathlib import Path

import numpy as np

from tilemesh import SkirtEdge, TileMeshBuilder


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Tile parameters (map units)
    tile_size = 256.0
    skirt_depth = 20.0

    tiles = {}
    for name, segments in (("coarse", 8), ("fine", 32)):
        print(f"Building {name} tile ({segments}x{segments} segments)...")

        builder = (
            TileMeshBuilder()
            .set_size(tile_size, tile_size)
            .set_segments(segments)
            .set_skirt(depth=skirt_depth)
        )
        geometry = builder.build()
        tiles[name] = geometry

        info = builder.get_mesh_info()
        print(f"  Vertices: {info['n_vertices']}")
        print(f"  Triangles: {info['n_triangles']}")
        print(f"  Bounds: {info['bounds']}")
        for edge in SkirtEdge:
            print(f"  Skirt {edge.value} starts at vertex {geometry.skirt_offsets[edge]}")

        n_plane = segments * segments * 2
        face_normals = geometry.compute_face_normals()[:n_plane]
        print(f"  Plane faces pointing up: {np.all(face_normals[:, 1] > 0)}")

    # Save buffers for later use
    output_path = Path(__file__).parent / "tile_mosaic.npz"
    arrays = {}
    for name, geometry in tiles.items():
        for attribute, values in geometry.attributes.items():
            arrays[f"{name}_{attribute}"] = values
        arrays[f"{name}_index"] = geometry.index
    np.savez(output_path, **arrays)
    print(f"\nBuffers saved to: {output_path}")

    return tiles


if __name__ == "__main__":
    main()
