"""
Procedural meshes and the asset registry.
"""

from .grid import (
    Mesh,
    MAX_VERTICES,
    generate_grid_mesh,
    grid_indices,
    compute_vertex_normals,
    create_water_mesh,
    create_terrain_mesh,
)
from .assets import AssetRegistry, AssetNotFoundError, Texture

__all__ = [
    "Mesh",
    "MAX_VERTICES",
    "generate_grid_mesh",
    "grid_indices",
    "compute_vertex_normals",
    "create_water_mesh",
    "create_terrain_mesh",
    "AssetRegistry",
    "AssetNotFoundError",
    "Texture",
]
