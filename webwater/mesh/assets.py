# webwater/mesh/assets.py
"""
Asset registry: named meshes and texture metadata.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Union
import logging

from .grid import Mesh, create_water_mesh, create_terrain_mesh

logger = logging.getLogger(__name__)


class AssetNotFoundError(KeyError):
    """Raised when a mesh or texture name is not registered."""

    def __init__(self, kind: str, name: str):
        super().__init__(name)
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        return f"{self.kind} '{self.name}' not found"


@dataclass(frozen=True)
class Texture:
    """Texture metadata; the image itself stays on disk."""
    name: str
    width: int
    height: int
    format: str
    file_path: str

    def to_dict(self) -> dict:
        d = asdict(self)
        d['filePath'] = d.pop('file_path')
        return d


class AssetRegistry:
    """Holds generated meshes and registered textures by name."""

    def __init__(self, base_path: Union[str, Path] = "assets"):
        self.base_path = Path(base_path)
        self._meshes: Dict[str, Mesh] = {}
        self._textures: Dict[str, Texture] = {}

    def initialize(self):
        """Create the default water plane and terrain and register the scene textures."""
        self.add_mesh(create_water_mesh(20.0, 64))
        self.add_mesh(create_terrain_mesh(50.0, 32, 5.0))

        self.register_texture("dudvmap", "dudvmap.png", 512, 512, "rgba")
        self.register_texture("normalmap", "normalmap.png", 512, 512, "rgba")
        self.register_texture("stone", "stone-texture.png", 512, 512, "rgba")

        logger.info(f"Assets ready: meshes={self.list_meshes()} textures={self.list_textures()}")

    # -------------------------------------------------------------------------
    # Meshes
    # -------------------------------------------------------------------------

    def add_mesh(self, mesh: Mesh):
        self._meshes[mesh.name] = mesh
        logger.debug(f"Mesh '{mesh.name}': {mesh.vertex_count} vertices, {mesh.triangle_count} triangles")

    def get_mesh(self, name: str) -> Mesh:
        try:
            return self._meshes[name]
        except KeyError:
            raise AssetNotFoundError("mesh", name) from None

    def list_meshes(self) -> List[str]:
        return sorted(self._meshes)

    # -------------------------------------------------------------------------
    # Textures
    # -------------------------------------------------------------------------

    def register_texture(self, name: str, file_path: str, width: int, height: int, fmt: str):
        self._textures[name] = Texture(
            name=name,
            width=width,
            height=height,
            format=fmt,
            file_path=file_path,
        )

    def get_texture(self, name: str) -> Texture:
        try:
            return self._textures[name]
        except KeyError:
            raise AssetNotFoundError("texture", name) from None

    def texture_path(self, name: str) -> Path:
        return self.base_path / self.get_texture(name).file_path

    def list_textures(self) -> List[str]:
        return sorted(self._textures)
