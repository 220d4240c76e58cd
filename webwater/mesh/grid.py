# webwater/mesh/grid.py
"""
Procedural grid meshes.

A grid spans a square of side `size` centered on the origin in the XZ plane,
with (segments + 1)^2 vertices and two triangles per cell. Index winding is
(topLeft, bottomLeft, topRight), (topRight, bottomLeft, bottomRight); the
renderer's back-face culling depends on it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

# uint16 indices address at most this many vertices.
MAX_VERTICES = 65536

HeightFn = Callable[[int, int], float]


@dataclass
class Mesh:
    """
    Flat vertex buffers ready for upload.

    vertices/normals are xyz triples, tex_coords uv pairs, indices triangle
    triples, all one-dimensional numpy arrays.
    """
    name: str
    vertices: np.ndarray    # float32, 3 * vertex_count
    normals: np.ndarray     # float32, 3 * vertex_count
    tex_coords: np.ndarray  # float32, 2 * vertex_count
    indices: np.ndarray     # uint16, 3 * triangle_count
    vertex_count: int
    triangle_count: int

    def __post_init__(self):
        if len(self.vertices) != 3 * self.vertex_count:
            raise ValueError(f"{self.name}: {len(self.vertices)} vertex floats for {self.vertex_count} vertices")
        if len(self.normals) != 3 * self.vertex_count:
            raise ValueError(f"{self.name}: {len(self.normals)} normal floats for {self.vertex_count} vertices")
        if len(self.tex_coords) != 2 * self.vertex_count:
            raise ValueError(f"{self.name}: {len(self.tex_coords)} uv floats for {self.vertex_count} vertices")
        if len(self.indices) != 3 * self.triangle_count:
            raise ValueError(f"{self.name}: {len(self.indices)} indices for {self.triangle_count} triangles")

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'vertices': self.vertices.tolist(),
            'normals': self.normals.tolist(),
            'texCoords': self.tex_coords.tolist(),
            'indices': self.indices.tolist(),
            'vertexCount': self.vertex_count,
            'triangleCount': self.triangle_count,
        }


def grid_indices(segments: int) -> np.ndarray:
    """Triangle indices for a segments x segments grid, row-major vertices."""
    row = segments + 1
    i, j = np.meshgrid(np.arange(segments), np.arange(segments), indexing='ij')
    top_left = (i * row + j).ravel()
    top_right = top_left + 1
    bottom_left = ((i + 1) * row + j).ravel()
    bottom_right = bottom_left + 1

    tris = np.stack([
        top_left, bottom_left, top_right,
        top_right, bottom_left, bottom_right,
    ], axis=1)
    return tris.ravel().astype(np.uint16)


def _normalize_rows(v: np.ndarray) -> np.ndarray:
    lengths = np.linalg.norm(v, axis=1, keepdims=True)
    # zero-length rows stay zero
    safe = np.where(lengths == 0.0, 1.0, lengths)
    return v / safe


def compute_vertex_normals(vertices: np.ndarray, indices: np.ndarray) -> np.ndarray:
    """
    Smooth vertex normals from triangle faces.

    Each triangle's unit face normal normalize((v2 - v1) x (v3 - v1)) is added
    to its three vertices with equal weight (no area or angle weighting),
    then every sum is normalized. Vertices no triangle touches get (0, 0, 0).
    """
    points = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
    tris = np.asarray(indices, dtype=np.int64).reshape(-1, 3)

    v1 = points[tris[:, 0]]
    v2 = points[tris[:, 1]]
    v3 = points[tris[:, 2]]
    face_normals = _normalize_rows(np.cross(v2 - v1, v3 - v1))

    accum = np.zeros_like(points)
    for corner in range(3):
        np.add.at(accum, tris[:, corner], face_normals)

    return _normalize_rows(accum).astype(np.float32).ravel()


def generate_grid_mesh(
    size: float,
    segments: int,
    height_fn: Optional[HeightFn] = None,
    name: str = "grid",
) -> Mesh:
    """
    Build a regular grid mesh.

    Vertex (i, j) sits at x = j*step - size/2, z = i*step - size/2 with
    y = height_fn(i, j), or 0 when no height function is given. Flat grids
    get straight-up normals; height fields get `compute_vertex_normals`.
    """
    if segments < 1:
        raise ValueError(f"segments must be >= 1, got {segments}")

    row = segments + 1
    vertex_count = row * row
    if vertex_count > MAX_VERTICES:
        raise ValueError(f"{vertex_count} vertices exceed the uint16 index range")
    triangle_count = 2 * segments * segments

    step = size / segments
    half_size = size * 0.5

    i, j = np.meshgrid(np.arange(row), np.arange(row), indexing='ij')
    x = j * step - half_size
    z = i * step - half_size
    if height_fn is None:
        y = np.zeros_like(x, dtype=np.float64)
    else:
        y = np.array(
            [[height_fn(ii, jj) for jj in range(row)] for ii in range(row)],
            dtype=np.float64,
        )

    vertices = np.stack([x, y, z], axis=-1).astype(np.float32).ravel()
    tex_coords = np.stack([j / segments, i / segments], axis=-1).astype(np.float32).ravel()
    indices = grid_indices(segments)

    if height_fn is None:
        normals = np.tile(np.array([0.0, 1.0, 0.0], dtype=np.float32), vertex_count)
    else:
        normals = compute_vertex_normals(vertices, indices)

    return Mesh(
        name=name,
        vertices=vertices,
        normals=normals,
        tex_coords=tex_coords,
        indices=indices,
        vertex_count=vertex_count,
        triangle_count=triangle_count,
    )


def create_water_mesh(size: float = 20.0, segments: int = 64) -> Mesh:
    """Flat water plane at y = 0."""
    return generate_grid_mesh(size, segments, name="water_plane")


def create_terrain_mesh(size: float = 50.0, segments: int = 32, height_scale: float = 5.0) -> Mesh:
    """Terrain sloping down from one corner so it sits below the water."""
    def height(i: int, j: int) -> float:
        return -height_scale * ((i + j) / (segments * 2))

    return generate_grid_mesh(size, segments, height_fn=height, name="terrain")
