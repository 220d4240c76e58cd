# webwater/__init__.py
"""
webwater - server-side state and geometry for a reflective water scene.

Core components:
- math3d: Vec2/Vec3/Vec4, column-major Mat4, Quat
- mesh: procedural grid meshes and the asset registry
- OrbitCamera: yaw/pitch/distance camera around a target
- StateStore: message reducer behind a read/write lock
- WaterServer: ticker and broadcaster behind a FastAPI surface
"""

from .core import Vec2, Vec3, Vec4, Mat4, Quat, clamp
from .mesh import Mesh, AssetRegistry, generate_grid_mesh, create_water_mesh, create_terrain_mesh
from .camera import OrbitCamera
from .state import ApplicationState, StateStore, StateSnapshot, reduce

__version__ = "0.1.0"

__all__ = [
    'Vec2', 'Vec3', 'Vec4', 'Mat4', 'Quat', 'clamp',
    'Mesh', 'AssetRegistry', 'generate_grid_mesh', 'create_water_mesh', 'create_terrain_mesh',
    'OrbitCamera',
    'ApplicationState', 'StateStore', 'StateSnapshot', 'reduce',
]
