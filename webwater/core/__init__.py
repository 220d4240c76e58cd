# webwater/core/__init__.py
"""
Core math for the water scene.
"""

from .math3d import (
    Vec2, Vec3, Vec4,
    Mat4,
    Quat,
    clamp,
    PIVOT_EPSILON,
    SLERP_LINEAR_THRESHOLD,
)

__all__ = [
    'Vec2', 'Vec3', 'Vec4',
    'Mat4',
    'Quat',
    'clamp',
    'PIVOT_EPSILON',
    'SLERP_LINEAR_THRESHOLD',
]
