"""
Cameras.
"""

from .orbit import OrbitCamera

__all__ = ["OrbitCamera"]
