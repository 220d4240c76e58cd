# webwater/state/models.py
"""
Application state values: mouse, water settings and the aggregate.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..camera.orbit import OrbitCamera


@dataclass
class Mouse:
    """Last pointer position in pixels and whether a button is held."""
    x: int = 0
    y: int = 0
    pressed: bool = False


@dataclass
class Water:
    """Water shading parameters, passed through to the renderer as uniforms."""
    reflectivity: float = 0.6
    fresnel_strength: float = 2.0
    wave_speed: float = 0.03
    use_reflection: bool = True
    use_refraction: bool = True

    def dudv_offset(self, clock_ms: float) -> float:
        """Distortion-map scroll offset at the given clock time."""
        return (clock_ms / 1000.0) * self.wave_speed

    def to_dict(self) -> dict:
        return {
            'reflectivity': self.reflectivity,
            'fresnelStrength': self.fresnel_strength,
            'waveSpeed': self.wave_speed,
            'useReflection': self.use_reflection,
            'useRefraction': self.use_refraction,
        }


@dataclass
class ApplicationState:
    """Everything the reducer mutates. Owned by a single StateStore."""
    clock: float = 0.0  # milliseconds
    camera: OrbitCamera = field(default_factory=OrbitCamera)
    mouse: Mouse = field(default_factory=Mouse)
    water: Water = field(default_factory=Water)
    scenery: bool = True
