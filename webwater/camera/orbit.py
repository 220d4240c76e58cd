# webwater/camera/orbit.py
"""
OrbitCamera - yaw/pitch/distance camera circling a target.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
import math

from ..core.math3d import Vec3, Mat4, clamp


@dataclass
class OrbitCamera:
    """
    Orbit camera driven by accumulated mouse and wheel input.

    Position is derived from (distance, yaw, pitch) on every read and never
    stored, so the mutators only touch the three angles/distance.
    """

    target: Vec3 = field(default_factory=Vec3.zero)
    up: Vec3 = field(default_factory=Vec3.up)
    distance: float = 15.0
    yaw: float = 0.0
    pitch: float = 0.3

    min_distance: float = 5.0
    max_distance: float = 50.0
    min_pitch: float = -1.5
    max_pitch: float = 1.5

    fov_y: float = math.pi / 4.0
    near: float = 0.1
    far: float = 1000.0

    def orbit_left_right(self, delta: float):
        # yaw is periodic, no wrap needed
        self.yaw += delta

    def orbit_up_down(self, delta: float):
        self.pitch = clamp(self.pitch + delta, self.min_pitch, self.max_pitch)

    def zoom(self, delta: float):
        self.distance = clamp(self.distance + delta, self.min_distance, self.max_distance)

    def offset(self) -> Vec3:
        """Eye position relative to the target."""
        cos_pitch = math.cos(self.pitch)
        return Vec3(
            self.distance * cos_pitch * math.sin(self.yaw),
            self.distance * math.sin(self.pitch),
            self.distance * cos_pitch * math.cos(self.yaw),
        )

    def position(self) -> Vec3:
        return self.target + self.offset()

    def view_matrix(self) -> Mat4:
        return Mat4.look_at(self.position(), self.target, self.up)

    def reflection_position(self, water_height: float = 0.0) -> Vec3:
        """Eye mirrored in the horizontal plane y = water_height."""
        pos = self.position()
        return Vec3(pos.x, 2.0 * water_height - pos.y, pos.z)

    def reflection_view_matrix(self, water_height: float = 0.0) -> Mat4:
        """View for the reflection pass: mirrored eye looking at the mirrored target."""
        target = Vec3(self.target.x, 2.0 * water_height - self.target.y, self.target.z)
        return Mat4.look_at(self.reflection_position(water_height), target, self.up)

    def projection_matrix(self, aspect: float) -> Mat4:
        return Mat4.perspective(self.fov_y, aspect, self.near, self.far)

    def copy(self) -> OrbitCamera:
        return replace(self)
