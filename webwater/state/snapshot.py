# webwater/state/snapshot.py
"""
State snapshots.

Readers copy what they need out of the live state under the read lock and
serialize afterwards. A snapshot shares nothing mutable with the state it
came from, so it can be encoded and sent with no lock held.
"""

from __future__ import annotations
from dataclasses import dataclass, replace

from ..core.math3d import Vec3, Mat4
from .models import ApplicationState, Water


@dataclass(frozen=True)
class CameraSnapshot:
    """Derived camera values at snapshot time."""
    position: Vec3
    view_matrix: Mat4
    distance: float
    yaw: float
    pitch: float

    def to_dict(self) -> dict:
        return {
            'position': list(self.position.to_tuple()),
            'viewMatrix': self.view_matrix.to_list(),
        }


@dataclass(frozen=True)
class StateSnapshot:
    """
    Immutable copy of everything a client renders from.

    `water` is a private copy; mutating it does not reach the live state.
    """
    clock: float
    scenery: bool
    camera: CameraSnapshot
    water: Water

    def to_dict(self) -> dict:
        return {
            'clock': self.clock,
            'scenery': self.scenery,
            'camera': self.camera.to_dict(),
            'water': self.water.to_dict(),
        }

    def to_message(self) -> dict:
        """Payload pushed to subscribers."""
        return {'type': 'state_update', **self.to_dict()}


def take_snapshot(state: ApplicationState) -> StateSnapshot:
    """Copy values out of `state`. Caller holds at least the read lock."""
    camera = state.camera
    return StateSnapshot(
        clock=state.clock,
        scenery=state.scenery,
        camera=CameraSnapshot(
            position=camera.position(),
            view_matrix=camera.view_matrix(),
            distance=camera.distance,
            yaw=camera.yaw,
            pitch=camera.pitch,
        ),
        water=replace(state.water),
    )
