"""
Application state: messages, reducer and the locked store.
"""

from .messages import (
    Message,
    AdvanceClock,
    MouseDown,
    MouseUp,
    MouseMove,
    Zoom,
    SetReflectivity,
    SetFresnel,
    SetWaveSpeed,
    UseReflection,
    UseRefraction,
    ShowScenery,
)
from .models import ApplicationState, Mouse, Water
from .reducer import reduce, DRAG_PIXELS_PER_RADIAN
from .rwlock import ReadWriteLock
from .snapshot import CameraSnapshot, StateSnapshot, take_snapshot
from .store import StateStore

__all__ = [
    "Message",
    "AdvanceClock",
    "MouseDown",
    "MouseUp",
    "MouseMove",
    "Zoom",
    "SetReflectivity",
    "SetFresnel",
    "SetWaveSpeed",
    "UseReflection",
    "UseRefraction",
    "ShowScenery",
    "ApplicationState",
    "Mouse",
    "Water",
    "reduce",
    "DRAG_PIXELS_PER_RADIAN",
    "ReadWriteLock",
    "CameraSnapshot",
    "StateSnapshot",
    "take_snapshot",
    "StateStore",
]
