# webwater/state/messages.py
"""
State messages.

The closed set of inputs the reducer understands. Each message is an
immutable value; transports build them from whatever they receive.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class AdvanceClock:
    """Elapsed time since the previous tick, in milliseconds."""
    delta_time: float


@dataclass(frozen=True)
class MouseDown:
    x: int
    y: int


@dataclass(frozen=True)
class MouseUp:
    pass


@dataclass(frozen=True)
class MouseMove:
    x: int
    y: int


@dataclass(frozen=True)
class Zoom:
    delta: float


@dataclass(frozen=True)
class SetReflectivity:
    value: float


@dataclass(frozen=True)
class SetFresnel:
    value: float


@dataclass(frozen=True)
class SetWaveSpeed:
    value: float


@dataclass(frozen=True)
class UseReflection:
    value: bool


@dataclass(frozen=True)
class UseRefraction:
    value: bool


@dataclass(frozen=True)
class ShowScenery:
    value: bool


Message = Union[
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
]
