"""Request bodies for the state update routes."""
from __future__ import annotations
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..state.messages import (
    Message, MouseDown, MouseUp, MouseMove, Zoom,
    SetReflectivity, SetFresnel, SetWaveSpeed,
    UseReflection, UseRefraction, ShowScenery,
)


class Point(BaseModel):
    """Pointer position in pixels."""
    x: int
    y: int


class WaterUpdateRequest(BaseModel):
    """Partial water update; each field present becomes one message."""
    model_config = ConfigDict(populate_by_name=True)

    reflectivity: Optional[float] = None
    fresnel_strength: Optional[float] = Field(None, alias="fresnelStrength")
    wave_speed: Optional[float] = Field(None, alias="waveSpeed")
    use_reflection: Optional[bool] = Field(None, alias="useReflection")
    use_refraction: Optional[bool] = Field(None, alias="useRefraction")
    show_scenery: Optional[bool] = Field(None, alias="showScenery")

    def to_messages(self) -> List[Message]:
        messages: List[Message] = []
        if self.reflectivity is not None:
            messages.append(SetReflectivity(self.reflectivity))
        if self.fresnel_strength is not None:
            messages.append(SetFresnel(self.fresnel_strength))
        if self.wave_speed is not None:
            messages.append(SetWaveSpeed(self.wave_speed))
        if self.use_reflection is not None:
            messages.append(UseReflection(self.use_reflection))
        if self.use_refraction is not None:
            messages.append(UseRefraction(self.use_refraction))
        if self.show_scenery is not None:
            messages.append(ShowScenery(self.show_scenery))
        return messages


class CameraUpdateRequest(BaseModel):
    """Pointer and zoom input, applied as mouse down, up, move, zoom."""
    model_config = ConfigDict(populate_by_name=True)

    mouse_down: Optional[Point] = Field(None, alias="mouseDown")
    mouse_up: bool = Field(False, alias="mouseUp")
    mouse_move: Optional[Point] = Field(None, alias="mouseMove")
    zoom: Optional[float] = None

    def to_messages(self) -> List[Message]:
        messages: List[Message] = []
        if self.mouse_down is not None:
            messages.append(MouseDown(self.mouse_down.x, self.mouse_down.y))
        if self.mouse_up:
            messages.append(MouseUp())
        if self.mouse_move is not None:
            messages.append(MouseMove(self.mouse_move.x, self.mouse_move.y))
        if self.zoom is not None:
            messages.append(Zoom(self.zoom))
        return messages
