# webwater/state/reducer.py
"""
Reducer - applies one message to the application state.

Pure field mutation plus the camera's O(1) trig; no I/O, so it is safe to
run under the store's write lock.
"""

from __future__ import annotations
import logging

from .messages import (
    AdvanceClock, MouseDown, MouseUp, MouseMove, Zoom,
    SetReflectivity, SetFresnel, SetWaveSpeed,
    UseReflection, UseRefraction, ShowScenery,
)
from .models import ApplicationState

logger = logging.getLogger(__name__)

# Pixels of mouse drag per radian of orbit.
DRAG_PIXELS_PER_RADIAN = 50.0


def reduce(state: ApplicationState, message) -> bool:
    """
    Apply `message` to `state` in place.

    Returns True when the message was recognized. Anything outside the
    message set is logged and ignored rather than raised, so older servers
    tolerate newer clients.
    """
    if isinstance(message, AdvanceClock):
        state.clock += message.delta_time

    elif isinstance(message, MouseDown):
        state.mouse.pressed = True
        state.mouse.x, state.mouse.y = message.x, message.y

    elif isinstance(message, MouseUp):
        state.mouse.pressed = False

    elif isinstance(message, MouseMove):
        if not state.mouse.pressed:
            return True
        x_delta = state.mouse.x - message.x
        y_delta = message.y - state.mouse.y
        state.camera.orbit_left_right(x_delta / DRAG_PIXELS_PER_RADIAN)
        state.camera.orbit_up_down(y_delta / DRAG_PIXELS_PER_RADIAN)
        state.mouse.x, state.mouse.y = message.x, message.y

    elif isinstance(message, Zoom):
        state.camera.zoom(message.delta)

    elif isinstance(message, SetReflectivity):
        state.water.reflectivity = message.value

    elif isinstance(message, SetFresnel):
        state.water.fresnel_strength = message.value

    elif isinstance(message, SetWaveSpeed):
        state.water.wave_speed = message.value

    elif isinstance(message, UseReflection):
        state.water.use_reflection = message.value

    elif isinstance(message, UseRefraction):
        state.water.use_refraction = message.value

    elif isinstance(message, ShowScenery):
        state.scenery = message.value

    else:
        logger.debug(f"Ignoring unrecognized message: {message!r}")
        return False

    return True
