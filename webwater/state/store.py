# webwater/state/store.py
"""
StateStore - sole owner of the application state.

Writers (`dispatch`) hold the write lock for exactly one reduce step.
Readers hold the read lock only long enough to copy values out.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Iterable, Optional
import logging

from ..camera.orbit import OrbitCamera
from .models import ApplicationState, Water
from .reducer import reduce
from .rwlock import ReadWriteLock
from .snapshot import StateSnapshot, take_snapshot

logger = logging.getLogger(__name__)


class StateStore:
    """Serializes every mutation of one ApplicationState."""

    def __init__(self, state: Optional[ApplicationState] = None):
        self._state = state if state is not None else ApplicationState()
        self._lock = ReadWriteLock()

    def dispatch(self, message) -> bool:
        """Apply one message atomically. Returns False if it was ignored."""
        with self._lock.write():
            return reduce(self._state, message)

    def dispatch_all(self, messages: Iterable) -> int:
        """Apply messages in order, each as its own atomic step. Returns how many applied."""
        return sum(1 for message in messages if self.dispatch(message))

    def snapshot(self) -> StateSnapshot:
        with self._lock.read():
            return take_snapshot(self._state)

    def clock(self) -> float:
        with self._lock.read():
            return self._state.clock

    def scenery(self) -> bool:
        with self._lock.read():
            return self._state.scenery

    def water(self) -> Water:
        with self._lock.read():
            return replace(self._state.water)

    def camera(self) -> OrbitCamera:
        with self._lock.read():
            return self._state.camera.copy()
