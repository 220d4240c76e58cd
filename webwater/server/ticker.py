# webwater/server/ticker.py
"""
StateTicker: periodic clock advance and state broadcast.

Runs on a fixed interval independent of any client's frame rate. Each tick
advances the clock by the measured wall time, snapshots the state, and
pushes the snapshot to every subscriber.
"""

from __future__ import annotations
from typing import Callable, Optional
import asyncio
import logging
import time

from ..state.messages import AdvanceClock
from ..state.store import StateStore
from .broadcast import Broadcaster

logger = logging.getLogger(__name__)


class StateTicker:

    def __init__(
        self,
        store: StateStore,
        broadcaster: Broadcaster,
        interval: float = 0.016,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.store = store
        self.broadcaster = broadcaster
        self.interval = interval
        self._clock = clock
        self._last: Optional[float] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self):
        """Start the tick loop on the running event loop."""
        if self.running:
            return
        self._last = self._clock()
        self._task = asyncio.get_running_loop().create_task(self._run(), name="state-ticker")
        logger.info(f"Ticker started ({self.interval * 1000.0:g} ms interval)")

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Ticker stopped")

    async def tick(self) -> int:
        """One step: advance the clock, then broadcast. Returns subscribers reached."""
        now = self._clock()
        if self._last is None:
            self._last = now
        elapsed_ms = (now - self._last) * 1000.0
        self._last = now

        self.store.dispatch(AdvanceClock(elapsed_ms))

        if not len(self.broadcaster):
            return 0
        # snapshot is taken and released before any send
        payload = self.store.snapshot().to_message()
        return await self.broadcaster.broadcast(payload)

    async def _run(self):
        while True:
            try:
                await self.tick()
            except Exception as e:
                logger.error(f"Tick failed: {e!r}")
            await asyncio.sleep(self.interval)
