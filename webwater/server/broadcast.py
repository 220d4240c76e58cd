# webwater/server/broadcast.py
"""
Broadcaster - pushes state payloads to connected subscribers.

A subscriber is anything with `async send_json(payload)` (a FastAPI
WebSocket, or a test double). A send that fails or exceeds the timeout
removes that subscriber; nothing is retried, so one slow client cannot
hold up the tick loop.
"""

from __future__ import annotations
from typing import Any, List, Protocol
import asyncio
import logging

logger = logging.getLogger(__name__)


class Subscriber(Protocol):
    async def send_json(self, data: Any) -> None: ...


class Broadcaster:

    def __init__(self, send_timeout: float = 0.25):
        self.send_timeout = send_timeout
        self._subscribers: List[Subscriber] = []

    def subscribe(self, subscriber: Subscriber):
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)
            logger.info(f"Subscriber connected ({len(self._subscribers)} total)")

    def unsubscribe(self, subscriber: Subscriber):
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)
            logger.info(f"Subscriber disconnected ({len(self._subscribers)} total)")

    def __len__(self) -> int:
        return len(self._subscribers)

    async def send(self, subscriber: Subscriber, payload: dict) -> bool:
        """Send to one subscriber; drop it on failure. Returns True if delivered."""
        try:
            await asyncio.wait_for(subscriber.send_json(payload), timeout=self.send_timeout)
            return True
        except Exception as e:
            logger.warning(f"Dropping subscriber after failed send: {e!r}")
            self.unsubscribe(subscriber)
            await self._close_quietly(subscriber)
            return False

    async def broadcast(self, payload: dict) -> int:
        """Send `payload` to every subscriber concurrently. Returns the delivered count."""
        subscribers = list(self._subscribers)
        if not subscribers:
            return 0
        results = await asyncio.gather(*(self.send(s, payload) for s in subscribers))
        return sum(results)

    async def _close_quietly(self, subscriber: Subscriber):
        close = getattr(subscriber, "close", None)
        if close is None:
            return
        try:
            # a stalled peer cannot flush its close frame either
            await asyncio.wait_for(close(), timeout=self.send_timeout)
        except Exception as e:
            logger.debug(f"Error closing dropped subscriber: {e!r}")
