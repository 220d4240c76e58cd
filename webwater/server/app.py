# webwater/server/app.py
"""
WaterServer - wires the asset registry, state store, broadcaster and ticker.

Holds no behaviour of its own beyond startup and shutdown; the HTTP layer
(`api.create_app`) reads everything it needs from here.
"""

from __future__ import annotations
from typing import Optional
import logging

from ..mesh.assets import AssetRegistry
from ..state.store import StateStore
from .broadcast import Broadcaster
from .config import ServerConfig
from .ticker import StateTicker

logger = logging.getLogger(__name__)


class WaterServer:

    def __init__(self, config: Optional[ServerConfig] = None, store: Optional[StateStore] = None):
        self.config = config or ServerConfig()
        self.assets = AssetRegistry(self.config.assets_path)
        self.assets.initialize()
        self.store = store or StateStore()
        self.broadcaster = Broadcaster(send_timeout=self.config.send_timeout)
        self.ticker = StateTicker(self.store, self.broadcaster, interval=self.config.tick_interval)

    async def startup(self):
        self.ticker.start()
        logger.info(f"Water server ready on {self.config.host}:{self.config.port}")

    async def shutdown(self):
        await self.ticker.stop()
        logger.info("Water server stopped")
