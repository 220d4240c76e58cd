"""
Network side of the water scene: config, broadcast, ticker and HTTP/WS routes.
"""

from .config import ServerConfig, build_parser, parse_args
from .broadcast import Broadcaster, Subscriber
from .ticker import StateTicker
from .app import WaterServer
from .api import create_app

__all__ = [
    "ServerConfig",
    "build_parser",
    "parse_args",
    "Broadcaster",
    "Subscriber",
    "StateTicker",
    "WaterServer",
    "create_app",
]
