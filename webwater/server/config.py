# webwater/server/config.py
"""
Server configuration from environment variables and command-line flags.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Sequence
import argparse
import logging
import os

logger = logging.getLogger(__name__)


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 8080
    assets_path: str = "./assets"
    tick_interval: float = 0.016  # seconds between clock ticks (~60 Hz)
    send_timeout: float = 0.25    # seconds before a slow subscriber is dropped
    log_level: str = "INFO"

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
        """Read HOST, PORT, ASSETS_PATH, TICK_INTERVAL_MS, SEND_TIMEOUT_MS and LOG_LEVEL."""
        env = os.environ if environ is None else environ
        defaults = ServerConfig()
        return ServerConfig(
            host=env.get("HOST") or defaults.host,
            port=_env_int(env, "PORT", defaults.port),
            assets_path=env.get("ASSETS_PATH") or defaults.assets_path,
            tick_interval=_env_ms(env, "TICK_INTERVAL_MS", defaults.tick_interval),
            send_timeout=_env_ms(env, "SEND_TIMEOUT_MS", defaults.send_timeout),
            log_level=(env.get("LOG_LEVEL") or defaults.log_level).upper(),
        )


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    value = env.get(key)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring {key}={value!r}: not an integer, using {default}")
        return default


def _env_ms(env: Mapping[str, str], key: str, default: float) -> float:
    value = env.get(key)
    if not value:
        return default
    try:
        ms = float(value)
    except ValueError:
        logger.warning(f"Ignoring {key}={value!r}: not a number, using {default * 1000.0:g} ms")
        return default
    if ms <= 0:
        logger.warning(f"Ignoring {key}={value!r}: must be positive, using {default * 1000.0:g} ms")
        return default
    return ms / 1000.0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webwater",
        description="Water scene state server.",
        epilog="Environment: HOST, PORT, ASSETS_PATH, TICK_INTERVAL_MS, SEND_TIMEOUT_MS, LOG_LEVEL",
    )
    parser.add_argument("--host", help="interface to bind")
    parser.add_argument("--port", type=int, help="HTTP port")
    parser.add_argument("--assets", dest="assets_path", help="asset directory")
    parser.add_argument("--tick-ms", dest="tick_ms", type=float, help="clock tick interval in milliseconds")
    parser.add_argument("--log-level", dest="log_level",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper)
    return parser


def parse_args(argv: Optional[Sequence[str]] = None, base: Optional[ServerConfig] = None) -> ServerConfig:
    """Overlay command-line flags on `base` (environment config by default)."""
    config = base if base is not None else ServerConfig.from_env()
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.assets_path:
        overrides["assets_path"] = args.assets_path
    if args.tick_ms is not None:
        if args.tick_ms <= 0:
            parser.error("--tick-ms must be positive")
        overrides["tick_interval"] = args.tick_ms / 1000.0
    if args.log_level:
        overrides["log_level"] = args.log_level

    return replace(config, **overrides)
