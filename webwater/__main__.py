"""Run the water server: `python -m webwater` or the `webwater` script."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import uvicorn

from .server.api import create_app
from .server.app import WaterServer
from .server.config import parse_args


def main(argv: Optional[Sequence[str]] = None):
    config = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(WaterServer(config))
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
