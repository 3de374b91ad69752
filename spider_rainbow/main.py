"""Run the Spider Rainbow health and click-zone server."""

from __future__ import annotations

import argparse

import uvicorn

from .api import create_app
from .core.config import config
from .core.logger import log


def main() -> None:
    parser = argparse.ArgumentParser(description="Spider Rainbow health and click-zone server")
    parser.add_argument("--host", default=config.api_host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=config.api_port, help="Port to listen on")
    parser.add_argument("--log-level", default=config.log_level.lower(), help="Log level for the app and uvicorn")
    args = parser.parse_args()

    config.api_host = args.host
    config.api_port = args.port
    log.set_level(args.log_level)
    config.validate_config()

    log.info(f"Health monitoring server running on http://{args.host}:{args.port}")
    log.info(f"Health endpoint available at http://{args.host}:{args.port}/health")
    uvicorn.run(create_app(), host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
