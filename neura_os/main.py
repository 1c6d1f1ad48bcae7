#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NEURA OS - Entry point
Runs the API with uvicorn
"""

import argparse
import logging

import uvicorn

from neura_os.config import get_settings
from neura_os.utils.logger import setup_logging

logger = logging.getLogger(__name__)

def run_server(host: str = None, port: int = None, reload: bool = False) -> None:
    """Start uvicorn on the application factory"""
    settings = get_settings()
    setup_logging(settings)

    host = host or settings.HOST
    port = port or settings.PORT

    logger.info(f"🌐 Starting NEURA OS API on http://{host}:{port}")
    logger.info(f"🔧 Environment: {settings.ENVIRONMENT.value}")

    try:
        uvicorn.run(
            "neura_os.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_config=None,
            server_header=False
        )
    except KeyboardInterrupt:
        logger.info("👋 NEURA OS API stopped")

def main(argv=None) -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description='Run the NEURA OS API')
    parser.add_argument('--host', default=settings.HOST, help='Bind host')
    parser.add_argument('--port', type=int, default=settings.PORT, help='Listening port')
    parser.add_argument('--reload', action='store_true', help='Auto-reload on code changes')

    args = parser.parse_args(argv)
    run_server(host=args.host, port=args.port, reload=args.reload)

if __name__ == "__main__":
    main()
