#!/usr/bin/env python3
"""
Main CLI entry point for the lodging gateway server.
"""

import sys

import click
import uvicorn

from lodging_gateway.config import settings
from lodging_gateway.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.command()
def main() -> None:
    """Start the lodging gateway.

    Listens on PORT (default 5000). Set SHOW_URLS to log every upstream URL.
    """
    configure_logging(debug=settings.debug, log_level=settings.log_level)

    logger.info(
        "Starting lodging gateway server",
        host=settings.api_host,
        port=settings.port,
        show_urls=settings.show_urls,
    )

    try:
        uvicorn.run(
            "lodging_gateway.api.app:create_app",
            factory=True,
            host=settings.api_host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
