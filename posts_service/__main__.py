"""
Run the posts service with uvicorn.

Usage:
    python -m posts_service
"""

import logging

from uvicorn import Config, Server

from . import config
from .app import app
from .logging_config import setup_logging


def main() -> None:
    setup_logging(config.LOG_LEVEL)
    logging.getLogger(__name__).info("Server running on port %s", config.PORT)
    server = Server(Config(app=app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower()))
    server.run()


if __name__ == "__main__":
    main()
