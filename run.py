"""Entry point for the User Directory API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host and port are read from the environment variables ``HOST`` and
``PORT``; the remaining configuration (log level, sample users, ...)
is described in ``user_directory_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from user_directory_api.app.core.config import settings
from user_directory_api.app.core.logging_config import resolve_log_level
from user_directory_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Defaults are ``0.0.0.0`` and ``8000``.
    """
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    log_level = resolve_log_level(settings.log_level).lower()
    config = Config(app=app, host=host, port=port, reload=False, log_level=log_level)
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")


if __name__ == "__main__":
    main()
