"""Entry point for the Pets API server.

Launches the FastAPI application with Uvicorn.  Host and port are read
from the ``API_HOST`` and ``API_PORT`` environment variables (see
``pets_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from pets_api.app.core.config import settings
from pets_api.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
