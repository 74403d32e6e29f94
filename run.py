"""Entry point for serving the Scheduling Admin API.

Starts the FastAPI application with Uvicorn.  Host and port come from
``API_HOST`` and ``API_PORT`` (defaults ``0.0.0.0`` and ``8000``); all
other configuration is read by ``scheduling_admin_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from scheduling_admin_api.app.core.config import settings
from scheduling_admin_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")


if __name__ == "__main__":
    main()
