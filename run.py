"""Entry point for the Pet Store API server.

Serves ``pet_store_api.app.main:app`` with Uvicorn.  Host and port are
read from the ``HOST`` and ``PORT`` environment variables (defaults
``127.0.0.1`` and ``3000``); see ``pet_store_api/app/core/config.py``
for the full list of settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from pet_store_api.app.core.config import settings
from pet_store_api.app.main import app


async def main() -> None:
    """Run the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Pet API listening on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
