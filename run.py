"""Entry point for the Pig Farm Records API.

Starts the FastAPI application under Uvicorn.  Host, port, database
location and log level come from environment variables (see
``pig_farm_api.app.core.config``), for example::

    DATABASE_URL=farm.db PORT=8080 python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from pig_farm_api.app.core.config import settings
from pig_farm_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Listening on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
