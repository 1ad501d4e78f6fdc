"""Entry point for the Salary Reports API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); the record source is chosen with
``RECORD_SOURCE`` and ``DATA_PATH``.  See ``salary_reports_api/app/core/config.py``
for all supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from salary_reports_api.app.core.config import settings
from salary_reports_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info("Salary Reports API listening on http://%s:%d", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
