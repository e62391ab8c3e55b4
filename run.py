"""Entry point for the Task List API server.

Starts the FastAPI application with Uvicorn.  Host and port come from
``SERVER_HOST`` and ``SERVER_PORT`` (defaults ``0.0.0.0`` and
``4000``); database and CORS settings are read from the environment
or a ``.env`` file, see ``tasklist_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from tasklist_api.app.core.config import settings
from tasklist_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.server_host,
        port=settings.server_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
