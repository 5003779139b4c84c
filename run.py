"""Entry point for serving the Bank Back Office API.

Applies pending database migrations and serves the FastAPI app with
Uvicorn.  Host and port default to the ``HOST`` and ``PORT``
environment variables (see ``bank_api.app.core.config``).

Usage:
    python run.py [--host HOST] [--port PORT] [--init-db-only]
"""
import argparse
import asyncio
import logging

from uvicorn import Config, Server

from bank_api.app.core.config import settings
from bank_api.app.core.db import get_database_path, init_db
from bank_api.app.main import app


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the Bank Back Office API")
    parser.add_argument("--host", default=settings.host, help="Interface to bind to")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument(
        "--init-db-only",
        action="store_true",
        help="Apply migrations and exit without starting the server",
    )
    return parser.parse_args(argv)


async def serve(host: str, port: int) -> None:
    """Run the API with Uvicorn until interrupted."""
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


def main(argv=None) -> None:
    args = parse_args(argv)
    version = init_db()
    logging.getLogger(__name__).info("Database %s at schema version %s", get_database_path(), version)
    if args.init_db_only:
        return
    asyncio.run(serve(args.host, args.port))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
