#!/usr/bin/env python3
"""
Main CLI entry point for the nsperf API server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from nsperf import __version__
from nsperf.config import settings
from nsperf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="nsperf")
def cli() -> None:
    """nsperf CLI - run the API server and inspect its database."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option(
    "--memory",
    is_flag=True,
    default=False,
    help="Serve from an in-memory store instead of MongoDB",
)
def serve(host: str, port: int, reload: bool, log_level: str, memory: bool) -> None:
    """Start the nsperf API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting nsperf API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        memory=memory,
    )

    # The app factory reads settings on import, so pass choices through the environment
    os.environ["NSPERF_API_HOST"] = host
    os.environ["NSPERF_API_PORT"] = str(port)
    os.environ["NSPERF_LOG_LEVEL"] = log_level
    if memory:
        os.environ["NSPERF_STORAGE_BACKEND"] = "memory"

    try:
        if reload:
            # Reload needs an import string; the child process re-reads the environment
            uvicorn.run(
                "nsperf.api.app:create_app",
                factory=True,
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from nsperf.api.app import create_app
            from nsperf.config import Settings

            uvicorn.run(
                create_app(config=Settings()),
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.group()
def db() -> None:
    """Inspect the configured document store."""
    pass


@db.command("ping")
def ping_database() -> None:
    """Check that the configured document store answers."""
    from nsperf.storage import create_store

    configure_logging()

    async def do_ping() -> bool:
        store = create_store()
        try:
            return await store.ping()
        finally:
            await store.close()

    if asyncio.run(do_ping()):
        click.echo(f"✓ {settings.storage_backend} store reachable")
    else:
        click.echo(f"✗ {settings.storage_backend} store unreachable: {settings.mongo_url}", err=True)
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
