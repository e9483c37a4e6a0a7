#!/usr/bin/env python3
"""
Main CLI entry point for the Graphbook server.
"""

import os
import sys

import click
import uvicorn

from graphbook import __version__
from graphbook.config import settings
from graphbook.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="graphbook")
def cli() -> None:
    """Graphbook CLI - run the GraphQL server and inspect its schema."""
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
    show_default=True,
    type=int,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Graphbook API server."""

    debug = log_level == "debug"
    configure_logging(debug=debug, log_level=log_level)

    logger.info(
        "Starting Graphbook API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    try:
        if reload:
            # The reloader imports the app in a fresh process, which reads these
            os.environ["GRAPHBOOK_DEBUG"] = "true" if debug else "false"
            os.environ["GRAPHBOOK_LOG_LEVEL"] = log_level
            uvicorn.run(
                "graphbook.api.main:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from graphbook.api.app import create_app

            uvicorn.run(
                create_app(debug=debug, log_level=log_level),
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


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from graphbook.graphql.schema import print_schema_sdl

    click.echo(print_schema_sdl())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
