#!/usr/bin/env python3
"""
Main CLI entry point for the usergraph server.
"""

import os
import sys

import click
import uvicorn

from usergraph import __version__
from usergraph.config import settings
from usergraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="usergraph")
def cli() -> None:
    """usergraph CLI - run the GraphQL server and inspect its schema."""
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
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=lambda: settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: USERGRAPH_LOG_LEVEL or info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the usergraph API server."""

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting usergraph API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # Reloaded workers re-import settings from the environment
    if log_level == "debug":
        os.environ["USERGRAPH_DEBUG"] = "true"
    os.environ["USERGRAPH_LOG_LEVEL"] = log_level.upper()

    try:
        if reload:
            uvicorn.run(
                "usergraph.api.app:create_app",
                factory=True,
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from usergraph.api.app import create_app
            from usergraph.config import Settings

            app = create_app(Settings())
            uvicorn.run(
                app,
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
    """Print the GraphQL schema as SDL."""
    from usergraph.graphql.schema import build_schema, print_schema

    click.echo(print_schema(build_schema()))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
