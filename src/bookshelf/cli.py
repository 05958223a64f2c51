#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf server.
"""

import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
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
@click.option(
    "--seed",
    "seed_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON file to seed the book store from (default: bundled sample data)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    log_level: str,
    seed_path: str | None,
) -> None:
    """Start the Bookshelf API server."""

    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        seed_path=seed_path,
    )

    # Environment carries the options into a reloaded app process
    if log_level == "debug":
        os.environ["BOOKSHELF_DEBUG"] = "true"
        os.environ["BOOKSHELF_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKSHELF_DEBUG", "false")
        os.environ.setdefault("BOOKSHELF_LOG_LEVEL", log_level)
    if seed_path:
        os.environ["BOOKSHELF_SEED_DATA_PATH"] = seed_path
        settings.seed_data_path = seed_path

    try:
        uvicorn.run(
            "bookshelf.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
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
    from bookshelf.graphql.schema import schema as graphql_schema

    click.echo(graphql_schema.as_str())


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
