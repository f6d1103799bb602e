"""CLI interface for FBWS.

Command-line tool for creating and serving static sites.
"""

import logging
import sys
from pathlib import Path

import click

from fbws.config import Config
from fbws.core.errors import BuildError


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every compiled page)",
)
def cli(verbose: bool) -> None:
    """FBWS - build and serve a folder of HTML fragments."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover project.toml)",
)
@click.option(
    "--port",
    "-p",
    type=click.IntRange(0, 65535),
    default=None,
    help="Port to bind to (overrides config)",
)
def run(config_path: Path | None, port: int | None) -> None:
    """Compile all pages and start the server."""
    from fbws.server import build_pages, run_server

    try:
        config = Config.load(config_path).with_overrides(port=port)
        click.echo(f"Source directory: {config.site.content_dir}")
        pages = build_pages(config)
    except (BuildError, FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    run_server(config, pages)
    click.echo("\nServer shutdown...")


@cli.command()
@click.argument("name")
def new(name: str) -> None:
    """Create a new project in directory NAME."""
    from fbws.scaffold import create_project

    try:
        project = create_project(Path(name))
    except FileExistsError:
        click.echo(click.style(f"Error: {name} already exists", fg="red"), err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(click.style(f"Error: cannot create {name}: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"Project created at {project}/")
