"""CLI main entry point."""

import sys
from pathlib import Path

import click

from ...core import ImageCacheConfig, ImageCacheError, ImageCacheService, StartupError
from ..factory import create_service


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Cache directory (default: platform local data dir)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, cache_dir: Path | None) -> None:
    """imagecache - On-disk image cache with base64 transcoding."""
    config = ImageCacheConfig.from_env(cache_dir=str(cache_dir) if cache_dir else None)
    if debug:
        config.log_level = "DEBUG"

    try:
        ctx.obj = create_service(config)
    except StartupError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def read(service: ImageCacheService, path: Path) -> None:
    """Print the base64 contents of any file."""
    try:
        click.echo(service.read_file_as_text(path))
    except ImageCacheError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("filename")
@click.argument("payload", required=False, default="-")
@click.pass_obj
def store(service: ImageCacheService, filename: str, payload: str) -> None:
    """Store a base64 payload in the cache under FILENAME.

    PAYLOAD is read from stdin when omitted or "-".
    """
    if payload == "-":
        payload = click.get_text_stream("stdin").read().strip()

    try:
        click.echo(service.store(filename, payload))
    except ImageCacheError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("filename")
@click.pass_obj
def locate(service: ImageCacheService, filename: str) -> None:
    """Print the absolute path of a cached file."""
    try:
        click.echo(service.locate(filename))
    except ImageCacheError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_obj
def root(service: ImageCacheService) -> None:
    """Print the cache root directory."""
    click.echo(str(service.cache.root))


def main() -> None:
    """Main entry point."""
    cli()
