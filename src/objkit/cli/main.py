"""Objkit CLI entry point: Click group with subcommands."""

import logging

import click

from objkit import __version__
from objkit.config import ObjkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
@click.option("--indent", default=None, type=int, help="Pretty-print JSON with this indent")
@click.pass_context
def cli(ctx: click.Context, log_level: str, indent: int | None) -> None:
    """Objkit - shapes, JSON bridging and CSS selector building."""
    config = ObjkitConfig(indent=indent, log_level=log_level.upper())
    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    ctx.obj = config


# Import and register subcommands
from objkit.cli.shapes import area  # noqa: E402
from objkit.cli.codec import decode, encode  # noqa: E402
from objkit.cli.selector import selector  # noqa: E402

cli.add_command(area)
cli.add_command(encode)
cli.add_command(decode)
cli.add_command(selector)
