"""CLI commands: objkit encode / objkit decode -- JSON text bridging."""

from __future__ import annotations

import json
import sys
from typing import TextIO

import click

from objkit.codec import CodecError, decode_from_text, encode_to_text
from objkit.config import ObjkitConfig
from objkit.model import Circle, Rectangle

_KINDS: dict[str, type] = {
    "rectangle": Rectangle,
    "circle": Circle,
    "dict": dict,
}


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def encode(config: ObjkitConfig, source: TextIO) -> None:
    """Re-encode JSON text from SOURCE (default: stdin) in canonical form."""
    try:
        value = json.loads(source.read())
        click.echo(encode_to_text(value, indent=config.indent))
    except (json.JSONDecodeError, CodecError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("kind", type=click.Choice(sorted(_KINDS)))
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def decode(kind: str, source: TextIO) -> None:
    """Decode a JSON object from SOURCE (default: stdin) into KIND.

    Prints the decoded value and, for shapes, its area.
    """
    try:
        value = decode_from_text(_KINDS[kind], source.read())
    except CodecError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(repr(value))
    if hasattr(value, "get_area"):
        try:
            click.echo(f"area: {value.get_area()}")
        except TypeError as exc:
            click.echo(f"area: undefined ({exc})")
