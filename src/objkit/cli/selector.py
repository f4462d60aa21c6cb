"""CLI command: objkit selector -- build a CSS selector from parts."""

from __future__ import annotations

import sys

import click

from objkit.selector import SelectorBuilder, SelectorError, new_selector_builder

_APPENDERS = {
    "element": SelectorBuilder.element,
    "id": SelectorBuilder.id,
    "class": SelectorBuilder.class_,
    "attr": SelectorBuilder.attribute,
    "pseudo-class": SelectorBuilder.pseudo_class,
    "pseudo-element": SelectorBuilder.pseudo_element,
}


@click.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE parts and print it.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    A combine=TOKEN part joins what precedes it with what follows, e.g.

        objkit selector element=div id=main combine=+ element=table
    """
    try:
        click.echo(_build(parts).stringify())
    except (SelectorError, click.BadParameter) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def _build(parts: tuple[str, ...]) -> SelectorBuilder:
    """Fold the parts into one builder, combining right-to-left."""
    groups: list[SelectorBuilder] = [new_selector_builder()]
    tokens: list[str] = []
    for part in parts:
        kind, sep, value = part.partition("=")
        if not sep:
            raise click.BadParameter(f"expected KIND=VALUE, got {part!r}")
        if kind == "combine":
            tokens.append(value or " ")
            groups.append(new_selector_builder())
        elif kind in _APPENDERS:
            _APPENDERS[kind](groups[-1], value)
        else:
            raise click.BadParameter(f"unknown selector part {kind!r}")

    result = groups[-1]
    for left, token in zip(reversed(groups[:-1]), reversed(tokens)):
        result = left.combine(token, result)
    return result
