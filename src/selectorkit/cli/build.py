"""CLI command: selectorkit build -- assemble a compound selector."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import SelectorError
from selectorkit.selector import FragmentKind, SelectorBuilder

_KIND_NAMES: dict[str, FragmentKind] = {kind.value: kind for kind in FragmentKind}
_KIND_NAMES["attr"] = FragmentKind.ATTRIBUTE


@click.command()
@click.argument("fragments", nargs=-1, required=True)
def build(fragments: tuple[str, ...]) -> None:
    """Append KIND:VALUE fragments in order and print the selector.

    KIND is one of element, id, class, attribute (or attr), pseudo-class,
    pseudo-element.

    Example: selectorkit build element:a 'attr:href$=".png"' pseudo-class:focus
    """
    builder = SelectorBuilder()
    for raw in fragments:
        name, sep, value = raw.partition(":")
        kind = _KIND_NAMES.get(name)
        if not sep or kind is None:
            click.echo(f"Error: unknown fragment {raw!r} (expected KIND:VALUE)", err=True)
            sys.exit(1)
        try:
            builder.append(kind, value)
        except SelectorError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)

    click.echo(builder.stringify())
