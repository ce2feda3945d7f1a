"""CLI command: selectorkit area -- decode a rectangle and print its area."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import PayloadError
from selectorkit.objects import Rectangle, from_json


@click.command()
@click.argument("payload")
def area(payload: str) -> None:
    """Decode a rectangle JSON PAYLOAD and print its area.

    Example: selectorkit area '{"width": 10, "height": 20}'
    """
    try:
        rect = from_json(Rectangle, payload)
    except PayloadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(rect.get_area())
