"""CLI command: cssbuilder combine -- join two selector strings."""

from __future__ import annotations

import sys

import click

from cssbuilder.selector import CombinatorError, css_selector_builder


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join LEFT and RIGHT with COMBINATOR (one of ' ', '+', '~', '>')."""
    try:
        compound = css_selector_builder.combine(left, combinator, right)
    except CombinatorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(compound.stringify())
