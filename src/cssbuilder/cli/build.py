"""CLI command: cssbuilder build -- assemble a selector from kind=value parts."""

from __future__ import annotations

import dataclasses
import sys

import click

from cssbuilder.config import BuilderConfig
from cssbuilder.selector import SelectorBuilder, SelectorError, SimpleSelector

# part kind -> SimpleSelector method name
_KINDS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


def _apply(
    selector: SimpleSelector | None, builder: SelectorBuilder, part: str
) -> SimpleSelector:
    kind, sep, value = part.partition("=")
    if not sep or kind not in _KINDS:
        raise click.UsageError(
            f"Invalid part {part!r}: expected KIND=VALUE with KIND one of "
            + ", ".join(_KINDS)
        )
    target = selector if selector is not None else builder
    return getattr(target, _KINDS[kind])(value)


@click.command()
@click.argument("parts", nargs=-1, required=True)
@click.option(
    "--bracket-each-attribute",
    is_flag=True,
    help="Wrap every attribute in its own [...] instead of one shared pair.",
)
def build(parts: tuple[str, ...], bracket_each_attribute: bool) -> None:
    """Build a selector from PARTS applied in order.

    Each part is KIND=VALUE, for example:

        cssbuilder build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    config = BuilderConfig.from_env()
    if bracket_each_attribute:
        config = dataclasses.replace(config, bracket_each_attribute=True)
    builder = SelectorBuilder(config)

    selector: SimpleSelector | None = None
    try:
        for part in parts:
            selector = _apply(selector, builder, part)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    assert selector is not None
    click.echo(selector.stringify())
