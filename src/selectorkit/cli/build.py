"""CLI command: selectorkit build -- assemble a compound selector."""

from __future__ import annotations

import sys

import click

from selectorkit.builder import SelectorBuilder
from selectorkit.errors import SelectorError

_KINDS = {
    "element": SelectorBuilder.set_element,
    "id": SelectorBuilder.set_id,
    "class": SelectorBuilder.add_class,
    "attr": SelectorBuilder.add_attribute,
    "pseudo-class": SelectorBuilder.add_pseudo_class,
    "pseudo-element": SelectorBuilder.set_pseudo_element,
}


def _parse_part(ctx: click.Context, param: click.Parameter, parts: tuple[str, ...]):
    parsed: list[tuple[str, str]] = []
    for part in parts:
        kind, sep, value = part.partition("=")
        if not sep or kind not in _KINDS:
            raise click.BadParameter(
                f"{part!r} is not KIND=VALUE with KIND one of {', '.join(_KINDS)}",
                ctx=ctx,
                param=param,
            )
        parsed.append((kind, value))
    return parsed


@click.command()
@click.argument("parts", nargs=-1, callback=_parse_part)
def build(parts: list[tuple[str, str]]) -> None:
    """Build a selector from KIND=VALUE parts and print it.

    Parts are applied in the order given, e.g.

        selectorkit build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    builder = SelectorBuilder()
    try:
        for kind, value in parts:
            _KINDS[kind](builder, value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.stringify())
