"""CLI command: cssbuilder build -- render a compound selector."""

from __future__ import annotations

import click

from cssbuilder.builder import SelectorBuilder


@click.command()
@click.option("--element", "element", default=None, help="Element (tag) name or '*'.")
@click.option("--id", "id_", default=None, help="Id, without the leading '#'.")
@click.option("--class", "classes", multiple=True, help="Class name; may be repeated.")
@click.option("--attr", "attrs", multiple=True, help="Attribute body, e.g. 'href$=\".png\"'.")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class; may be repeated.")
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element name.")
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Print the selector built from the given fragments.

    Fragments are applied in CSS order regardless of option order, so only an
    empty selector is rejected.
    """
    builder = SelectorBuilder.empty()
    if element is not None:
        builder.element(element)
    if id_ is not None:
        builder.id(id_)
    for name in classes:
        builder.class_(name)
    for body in attrs:
        builder.attr(body)
    for name in pseudo_classes:
        builder.pseudo_class(name)
    if pseudo_element is not None:
        builder.pseudo_element(pseudo_element)

    if builder.is_empty:
        raise click.UsageError("At least one fragment option is required.")
    click.echo(builder.render())
