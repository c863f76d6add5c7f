"""CLI command: cssbuilder combine -- join two element selectors."""

from __future__ import annotations

import click

from cssbuilder.config import CssBuilderConfig
from cssbuilder.factory import css_selector_builder


class _CombinatorChoice(click.ParamType):
    name = "combinator"

    def convert(self, value, param, ctx):
        config = ctx.obj if ctx is not None and isinstance(ctx.obj, CssBuilderConfig) else CssBuilderConfig()
        if value not in config.combinators:
            allowed = ", ".join(repr(c) for c in config.combinators)
            self.fail(f"{value!r} is not one of {allowed}", param, ctx)
        return value


@click.command()
@click.argument("left")
@click.argument("combinator", type=_CombinatorChoice())
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Print LEFT COMBINATOR RIGHT built from two element names."""
    selector = css_selector_builder.combine(
        css_selector_builder.element(left),
        combinator,
        css_selector_builder.element(right),
    )
    click.echo(selector.render())
