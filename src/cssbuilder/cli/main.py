"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import CssBuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cssbuilder - build CSS selector strings from fragments."""
    try:
        config = CssBuilderConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(f"CSSBUILDER_LOG_LEVEL: {exc}") from exc
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.combine import combine  # noqa: E402
from cssbuilder.cli.area import area  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
cli.add_command(area)
