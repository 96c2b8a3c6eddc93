"""objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__
from objtasks.config import ObjtasksConfig


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """objtasks - build and check CSS selectors, rectangles and JSON."""
    config = ObjtasksConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from objtasks.cli.selector import build, check, combine  # noqa: E402
from objtasks.cli.data import area, json_cmd  # noqa: E402

cli.add_command(check)
cli.add_command(build)
cli.add_command(combine)
cli.add_command(area)
cli.add_command(json_cmd)
