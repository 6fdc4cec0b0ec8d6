"""flowcolumns CLI entry point: Click group with subcommands."""

import click

from flowcolumns import __version__


@click.group()
@click.version_option(version=__version__, prog_name="flowcolumns")
def cli() -> None:
    """flowcolumns - generate CSS for float-based multi-column layouts."""


# Import and register subcommands
from flowcolumns.cli.generate import generate  # noqa: E402
from flowcolumns.cli.check import check  # noqa: E402
from flowcolumns.cli.inspect import inspect  # noqa: E402

cli.add_command(generate)
cli.add_command(check)
cli.add_command(inspect)
