"""CLI command: flowcolumns check -- validate a column layout."""

from __future__ import annotations

import sys

import click

from flowcolumns.cli.options import build_options, layout_options, read_widths
from flowcolumns.model.diagnostic import Severity
from flowcolumns.validation import validate as run_validate


@click.command()
@layout_options
def check(widths: tuple[str, ...], options_file: str | None, **flags: object) -> None:
    """Validate column WIDTHS against the chosen options.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    spec = read_widths(widths)
    options = build_options(options_file, **flags)
    diagnostics = run_validate(spec, options)

    if not diagnostics:
        click.echo(f"OK: {spec} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
