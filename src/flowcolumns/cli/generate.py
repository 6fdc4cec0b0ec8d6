"""CLI command: flowcolumns generate -- emit CSS for a column layout."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from flowcolumns.cli.options import (
    build_options,
    configure_logging,
    layout_options,
    read_widths,
)
from flowcolumns.generator import DEFAULT_SCOPE, LayoutRuleGenerator
from flowcolumns.render import render_css
from flowcolumns.resolver import OptionResolver
from flowcolumns.validation import ValidationError, validate_or_raise


@click.command()
@layout_options
@click.option(
    "--scope", default=DEFAULT_SCOPE, show_default=True, help="Row container selector"
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write CSS here instead of stdout",
)
@click.option("--no-base", is_flag=True, help="Skip the shared column base rule")
@click.option("--verbose", "-v", is_flag=True, help="Log generation details")
def generate(
    widths: tuple[str, ...],
    scope: str,
    output: str | None,
    no_base: bool,
    verbose: bool,
    options_file: str | None,
    **flags: object,
) -> None:
    """Generate CSS laying out elements into columns of the given WIDTHS.

    WIDTHS are lengths such as ``25% 50% 25%`` or ``100% 320px``.
    """
    configure_logging(verbose)
    spec = read_widths(widths)
    options = build_options(options_file, **flags)

    try:
        warnings = validate_or_raise(spec, options)
    except ValidationError as exc:
        for diag in exc.diagnostics:
            click.echo(str(diag), err=True)
        sys.exit(1)
    for diag in warnings:
        click.echo(str(diag), err=True)

    generator = LayoutRuleGenerator(OptionResolver(options))
    if no_base:
        generator.ensure_base(options)
    css = render_css(generator.emit_columns(spec, scope=scope))

    if output:
        Path(output).write_text(css, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(css, nl=False)
