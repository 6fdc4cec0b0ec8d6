"""CLI command: flowcolumns inspect -- display per-column geometry."""

from __future__ import annotations

import sys

import click

from flowcolumns.cli.options import build_options, layout_options, read_widths
from flowcolumns.geometry import fixed_widths, gutter_interval, row_boxes
from flowcolumns.selectors import column_selectors


@click.command()
@layout_options
def inspect(widths: tuple[str, ...], options_file: str | None, **flags: object) -> None:
    """Show the computed box and selectors of every column in WIDTHS."""
    spec = read_widths(widths)
    options = build_options(options_file, **flags)
    total = len(spec)

    click.echo(f"Columns: {total}")
    click.echo(f"Strategy: {'calc' if options.use_width_calculation else 'legacy'}")
    click.echo(f"Fixed widths: {fixed_widths(spec)}")
    if options.gutter:
        interval = gutter_interval(options.gutter, total)
        click.echo(f"Gutter: {options.gutter} (interval {interval})")
    click.echo()

    try:
        boxes = row_boxes(spec, options.gutter, options.use_width_calculation)
    except ValueError as exc:
        click.echo(f"Invalid layout: {exc}", err=True)
        sys.exit(1)
    for box, width in zip(boxes, spec):
        parts = [f"  {box.index + 1}. {width}", f"position={box.position.value}"]
        parts.append(f"width={box.width}")
        if box.padding_left or box.padding_right:
            parts.append(f"padding={box.padding_left}/{box.padding_right}")
        if box.offset is not None:
            parts.append(f"margin-left={box.offset}")
        click.echo("  ".join(parts))
        selectors = column_selectors(total, box.index + 1, options)
        for selector in selectors:
            click.echo(f"       {selector}")
