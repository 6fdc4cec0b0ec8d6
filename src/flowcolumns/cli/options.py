"""Shared CLI options: width arguments and OptionSet flags."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

import click

from flowcolumns.model.columns import ColumnSpec
from flowcolumns.model.options import OptionSet
from flowcolumns.parser import ParseError, parse_widths

F = Callable[..., Any]

_FLAG_FIELDS = {
    "structural": "use_structural_selector",
    "attribute": "use_attribute_selector",
    "fallback": "use_sibling_chain_fallback",
    "fallback_depth": "sibling_chain_max_depth",
    "class_name": "class_name",
    "attribute_name": "attribute_name",
    "gutter": "gutter",
    "calc": "use_width_calculation",
}


def layout_options(func: F) -> F:
    """Attach the width argument and every OptionSet flag to a command."""
    decorators = [
        click.argument("widths", nargs=-1, required=True),
        click.option("--gutter", default=None, help="Space between columns, e.g. 30px"),
        click.option(
            "--structural/--no-structural",
            default=None,
            help="Emit :nth-of-type selectors (default on)",
        ),
        click.option(
            "--attribute/--no-attribute",
            default=None,
            help="Emit [data-column~=N-K] selectors",
        ),
        click.option(
            "--fallback/--no-fallback",
            default=None,
            help="Emit :first-child sibling-chain selectors",
        ),
        click.option(
            "--fallback-depth",
            type=click.IntRange(min=0),
            default=None,
            help="Sibling chains emitted per column (default 20)",
        ),
        click.option(
            "--calc/--legacy",
            default=None,
            help="Use calc() widths or the legacy negative-margin strategy",
        ),
        click.option("--class-name", default=None, help="Column marker class"),
        click.option("--attribute-name", default=None, help="Column marker attribute"),
        click.option(
            "--options",
            "options_file",
            type=click.Path(exists=True, dir_okay=False),
            default=None,
            help="JSON file of options (camelCase or snake_case keys)",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def build_options(options_file: str | None, **flags: Any) -> OptionSet:
    """Merge an options file with the flags given on the command line."""
    try:
        mapping = _load_options_file(options_file) if options_file else {}
        for flag, field_name in _FLAG_FIELDS.items():
            value = flags.get(flag)
            if value is not None:
                mapping[field_name] = value
        return OptionSet.from_mapping(mapping)
    except (json.JSONDecodeError, KeyError, ValueError, TypeError, ParseError) as exc:
        click.echo(f"Invalid options: {exc}", err=True)
        sys.exit(1)


def _load_options_file(path: str) -> dict[str, Any]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object, got {type(data).__name__}")
    return data


def read_widths(widths: tuple[str, ...]) -> ColumnSpec:
    """Parse the positional width arguments, exiting on a parse error."""
    try:
        return parse_widths(" ".join(widths))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
