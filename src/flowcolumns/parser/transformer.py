"""Lark Transformer that converts a width-list parse tree into model objects."""

from __future__ import annotations

import re
from fractions import Fraction
from functools import lru_cache
from pathlib import Path
from typing import NamedTuple

from lark import Lark, Token, Transformer
from lark.exceptions import VisitError

from flowcolumns.model.columns import ColumnSpec
from flowcolumns.model.dimension import Dimension, FixedLength, Percentage, Width
from flowcolumns.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_DIMENSION_RE = re.compile(r"(?P<number>[-+]?(?:\d+\.?\d*|\.\d+))(?P<unit>%|[a-zA-Z]+)?")


class _Length(NamedTuple):
    """A parsed number and unit, kept apart so ``0%`` stays a percentage.

    ``unit`` is empty for a bare number; widths and gutters treat that
    differently.
    """

    number: Fraction
    unit: str
    text: str
    line: int | None = None
    column: int | None = None


class WidthTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into number/unit pairs."""

    def dimension(self, items: list[Token]) -> _Length:
        token = items[0]
        match = _DIMENSION_RE.fullmatch(str(token))
        if match is None:  # pragma: no cover - the lexer guarantees the shape
            raise ParseError(f"Invalid length {token!s}", token.line, token.column)
        unit = match.group("unit") or ""
        return _Length(
            Fraction(match.group("number")),
            unit.lower(),
            str(token),
            token.line,
            token.column,
        )

    def single(self, items: list[_Length]) -> _Length:
        return items[0]

    def start(self, items: list[_Length]) -> list[_Length]:
        return list(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start=["start", "single"],
    )


def _parse(source: str, start: str) -> object:
    try:
        tree = _parser().parse(source, start=start)
    except Exception as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    try:
        return WidthTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise


def _to_width(length: _Length) -> Width:
    if not length.unit and length.number != 0:
        raise ParseError(
            f"Length {length.text} needs a unit (e.g. {length.text}px or {length.text}%)",
            line=length.line,
            column=length.column,
        )
    try:
        if length.unit == "%":
            return Percentage(length.number)
        return FixedLength(length.number, length.unit or "px")
    except ValueError as e:
        raise ParseError(f"Invalid column width {length.text!r}: {e}") from e


def parse_dimension(source: str) -> Dimension:
    """Parse a single CSS length such as ``30px`` or ``2.5%``.

    A bare number is taken as pixels.
    """
    length: _Length = _parse(source, "single")  # type: ignore[assignment]
    return Dimension.of(length.number, length.unit or "px")


def parse_width(source: str) -> Width:
    """Parse a single column width."""
    return _to_width(_parse(source, "single"))  # type: ignore[arg-type]


def parse_widths(source: str) -> ColumnSpec:
    """Parse a whitespace- or comma-separated width list into a ColumnSpec."""
    lengths: list[_Length] = _parse(source, "start")  # type: ignore[assignment]
    return ColumnSpec(tuple(_to_width(length) for length in lengths))
