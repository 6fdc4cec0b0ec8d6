"""flowcolumns model layer -- public type re-exports."""

from flowcolumns.model.columns import ColumnSpec
from flowcolumns.model.diagnostic import Diagnostic, Severity
from flowcolumns.model.dimension import (
    Dimension,
    FixedLength,
    Percentage,
    Width,
)
from flowcolumns.model.options import OptionSet
from flowcolumns.model.rule import Selector, SelectorList, StyleRule, Stylesheet

__all__ = [
    # dimension
    "Dimension",
    "Percentage",
    "FixedLength",
    "Width",
    # columns
    "ColumnSpec",
    # options
    "OptionSet",
    # rule
    "Selector",
    "SelectorList",
    "StyleRule",
    "Stylesheet",
    # diagnostic
    "Severity",
    "Diagnostic",
]
