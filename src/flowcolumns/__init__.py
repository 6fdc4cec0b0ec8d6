"""flowcolumns: compile-time CSS for float-based multi-column layouts."""

__version__ = "0.1.0"

from flowcolumns.generator import LayoutRuleGenerator  # noqa: E402
from flowcolumns.model import (  # noqa: E402
    ColumnSpec,
    Dimension,
    FixedLength,
    OptionSet,
    Percentage,
    Stylesheet,
)
from flowcolumns.render import render_css  # noqa: E402
from flowcolumns.resolver import OptionResolver  # noqa: E402

__all__ = [
    "ColumnSpec",
    "Dimension",
    "FixedLength",
    "LayoutRuleGenerator",
    "OptionResolver",
    "OptionSet",
    "Percentage",
    "Stylesheet",
    "render_css",
]
