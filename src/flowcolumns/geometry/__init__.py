from flowcolumns.geometry.box import (
    ColumnBox,
    ColumnPosition,
    column_box,
    fixed_widths,
    gutter_interval,
    gutter_padding,
    row_boxes,
)

__all__ = [
    "ColumnBox",
    "ColumnPosition",
    "column_box",
    "fixed_widths",
    "gutter_interval",
    "gutter_padding",
    "row_boxes",
]
