"""Box geometry: widths, gutters and offsets for one column of a row.

Fixed-width and percentage-width columns share a row. Each percentage column
gives up ``fixed_widths * p / 100`` of its share so the row still adds up to
100%. With ``calc()`` that amount is subtracted from the width; without it
the legacy strategy pulls the column left by a negative margin and pads the
content back in, relying on ``overflow: hidden`` on the row.

Gutters are spread so every column's left and right padding together equal
``interval = gutter * (total - 1) / total``, which keeps equal content widths
for equal column widths.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from fractions import Fraction

from flowcolumns.model.columns import ColumnSpec
from flowcolumns.model.dimension import Dimension, Percentage


class ColumnPosition(Enum):
    """Where a column sits in its row, derived from its index."""

    LEADING = "leading"
    INTERIOR = "interior"
    TRAILING = "trailing"
    SOLE = "sole"

    @classmethod
    def of(cls, index: int, total: int) -> ColumnPosition:
        if total == 1:
            return cls.SOLE
        if index == 0:
            return cls.LEADING
        if index == total - 1:
            return cls.TRAILING
        return cls.INTERIOR

    @property
    def clear(self) -> str | None:
        return _CLEAR[self]


_CLEAR: dict[ColumnPosition, str | None] = {
    ColumnPosition.LEADING: "left",
    ColumnPosition.INTERIOR: None,
    ColumnPosition.TRAILING: "right",
    ColumnPosition.SOLE: "both",
}


@dataclass(frozen=True)
class ColumnBox:
    """Computed box values for one column."""

    index: int
    position: ColumnPosition
    width: Dimension
    padding_left: Dimension = field(default_factory=Dimension.zero)
    padding_right: Dimension = field(default_factory=Dimension.zero)
    offset: Dimension | None = None
    fluid_negative_space: Dimension = field(default_factory=Dimension.zero)

    @property
    def clear(self) -> str | None:
        return self.position.clear

    def declarations(self) -> dict[str, str]:
        """CSS declarations for this box, in output order."""
        props: dict[str, str] = {}
        if self.clear:
            props["clear"] = self.clear
        if self.offset is not None:
            props["margin-left"] = self.offset.render()
        if self.padding_left or self.padding_right:
            props["padding-left"] = self.padding_left.render()
            props["padding-right"] = self.padding_right.render()
        props["width"] = self.width.render()
        return props


def fixed_widths(widths: ColumnSpec) -> Dimension:
    """Sum every fixed-width column of the row."""
    total = Dimension.zero()
    for width in widths:
        if width.is_fixed:
            total += width.as_dimension()
    return total


def gutter_interval(gutter: Dimension, total: int) -> Dimension:
    """Each column's share of the row's ``total - 1`` gutters."""
    return gutter * Fraction(total - 1, total)


def gutter_padding(
    index: int, total: int, gutter: Dimension
) -> tuple[Dimension, Dimension]:
    """Left and right padding for the 0-based column *index*."""
    interval = gutter_interval(gutter, total)
    left = abs(interval * index - gutter * index)
    right = interval * (index + 1) - gutter * index
    return left, right


def column_box(
    index: int,
    total: int,
    widths: ColumnSpec,
    gutter: Dimension,
    use_width_calc: bool,
) -> ColumnBox:
    """Compute the box of the 0-based column *index* of a *total*-column row."""
    if total != len(widths):
        raise ValueError(f"total is {total} but {len(widths)} widths were given")
    if not 0 <= index < total:
        raise ValueError(f"index must be between 0 and {total - 1}, got {index}")

    width = widths[index]
    padding_left, padding_right = gutter_padding(index, total, gutter)
    position = ColumnPosition.of(index, total)

    if not isinstance(width, Percentage):
        box = ColumnBox(
            index=index,
            position=position,
            width=width.as_dimension(),
            padding_left=padding_left,
            padding_right=padding_right,
        )
        return box if use_width_calc else _require_literals(box)

    negative_space = fixed_widths(widths) * (width.value / 100)
    if use_width_calc:
        return ColumnBox(
            index=index,
            position=position,
            width=width.as_dimension() - negative_space,
            padding_left=padding_left,
            padding_right=padding_right,
            fluid_negative_space=negative_space,
        )
    return _require_literals(
        ColumnBox(
            index=index,
            position=position,
            width=width.as_dimension(),
            padding_left=padding_left + negative_space,
            padding_right=padding_right,
            offset=-negative_space if negative_space else None,
            fluid_negative_space=negative_space,
        )
    )


_LEGACY_PROPERTIES = {
    "offset": "margin-left",
    "padding_left": "padding-left",
    "padding_right": "padding-right",
    "width": "width",
}


def _require_literals(box: ColumnBox) -> ColumnBox:
    """Without calc() every emitted length must be a single-unit literal."""
    for attr, prop in _LEGACY_PROPERTIES.items():
        value = getattr(box, attr)
        if value is not None and not value.is_single_unit:
            raise ValueError(
                f"Column {box.index + 1} {prop} {value} needs calc(); "
                "give the gutter and fixed widths one unit or enable width calculation"
            )
    return box


def row_boxes(
    widths: ColumnSpec, gutter: Dimension, use_width_calc: bool
) -> list[ColumnBox]:
    """Boxes for every column of the row, in order."""
    total = len(widths)
    return [column_box(i, total, widths, gutter, use_width_calc) for i in range(total)]
