"""ColumnSpec: the ordered widths of one multi-column row."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from flowcolumns.model.dimension import FixedLength, Percentage, Width


@dataclass(frozen=True)
class ColumnSpec:
    """Ordered column widths; ``len(spec)`` is the total column count."""

    widths: tuple[Width, ...]

    def __post_init__(self) -> None:
        widths = tuple(self.widths)
        if not widths:
            raise ValueError("ColumnSpec requires at least one column width")
        for width in widths:
            if not isinstance(width, (Percentage, FixedLength)):
                raise TypeError(
                    f"Column widths must be Percentage or FixedLength, got {width!r}"
                )
        object.__setattr__(self, "widths", widths)

    @classmethod
    def of(cls, widths: ColumnSpec | str | Iterable[Width | str]) -> ColumnSpec:
        """Build a spec from a spec, a width-list string, or a mixed iterable."""
        if isinstance(widths, ColumnSpec):
            return widths

        from flowcolumns.parser import parse_width, parse_widths

        if isinstance(widths, str):
            return parse_widths(widths)
        return cls(
            tuple(parse_width(w) if isinstance(w, str) else w for w in widths)
        )

    @property
    def total(self) -> int:
        return len(self.widths)

    @property
    def percentages(self) -> list[Percentage]:
        return [w for w in self.widths if isinstance(w, Percentage)]

    @property
    def fixed(self) -> list[FixedLength]:
        return [w for w in self.widths if isinstance(w, FixedLength)]

    def __len__(self) -> int:
        return len(self.widths)

    def __iter__(self) -> Iterator[Width]:
        return iter(self.widths)

    def __getitem__(self, index: int) -> Width:
        return self.widths[index]

    def __str__(self) -> str:
        return " ".join(str(w) for w in self.widths)
