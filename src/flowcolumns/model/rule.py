"""Rule model: Selector, SelectorList, StyleRule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Selector:
    """One selector alternative.

    Column selectors are written relative to the styled container
    (``> .column:nth-of-type(3n+1)``) until :meth:`scoped` anchors them.
    """

    text: str

    def scoped(self, scope: str) -> Selector:
        if not scope:
            return self
        return Selector(f"{scope} {self.text}")

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class SelectorList:
    """An ordered union of selector alternatives.

    An empty list selects nothing; alternatives are only joined into one
    string at the rendering boundary.
    """

    alternatives: tuple[Selector, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "alternatives", tuple(self.alternatives))

    def scoped(self, scope: str) -> SelectorList:
        return SelectorList(tuple(s.scoped(scope) for s in self.alternatives))

    def join(self, separator: str = ", ") -> str:
        return separator.join(s.text for s in self.alternatives)

    def __add__(self, other: SelectorList) -> SelectorList:
        return SelectorList(self.alternatives + other.alternatives)

    def __iter__(self) -> Iterator[Selector]:
        return iter(self.alternatives)

    def __len__(self) -> int:
        return len(self.alternatives)

    def __bool__(self) -> bool:
        return bool(self.alternatives)

    def __str__(self) -> str:
        return self.join()


@dataclass(frozen=True)
class StyleRule:
    """A single rule pairing selectors with property declarations."""

    selectors: SelectorList
    properties: dict[str, str]  # declaration order is preserved
    comment: str = ""


@dataclass(frozen=True)
class Stylesheet:
    """The rules produced by one layout emission, in output order."""

    rules: list[StyleRule] = field(default_factory=list)

    def __iter__(self) -> Iterator[StyleRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)
