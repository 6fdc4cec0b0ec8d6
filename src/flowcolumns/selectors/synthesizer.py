"""Selector synthesis: every element belonging to column K of an N-column row."""

from __future__ import annotations

from flowcolumns.model.options import OptionSet
from flowcolumns.model.rule import Selector, SelectorList
from flowcolumns.selectors.sibling_chain import sibling_chain_alternatives


def attribute_alternative(total: int, current: int, attribute_name: str) -> Selector:
    """Match elements whose marker attribute lists the ``N-K`` token."""
    return Selector(f'> [{attribute_name}~="{total}-{current}"]')


def structural_alternative(total: int, current: int, class_name: str) -> Selector:
    """Match the K-th marker element of every run of N siblings."""
    return Selector(f"> .{class_name}:nth-of-type({total}n+{current})")


def column_selectors(total: int, current: int, options: OptionSet) -> SelectorList:
    """Union of the active addressing schemes for column *current* of *total*.

    Alternatives appear in a fixed order: attribute, structural, then the
    sibling chains. With no scheme active the list is empty, which selects
    nothing.
    """
    if total < 1:
        raise ValueError(f"total must be >= 1, got {total}")
    if not 1 <= current <= total:
        raise ValueError(f"current must be between 1 and {total}, got {current}")

    alternatives: list[Selector] = []
    if options.use_attribute_selector:
        alternatives.append(
            attribute_alternative(total, current, options.attribute_name)
        )
    if options.use_structural_selector:
        alternatives.append(structural_alternative(total, current, options.class_name))
    if options.use_sibling_chain_fallback:
        alternatives.extend(
            sibling_chain_alternatives(
                total,
                current,
                options.sibling_chain_max_depth,
                f".{options.class_name}",
            )
        )
    return SelectorList(tuple(alternatives))


def marker_selectors(options: OptionSet) -> SelectorList:
    """The generic column markers, independent of any column index."""
    return SelectorList(
        (Selector(f".{options.class_name}"), Selector(f"[{options.attribute_name}]"))
    )
