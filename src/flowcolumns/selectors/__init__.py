from flowcolumns.selectors.sibling_chain import nth_child_chain, sibling_chain_alternatives
from flowcolumns.selectors.synthesizer import (
    attribute_alternative,
    column_selectors,
    marker_selectors,
    structural_alternative,
)

__all__ = [
    "attribute_alternative",
    "column_selectors",
    "marker_selectors",
    "nth_child_chain",
    "sibling_chain_alternatives",
    "structural_alternative",
]
