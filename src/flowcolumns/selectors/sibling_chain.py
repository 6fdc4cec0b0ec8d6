"""Sibling-chain fallback: nth-child matching from adjacency combinators.

For targets without structural pseudo-classes, the n-th child is reached by
spelling out every preceding sibling::

    .column:first-child + .column + .column      (n = 3)

Output grows linearly with n, so callers bound the number of chains.
"""

from __future__ import annotations

from flowcolumns.model.rule import Selector


def nth_child_chain(n: int, element_selector: str) -> str:
    """Return a selector matching the *n*-th *element_selector* child."""
    chain = f"{element_selector}:first-child"
    if n <= 1:
        return chain
    return chain + f" + {element_selector}" * (n - 1)


def sibling_chain_alternatives(
    total: int, current: int, depth: int, element_selector: str
) -> list[Selector]:
    """Chains for positions ``current, current + total, ...``, *depth* of them.

    Elements past the last chain keep the generic marker styling.
    """
    return [
        Selector(f"> {nth_child_chain(current + step * total, element_selector)}")
        for step in range(depth)
    ]
