"""
Hypothesis strategies for generating random partial orders.
"""

from hypothesis import strategies as st
from finpartord.backends import make_order


def declared_pairs(elements=None, max_size=20):
    """
    Generate lists of (lo, hi) pairs that never contradict each other.

    Each pair is ordered by the elements' natural order, the same way for
    every pair, so adding them in any sequence cannot close a cycle.

    Args:
        elements: Strategy for sortable elements (defaults to small ints)
        max_size: Maximum number of pairs

    Returns:
        A hypothesis strategy that generates lists of pairs
    """
    if elements is None:
        elements = st.integers(min_value=0, max_value=15)
    return st.lists(st.tuples(elements, elements), max_size=max_size).map(
        lambda pairs: [(min(x, y), max(x, y)) for (x, y) in pairs]
    )


def orders(backend, elements=None, max_size=20):
    """
    Generate partial orders of the given backend.

    Args:
        backend: Backend name or FinPartOrd subclass, as for make_order
        elements: Strategy for sortable elements (defaults to small ints)
        max_size: Maximum number of declared pairs

    Returns:
        A hypothesis strategy that generates populated orders
    """
    def build(pairs):
        order = make_order(backend)
        for (lo, hi) in pairs:
            order = order.add(lo, hi)
        return order

    return declared_pairs(elements, max_size).map(build)
