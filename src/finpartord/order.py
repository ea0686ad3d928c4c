from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class FinPartOrd(ABC, Generic[T]):
    """
    Interface for finite partial orders.

    Laws, for every reachable instance and all elements x, y, z:

    - Reflexivity: le(x, x)
    - Antisymmetry: le(x, y) and le(y, x) implies x == y
    - Transitivity: le(x, y) and le(y, z) implies le(x, z)
    - Compatibility: le(x, y) iff x == y or lt(x, y)
    - Add/less: after add(x, y) succeeds, le(x, y)

    add updates the receiver and returns it, so `order = order.add(x, y)`
    chains. A failed add raises StructuralViolation and leaves the receiver
    unchanged. Use copy() to keep an independent snapshot.
    """

    @classmethod
    @abstractmethod
    def empty(cls) -> FinPartOrd[T]:
        """Order with no declared facts."""

    @abstractmethod
    def add(self, lo: T, hi: T) -> FinPartOrd[T]:
        """Declare that lo precedes hi."""

    @abstractmethod
    def lt(self, lo: T, hi: T) -> bool:
        """
        Check if one element is less than another.

        Elements that were never added are incomparable to everything.
        May return True when lo == hi; use le for non-strict comparison.
        """

    def le(self, lo: T, hi: T) -> bool:
        if lo == hi:
            return True
        return self.lt(lo, hi)

    @abstractmethod
    def copy(self) -> FinPartOrd[T]:
        """Independent copy of this order."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of declared pairs held by the representation."""

    def is_empty(self) -> bool:
        return len(self) == 0

    def __copy__(self):
        return self.copy()
