from __future__ import annotations

import logging
from typing import NamedTuple

from finpartord.errors import AntisymmetryError
from finpartord.order import FinPartOrd

logger = logging.getLogger(__name__)


class Pair(NamedTuple):
    lo: object
    hi: object


class PairPartOrd(FinPartOrd):
    """
    A finite partial order stored as a list of declared pairs.

    Pairs that follow by reflexivity or transitivity are never stored.
    Every add revalidates the whole order, so the stored pairs always obey
    antisymmetry. Memory is linear in the number of declared pairs, but
    queries scan the list repeatedly. Elements only need to support ==.
    """

    def __init__(self):
        self._pairs = []

    @classmethod
    def _from_pairs(cls, pairs):
        # Trusted construction: callers guarantee the pairs already form a
        # partial order.
        ppo = cls()
        ppo._pairs = [Pair(*p) for p in pairs]
        return ppo

    @classmethod
    def empty(cls):
        ppo = cls()
        assert ppo.valid()
        return ppo

    def add(self, lo, hi):
        if lo == hi:
            return self
        pair = Pair(lo, hi)
        if pair in self._pairs:
            return self
        self._pairs.append(pair)
        try:
            ok = self.valid()
        except BaseException:
            self._pairs.pop()
            raise
        if not ok:
            self._pairs.pop()
            logger.debug("Rejected %r <= %r: antisymmetry violation", lo, hi)
            raise AntisymmetryError(lo, hi)
        return self

    def lt(self, lo, hi):
        # Depth-first chase along declared pairs. Pairs are remembered by
        # position so each one is expanded at most once.
        seen = set()
        stack = [lo]
        while stack:
            current = stack.pop()
            for i, p in enumerate(self._pairs):
                if i in seen or p.lo != current:
                    continue
                if p.hi == hi:
                    return True
                seen.add(i)
                stack.append(p.hi)
        return False

    def valid(self):
        """Does the stored list of pairs describe a partial order?"""
        for p in self._pairs:
            if p.lo == p.hi:
                return False
            if self.lt(p.lo, p.lo) or self.lt(p.hi, p.hi):
                return False
        return True

    def pairs(self):
        return tuple(self._pairs)

    def copy(self):
        return PairPartOrd._from_pairs(self._pairs)

    def __len__(self):
        return len(self._pairs)

    def __repr__(self):
        pairs_str = ", ".join(f"{p.lo!r} < {p.hi!r}" for p in self._pairs)
        return f"PairPartOrd({{{pairs_str}}})"
