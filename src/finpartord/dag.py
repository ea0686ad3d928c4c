from __future__ import annotations

import logging

import networkx as nx

from finpartord.errors import WouldCycle
from finpartord.order import FinPartOrd

logger = logging.getLogger(__name__)


class Dag:
    """
    A directed acyclic graph over integer node ids.

    Each node carries a payload under the `value` attribute. add_edge
    refuses any edge that would close a cycle and leaves the graph untouched
    when it does.
    """

    def __init__(self):
        self.graph = nx.DiGraph()

    def add_node(self, value):
        idx = self.graph.number_of_nodes()
        self.graph.add_node(idx, value=value)
        return idx

    def value(self, idx):
        return self.graph.nodes[idx]["value"]

    def reaches(self, src, dst):
        for n in nx.dfs_preorder_nodes(self.graph, src):
            if n == dst:
                return True
        return False

    def add_edge(self, a, b):
        if self.reaches(b, a):
            raise WouldCycle(self.value(a), self.value(b))
        self.graph.add_edge(a, b)

    def edge_count(self):
        return self.graph.number_of_edges()

    def edges(self):
        return [(self.value(a), self.value(b)) for (a, b) in self.graph.edges]

    def copy(self):
        dag = Dag()
        dag.graph = self.graph.copy()
        return dag


class DagPartOrd(FinPartOrd):
    """
    A finite partial order stored as a DAG.

    Edges that follow by reflexivity or transitivity are never stored. The
    graph rejects any edge that would close a cycle, so the edges always
    obey antisymmetry. Elements must be hashable: each distinct element is
    mapped to its node through an identity index, and the first element
    seen for a given key is the one kept as the node's value.
    """

    def __init__(self):
        self.dag = Dag()
        self.ids = {}

    @classmethod
    def empty(cls):
        return cls()

    def _node(self, value):
        idx = self.ids.get(value)
        if idx is None:
            idx = self.dag.add_node(value)
            self.ids[value] = idx
            logger.debug("New node %d for %r", idx, value)
        return idx

    def add(self, lo, hi):
        if lo == hi:
            return self
        # Fresh nodes cannot close a cycle, so a rejected edge never leaves
        # dangling nodes behind.
        lo_idx = self._node(lo)
        hi_idx = self._node(hi)
        try:
            self.dag.add_edge(lo_idx, hi_idx)
        except WouldCycle:
            logger.debug("Rejected %r <= %r: would introduce a cycle", lo, hi)
            raise
        return self

    def lt(self, lo, hi):
        lo_idx = self.ids.get(lo)
        hi_idx = self.ids.get(hi)
        if lo_idx is None or hi_idx is None or lo_idx == hi_idx:
            return False
        return self.dag.reaches(lo_idx, hi_idx)

    def edges(self):
        return self.dag.edges()

    def copy(self):
        dpo = DagPartOrd()
        dpo.dag = self.dag.copy()
        dpo.ids = dict(self.ids)
        return dpo

    def __len__(self):
        return self.dag.edge_count()

    def __repr__(self):
        edges_str = ", ".join(f"{lo!r} < {hi!r}" for lo, hi in self.edges())
        return f"DagPartOrd({{{edges_str}}})"
