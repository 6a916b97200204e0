"""Minimum-spanning-tree pass: candidate edges, union-find and Kruskal."""

from __future__ import annotations

import logging

import numpy as np

from roadgraph.graph import RoadGraph
from roadgraph.spatial.grid_index import GridIndex

logger = logging.getLogger(__name__)


class UnionFind:
    """Disjoint sets over ``0..n-1`` with path compression."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.components = n

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Attach *a*'s root under *b*'s.  False if already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        self.parent[ra] = rb
        self.components -= 1
        return True


def candidate_edges(graph: RoadGraph, index: GridIndex) -> list[tuple[int, int]]:
    """
    Unordered node pairs within ``index.cell_size`` of each other.

    Each pair appears once as ``(i, j)`` with ``i < j``, sorted by
    ``(length, i, j)`` so equal-length edges have a fixed order.
    """
    pairs: list[tuple[int, int]] = []
    for i in range(len(graph)):
        pairs.extend((i, j) for j in index.query(i) if j > i)
    if not pairs:
        return []

    arr = np.array(pairs, dtype=np.int64)
    delta = graph.positions[arr[:, 0]] - graph.positions[arr[:, 1]]
    lengths = np.hypot(delta[:, 0], delta[:, 1])
    order = np.lexsort((arr[:, 1], arr[:, 0], lengths))
    return [(int(i), int(j)) for i, j in arr[order]]


def build_mst(graph: RoadGraph, index: GridIndex) -> list[tuple[int, int]]:
    """
    Kruskal's algorithm over the proximity candidates.

    Accepted edges are added to *graph* and returned in acceptance order.
    If the candidates cannot join every node, the result is a spanning
    forest and the graph stays disconnected.
    """
    n = len(graph)
    uf = UnionFind(n)
    accepted: list[tuple[int, int]] = []
    candidates = candidate_edges(graph, index)

    for a, b in candidates:
        if uf.components == 1:
            break
        if uf.union(a, b):
            graph.add_edge(a, b)
            accepted.append((a, b))

    logger.info(
        "MST accepted %d of %d candidate edges (%d component(s))",
        len(accepted), len(candidates), uf.components,
    )
    if uf.components > 1:
        logger.warning(
            "Candidate radius %.3f leaves %d disconnected components",
            index.cell_size, uf.components,
        )
    graph.mst_edges = list(accepted)
    return accepted
