"""Container for a generated planar graph: node positions plus adjacency."""

from __future__ import annotations

import math
from typing import Any, Iterable, Sequence

import networkx as nx
import numpy as np


def planar_positions(positions: Any) -> np.ndarray:
    """
    Coerce node positions to an ``(N, 2)`` float array of ``(x, z)``.

    Accepts ``(N, 2)`` ``(x, z)`` rows or ``(N, 3)`` ``(x, y, z)`` rows, as
    returned by :meth:`RoadGraph.get_vertices`.  Anything else raises
    ``ValueError``.
    """
    pts = np.array(positions, dtype=float)
    if pts.size == 0:
        return np.empty((0, 2), dtype=float)
    if pts.ndim != 2 or pts.shape[1] not in (2, 3):
        raise ValueError(
            f"positions must have shape (N, 2) or (N, 3), got {pts.shape}"
        )
    if pts.shape[1] == 3:
        pts = pts[:, [0, 2]]
    return pts


class RoadGraph:
    """
    Undirected graph embedded in the (x, z) plane.

    Node identity is the zero-based integer index into ``positions``.
    Edge weights are never stored; they are derived from the Euclidean
    distance between endpoint positions.

    Parameters
    ----------
    positions : array-like, shape (N, 2) or (N, 3)
        ``(x, z)`` or ``(x, y, z)`` coordinate of every node.  Copied and
        made read-only.
    metadata : dict | None
        Free-form generation info (``generator``, ``size``, ``params``).

    Generators also leave the grid index they built on ``spatial_index``
    so later consumers can reuse it.
    """

    def __init__(self, positions: Any, metadata: dict | None = None) -> None:
        pts = planar_positions(positions)
        pts.setflags(write=False)
        self.positions: np.ndarray = pts
        self.adjacency: list[set[int]] = [set() for _ in range(len(pts))]
        self.metadata: dict[str, Any] = metadata or {}
        self.mst_edges: list[tuple[int, int]] = []
        self.spatial_index: Any = None
        self._coords: list[list[float]] = pts.tolist()
        self._frozen = False

    def __len__(self) -> int:
        return len(self.adjacency)

    def __repr__(self) -> str:
        return (
            f"<RoadGraph nodes={len(self)} edges={self.number_of_edges()} "
            f"frozen={self._frozen}>"
        )

    # ------------------------------------------------------------------
    # Mutation (generation time only)
    # ------------------------------------------------------------------

    def add_edge(self, a: int, b: int) -> bool:
        """
        Insert the undirected edge ``(a, b)``.

        Returns True if the edge was new, False if it already existed.
        """
        if self._frozen:
            raise RuntimeError("Graph is frozen; edges cannot be added after generation")
        self._check_node(a)
        self._check_node(b)
        if a == b:
            raise ValueError(f"Self-loop on node {a} is not allowed")
        u, v = (a, b) if a < b else (b, a)
        if v in self.adjacency[u]:
            return False
        self.adjacency[u].add(v)
        self.adjacency[v].add(u)
        return True

    def freeze(self) -> None:
        """Mark generation as finished; later ``add_edge`` calls are rejected."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Read interfaces
    # ------------------------------------------------------------------

    def get_vertices(self) -> list[tuple[float, float, float]]:
        """Node positions as ``(x, y, z)`` with ``y`` fixed at 0."""
        return [(x, 0.0, z) for x, z in self._coords]

    def get_adjacency_list(self) -> list[frozenset[int]]:
        """Neighbor set per node, index-aligned with :meth:`get_vertices`."""
        return [frozenset(nbrs) for nbrs in self.adjacency]

    @property
    def coords(self) -> list[list[float]]:
        """Positions as plain Python floats (fast scalar access)."""
        return self._coords

    def neighbors(self, i: int) -> set[int]:
        return self.adjacency[i]

    def degree(self, i: int) -> int:
        return len(self.adjacency[i])

    def has_edge(self, a: int, b: int) -> bool:
        return b in self.adjacency[a]

    def edges(self) -> list[tuple[int, int]]:
        """All edges as canonical ``(low, high)`` pairs, sorted."""
        return [
            (u, v)
            for u, nbrs in enumerate(self.adjacency)
            for v in sorted(nbrs)
            if u < v
        ]

    def number_of_edges(self) -> int:
        return sum(len(nbrs) for nbrs in self.adjacency) // 2

    def edge_length(self, a: int, b: int) -> float:
        pa, pb = self._coords[a], self._coords[b]
        return math.hypot(pa[0] - pb[0], pa[1] - pb[1])

    def total_length(self, edges: Iterable[tuple[int, int]] | None = None) -> float:
        """Summed Euclidean length of *edges* (default: every edge)."""
        if edges is None:
            edges = self.edges()
        return sum(self.edge_length(a, b) for a, b in edges)

    def to_networkx(self) -> nx.Graph:
        """Convert to a weighted ``networkx.Graph`` (node attr ``pos``)."""
        G = nx.Graph()
        for i, (x, z) in enumerate(self._coords):
            G.add_node(i, pos=(x, z))
        for u, v in self.edges():
            G.add_edge(u, v, weight=self.edge_length(u, v))
        return G

    def component_count(self) -> int:
        return nx.number_connected_components(self.to_networkx())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_node(self, i: int) -> None:
        if not 0 <= i < len(self.adjacency):
            raise ValueError(f"Node index {i} out of range [0, {len(self.adjacency)})")


def from_edges(
    positions: Any,
    edges: Sequence[tuple[int, int]],
    metadata: dict | None = None,
) -> RoadGraph:
    """Build a graph from explicit positions and an edge list."""
    graph = RoadGraph(positions, metadata=metadata)
    for a, b in edges:
        graph.add_edge(a, b)
    return graph
