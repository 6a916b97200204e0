"""
Road network facade.

Runs one generation pass from a :class:`GenerationConfig` and exposes the
read interfaces consumed by rendering and UI layers: vertex positions,
adjacency, shortest-path queries and nearest-node lookup.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from roadgraph.config import GenerationConfig, GraphStats, PathResult
from roadgraph.generators import get_generator
from roadgraph.graph import RoadGraph
from roadgraph.pathfinding import find_shortest_path, path_length
from roadgraph.spatial.grid_index import GridIndex

logger = logging.getLogger(__name__)


class RoadNetwork:
    """
    Generated graph plus query entry points.

    Usage
    -----
    >>> network = RoadNetwork(GenerationConfig(node_count=500, seed=7))
    >>> network.generate()
    >>> network.find_shortest_path(0, 42)
    """

    def __init__(self, config: GenerationConfig | None = None) -> None:
        self.config = config or GenerationConfig()
        self._graph: RoadGraph | None = None
        self._index: GridIndex | None = None
        self._generation_seconds = 0.0
        self._degree_bounds: tuple[int, int] | None = (
            self.config.min_degree, self.config.max_degree,
        )

    @classmethod
    def from_graph(
        cls,
        graph: RoadGraph,
        cell_size: float = 10.0,
        map_size: float = 100.0,
        min_degree: int | None = None,
        max_degree: int | None = None,
    ) -> "RoadNetwork":
        """
        Wrap an already built graph (e.g. a hand-made test fixture).

        Degree bounds are optional.  Without them :meth:`stats` leaves
        ``nodes_over_cap`` and ``nodes_below_min`` unset.
        """
        if (min_degree is None) != (max_degree is None):
            raise ValueError("min_degree and max_degree must be given together")
        params: dict[str, Any] = {"cell_size": cell_size, "map_size": map_size}
        if min_degree is not None:
            params.update(min_degree=min_degree, max_degree=max_degree)
        network = cls(GenerationConfig(node_count=max(len(graph), 1), **params))
        if min_degree is None:
            network._degree_bounds = None

        graph.freeze()
        network._graph = graph
        network._index = network._index_for(graph)
        return network

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self) -> RoadGraph:
        """Build the graph described by ``self.config``.  Runs once."""
        if self._graph is not None:
            raise RuntimeError("Network already generated; create a new RoadNetwork")

        cfg = self.config
        GenClass = get_generator(cfg.generator)
        t0 = time.perf_counter()
        graph = GenClass().generate(cfg.node_count, **cfg.generator_params())
        self._generation_seconds = time.perf_counter() - t0

        self._graph = graph
        self._index = self._index_for(graph)
        logger.info(
            "Generated %s network: %d nodes, %d edges in %.2fs",
            cfg.generator, len(graph), graph.number_of_edges(),
            self._generation_seconds,
        )
        return graph

    def _index_for(self, graph: RoadGraph) -> GridIndex:
        """The generator's own grid index, or a fresh one over *graph*."""
        if graph.spatial_index is not None:
            return graph.spatial_index
        return GridIndex(graph.positions, self.config.cell_size, self.config.map_size)

    @property
    def generated(self) -> bool:
        return self._graph is not None

    @property
    def graph(self) -> RoadGraph:
        if self._graph is None:
            raise RuntimeError("No graph generated. Call generate() first.")
        return self._graph

    @property
    def index(self) -> GridIndex:
        if self._index is None:
            raise RuntimeError("No graph generated. Call generate() first.")
        return self._index

    # ------------------------------------------------------------------
    # Read interfaces
    # ------------------------------------------------------------------

    def get_vertices(self) -> list[tuple[float, float, float]]:
        return self.graph.get_vertices()

    def get_adjacency_list(self) -> list[frozenset[int]]:
        return self.graph.get_adjacency_list()

    def find_shortest_path(self, start: int, end: int) -> list[int]:
        """Node indices from *start* to *end*, or ``[]`` if unreachable."""
        graph = self.graph
        return find_shortest_path(graph.coords, graph.adjacency, start, end)

    def route(self, start: int, end: int) -> PathResult:
        """Shortest path together with its length."""
        path = self.find_shortest_path(start, end)
        length = path_length(self.graph.coords, path) if path else None
        return PathResult(start=start, end=end, path=path, length=length)

    def nearest_node(self, point: Any) -> int:
        return self.index.nearest_node(point)

    def nearest_nodes(self, point: Any, k: int = 100) -> list[int]:
        return self.index.nearest_nodes(point, k)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def stats(self) -> GraphStats:
        graph = self.graph
        degrees = [graph.degree(i) for i in range(len(graph))]
        edge_count = graph.number_of_edges()
        over_cap = below_min = None
        if self._degree_bounds is not None:
            lo, hi = self._degree_bounds
            over_cap = sum(1 for d in degrees if d > hi)
            below_min = sum(1 for d in degrees if d < lo)
        return GraphStats(
            generator=graph.metadata.get("generator", "custom"),
            node_count=len(graph),
            edge_count=edge_count,
            mst_edge_count=len(graph.mst_edges),
            augmented_edge_count=edge_count - len(graph.mst_edges),
            components=graph.component_count(),
            min_degree=min(degrees, default=0),
            max_degree=max(degrees, default=0),
            mean_degree=round(sum(degrees) / max(len(graph), 1), 4),
            nodes_over_cap=over_cap,
            nodes_below_min=below_min,
            total_length=round(graph.total_length(), 4),
            generation_seconds=round(self._generation_seconds, 6),
        )
