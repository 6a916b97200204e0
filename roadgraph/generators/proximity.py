"""Random proximity graph generator (no spanning tree)."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from roadgraph.generators.base import BaseGenerator
from roadgraph.graph import RoadGraph
from roadgraph.spatial.grid_index import GridIndex

logger = logging.getLogger(__name__)


class ProximityGenerator(BaseGenerator):
    """
    Links every node to a random number of its grid neighbours.

    Nodes are visited in index order.  Each draws a target degree in
    ``[min_degree, max_degree]`` and connects to random nearby nodes until
    it reaches the target or runs out of candidates.  Partners are not
    capped, so their degree can exceed ``max_degree``, and nothing
    guarantees the result is connected.

    Parameters
    ----------
    map_size : float, default 100.0
        Half-extent of the square map.
    cell_size : float, default 10.0
        Grid cell size and maximum edge length.
    min_degree : int, default 2
    max_degree : int, default 5
    seed : int | None
        Random seed for reproducibility.
    """

    name = "proximity"

    def generate(self, size: int, **params: Any) -> RoadGraph:
        map_size = params.get("map_size", 100.0)
        cell_size = params.get("cell_size", 10.0)
        min_degree = params.get("min_degree", 2)
        max_degree = params.get("max_degree", 5)
        seed = params.get("seed", None)

        self._check_degree_bounds(min_degree, max_degree)

        rng = np.random.default_rng(seed)
        graph = RoadGraph(
            self.place_nodes(size, map_size, rng),
            metadata={
                "generator": self.name,
                "size": size,
                "params": {
                    "map_size": map_size,
                    "cell_size": cell_size,
                    "min_degree": min_degree,
                    "max_degree": max_degree,
                    "seed": seed,
                },
            },
        )
        index = GridIndex(graph.positions, cell_size, map_size)
        graph.spatial_index = index

        for i in range(size):
            target = min(int(rng.integers(min_degree, max_degree + 1)), size - 1)
            nearby = index.query(i)
            while graph.degree(i) < target and nearby:
                j = nearby.pop(int(rng.integers(len(nearby))))
                if not graph.has_edge(i, j):
                    graph.add_edge(i, j)

        logger.info(
            "Proximity graph: %d nodes, %d edges",
            size, graph.number_of_edges(),
        )
        graph.freeze()
        return graph
