"""Road network generator: spanning tree plus non-crossing shortcuts."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from roadgraph.generators.augment import augment_edges
from roadgraph.generators.base import BaseGenerator
from roadgraph.generators.mst import build_mst
from roadgraph.graph import RoadGraph
from roadgraph.spatial.grid_index import GridIndex

logger = logging.getLogger(__name__)


class RoadNetworkGenerator(BaseGenerator):
    """
    Scatters nodes uniformly, joins them with a Euclidean minimum
    spanning tree over nearby pairs, then adds short extra edges up to a
    degree cap.

    The tree guarantees connectivity whenever ``cell_size`` is large
    enough for every node to reach the rest transitively.  Tree edges are
    never removed, so a node may end up above ``max_degree`` if the tree
    alone puts it there.

    Parameters
    ----------
    map_size : float, default 100.0
        Half-extent of the square map.
    cell_size : float, default 10.0
        Grid cell size and maximum edge length.
    min_degree : int, default 2
        Lower degree bound (validated against ``max_degree``).
    max_degree : int, default 5
        Degree cap for augmentation.
    max_attempts_per_node : int, default 10
        Random candidates tried per node per augmentation pass.
    prevent_intersections : bool, default True
        Reject augmentation edges that cross an existing edge.
    augmentation_passes : int, default 1
        How many augmentation passes to run.
    seed : int | None
        Random seed for reproducibility.
    """

    name = "road_network"

    def generate(self, size: int, **params: Any) -> RoadGraph:
        map_size = params.get("map_size", 100.0)
        cell_size = params.get("cell_size", 10.0)
        min_degree = params.get("min_degree", 2)
        max_degree = params.get("max_degree", 5)
        max_attempts = params.get("max_attempts_per_node", 10)
        prevent = params.get("prevent_intersections", True)
        passes = params.get("augmentation_passes", 1)
        seed = params.get("seed", None)

        self._check_degree_bounds(min_degree, max_degree)
        if max_attempts < 1:
            raise ValueError(f"max_attempts_per_node must be >= 1, got {max_attempts}")

        rng = np.random.default_rng(seed)
        positions = self.place_nodes(size, map_size, rng)
        graph = RoadGraph(
            positions,
            metadata={
                "generator": self.name,
                "size": size,
                "params": {
                    "map_size": map_size,
                    "cell_size": cell_size,
                    "min_degree": min_degree,
                    "max_degree": max_degree,
                    "max_attempts_per_node": max_attempts,
                    "prevent_intersections": prevent,
                    "augmentation_passes": passes,
                    "seed": seed,
                },
            },
        )
        logger.info("Placed %d nodes in [-%.1f, %.1f]^2", size, map_size, map_size)

        index = GridIndex(graph.positions, cell_size, map_size)
        graph.spatial_index = index
        logger.info("Grid index built: %d non-empty cells", len(index.cells))

        build_mst(graph, index)

        augmented: list[tuple[int, int]] = []
        for _ in range(passes):
            added = augment_edges(
                graph, index, rng,
                max_degree=max_degree,
                max_attempts_per_node=max_attempts,
                prevent_intersections=prevent,
            )
            augmented.extend(added)
            if not added:
                break
        graph.metadata["augmented_edges"] = len(augmented)
        logger.info(
            "Augmentation added %d edges (%d total)",
            len(augmented), graph.number_of_edges(),
        )

        graph.freeze()
        return graph
