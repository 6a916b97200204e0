"""Abstract base class for all graph generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from roadgraph.graph import RoadGraph


class BaseGenerator(ABC):
    """
    Base class for planar graph generators.

    Every generator produces a :class:`~roadgraph.graph.RoadGraph` whose
    ``metadata`` records how it was built::

        {
            "generator": "road_network",
            "size": 10000,
            "params": {"map_size": 100.0, "cell_size": 10.0, ...},
        }
    """

    name: str = "base"

    @abstractmethod
    def generate(self, size: int, **params: Any) -> RoadGraph:
        """
        Generate a graph.

        Parameters
        ----------
        size : int
            Number of nodes.
        **params
            Generator-specific parameters.

        Returns
        -------
        RoadGraph
            Frozen graph with positions and adjacency filled in.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"

    # ------------------------------------------------------------------
    # Helpers shared by all generators
    # ------------------------------------------------------------------

    @staticmethod
    def place_nodes(size: int, map_size: float, rng: np.random.Generator) -> np.ndarray:
        """Uniform ``(x, z)`` samples in ``[-map_size, map_size]^2``."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        if map_size <= 0:
            raise ValueError(f"map_size must be positive, got {map_size}")
        return rng.uniform(-map_size, map_size, size=(size, 2))

    @staticmethod
    def _check_degree_bounds(min_degree: int, max_degree: int) -> None:
        if min_degree < 0:
            raise ValueError(f"min_degree must be non-negative, got {min_degree}")
        if min_degree > max_degree:
            raise ValueError(
                f"min_degree ({min_degree}) must not exceed max_degree ({max_degree})"
            )
