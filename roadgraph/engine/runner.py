"""
Batch query engine.

Issues many shortest-path queries against a generated network, times
each one, and produces a pandas DataFrame of results.
"""

from __future__ import annotations

import logging
import time
from typing import Iterable, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from roadgraph.config import QueryResult
from roadgraph.engine.network import RoadNetwork
from roadgraph.pathfinding import path_length

logger = logging.getLogger(__name__)


class QueryRunner:
    """
    Runs shortest-path queries in bulk.

    Usage
    -----
    >>> runner = QueryRunner(network)
    >>> df = runner.run(count=200, seed=1)
    """

    def __init__(self, network: RoadNetwork) -> None:
        self.network = network

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def random_pairs(self, count: int, seed: Optional[int] = None) -> list[tuple[int, int]]:
        """Draw *count* uniformly random ``(start, end)`` node pairs."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        n = len(self.network.graph)
        rng = np.random.default_rng(seed)
        draws = rng.integers(0, n, size=(count, 2))
        return [(int(a), int(b)) for a, b in draws]

    def run(
        self,
        pairs: Iterable[tuple[int, int]] | None = None,
        count: int = 100,
        seed: Optional[int] = None,
        progress: bool = False,
    ) -> pd.DataFrame:
        """
        Execute the queries and return one row per pair.

        Parameters
        ----------
        pairs : iterable of (int, int) | None
            Explicit ``(start, end)`` pairs.  When None, *count* random
            pairs are drawn using *seed*.
        progress : bool
            Show a tqdm progress bar.
        """
        if not self.network.generated:
            raise RuntimeError("No graph generated. Call RoadNetwork.generate() first.")

        pairs = list(pairs) if pairs is not None else self.random_pairs(count, seed)
        coords = self.network.graph.coords
        records: list[QueryResult] = []

        pbar = tqdm(total=len(pairs), desc="Path queries", unit="query") if progress else None
        for start, end in pairs:
            t0 = time.perf_counter()
            path = self.network.find_shortest_path(start, end)
            wall_time = time.perf_counter() - t0

            records.append(QueryResult(
                start=start,
                end=end,
                found=bool(path),
                hops=max(len(path) - 1, 0),
                path_length=round(path_length(coords, path), 6) if path else None,
                wall_time_seconds=round(wall_time, 6),
            ))
            if pbar:
                pbar.update(1)
        if pbar:
            pbar.close()

        df = pd.DataFrame(
            [r.model_dump() for r in records],
            columns=list(QueryResult.model_fields),
        )
        logger.info(
            "Query batch complete: %d queries, %d without a path",
            len(df), int((~df["found"]).sum()) if len(df) else 0,
        )
        return df
