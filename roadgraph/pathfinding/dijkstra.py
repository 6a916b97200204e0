"""Single-source shortest paths with Euclidean edge weights."""

from __future__ import annotations

import heapq
import math
from typing import Any, Iterable, Sequence

import numpy as np


def _as_coords(positions: Any) -> Sequence[Sequence[float]]:
    if isinstance(positions, np.ndarray):
        return positions.tolist()
    return positions


def _distance(coords: Sequence[Sequence[float]], a: int, b: int) -> float:
    pa, pb = coords[a], coords[b]
    return math.hypot(pa[0] - pb[0], pa[-1] - pb[-1])


def find_shortest_path(
    positions: Any,
    adjacency: Sequence[Iterable[int]],
    start: int,
    end: int,
) -> list[int]:
    """
    Lowest-cost path from *start* to *end* by Dijkstra's algorithm.

    Parameters
    ----------
    positions : array-like
        Per-node ``(x, z)`` or ``(x, y, z)`` coordinates.
    adjacency : sequence of iterables
        Neighbour indices per node, index-aligned with *positions*.
    start, end : int
        Node indices in ``[0, N)``.

    Returns
    -------
    list[int]
        Node indices from *start* to *end* inclusive, ``[start]`` when
        they are equal, or ``[]`` when *end* is unreachable.

    Raises
    ------
    ValueError
        If either index is out of range.
    """
    n = len(adjacency)
    for label, node in (("start", start), ("end", end)):
        if not 0 <= node < n:
            raise ValueError(f"{label} node {node} out of range [0, {n})")
    if start == end:
        return [start]

    coords = _as_coords(positions)
    dist: dict[int, float] = {start: 0.0}
    previous: dict[int, int] = {}
    visited: set[int] = set()
    frontier: list[tuple[float, int]] = [(0.0, start)]

    while frontier:
        d, current = heapq.heappop(frontier)
        if current in visited:
            continue
        if current == end:
            break
        visited.add(current)

        for neighbor in adjacency[current]:
            if neighbor in visited:
                continue
            alt = d + _distance(coords, current, neighbor)
            if alt < dist.get(neighbor, math.inf):
                dist[neighbor] = alt
                previous[neighbor] = current
                heapq.heappush(frontier, (alt, neighbor))

    if end not in previous:
        return []

    path = [end]
    while path[-1] != start:
        path.append(previous[path[-1]])
    path.reverse()
    return path


def path_length(positions: Any, path: Sequence[int]) -> float:
    """Summed Euclidean length along *path* (0.0 for fewer than two nodes)."""
    coords = _as_coords(positions)
    return sum((_distance(coords, a, b) for a, b in zip(path, path[1:])), 0.0)
