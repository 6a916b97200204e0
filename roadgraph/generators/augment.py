"""Degree-bounded edge augmentation on top of the spanning tree."""

from __future__ import annotations

import logging

import numpy as np

from roadgraph.generators.geometry import segments_intersect
from roadgraph.graph import RoadGraph
from roadgraph.spatial.grid_index import GridIndex

logger = logging.getLogger(__name__)


def crosses_existing(graph: RoadGraph, index: GridIndex, a: int, b: int) -> bool:
    """
    True if the segment ``a-b`` crosses any edge already in *graph*.

    Only edges incident to nodes in the cells overlapping the segment's
    bounding box, grown by one cell on each side, are tested.  Edges
    sharing an endpoint with ``a-b`` are skipped.
    """
    coords = graph.coords
    pa, pb = coords[a], coords[b]
    pad = index.cell_size
    xmin, xmax = min(pa[0], pb[0]) - pad, max(pa[0], pb[0]) + pad
    zmin, zmax = min(pa[1], pb[1]) - pad, max(pa[1], pb[1]) + pad

    seen: set[tuple[int, int]] = set()
    for u in index.nodes_in_box(xmin, zmin, xmax, zmax):
        if u == a or u == b:
            continue
        for v in graph.adjacency[u]:
            if v == a or v == b:
                continue
            key = (u, v) if u < v else (v, u)
            if key in seen:
                continue
            seen.add(key)
            if segments_intersect(pa, pb, coords[u], coords[v]):
                return True
    return False


def augment_edges(
    graph: RoadGraph,
    index: GridIndex,
    rng: np.random.Generator,
    max_degree: int,
    max_attempts_per_node: int,
    prevent_intersections: bool = True,
) -> list[tuple[int, int]]:
    """
    Add at most one extra edge per node, visiting nodes in shuffled order.

    A node already at ``max_degree`` is skipped.  Candidates come from
    ``index.query`` and must not be adjacent already nor at ``max_degree``
    themselves.  Up to ``max_attempts_per_node`` random candidates are
    tried; the first one whose segment crosses no existing edge (when
    ``prevent_intersections`` is set) is accepted.

    Returns the edges added in this pass as ``(low, high)`` pairs.
    """
    added: list[tuple[int, int]] = []
    for i in rng.permutation(len(graph)).tolist():
        if graph.degree(i) >= max_degree:
            continue
        candidates = [
            j for j in index.query(i)
            if not graph.has_edge(i, j) and graph.degree(j) < max_degree
        ]
        if not candidates:
            continue

        order = rng.permutation(len(candidates))[:max_attempts_per_node]
        for k in order.tolist():
            j = candidates[k]
            if prevent_intersections and crosses_existing(graph, index, i, j):
                continue
            graph.add_edge(i, j)
            added.append((i, j) if i < j else (j, i))
            break

    logger.debug("Augmentation pass added %d edges", len(added))
    return added
