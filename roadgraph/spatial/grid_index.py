"""Uniform-grid spatial index over node positions."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from roadgraph.graph import planar_positions

Cell = tuple[int, int]


def _planar(point: Any) -> tuple[float, float]:
    """Accept ``(x, z)`` or ``(x, y, z)`` and return ``(x, z)``."""
    if len(point) == 3:
        return float(point[0]), float(point[2])
    return float(point[0]), float(point[1])


class GridIndex:
    """
    Buckets node positions into square cells of side ``cell_size``.

    Cell keys are ``(floor((x + map_size) / cell_size),
    floor((z + map_size) / cell_size))``.  The index is built once from a
    fixed position array and never updated incrementally.

    ``cell_size`` is both the bucket granularity and the largest radius
    :meth:`query` can guarantee to cover, since only the 3x3 block of
    cells around a node is scanned.

    Parameters
    ----------
    positions : array-like, shape (N, 2) or (N, 3)
        ``(x, z)`` or ``(x, y, z)`` node positions.
    cell_size : float
        Side length of one cell.  Must be positive.
    map_size : float
        Half-extent of the map; shifts coordinates so keys start at 0.
    """

    def __init__(self, positions: Any, cell_size: float, map_size: float) -> None:
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.positions = planar_positions(positions)
        self.cell_size = float(cell_size)
        self.map_size = float(map_size)
        self.cells: dict[Cell, list[int]] = {}

        keys = np.floor((self.positions + self.map_size) / self.cell_size).astype(np.int64)
        self._keys: list[Cell] = [(int(cx), int(cz)) for cx, cz in keys]
        for i, key in enumerate(self._keys):
            self.cells.setdefault(key, []).append(i)

    def __len__(self) -> int:
        return len(self._keys)

    # ------------------------------------------------------------------
    # Cell lookup
    # ------------------------------------------------------------------

    def cell_of(self, point: Any) -> Cell:
        """Cell key containing an arbitrary ``(x, z)`` point."""
        x, z = _planar(point)
        return (
            math.floor((x + self.map_size) / self.cell_size),
            math.floor((z + self.map_size) / self.cell_size),
        )

    def cell_of_node(self, i: int) -> Cell:
        return self._keys[i]

    def membership(self) -> dict[Cell, list[int]]:
        """Copy of the cell → node-indices mapping."""
        return {key: list(members) for key, members in self.cells.items()}

    # ------------------------------------------------------------------
    # Proximity queries
    # ------------------------------------------------------------------

    def query(self, i: int) -> list[int]:
        """
        Nodes within ``cell_size`` of node *i*, excluding *i* itself.

        Only the 3x3 neighbourhood of *i*'s cell is scanned; results are
        in ascending index order.
        """
        cx, cz = self._keys[i]
        candidates: list[int] = []
        for dx in (-1, 0, 1):
            for dz in (-1, 0, 1):
                candidates.extend(self.cells.get((cx + dx, cz + dz), ()))
        if not candidates:
            return []

        idx = np.fromiter(candidates, dtype=np.int64, count=len(candidates))
        delta = self.positions[idx] - self.positions[i]
        dist = np.hypot(delta[:, 0], delta[:, 1])
        keep = idx[(dist <= self.cell_size) & (idx != i)]
        keep.sort()
        return keep.tolist()

    def nodes_in_box(self, xmin: float, zmin: float, xmax: float, zmax: float) -> list[int]:
        """Every node whose cell overlaps the axis-aligned box."""
        x0, z0 = self.cell_of((xmin, zmin))
        x1, z1 = self.cell_of((xmax, zmax))
        found: list[int] = []
        if (x1 - x0 + 1) * (z1 - z0 + 1) > len(self.cells):
            for (cx, cz), members in self.cells.items():
                if x0 <= cx <= x1 and z0 <= cz <= z1:
                    found.extend(members)
            return found
        for cx in range(x0, x1 + 1):
            for cz in range(z0, z1 + 1):
                found.extend(self.cells.get((cx, cz), ()))
        return found

    def nearest_nodes(self, point: Any, k: int = 100) -> list[int]:
        """
        Up to *k* node indices closest to ``(x, z)`` *point*.

        Sorted by ascending distance, ties broken by index.
        """
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        n = len(self.positions)
        if n == 0:
            return []
        target = np.array(_planar(point))
        delta = self.positions - target
        dist = np.hypot(delta[:, 0], delta[:, 1])
        order = np.lexsort((np.arange(n), dist))
        return order[:k].tolist()

    def nearest_node(self, point: Any) -> int:
        nearest = self.nearest_nodes(point, k=1)
        if not nearest:
            raise ValueError("Cannot search an empty index")
        return nearest[0]
