"""Spatial indexing for node positions."""

from roadgraph.spatial.grid_index import GridIndex

__all__ = ["GridIndex"]
