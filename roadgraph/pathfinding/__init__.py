"""Shortest-path queries over generated graphs."""

from roadgraph.pathfinding.dijkstra import find_shortest_path, path_length

__all__ = ["find_shortest_path", "path_length"]
