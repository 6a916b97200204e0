"""Procedural planar road networks with shortest-path queries."""

from roadgraph.config import GenerationConfig, GraphStats, PathResult, QueryResult
from roadgraph.engine import QueryRunner, RoadNetwork
from roadgraph.graph import RoadGraph

__all__ = [
    "GenerationConfig",
    "GraphStats",
    "PathResult",
    "QueryResult",
    "QueryRunner",
    "RoadGraph",
    "RoadNetwork",
]
