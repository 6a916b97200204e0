"""Generation facade and batch query engine."""

from roadgraph.engine.network import RoadNetwork
from roadgraph.engine.runner import QueryRunner

__all__ = ["QueryRunner", "RoadNetwork"]
