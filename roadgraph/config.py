"""Pydantic models defining data contracts for roadgraph."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, computed_field, model_validator


# ---------------------------------------------------------------------------
# Generation configuration
# ---------------------------------------------------------------------------

class GenerationConfig(BaseModel):
    """Flat parameter set for one generation pass."""

    generator: str = Field(default="road_network", description="Registered generator name")
    node_count: int = Field(default=10_000, ge=1, description="Number of nodes to place")
    map_size: float = Field(default=100.0, gt=0, description="Half-extent of the square map")
    min_degree: int = Field(default=2, ge=0)
    max_degree: int = Field(default=5, ge=1)
    cell_size: float = Field(
        default=10.0,
        gt=0,
        description="Grid cell size; also the maximum connection radius",
    )
    max_attempts_per_node: int = Field(default=10, ge=1)
    prevent_intersections: bool = True
    augmentation_passes: int = Field(default=1, ge=0)
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _check_degree_bounds(self) -> "GenerationConfig":
        if self.min_degree > self.max_degree:
            raise ValueError(
                f"min_degree ({self.min_degree}) must not exceed "
                f"max_degree ({self.max_degree})"
            )
        return self

    def generator_params(self) -> dict:
        """Keyword params forwarded to ``BaseGenerator.generate``."""
        return self.model_dump(exclude={"generator", "node_count"})


# ---------------------------------------------------------------------------
# Result records
# ---------------------------------------------------------------------------

class PathResult(BaseModel):
    """Outcome of a single shortest-path query."""
    start: int
    end: int
    path: list[int] = Field(default_factory=list)
    length: Optional[float] = None

    @computed_field
    @property
    def found(self) -> bool:
        return bool(self.path)

    @computed_field
    @property
    def hops(self) -> int:
        return max(len(self.path) - 1, 0)


class QueryResult(BaseModel):
    """A single batch measurement (one start/end pair)."""
    start: int
    end: int
    found: bool = False
    hops: int = 0
    path_length: Optional[float] = None
    wall_time_seconds: float = 0.0


class GraphStats(BaseModel):
    """
    Summary of a generated graph.

    ``augmented_edge_count`` is every edge outside the spanning tree.
    ``nodes_over_cap`` and ``nodes_below_min`` stay None when the degree
    bounds the graph was built with are unknown.
    """
    generator: str
    node_count: int
    edge_count: int
    mst_edge_count: int = 0
    augmented_edge_count: int = 0
    components: int
    min_degree: int
    max_degree: int
    mean_degree: float
    nodes_over_cap: Optional[int] = None
    nodes_below_min: Optional[int] = None
    total_length: float = 0.0
    generation_seconds: float = 0.0
