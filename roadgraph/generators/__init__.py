"""Graph generators for planar road networks."""

from roadgraph.generators.base import BaseGenerator
from roadgraph.generators.proximity import ProximityGenerator
from roadgraph.generators.road_network import RoadNetworkGenerator

# Registry: name → class
GENERATOR_REGISTRY: dict[str, type[BaseGenerator]] = {
    "road_network": RoadNetworkGenerator,
    "proximity": ProximityGenerator,
}


def get_generator(name: str) -> type[BaseGenerator]:
    """Look up a generator class by name."""
    if name not in GENERATOR_REGISTRY:
        available = ", ".join(sorted(GENERATOR_REGISTRY))
        raise ValueError(f"Unknown generator '{name}'. Available: {available}")
    return GENERATOR_REGISTRY[name]


def list_generators() -> list[str]:
    """Return the names of all available generators."""
    return sorted(GENERATOR_REGISTRY.keys())


__all__ = [
    "BaseGenerator",
    "GENERATOR_REGISTRY",
    "get_generator",
    "list_generators",
    "ProximityGenerator",
    "RoadNetworkGenerator",
]
