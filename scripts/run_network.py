#!/usr/bin/env python3
"""
roadgraph: generate a road network and benchmark path queries.

1. Generation: place nodes → grid index → MST → augmentation
2. Stats: degree distribution, connectivity, total length
3. Queries: random start/end pairs → results DataFrame summary

Usage
-----
    python scripts/run_network.py --nodes 10000 --seed 42 --queries 200
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pydantic import ValidationError

from roadgraph.config import GenerationConfig
from roadgraph.engine import QueryRunner, RoadNetwork
from roadgraph.generators import list_generators


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a planar road network and run path queries.")
    parser.add_argument("--generator", "-g", type=str, default="road_network", choices=list_generators(), help="Generator to use.")
    parser.add_argument("--nodes", "-n", type=int, default=10_000, help="Number of nodes.")
    parser.add_argument("--map-size", type=float, default=100.0, help="Half-extent of the square map.")
    parser.add_argument("--min-degree", type=int, default=2, help="Minimum degree bound.")
    parser.add_argument("--max-degree", type=int, default=5, help="Degree cap for augmentation.")
    parser.add_argument("--cell-size", type=float, default=10.0, help="Grid cell size (maximum edge length).")
    parser.add_argument("--max-attempts", type=int, default=10, help="Augmentation candidates tried per node.")
    parser.add_argument("--passes", type=int, default=1, help="Augmentation passes.")
    parser.add_argument("--allow-crossings", action="store_true", help="Disable the crossing check during augmentation.")
    parser.add_argument("--seed", "-s", type=int, default=None, help="Random seed.")
    parser.add_argument("--queries", "-q", type=int, default=100, help="Number of random path queries.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s | %(message)s",
    )

    try:
        config = GenerationConfig(
            generator=args.generator,
            node_count=args.nodes,
            map_size=args.map_size,
            min_degree=args.min_degree,
            max_degree=args.max_degree,
            cell_size=args.cell_size,
            max_attempts_per_node=args.max_attempts,
            augmentation_passes=args.passes,
            prevent_intersections=not args.allow_crossings,
            seed=args.seed,
        )
    except ValidationError as e:
        print(f"❌ Invalid configuration:\n{e}")
        return 2

    network = RoadNetwork(config)
    network.generate()

    print("=" * 60)
    print("  Network statistics")
    print("=" * 60)
    for key, value in network.stats().model_dump().items():
        print(f"  {key:<22} {value}")
    print()

    if args.queries > 0:
        runner = QueryRunner(network)
        df = runner.run(count=args.queries, seed=args.seed, progress=True)
        found = df[df["found"]]
        print("=" * 60)
        print(f"  {len(df)} queries, {len(found)} with a path")
        print("=" * 60)
        if len(found):
            print(found[["hops", "path_length", "wall_time_seconds"]].describe().to_string())

    return 0


if __name__ == "__main__":
    sys.exit(main())
