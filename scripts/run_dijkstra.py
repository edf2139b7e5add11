#!/usr/bin/env python3
"""
Generate a random connected graph and trace Dijkstra's algorithm over it.

Usage:
    python scripts/run_dijkstra.py
    python scripts/run_dijkstra.py --nodes 12 --density 0.3 --seed 7
    python scripts/run_dijkstra.py --source node-0 --target node-5 --steps
    python scripts/run_dijkstra.py --seed 3 --json trace.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathtrace.algorithms import dijkstra  # noqa: E402
from pathtrace.config import (  # noqa: E402
    DEFAULT_EDGE_DENSITY,
    DEFAULT_MAX_VALUE,
    DEFAULT_MIN_VALUE,
    DEFAULT_NODE_COUNT,
    LOG_DATEFMT,
    LOG_FORMAT,
)
from pathtrace.graph import create_random_graph  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Trace Dijkstra's algorithm on a random graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--nodes",
        type=int,
        default=DEFAULT_NODE_COUNT,
        help=f"Number of nodes (default: {DEFAULT_NODE_COUNT})",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=DEFAULT_EDGE_DENSITY,
        help=f"Edge density in [0, 1] (default: {DEFAULT_EDGE_DENSITY})",
    )
    parser.add_argument("--min-value", type=int, default=DEFAULT_MIN_VALUE)
    parser.add_argument("--max-value", type=int, default=DEFAULT_MAX_VALUE)
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible graph",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Source node id (default: first node)",
    )
    parser.add_argument(
        "--target",
        type=str,
        default=None,
        help="Target node id; stops there and prints the route",
    )
    parser.add_argument(
        "--steps",
        action="store_true",
        help="Print every recorded step",
    )
    parser.add_argument(
        "--json",
        type=Path,
        default=None,
        help="Write the graph and trace to this JSON file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def _fmt_distance(value: float) -> str:
    return "inf" if value == float("inf") else f"{value:g}"


def main() -> int:
    """Main entry point."""
    args = parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        graph = create_random_graph(
            args.nodes, args.density, args.min_value, args.max_value, seed=args.seed
        )
        if not len(graph):
            print("Error: graph has no nodes", file=sys.stderr)
            return 1

        for line in graph.describe():
            logger.debug(line)

        source = args.source or graph.node_ids()[0]
        result = dijkstra(graph, source, args.target)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print(f"Dijkstra from {source}")
    print("=" * 60)
    print(f"  Nodes: {len(graph)}  Edges: {graph.edge_count()}  Steps: {len(result.steps)}")

    if args.steps:
        print("\nSteps:")
        for i, step in enumerate(result.steps):
            dist = ", ".join(f"{k}:{_fmt_distance(v)}" for k, v in step.distances.items())
            print(f"  {i}. current={step.current_node_id} next={step.current_shortest}")
            print(f"     {dist}")

    print("\nDistances:")
    for node_id, distance in result.distances.items():
        via = result.previous[node_id]
        suffix = f" (via {via})" if via else ""
        print(f"  {node_id}: {_fmt_distance(distance)}{suffix}")

    if args.target:
        print()
        if result.shortest_path:
            print(f"Route: {' -> '.join(result.shortest_path)} (distance {result.total_distance:g})")
        else:
            print(f"No route from {source} to {args.target}")

    if args.json:
        with open(args.json, "w", encoding="utf-8") as f:
            json.dump({"graph": graph.to_dict(), "result": result.to_dict()}, f, indent=2)
        print(f"\nWrote trace to {args.json}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
