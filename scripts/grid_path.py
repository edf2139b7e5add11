#!/usr/bin/env python3
"""
Find the cheapest right/down route through a grid of costs.

Usage:
    python scripts/grid_path.py --grid "[[1, 3, 1], [2, 5, 2], [4, 2, 1]]"
    python scripts/grid_path.py --random 6x8 --seed 4
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathtrace.algorithms import compute_shortest_path  # noqa: E402
from pathtrace.config import LOG_DATEFMT, LOG_FORMAT  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Cheapest monotone path through a cost grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--grid", type=str, help="Grid as a JSON array of rows")
    source.add_argument("--random", type=str, metavar="ROWSxCOLS", help="Random grid shape")
    parser.add_argument("--max-cost", type=int, default=9, help="Largest random cell cost")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser.parse_args()


def random_grid(shape: str, max_cost: int, seed: int | None) -> list[list[int]]:
    """Random integer grid with costs in [1, max_cost]."""
    rows, cols = (int(part) for part in shape.lower().split("x"))
    rng = np.random.default_rng(seed)
    return rng.integers(1, max_cost + 1, size=(rows, cols)).tolist()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        grid = json.loads(args.grid) if args.grid else random_grid(args.random, args.max_cost, args.seed)
        result = compute_shortest_path(grid)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    on_path = set(result.path)
    width = max(len(str(cell)) for row in grid for cell in row)
    for r, row in enumerate(grid):
        cells = []
        for c, cell in enumerate(row):
            text = str(cell).rjust(width)
            cells.append(f"[{text}]" if (r, c) in on_path else f" {text} ")
        print("".join(cells))

    print(f"\nPath: {' -> '.join(f'({r},{c})' for r, c in result.path)}")
    print(f"Total cost: {result.total_cost:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
