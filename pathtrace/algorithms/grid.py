"""
Minimum-cost monotone path through a grid of cell costs.

Moves go right or down only. Every entered cell adds its cost, the
starting cell included.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from pathtrace.algorithms.state import GridPath

logger = logging.getLogger(__name__)

# Predecessor codes
_START = 0
_FROM_ABOVE = 1
_FROM_LEFT = 2


def _as_cost_array(grid: Sequence[Sequence[float]]) -> np.ndarray:
    """Validate the grid and return it as a 2-D float array."""
    if grid is None or len(grid) == 0:
        raise ValueError("Grid cannot be empty")

    widths = {len(row) for row in grid}
    if len(widths) != 1:
        raise ValueError(f"Grid rows must all have the same length, got {sorted(widths)}")
    if widths == {0}:
        raise ValueError("Grid rows cannot be empty")

    costs = np.asarray(grid, dtype=float)
    invalid = ~(np.isfinite(costs) & (costs >= 0))
    if invalid.any():
        row, col = np.argwhere(invalid)[0]
        raise ValueError(
            f"Grid costs must be finite and non-negative, got {costs[row, col]} at [{row}, {col}]"
        )
    return costs


def build_cost_tables(costs: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Fill the cumulative-cost and predecessor tables.

    Returns:
        (cumulative, predecessor) arrays shaped like ``costs``. Ties
        between above and left resolve to above.
    """
    rows, cols = costs.shape
    cumulative = np.full((rows, cols), np.inf)
    predecessor = np.full((rows, cols), _START, dtype=np.int8)

    cumulative[0, 0] = costs[0, 0]
    for row in range(rows):
        for col in range(cols):
            if row == 0 and col == 0:
                continue
            above = cumulative[row - 1, col] if row > 0 else np.inf
            left = cumulative[row, col - 1] if col > 0 else np.inf
            if above <= left:
                cumulative[row, col] = above + costs[row, col]
                predecessor[row, col] = _FROM_ABOVE
            else:
                cumulative[row, col] = left + costs[row, col]
                predecessor[row, col] = _FROM_LEFT

    return cumulative, predecessor


def _walk_back(predecessor: np.ndarray) -> list[tuple[int, int]]:
    rows, cols = predecessor.shape
    row, col = rows - 1, cols - 1
    path = [(row, col)]
    while (row, col) != (0, 0):
        move = predecessor[row, col]
        if move == _FROM_ABOVE:
            row -= 1
        elif move == _FROM_LEFT:
            col -= 1
        else:
            raise RuntimeError(f"Broken predecessor table at [{row}, {col}]")
        path.append((row, col))
    path.reverse()
    return path


def compute_shortest_path(grid: Sequence[Sequence[float]]) -> GridPath:
    """
    Find the cheapest right/down route from the top-left to the bottom-right cell.

    Args:
        grid: Rectangular, non-empty grid of non-negative costs

    Returns:
        GridPath with the visited cells and their summed cost

    Raises:
        ValueError: If the grid is empty, ragged, or has negative or non-finite costs
    """
    costs = _as_cost_array(grid)
    cumulative, predecessor = build_cost_tables(costs)
    path = _walk_back(predecessor)
    total = cumulative[-1, -1].item()

    logger.debug(f"Grid {costs.shape[0]}x{costs.shape[1]}: cost {total} over {len(path)} cells")
    return GridPath(path=path, total_cost=total)
