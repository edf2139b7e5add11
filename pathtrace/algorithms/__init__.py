"""
Shortest-path algorithms.

- dijkstra: Single-source shortest paths with a replayable step trace
- reconstruct_path: Route to a target from a predecessor map
- compute_shortest_path: Cheapest right/down route through a cost grid
- StepCursor / step_highlights: Replay helpers for a recorded trace
"""

from pathtrace.algorithms.dijkstra import (
    create_dijkstra_step,
    dijkstra,
    find_node_with_smallest_distance,
    reconstruct_path,
)
from pathtrace.algorithms.grid import compute_shortest_path
from pathtrace.algorithms.replay import StepCursor, step_highlights
from pathtrace.algorithms.state import DijkstraResult, DijkstraStep, GridPath, PathResult

__all__ = [
    "dijkstra",
    "reconstruct_path",
    "find_node_with_smallest_distance",
    "create_dijkstra_step",
    "compute_shortest_path",
    "StepCursor",
    "step_highlights",
    "DijkstraResult",
    "DijkstraStep",
    "PathResult",
    "GridPath",
]
