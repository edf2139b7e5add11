"""
Result and snapshot dataclasses for the shortest-path engines.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _finite_or_none(value: float) -> float | None:
    return None if math.isinf(value) else value


@dataclass(frozen=True)
class DijkstraStep:
    """
    Snapshot of the algorithm state after one iteration.

    Every container is a fresh, read-only copy, so later changes to the
    live run never show up in a recorded step.

    Attributes:
        current_node_id: Node finalized in this step (None for the initial snapshot)
        current_shortest: Node that will be finalized next (None when exhausted)
        distances: Best known distance per node (inf when unreached)
        previous: Predecessor per node on its best known route
        visited: Finalized nodes
        unvisited: Nodes not yet finalized
    """

    current_node_id: str | None
    current_shortest: str | None
    distances: Mapping[str, float]
    previous: Mapping[str, str | None]
    visited: frozenset[str]
    unvisited: frozenset[str]

    def to_dict(self) -> dict:
        """JSON-safe view; infinite distances become None."""
        return {
            "current_node_id": self.current_node_id,
            "current_shortest": self.current_shortest,
            "distances": {k: _finite_or_none(v) for k, v in self.distances.items()},
            "previous": dict(self.previous),
            "visited": sorted(self.visited),
            "unvisited": sorted(self.unvisited),
        }


@dataclass(frozen=True)
class PathResult:
    """
    A reconstructed route.

    Both fields are None when the target is unreachable.
    """

    path: list[str] | None
    distance: float | None

    @property
    def found(self) -> bool:
        return self.path is not None


@dataclass
class DijkstraResult:
    """
    Complete record of a Dijkstra run.

    Attributes:
        source_id: Node the run started from
        steps: Snapshots in recording order, initial snapshot first
        distances: Final distance per node
        previous: Final predecessor per node
        order: Node ids in the order they were finalized
        target_id: Target requested for path reconstruction, if any
        shortest_path: Route to ``target_id`` (None if unreachable or not requested)
        total_distance: Cost of ``shortest_path``
    """

    source_id: str
    steps: list[DijkstraStep]
    distances: dict[str, float]
    previous: dict[str, str | None]
    order: list[str] = field(default_factory=list)
    target_id: str | None = None
    shortest_path: list[str] | None = None
    total_distance: float | None = None

    @property
    def reachable(self) -> list[str]:
        """Node ids with a finite distance."""
        return [node_id for node_id, d in self.distances.items() if not math.isinf(d)]

    def to_dict(self) -> dict:
        return {
            "source": self.source_id,
            "target": self.target_id,
            "steps": [step.to_dict() for step in self.steps],
            "distances": {k: _finite_or_none(v) for k, v in self.distances.items()},
            "previous": dict(self.previous),
            "order": list(self.order),
            "path": list(self.shortest_path) if self.shortest_path is not None else None,
            "distance": self.total_distance,
        }


@dataclass(frozen=True)
class GridPath:
    """
    Minimum-cost monotone route through a cost grid.

    Attributes:
        path: (row, col) cells from the top-left to the bottom-right corner
        total_cost: Sum of the costs of every cell on ``path``
    """

    path: list[tuple[int, int]]
    total_cost: float

    def to_dict(self) -> dict:
        return {
            "path": [[row, col] for row, col in self.path],
            "total_cost": self.total_cost,
        }


def freeze_mapping(mapping: Mapping) -> Mapping:
    """Read-only proxy over a private copy of ``mapping``."""
    return MappingProxyType(dict(mapping))
