"""
Helpers for replaying a recorded Dijkstra trace.

A viewer keeps a StepCursor over ``DijkstraResult.steps`` and asks
``step_highlights`` which nodes and edges to emphasize at each position.
"""

from __future__ import annotations

from collections.abc import Sequence

from pathtrace.algorithms.state import DijkstraResult, DijkstraStep
from pathtrace.graph.store import edge_id_for


class StepCursor:
    """
    Position within a step sequence.

    Moving past either end clamps to the first or last step.
    """

    def __init__(self, steps: Sequence[DijkstraStep]) -> None:
        if not steps:
            raise ValueError("Cannot replay an empty step sequence")
        self._steps = steps
        self._index = 0

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> DijkstraStep:
        return self._steps[self._index]

    @property
    def at_start(self) -> bool:
        return self._index == 0

    @property
    def at_end(self) -> bool:
        return self._index == len(self._steps) - 1

    def seek(self, index: int) -> DijkstraStep:
        """Jump to ``index``, clamped to the valid range."""
        self._index = max(0, min(index, len(self._steps) - 1))
        return self.current

    def forward(self) -> DijkstraStep:
        return self.seek(self._index + 1)

    def back(self) -> DijkstraStep:
        return self.seek(self._index - 1)

    def reset(self) -> DijkstraStep:
        return self.seek(0)


def step_highlights(
    step: DijkstraStep,
    result: DijkstraResult,
    target_id: str | None = None,
    is_final: bool = False,
) -> dict[str, dict[str, str]]:
    """
    Styling roles for one step of a run.

    Node roles, lowest to highest precedence: ``visited``, ``next``,
    ``current``, ``path``, ``target``, ``source``. Edge roles are ``tree``
    for the predecessor link of every visited node and ``path`` for the
    final route, shown only when ``is_final`` is set.

    Returns:
        {"nodes": {node_id: role}, "edges": {edge_id: role}}
    """
    target_id = target_id if target_id is not None else result.target_id
    nodes: dict[str, str] = {}
    edges: dict[str, str] = {}

    for node_id in step.visited:
        nodes[node_id] = "visited"
        predecessor = step.previous.get(node_id)
        if predecessor is not None:
            edges[edge_id_for(predecessor, node_id)] = "tree"

    if step.current_shortest is not None:
        nodes[step.current_shortest] = "next"
    if step.current_node_id is not None:
        nodes[step.current_node_id] = "current"

    if is_final and result.shortest_path:
        path = result.shortest_path
        for node_id in path:
            nodes[node_id] = "path"
        for a, b in zip(path, path[1:]):
            edges[edge_id_for(a, b)] = "path"

    if target_id is not None:
        nodes[target_id] = "target"
    nodes[result.source_id] = "source"
    return {"nodes": nodes, "edges": edges}
