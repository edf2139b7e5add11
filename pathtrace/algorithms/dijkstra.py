"""
Dijkstra's single-source shortest paths with a recorded step trace.

The run records one snapshot before the loop and one after each node is
finalized, so a viewer can replay the algorithm forwards and backwards.
Edges are traversed in both directions.

Ties between equally distant unvisited nodes go to the node that was
added to the graph first.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping

from pathtrace.algorithms.state import (
    DijkstraResult,
    DijkstraStep,
    PathResult,
    freeze_mapping,
)
from pathtrace.config import INFINITY
from pathtrace.graph.store import Graph

logger = logging.getLogger(__name__)


def find_node_with_smallest_distance(
    candidates: Iterable[str],
    distances: Mapping[str, float],
) -> str | None:
    """
    Pick the candidate with the smallest finite distance.

    The first minimum in iteration order wins.

    Returns:
        The chosen node id, or None if there are no candidates or all of
        them are unreached
    """
    min_distance = INFINITY
    min_node_id = None
    for node_id in candidates:
        distance = distances.get(node_id, INFINITY)
        if distance < min_distance:
            min_distance = distance
            min_node_id = node_id
    return min_node_id


def create_dijkstra_step(
    current_id: str | None,
    next_shortest: str | None,
    distances: Mapping[str, float],
    previous: Mapping[str, str | None],
    visited: Iterable[str],
    unvisited: Iterable[str],
) -> DijkstraStep:
    """Snapshot the live state into a step that no later mutation can reach."""
    return DijkstraStep(
        current_node_id=current_id,
        current_shortest=next_shortest,
        distances=freeze_mapping(distances),
        previous=freeze_mapping(previous),
        visited=frozenset(visited),
        unvisited=frozenset(unvisited),
    )


def initialize_dijkstra(
    graph: Graph,
    source_id: str,
) -> tuple[dict[str, float], dict[str, str | None], set[str], dict[str, None]]:
    """
    Build the starting state for a run.

    Returns:
        (distances, previous, visited, unvisited). ``unvisited`` is a dict
        used as an ordered set so selection follows graph insertion order.
    """
    distances = {node_id: INFINITY for node_id in graph.nodes}
    distances[source_id] = 0
    previous: dict[str, str | None] = {node_id: None for node_id in graph.nodes}
    visited: set[str] = set()
    unvisited = dict.fromkeys(graph.nodes)
    return distances, previous, visited, unvisited


def reconstruct_path(
    target_id: str,
    source_id: str,
    previous: Mapping[str, str | None],
    distances: Mapping[str, float],
) -> PathResult:
    """
    Walk predecessors back from ``target_id`` to ``source_id``.

    Returns:
        PathResult with the route and its cost, or with both fields None
        when the target is unreached or the predecessor chain never gets
        back to the source
    """
    distance = distances.get(target_id)
    if distance is None or math.isinf(distance):
        return PathResult(path=None, distance=None)

    path = [target_id]
    seen = {target_id}
    current = target_id
    while current != source_id:
        current = previous.get(current)
        if current is None or current in seen:
            logger.warning(
                f"Predecessor chain from '{target_id}' does not reach '{source_id}'"
            )
            return PathResult(path=None, distance=None)
        path.append(current)
        seen.add(current)

    path.reverse()
    return PathResult(path=path, distance=distance)


def dijkstra(graph: Graph, source_id: str, target_id: str | None = None) -> DijkstraResult:
    """
    Run Dijkstra's algorithm from ``source_id``, recording every step.

    Args:
        graph: Graph to search; must not be mutated during the run
        source_id: Node to measure distances from
        target_id: Optional node to stop at and build a path to

    Returns:
        DijkstraResult with the step trace, final distances and predecessors

    Raises:
        ValueError: If the source or target node is not in the graph
    """
    if source_id not in graph:
        raise ValueError(f"Start node {source_id} not found in the graph")
    if target_id is not None and target_id not in graph:
        raise ValueError(f"End node {target_id} not found in the graph")

    logger.info(f"Running Dijkstra from '{source_id}' over {len(graph)} nodes")

    distances, previous, visited, unvisited = initialize_dijkstra(graph, source_id)
    order: list[str] = []

    steps = [create_dijkstra_step(None, source_id, distances, previous, visited, unvisited)]

    while unvisited:
        current_id = find_node_with_smallest_distance(unvisited, distances)
        if current_id is None:
            break

        current_distance = distances[current_id]
        del unvisited[current_id]
        visited.add(current_id)
        order.append(current_id)
        logger.debug(f"Finalized '{current_id}' at distance {current_distance}")

        for edge, neighbor_id in graph.incident_edges(current_id):
            if neighbor_id in visited:
                continue
            candidate = current_distance + edge.data
            if candidate < distances[neighbor_id]:
                distances[neighbor_id] = candidate
                previous[neighbor_id] = current_id

        reached_target = current_id == target_id
        next_id = None if reached_target else find_node_with_smallest_distance(unvisited, distances)
        steps.append(create_dijkstra_step(current_id, next_id, distances, previous, visited, unvisited))

        if reached_target:
            break

    result = DijkstraResult(
        source_id=source_id,
        steps=steps,
        distances=distances,
        previous=previous,
        order=order,
        target_id=target_id,
    )

    if target_id is not None:
        found = reconstruct_path(target_id, source_id, previous, distances)
        result.shortest_path = found.path
        result.total_distance = found.distance
        if found.found:
            logger.info(f"Shortest path: {' -> '.join(found.path)} (distance {found.distance})")
        else:
            logger.info(f"No path from '{source_id}' to '{target_id}'")

    logger.info(f"Dijkstra finished: {len(order)} nodes finalized in {len(steps)} steps")
    return result
