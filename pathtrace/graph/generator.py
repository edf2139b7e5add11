"""
Random connected graph generation.

A random spanning tree is laid down first so every node is reachable, then
extra edges are drawn from a shuffled list of the remaining pairs until the
requested density is met.
"""

from __future__ import annotations

import logging
import random
from itertools import combinations

from pathtrace.config import (
    DEFAULT_EDGE_DENSITY,
    DEFAULT_MAX_VALUE,
    DEFAULT_MIN_VALUE,
    EDGE_WEIGHT_MAX,
    EDGE_WEIGHT_MIN,
    NODE_ID_PREFIX,
    RANDOM_SEED,
    validate_generation_params,
)
from pathtrace.graph.store import Graph

logger = logging.getLogger(__name__)


def _random_weight(rng: random.Random) -> int:
    return rng.randint(EDGE_WEIGHT_MIN, EDGE_WEIGHT_MAX)


def connect_spanning_tree(graph: Graph, rng: random.Random) -> int:
    """
    Join all nodes of ``graph`` with a random spanning tree.

    Each round links a random already-connected node to a random
    unconnected one, so exactly ``len(graph) - 1`` edges are added to a
    graph without edges.

    Returns:
        Number of edges added
    """
    node_ids = graph.node_ids()
    if len(node_ids) <= 1:
        return 0

    seed_id = rng.choice(node_ids)
    connected = [seed_id]
    unconnected = [node_id for node_id in node_ids if node_id != seed_id]

    added = 0
    while unconnected:
        source = rng.choice(connected)
        target = unconnected.pop(rng.randrange(len(unconnected)))
        if graph.add_edge(source, target, _random_weight(rng)) is not None:
            added += 1
        connected.append(target)
    return added


def augment_to_density(graph: Graph, edge_density: float, rng: random.Random) -> int:
    """
    Add random edges until ``edge_density`` of all pairs are connected.

    Returns:
        Number of edges added
    """
    node_ids = graph.node_ids()
    max_edges = int(len(node_ids) * (len(node_ids) - 1) // 2 * edge_density)

    candidates = [
        (a, b) for a, b in combinations(node_ids, 2) if not graph.has_edge(a, b)
    ]
    rng.shuffle(candidates)

    added = 0
    for a, b in candidates:
        if graph.edge_count() >= max_edges:
            break
        if graph.add_edge(a, b, _random_weight(rng)) is not None:
            added += 1
    return added


def create_random_graph(
    node_count: int,
    edge_density: float = DEFAULT_EDGE_DENSITY,
    min_value: int = DEFAULT_MIN_VALUE,
    max_value: int = DEFAULT_MAX_VALUE,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> Graph:
    """
    Build a connected random graph.

    Args:
        node_count: Number of nodes to create
        edge_density: Target fraction of all unordered pairs, in [0, 1]
        min_value: Smallest node value (inclusive)
        max_value: Largest node value (inclusive)
        rng: Random source; built from ``seed`` when omitted
        seed: Seed for a fresh random source (defaults to PATHTRACE_SEED)

    Returns:
        A connected Graph with node ids ``node-0`` .. ``node-{n-1}``

    Raises:
        ValueError: If any parameter is out of range
    """
    validate_generation_params(node_count, edge_density, min_value, max_value)
    if rng is None:
        rng = random.Random(seed if seed is not None else RANDOM_SEED)

    graph = Graph()
    for i in range(node_count):
        graph.add_node(f"{NODE_ID_PREFIX}{i}", rng.randint(min_value, max_value))

    tree_edges = connect_spanning_tree(graph, rng)
    extra_edges = augment_to_density(graph, edge_density, rng)

    logger.info(
        f"Generated graph: {node_count} nodes, {graph.edge_count()} edges "
        f"({tree_edges} spanning, {extra_edges} extra)"
    )
    return graph
