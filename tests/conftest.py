"""
Pytest configuration and shared fixtures.

The sample graphs here are test-only factories; nothing is built at
import time.
"""

import random

import pytest

from pathtrace.graph import Graph


def build_graph(node_ids, edges) -> Graph:
    """Graph with zero-valued nodes and (from, to, weight) edges."""
    graph = Graph()
    for node_id in node_ids:
        graph.add_node(node_id, 0)
    for from_id, to_id, weight in edges:
        graph.add_edge(from_id, to_id, weight)
    return graph


@pytest.fixture
def diamond_graph() -> Graph:
    """Four nodes where A -> D is cheapest through B and C."""
    return build_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("A", "C", 4), ("B", "C", 2), ("B", "D", 5), ("C", "D", 1)],
    )


@pytest.fixture
def complex_graph() -> Graph:
    """Six nodes with several competing routes."""
    return build_graph(
        ["A", "B", "C", "D", "E", "F"],
        [
            ("A", "B", 2),
            ("A", "C", 4),
            ("B", "C", 1),
            ("B", "D", 7),
            ("C", "E", 3),
            ("D", "F", 1),
            ("E", "D", 2),
            ("E", "F", 5),
        ],
    )


@pytest.fixture
def chain_graph() -> Graph:
    """A-B-C-D chain with a long A-D shortcut and an isolated E."""
    return build_graph(
        ["A", "B", "C", "D", "E"],
        [("A", "B", 1), ("B", "C", 2), ("C", "D", 1), ("A", "D", 10)],
    )


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible generation."""
    return random.Random(1234)
