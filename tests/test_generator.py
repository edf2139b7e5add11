"""
Unit tests for random graph generation.
"""

import random
from itertools import combinations

import pytest

from pathtrace.config import EDGE_WEIGHT_MAX, EDGE_WEIGHT_MIN
from pathtrace.graph import Graph, create_random_graph
from pathtrace.graph.generator import augment_to_density, connect_spanning_tree


def _pairs(graph: Graph) -> list[tuple[str, str]]:
    return [tuple(sorted((e.from_node, e.to_node))) for e in graph.get_all_edges()]


class TestNodes:
    """Test node creation."""

    def test_node_count_and_ids(self, rng):
        """Nodes are named node-0 .. node-{n-1}."""
        graph = create_random_graph(10, 0.2, 1, 100, rng=rng)
        assert graph.node_ids() == [f"node-{i}" for i in range(10)]

    def test_values_within_range(self, rng):
        """Values are drawn from the inclusive range."""
        graph = create_random_graph(50, 0.1, 3, 6, rng=rng)
        assert all(3 <= node.value <= 6 for node in graph.nodes.values())

    def test_empty_and_single_node(self, rng):
        """Trivial graphs have no edges."""
        assert len(create_random_graph(0, 0.5, 0, 10, rng=rng)) == 0
        single = create_random_graph(1, 1.0, 0, 10, rng=rng)
        assert len(single) == 1
        assert single.edge_count() == 0


class TestConnectivity:
    """Test the spanning tree guarantee."""

    @pytest.mark.parametrize("seed", range(20))
    def test_always_connected(self, seed):
        """Every generated graph is connected."""
        graph = create_random_graph(12, 0.1, 0, 20, seed=seed)
        assert graph.is_connected()
        assert graph.edge_count() >= 11

    def test_zero_density_is_spanning_tree(self, rng):
        """With no density budget only the tree remains."""
        graph = create_random_graph(15, 0.0, 0, 20, rng=rng)
        assert graph.edge_count() == 14
        assert graph.is_connected()

    def test_spanning_tree_edge_count(self, rng):
        """The tree pass adds exactly n - 1 edges."""
        graph = Graph()
        for i in range(8):
            graph.add_node(str(i))
        assert connect_spanning_tree(graph, rng) == 7
        assert graph.is_connected()


class TestDensity:
    """Test density augmentation."""

    def test_full_density_is_complete(self, rng):
        """Density 1 connects every pair."""
        graph = create_random_graph(7, 1.0, 0, 20, rng=rng)
        assert graph.edge_count() == 21

    def test_partial_density_hits_cap(self, rng):
        """Edges are added up to floor(pairs * density)."""
        graph = create_random_graph(10, 0.5, 0, 20, rng=rng)
        assert graph.edge_count() == 22

    def test_tree_wins_over_small_cap(self, rng):
        """A cap below n - 1 never removes tree edges."""
        graph = create_random_graph(10, 0.05, 0, 20, rng=rng)
        assert graph.edge_count() == 9

    def test_augment_skips_existing_pairs(self, rng):
        """Augmentation never duplicates a pair."""
        graph = Graph()
        for i in range(5):
            graph.add_node(str(i))
        graph.add_edge("0", "1")
        added = augment_to_density(graph, 1.0, rng)
        assert added == 9
        assert graph.get_edge("0", "1").data == 1


class TestEdges:
    """Test edge properties."""

    @pytest.mark.parametrize("seed", range(10))
    def test_no_self_loops_or_duplicates(self, seed):
        """Each unordered pair appears at most once."""
        graph = create_random_graph(9, 0.6, 0, 20, seed=seed)
        pairs = _pairs(graph)
        assert all(a != b for a, b in pairs)
        assert len(pairs) == len(set(pairs))
        assert set(pairs) <= set(combinations(sorted(graph.node_ids()), 2))

    def test_weights_within_range(self, rng):
        """Edge weights come from the configured range."""
        graph = create_random_graph(20, 0.5, 0, 20, rng=rng)
        assert all(
            EDGE_WEIGHT_MIN <= e.data <= EDGE_WEIGHT_MAX for e in graph.get_all_edges()
        )


class TestReproducibility:
    """Test seeding."""

    def test_same_seed_same_graph(self):
        """Equal seeds produce identical graphs."""
        first = create_random_graph(10, 0.4, 0, 20, seed=42)
        second = create_random_graph(10, 0.4, 0, 20, seed=42)
        assert first.to_dict() == second.to_dict()

    def test_rng_takes_precedence(self):
        """An explicit rng is used as-is."""
        first = create_random_graph(10, 0.4, 0, 20, rng=random.Random(5), seed=1)
        second = create_random_graph(10, 0.4, 0, 20, rng=random.Random(5), seed=2)
        assert first.to_dict() == second.to_dict()


class TestValidation:
    """Test parameter validation."""

    @pytest.mark.parametrize(
        "args",
        [
            (-1, 0.5, 0, 10),
            (5, -0.1, 0, 10),
            (5, 1.5, 0, 10),
            (5, 0.5, 10, 0),
        ],
    )
    def test_invalid_params_raise(self, args):
        """Out-of-range parameters are rejected."""
        with pytest.raises(ValueError):
            create_random_graph(*args)
