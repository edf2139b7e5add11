"""
Graph store: nodes, edges and their adjacency lists.

Edges live in a single append-only arena (``Graph.edges``). Each node keeps
two ordered lists of arena indices, one for edges it is the source of and
one for edges it is the target of. Removing an edge drops its index from
both lists and leaves a ``None`` tombstone in the arena, so indices held
elsewhere never shift.

Mutators are permissive: unknown ids, duplicate pairs and missing edges are
logged and absorbed, never raised.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from pathtrace.config import DEFAULT_EDGE_WEIGHT

logger = logging.getLogger(__name__)


def edge_id_for(id_a: str, id_b: str) -> str:
    """
    Order-independent edge id for a pair of node ids.

    The id is a display key only. Ids that contain "-" can collide, e.g.
    ("a-b", "c") and ("a", "b-c") both give "a-b-c"; pair lookups go
    through tuple keys and are unaffected.
    """
    return "-".join(sorted((id_a, id_b)))


def _pair_key(id_a: str, id_b: str) -> tuple[str, str]:
    return (id_a, id_b) if id_a <= id_b else (id_b, id_a)


@dataclass
class Node:
    """
    A graph node.

    Attributes:
        id: Unique node id
        value: Display payload
        outgoing_edges: Arena indices of edges leaving this node, oldest first
        incoming_edges: Arena indices of edges entering this node, oldest first
    """

    id: str
    value: float
    outgoing_edges: list[int] = field(default_factory=list)
    incoming_edges: list[int] = field(default_factory=list)


@dataclass
class Edge:
    """
    A weighted edge stored in the direction it was added.

    Attributes:
        id: Order-independent id derived from both endpoint ids
        from_node: Source node id
        to_node: Target node id
        data: Edge weight
    """

    id: str
    from_node: str
    to_node: str
    data: float = DEFAULT_EDGE_WEIGHT

    @property
    def weight(self) -> float:
        return self.data

    def other(self, node_id: str) -> str:
        """Endpoint opposite to ``node_id``."""
        return self.to_node if node_id == self.from_node else self.from_node


class Graph:
    """
    Graph used as an undirected structure over directed storage.

    At most one edge joins any unordered pair of nodes and self-loops are
    rejected. Node iteration follows insertion order.
    """

    def __init__(self) -> None:
        self.nodes: dict[str, Node] = {}
        self.edges: list[Edge | None] = []
        self._pairs: dict[tuple[str, str], int] = {}

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={self.edge_count()})"

    # =========================================================================
    # Mutators
    # =========================================================================

    def add_node(self, node_id: str, value: float = 0) -> Node:
        """Insert a node, or return the existing one untouched."""
        existing = self.nodes.get(node_id)
        if existing is not None:
            logger.debug(f"Node '{node_id}' already present, keeping value {existing.value}")
            return existing
        node = Node(id=node_id, value=value)
        self.nodes[node_id] = node
        return node

    def add_edge(
        self,
        from_id: str,
        to_id: str,
        weight: float = DEFAULT_EDGE_WEIGHT,
    ) -> Edge | None:
        """
        Connect two existing nodes.

        Returns:
            The new edge, or None if an endpoint is missing, the ids are
            equal, or the pair is already connected in either direction.
        """
        source = self.nodes.get(from_id)
        target = self.nodes.get(to_id)
        if source is None or target is None:
            logger.debug(f"Skipping edge {from_id} -> {to_id}: unknown endpoint")
            return None
        if from_id == to_id:
            logger.debug(f"Skipping self-loop on '{from_id}'")
            return None

        key = _pair_key(from_id, to_id)
        if key in self._pairs:
            logger.debug(f"Skipping edge {from_id} -> {to_id}: pair already connected")
            return None

        edge = Edge(id=edge_id_for(from_id, to_id), from_node=from_id, to_node=to_id, data=weight)
        index = len(self.edges)
        self.edges.append(edge)
        self._pairs[key] = index
        source.outgoing_edges.append(index)
        target.incoming_edges.append(index)
        return edge

    def remove_edge(self, from_id: str, to_id: str) -> Edge | None:
        """
        Remove the edge joining two nodes, whichever way it was stored.

        Returns:
            The removed edge, or None if there was nothing to remove.
        """
        if from_id not in self.nodes or to_id not in self.nodes:
            return None
        index = self._pairs.pop(_pair_key(from_id, to_id), None)
        if index is None:
            logger.debug(f"No edge between '{from_id}' and '{to_id}' to remove")
            return None

        edge = self.edges[index]
        self.nodes[edge.from_node].outgoing_edges.remove(index)
        self.nodes[edge.to_node].incoming_edges.remove(index)
        self.edges[index] = None
        return edge

    # =========================================================================
    # Queries
    # =========================================================================

    def get_node(self, node_id: str) -> Node | None:
        return self.nodes.get(node_id)

    def get_edge(self, id_a: str, id_b: str) -> Edge | None:
        """Edge joining the unordered pair, or None."""
        index = self._pairs.get(_pair_key(id_a, id_b))
        return None if index is None else self.edges[index]

    def has_edge(self, id_a: str, id_b: str) -> bool:
        return _pair_key(id_a, id_b) in self._pairs

    def get_all_edges(self) -> list[Edge]:
        """Every live edge exactly once, in creation order."""
        return [edge for edge in self.edges if edge is not None]

    def edge_count(self) -> int:
        return len(self._pairs)

    def node_ids(self) -> list[str]:
        return list(self.nodes)

    def outgoing(self, node_id: str) -> list[Edge]:
        node = self.nodes.get(node_id)
        if node is None:
            return []
        return [self.edges[i] for i in node.outgoing_edges]

    def incoming(self, node_id: str) -> list[Edge]:
        node = self.nodes.get(node_id)
        if node is None:
            return []
        return [self.edges[i] for i in node.incoming_edges]

    def incident_edges(self, node_id: str) -> Iterator[tuple[Edge, str]]:
        """
        Yield ``(edge, neighbor_id)`` for every edge touching a node.

        Outgoing edges come first, then incoming ones, each in insertion
        order. Direction is ignored: an incoming edge is walked in reverse.
        """
        for edge in self.outgoing(node_id):
            yield edge, edge.to_node
        for edge in self.incoming(node_id):
            yield edge, edge.from_node

    def neighbors(self, node_id: str) -> list[str]:
        return [neighbor for _, neighbor in self.incident_edges(node_id)]

    def is_connected(self) -> bool:
        """Whether every node is reachable from every other, ignoring direction."""
        if len(self.nodes) <= 1:
            return True

        start = next(iter(self.nodes))
        seen = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in self.neighbors(current):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return len(seen) == len(self.nodes)

    # =========================================================================
    # Plain-data views
    # =========================================================================

    def describe(self) -> list[str]:
        """One line per node: id, value and neighbor ids."""
        lines = []
        for node_id, node in self.nodes.items():
            neighbors = ", ".join(self.neighbors(node_id))
            lines.append(f"{node_id} (value={node.value}): [{neighbors}]")
        return lines

    def to_dict(self) -> dict:
        return {
            "nodes": [{"id": n.id, "value": n.value} for n in self.nodes.values()],
            "edges": [
                {"id": e.id, "from": e.from_node, "to": e.to_node, "weight": e.data}
                for e in self.get_all_edges()
            ],
        }

    @classmethod
    def from_dict(cls, payload: dict) -> Graph:
        """
        Build a graph from the shape produced by ``to_dict``.

        Edges to unknown nodes or duplicate pairs are skipped the same way
        ``add_edge`` skips them.

        Raises:
            ValueError: If an edge weight is not a finite number
        """
        graph = cls()
        for node in payload.get("nodes", []):
            graph.add_node(str(node["id"]), node.get("value", 0))
        for edge in payload.get("edges", []):
            weight = edge.get("weight", DEFAULT_EDGE_WEIGHT)
            numeric = isinstance(weight, (int, float)) and not isinstance(weight, bool)
            if not numeric or not math.isfinite(weight):
                raise ValueError(
                    f"Edge {edge.get('from')} -> {edge.get('to')} has invalid weight {weight!r}"
                )
            created = graph.add_edge(str(edge["from"]), str(edge["to"]), weight)
            if created is None:
                logger.warning(f"Dropped edge {edge.get('from')} -> {edge.get('to')} from payload")
        return graph
