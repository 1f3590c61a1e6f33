"""A minimal directed graph of nodes identified by integers."""

from __future__ import annotations


class GraphNode:
    """A node with an identifier and an ordered list of adjacent nodes."""

    __slots__ = ("id", "adjacent")

    def __init__(self, node_id: int) -> None:
        self.id = node_id
        self.adjacent: list[GraphNode] = []

    def mark_adjacent(self, node: GraphNode) -> None:
        """Record an edge from this node to ``node``."""
        self.adjacent.append(node)

    def __repr__(self) -> str:
        return f"GraphNode({self.id!r})"


class Graph:
    """A lookup table of nodes connected by directed edges."""

    def __init__(self) -> None:
        self._nodes: dict[int, GraphNode] = {}

    def add_node(self, node: GraphNode) -> None:
        """Register ``node`` under its identifier."""
        self._nodes[node.id] = node

    def get_node(self, node_id: int) -> GraphNode:
        """Return the node with ``node_id``; raise KeyError if unknown."""
        return self._nodes[node_id]

    def add_edge(self, src: int, dst: int) -> None:
        """Connect the node ``src`` to the node ``dst``."""
        self.get_node(src).mark_adjacent(self.get_node(dst))