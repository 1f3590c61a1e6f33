"""Path searches over a Graph."""

from __future__ import annotations

from dsreview.graph import Graph, GraphNode


def breadth_first_search(graph: Graph, src: GraphNode, dst: GraphNode) -> bool:
    """Return True when a path leads from node ``src`` to node ``dst``."""
    pending = [src]
    visited: set[int] = set()
    while pending:
        node = pending.pop()
        if node is dst:
            return True
        if node.id in visited:
            continue
        visited.add(node.id)
        pending.extend(node.adjacent)
    return False


def depth_first_search(graph: Graph, src: int, dst: int) -> bool:
    """Return True when a path leads from node id ``src`` to node id ``dst``."""
    target = graph.get_node(dst)
    visited: set[int] = set()

    def visit(node: GraphNode) -> bool:
        if node.id in visited:
            return False
        visited.add(node.id)
        if node is target:
            return True
        return any(visit(neighbour) for neighbour in node.adjacent)

    return visit(graph.get_node(src))