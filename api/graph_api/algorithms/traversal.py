from typing import Any, Callable, List, Optional, Set

from ..model import Graph, Node


def connected_component(
    graph: Graph,
    start: Any,
    visitor: Optional[Callable[[Node], None]] = None,
) -> List[Node]:
    """
    Depth-first search from `start`.
    Returns the reachable nodes in first-visit order, or [] if `start` is not in the graph.
    `visitor` is called once for every newly discovered node, in the same order.
    """
    if not graph.has_node(start):
        return []

    visited: Set[Node] = set()
    order: List[Node] = []

    # Neighbors are pushed reversed so pops follow neighbors() order,
    # giving the same preorder as the recursive formulation.
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        if visitor is not None:
            visitor(node)

        for nbr in reversed(graph.neighbors(node)):
            if nbr not in visited:
                stack.append(nbr)

    return order


def connected_components(graph: Graph) -> List[List[Node]]:
    """Split the graph into components, each started from its first node in insertion order."""
    seen: Set[Node] = set()
    components = []
    for node in graph.nodes():
        if node in seen:
            continue
        component = connected_component(graph, node)
        seen.update(component)
        components.append(component)
    return components
