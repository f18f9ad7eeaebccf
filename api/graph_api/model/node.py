from typing import Any, Tuple

# Nodes are plain, non-empty strings compared by string order.
Node = str
EdgePair = Tuple[Node, Node]


def is_valid_node(node: Any) -> bool:
    return isinstance(node, str) and node != ""


def canonical_edge(u: Node, v: Node) -> EdgePair:
    # Lesser node first
    return (u, v) if u < v else (v, u)
