from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .node import Node, EdgePair, is_valid_node, canonical_edge
from .position import Position


class Graph:
    """
    Undirected simple graph.

    Nodes are kept in insertion order. Each node maps to an insertion-ordered
    set of neighbors, so every edge is stored from both endpoints. Positions
    are only present after a layout was computed (or inherited from a parent).

    Mutators are defensive: invalid input returns None (or an empty list) and
    leaves the graph unchanged.
    """

    def __init__(self):
        self._adjacency: Dict[Node, Dict[Node, None]] = {}
        self._positions: Optional[Dict[Node, Position]] = None
        self._layout_params: Optional[Tuple[Tuple[float, float], float]] = None

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def add_node(self, node: Any) -> Optional[Node]:
        if not is_valid_node(node):
            return None
        if node not in self._adjacency:
            self._adjacency[node] = {}
        return node

    def add_nodes(self, nodes: Iterable[Any]) -> List[Node]:
        # A lone string is iterable too, but it is not a list of nodes
        if isinstance(nodes, (str, bytes)):
            return []
        try:
            candidates = list(nodes)
        except TypeError:
            return []
        added = []
        for node in candidates:
            result = self.add_node(node)
            if result is not None:
                added.append(result)
        return added

    def has_node(self, node: Any) -> bool:
        return is_valid_node(node) and node in self._adjacency

    def nodes(self) -> List[Node]:
        return list(self._adjacency)

    def node_count(self) -> int:
        return len(self._adjacency)

    def neighbors(self, node: Any) -> List[Node]:
        if not self.has_node(node):
            return []
        return list(self._adjacency[node])

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, u: Any, v: Any) -> Optional[EdgePair]:
        """Connect two existing nodes; returns the canonical pair or None."""
        if not (self.has_node(u) and self.has_node(v)):
            return None
        if u == v:
            return None
        if v in self._adjacency[u]:
            return None

        self._adjacency[u][v] = None
        self._adjacency[v][u] = None
        return canonical_edge(u, v)

    def has_edge(self, u: Any, v: Any) -> bool:
        return self.has_node(u) and is_valid_node(v) and v in self._adjacency[u]

    def edges(self) -> List[EdgePair]:
        # Each edge is stored twice; report it only from its lesser endpoint.
        return [
            (u, v)
            for u, nbrs in self._adjacency.items()
            for v in nbrs
            if u < v
        ]

    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._adjacency.values()) // 2

    # -----------------
    # POSITIONS
    # -----------------

    def has_layout(self) -> bool:
        return self._positions is not None

    def position_of(self, node: Any) -> Optional[Position]:
        if self._positions is None or not is_valid_node(node):
            return None
        return self._positions.get(node)

    def positions(self) -> Dict[Node, Position]:
        if self._positions is None:
            return {}
        return dict(self._positions)

    def layout_params(self) -> Optional[Tuple[Tuple[float, float], float]]:
        return self._layout_params

    def store_layout(self, positions: Dict[Node, Position], center: Tuple[float, float], radius: float) -> None:
        """Replace the position cache with a freshly computed layout."""
        self._positions = dict(positions)
        self._layout_params = (center, radius)

    def inherit_positions_from(self, parent: "Graph", nodes: Optional[Iterable[Node]] = None) -> "Graph":
        """Copy the parent's positions for the given nodes (default: all of ours)."""
        if nodes is None:
            nodes = self.nodes()
        inherited = {}
        for node in nodes:
            if not self.has_node(node):
                continue
            pos = parent.position_of(node)
            if pos is not None:
                inherited[node] = Position(pos.x, pos.y)

        if not inherited:
            return self
        if self._positions is None:
            self._positions = {}
        self._positions.update(inherited)
        # Positions no longer match any layout we computed ourselves
        self._layout_params = None
        return self

    def circular_layout(self, center, radius) -> List[Node]:
        from ..algorithms.layout import circular_layout

        return circular_layout(self, center, radius)

    # -----------------
    # REPRESENTATION
    # -----------------

    def format(self) -> str:
        lines = []
        for node, nbrs in self._adjacency.items():
            lines.append(f"{node} -> {','.join(sorted(nbrs))}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "nodes": self.nodes(),
            "edges": [[u, v] for u, v in self.edges()],
            "positions": {node: pos.to_dict() for node, pos in self.positions().items()},
        }

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, node: Any) -> bool:
        return self.has_node(node)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes())
