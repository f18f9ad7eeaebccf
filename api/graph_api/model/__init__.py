"""
Core graph domain model (Graph, Position, node helpers).
"""

from .node import Node, EdgePair, is_valid_node, canonical_edge
from .position import Position
from .graph import Graph

__all__ = ["Node", "EdgePair", "Position", "Graph", "is_valid_node", "canonical_edge"]
