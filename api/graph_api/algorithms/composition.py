"""
Subgraph extraction and multi-graph overlay geometry.

`extract_subgraph` keeps the parent's positions so a component can be drawn
on top of the graph it came from. `overlay_bounds` computes one shared canvas
for several graphs; it does not draw anything itself.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from collections.abc import Sequence
from typing import Any, Iterable, List, Optional, Tuple

from ..model import Graph, Node, Position

logger = logging.getLogger(__name__)

DEFAULT_PADDING = 20


def extract_subgraph(parent: Graph, nodes: Iterable[Any]) -> Graph:
    sub = Graph()
    members = set(sub.add_nodes(nodes))

    for u, v in parent.edges():
        if u in members and v in members:
            sub.add_edge(u, v)

    return sub.inherit_positions_from(parent)


@dataclass
class OverlayLayer:
    graph: Graph
    stroke: Any = None
    fill: Any = None

    @classmethod
    def coerce(cls, item: Any) -> Optional["OverlayLayer"]:
        """Accept an OverlayLayer, a (graph, stroke, fill) triple or a (graph, style) pair."""
        if isinstance(item, cls):
            return item
        # A layer without any style token is malformed
        if not isinstance(item, (tuple, list)) or len(item) < 2 or not isinstance(item[0], Graph):
            return None
        if len(item) == 2:
            return cls(item[0], item[1], item[1])
        return cls(item[0], item[1], item[2])


@dataclass
class LayerGeometry:
    nodes: List[Tuple[Node, Position]] = field(default_factory=list)
    edges: List[Tuple[Node, Node, Position, Position]] = field(default_factory=list)
    stroke: Any = None
    fill: Any = None


@dataclass
class OverlayScene:
    width: int
    height: int
    offset: Position
    layers: List[LayerGeometry]

    def translate(self, pos: Position) -> Position:
        return Position(pos.x + self.offset.x, pos.y + self.offset.y)


def _layer_geometry(layer: OverlayLayer) -> LayerGeometry:
    graph = layer.graph
    geometry = LayerGeometry(stroke=layer.stroke, fill=layer.fill)

    for node in graph.nodes():
        pos = graph.position_of(node)
        if pos is not None:
            geometry.nodes.append((node, pos))

    for u, v in graph.edges():
        pu, pv = graph.position_of(u), graph.position_of(v)
        if pu is None or pv is None:
            continue
        geometry.edges.append((u, v, pu, pv))

    return geometry


def overlay_bounds(layers: Sequence[Any], padding: float = DEFAULT_PADDING) -> Optional[OverlayScene]:
    """
    Compute the shared canvas for drawing several graphs on top of each other.

    Nodes without a position are left out. Returns None when no layer has a
    single positioned node, i.e. there is nothing to draw.
    """
    if isinstance(layers, (str, bytes)) or not isinstance(layers, Sequence):
        return None

    geometries = []
    for item in layers:
        layer = OverlayLayer.coerce(item)
        if layer is None:
            logger.debug("Skipping overlay layer %r", item)
            continue
        geometries.append(_layer_geometry(layer))

    points = [pos for geometry in geometries for _, pos in geometry.nodes]
    if not points:
        logger.debug("Nothing to draw across %d layers", len(geometries))
        return None

    min_x = min(p.x for p in points)
    max_x = max(p.x for p in points)
    min_y = min(p.y for p in points)
    max_y = max(p.y for p in points)

    width = math.ceil((max_x - min_x) + 2 * padding)
    height = math.ceil((max_y - min_y) + 2 * padding)
    offset = Position(padding - min_x, padding - min_y)

    return OverlayScene(width=width, height=height, offset=offset, layers=geometries)
