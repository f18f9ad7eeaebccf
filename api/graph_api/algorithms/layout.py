"""Circular node placement with a per-graph position cache."""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, List, Optional, Tuple

from ..model import Graph, Node, Position

logger = logging.getLogger(__name__)


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def normalize_center(center: Any) -> Optional[Tuple[float, float]]:
    """Return the center as a float pair, or None if it is not a finite 2D point."""
    if isinstance(center, (str, bytes)):
        return None
    try:
        items = tuple(center)
    except TypeError:
        return None
    if len(items) != 2 or not all(_is_finite_number(c) for c in items):
        return None
    return float(items[0]), float(items[1])


def circular_layout(graph: Graph, center: Any, radius: Any) -> List[Node]:
    """
    Place the nodes evenly on a circle, node i at angle i * 2π / n.

    The first node sits directly right of the center. Positions are cached on
    the graph: repeating a call with the same center and radius returns
    without recomputing, as long as every current node already has a position.
    Returns the nodes in layout order, or [] for invalid input or an empty graph.
    """
    point = normalize_center(center)
    if point is None or not _is_finite_number(radius) or radius <= 0:
        logger.debug("Rejected circular layout center=%r radius=%r", center, radius)
        return []

    nodes = graph.nodes()
    n = len(nodes)
    if n == 0:
        return []

    params = (point, float(radius))
    if graph.layout_params() == params and all(graph.position_of(node) is not None for node in nodes):
        return nodes

    cx, cy = point
    r = float(radius)
    angle_step = 2.0 * math.pi / n
    positions = {}
    for i, node in enumerate(nodes):
        angle = i * angle_step
        positions[node] = Position(cx + r * math.cos(angle), cy + r * math.sin(angle))

    graph.store_layout(positions, point, r)
    logger.debug("Computed circular layout for %d nodes center=%s radius=%s", n, point, r)
    return nodes
