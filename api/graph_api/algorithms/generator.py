"""Random graph synthesis (Erdős–Rényi style)."""

from __future__ import annotations

import logging
import random
from itertools import combinations
from numbers import Real
from typing import Any, Optional

from ..errors import GraphConfigurationError
from ..model import Graph

logger = logging.getLogger(__name__)


def node_name(index: int) -> str:
    return f"v{index}"


def validate_generator_args(n: Any, p: Any) -> None:
    # n must be a positive int, p a probability in [0.0, 1.0]
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise GraphConfigurationError(f"n must be a positive integer; got {n!r}")
    if isinstance(p, bool) or not isinstance(p, Real) or not (0.0 <= p <= 1.0):
        raise GraphConfigurationError(f"p must be in [0.0, 1.0]; got {p!r}")


def generate(n: int, p: float = 1.0, rng: Optional[random.Random] = None) -> Graph:
    """
    Build a graph on nodes v0..v{n-1}, keeping each unordered pair with probability p.

    Exactly one draw from `rng` is made per pair, in (i, j) order with i < j,
    unless p is 0.0 or 1.0, where no draw is made at all. When `rng` is None the
    shared `random` module stream is used, so seeding it beforehand makes the
    result reproducible.
    """
    validate_generator_args(n, p)
    source = rng if rng is not None else random

    graph = Graph()
    nodes = graph.add_nodes([node_name(i) for i in range(n)])

    for u, v in combinations(nodes, 2):
        if p == 1.0 or (p > 0.0 and source.random() < p):
            graph.add_edge(u, v)

    logger.debug(
        "Generated graph n=%d p=%s -> %d edges", n, p, graph.edge_count()
    )
    return graph


def expected_edge_count(n: int, p: float) -> float:
    validate_generator_args(n, p)
    return p * n * (n - 1) / 2
