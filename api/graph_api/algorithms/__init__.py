"""Graph algorithms: generation, traversal, layout and composition."""

from .generator import generate, expected_edge_count
from .traversal import connected_component, connected_components
from .layout import circular_layout
from .composition import (
    extract_subgraph,
    overlay_bounds,
    OverlayLayer,
    OverlayScene,
    LayerGeometry,
)

__all__ = [
    "generate",
    "expected_edge_count",
    "connected_component",
    "connected_components",
    "circular_layout",
    "extract_subgraph",
    "overlay_bounds",
    "OverlayLayer",
    "OverlayScene",
    "LayerGeometry",
]
