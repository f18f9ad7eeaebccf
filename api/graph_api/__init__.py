"""Public API exports for the graph core and the visualizer plugin contract."""

from .errors import GraphConfigurationError
from .model import Graph, Position
from .algorithms import (
    generate,
    expected_edge_count,
    connected_component,
    connected_components,
    circular_layout,
    extract_subgraph,
    overlay_bounds,
    OverlayLayer,
    OverlayScene,
)
from .services import VisualizerPlugin

__all__ = [
    "Graph",
    "Position",
    "GraphConfigurationError",
    "generate",
    "expected_edge_count",
    "connected_component",
    "connected_components",
    "circular_layout",
    "extract_subgraph",
    "overlay_bounds",
    "OverlayLayer",
    "OverlayScene",
    "VisualizerPlugin",
]
