import logging
import random
from typing import Any, Optional

from graph_api.model import Graph
from graph_api.algorithms import (
    generate,
    expected_edge_count,
    connected_component,
    extract_subgraph,
    OverlayLayer,
)
from graph_api.services import VisualizerPlugin

from .config import PlatformSettings, get_settings
from .registry import PluginRegistry

logger = logging.getLogger(__name__)


class GraphEngine:
    """
    High-level orchestration layer.

    Responsibilities:
    - Graph generation with optional seeding
    - Layout, component extraction and overlay rendering
    - JSON-ready summaries for the web/CLI layer
    """

    def __init__(self, registry: Optional[PluginRegistry] = None, settings: Optional[PlatformSettings] = None):
        self.registry = registry or PluginRegistry()
        self.settings = settings or get_settings()

    # ==========================================================
    # GENERATION
    # ==========================================================

    def generate(self, nodes: int, probability: float, seed: int = 0) -> Graph:
        # seed 0 (or missing) keeps consuming the shared random stream
        rng = random.Random(seed) if seed and seed > 0 else None
        graph = generate(nodes, probability, rng=rng)
        logger.info(
            "Generated graph nodes=%d probability=%s seed=%s edges=%d",
            graph.node_count(), probability, seed, graph.edge_count(),
        )
        return graph

    def summarize(self, graph: Graph, probability: float) -> dict:
        n = graph.node_count()
        expected = expected_edge_count(n, probability) if n > 0 else 0.0
        return {
            "nodes": n,
            "edges": graph.edge_count(),
            "expected_edges": round(expected, 1),
            "graph_data": graph.to_dict(),
        }

    def adjacency(self, graph: Graph) -> dict:
        return {"adjacency_list": graph.format()}

    # ==========================================================
    # LAYOUT + RENDERING
    # ==========================================================

    def layout(self, graph: Graph) -> list:
        layout = self.settings.layout
        return graph.circular_layout(layout.center, layout.radius)

    def get_visualizer(self, name: Optional[str] = None) -> VisualizerPlugin:
        name = name or self.settings.default_visualizer
        visualizer_cls = self.registry.get_visualizer(name)
        if not visualizer_cls:
            raise ValueError(f"Visualizer '{name}' not found.")
        return visualizer_cls()

    def render(self, graph: Graph, visualizer_name: Optional[str] = None, **options: Any) -> Optional[str]:
        visualizer = self.get_visualizer(visualizer_name)
        layout = self.settings.layout
        options.setdefault("center", layout.center)
        options.setdefault("radius", layout.radius)
        return visualizer.render(graph, **options)

    def component_overlay(self, graph: Graph, start: Any, visualizer_name: Optional[str] = None) -> dict:
        """Lay out the graph, extract the component of `start` and draw it over the full graph."""
        visualizer = self.get_visualizer(visualizer_name)
        self.layout(graph)

        component = connected_component(graph, start)
        subgraph = extract_subgraph(graph, component)

        style = self.settings.render
        svg = visualizer.render_overlay([
            OverlayLayer(graph, style.base_stroke, style.base_fill),
            OverlayLayer(subgraph, style.component_stroke, style.component_fill),
        ])

        return {
            "component_size": len(component),
            "component_nodes": component,
            "component_edges": subgraph.edge_count(),
            "svg": svg,
        }
