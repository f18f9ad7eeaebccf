import logging
import os
from typing import Any, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape
from graph_api.services.visualizer_plugin import VisualizerPlugin
from graph_api.model.graph import Graph
from graph_api.algorithms import overlay_bounds, OverlayLayer, OverlayScene
from graph_platform.config import get_settings

logger = logging.getLogger(__name__)

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), 'templates')


class CircularVisualizer(VisualizerPlugin):
    """Draws graphs laid out on a circle as SVG markup."""

    def __init__(self, settings=None):
        self.settings = settings or get_settings()
        self._env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            autoescape=select_autoescape(['svg', 'html', 'xml']),
        )

    @property
    def plugin_id(self) -> str:
        return "circular-visualizer"

    @property
    def display_name(self) -> str:
        return "Circular View"

    def render_options_schema(self) -> dict:
        return {
            "center": {"type": "tuple[float, float]", "label": "Circle center", "required": False},
            "radius": {"type": "float", "label": "Circle radius", "required": False},
            "stroke": {"type": "str", "label": "Edge and outline color", "required": False},
            "fill": {"type": "str", "label": "Node fill color", "required": False},
        }

    def render(self, graph: Graph, **options: Any) -> Optional[str]:
        style = self.settings.render
        layout = self.settings.layout
        center = options.get("center")
        radius = options.get("radius")
        if center is None:
            center = layout.center
        if radius is None:
            radius = layout.radius

        # Positions are cached on the graph, so this is cheap when already laid out
        if not graph.circular_layout(center, radius):
            logger.debug("Nothing to render for %r", graph)
            return None

        layer = OverlayLayer(graph, options.get("stroke") or style.stroke, options.get("fill") or style.fill)
        scene = overlay_bounds([layer], padding=style.padding)
        if scene is None:
            return None

        return self._render_scene(scene, node_radius=style.node_radius, stroke_width=style.stroke_width)

    def render_overlay(self, layers: Sequence[Any], **options: Any) -> Optional[str]:
        style = self.settings.render
        scene = overlay_bounds(layers, padding=options.get("padding", style.padding))
        if scene is None:
            logger.debug("Nothing to draw in overlay")
            return None

        return self._render_scene(
            scene,
            node_radius=style.overlay_node_radius,
            stroke_width=style.overlay_stroke_width,
        )

    def _render_scene(self, scene: OverlayScene, node_radius: float, stroke_width: float) -> str:
        template = self._env.get_template('circular.svg')

        return template.render(
            width=scene.width,
            height=scene.height,
            layers=scene.layers,
            translate=scene.translate,
            node_radius=node_radius,
            stroke_width=stroke_width,
            font_size=self.settings.render.font_size,
        )
