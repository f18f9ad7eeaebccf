"""Visualizer plugin interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence
from ..model import Graph


class VisualizerPlugin(ABC):
    """
    Contract for plugins that turn graph geometry into markup (SVG/HTML).

    Plugins consume only what the core produces: node order, canonical edges
    and cached positions (see `graph_api.algorithms.overlay_bounds`). Both
    render methods return the markup as a string, or None when there is
    nothing to draw (empty graph, invalid layout parameters, or no
    positioned node in any layer). They never raise for such input.
    """

    @property
    @abstractmethod
    def plugin_id(self) -> str:
        """Return a unique, stable plugin identifier."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Return a human-readable plugin name for UI and logs."""

    def render_options_schema(self) -> dict[str, Any] | None:
        """Return an optional render options schema for UI/platform integration."""
        return None

    @abstractmethod
    def render(self, graph: "Graph", **options: Any) -> str | None:
        """Render a single graph; None when there is nothing to draw."""

    @abstractmethod
    def render_overlay(self, layers: Sequence[Any], **options: Any) -> str | None:
        """Render several (graph, stroke, fill) layers into one shared canvas."""
