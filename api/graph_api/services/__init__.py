"""Service-level plugin contracts for graph_api."""

from .visualizer_plugin import VisualizerPlugin

__all__ = ["VisualizerPlugin"]
