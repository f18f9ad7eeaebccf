import logging
from importlib.metadata import entry_points
from typing import Dict, Type

from graph_api.services import VisualizerPlugin

logger = logging.getLogger(__name__)

VISUALIZER_GROUP = "graph_platform.visualizer"


class PluginRegistry:

    _instance = None
    _visualizers: Dict[str, Type[VisualizerPlugin]]

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._visualizers = {}
            cls._instance._load_plugins()
        return cls._instance

    def _load_plugins(self):
        for ep in entry_points().select(group=VISUALIZER_GROUP):
            try:
                self._visualizers[ep.name] = ep.load()
            except ImportError:
                logger.exception("Unable to load visualizer plugin '%s'", ep.name)

    def register_visualizer(self, name: str, plugin_cls: Type[VisualizerPlugin]) -> None:
        self._visualizers[name] = plugin_cls

    def get_visualizer(self, name: str) -> Type[VisualizerPlugin] | None:
        return self._visualizers.get(name)

    def list_visualizers(self) -> list[str]:
        return list(self._visualizers.keys())
