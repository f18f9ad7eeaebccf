"""Graph platform: orchestration, plugin discovery and settings."""

from .config import PlatformSettings, get_settings, configure_logging
from .engine import GraphEngine
from .registry import PluginRegistry

__all__ = ["GraphEngine", "PluginRegistry", "PlatformSettings", "get_settings", "configure_logging"]
