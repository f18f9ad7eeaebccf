from .plugin import CircularVisualizer

__all__ = ["CircularVisualizer"]
