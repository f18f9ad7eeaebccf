import logging
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ─────────────────────────────────────────────────────────────
# Section configs
# ─────────────────────────────────────────────────────────────


class LoggingSettings(BaseModel):
    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    format: str = "%(asctime)-20s %(name)-40s %(levelname)-8s: %(message)s"


class LayoutSettings(BaseModel):
    center_x: float = Field(400.0, description="X coordinate of the layout circle center.")
    center_y: float = Field(400.0, description="Y coordinate of the layout circle center.")
    radius: float = Field(200.0, gt=0, description="Radius of the layout circle.")

    @property
    def center(self) -> tuple[float, float]:
        return (self.center_x, self.center_y)


class RenderSettings(BaseModel):
    padding: float = Field(20.0, ge=0, description="Blank margin around the drawn nodes.")
    font_size: int = 12

    # single graph
    node_radius: float = 10.0
    stroke_width: float = 2.0
    stroke: str = "red"
    fill: str = "lightblue"

    # overlay
    overlay_node_radius: float = 12.0
    overlay_stroke_width: float = 1.0
    base_stroke: str = "lightgray"
    base_fill: str = "white"
    component_stroke: str = "red"
    component_fill: str = "pink"


# ─────────────────────────────────────────────────────────────
# Top-level settings
# ─────────────────────────────────────────────────────────────


class PlatformSettings(BaseSettings):
    """
    Configuration for the graph platform and its visualizers.

    Precedence (highest → lowest):

    1. Init kwargs (tests/overrides)
    2. Environment variables (GRAPH_PLATFORM_LAYOUT__RADIUS, ...)
    3. .env
    4. Defaults in this class
    """

    model_config = SettingsConfigDict(
        env_prefix="GRAPH_PLATFORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = LoggingSettings()
    layout: LayoutSettings = LayoutSettings()  # type: ignore[call-arg]
    render: RenderSettings = RenderSettings()  # type: ignore[call-arg]
    default_visualizer: str = "circular"


@lru_cache(maxsize=1)
def get_settings() -> PlatformSettings:
    """
    Cached accessor for process-wide settings.

    For one-off overrides build `PlatformSettings(...)` directly and pass it
    to GraphEngine / CircularVisualizer; this instance stays untouched.
    """
    return PlatformSettings()


def configure_logging(settings: PlatformSettings | None = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.logging.level, format=settings.logging.format)
