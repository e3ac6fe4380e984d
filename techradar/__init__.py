"""techradar: Technology radar visualization and editing"""

from .config import LayoutConfig, ColorConfig, PlotConfig
from .exceptions import TechRadarError, InvalidCategory, MalformedInput
from .layout import LayoutEngine, compute_position, Point
from .session import RadarSession
from . import editor
from . import filters
from .visualizer import RadarPlotter

__version__ = "0.1.0"
__all__ = [
    "LayoutConfig", "ColorConfig", "PlotConfig",
    "TechRadarError", "InvalidCategory", "MalformedInput",
    "LayoutEngine", "compute_position", "Point",
    "RadarSession", "editor", "filters", "RadarPlotter",
]
