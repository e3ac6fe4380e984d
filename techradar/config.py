"""
techradar Configuration
Chart geometry and plot styling
"""
from dataclasses import dataclass, field
from typing import Tuple

from .layout.types import Point


@dataclass
class LayoutConfig:
    """
    Radar geometry used for item placement

    Rings are concentric bands ``ring_step`` pixels wide; quadrants are
    90 degree sectors.
    """

    # ============================================================
    # CANVAS
    # ============================================================
    width: int = 700
    """Chart width (px)"""

    height: int = 700
    """Chart height (px)"""

    ring_step: float = 70.0
    """Radial distance between successive ring boundaries (px)"""

    # ============================================================
    # PLACEMENT
    # ============================================================
    min_radius_fraction: float = 0.2
    """Inner bound of the Adopt ring as a fraction of ring_step"""

    radius_jitter: Tuple[float, float] = (0.25, 0.75)
    """Fraction of the ring band a radius is drawn from (low, high)"""

    angle_jitter_degrees: float = 75.0
    """Full width of the angular perturbation around a sector centre (degrees)"""

    @property
    def center(self) -> Point:
        """Chart centre point"""
        return Point(self.width / 2, self.height / 2)

    @property
    def outer_radius(self) -> float:
        """Radius of the outermost ring boundary (px)"""
        return self.ring_step * 4


@dataclass
class ColorConfig:
    """Colours for rings, quadrants and item markers"""

    rings: Tuple[str, ...] = ('#10b981', '#f59e0b', '#f97316', '#ef4444')
    """Ring label colours in ring order"""

    quadrants: Tuple[str, ...] = ('#3b82f6', '#8b5cf6', '#06b6d4', '#10b981')
    """Dot and label colours in quadrant order"""

    grid: str = '#e2e8f0'
    text: str = '#475569'
    background: str = '#fefefe'

    new_marker: str = '#ef4444'
    """Colour of the badge on new technologies"""

    moved_in: str = '#10b981'
    """Movement triangle colour for items moving toward Adopt"""

    moved_out: str = '#ef4444'
    """Movement triangle colour for items moving toward Hold"""


@dataclass
class PlotConfig:
    """
    Complete plot configuration
    """

    # ============================================================
    # SUB-CONFIGURATIONS
    # ============================================================
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    """Layout configuration"""

    colors: ColorConfig = field(default_factory=ColorConfig)
    """Colour palette"""

    # ============================================================
    # MARKERS
    # ============================================================
    dot_radius: float = 7.0
    """Radius of an item dot (px)"""

    selected_dot_radius: float = 10.0
    """Radius of the selected item dot (px)"""

    dot_alpha: float = 0.85
    """Opacity of unselected dots"""

    new_marker_radius: float = 5.0
    """Radius of the 'new' badge (px)"""

    new_marker_offset: float = 10.0
    """Offset of the 'new' badge from the dot centre (px)"""

    grid_linewidth: float = 1.5
    """Line width for ring circles and quadrant lines"""

    # ============================================================
    # LABELS
    # ============================================================
    ring_label_fontsize: int = 10
    quadrant_label_fontsize: int = 11
    item_label_fontsize: int = 9

    quadrant_label_radius_factor: float = 4.2
    """Quadrant label distance from the centre in ring steps"""

    # ============================================================
    # FIGURE SETTINGS
    # ============================================================
    figure_size: float = 10.0
    """Figure size in inches (square plot)"""

    dpi: int = 150
    """DPI for saved figures"""

    title_fontsize: int = 14
    """Font size for main title"""

    margin: float = 80.0
    """Padding around the outermost ring to the axes edge (px)"""

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def publication(cls) -> 'PlotConfig':
        """
        High-quality settings for printed reports

        Example:
            >>> config = PlotConfig.publication()
            >>> plotter = RadarPlotter(config)
        """
        config = cls()
        config.dpi = 300
        config.figure_size = 12.0
        config.grid_linewidth = 2.0
        return config

    @classmethod
    def presentation(cls) -> 'PlotConfig':
        """
        Settings for slides: lower DPI, larger fonts and dots
        """
        config = cls()
        config.dpi = 100
        config.figure_size = 10.0
        config.title_fontsize = 18
        config.ring_label_fontsize = 13
        config.quadrant_label_fontsize = 14
        config.item_label_fontsize = 12
        config.dot_radius = 9.0
        config.selected_dot_radius = 12.0
        return config

    @classmethod
    def from_preset(cls, name: str) -> 'PlotConfig':
        """Build a configuration by preset name ('default', 'publication', 'presentation')"""
        if name == 'default':
            return cls()
        if name == 'publication':
            return cls.publication()
        if name == 'presentation':
            return cls.presentation()
        raise ValueError(f"Unknown preset: {name}")
