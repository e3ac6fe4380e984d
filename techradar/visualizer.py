"""
Radar visualizer

Draws the technology radar: grid, ring and quadrant labels, one dot per
technology plus its 'new' badge and movement triangle.
"""

from __future__ import annotations
from typing import Dict, Mapping, Optional
from pathlib import Path
import math
import logging

import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .config import PlotConfig
from .layout import Point, all_sectors, sector_angle
from .types import QUADRANTS, RINGS, Collection, TechnologyRecord
from .utils import quadrant_index, split_label

logger = logging.getLogger(__name__)


class RadarPlotter:
    """
    Renders a technology radar with matplotlib

    Coordinates are chart pixels with the y axis pointing down, so angles
    grow clockwise on screen.
    """

    def __init__(self, config: Optional[PlotConfig] = None) -> None:
        """
        Initialize RadarPlotter

        Args:
            config: Plot configuration. If None, uses default settings.

        Example:
            >>> plotter = RadarPlotter()
            >>> plotter = RadarPlotter(PlotConfig.publication())
        """
        self.config: PlotConfig = config or PlotConfig()

    def _polar(self, radius: float, angle_deg: float) -> Point:
        center = self.config.layout.center
        theta = math.radians(angle_deg)
        return Point(center.x + radius * math.cos(theta), center.y + radius * math.sin(theta))

    def _draw_grid(self, ax: Axes) -> None:
        layout = self.config.layout
        colors = self.config.colors
        center = layout.center.as_tuple()

        ax.add_patch(patches.Circle(center, layout.outer_radius, facecolor=colors.background,
                                    edgecolor=colors.grid, linewidth=2, zorder=0))

        for index in range(len(RINGS)):
            ax.add_patch(patches.Circle(center, (index + 1) * layout.ring_step, fill=False,
                                        edgecolor=colors.grid, linewidth=self.config.grid_linewidth,
                                        alpha=0.7, zorder=1))

        # Sectors meet at 0, 90, 180 and 270 degrees
        for sector in all_sectors():
            end = self._polar(layout.outer_radius, sector.start_deg)
            ax.plot([center[0], end.x], [center[1], end.y], color=colors.grid,
                    linewidth=self.config.grid_linewidth, alpha=0.7, zorder=1)

    def _draw_labels(self, ax: Axes) -> None:
        layout = self.config.layout
        colors = self.config.colors
        center = layout.center

        for index, ring in enumerate(RINGS):
            radius = (index + 1) * layout.ring_step
            ax.text(center.x + 15, center.y - radius + 8, ring,
                    color=colors.rings[index], fontsize=self.config.ring_label_fontsize,
                    weight='bold', ha='left', va='center', zorder=4,
                    bbox=dict(boxstyle='round,pad=0.25', facecolor='white',
                              edgecolor=colors.rings[index], linewidth=1, alpha=0.95))

        label_radius = layout.ring_step * self.config.quadrant_label_radius_factor
        for index, quadrant in enumerate(QUADRANTS):
            pos = self._polar(label_radius, sector_angle(quadrant))
            ax.text(pos.x, pos.y, '\n'.join(split_label(quadrant)),
                    color=colors.quadrants[index], fontsize=self.config.quadrant_label_fontsize,
                    weight='heavy', ha='center', va='center', zorder=4,
                    bbox=dict(boxstyle='round,pad=0.5', facecolor='white',
                              edgecolor=colors.quadrants[index], linewidth=2, alpha=0.95))

    def _draw_technology(
        self,
        ax: Axes,
        technology: TechnologyRecord,
        position: Point,
        selected: bool
    ) -> None:
        colors = self.config.colors
        color = colors.quadrants[quadrant_index(technology['quadrant'])]
        x, y = position.as_tuple()

        radius = self.config.selected_dot_radius if selected else self.config.dot_radius
        ax.add_patch(patches.Circle((x, y), radius, facecolor=color, edgecolor='white',
                                    linewidth=2, alpha=1.0 if selected else self.config.dot_alpha,
                                    zorder=5))

        if technology.get('isNew'):
            offset = self.config.new_marker_offset
            ax.add_patch(patches.Circle((x + offset, y - offset), self.config.new_marker_radius,
                                        facecolor=colors.new_marker, edgecolor='white',
                                        linewidth=1.5, zorder=6))

        moved = technology.get('moved', 0)
        if moved:
            triangle = [(x + 12, y - 8), (x + 12, y + 8), (x + 20, y)]
            ax.add_patch(patches.Polygon(triangle, closed=True,
                                         facecolor=colors.moved_in if moved > 0 else colors.moved_out,
                                         edgecolor='white', linewidth=1, zorder=6))

        if selected:
            ax.text(x, y - 20, technology['name'], color=color,
                    fontsize=self.config.item_label_fontsize, weight='bold',
                    ha='center', va='center', zorder=7,
                    bbox=dict(boxstyle='round,pad=0.3', facecolor='white',
                              edgecolor=color, linewidth=1, alpha=0.95))

    def plot(
        self,
        technologies: Collection,
        positions: Mapping[int, Point],
        output_file: Optional[str] = 'technology_radar.png',
        title: Optional[str] = None,
        selected_id: Optional[int] = None,
        show: bool = False
    ) -> Figure:
        """
        Generate the radar plot

        Args:
            technologies: Records to draw
            positions: Position of each record keyed by id
            output_file: Path to save figure, or None to skip saving
            title: Plot title (default: 'Technology Radar')
            selected_id: Id of the highlighted record, drawn larger and labelled
            show: Whether to display the plot

        Returns:
            matplotlib Figure object

        Raises:
            KeyError: If a record has no entry in positions
        """
        layout = self.config.layout
        size = self.config.figure_size

        fig, ax = plt.subplots(figsize=(size, size))
        margin = self.config.margin
        ax.set_xlim(layout.center.x - layout.outer_radius - margin,
                    layout.center.x + layout.outer_radius + margin)
        # Inverted: screen coordinates
        ax.set_ylim(layout.center.y + layout.outer_radius + margin,
                    layout.center.y - layout.outer_radius - margin)
        ax.set_aspect('equal')
        ax.axis('off')

        self._draw_grid(ax)
        self._draw_labels(ax)

        drawn: Dict[str, int] = {}
        for technology in technologies:
            position = positions[technology['id']]
            self._draw_technology(ax, technology, position, technology['id'] == selected_id)
            drawn[technology['quadrant']] = drawn.get(technology['quadrant'], 0) + 1
        logger.debug(f"Drawn per quadrant: {drawn}")

        fig.suptitle(title or 'Technology Radar', fontsize=self.config.title_fontsize,
                     weight='bold', color=self.config.colors.text)

        if output_file:
            Path(output_file).parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(output_file, dpi=self.config.dpi, bbox_inches='tight',
                        facecolor='white', edgecolor='none')
            logger.info(f"Plot saved to {output_file}")

        if show:
            plt.show()

        return fig
