"""
Layout Module for techradar
Placement of technologies on the radar chart

Public API:
    - LayoutEngine: Configured, seedable placement engine
    - compute_position: Stateless placement of one (quadrant, ring) pair
    - ring_band / sector_angle / sector_for / all_sectors: Chart geometry
    - Point, RingBand, Sector: Geometry types
"""

from .engine import LayoutEngine, all_sectors, compute_position, ring_band, sector_angle, sector_for
from .types import Point, RingBand, Sector

__all__ = [
    'LayoutEngine',
    'compute_position',
    'ring_band',
    'sector_angle',
    'sector_for',
    'all_sectors',
    'Point',
    'RingBand',
    'Sector',
]
