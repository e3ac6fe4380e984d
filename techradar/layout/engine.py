"""
Layout Engine for techradar
Randomized placement of technologies on the radar

Each (quadrant, ring) pair maps to an annular sector. A point is drawn
from the middle half of the ring band and from the central five-sixths of
the quadrant sector, so dots never sit on a ring circle or a quadrant line.

The engine is stateless: calling it twice for the same item gives two
different points. Keeping a dot still across redraws is up to the caller
(see RadarSession).
"""
from __future__ import annotations
from typing import List, Optional, Tuple, TYPE_CHECKING
import math
import logging

import numpy as np

from ..utils import quadrant_index, ring_index
from ..types import QUADRANTS, RINGS, TechnologyRecord
from .types import Point, RingBand, Sector

if TYPE_CHECKING:
    from ..config import LayoutConfig

logger = logging.getLogger(__name__)

SECTOR_WIDTH_DEGREES = 90.0
DEFAULT_MIN_RADIUS_FRACTION = 0.2
DEFAULT_RADIUS_JITTER = (0.25, 0.75)
DEFAULT_ANGLE_JITTER_DEGREES = 75.0


def sector_angle(quadrant: str) -> float:
    """Centre angle of a quadrant's sector in degrees"""
    return quadrant_index(quadrant) * SECTOR_WIDTH_DEGREES - SECTOR_WIDTH_DEGREES / 2


def sector_for(quadrant: str) -> Sector:
    return Sector(quadrant=quadrant, center_deg=sector_angle(quadrant),
                  half_width_deg=SECTOR_WIDTH_DEGREES / 2)


def all_sectors() -> List[Sector]:
    """Sectors of all quadrants in quadrant order"""
    return [sector_for(q) for q in QUADRANTS]


def ring_band(
    ring: str,
    ring_step: float,
    min_radius_fraction: float = DEFAULT_MIN_RADIUS_FRACTION
) -> RingBand:
    """
    Radial band of a ring

    The outer bound of ring ``i`` is ``(i + 1) * ring_step``. The inner bound
    is the previous ring's outer bound, except for the innermost ring which
    starts at ``min_radius_fraction * ring_step`` to keep dots off the centre.

    Args:
        ring: Ring label
        ring_step: Radial distance between ring boundaries (px)
        min_radius_fraction: Inner bound of the innermost ring, in ring steps

    Returns:
        RingBand for the ring

    Raises:
        InvalidCategory: If the ring is unknown
    """
    index = ring_index(ring)
    outer = (index + 1) * ring_step
    if index == 0:
        inner = ring_step * min_radius_fraction
    else:
        inner = index * ring_step
    return RingBand(ring=ring, inner=inner, outer=outer)


def compute_position(
    quadrant: str,
    ring: str,
    center: Point,
    ring_step: float,
    rng: Optional[np.random.Generator] = None,
    min_radius_fraction: float = DEFAULT_MIN_RADIUS_FRACTION,
    radius_jitter: Tuple[float, float] = DEFAULT_RADIUS_JITTER,
    angle_jitter_degrees: float = DEFAULT_ANGLE_JITTER_DEGREES
) -> Point:
    """
    Draw a position for an item of the given quadrant and ring

    Args:
        quadrant: Quadrant label
        ring: Ring label
        center: Chart centre
        ring_step: Radial distance between ring boundaries (px), > 0
        rng: Random source; a fresh unseeded generator if None
        min_radius_fraction: Inner bound of the innermost ring, in ring steps
        radius_jitter: Fraction of the band the radius is drawn from
        angle_jitter_degrees: Full width of the angular perturbation

    Returns:
        Point inside the ring's band and the quadrant's sector

    Raises:
        InvalidCategory: If quadrant or ring is unknown
        ValueError: If ring_step is not positive
    """
    if ring_step <= 0:
        raise ValueError(f"ring_step must be positive, got {ring_step}")

    # Validate both labels before drawing any random numbers
    band = ring_band(ring, ring_step, min_radius_fraction)
    base_angle = sector_angle(quadrant)

    if rng is None:
        rng = np.random.default_rng()

    low, high = radius_jitter
    radius = band.inner + band.width * rng.uniform(low, high)
    half_jitter = angle_jitter_degrees / 2
    angle = base_angle + rng.uniform(-half_jitter, half_jitter)

    theta = math.radians(angle)
    return Point(
        x=center.x + radius * math.cos(theta),
        y=center.y + radius * math.sin(theta)
    )


class LayoutEngine:
    """
    Placement of technologies on the radar

    Wraps compute_position with a LayoutConfig and a random generator.
    Pass a seed to get a reproducible sequence of positions.
    """

    def __init__(self, config: Optional[LayoutConfig] = None, seed: Optional[int] = None):
        """
        Initialize layout engine

        Args:
            config: Layout configuration (default: LayoutConfig())
            seed: Seed for the random generator, or None for fresh entropy
        """
        if config is None:
            from ..config import LayoutConfig
            config = LayoutConfig()
        self.config = config
        self.rng = np.random.default_rng(seed)

        logger.debug(f"LayoutEngine initialized (ring_step={config.ring_step}, seed={seed})")

    @property
    def center(self) -> Point:
        return self.config.center

    def position(self, quadrant: str, ring: str) -> Point:
        """Draw a position for a (quadrant, ring) pair"""
        return compute_position(
            quadrant,
            ring,
            self.config.center,
            self.config.ring_step,
            rng=self.rng,
            min_radius_fraction=self.config.min_radius_fraction,
            radius_jitter=self.config.radius_jitter,
            angle_jitter_degrees=self.config.angle_jitter_degrees
        )

    def position_for(self, technology: TechnologyRecord) -> Point:
        """Draw a position for a technology record"""
        return self.position(technology['quadrant'], technology['ring'])

    def ring_bands(self) -> List[RingBand]:
        """Bands of all rings, innermost first"""
        return [ring_band(r, self.config.ring_step, self.config.min_radius_fraction)
                for r in RINGS]

    def sectors(self) -> List[Sector]:
        """Sectors of all quadrants in quadrant order"""
        return all_sectors()
