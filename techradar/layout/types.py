"""
Layout types for techradar
Geometry returned by the layout engine

All types are immutable (frozen) for safety and testability.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import math


@dataclass(frozen=True)
class Point:
    """
    Cartesian point in chart pixels

    Attributes:
        x: Horizontal coordinate (px)
        y: Vertical coordinate (px), growing downwards like screen space
    """
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point"""
        return math.hypot(self.x - other.x, self.y - other.y)

    def angle_from(self, origin: Point) -> float:
        """Angle of this point around ``origin`` in degrees, in [0, 360)"""
        return math.degrees(math.atan2(self.y - origin.y, self.x - origin.x)) % 360.0


@dataclass(frozen=True)
class RingBand:
    """
    Radial band occupied by a ring

    Attributes:
        ring: Ring label
        inner: Inner radius (px)
        outer: Outer radius (px)
    """
    ring: str
    inner: float
    outer: float

    @property
    def width(self) -> float:
        """Radial width of the band (px)"""
        return self.outer - self.inner

    def contains(self, radius: float) -> bool:
        """Whether a radius lies strictly inside the band"""
        return self.inner < radius < self.outer


@dataclass(frozen=True)
class Sector:
    """
    Angular sector occupied by a quadrant

    Attributes:
        quadrant: Quadrant label
        center_deg: Centre angle in degrees, clockwise on screen from +x
        half_width_deg: Half of the sector width (degrees)
    """
    quadrant: str
    center_deg: float
    half_width_deg: float = 45.0

    @property
    def start_deg(self) -> float:
        return self.center_deg - self.half_width_deg

    @property
    def end_deg(self) -> float:
        return self.center_deg + self.half_width_deg

    def offset_of(self, angle_deg: float) -> float:
        """Signed offset of an angle from the sector centre, in (-180, 180]"""
        offset = (angle_deg - self.center_deg) % 360.0
        if offset > 180.0:
            offset -= 360.0
        return offset
