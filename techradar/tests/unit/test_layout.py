"""
Unit tests for the layout engine

Placement is random, so the range properties are checked over many
seeded draws and the exact arithmetic with a generator pinned to the
ends of its ranges.
"""
import math

import numpy as np
import pytest

from techradar.config import LayoutConfig
from techradar.exceptions import InvalidCategory
from techradar.layout import (
    LayoutEngine,
    Point,
    all_sectors,
    compute_position,
    ring_band,
    sector_angle,
    sector_for,
)
from techradar.types import QUADRANTS, RINGS

pytestmark = pytest.mark.unit

CENTER = Point(350.0, 350.0)
STEP = 70.0


class PinnedRng:
    """Generator stand-in returning the low or high end of every range"""

    def __init__(self, use_high: bool):
        self.use_high = use_high

    def uniform(self, low, high):
        return high if self.use_high else low


class TestGeometry:
    """Tests for ring_band and sector_angle"""

    def test_sector_angles(self):
        """Sectors are centred at -45, 45, 135 and 225 degrees in quadrant order"""
        assert [sector_angle(q) for q in QUADRANTS] == [-45.0, 45.0, 135.0, 225.0]

    def test_sectors_meet_on_axes(self):
        """Consecutive sectors meet at 0, 90, 180 and 270 degrees"""
        starts = sorted(sector_for(q).start_deg % 360 for q in QUADRANTS)
        assert starts == [0.0, 90.0, 180.0, 270.0]

    def test_all_sectors(self):
        assert [s.quadrant for s in all_sectors()] == list(QUADRANTS)
        assert [s.start_deg for s in all_sectors()] == [-90.0, 0.0, 90.0, 180.0]

    def test_ring_bands(self):
        bands = [ring_band(r, STEP) for r in RINGS]
        assert [(b.inner, b.outer) for b in bands] == [
            (pytest.approx(14.0), 70.0), (70.0, 140.0), (140.0, 210.0), (210.0, 280.0)
        ]

    def test_adopt_uses_minimum_radius(self):
        """Innermost ring starts at the minimum radius, not at the centre"""
        band = ring_band('Adopt', 100.0, min_radius_fraction=0.25)
        assert band.inner == 25.0
        assert band.outer == 100.0

    def test_invalid_ring(self):
        with pytest.raises(InvalidCategory):
            ring_band('Maybe', STEP)

    def test_invalid_quadrant(self):
        with pytest.raises(InvalidCategory):
            sector_angle('Databases')


class TestComputePosition:
    """Tests for compute_position"""

    @pytest.mark.parametrize("quadrant", QUADRANTS)
    @pytest.mark.parametrize("ring", RINGS)
    def test_point_inside_band_and_subsector(self, quadrant, ring):
        """Every draw lies strictly inside the ring band and the ±37.5° sub-sector"""
        rng = np.random.default_rng(1234)
        band = ring_band(ring, STEP)
        sector = sector_for(quadrant)
        for _ in range(300):
            point = compute_position(quadrant, ring, CENTER, STEP, rng=rng)
            radius = point.distance_to(CENTER)
            assert band.inner < radius < band.outer
            offset = sector.offset_of(point.angle_from(CENTER))
            assert abs(offset) <= 37.5 + 1e-9
            assert abs(offset) < 45.0

    def test_radius_stays_in_middle_half(self):
        rng = np.random.default_rng(7)
        band = ring_band('Assess', STEP)
        radii = [compute_position('Tools', 'Assess', CENTER, STEP, rng=rng).distance_to(CENTER)
                 for _ in range(500)]
        assert min(radii) >= band.inner + 0.25 * band.width - 1e-9
        assert max(radii) <= band.inner + 0.75 * band.width + 1e-9

    def test_low_end_of_ranges(self):
        """Pinned to the low end: quarter of the band, 37.5° before the centre"""
        point = compute_position('Platforms', 'Trial', CENTER, STEP, rng=PinnedRng(False))
        radius = 70.0 + 70.0 * 0.25
        angle = math.radians(45.0 - 37.5)
        assert point.x == pytest.approx(CENTER.x + radius * math.cos(angle))
        assert point.y == pytest.approx(CENTER.y + radius * math.sin(angle))

    def test_high_end_of_ranges(self):
        point = compute_position('Techniques', 'Adopt', CENTER, STEP, rng=PinnedRng(True))
        radius = 14.0 + 56.0 * 0.75
        angle = math.radians(-45.0 + 37.5)
        assert point.x == pytest.approx(CENTER.x + radius * math.cos(angle))
        assert point.y == pytest.approx(CENTER.y + radius * math.sin(angle))

    def test_non_deterministic_without_seed(self):
        """Two unseeded calls do not return the same point"""
        first = compute_position('Tools', 'Hold', CENTER, STEP)
        second = compute_position('Tools', 'Hold', CENTER, STEP)
        assert first != second

    def test_invalid_quadrant(self):
        with pytest.raises(InvalidCategory) as excinfo:
            compute_position('Databases', 'Adopt', CENTER, STEP)
        assert excinfo.value.kind == 'quadrant'

    def test_invalid_ring(self):
        with pytest.raises(InvalidCategory) as excinfo:
            compute_position('Tools', 'adopt', CENTER, STEP)
        assert excinfo.value.kind == 'ring'

    def test_invalid_category_is_value_error(self):
        with pytest.raises(ValueError):
            compute_position('Tools', 'Someday', CENTER, STEP)

    def test_ring_step_must_be_positive(self):
        with pytest.raises(ValueError):
            compute_position('Tools', 'Adopt', CENTER, 0)


class TestLayoutEngine:
    """Tests for LayoutEngine"""

    def test_seeded_engines_agree(self):
        a = LayoutEngine(seed=42)
        b = LayoutEngine(seed=42)
        pairs = [(q, r) for q in QUADRANTS for r in RINGS]
        assert [a.position(q, r) for q, r in pairs] == [b.position(q, r) for q, r in pairs]

    def test_uses_config_geometry(self):
        config = LayoutConfig(width=400, height=400, ring_step=40.0)
        engine = LayoutEngine(config, seed=0)
        assert engine.center == Point(200.0, 200.0)
        for _ in range(100):
            point = engine.position('Techniques', 'Hold')
            assert 120.0 < point.distance_to(engine.center) < 160.0

    def test_position_for_record(self, react_only):
        engine = LayoutEngine(seed=3)
        point = engine.position_for(react_only[0])
        sector = sector_for('Tools')
        assert abs(sector.offset_of(point.angle_from(engine.center))) < 45.0
        assert point.distance_to(engine.center) < 70.0

    def test_bands_and_sectors(self):
        engine = LayoutEngine()
        assert [b.ring for b in engine.ring_bands()] == list(RINGS)
        assert [s.quadrant for s in engine.sectors()] == list(QUADRANTS)
        assert engine.sectors() == all_sectors()
