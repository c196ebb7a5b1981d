# -*- coding: utf-8 -*-
"""
Body Tests - Oblate spheroid geometry and angle validation.

Dependencies
------------
pytest

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import math
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from orbmap._validation import (
    validate_latitude,
    validate_longitude,
    validate_position_angle,
)
from orbmap.body import OblateSpheroid
from orbmap.exceptions import ValidationError


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sphere():
    return OblateSpheroid(False, 1000.0, 1000.0)


@pytest.fixture
def jupiter():
    return OblateSpheroid(True, 71492.0, 66854.0)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:

    def test_properties(self, jupiter):
        assert jupiter.prograde is True
        assert jupiter.eq_rad == 71492.0
        assert jupiter.pol_rad == 66854.0

    def test_flattening(self, jupiter):
        assert jupiter.flattening == pytest.approx((71492 - 66854) / 71492)

    def test_eccentricity(self, jupiter):
        expected = math.sqrt(1 - (66854 / 71492) ** 2)
        assert jupiter.first_eccentricity == pytest.approx(expected)

    def test_sphere_is_round(self, sphere):
        assert sphere.flattening == 0
        assert sphere.first_eccentricity == 0

    def test_rejects_non_positive_radius(self):
        with pytest.raises(ValidationError, match="positive"):
            OblateSpheroid(True, 0.0, 0.0)
        with pytest.raises(ValidationError, match="positive"):
            OblateSpheroid(True, 100.0, -1.0)

    def test_rejects_prolate(self):
        with pytest.raises(ValidationError, match="exceeds"):
            OblateSpheroid(True, 100.0, 200.0)


# ---------------------------------------------------------------------------
# Latitude conversions and radii
# ---------------------------------------------------------------------------

class TestLatitudes:

    def test_sphere_identity(self, sphere):
        lat = np.linspace(-1.5, 1.5, 7)
        np.testing.assert_allclose(sphere.graphic_latitude(lat), lat)
        np.testing.assert_allclose(sphere.centric_latitude(lat), lat)

    def test_round_trip(self, jupiter):
        lat = np.linspace(-1.5, 1.5, 11)
        back = jupiter.centric_latitude(jupiter.graphic_latitude(lat))
        np.testing.assert_allclose(back, lat, atol=1e-12)

    def test_graphic_exceeds_centric(self, jupiter):
        lat = math.radians(45)
        assert jupiter.graphic_latitude(lat) > lat
        assert jupiter.centric_latitude(lat) < lat

    def test_equator_and_pole(self, jupiter):
        assert jupiter.graphic_latitude(0.0) == 0.0
        assert jupiter.graphic_latitude(math.pi / 2) == pytest.approx(
            math.pi / 2)


class TestRadii:

    def test_centric_radius(self, jupiter):
        assert jupiter.centric_radius(0.0) == pytest.approx(71492.0)
        assert jupiter.centric_radius(math.pi / 2) == pytest.approx(66854.0)

    def test_centric_radius_vectorized(self, jupiter):
        radii = jupiter.centric_radius(np.array([0.0, math.pi / 2]))
        np.testing.assert_allclose(radii, [71492.0, 66854.0])

    def test_sphere_curvature(self, sphere):
        lat = np.linspace(-1.2, 1.2, 5)
        np.testing.assert_allclose(sphere.N(lat), 1000.0)
        np.testing.assert_allclose(sphere.M(lat), 1000.0)

    def test_curvature_at_equator(self, jupiter):
        a = jupiter.eq_rad
        e2 = jupiter.first_eccentricity ** 2
        assert jupiter.N(0.0) == pytest.approx(a)
        assert jupiter.M(0.0) == pytest.approx(a * (1 - e2))

    def test_curvature_at_pole(self, jupiter):
        # Both radii of curvature equal a**2 / c at the pole.
        expected = jupiter.eq_rad ** 2 / jupiter.pol_rad
        assert jupiter.N(math.pi / 2) == pytest.approx(expected)
        assert jupiter.M(math.pi / 2) == pytest.approx(expected)


class TestMu0:

    def test_sub_point(self, sphere):
        assert sphere.mu0(0.3, 1.2, 0.3, 1.2) == pytest.approx(1.0)

    def test_limb(self, sphere):
        assert sphere.mu0(0.0, 0.0, 0.0, math.pi / 2) == pytest.approx(
            0.0, abs=1e-15)

    def test_far_side(self, sphere):
        assert sphere.mu0(0.0, 0.0, 0.0, math.pi) < 0

    def test_vectorized(self, sphere):
        lon = np.array([0.0, math.pi / 3, math.pi])
        np.testing.assert_allclose(
            sphere.mu0(0.0, 0.0, 0.0, lon), [1.0, 0.5, -1.0], atol=1e-12
        )


class TestMu:

    def test_sub_point(self, sphere):
        assert sphere.mu(0.3, 1.2, 0.3, 1.2, 10000.0) == pytest.approx(1.0)

    def test_distant_observer_matches_mu0(self, jupiter):
        lat = np.array([-1.0, 0.2, 0.7])
        np.testing.assert_allclose(
            jupiter.mu(0.4, 0.1, lat, 0.5), jupiter.mu0(0.4, 0.1, lat, 0.5)
        )

    def test_oblate_sub_point(self, jupiter):
        # The line of sight is radial, the normal is not.
        lat = math.radians(30.0)
        latg = jupiter.graphic_latitude(lat)
        assert jupiter.mu(lat, 0.0, lat, 0.0, 1.0e6) == pytest.approx(
            math.cos(latg - lat))

    def test_limb_of_nearby_observer(self, sphere):
        # From twice the radius the limb lies 60 degrees from the sub point.
        assert sphere.mu(0.0, 0.0, 0.0, math.pi / 3, 2000.0) == pytest.approx(
            0.0, abs=1e-12)
        assert sphere.mu(0.0, 0.0, 0.0, 1.2, 2000.0) < 0


class TestCosPhase:

    def test_sun_behind_distant_observer(self, sphere):
        assert sphere.cos_phase(0.2, 0.5, 0.2, 0.5, 1.0, 2.0) == pytest.approx(
            1.0)

    def test_quadrature(self, sphere):
        assert sphere.cos_phase(0.0, 0.0, 0.0, math.pi / 2, 0.3, 0.4) == (
            pytest.approx(0.0, abs=1e-15))

    def test_distant_observer_vectorized(self, sphere):
        lat = np.array([0.0, 0.5, 1.0])
        result = sphere.cos_phase(0.0, 0.0, 0.0, math.pi, lat, 0.0)
        np.testing.assert_allclose(result, [-1.0, -1.0, -1.0])

    def test_nearby_observer(self, sphere):
        # Sun and observer both over (0, 0); the observer at twice the
        # radius sees the point at 60 degrees longitude at 30 degrees
        # phase.
        result = sphere.cos_phase(0.0, 0.0, 0.0, 0.0, 0.0, math.pi / 3,
                                  2000.0)
        assert result == pytest.approx(math.cos(math.radians(30.0)))


# ---------------------------------------------------------------------------
# Angle validation
# ---------------------------------------------------------------------------

class TestValidation:

    def test_latitude_converts(self):
        assert validate_latitude(90.0) == pytest.approx(math.pi / 2)
        assert validate_latitude(-45.0) == pytest.approx(-math.pi / 4)

    def test_latitude_out_of_range(self):
        with pytest.raises(ValidationError, match="latitude"):
            validate_latitude(90.5)

    def test_latitude_nan(self):
        with pytest.raises(ValidationError):
            validate_latitude(math.nan)

    def test_longitude_range(self):
        assert validate_longitude(-360.0) == pytest.approx(-2 * math.pi)
        with pytest.raises(ValidationError, match="sub_lon"):
            validate_longitude(361.0, 'sub_lon')

    def test_position_angle(self):
        assert validate_position_angle(180.0) == pytest.approx(math.pi)
        with pytest.raises(ValidationError, match="position_angle"):
            validate_position_angle(-400.0)
