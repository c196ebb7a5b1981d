# -*- coding: utf-8 -*-
"""
Map Projection Tests - Simple cylindrical, Mercator, polar stereographic
and orthographic projections.

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

import logging
import math
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from orbmap.body import OblateSpheroid
from orbmap.exceptions import ValidationError
from orbmap.mapping import (
    GRID_LINE,
    CenterGeometry,
    Mercator,
    Orthographic,
    OrthographicCenter,
    PlotInfo,
    PolarStereographic,
    SimpleCylindrical,
)
from orbmap.source import LatitudeImage, LongitudeImage


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sphere():
    """Retrograde sphere of radius 1000 km."""
    return OblateSpheroid(False, 1000.0, 1000.0)


@pytest.fixture
def prograde_sphere():
    return OblateSpheroid(True, 1000.0, 1000.0)


@pytest.fixture
def jupiter():
    return OblateSpheroid(True, 71492.0, 66854.0)


def gudermannian(x):
    return 2 * math.atan(math.exp(x)) - math.pi / 2


# ---------------------------------------------------------------------------
# Simple cylindrical
# ---------------------------------------------------------------------------

class TestSimpleCylindrical:

    def test_latitude_rows(self, sphere):
        info = PlotInfo(36, 18)
        data = SimpleCylindrical(sphere).make_map(
            LatitudeImage(sphere), info).reshape(18, 36)
        # Line 0 is the southernmost.
        np.testing.assert_allclose(data[0], -85.0)
        np.testing.assert_allclose(data[17], 85.0)
        np.testing.assert_allclose(data[:, 0], np.arange(-85, 90, 10))

    def test_retrograde_longitudes(self, sphere):
        data = SimpleCylindrical(sphere).make_map(
            LongitudeImage(), PlotInfo(36, 18)).reshape(18, 36)
        np.testing.assert_allclose(data[4], np.arange(36) * 10 + 5.0)

    def test_prograde_longitudes(self, prograde_sphere):
        data = SimpleCylindrical(prograde_sphere).make_map(
            LongitudeImage(), PlotInfo(36, 18)).reshape(18, 36)
        np.testing.assert_allclose(data[4], 355.0 - np.arange(36) * 10)

    def test_partial_range(self, sphere):
        projection = SimpleCylindrical(sphere, 0.0, 45.0, 10.0, 100.0)
        data = projection.make_map(
            LatitudeImage(sphere), PlotInfo(9, 9)).reshape(9, 9)
        np.testing.assert_allclose(data[0], 2.5)
        np.testing.assert_allclose(data[8], 42.5)

    def test_wrapped_longitudes(self, sphere):
        projection = SimpleCylindrical(sphere, lo_lon=300.0, hi_lon=60.0)
        assert math.degrees(projection.lo_lon) == pytest.approx(-60.0)
        assert math.degrees(projection.hi_lon) == pytest.approx(60.0)

    def test_equal_longitudes(self, sphere, caplog):
        with caplog.at_level(logging.INFO,
                             logger='orbmap.mapping.simple_cylindrical'):
            projection = SimpleCylindrical(sphere, lo_lon=100.0, hi_lon=100.0)
        assert projection.hi_lon - projection.lo_lon == pytest.approx(
            2 * math.pi)
        assert "360 degree" in caplog.text

    def test_graphic_spacing(self, jupiter):
        projection = SimpleCylindrical(jupiter, graphic=True)
        data = projection.make_map(
            LatitudeImage(jupiter, graphic=True),
            PlotInfo(4, 18)).reshape(18, 4)
        np.testing.assert_allclose(data[:, 0], np.arange(-85, 90, 10),
                                   atol=1e-6)

    def test_rejects_inverted_latitudes(self, sphere):
        with pytest.raises(ValidationError, match="less than"):
            SimpleCylindrical(sphere, lo_lat=10.0, hi_lat=-10.0)

    def test_rejects_bad_longitude(self, sphere):
        with pytest.raises(ValidationError, match="lo_lon"):
            SimpleCylindrical(sphere, lo_lon=-400.0)

    def test_grid(self, sphere):
        grid = SimpleCylindrical(sphere).make_grid(
            360, 180, 30.0, 30.0).reshape(180, 360)
        for k in (30, 60, 90, 120, 150):
            assert np.all(grid[k] == GRID_LINE)
        assert np.all(grid[:, 30] == GRID_LINE)
        assert grid[10, 10] == 0


# ---------------------------------------------------------------------------
# Mercator
# ---------------------------------------------------------------------------

class TestMercator:

    @pytest.mark.parametrize("k", [0, 45, 89, 90, 150, 179])
    def test_sphere_gudermannian(self, sphere, k):
        xmax = math.pi / 2
        x = (k + 0.5) / 180 * 2 * xmax - xmax
        assert Mercator(sphere).latitude(k, 360, 180) == pytest.approx(
            gudermannian(x), abs=1e-12)

    def test_latitudes_increase_upward(self, jupiter):
        projection = Mercator(jupiter)
        lats = [projection.latitude(k, 36, 18) for k in range(18)]
        assert lats == sorted(lats)
        assert lats[0] == pytest.approx(-lats[-1])

    def test_map_longitudes(self, prograde_sphere):
        data = Mercator(prograde_sphere).make_map(
            LongitudeImage(), PlotInfo(36, 18)).reshape(18, 36)
        np.testing.assert_allclose(data[9], 355.0 - np.arange(36) * 10)

    def test_distortion(self, sphere, jupiter):
        assert Mercator(sphere).distortion(0.0) == pytest.approx(1.0)
        assert Mercator(jupiter).distortion(0.0) == pytest.approx(1.0)
        assert Mercator(sphere).distortion(math.pi / 3) == pytest.approx(2.0)

    def test_grid(self, sphere):
        grid = Mercator(sphere).make_grid(360, 180, 30.0, 30.0).reshape(
            180, 360)
        assert np.all(grid[90] == GRID_LINE)
        assert np.all(grid[:, 30] == GRID_LINE)


# ---------------------------------------------------------------------------
# Polar stereographic
# ---------------------------------------------------------------------------

class TestPolarStereographic:

    def test_north_center(self, sphere):
        lats, _ = PolarStereographic(sphere)._plot_line(5, 11, 11)
        assert lats[5] == pytest.approx(math.pi / 2)

    def test_edge_latitude(self, sphere):
        lats, _ = PolarStereographic(sphere)._plot_line(5, 11, 11)
        rho = 5 * 4 * 1000.0 / 11
        expected = math.pi / 2 - 2 * math.atan(rho / 2000.0)
        assert lats[10] == pytest.approx(expected, abs=1e-9)

    def test_south_center(self, sphere):
        projection = PolarStereographic(sphere, north_pole=False)
        lats, _ = projection._plot_line(5, 11, 11)
        assert lats[5] == pytest.approx(-math.pi / 2)
        assert lats[10] < 0

    def test_longitude_sense(self, sphere, prograde_sphere):
        _, retro = PolarStereographic(sphere)._plot_line(5, 11, 11)
        _, pro = PolarStereographic(prograde_sphere)._plot_line(5, 11, 11)
        assert pro[10] == pytest.approx(math.pi / 2)
        assert retro[10] == pytest.approx(-math.pi / 2)

    def test_map_edge_reaches_max_lat(self, sphere):
        projection = PolarStereographic(sphere, max_lat=30.0)
        data = projection.make_map(
            LatitudeImage(sphere), PlotInfo(40, 40)).reshape(40, 40)
        # Cell 0 of the middle line sits just inside the 30 degree edge.
        assert 30.0 < data[20, 0] < 33.0

    def test_nan_max_lat_is_equator(self, sphere):
        assert PolarStereographic(sphere, math.nan).max_lat == 0.0

    def test_rejects_pole(self, sphere):
        with pytest.raises(ValidationError, match="90"):
            PolarStereographic(sphere, 90.0)

    def test_distortion(self, sphere):
        projection = PolarStereographic(sphere)
        assert projection.distortion(math.pi / 2) == pytest.approx(1.0)
        assert projection.distortion(0.0) == pytest.approx(2.0)

    def test_grid(self, sphere):
        grid = PolarStereographic(sphere).make_grid(
            101, 101, 30.0, 30.0).reshape(101, 101)
        assert np.any(grid == GRID_LINE)
        # Meridians all pass through the pole.
        assert np.any(grid[49:52, 49:52] == GRID_LINE)


# ---------------------------------------------------------------------------
# Orthographic
# ---------------------------------------------------------------------------

class TestOrthographicCenter:

    def test_default(self):
        assert OrthographicCenter().geometry is CenterGeometry.DEFAULT

    def test_at_pixel(self):
        center = OrthographicCenter.at_pixel(12.0, 34.0)
        assert center.geometry is CenterGeometry.CENTER_GIVEN
        assert (center.sample, center.line) == (12.0, 34.0)

    def test_at_latlon(self):
        center = OrthographicCenter.at_latlon(10.0, 20.0)
        assert center.geometry is CenterGeometry.LAT_LON_GIVEN
        assert (center.lat, center.lon) == (10.0, 20.0)

    def test_at_latlon_rejects_bad_latitude(self):
        with pytest.raises(ValidationError, match="lat"):
            OrthographicCenter.at_latlon(100.0, 0.0)

    def test_at_pixel_rejects_nan(self):
        with pytest.raises(ValidationError, match="finite"):
            OrthographicCenter.at_pixel(math.nan, 0.0)


class TestOrthographic:

    def test_default_layout(self, sphere):
        projection = Orthographic(sphere, 0.0, 0.0)
        kmpp, sample_center, line_center = projection.layout(201, 101)
        assert kmpp == pytest.approx(2000.0 / (0.9 * 101))
        assert (sample_center, line_center) == (100.5, 50.5)

    def test_center_cell(self, sphere):
        projection = Orthographic(sphere, 0.0, 0.0, km_per_pixel=10.0)
        lats, lons = projection._plot_line(100, 201, 201)
        assert lats[100] == pytest.approx(0.0, abs=1e-12)
        assert lons[100] == pytest.approx(0.0, abs=1e-12)

    def test_off_body_is_nan(self, sphere):
        projection = Orthographic(sphere, 0.0, 0.0, km_per_pixel=10.0)
        lats, lons = projection._plot_line(0, 201, 201)
        assert math.isnan(lats[0]) and math.isnan(lons[0])
        assert math.isnan(lats[200])

    def test_retrograde_longitude(self, sphere):
        projection = Orthographic(sphere, 0.0, 0.0, km_per_pixel=10.0)
        _, lons = projection._plot_line(100, 201, 201)
        assert math.degrees(lons[150]) == pytest.approx(30.0)

    def test_prograde_longitude(self, prograde_sphere):
        projection = Orthographic(prograde_sphere, 0.0, 0.0, km_per_pixel=10.0)
        _, lons = projection._plot_line(100, 201, 201)
        assert math.degrees(lons[150]) == pytest.approx(330.0)

    def test_north_toward_higher_lines(self, sphere):
        data = Orthographic(sphere, 0.0, 0.0).make_map(
            LatitudeImage(sphere), PlotInfo(21, 21)).reshape(21, 21)
        assert data[10, 10] == pytest.approx(0.0, abs=1e-9)
        assert data[15, 10] > 0
        assert data[5, 10] < 0
        assert math.isnan(data[0, 0])

    def test_polar(self, sphere):
        projection = Orthographic(sphere, 90.0, 123.0, km_per_pixel=10.0)
        assert projection.polar
        lats, _ = projection._plot_line(100, 201, 201)
        assert lats[100] == pytest.approx(math.pi / 2)

    def test_oblate_tilted(self, jupiter):
        projection = Orthographic(jupiter, 20.0, 100.0, position_angle=30.0)
        lats, lons = projection._plot_line(100, 201, 201)
        # Body center shows the sub-observer point.
        assert lats[100] == pytest.approx(math.radians(20.0), abs=1e-9)
        assert lons[100] == pytest.approx(math.radians(100.0), abs=1e-9)

    def test_center_at_pixel(self, sphere):
        center = OrthographicCenter.at_pixel(20.5, 30.5)
        projection = Orthographic(sphere, 0.0, 0.0, km_per_pixel=10.0,
                                  center=center)
        lats, lons = projection._plot_line(30, 201, 201)
        assert lats[20] == pytest.approx(0.0, abs=1e-12)
        assert lons[20] == pytest.approx(0.0, abs=1e-12)

    def test_center_at_latlon(self, sphere):
        center = OrthographicCenter.at_latlon(10.0, 20.0)
        projection = Orthographic(sphere, 0.0, 0.0, km_per_pixel=10.0,
                                  center=center)
        lats, lons = projection._plot_line(50, 101, 101)
        assert math.degrees(lats[50]) == pytest.approx(10.0, abs=1e-9)
        assert math.degrees(lons[50]) == pytest.approx(20.0, abs=1e-9)

    def test_center_not_visible(self, sphere):
        center = OrthographicCenter.at_latlon(0.0, 180.0)
        projection = Orthographic(sphere, 0.0, 0.0, center=center)
        with pytest.raises(ValidationError, match="not visible"):
            projection.layout(101, 101)

    def test_rejects_bad_scale(self, sphere):
        with pytest.raises(ValidationError, match="km_per_pixel"):
            Orthographic(sphere, 0.0, 0.0, km_per_pixel=0.0)

    def test_grid(self, sphere):
        grid = Orthographic(sphere, 0.0, 0.0, km_per_pixel=10.0).make_grid(
            201, 201, 30.0, 30.0).reshape(201, 201)
        assert grid[0, 0] == 0
        assert grid[200, 200] == 0
        assert grid[100, 100] == GRID_LINE
