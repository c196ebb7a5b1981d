# -*- coding: utf-8 -*-
"""
Polar Stereographic Projection - Conformal azimuthal projection of an
oblate spheroid centered on a pole.

The radial distance of a point from the pole on the map is::

    rho = C tan(pi/4 - latg/2) ((1 + e sin latg) / (1 - e sin latg))**(e/2)
    C   = 2a (1 + e)**(-(1 - e)/2) (1 - e)**(-(1 + e)/2)

where ``latg`` is planetographic latitude. Each cell's latitude is
recovered from its distance to the map center with a bracketed root
search.

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

# Standard library
import math
from typing import Tuple

# Third-party
import numpy as np

# orbmap internal
from orbmap.body import OblateSpheroid
from orbmap.exceptions import ValidationError
from orbmap.mapping.factory import GRID_LINE, MapFactory
from orbmap.numerics.roots import root_find_bracketed

# Points sampled along each grid circle and meridian.
_GRID_SAMPLES = 2000


class PolarStereographic(MapFactory):
    """
    Polar stereographic map projection.

    Parameters
    ----------
    body : OblateSpheroid
        Mapped body.
    max_lat : float, default=0.0
        Planetocentric latitude, in degrees, reached at the edge of the
        smaller map dimension. Measured toward the opposite pole for a
        south polar map, so ``max_lat=0`` always ends at the equator.
    north_pole : bool, default=True
        Center the map on the north pole rather than the south pole.

    Raises
    ------
    ValidationError
        If ``|max_lat| >= 90``.
    """

    def __init__(
        self,
        body: OblateSpheroid,
        max_lat: float = 0.0,
        north_pole: bool = True
    ) -> None:
        if math.isnan(max_lat):
            max_lat = 0.0
        if abs(max_lat) >= 90:
            raise ValidationError(
                f"Maximum polar stereographic latitude ({max_lat}) >= 90"
            )

        a = body.eq_rad
        e = body.first_eccentricity

        self.body = body
        self.max_lat = math.radians(max_lat)
        self.north_pole = north_pole
        self._rho_coeff = (
            2 * a * (1 + e) ** (-(1 - e) / 2) * (1 - e) ** (-(1 + e) / 2)
        )
        self._distortion_coeff = (
            (1 + e) ** (1 - 2 * e) * (1 - e) ** (1 + 2 * e) / (4 * a * a)
        )

    @property
    def projection_name(self) -> str:
        return "Polar Stereographic"

    def _map_equation(self, latg: float) -> float:
        e = self.body.first_eccentricity
        t = e * math.sin(latg)
        return (
            self._rho_coeff * math.tan(math.pi / 4 - latg / 2)
            * ((1 + t) / (1 - t)) ** (e / 2)
        )

    def stereo_rho(self, latg: float) -> float:
        """Distance from the map center, in kilometers, of a
        planetographic latitude."""
        if not self.north_pole:
            latg = -latg
        return self._map_equation(latg)

    def distortion(self, latg: float) -> float:
        """Scale factor at a planetographic latitude, relative to the
        pole."""
        return 1 + self._distortion_coeff * self.stereo_rho(latg) ** 2

    def _pixel_scale(self, samples: int, lines: int) -> float:
        rho_max = self.stereo_rho(
            float(self.body.graphic_latitude(self.max_lat))
        )
        return 2 * rho_max / min(samples, lines)

    def _plot_line(
        self,
        k: int,
        samples: int,
        lines: int
    ) -> Tuple[np.ndarray, np.ndarray]:
        pix_conv_val = self._pixel_scale(samples, lines)

        ccw = self.north_pole == self.body.prograde

        x = k + 0.5 - lines / 2.0
        y = np.arange(samples) + 0.5 - samples / 2.0

        lats = np.empty(samples)
        for i in range(samples):
            rho = pix_conv_val * math.hypot(y[i], x)
            latg = root_find_bracketed(
                rho, -math.pi / 2, math.pi / 2, self._map_equation
            )
            lats[i] = self.body.centric_latitude(
                latg if self.north_pole else -latg
            )

        lons = np.arctan2(y if ccw else -y, x)
        return lats, lons

    def _plot_grid(self, samples, lines, lat_interval, lon_interval, grid):
        pix_conv_val = self._pixel_scale(samples, lines)
        angles = np.arange(_GRID_SAMPLES) / _GRID_SAMPLES * 2 * math.pi

        def draw(rho, angle):
            k = np.round(rho * np.cos(angle) / pix_conv_val + lines / 2.0)
            i = np.round(rho * np.sin(angle) / pix_conv_val + samples / 2.0)
            inside = (i >= 0) & (i < samples) & (k >= 0) & (k < lines)
            grid[k[inside].astype(int), i[inside].astype(int)] = GRID_LINE

        n = -90.0 + lat_interval
        while n < 90:
            latg = float(self.body.graphic_latitude(math.radians(n)))
            draw(self.stereo_rho(latg), angles)
            n += lat_interval

        latitudes = (
            np.arange(_GRID_SAMPLES) / _GRID_SAMPLES * math.pi - math.pi / 2
        )
        rhos = np.array([self.stereo_rho(latg) for latg in latitudes])
        m = 360.0
        while m > 0:
            draw(rhos, math.radians(m))
            m -= lon_interval
