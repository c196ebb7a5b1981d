# -*- coding: utf-8 -*-
"""
Mercator Projection - Conformal cylindrical projection of an oblate
spheroid.

The forward equation maps planetographic latitude ``latg`` to the
vertical map coordinate::

    x = ln(tan(pi/4 + latg/2) * ((1 - e sin latg) / (1 + e sin latg))**(e/2))

which has no closed-form inverse for ``e > 0``. Each map line's
latitude is recovered with a bracketed root search over
``(-pi/2, pi/2)``. The map always covers 360 degrees of longitude; its
height to width ratio sets the latitude range.

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
from orbmap.mapping.factory import GRID_LINE, MapFactory
from orbmap.numerics.roots import root_find_bracketed

_TWO_PI = 2 * math.pi


def mercator_x(body: OblateSpheroid, latg: float) -> float:
    """
    Vertical Mercator map coordinate, in equatorial radii.

    Parameters
    ----------
    body : OblateSpheroid
        Mapped body.
    latg : float
        Planetographic latitude in radians. ``-pi/2`` maps to ``-inf``.

    Returns
    -------
    float
    """
    e = body.first_eccentricity
    t = e * math.sin(latg)
    with np.errstate(divide='ignore'):
        return float(np.log(
            np.tan(math.pi / 4 + latg / 2) * ((1 - t) / (1 + t)) ** (e / 2)
        ))


class Mercator(MapFactory):
    """
    Mercator map projection.

    Parameters
    ----------
    body : OblateSpheroid
        Mapped body.

    Examples
    --------
    >>> body = OblateSpheroid(True, 71492.0, 66854.0)
    >>> grid = Mercator(body).make_grid(360, 180, 30.0, 30.0)
    """

    def __init__(self, body: OblateSpheroid) -> None:
        self.body = body

    @property
    def projection_name(self) -> str:
        return "Mercator"

    def _map_equation(self, latg: float) -> float:
        return mercator_x(self.body, latg)

    def latitude(self, k: int, samples: int, lines: int) -> float:
        """
        Planetocentric latitude, in radians, of the center of line ``k``.

        Raises
        ------
        RootFindingError
            If the latitude cannot be recovered.
        """
        xmax = lines / samples * math.pi
        x = (k + 0.5) / lines * 2 * xmax - xmax
        latg = root_find_bracketed(
            x, -math.pi / 2, math.pi / 2, self._map_equation
        )
        return float(self.body.centric_latitude(latg))

    def _plot_line(
        self,
        k: int,
        samples: int,
        lines: int
    ) -> Tuple[np.ndarray, np.ndarray]:
        lat = self.latitude(k, samples, lines)
        lons = (np.arange(samples) + 0.5) / samples * _TWO_PI
        if self.body.prograde:
            lons = _TWO_PI - lons
        return np.full(samples, lat), lons

    def distortion(self, latg: float) -> float:
        """
        Scale factor at a planetographic latitude.

        Ratio of map distance to true surface distance, relative to the
        equator.
        """
        return (
            self.body.eq_rad
            / float(self.body.N(self.body.centric_latitude(latg)))
            / math.cos(latg)
        )

    def _plot_grid(self, samples, lines, lat_interval, lon_interval, grid):
        xmax = lines / samples * math.pi
        pix_conv_val = xmax / lines * 2

        n = -90.0 + lat_interval
        while n < 90:
            latg = float(self.body.graphic_latitude(math.radians(n)))
            k = round(self._map_equation(latg) / pix_conv_val + lines / 2.0)
            if 0 <= k < lines:
                grid[k, :] = GRID_LINE
            n += lat_interval

        m = 360.0
        while m > 0:
            i = round(m * samples / 360.0)
            if self.body.prograde:
                i = samples - i
            if 0 <= i < samples:
                grid[:, i] = GRID_LINE
            m -= lon_interval
