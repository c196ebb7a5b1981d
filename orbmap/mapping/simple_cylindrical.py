# -*- coding: utf-8 -*-
"""
Simple Cylindrical Projection - Latitude and longitude on a linear grid.

Also known as the equirectangular or plate carree projection. Map
lines are evenly spaced in latitude and samples evenly spaced in
longitude. Line 0 is the lowest latitude.

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
import logging
import math
from typing import Tuple

# Third-party
import numpy as np

# orbmap internal
from orbmap._validation import validate_latitude, validate_longitude
from orbmap.body import OblateSpheroid
from orbmap.exceptions import ValidationError
from orbmap.mapping.factory import GRID_LINE, MapFactory
from orbmap.numerics.comparison import almost_equal, almost_zero

logger = logging.getLogger(__name__)

_TWO_PI = 2 * math.pi


class SimpleCylindrical(MapFactory):
    """
    Simple cylindrical map projection.

    Parameters
    ----------
    body : OblateSpheroid
        Mapped body.
    lo_lat, hi_lat : float, default=-90, 90
        Planetocentric latitude range in degrees.
    lo_lon, hi_lon : float, default=0, 360
        Longitude range in degrees. ``lo_lon > hi_lon`` wraps through
        zero, e.g. ``(300, 60)`` covers 120 degrees. Equal values cover
        all 360 degrees starting at ``lo_lon``.
    graphic : bool, default=False
        Space map lines evenly in planetographic rather than
        planetocentric latitude. The latitude bounds remain
        planetocentric.

    Raises
    ------
    ValidationError
        If a bound is out of range or ``lo_lat >= hi_lat``.

    Notes
    -----
    Longitude increases to the left on maps of prograde bodies and to
    the right on maps of retrograde bodies.
    """

    def __init__(
        self,
        body: OblateSpheroid,
        lo_lat: float = -90.0,
        hi_lat: float = 90.0,
        lo_lon: float = 0.0,
        hi_lon: float = 360.0,
        graphic: bool = False
    ) -> None:
        lo = validate_latitude(lo_lat, 'lo_lat')
        hi = validate_latitude(hi_lat, 'hi_lat')
        if lo >= hi:
            raise ValidationError(
                f"Lower latitude {lo_lat} must be less than upper "
                f"latitude {hi_lat}"
            )

        if graphic:
            lo = float(body.graphic_latitude(lo))
            hi = float(body.graphic_latitude(hi))

        lo_lon_rad = validate_longitude(lo_lon, 'lo_lon')
        hi_lon_rad = validate_longitude(hi_lon, 'hi_lon')

        ulps = 2
        if lo_lon_rad > hi_lon_rad:
            lo_lon_rad -= _TWO_PI
        elif (almost_equal(lo_lon_rad, hi_lon_rad, ulps)
              or (almost_zero(lo_lon_rad, ulps)
                  and almost_zero(hi_lon_rad, ulps))):
            hi_lon_rad += _TWO_PI
            logger.info(
                "Lower and upper map longitudes are the same, "
                "assuming 360 degree longitude range"
            )

        self.body = body
        self.graphic = graphic
        self.lo_lat = lo
        self.hi_lat = hi
        self.lo_lon = lo_lon_rad
        self.hi_lon = hi_lon_rad

    @property
    def projection_name(self) -> str:
        return "Simple Cylindrical"

    def _longitudes(self, samples: int) -> np.ndarray:
        offsets = (np.arange(samples) + 0.5) * (
            (self.hi_lon - self.lo_lon) / samples
        )
        if self.body.prograde:
            return self.hi_lon - offsets
        return self.lo_lon + offsets

    def _plot_line(
        self,
        k: int,
        samples: int,
        lines: int
    ) -> Tuple[np.ndarray, np.ndarray]:
        lat = (k + 0.5) * (self.hi_lat - self.lo_lat) / lines + self.lo_lat
        if self.graphic:
            lat = float(self.body.centric_latitude(lat))
        return np.full(samples, lat), self._longitudes(samples)

    def _plot_grid(self, samples, lines, lat_interval, lon_interval, grid):
        lo_lat = math.degrees(self.lo_lat)
        hi_lat = math.degrees(self.hi_lat)
        lo_lon = math.degrees(self.lo_lon)
        hi_lon = math.degrees(self.hi_lon)

        lr = lines / (hi_lat - lo_lat)
        n = -90.0 + lat_interval
        while n < 90:
            k = round((n - lo_lat) * lr)
            if 0 <= k < lines:
                grid[k, :] = GRID_LINE
            n += lat_interval

        sr = samples / (hi_lon - lo_lon)
        m = 360.0
        while m > 0:
            lo_lon_2 = lo_lon + 360 if m - lo_lon > 360 else lo_lon
            i = round((m - lo_lon_2) * sr)
            if self.body.prograde:
                i = samples - i
            if 0 <= i < samples:
                grid[:, i] = GRID_LINE
            m -= lon_interval
