# -*- coding: utf-8 -*-
"""
Orthographic Projection - The body as seen by an observer at infinity.

Each map cell is a point on an image plane perpendicular to the line of
sight. The cell's latitude and longitude are those of the nearest
intersection of its line of sight with the spheroid, the smaller root
of a quadratic in the line of sight coordinate. Cells whose line of
sight misses the body are left blank.

Line 0 is the bottom of the map. For a zero position angle north is
up.

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
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

# Third-party
import numpy as np

# orbmap internal
from orbmap._validation import validate_latitude, validate_longitude
from orbmap.body import OblateSpheroid
from orbmap.exceptions import ValidationError
from orbmap.mapping.factory import GRID_LINE, MapFactory
from orbmap.source.geometry import OrthographicFrame

logger = logging.getLogger(__name__)

# Largest body axis spans this fraction of the smaller map dimension
# when no scale is given.
_MAP_FRACTION = 0.9

_LAT_GRID_SAMPLES = 2000
_LON_GRID_SAMPLES = 1000


class CenterGeometry(Enum):
    """How the position of the body on an orthographic map is given."""

    DEFAULT = "default"
    CENTER_GIVEN = "center_given"
    LAT_LON_GIVEN = "lat_lon_given"


@dataclass(frozen=True)
class OrthographicCenter:
    """
    Placement of the body on an orthographic map.

    Use :meth:`at_pixel` or :meth:`at_latlon` rather than setting the
    fields directly. The default instance centers the body on the map.

    Attributes
    ----------
    geometry : CenterGeometry
        Which of the fields below are meaningful.
    sample, line : float
        Map position of the body center, for ``CENTER_GIVEN``.
    lat, lon : float
        Planetocentric latitude and longitude in degrees to place at the
        map center, for ``LAT_LON_GIVEN``.
    """

    geometry: CenterGeometry = CenterGeometry.DEFAULT
    sample: float = math.nan
    line: float = math.nan
    lat: float = math.nan
    lon: float = math.nan

    @classmethod
    def at_pixel(cls, sample: float, line: float) -> 'OrthographicCenter':
        """Body center at map position ``(sample, line)``."""
        if not (math.isfinite(sample) and math.isfinite(line)):
            raise ValidationError(
                f"Body center must be finite, got ({sample}, {line})"
            )
        return cls(CenterGeometry.CENTER_GIVEN, sample=sample, line=line)

    @classmethod
    def at_latlon(cls, lat: float, lon: float) -> 'OrthographicCenter':
        """Surface point ``(lat, lon)``, in degrees, at the map center."""
        validate_latitude(lat, 'lat')
        validate_longitude(lon, 'lon')
        return cls(CenterGeometry.LAT_LON_GIVEN, lat=lat, lon=lon)


class Orthographic(MapFactory):
    """
    Orthographic map projection.

    Parameters
    ----------
    body : OblateSpheroid
        Mapped body.
    sub_observ_lat : float
        Planetocentric sub-observer latitude in degrees. Within 1e-5
        degrees of a pole the map becomes a polar orthographic view.
    sub_observ_lon : float
        Sub-observer longitude in degrees.
    position_angle : float, default=0.0
        North pole position angle in degrees, counterclockwise from up.
    km_per_pixel : float, optional
        Map scale. By default the larger body axis spans 90% of the
        smaller map dimension.
    center : OrthographicCenter, optional
        Body placement. Defaults to the map center.

    Raises
    ------
    ValidationError
        If an angle or the scale is out of range.
    """

    def __init__(
        self,
        body: OblateSpheroid,
        sub_observ_lat: float,
        sub_observ_lon: float,
        position_angle: float = 0.0,
        km_per_pixel: Optional[float] = None,
        center: Optional[OrthographicCenter] = None
    ) -> None:
        if km_per_pixel is not None and not km_per_pixel > 0:
            raise ValidationError(
                f"km_per_pixel must be positive, got {km_per_pixel}"
            )

        self.body = body
        self._frame = OrthographicFrame(
            body, sub_observ_lat, sub_observ_lon, position_angle
        )
        self._km_per_pixel = km_per_pixel
        self._center = center if center is not None else OrthographicCenter()
        self._layouts: Dict[Tuple[int, int], Tuple[float, float, float]] = {}

    @property
    def projection_name(self) -> str:
        return "Orthographic"

    @property
    def polar(self) -> bool:
        return self._frame.polar

    def layout(self, samples: int, lines: int) -> Tuple[float, float, float]:
        """
        Map scale and body center for a map size.

        Returns
        -------
        Tuple[float, float, float]
            ``(km_per_pixel, sample_center, line_center)``.

        Raises
        ------
        ValidationError
            If the requested center latitude and longitude are not
            visible.
        """
        key = (samples, lines)
        layout = self._layouts.get(key)
        if layout is None:
            layout = self._compute_layout(samples, lines)
            self._layouts[key] = layout
            logger.info(
                "Body center in orthographic projection "
                "(line, sample): (%s, %s)", layout[2], layout[1]
            )
        return layout

    def _compute_layout(
        self,
        samples: int,
        lines: int
    ) -> Tuple[float, float, float]:
        km_per_pixel = self._km_per_pixel
        if km_per_pixel is None:
            km_per_pixel = (
                2 * max(self.body.eq_rad, self.body.pol_rad)
                / (_MAP_FRACTION * min(samples, lines))
            )

        center = self._center
        if center.geometry is CenterGeometry.CENTER_GIVEN:
            return km_per_pixel, center.sample, center.line

        if center.geometry is CenterGeometry.LAT_LON_GIVEN:
            x, z, visible = self._frame.latlon_to_image(
                math.radians(center.lat), math.radians(center.lon)
            )
            if not visible:
                raise ValidationError(
                    f"Desired latitude/longitude ({center.lat}, "
                    f"{center.lon}) at center of map is not visible"
                )
            return (
                km_per_pixel,
                samples / 2.0 - x / km_per_pixel,
                lines / 2.0 - z / km_per_pixel,
            )

        return km_per_pixel, samples / 2.0, lines / 2.0

    def _plot_line(
        self,
        k: int,
        samples: int,
        lines: int
    ) -> Tuple[np.ndarray, np.ndarray]:
        km_per_pixel, sample_center, line_center = self.layout(samples, lines)

        lats = np.full(samples, np.nan)
        lons = np.full(samples, np.nan)

        z = (k + 0.5 - line_center) * km_per_pixel
        for i in range(samples):
            x = (i + 0.5 - sample_center) * km_per_pixel
            latlon = self._frame.image_to_latlon(x, z)
            if latlon is not None:
                lats[i], lons[i] = latlon

        return lats, lons

    def _plot_grid(self, samples, lines, lat_interval, lon_interval, grid):
        km_per_pixel, sample_center, line_center = self.layout(samples, lines)

        def draw(lat, lon):
            x, z, visible = self._frame.latlon_to_image(lat, lon)
            i = np.floor(sample_center + x[visible] / km_per_pixel)
            k = np.floor(line_center + z[visible] / km_per_pixel)
            inside = (i >= 0) & (i < samples) & (k >= 0) & (k < lines)
            grid[k[inside].astype(int), i[inside].astype(int)] = GRID_LINE

        lons = np.arange(_LAT_GRID_SAMPLES) / _LAT_GRID_SAMPLES * 2 * math.pi
        n = -90.0 + lat_interval
        while n < 90:
            draw(math.radians(n), lons)
            n += lat_interval

        lats = np.linspace(-math.pi / 2, math.pi / 2, _LON_GRID_SAMPLES + 1)
        m = 360.0
        while m > 0:
            draw(lats, math.radians(m))
            m -= lon_interval
