# -*- coding: utf-8 -*-
"""
Viewing Geometry - Relate body coordinates to image coordinates.

A viewing geometry answers where on the detector a given surface point
appears. ``PhotoImage`` uses one to find the pixel to read for each map
cell.

``OrthographicFrame`` holds the rotation chain between the body-fixed
frame and the image plane of an observer at infinity. It is shared by
``OrthographicViewingGeometry`` (body to image) and the
``Orthographic`` map projection (image to body).

Frames
------
Body frame: origin at the body center, ``+Z`` along the spin axis
(north), ``-Y`` toward the sub-observer meridian, ``+X`` completing a
right-handed set. A surface point at planetocentric latitude ``lat``
and eastward angle ``d`` from the sub-observer meridian is::

    (r cos(lat) sin(d), -r cos(lat) cos(d), r sin(lat))

Observer frame: the body frame tilted about ``X`` by the sub-observer
latitude so the observer looks along ``+y``, then rotated about the line
of sight by the position angle. ``x`` and ``z`` span the image plane.

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
from abc import ABC, abstractmethod
from typing import Optional, Tuple, Union

# Third-party
import numpy as np

# orbmap internal
from orbmap._validation import (
    validate_latitude,
    validate_longitude,
    validate_position_angle,
)
from orbmap.body import OblateSpheroid
from orbmap.exceptions import ValidationError
from orbmap.numerics.roots import quadratic_roots

logger = logging.getLogger(__name__)

ArrayLike = Union[float, np.ndarray]

_TWO_PI = 2 * math.pi

# Sub-observer latitudes this close to a pole, in degrees, are polar.
_POLAR_TOLERANCE = 1e-5


def rot_x(angle: float) -> np.ndarray:
    """Rotation matrix about the X axis."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1.0, 0.0, 0.0],
                     [0.0, c, s],
                     [0.0, -s, c]])


def rot_y(angle: float) -> np.ndarray:
    """Rotation matrix about the Y axis."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, 0.0, -s],
                     [0.0, 1.0, 0.0],
                     [s, 0.0, c]])


def rot_z(angle: float) -> np.ndarray:
    """Rotation matrix about the Z axis."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, s, 0.0],
                     [-s, c, 0.0],
                     [0.0, 0.0, 1.0]])


class OrthographicFrame:
    """
    Rotation chain for an observer at infinity.

    Parameters
    ----------
    body : OblateSpheroid
        Observed body.
    sub_observ_lat : float
        Planetocentric sub-observer latitude in degrees.
    sub_observ_lon : float
        Sub-observer longitude in degrees, within ``[-360, 360]``.
    position_angle : float, default=0.0
        Angle, in degrees, of the body's north pole measured
        counterclockwise from image up. Ignored for polar views, where
        it is fixed by which pole is viewed.

    Raises
    ------
    ValidationError
        If an angle is out of range.
    """

    def __init__(
        self,
        body: OblateSpheroid,
        sub_observ_lat: float,
        sub_observ_lon: float,
        position_angle: float = 0.0
    ) -> None:
        self.body = body

        sub_lat = validate_latitude(sub_observ_lat, 'sub_observ_lat')
        sub_lon = validate_longitude(sub_observ_lon, 'sub_observ_lon')
        pa = validate_position_angle(position_angle)

        if sub_lon < 0:
            sub_lon += _TWO_PI

        self.polar = abs(abs(sub_observ_lat) - 90.0) < _POLAR_TOLERANCE

        if self.polar:
            logger.info("Assuming polar orthographic projection")
            north = sub_observ_lat > 0
            pa = math.pi if north else 0.0
            sub_lat = math.pi / 2 if north else -math.pi / 2
            sub_lon = 0.0

        self.sub_observ_lat = sub_lat
        self.sub_observ_lon = sub_lon
        self.position_angle = pa

        # Image plane <-> tilted observer frame.
        self._image_to_tilt = rot_y(-pa)
        # Tilted observer frame <-> body frame.
        self._tilt_to_body = rot_x(sub_lat)
        self._spin = rot_z(-pa)

        a2 = body.eq_rad ** 2
        c2 = body.pol_rad ** 2
        self._a2 = a2
        self._c2 = c2
        self._diff = a2 - c2
        self._sin_lat = math.sin(sub_lat)
        self._sin_2lat = math.sin(2 * sub_lat)

    def image_to_latlon(
        self,
        x: float,
        z: float
    ) -> Optional[Tuple[float, float]]:
        """
        Intersect the line of sight through an image plane point with
        the body.

        Parameters
        ----------
        x, z : float
            Image plane coordinates in kilometers, ``x`` to the right and
            ``z`` toward the body's north for zero position angle.

        Returns
        -------
        Optional[Tuple[float, float]]
            Planetocentric ``(lat, lon)`` in radians of the near-side
            intersection, with longitude in ``[0, 2*pi)``, or ``None`` if
            the line of sight misses the body.
        """
        if not self.polar:
            tilted = self._image_to_tilt @ np.array([x, 0.0, z])
            x = tilted[0]
            z = tilted[2]

        s2 = self._sin_lat ** 2
        ca = self._diff * s2 + self._c2
        cb = -self._diff * z * self._sin_2lat
        cc = (self._a2 * z * z + self._c2 * x * x
              - self._a2 * self._c2 - self._diff * z * z * s2)

        roots = quadratic_roots(ca, cb, cc)
        if roots is None:
            return None

        # The observer looks along +y, so the near side is the smaller root.
        y = min(roots)

        body_xyz = self._tilt_to_body @ np.array([x, y, z])
        if self.polar:
            body_xyz = self._spin @ body_xyz

        bx, by, bz = body_xyz
        lat = math.atan2(bz, math.hypot(bx, by))
        east = math.atan2(bx, -by)

        if self.body.prograde:
            lon = self.sub_observ_lon - east
        else:
            lon = self.sub_observ_lon + east

        return lat, lon % _TWO_PI

    def latlon_to_image(
        self,
        lat: ArrayLike,
        lon: ArrayLike
    ) -> Tuple[ArrayLike, ArrayLike, ArrayLike]:
        """
        Project surface points onto the image plane.

        Parameters
        ----------
        lat : float or np.ndarray
            Planetocentric latitude in radians.
        lon : float or np.ndarray
            Longitude in radians.

        Returns
        -------
        Tuple
            ``(x, z, visible)`` where ``x`` and ``z`` are image plane
            coordinates in kilometers and ``visible`` is ``True`` where
            the surface faces the observer.
        """
        lat = np.asarray(lat, dtype=np.float64)
        lon = np.asarray(lon, dtype=np.float64)
        lat, lon = np.broadcast_arrays(lat, lon)

        if self.body.prograde:
            east = self.sub_observ_lon - lon
        else:
            east = lon - self.sub_observ_lon

        radius = self.body.centric_radius(lat)
        cos_lat = np.cos(lat)
        point = np.stack([
            radius * cos_lat * np.sin(east),
            -radius * cos_lat * np.cos(east),
            radius * np.sin(lat),
        ])

        flat = point.reshape(3, -1)
        if self.polar:
            image = self._tilt_to_body.T @ (self._spin.T @ flat)
        else:
            image = self._image_to_tilt.T @ (self._tilt_to_body.T @ flat)

        shape = lat.shape
        x = image[0].reshape(shape)
        z = image[2].reshape(shape)

        visible = self.body.mu0(
            self.sub_observ_lat, self.sub_observ_lon, lat, lon
        ) >= 0

        if x.ndim == 0:
            return float(x), float(z), bool(visible)
        return x, z, visible


class ViewingGeometry(ABC):
    """
    Abstract base class for body-to-detector projections.
    """

    @abstractmethod
    def latlon_to_object(
        self,
        lat: float,
        lon: float
    ) -> Optional[Tuple[float, float]]:
        """
        Locate a surface point in the ideal (undistorted) image.

        Parameters
        ----------
        lat : float
            Planetocentric latitude in radians.
        lon : float
            Longitude in radians.

        Returns
        -------
        Optional[Tuple[float, float]]
            Object space ``(line, sample)`` in pixel coordinates, where
            ``[0, 1)`` lies inside pixel 0, or ``None`` if the point is
            not visible.
        """
        ...


class OrthographicViewingGeometry(ViewingGeometry):
    """
    Viewing geometry of an observer at infinity.

    Adequate for images taken from a range much larger than the body
    radius, where perspective effects are negligible.

    Parameters
    ----------
    body : OblateSpheroid
        Observed body.
    sub_observ_lat : float
        Planetocentric sub-observer latitude in degrees.
    sub_observ_lon : float
        Sub-observer longitude in degrees.
    position_angle : float
        North pole position angle in degrees, counterclockwise from up.
    km_per_pixel : float
        Image scale at the body. Must be positive.
    line_center : float
        Line of the body center, in pixel coordinates.
    sample_center : float
        Sample of the body center, in pixel coordinates.

    Notes
    -----
    Image lines increase downward, so north appears toward line 0 for
    a zero position angle.
    """

    def __init__(
        self,
        body: OblateSpheroid,
        sub_observ_lat: float,
        sub_observ_lon: float,
        position_angle: float,
        km_per_pixel: float,
        line_center: float,
        sample_center: float
    ) -> None:
        if not km_per_pixel > 0:
            raise ValidationError(
                f"km_per_pixel must be positive, got {km_per_pixel}"
            )
        if not (math.isfinite(line_center) and math.isfinite(sample_center)):
            raise ValidationError(
                f"Body center must be finite, got "
                f"({line_center}, {sample_center})"
            )

        self._frame = OrthographicFrame(
            body, sub_observ_lat, sub_observ_lon, position_angle
        )
        self.km_per_pixel = km_per_pixel
        self.line_center = line_center
        self.sample_center = sample_center

    @property
    def body(self) -> OblateSpheroid:
        return self._frame.body

    def latlon_to_object(
        self,
        lat: float,
        lon: float
    ) -> Optional[Tuple[float, float]]:
        x, z, visible = self._frame.latlon_to_image(lat, lon)
        if not visible:
            return None

        line = self.line_center - z / self.km_per_pixel
        sample = self.sample_center + x / self.km_per_pixel
        return line, sample
