# -*- coding: utf-8 -*-
"""
Oblate Spheroid - Shape model of a mapped planetary body.

Latitudes are planetocentric unless stated otherwise: the angle between
the equatorial plane and the line from the body center to the surface
point. Planetographic latitude is the angle between the equatorial
plane and the surface normal. The two agree on a sphere.

All methods accept scalars or numpy arrays.

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
from typing import Optional, Union

# Third-party
import numpy as np

# orbmap internal
from orbmap.exceptions import ValidationError

ArrayLike = Union[float, np.ndarray]


class OblateSpheroid:
    """
    Body of revolution flattened at the poles.

    Parameters
    ----------
    prograde : bool
        ``True`` if the body rotates in the same sense as it orbits.
        Longitudes on a prograde body increase to the west, so maps of
        it show longitude increasing to the left.
    eq_rad : float
        Equatorial radius, in kilometers.
    pol_rad : float
        Polar radius, in kilometers. Must not exceed ``eq_rad``.

    Raises
    ------
    ValidationError
        If a radius is not positive or ``pol_rad > eq_rad``.

    Examples
    --------
    >>> jupiter = OblateSpheroid(True, 71492.0, 66854.0)
    >>> round(jupiter.flattening, 5)
    0.06487
    """

    def __init__(self, prograde: bool, eq_rad: float, pol_rad: float) -> None:
        if not (eq_rad > 0 and pol_rad > 0):
            raise ValidationError(
                f"Body radii must be positive, got equatorial={eq_rad}, "
                f"polar={pol_rad}"
            )
        if pol_rad > eq_rad:
            raise ValidationError(
                f"Polar radius {pol_rad} exceeds equatorial radius {eq_rad}"
            )

        self._prograde = bool(prograde)
        self._eq_rad = float(eq_rad)
        self._pol_rad = float(pol_rad)

        self._flattening = (self._eq_rad - self._pol_rad) / self._eq_rad
        self._first_eccentricity = float(
            np.sqrt(1.0 - (1.0 - self._flattening) ** 2)
        )

    @property
    def prograde(self) -> bool:
        return self._prograde

    @property
    def eq_rad(self) -> float:
        """Equatorial radius in kilometers."""
        return self._eq_rad

    @property
    def pol_rad(self) -> float:
        """Polar radius in kilometers."""
        return self._pol_rad

    @property
    def flattening(self) -> float:
        """``(a - c) / a``."""
        return self._flattening

    @property
    def first_eccentricity(self) -> float:
        """``sqrt(1 - c**2 / a**2)``."""
        return self._first_eccentricity

    def centric_radius(self, lat: ArrayLike) -> ArrayLike:
        """
        Distance from the body center to the surface.

        Parameters
        ----------
        lat : float or np.ndarray
            Planetocentric latitude in radians.

        Returns
        -------
        float or np.ndarray
            Radius in kilometers.
        """
        a = self._eq_rad
        c = self._pol_rad
        s = np.sin(lat)
        return a * c / np.sqrt((a - c) * (a + c) * s * s + c * c)

    def centric_latitude(self, latg: ArrayLike) -> ArrayLike:
        """Convert planetographic latitude (radians) to planetocentric."""
        ratio = (self._pol_rad / self._eq_rad) ** 2
        return np.arctan(ratio * np.tan(latg))

    def graphic_latitude(self, lat: ArrayLike) -> ArrayLike:
        """Convert planetocentric latitude (radians) to planetographic."""
        ratio = (self._eq_rad / self._pol_rad) ** 2
        return np.arctan(ratio * np.tan(lat))

    def N(self, lat: ArrayLike) -> ArrayLike:
        """
        Radius of curvature in the prime vertical.

        Parameters
        ----------
        lat : float or np.ndarray
            Planetocentric latitude in radians.

        Returns
        -------
        float or np.ndarray
            Radius of curvature perpendicular to the meridian, in
            kilometers.
        """
        e = self._first_eccentricity
        s = np.sin(self.graphic_latitude(lat))
        return self._eq_rad / np.sqrt(1.0 - e * e * s * s)

    def M(self, lat: ArrayLike) -> ArrayLike:
        """
        Radius of curvature along the meridian.

        Parameters
        ----------
        lat : float or np.ndarray
            Planetocentric latitude in radians.

        Returns
        -------
        float or np.ndarray
            Meridional radius of curvature in kilometers.
        """
        e2 = self._first_eccentricity ** 2
        s = np.sin(self.graphic_latitude(lat))
        return self._eq_rad * (1.0 - e2) / (1.0 - e2 * s * s) ** 1.5

    def mu0(
        self,
        sub_lat: float,
        sub_lon: float,
        lat: ArrayLike,
        lon: ArrayLike
    ) -> ArrayLike:
        """
        Cosine of the angle between the surface normal and a distant
        point.

        Parameters
        ----------
        sub_lat, sub_lon : float
            Planetocentric latitude and longitude, in radians, of the
            point directly beneath the distant observer or source.
        lat, lon : float or np.ndarray
            Planetocentric surface coordinates in radians.

        Returns
        -------
        float or np.ndarray
            Non-negative where the surface point faces the distant
            point.
        """
        latg = self.graphic_latitude(lat)
        return (
            np.sin(sub_lat) * np.sin(latg)
            + np.cos(sub_lat) * np.cos(latg) * np.cos(sub_lon - lon)
        )

    def _observer_distance(
        self,
        sub_observ_lat: float,
        sub_observ_lon: float,
        lat: ArrayLike,
        lon: ArrayLike,
        radius: ArrayLike,
        observer_range: float
    ) -> ArrayLike:
        # Law of cosines between the observer and surface point vectors.
        cos_sep = (
            np.sin(sub_observ_lat) * np.sin(lat)
            + np.cos(sub_observ_lat) * np.cos(lat)
            * np.cos(sub_observ_lon - lon)
        )
        return np.sqrt(
            observer_range * observer_range + radius * radius
            - 2 * observer_range * radius * cos_sep
        )

    def mu(
        self,
        sub_observ_lat: float,
        sub_observ_lon: float,
        lat: ArrayLike,
        lon: ArrayLike,
        observer_range: Optional[float] = None
    ) -> ArrayLike:
        """
        Cosine of the emission angle, between the surface normal and
        the line of sight to the observer.

        Parameters
        ----------
        sub_observ_lat, sub_observ_lon : float
            Planetocentric sub-observer latitude and longitude in
            radians.
        lat, lon : float or np.ndarray
            Planetocentric surface coordinates in radians.
        observer_range : float, optional
            Distance from the body center to the observer in kilometers.
            ``None`` places the observer at infinity, which reduces to
            :meth:`mu0` about the sub-observer point.

        Returns
        -------
        float or np.ndarray
            Non-negative where the surface point is visible to the
            observer.
        """
        if observer_range is None:
            return self.mu0(sub_observ_lat, sub_observ_lon, lat, lon)

        latg = self.graphic_latitude(lat)
        radius = self.centric_radius(lat)

        # (observer - point) . normal
        numerator = observer_range * (
            np.sin(sub_observ_lat) * np.sin(latg)
            + np.cos(sub_observ_lat) * np.cos(latg)
            * np.cos(sub_observ_lon - lon)
        ) - radius * np.cos(lat - latg)

        return numerator / self._observer_distance(
            sub_observ_lat, sub_observ_lon, lat, lon, radius, observer_range
        )

    def cos_phase(
        self,
        sub_observ_lat: float,
        sub_observ_lon: float,
        sub_solar_lat: float,
        sub_solar_lon: float,
        lat: ArrayLike,
        lon: ArrayLike,
        observer_range: Optional[float] = None
    ) -> ArrayLike:
        """
        Cosine of the phase angle, between the directions from a
        surface point to the sun and to the observer.

        The sun is taken to be infinitely distant.

        Parameters
        ----------
        sub_observ_lat, sub_observ_lon : float
            Planetocentric sub-observer latitude and longitude in
            radians.
        sub_solar_lat, sub_solar_lon : float
            Planetocentric sub-solar latitude and longitude in radians.
        lat, lon : float or np.ndarray
            Planetocentric surface coordinates in radians.
        observer_range : float, optional
            Distance from the body center to the observer in kilometers.
            ``None`` places the observer at infinity, where the phase angle is
            the same at every surface point.

        Returns
        -------
        float or np.ndarray
            Value in ``[-1, 1]``.
        """
        sun_observer = (
            np.cos(sub_observ_lat) * np.cos(sub_solar_lat)
            * np.cos(sub_observ_lon - sub_solar_lon)
            + np.sin(sub_observ_lat) * np.sin(sub_solar_lat)
        )

        if observer_range is None:
            return sun_observer + np.zeros_like(np.asarray(lat, dtype=float))

        radius = self.centric_radius(lat)

        # (observer - point) . sun
        numerator = observer_range * sun_observer - radius * (
            np.cos(lat) * np.cos(sub_solar_lat) * np.cos(lon - sub_solar_lon)
            + np.sin(lat) * np.sin(sub_solar_lat)
        )

        return numerator / self._observer_distance(
            sub_observ_lat, sub_observ_lon, lat, lon, radius, observer_range
        )

    def __repr__(self) -> str:
        return (
            f"OblateSpheroid(prograde={self._prograde}, "
            f"eq_rad={self._eq_rad}, pol_rad={self._pol_rad})"
        )
