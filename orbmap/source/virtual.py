# -*- coding: utf-8 -*-
"""
Virtual Images - Source images computed from the coordinates themselves.

Virtual images have no raster behind them. They are useful as map
planes that accompany real data (a latitude plane and a longitude plane
allow every cell of a projected map to be located) and for testing the
mapping pipeline with a known answer.

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
from abc import abstractmethod
from typing import Optional, Tuple

# orbmap internal
from orbmap._validation import validate_latitude, validate_longitude
from orbmap.body import OblateSpheroid
from orbmap.exceptions import ValidationError
from orbmap.source.base import SourceImage

_HALF_PI = math.pi / 2
_TWO_PI = 2 * math.pi


class VirtualImage(SourceImage):
    """
    Base class for computed source images.

    The raw value from :meth:`_read_data` is rescaled as
    ``datum * scale + offset``. A scale and offset chosen with
    :func:`orbmap.mapping.traits.scale_and_offset` preserve significant
    digits when the map is stored in an integer type.

    Parameters
    ----------
    scale : float, default=1.0
        Multiplier applied to every datum. Must be finite and non-zero.
    offset : float, default=0.0
        Value added after scaling. Must be finite.

    Raises
    ------
    ValidationError
        If ``scale`` or ``offset`` is unusable.
    """

    def __init__(self, scale: float = 1.0, offset: float = 0.0) -> None:
        if not math.isfinite(scale) or scale == 0:
            raise ValidationError(
                f"Virtual image scale must be finite and non-zero, got {scale}"
            )
        if not math.isfinite(offset):
            raise ValidationError(
                f"Virtual image offset must be finite, got {offset}"
            )
        self._scale = float(scale)
        self._offset = float(offset)

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def offset(self) -> float:
        return self._offset

    def read_data(self, lat: float, lon: float) -> Tuple[float, bool]:
        datum, found = self._read_data(lat, lon)
        if found:
            datum = datum * self._scale + self._offset
        return datum, found

    @abstractmethod
    def _read_data(self, lat: float, lon: float) -> Tuple[float, bool]:
        """Unscaled datum at the coordinate, and whether it exists."""
        ...


class LatitudeImage(VirtualImage):
    """
    Source image whose datum is the latitude itself, in degrees.

    Parameters
    ----------
    body : OblateSpheroid
        Body used to convert to planetographic latitude.
    graphic : bool, default=False
        Report planetographic rather than planetocentric latitude.
    scale : float, default=1.0
    offset : float, default=0.0
    """

    def __init__(
        self,
        body: OblateSpheroid,
        graphic: bool = False,
        scale: float = 1.0,
        offset: float = 0.0
    ) -> None:
        super().__init__(scale, offset)
        self._body = body
        self._graphic = graphic

    @property
    def unit(self) -> str:
        return 'deg'

    def _read_data(self, lat: float, lon: float) -> Tuple[float, bool]:
        if not -_HALF_PI <= lat <= _HALF_PI:
            return 0.0, False

        if self._graphic:
            lat = float(self._body.graphic_latitude(lat))

        return math.degrees(lat), True


class LongitudeImage(VirtualImage):
    """
    Source image whose datum is the longitude itself, in degrees.

    Longitudes are reported in the 360 degree window starting at
    ``low``, e.g. ``[0, 360]`` by default or ``[-180, 180]`` with
    ``low=-180``.

    Parameters
    ----------
    low : float, default=0.0
        Lower end of the reported longitude range, in degrees. Must lie
        within ``[-360, 360]``.
    scale : float, default=1.0
    offset : float, default=0.0
    """

    def __init__(
        self,
        low: float = 0.0,
        scale: float = 1.0,
        offset: float = 0.0
    ) -> None:
        super().__init__(scale, offset)
        if math.isnan(low) or not -360.0 <= low <= 360.0:
            raise ValidationError(
                f"Lower longitude must be within [-360, 360], got {low}"
            )
        self._low = float(low)
        self._high = self._low + 360.0

    @property
    def unit(self) -> str:
        return 'deg'

    def _read_data(self, lat: float, lon: float) -> Tuple[float, bool]:
        datum = math.degrees(math.fmod(lon, _TWO_PI))

        if datum < self._low:
            datum += 360.0
        elif datum > self._high:
            datum -= 360.0

        return datum, self._low <= datum <= self._high


class Mu0Image(VirtualImage):
    """
    Source image of the cosine of the solar incidence angle.

    Illuminated points have values in ``[0, 1]``; points on the night
    side are negative. Every coordinate is found.

    Parameters
    ----------
    body : OblateSpheroid
        Illuminated body.
    sub_solar_lat : float
        Planetocentric sub-solar latitude in degrees.
    sub_solar_lon : float
        Sub-solar longitude in degrees.
    scale : float, default=1.0
    offset : float, default=0.0
    """

    def __init__(
        self,
        body: OblateSpheroid,
        sub_solar_lat: float,
        sub_solar_lon: float,
        scale: float = 1.0,
        offset: float = 0.0
    ) -> None:
        super().__init__(scale, offset)
        self._body = body
        self._sub_solar_lat = validate_latitude(sub_solar_lat, 'sub_solar_lat')
        self._sub_solar_lon = validate_longitude(sub_solar_lon, 'sub_solar_lon')

    def _read_data(self, lat: float, lon: float) -> Tuple[float, bool]:
        mu0 = self._body.mu0(
            self._sub_solar_lat, self._sub_solar_lon, lat, lon
        )
        return float(mu0), True


def _validate_range(body: OblateSpheroid, observer_range) -> None:
    if observer_range is None:
        return
    if math.isnan(observer_range) or not observer_range > body.eq_rad:
        raise ValidationError(
            f"Observer range {observer_range} must exceed the body's "
            f"equatorial radius {body.eq_rad}"
        )


class MuImage(VirtualImage):
    """
    Source image of the cosine of the emission angle.

    Points visible to the observer have values in ``[0, 1]``; points on
    the far side are negative. Every coordinate is found.

    Parameters
    ----------
    body : OblateSpheroid
        Observed body.
    sub_observ_lat : float
        Planetocentric sub-observer latitude in degrees.
    sub_observ_lon : float
        Sub-observer longitude in degrees.
    observer_range : float, optional
        Distance from the body center to the observer in kilometers.
        ``None`` places the observer at infinity.
    scale : float, default=1.0
    offset : float, default=0.0

    Raises
    ------
    ValidationError
        If an angle is out of range or the observer is not outside the
        body.
    """

    def __init__(
        self,
        body: OblateSpheroid,
        sub_observ_lat: float,
        sub_observ_lon: float,
        observer_range: Optional[float] = None,
        scale: float = 1.0,
        offset: float = 0.0
    ) -> None:
        super().__init__(scale, offset)
        _validate_range(body, observer_range)
        self._body = body
        self._sub_observ_lat = validate_latitude(
            sub_observ_lat, 'sub_observ_lat'
        )
        self._sub_observ_lon = validate_longitude(
            sub_observ_lon, 'sub_observ_lon'
        )
        self._range = observer_range

    def _read_data(self, lat: float, lon: float) -> Tuple[float, bool]:
        mu = self._body.mu(
            self._sub_observ_lat, self._sub_observ_lon, lat, lon, self._range
        )
        return float(mu), True


class CosPhaseImage(VirtualImage):
    """
    Source image of the cosine of the phase angle.

    The phase angle lies in ``[0, 180]`` degrees, so values lie in
    ``[-1, 1]``. The sun is infinitely distant. Every coordinate is
    found.

    Parameters
    ----------
    body : OblateSpheroid
        Observed body.
    sub_observ_lat, sub_observ_lon : float
        Planetocentric sub-observer latitude and longitude in degrees.
    sub_solar_lat, sub_solar_lon : float
        Planetocentric sub-solar latitude and longitude in degrees.
    observer_range : float, optional
        Distance from the body center to the observer in kilometers.
        ``None`` places the observer at infinity.
    scale : float, default=1.0
    offset : float, default=0.0

    Raises
    ------
    ValidationError
        If an angle is out of range or the observer is not outside the
        body.
    """

    def __init__(
        self,
        body: OblateSpheroid,
        sub_observ_lat: float,
        sub_observ_lon: float,
        sub_solar_lat: float,
        sub_solar_lon: float,
        observer_range: Optional[float] = None,
        scale: float = 1.0,
        offset: float = 0.0
    ) -> None:
        super().__init__(scale, offset)
        _validate_range(body, observer_range)
        self._body = body
        self._sub_observ_lat = validate_latitude(
            sub_observ_lat, 'sub_observ_lat'
        )
        self._sub_observ_lon = validate_longitude(
            sub_observ_lon, 'sub_observ_lon'
        )
        self._sub_solar_lat = validate_latitude(sub_solar_lat, 'sub_solar_lat')
        self._sub_solar_lon = validate_longitude(sub_solar_lon, 'sub_solar_lon')
        self._range = observer_range

    def _read_data(self, lat: float, lon: float) -> Tuple[float, bool]:
        cos_phase = self._body.cos_phase(
            self._sub_observ_lat, self._sub_observ_lon,
            self._sub_solar_lat, self._sub_solar_lon,
            lat, lon, self._range
        )
        return float(cos_phase), True
