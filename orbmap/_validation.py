# -*- coding: utf-8 -*-
"""
Angle Validation Helpers - Shared latitude, longitude and angle checks.

Public constructors take angles in degrees. These helpers enforce the
accepted ranges consistently across projections and viewing geometries
and return the validated angle in radians.

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

# orbmap internal
from orbmap.exceptions import ValidationError


def _validate_angle(value: float, limit: float, name: str) -> float:
    if math.isnan(value) or not -limit <= value <= limit:
        raise ValidationError(
            f"{name} must be within [{-limit}, {limit}] degrees, got {value}"
        )
    return math.radians(value)


def validate_latitude(lat: float, name: str = 'latitude') -> float:
    """Validate a latitude in degrees and convert it to radians.

    Parameters
    ----------
    lat : float
        Latitude in degrees, within ``[-90, 90]``.
    name : str
        Parameter name for error messages. Default ``'latitude'``.

    Returns
    -------
    float
        Latitude in radians.

    Raises
    ------
    ValidationError
        If ``lat`` is NaN or out of range.
    """
    return _validate_angle(lat, 90.0, name)


def validate_longitude(lon: float, name: str = 'longitude') -> float:
    """Validate a longitude in degrees, within ``[-360, 360]``, and
    convert it to radians.

    Raises
    ------
    ValidationError
        If ``lon`` is NaN or out of range.
    """
    return _validate_angle(lon, 360.0, name)


def validate_position_angle(
    angle: float,
    name: str = 'position_angle'
) -> float:
    """Validate a position angle in degrees, within ``[-360, 360]``, and
    convert it to radians."""
    return _validate_angle(angle, 360.0, name)
