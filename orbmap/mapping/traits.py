# -*- coding: utf-8 -*-
"""
Map Type Traits - Per-dtype constants and conversions for map buffers.

Maps may be stored in any numpy integer or floating point type. The
helpers here answer type-dependent questions generically:

- ``empty_value`` -- the default blank for unmapped cells.
- ``type_range`` -- the representable ``(lowest, max)`` range.
- ``float_range`` -- the range of floats that convert to the type
  without overflow.
- ``clip_minimum`` / ``clip_maximum`` -- clamp a requested bound.
- ``resolve_blank`` -- validate a user-supplied blank.
- ``scale_and_offset`` -- fit a physical data range into an integer
  type while keeping as many significant digits as possible.

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
from typing import Optional, Tuple

# Third-party
import numpy as np

# orbmap internal
from orbmap.exceptions import ValidationError


def _check_dtype(dtype) -> np.dtype:
    dtype = np.dtype(dtype)
    if not (np.issubdtype(dtype, np.integer)
            or np.issubdtype(dtype, np.floating)):
        raise ValidationError(
            f"Map data type must be an integer or floating point type, "
            f"got {dtype}"
        )
    return dtype


def empty_value(dtype) -> float:
    """Default blank: NaN for floating point types, zero for integers."""
    dtype = _check_dtype(dtype)
    if np.issubdtype(dtype, np.floating):
        return math.nan
    return 0


def type_range(dtype) -> Tuple[float, float]:
    """
    Representable range of a map data type.

    Parameters
    ----------
    dtype : numpy dtype-like
        Integer or floating point type.

    Returns
    -------
    Tuple[float, float]
        ``(lowest, max)``. For floating point types ``lowest`` is the
        most negative finite value, not the smallest positive one.
    """
    dtype = _check_dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return int(info.min), int(info.max)
    info = np.finfo(dtype)
    return float(info.min), float(info.max)


def float_range(dtype) -> Tuple[float, float]:
    """
    Range of floats that can be stored in ``dtype`` without overflow.

    Identical to :func:`type_range` except for 64-bit integer types,
    whose maximum rounds up to a float outside the type. That bound is
    pulled in to the nearest float that still fits.

    Parameters
    ----------
    dtype : numpy dtype-like
        Integer or floating point type.

    Returns
    -------
    Tuple[float, float]
    """
    lowest, highest = type_range(dtype)
    low = float(lowest)
    high = float(highest)
    # Python compares int and float exactly.
    if low < lowest:
        low = float(np.nextafter(low, math.inf))
    if high > highest:
        high = float(np.nextafter(high, -math.inf))
    return low, high


def clip_minimum(dtype, minimum: float) -> float:
    """Raise ``minimum`` to the lowest float storable in ``dtype``."""
    lowest, _ = float_range(dtype)
    return lowest if minimum < lowest else minimum


def clip_maximum(dtype, maximum: float) -> float:
    """Lower ``maximum`` to the largest float storable in ``dtype``."""
    _, highest = float_range(dtype)
    return highest if maximum > highest else maximum


def resolve_blank(dtype, blank: Optional[float] = None) -> float:
    """
    Determine the value stored in unmapped cells.

    Parameters
    ----------
    dtype : numpy dtype-like
        Map data type.
    blank : float, optional
        Requested blank. ``None`` selects :func:`empty_value`.

    Returns
    -------
    float
        The blank, guaranteed representable by ``dtype``.

    Raises
    ------
    ValidationError
        If ``blank`` lies outside the range of ``dtype``, or is NaN or
        fractional for an integer type.
    """
    if blank is None:
        return empty_value(dtype)

    dtype = _check_dtype(dtype)

    if math.isnan(blank):
        if np.issubdtype(dtype, np.integer):
            raise ValidationError(
                f"NaN blank cannot be stored in an {dtype} map"
            )
        return blank

    lowest, highest = type_range(dtype)
    if not lowest <= blank <= highest:
        raise ValidationError(
            f"Blank value {blank} does not fit in map data type {dtype} "
            f"[{lowest}, {highest}]"
        )
    if np.issubdtype(dtype, np.integer) and blank != int(blank):
        raise ValidationError(
            f"Blank value {blank} is not an integer and cannot be stored "
            f"in an {dtype} map"
        )
    return blank


def _digits10(dtype: np.dtype) -> int:
    """Number of decimal digits an integer type holds without change."""
    info = np.iinfo(dtype)
    value_bits = info.bits - (1 if info.min < 0 else 0)
    return int(math.floor(value_bits * math.log10(2)))


def scale_and_offset(
    dtype,
    minimum: float,
    maximum: float
) -> Optional[Tuple[float, float]]:
    """
    Scale and offset that store ``[minimum, maximum]`` in ``dtype``.

    For an integer type the scale is a power of ten chosen so that the
    scaled data range uses as many of the type's decimal digits as
    possible. When the scaled data would still underflow (overflow)
    the type, an offset shifts it up (down) by half the scaled range,
    or further if that is not enough. Data is stored as
    ``datum * scale + offset``.

    Parameters
    ----------
    dtype : numpy dtype-like
        Map data type.
    minimum, maximum : float
        Physical data range.

    Returns
    -------
    Optional[Tuple[float, float]]
        ``(scale, offset)``; always ``(1.0, 0.0)`` for floating point
        types. ``None`` if the data range is not finite, is negative,
        or is wider than the integer type.
    """
    dtype = _check_dtype(dtype)
    if np.issubdtype(dtype, np.floating):
        return 1.0, 0.0

    lowest, highest = float_range(dtype)
    type_span = highest - lowest
    data_range = maximum - minimum

    if (not math.isfinite(data_range) or data_range < 0
            or data_range > type_span):
        return None

    if data_range == 0:
        scale = 1.0
    else:
        exponent = _digits10(dtype) - int(math.log10(data_range))
        scale = 10.0 ** exponent
        while data_range * scale > type_span:
            scale /= 10

    if minimum * scale < lowest:
        offset = data_range / 2 * scale
    elif maximum * scale > highest:
        offset = -data_range / 2 * scale
    else:
        offset = 0.0

    # Half the range is not always enough to reach the type range.
    if minimum * scale + offset < lowest:
        offset = lowest - minimum * scale
    elif maximum * scale + offset > highest:
        offset = highest - maximum * scale

    return scale, offset
