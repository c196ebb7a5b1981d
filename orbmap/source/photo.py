# -*- coding: utf-8 -*-
"""
Photo Image - Source image backed by a spacecraft photograph.

Reads the datum at a geographic coordinate by projecting it into the
ideal camera with a ``ViewingGeometry``, distorting the result into the
raw detector with a ``GeometricCorrection``, and interpolating the
raster there with ``scipy.ndimage.map_coordinates``.

Pixel coordinates follow the detector convention: ``[0, 1)`` lies
inside pixel 0, ``[1, 2)`` inside pixel 1, and so on, with line 0 at
the top of the image.

Dependencies
------------
scipy

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
from typing import Optional, Tuple

# Third-party
import numpy as np

try:
    from scipy.ndimage import map_coordinates, spline_filter
    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False
    map_coordinates = None
    spline_filter = None

# orbmap internal
from orbmap.correction.base import GeometricCorrection
from orbmap.correction.null import NullGeometricCorrection
from orbmap.exceptions import DependencyError, ValidationError
from orbmap.source.base import SourceImage
from orbmap.source.geometry import ViewingGeometry

logger = logging.getLogger(__name__)

# Mapping from interpolation name to scipy order parameter
_INTERPOLATION_ORDERS = {
    'nearest': 0,
    'bilinear': 1,
    'bicubic': 3,
}


class PhotoImage(SourceImage):
    """
    Source image backed by a 2D raster.

    Parameters
    ----------
    image : np.ndarray
        2D raster, shape ``(lines, samples)``. Converted to float64.
        NaN pixels are treated as missing data.
    geometry : ViewingGeometry
        Maps geographic coordinates into object space.
    correction : GeometricCorrection, optional
        Maps object space into image space. Defaults to
        ``NullGeometricCorrection``.
    interpolation : str, default='bilinear'
        One of ``'nearest'``, ``'bilinear'``, ``'bicubic'``.
    nibble : Tuple[int, int, int, int], default=(0, 0, 0, 0)
        Number of ``(top, bottom, left, right)`` border pixels to
        ignore, e.g. to skip frame edge artifacts.
    unit : str, default=''
        Physical unit of the pixel values.

    Raises
    ------
    ValidationError
        If the image is not 2D or smaller than 2x2, the interpolation
        name is unknown, or the nibble values leave no usable pixels.
    DependencyError
        If scipy is not installed.
    """

    def __init__(
        self,
        image: np.ndarray,
        geometry: ViewingGeometry,
        correction: Optional[GeometricCorrection] = None,
        interpolation: str = 'bilinear',
        nibble: Tuple[int, int, int, int] = (0, 0, 0, 0),
        unit: str = ''
    ) -> None:
        if not SCIPY_AVAILABLE:
            raise DependencyError(
                "scipy is required for photo image interpolation. "
                "Install with: pip install scipy>=1.7.0"
            )

        image = np.asarray(image, dtype=np.float64)
        if image.ndim != 2:
            raise ValidationError(
                f"Photo image must be 2D, got shape {image.shape}"
            )

        lines, samples = image.shape
        if lines < 2 or samples < 2:
            raise ValidationError(
                f"Photo image must be at least 2x2, got {lines}x{samples}"
            )

        if interpolation not in _INTERPOLATION_ORDERS:
            raise ValidationError(
                f"Unknown interpolation method '{interpolation}'. "
                f"Must be one of: {list(_INTERPOLATION_ORDERS.keys())}"
            )

        top, bottom, left, right = (int(n) for n in nibble)
        if min(top, bottom, left, right) < 0:
            raise ValidationError(f"Nibble values must be >= 0, got {nibble}")
        if left + right >= samples or top + bottom >= lines:
            raise ValidationError(
                f"Nibble {nibble} leaves no usable pixels in a "
                f"{lines}x{samples} image"
            )

        self._order = _INTERPOLATION_ORDERS[interpolation]
        self.interpolation = interpolation

        # Spline coefficients are computed once rather than per read.
        if self._order > 1:
            self._coefficients = spline_filter(
                image, order=self._order, mode='nearest'
            )
        else:
            self._coefficients = image

        self._image = image
        self._lines = lines
        self._samples = samples
        self._nibble = (top, bottom, left, right)
        self._geometry = geometry
        self._correction = (
            correction if correction is not None else NullGeometricCorrection()
        )
        self._unit = unit

        logger.debug(
            "PhotoImage %dx%d, %s interpolation, nibble=%s",
            lines, samples, interpolation, self._nibble
        )

    @property
    def shape(self) -> Tuple[int, int]:
        """Raster shape ``(lines, samples)``."""
        return self._lines, self._samples

    @property
    def unit(self) -> str:
        return self._unit

    def read_data(self, lat: float, lon: float) -> Tuple[float, bool]:
        datum, _, found = self.read_data_weighted(lat, lon, scan=False)
        return datum, found

    def read_data_weighted(
        self,
        lat: float,
        lon: float,
        scan: bool = False
    ) -> Tuple[float, float, bool]:
        """
        Retrieve the datum and, when ``scan`` is set, its distance from
        the nearest usable image edge.

        The weight is one for border pixels and grows by one per pixel
        toward the interior, so mosaics favor data far from frame edges.
        """
        obj = self._geometry.latlon_to_object(lat, lon)
        if obj is None:
            return 0.0, 0.0, False

        z, x = self._correction.object_to_image(*obj)

        if not (x >= 0 and z >= 0):
            return 0.0, 0.0, False

        i = math.floor(x)
        k = math.floor(z)

        top, bottom, left, right = self._nibble
        last_i = self._samples - right - 1
        last_k = self._lines - bottom - 1

        if i < left or i > last_i or k < top or k > last_k:
            return 0.0, 0.0, False

        # Pixel centers sit at half-integer pixel coordinates.
        coords = np.array([[z - 0.5], [x - 0.5]])
        datum = float(map_coordinates(
            self._coefficients, coords, order=self._order,
            mode='nearest', prefilter=False
        )[0])

        if math.isnan(datum):
            return 0.0, 0.0, False

        weight = 1.0
        if scan:
            weight = float(min(i - left, last_i - i, k - top, last_k - k) + 1)

        return datum, weight, True
