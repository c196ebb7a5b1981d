# -*- coding: utf-8 -*-
"""
Geometric Correction - Image space / object space coordinate conversion.

Provides the ``GeometricCorrection`` ABC and two concrete corrections:

- ``NullGeometricCorrection`` -- identity.
- ``LensDistortionCorrection`` -- radial third-order lens distortion,
  calibrated by a ``LensParameters`` instance (``GALILEO_SSI`` by
  default).

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

from orbmap.correction.base import GeometricCorrection
from orbmap.correction.lens import (
    GALILEO_SSI,
    LensDistortionCorrection,
    LensParameters,
)
from orbmap.correction.null import NullGeometricCorrection

__all__ = [
    'GeometricCorrection',
    'NullGeometricCorrection',
    'LensDistortionCorrection',
    'LensParameters',
    'GALILEO_SSI',
]
