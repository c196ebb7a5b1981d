# -*- coding: utf-8 -*-
"""
Null Geometric Correction - Identity correction for undistorted images.

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
from typing import Tuple

# orbmap internal
from orbmap.correction.base import GeometricCorrection


class NullGeometricCorrection(GeometricCorrection):
    """
    Correction that leaves coordinates unchanged.

    Used for images that have already been corrected, or whose
    distortion is negligible.
    """

    def image_to_object(
        self,
        line: float,
        sample: float
    ) -> Tuple[float, float]:
        return line, sample

    def object_to_image(
        self,
        line: float,
        sample: float
    ) -> Tuple[float, float]:
        return line, sample

    def clone(self) -> 'NullGeometricCorrection':
        return NullGeometricCorrection()

    def __repr__(self) -> str:
        return "NullGeometricCorrection()"
