# -*- coding: utf-8 -*-
"""
Lens Distortion Correction - Radial third-order optical distortion.

Models distortion that grows with the cube of the distance from the
optical axis::

    r = R * (1 + k * R**2)

where ``R`` is the undistorted (object space) radius and ``r`` the
distorted (image space) radius, both in full-frame pixels. Removing the
distortion means solving the depressed cubic ``k*R**3 + R - r = 0``,
which always has exactly one real root for ``k > 0``. It is obtained in
closed form with Cardano's method.

Images acquired in summation (2x2 binning) mode are scaled up to full
frame before the distortion model is applied and scaled back down
afterwards.

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
from typing import Tuple

# orbmap internal
from orbmap.correction.base import GeometricCorrection
from orbmap.exceptions import ValidationError
from orbmap.numerics.roots import signed_cube_root

logger = logging.getLogger(__name__)

# A full-frame image has at least this many times the optical axis
# sample count. Comparing against the exact axis location would
# misclassify full-frame images whose width is close to 2 * oa_sample.
_FULL_FRAME_FACTOR = 1.1


@dataclass(frozen=True)
class LensParameters:
    """
    Calibration constants for a radial lens distortion model.

    Parameters
    ----------
    distortion : float
        Third-order distortion coefficient ``k``, in inverse square
        full-frame pixels. Must be positive.
    oa_line : float
        Full-frame line of the optical axis.
    oa_sample : float
        Full-frame sample of the optical axis.
    """

    distortion: float
    oa_line: float
    oa_sample: float

    def __post_init__(self) -> None:
        if not self.distortion > 0:
            raise ValidationError(
                f"Lens distortion coefficient must be positive, "
                f"got {self.distortion}"
            )
        if not (math.isfinite(self.oa_line) and math.isfinite(self.oa_sample)):
            raise ValidationError(
                f"Optical axis must be finite, got "
                f"({self.oa_line}, {self.oa_sample})"
            )


#: Galileo Solid State Imaging (SSI) camera calibration.
GALILEO_SSI = LensParameters(distortion=6.58e-9, oa_line=400.0, oa_sample=400.0)


class LensDistortionCorrection(GeometricCorrection):
    """
    Radial lens distortion correction.

    Parameters
    ----------
    samples : int
        Number of samples in the image being corrected. Used only to
        decide whether the image was acquired in summation mode.
    parameters : LensParameters, default=GALILEO_SSI
        Camera calibration.

    Raises
    ------
    ValidationError
        If ``samples`` is not positive.

    Examples
    --------
    >>> correction = LensDistortionCorrection(800)
    >>> correction.summation_mode
    False
    >>> line, sample = correction.image_to_object(10.0, 20.0)
    """

    def __init__(
        self,
        samples: int,
        parameters: LensParameters = GALILEO_SSI
    ) -> None:
        if samples <= 0:
            raise ValidationError(
                f"Image sample count must be positive, got {samples}"
            )

        self._samples = samples
        self._parameters = parameters
        self._summation_mode = not (
            samples > _FULL_FRAME_FACTOR * parameters.oa_sample
        )

        logger.debug(
            "Lens correction for %d samples: %s mode",
            samples, "summation" if self._summation_mode else "full frame"
        )

    @property
    def parameters(self) -> LensParameters:
        """Camera calibration constants."""
        return self._parameters

    @property
    def samples(self) -> int:
        return self._samples

    @property
    def summation_mode(self) -> bool:
        """Whether the image was acquired with 2x2 summation."""
        return self._summation_mode

    def _to_full_frame(self, line: float, sample: float) -> Tuple[float, float]:
        """Offsets ``(x, y)`` from the optical axis in full-frame pixels."""
        p = self._parameters
        if self._summation_mode:
            return sample * 2 - p.oa_sample, line * 2 - p.oa_line
        return sample - p.oa_sample, line - p.oa_line

    def _from_full_frame(self, x: float, y: float) -> Tuple[float, float]:
        p = self._parameters
        line = y + p.oa_line
        sample = x + p.oa_sample
        if self._summation_mode:
            line /= 2
            sample /= 2
        return line, sample

    def image_to_object(
        self,
        line: float,
        sample: float
    ) -> Tuple[float, float]:
        """
        Remove lens distortion.

        Parameters
        ----------
        line : float
            Image space line.
        sample : float
            Image space sample.

        Returns
        -------
        Tuple[float, float]
            Undistorted ``(line, sample)``. The optical axis maps to
            itself.
        """
        x, y = self._to_full_frame(line, sample)
        is_rad = math.hypot(x, y)

        if is_rad != 0:
            k = self._parameters.distortion
            t1 = is_rad / (2 * k)
            t2 = math.sqrt(t1 * t1 + (1 / (3 * k)) ** 3)
            os_rad = signed_cube_root(t1 + t2) + signed_cube_root(t1 - t2)

            ratio = os_rad / is_rad
            x *= ratio
            y *= ratio

        return self._from_full_frame(x, y)

    def object_to_image(
        self,
        line: float,
        sample: float
    ) -> Tuple[float, float]:
        """
        Apply lens distortion.

        Parameters
        ----------
        line : float
            Object space line.
        sample : float
            Object space sample.

        Returns
        -------
        Tuple[float, float]
            Distorted ``(line, sample)``.
        """
        x, y = self._to_full_frame(line, sample)
        ct = 1 + self._parameters.distortion * (x * x + y * y)
        return self._from_full_frame(x * ct, y * ct)

    def clone(self) -> 'LensDistortionCorrection':
        return LensDistortionCorrection(self._samples, self._parameters)

    def __repr__(self) -> str:
        return (
            f"LensDistortionCorrection(samples={self._samples}, "
            f"parameters={self._parameters!r})"
        )
