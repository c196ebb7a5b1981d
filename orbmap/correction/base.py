# -*- coding: utf-8 -*-
"""
Geometric Correction Base Class - Abstract interface for image corrections.

A geometric correction converts between raw detector coordinates
("image space") and coordinates with optical or sensor distortion
removed ("object space"). Source images that read from a raster apply
``object_to_image`` after projecting a geographic coordinate into the
ideal camera, and ``image_to_object`` when a measured pixel must be
related back to the ideal camera.

Both directions work on a ``(line, sample)`` pair and return the
transformed pair.

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
from abc import ABC, abstractmethod
from typing import Tuple


class GeometricCorrection(ABC):
    """
    Abstract base class for image geometric corrections.

    Implementations hold their calibration constants as instance state
    fixed at construction, so a single instance may be shared by
    concurrent readers. Use :meth:`clone` to obtain an independent copy
    of the concrete variant.
    """

    @abstractmethod
    def image_to_object(
        self,
        line: float,
        sample: float
    ) -> Tuple[float, float]:
        """
        Convert from image space to object space.

        Parameters
        ----------
        line : float
            Image space line coordinate.
        sample : float
            Image space sample coordinate.

        Returns
        -------
        Tuple[float, float]
            ``(line, sample)`` in object space.
        """
        ...

    @abstractmethod
    def object_to_image(
        self,
        line: float,
        sample: float
    ) -> Tuple[float, float]:
        """
        Convert from object space to image space.

        Parameters
        ----------
        line : float
            Object space line coordinate.
        sample : float
            Object space sample coordinate.

        Returns
        -------
        Tuple[float, float]
            ``(line, sample)`` in image space.
        """
        ...

    @abstractmethod
    def clone(self) -> 'GeometricCorrection':
        """Return an independent copy of this correction."""
        ...
