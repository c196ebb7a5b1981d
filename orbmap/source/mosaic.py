# -*- coding: utf-8 -*-
"""
Mosaic Image - Composite several source images into one.

A mosaic asks each of its images for a datum and combines the results
with a pluggable compositing strategy:

- ``FirstRead`` -- datum from the first image that has one.
- ``UnweightedAverage`` -- mean of every available datum.
- ``WeightedAverage`` -- mean weighted by each image's reported weight,
  e.g. distance from the frame edge for a ``PhotoImage``.

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
from typing import Optional, Sequence, Tuple

# orbmap internal
from orbmap.exceptions import ValidationError
from orbmap.source.base import SourceImage


class Compositor(ABC):
    """Strategy for combining data from overlapping images."""

    @abstractmethod
    def composite(
        self,
        images: Sequence[SourceImage],
        lat: float,
        lon: float
    ) -> Tuple[float, bool]:
        """
        Combine data from ``images`` at a coordinate.

        Returns
        -------
        Tuple[float, bool]
            ``(datum, found)``; ``found`` is ``False`` if no image has
            data at the coordinate.
        """
        ...


class FirstRead(Compositor):
    """Use the datum from the first image, in order, that has one."""

    def composite(self, images, lat, lon):
        for image in images:
            datum, found = image.read_data(lat, lon)
            if found:
                return datum, True
        return 0.0, False


class UnweightedAverage(Compositor):
    """Average the data from every image that has one."""

    def composite(self, images, lat, lon):
        total = 0.0
        count = 0
        for image in images:
            datum, found = image.read_data(lat, lon)
            if found:
                total += datum
                count += 1

        if count == 0:
            return 0.0, False
        return total / count, True


class WeightedAverage(Compositor):
    """Average the data from every image, weighted by reported weight."""

    def composite(self, images, lat, lon):
        total = 0.0
        total_weight = 0.0
        for image in images:
            datum, weight, found = image.read_data_weighted(
                lat, lon, scan=True
            )
            if found:
                total += datum * weight
                total_weight += weight

        if total_weight <= 0:
            return 0.0, False
        return total / total_weight, True


class MosaicImage(SourceImage):
    """
    Source image composed of several other source images.

    Parameters
    ----------
    images : Sequence[SourceImage]
        Component images. Must not be empty.
    compositor : Compositor, optional
        Combination strategy. Defaults to ``UnweightedAverage``.

    Raises
    ------
    ValidationError
        If ``images`` is empty.
    """

    def __init__(
        self,
        images: Sequence[SourceImage],
        compositor: Optional[Compositor] = None
    ) -> None:
        images = tuple(images)
        if not images:
            raise ValidationError("Mosaic requires at least one image")

        self._images = images
        self._compositor = (
            compositor if compositor is not None else UnweightedAverage()
        )

    @property
    def images(self) -> Tuple[SourceImage, ...]:
        return self._images

    @property
    def compositor(self) -> Compositor:
        return self._compositor

    @property
    def unit(self) -> str:
        return self._images[0].unit

    def read_data(self, lat: float, lon: float) -> Tuple[float, bool]:
        return self._compositor.composite(self._images, lat, lon)
