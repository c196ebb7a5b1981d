# -*- coding: utf-8 -*-
"""
Source Image Base Class - Abstract interface for geographic data sources.

A source image answers one question: what is the physical value at a
given planetocentric latitude and longitude? Map factories ask it once
per output cell. How the value is obtained (reading and interpolating a
photograph, computing it analytically, compositing several images) is
up to the subclass.

A miss is reported in band through a ``found`` flag rather than by
raising, since most cells of a typical map fall outside any single
image's footprint.

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


class SourceImage(ABC):
    """
    Abstract base class for sources of mappable data.

    Subclasses must implement :meth:`read_data`. Sources whose data
    carries a footprint-dependent quality measure also override
    :meth:`read_data_weighted`.

    Data is always returned as a Python float. Narrowing to the map's
    element type is done by the map factory.
    """

    @abstractmethod
    def read_data(self, lat: float, lon: float) -> Tuple[float, bool]:
        """
        Retrieve the datum at a geographic coordinate.

        Parameters
        ----------
        lat : float
            Planetocentric latitude in radians.
        lon : float
            Longitude in radians.

        Returns
        -------
        Tuple[float, bool]
            ``(datum, found)``. ``found`` is ``False`` when the
            coordinate lies outside the source's footprint, in which
            case ``datum`` is meaningless.
        """
        ...

    def read_data_weighted(
        self,
        lat: float,
        lon: float,
        scan: bool = False
    ) -> Tuple[float, float, bool]:
        """
        Retrieve the datum and its compositing weight.

        The default implementation delegates to :meth:`read_data` and
        reports a weight of ``1.0``.

        Parameters
        ----------
        lat : float
            Planetocentric latitude in radians.
        lon : float
            Longitude in radians.
        scan : bool, default=False
            Request the weight to be computed. Sources that integrate
            over a footprint may skip that work when ``False``.

        Returns
        -------
        Tuple[float, float, bool]
            ``(datum, weight, found)``.
        """
        datum, found = self.read_data(lat, lon)
        return datum, 1.0, found

    @property
    def unit(self) -> str:
        """Physical unit of the returned data, empty if dimensionless."""
        return ''
