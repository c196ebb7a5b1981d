# -*- coding: utf-8 -*-
"""
Source Images - Sources of data indexed by latitude and longitude.

Provides the ``SourceImage`` ABC consumed by map factories, and
concrete sources:

- ``PhotoImage`` -- interpolated raster with viewing geometry and
  geometric correction.
- ``MosaicImage`` -- composite of several sources (``FirstRead``,
  ``UnweightedAverage``, ``WeightedAverage``).
- ``LatitudeImage`` / ``LongitudeImage`` -- computed coordinate planes.
- ``Mu0Image`` -- cosine of the solar incidence angle.
- ``MuImage`` -- cosine of the emission angle.
- ``CosPhaseImage`` -- cosine of the phase angle.

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

from orbmap.source.base import SourceImage
from orbmap.source.geometry import (
    OrthographicFrame,
    OrthographicViewingGeometry,
    ViewingGeometry,
)
from orbmap.source.mosaic import (
    Compositor,
    FirstRead,
    MosaicImage,
    UnweightedAverage,
    WeightedAverage,
)
from orbmap.source.photo import PhotoImage
from orbmap.source.virtual import (
    CosPhaseImage,
    LatitudeImage,
    LongitudeImage,
    Mu0Image,
    MuImage,
    VirtualImage,
)

__all__ = [
    'SourceImage',
    'VirtualImage',
    'LatitudeImage',
    'LongitudeImage',
    'Mu0Image',
    'MuImage',
    'CosPhaseImage',
    'ViewingGeometry',
    'OrthographicFrame',
    'OrthographicViewingGeometry',
    'PhotoImage',
    'MosaicImage',
    'Compositor',
    'FirstRead',
    'UnweightedAverage',
    'WeightedAverage',
]
