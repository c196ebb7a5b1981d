# -*- coding: utf-8 -*-
"""
orbmap - Map projections of spacecraft imagery.

Converts spacecraft images, indexed by detector line and sample, into
maps indexed by latitude and longitude. The pieces are:

- ``orbmap.correction`` -- geometric corrections between raw detector
  coordinates and ideal camera coordinates.
- ``orbmap.source`` -- source images that return a physical datum at a
  latitude and longitude.
- ``orbmap.mapping`` -- the resampling pipeline and map projections.
- ``orbmap.numerics`` -- root finders for equations without closed form
  inverses.

Dependencies
------------
numpy
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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from orbmap.exceptions import (
    OrbmapError,
    ValidationError,
    RootFindingError,
    BracketError,
    ConvergenceError,
    DependencyError,
)
from orbmap.body import OblateSpheroid
from orbmap.correction import (
    GeometricCorrection,
    NullGeometricCorrection,
    LensDistortionCorrection,
    LensParameters,
    GALILEO_SSI,
)
from orbmap.source import (
    SourceImage,
    PhotoImage,
    MosaicImage,
    LatitudeImage,
    LongitudeImage,
    Mu0Image,
    MuImage,
    CosPhaseImage,
    OrthographicViewingGeometry,
)
from orbmap.mapping import (
    MapFactory,
    SimpleCylindrical,
    Mercator,
    PolarStereographic,
    Orthographic,
    OrthographicCenter,
    PlotInfo,
    Extrema,
    Notifier,
    CallbackObserver,
    LoggingObserver,
)

__all__ = [
    'OrbmapError',
    'ValidationError',
    'RootFindingError',
    'BracketError',
    'ConvergenceError',
    'DependencyError',
    'OblateSpheroid',
    'GeometricCorrection',
    'NullGeometricCorrection',
    'LensDistortionCorrection',
    'LensParameters',
    'GALILEO_SSI',
    'SourceImage',
    'PhotoImage',
    'MosaicImage',
    'LatitudeImage',
    'LongitudeImage',
    'Mu0Image',
    'MuImage',
    'CosPhaseImage',
    'OrthographicViewingGeometry',
    'MapFactory',
    'SimpleCylindrical',
    'Mercator',
    'PolarStereographic',
    'Orthographic',
    'OrthographicCenter',
    'PlotInfo',
    'Extrema',
    'Notifier',
    'CallbackObserver',
    'LoggingObserver',
]
