# -*- coding: utf-8 -*-
"""
Mapping - Resampling pipeline and map projections.

- ``MapFactory`` -- resampling loop shared by all projections.
- ``SimpleCylindrical``, ``Mercator``, ``PolarStereographic``,
  ``Orthographic`` -- concrete projections.
- ``PlotInfo`` -- per-map configuration.
- ``Extrema`` -- acceptance window and observed data range.
- ``Notifier`` / ``Observer`` -- progress notification.
- ``traits`` -- dtype-generic blank, range and scaling helpers.

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

from orbmap.mapping.extrema import Extrema
from orbmap.mapping.factory import GRID_LINE, MapFactory
from orbmap.mapping.mercator import Mercator
from orbmap.mapping.orthographic import (
    CenterGeometry,
    Orthographic,
    OrthographicCenter,
)
from orbmap.mapping.plot_info import PlotInfo
from orbmap.mapping.polar_stereographic import PolarStereographic
from orbmap.mapping.progress import (
    CallbackObserver,
    LoggingObserver,
    Notifier,
    Observer,
)
from orbmap.mapping.simple_cylindrical import SimpleCylindrical
from orbmap.mapping.traits import (
    clip_maximum,
    clip_minimum,
    empty_value,
    float_range,
    resolve_blank,
    scale_and_offset,
    type_range,
)

__all__ = [
    'MapFactory',
    'GRID_LINE',
    'SimpleCylindrical',
    'Mercator',
    'PolarStereographic',
    'Orthographic',
    'OrthographicCenter',
    'CenterGeometry',
    'PlotInfo',
    'Extrema',
    'Notifier',
    'Observer',
    'CallbackObserver',
    'LoggingObserver',
    'empty_value',
    'type_range',
    'float_range',
    'clip_minimum',
    'clip_maximum',
    'resolve_blank',
    'scale_and_offset',
]
