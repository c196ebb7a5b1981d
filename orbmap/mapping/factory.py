# -*- coding: utf-8 -*-
"""
Map Factory - Resample a source image onto a map projection.

``MapFactory`` owns the resampling loop shared by every projection. A
concrete projection only supplies ``_plot_line``, the inverse
projection from map cell to planetocentric latitude and longitude, and
``_plot_grid`` for latitude / longitude grid overlays.

For every cell the factory asks the source image for a datum, writes it
to the map if it was found and lies inside the acceptance extrema, and
folds it into the observed data range. Rejected cells keep the blank
value. Every processed cell, accepted or not, is reported to the
progress notifier.

Map buffers are flat, row-major arrays of ``samples * lines`` elements.
Row ``k`` of the buffer holds map line ``k``.

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
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

# Third-party
import numpy as np

# orbmap internal
from orbmap.exceptions import ValidationError
from orbmap.mapping.extrema import Extrema
from orbmap.mapping.plot_info import PlotInfo
from orbmap.mapping.traits import resolve_blank
from orbmap.source.base import SourceImage

logger = logging.getLogger(__name__)

#: Value of grid line cells in ``make_grid`` output.
GRID_LINE = np.iinfo(np.uint8).max


class MapFactory(ABC):
    """
    Abstract base class for map projections.

    Subclasses implement :meth:`_plot_line` and :meth:`_plot_grid`, and
    name themselves through :attr:`projection_name`.
    """

    @property
    @abstractmethod
    def projection_name(self) -> str:
        """Human readable projection name."""
        ...

    @abstractmethod
    def _plot_line(
        self,
        k: int,
        samples: int,
        lines: int
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Inverse projection for one map line.

        Parameters
        ----------
        k : int
            Map line index, ``0 <= k < lines``.
        samples : int
            Map width.
        lines : int
            Map height.

        Returns
        -------
        Tuple[np.ndarray, np.ndarray]
            Planetocentric latitudes and longitudes, in radians, of the
            ``samples`` cells of line ``k``. Cells outside the area the
            projection can represent are NaN.
        """
        ...

    @abstractmethod
    def _plot_grid(
        self,
        samples: int,
        lines: int,
        lat_interval: float,
        lon_interval: float,
        grid: np.ndarray
    ) -> None:
        """
        Draw grid lines into ``grid``.

        Parameters
        ----------
        samples, lines : int
            Map dimensions.
        lat_interval, lon_interval : float
            Grid spacing in degrees.
        grid : np.ndarray
            Zero-filled ``uint8`` array of shape ``(lines, samples)``.
            Grid line cells are set to ``GRID_LINE``.
        """
        ...

    def make_map(
        self,
        source: SourceImage,
        info: PlotInfo,
        extrema: Optional[Extrema] = None,
        max_workers: Optional[int] = None
    ) -> np.ndarray:
        """
        Create a map of ``source`` in this projection.

        Parameters
        ----------
        source : SourceImage
            Data to map.
        info : PlotInfo
            Map dimensions, element type, blank value, acceptance range
            and progress notifier. Its observed extrema are reset, then
            updated with every datum written to the map.
        extrema : Extrema, optional
            Acceptance range overriding ``info.minimum`` and
            ``info.maximum``.
        max_workers : int, optional
            If greater than one, map lines are plotted concurrently on a
            thread pool of this size. ``source`` must then support
            concurrent reads.

        Returns
        -------
        np.ndarray
            Flat map buffer of ``info.samples * info.lines`` elements of
            type ``info.dtype``.

        Raises
        ------
        ValidationError
            If the blank value does not fit in ``info.dtype``.
        """
        blank = resolve_blank(info.dtype, info.blank)
        window = extrema if extrema is not None else Extrema(
            info.minimum, info.maximum, info.dtype
        )

        samples = info.samples
        lines = info.lines
        map_size = info.map_size

        data = np.full(map_size, blank, dtype=info.dtype)
        rows = data.reshape(lines, samples)

        info.reset_extrema()
        notifier = info.notifier

        logger.info(
            "Creating %s map: %d samples x %d lines, %s",
            self.projection_name, samples, lines, info.dtype
        )

        def plot_line(k: int) -> None:
            lats, lons = self._plot_line(k, samples, lines)
            row = rows[k]
            for i in range(samples):
                self._plot(source, lats[i], lons[i], window, info, row, i)
                notifier.notify_plotted(map_size)

        if max_workers is None or max_workers <= 1 or lines == 1:
            for k in range(lines):
                plot_line(k)
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                futures = [executor.submit(plot_line, k) for k in range(lines)]
                for future in futures:
                    future.result()

        notifier.notify_done(map_size)

        if info.data_mapped:
            logger.debug(
                "%s map data range: [%s, %s]",
                self.projection_name,
                info.observed_minimum, info.observed_maximum
            )
        else:
            logger.warning(
                "No data was mapped to the %s map", self.projection_name
            )

        return data

    @staticmethod
    def _plot(
        source: SourceImage,
        lat: float,
        lon: float,
        window: Extrema,
        info: PlotInfo,
        row: np.ndarray,
        i: int
    ) -> None:
        if not (math.isfinite(lat) and math.isfinite(lon)):
            return

        datum, found = source.read_data(float(lat), float(lon))

        if found and window.contains(datum):
            row[i] = datum
            info.update_extrema(float(row[i]))

    def make_grid(
        self,
        samples: int,
        lines: int,
        lat_interval: float,
        lon_interval: float
    ) -> np.ndarray:
        """
        Create a latitude / longitude grid overlay for this projection.

        Parameters
        ----------
        samples, lines : int
            Map dimensions. Must be positive.
        lat_interval, lon_interval : float
            Grid spacing in degrees. Must be positive.

        Returns
        -------
        np.ndarray
            Flat ``uint8`` buffer of ``samples * lines`` elements, zero
            except for ``GRID_LINE`` on grid lines.

        Raises
        ------
        ValidationError
            If a dimension or interval is not positive.
        """
        if samples <= 0 or lines <= 0:
            raise ValidationError(
                f"Grid dimensions must be positive, got "
                f"{samples} samples x {lines} lines"
            )
        for name, value in (('lat_interval', lat_interval),
                            ('lon_interval', lon_interval)):
            if not (math.isfinite(value) and value > 0):
                raise ValidationError(f"{name} must be positive, got {value}")

        grid = np.zeros(samples * lines, dtype=np.uint8)
        self._plot_grid(
            samples, lines, lat_interval, lon_interval,
            grid.reshape(lines, samples)
        )
        return grid
