# -*- coding: utf-8 -*-
"""
Plot Information - Per-map configuration and plotting state.

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
from typing import Optional

# Third-party
import numpy as np

# orbmap internal
from orbmap.exceptions import ValidationError
from orbmap.mapping.extrema import Extrema
from orbmap.mapping.progress import Notifier


class PlotInfo:
    """
    Configuration for plotting one map, and the state it accumulates.

    Parameters
    ----------
    samples : int
        Map width in cells. Must be positive.
    lines : int
        Map height in cells. Must be positive.
    dtype : numpy dtype-like, default=np.float64
        Map element type.
    blank : float, optional
        Value of cells with no data. Defaults to NaN for floating point
        maps and zero for integer maps. Validated against ``dtype`` when
        the map is made.
    minimum, maximum : float, optional
        Acceptance window for source data. Default to the range of
        ``dtype``.
    notifier : Notifier, optional
        Progress notifier. A new one with no observers is created if
        omitted.

    Raises
    ------
    ValidationError
        If ``samples`` or ``lines`` is not positive.
    """

    def __init__(
        self,
        samples: int,
        lines: int,
        dtype=np.float64,
        blank: Optional[float] = None,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        notifier: Optional[Notifier] = None
    ) -> None:
        if samples <= 0 or lines <= 0:
            raise ValidationError(
                f"Map dimensions must be positive, got "
                f"{samples} samples x {lines} lines"
            )

        self.samples = int(samples)
        self.lines = int(lines)
        self.dtype = np.dtype(dtype)
        self.blank = blank
        self.minimum = minimum
        self.maximum = maximum
        self.notifier = notifier if notifier is not None else Notifier()

        self._observed = Extrema.tracker(self.dtype)

    @property
    def map_size(self) -> int:
        """Number of cells in the map."""
        return self.samples * self.lines

    def update_extrema(self, datum: float) -> None:
        """Fold a plotted datum into the observed data range."""
        self._observed.update(datum)

    def reset_extrema(self) -> None:
        self._observed.reset()

    @property
    def observed_minimum(self) -> Optional[float]:
        """Smallest plotted datum, or ``None`` if nothing was plotted."""
        return self._observed.minimum if self._observed.is_valid else None

    @property
    def observed_maximum(self) -> Optional[float]:
        """Largest plotted datum, or ``None`` if nothing was plotted."""
        return self._observed.maximum if self._observed.is_valid else None

    @property
    def data_mapped(self) -> bool:
        """Whether at least one datum was plotted."""
        return self._observed.is_valid
