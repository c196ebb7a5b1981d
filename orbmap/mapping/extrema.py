# -*- coding: utf-8 -*-
"""
Extrema - Data range bounds and running minimum / maximum tracking.

An ``Extrema`` plays two roles during map generation:

- As an acceptance window, data outside ``[minimum, maximum]`` is not
  written to the map.
- As a tracker, the minimum and maximum of the data actually written
  are accumulated with ``update``. Min and max are commutative, so the
  result does not depend on the order cells are plotted in.

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
import math
import threading
from typing import Optional

# Third-party
import numpy as np

# orbmap internal
from orbmap.exceptions import ValidationError
from orbmap.mapping.traits import clip_maximum, clip_minimum, type_range


class Extrema:
    """
    Minimum and maximum of a range of map data.

    Parameters
    ----------
    minimum : float, optional
        Lower bound. Defaults to the lowest value of ``dtype``; values
        below it are clipped to it.
    maximum : float, optional
        Upper bound. Defaults to the largest value of ``dtype``; values
        above it are clipped to it.
    dtype : numpy dtype-like, default=np.float64
        Map data type the bounds apply to.

    Raises
    ------
    ValidationError
        If a bound is NaN or ``minimum > maximum``.

    Examples
    --------
    >>> window = Extrema(-1.0, 1.0)
    >>> window.contains(0.5)
    True
    >>> tracker = Extrema.tracker()
    >>> tracker.is_valid
    False
    >>> tracker.update(3.0)
    >>> tracker.minimum, tracker.maximum
    (3.0, 3.0)
    """

    def __init__(
        self,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        dtype=np.float64
    ) -> None:
        self._dtype = np.dtype(dtype)
        lowest, highest = type_range(self._dtype)

        if minimum is None:
            minimum = lowest
        if maximum is None:
            maximum = highest

        for name, value in (('minimum', minimum), ('maximum', maximum)):
            if math.isnan(value):
                raise ValidationError(f"Extrema {name} must not be NaN")

        self._minimum = float(clip_minimum(self._dtype, minimum))
        self._maximum = float(clip_maximum(self._dtype, maximum))
        self._lock = threading.Lock()

        if not self.is_valid:
            raise ValidationError(
                f"Extrema minimum {minimum} is greater than maximum {maximum}"
            )

    @classmethod
    def tracker(cls, dtype=np.float64) -> 'Extrema':
        """
        Create an empty accumulator for observed data.

        The tracker starts inverted (minimum at the type maximum,
        maximum at the type lowest) so the first ``update`` sets both
        bounds. It reports ``is_valid == False`` until then.
        """
        extrema = cls(dtype=dtype)
        extrema.reset()
        return extrema

    @property
    def minimum(self) -> float:
        return self._minimum

    @property
    def maximum(self) -> float:
        return self._maximum

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def is_valid(self) -> bool:
        """Whether ``minimum <= maximum``."""
        return self._minimum <= self._maximum

    def contains(self, datum: float) -> bool:
        """Whether ``datum`` lies in ``[minimum, maximum]``."""
        return self._minimum <= datum <= self._maximum

    def update(self, datum: float) -> None:
        """Widen the bounds to include ``datum``."""
        with self._lock:
            if datum < self._minimum:
                self._minimum = float(datum)
            if datum > self._maximum:
                self._maximum = float(datum)

    def reset(self) -> None:
        """Return to the empty, inverted state of :meth:`tracker`."""
        lowest, highest = type_range(self._dtype)
        with self._lock:
            self._minimum = float(highest)
            self._maximum = float(lowest)

    def __repr__(self) -> str:
        return (
            f"Extrema(minimum={self._minimum}, maximum={self._maximum}, "
            f"dtype={self._dtype})"
        )
