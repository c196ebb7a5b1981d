# -*- coding: utf-8 -*-
"""
Floating Point Comparison - ULP and epsilon based equality tests.

Exact equality is rarely the right test for computed doubles. These
helpers compare against machine epsilon scaled either by the magnitude
of the operands (``almost_equal``) or by a fixed multiple
(``almost_zero``). The latter is needed near zero where relative
comparisons break down.

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

# Third-party
import numpy as np

_EPSILON = float(np.finfo(np.float64).eps)
_TINY = float(np.finfo(np.float64).tiny)


def almost_equal(x: float, y: float, ulps: int) -> bool:
    """Check whether two doubles agree to within ``ulps`` units in the last place.

    Parameters
    ----------
    x, y : float
        Values to compare.
    ulps : int
        Desired precision in units in the last place.

    Returns
    -------
    bool
        ``True`` if the values are almost equal. Differences that are
        subnormal always compare equal.
    """
    diff = abs(x - y)
    return diff < _EPSILON * abs(x + y) * ulps or diff < _TINY


def almost_zero(x: float, n: int) -> bool:
    """Check whether ``x`` lies within ``n`` machine epsilons of zero.

    ``almost_equal`` is not suitable for values near zero since the
    scaled epsilon vanishes along with the operands.

    Parameters
    ----------
    x : float
        Value to test.
    n : int
        Multiple of machine epsilon treated as zero. Should be positive.

    Returns
    -------
    bool
    """
    return abs(x) < _EPSILON * n


def signum(x: float) -> int:
    """Return -1, 0 or 1 according to the sign of ``x``."""
    return int(x > 0) - int(x < 0)


def sgn(x: float) -> int:
    """Return -1 for negative ``x``, 1 otherwise.

    Unlike :func:`signum`, zero is treated as positive.
    """
    return int(x >= 0) - int(x < 0)
