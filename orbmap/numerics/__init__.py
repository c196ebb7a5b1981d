# -*- coding: utf-8 -*-
"""
Numerics - Floating point comparison and root finding.

- ``almost_equal`` / ``almost_zero`` -- ULP and epsilon comparisons.
- ``signum`` / ``sgn`` -- sign functions (``sgn`` treats zero as positive).
- ``quadratic_roots`` -- numerically stable quadratic formula.
- ``signed_cube_root`` -- real cube root of negative numbers.
- ``root_find_bracketed`` -- bracketed false position / bisection.
- ``root_find`` -- unbracketed secant iteration.

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

from orbmap.numerics.comparison import almost_equal, almost_zero, sgn, signum
from orbmap.numerics.roots import (
    quadratic_roots,
    root_find,
    root_find_bracketed,
    signed_cube_root,
)

__all__ = [
    'almost_equal',
    'almost_zero',
    'sgn',
    'signum',
    'quadratic_roots',
    'root_find',
    'root_find_bracketed',
    'signed_cube_root',
]
