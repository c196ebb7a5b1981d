# -*- coding: utf-8 -*-
"""
Root Finding - Closed-form and iterative solvers for nonlinear equations.

Map projections such as Mercator and Polar Stereographic have forward
equations for an oblate spheroid that cannot be inverted in closed form,
and the lens distortion model needs the real root of a cubic. This
module provides:

- ``quadratic_roots`` -- numerically stable quadratic formula.
- ``signed_cube_root`` -- real cube root that accepts negative input.
- ``root_find_bracketed`` -- guaranteed convergence given a bracket,
  using an Illinois false-position iteration safeguarded by bisection.
- ``root_find`` -- best-effort secant iteration from a single guess.

Both iterative solvers look for ``x`` such that ``f(x) == y`` rather
than ``f(x) == 0``, and raise a ``RootFindingError`` subclass when no
result can be produced.

References
----------
Press, Teukolsky, Vetterling and Flannery, "Numerical Recipes in C",
2nd ed., Sections 5.6 and 9.2.

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
from typing import Callable, Optional, Tuple

# Third-party
import numpy as np

# orbmap internal
from orbmap.exceptions import BracketError, ConvergenceError, ValidationError
from orbmap.numerics.comparison import almost_equal, almost_zero, sgn

# Relative size of the second secant point in root_find().
_SECANT_STEP = math.sqrt(float(np.finfo(np.float64).eps))


def quadratic_roots(
    a: float,
    b: float,
    c: float
) -> Optional[Tuple[float, float]]:
    """
    Solve ``a*x**2 + b*x + c = 0`` without catastrophic cancellation.

    The naive formula subtracts two nearly equal numbers when ``b`` and
    the square root of the discriminant are close in magnitude. Computing

        q = -(b + sgn(b) * sqrt(b**2 - 4*a*c)) / 2

    and taking ``q/a`` and ``c/q`` as the roots avoids that.

    Parameters
    ----------
    a : float
        Coefficient of the quadratic term. Must be non-zero.
    b : float
        Coefficient of the linear term.
    c : float
        Coefficient of the constant term.

    Returns
    -------
    Optional[Tuple[float, float]]
        The two real roots, unordered, or ``None`` if the roots are
        complex.

    Raises
    ------
    ValidationError
        If ``a`` is zero.
    """
    if a == 0:
        raise ValidationError("Quadratic coefficient 'a' must be non-zero")

    discriminant = b * b - 4 * a * c

    if discriminant < 0:
        return None

    # sgn() rather than signum(): a zero b must keep the square root
    # term, otherwise q is zero and c/q is undefined.
    q = -(b + sgn(b) * math.sqrt(discriminant)) / 2

    if q == 0:
        # Only reachable with b == 0 and c == 0.
        return 0.0, 0.0

    return q / a, c / q


def signed_cube_root(x: float) -> float:
    """Real cube root of ``x``, including negative values.

    Computed as ``exp(log|x| / 3)`` with the sign of ``x`` restored.
    """
    if x == 0:
        return 0.0
    root = math.exp(math.log(abs(x)) / 3.0)
    return -root if x < 0 else root


def _is_almost_equal(lhs: float, rhs: float, ulps: int) -> bool:
    return almost_equal(lhs, rhs, ulps) or (
        almost_zero(lhs, ulps) and almost_zero(rhs, ulps)
    )


def root_find_bracketed(
    y: float,
    xl: float,
    xh: float,
    f: Callable[[float], float],
    ulps: int = 2,
    max_iterations: int = 100
) -> float:
    """
    Find ``x`` in ``[xl, xh]`` such that ``f(x) == y``.

    The bracket end points may be given in either order, but ``f(xl) - y``
    and ``f(xh) - y`` must not share the same strict sign. Each step
    takes the false-position estimate, falling back to bisection if the
    estimate does not land strictly inside the current bracket. The
    Illinois modification halves the retained end point's residual when
    the same end point survives twice in a row, which prevents the
    one-sided stagnation of plain false position.

    Parameters
    ----------
    y : float
        Target ordinate.
    xl, xh : float
        Bracket end points.
    f : Callable[[float], float]
        Function to invert. Must be continuous over the bracket.
    ulps : int, default=2
        Convergence tolerance in units in the last place. Steps smaller
        than ``ulps`` machine epsilons also count as converged so that
        roots at zero terminate.
    max_iterations : int, default=100
        Iteration budget.

    Returns
    -------
    float
        The root.

    Raises
    ------
    BracketError
        If the bracket does not straddle ``y``.
    ConvergenceError
        If the iteration budget is exhausted or ``f`` returns NaN.
    """
    yl = f(xl)
    yh = f(xh)

    if (yl > y and yh > y) or (yl < y and yh < y):
        raise BracketError(
            f"Root finding bracket [{xl}, {xh}] does not straddle {y}: "
            f"f(xl)={yl}, f(xh)={yh}"
        )

    if _is_almost_equal(yl, y, ulps):
        return xl
    if _is_almost_equal(yh, y, ulps):
        return xh

    # Orient the search so that f(xl) < y.
    if yl > y:
        xl, xh = xh, xl
        yl, yh = yh, yl

    gl = yl - y
    gh = yh - y

    x_prev = xl
    retained = 0  # -1: low end moved last, 1: high end moved last

    for _ in range(max_iterations):
        x = xh - gh * (xh - xl) / (gh - gl)

        lo, hi = (xl, xh) if xl < xh else (xh, xl)
        if not lo < x < hi:
            x = (xl + xh) / 2

        g = f(x) - y
        if math.isnan(g):
            raise ConvergenceError(f"Function returned NaN at x={x}")

        dx = x - x_prev
        converged = (
            g == 0
            or almost_zero(dx, ulps)
            or almost_equal(x, x_prev, ulps)
        )
        x_prev = x

        if converged:
            return x

        if g < 0:
            xl, gl = x, g
            if retained == -1:
                gh /= 2
            retained = -1
        else:
            xh, gh = x, g
            if retained == 1:
                gl /= 2
            retained = 1

        if almost_equal(xl, xh, ulps) or almost_zero(xh - xl, ulps):
            return x

    raise ConvergenceError(
        f"Bracketed root finding did not converge in "
        f"{max_iterations} iterations"
    )


def root_find(
    y: float,
    x0: float,
    f: Callable[[float], float],
    ulps: int = 2,
    max_iterations: int = 50
) -> float:
    """
    Find ``x`` near ``x0`` such that ``f(x) == y``.

    Secant iteration seeded with ``x0`` and a second point a relative
    ``sqrt(epsilon)`` away. No derivative is required, and no
    convergence guarantee is made if ``f`` is not well behaved near
    ``x0``. Prefer :func:`root_find_bracketed` when a bracket is known.

    Parameters
    ----------
    y : float
        Target ordinate.
    x0 : float
        Initial guess.
    f : Callable[[float], float]
        Function to invert.
    ulps : int, default=2
        Convergence tolerance on the step size, in units in the last
        place (or machine epsilons for steps near zero).
    max_iterations : int, default=50
        Iteration budget.

    Returns
    -------
    float
        The root.

    Raises
    ------
    ConvergenceError
        If the secant becomes flat, an iterate is not finite, or the
        iteration budget is exhausted.
    """
    g0 = f(x0) - y
    if g0 == 0:
        return x0

    x1 = x0 + _SECANT_STEP * max(abs(x0), 1.0)
    g1 = f(x1) - y

    for _ in range(max_iterations):
        if g1 == 0:
            return x1

        slope = g1 - g0
        if slope == 0:
            raise ConvergenceError(
                f"Secant is flat at x={x1}; cannot continue root search"
            )

        x2 = x1 - g1 * (x1 - x0) / slope
        if not math.isfinite(x2):
            raise ConvergenceError(
                f"Root finding diverged from initial guess {x0}"
            )

        if almost_zero(x2 - x1, ulps) or almost_equal(x2, x1, ulps):
            return x2

        x0, g0 = x1, g1
        x1, g1 = x2, f(x2) - y

    raise ConvergenceError(
        f"Root finding did not converge in {max_iterations} iterations "
        f"from initial guess {x0}"
    )
