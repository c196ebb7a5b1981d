# -*- coding: utf-8 -*-
"""
orbmap Exception Hierarchy - Domain-specific exceptions for mapping operations.

Provides a small exception hierarchy that lets callers catch orbmap
errors distinctly from Python built-in exceptions. All orbmap exceptions
subclass both ``OrbmapError`` and the appropriate built-in exception for
backward compatibility.

Author
------
Steven Siebert

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


class OrbmapError(Exception):
    """Base exception for all orbmap errors."""


class ValidationError(OrbmapError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for out-of-range latitudes and longitudes, blank values that
    do not fit the map data type, inverted extrema, and other
    configuration failures detected before any mapping work starts.
    """


class RootFindingError(OrbmapError, ArithmeticError):
    """A root finder could not produce a result.

    Callers that only care whether a root was found catch this class;
    the subclasses distinguish why.
    """


class BracketError(RootFindingError):
    """The supplied bracket does not straddle the target value."""


class ConvergenceError(RootFindingError):
    """The iteration budget was exhausted or the iteration diverged."""


class DependencyError(OrbmapError, ImportError):
    """Missing optional dependency required for a specific module.

    Raised when a module requires an optional package (scipy) that is
    not installed.
    """
