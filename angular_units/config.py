"""Package-wide numeric configuration for angular_units.

This module centralizes the scalar type alias and the default tolerances
used throughout the angle types, so that every module agrees on what counts
as a valid scalar and how close two angles must be to compare as equal.

Type Definitions:
    BASE_TYPE: Union type of scalars an angle can wrap. Python numbers cover
               the common case, NumPy scalars keep a fixed precision such as
               ``float32``, and NumPy arrays hold many angles of one unit at
               once for vectorized work.

Constants:
    DEFAULT_REL_TOL: Relative tolerance used by ``Angle.isclose``.
    DEFAULT_ABS_TOL: Absolute tolerance used by ``Angle.isclose``.
    DEFAULT_INTERPOLATION_POSITION: Blend position used when ``interpolate``
        is called without one (the unweighted midpoint).

Example:
    >>> from angular_units.config import BASE_TYPE
    >>> import numpy as np
    >>> scalar_int: BASE_TYPE = 90
    >>> scalar_f32: BASE_TYPE = np.float32(1.5)
    >>> headings: BASE_TYPE = np.array([0.0, 90.0, 180.0])
"""

from fractions import Fraction

from numpy import floating, integer, ndarray

BASE_TYPE = int | float | Fraction | integer | floating | ndarray

DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 1e-12

DEFAULT_INTERPOLATION_POSITION = 0.5
