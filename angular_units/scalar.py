"""Numeric scalar helpers shared by every angle type.

An angle wraps one scalar, which may be a Python number, a NumPy scalar of a
fixed precision, or a NumPy array of many values in the same unit. The
helpers below let the angle code stay agnostic of which one it holds:

- as_scalar: validate a raw value and freeze arrays
- cast_like: express a unit constant in the precision of a scalar
- floor_mod: mathematical modulo that never returns the modulus itself
- select: elementwise conditional for scalars and arrays alike
- floor: round down for Python numbers and NumPy values
- to_builtin: convert a scalar into plain Python data for serialization
"""

from __future__ import annotations

import math
import numbers
from fractions import Fraction

import numpy as np

from .config import BASE_TYPE


def as_scalar(value) -> BASE_TYPE:
    """Validate a raw angle value.

    Args:
        value: Real number, NumPy scalar, NumPy array, or list/tuple of numbers.

    Returns:
        The value itself for real numbers, or a read-only array copy.

    Raises:
        TypeError: If value is not a real number or numeric array.
    """
    if isinstance(value, (list, tuple)):
        try:
            value = np.asarray(value, dtype=float)
        except (ValueError, TypeError) as e:
            msg = f"Angle sequences must hold real numbers, got {value!r}"
            raise TypeError(msg) from e
    if isinstance(value, np.ndarray):
        if not (np.issubdtype(value.dtype, np.integer) or np.issubdtype(value.dtype, np.floating)):
            msg = f"Angle arrays must hold real numbers, got dtype {value.dtype}"
            raise TypeError(msg)
        frozen = value.copy()
        frozen.flags.writeable = False
        return frozen
    if isinstance(value, numbers.Real):
        return value
    msg = f"Angle value must be a real number or numeric array, got {type(value).__name__}"
    raise TypeError(msg)


def is_scalar(value) -> bool:
    """Whether value can scale an angle (multiply or divide it)."""
    return isinstance(value, (numbers.Real, np.ndarray))


def cast_like(constant, like):
    """Express constant in the floating precision of like.

    NumPy floating scalars and arrays keep their dtype (a ``float32`` angle
    stays ``float32``); anything else gets the constant unchanged.
    """
    dtype = getattr(like, "dtype", None)
    if dtype is not None and np.issubdtype(dtype, np.floating):
        return dtype.type(constant)
    return constant


def select(condition, if_true, if_false):
    """Pick between two values, elementwise when condition is an array."""
    if isinstance(condition, np.ndarray):
        return np.where(condition, if_true, if_false)
    return if_true if condition else if_false


def floor_mod(value, modulus):
    """Mathematical modulo mapping value into [0, modulus).

    Python's ``%`` and ``np.remainder`` already take the sign of the divisor,
    but a tiny negative float rounds up to exactly ``modulus``; that case is
    folded back to zero.
    """
    result = value % modulus
    return select(result >= modulus, result - modulus, result)


def to_builtin(value):
    """Convert a scalar into plain Python data.

    Arrays become nested lists and NumPy scalars become Python numbers.
    Fractions are kept exact; JSON encoding turns them into floats.
    """
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, Fraction):
        return value
    return float(value)


def floor(value):
    """Round down to a whole number, elementwise for NumPy values."""
    if isinstance(value, (np.ndarray, np.generic)):
        return np.floor(value)
    return math.floor(value)
