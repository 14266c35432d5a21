"""Type-safe angular quantities with lossless unit conversion.

This package provides one wrapper type per angular unit. Each value holds a
single scalar in its own unit, converts to any other unit through the
fraction of a full turn, and supports arithmetic that mixes units safely.

Architecture:
    The package is organized into small modules:

    - unit_base: Unit class with family management and the unit-tag registry
    - scalar: Numeric helpers so angles can wrap numbers or NumPy arrays
    - unit_angle: The Angle family and its six concrete units
    - serialize: JSON interchange built on the structural dict form
    - config: Scalar type alias and default tolerances

Key Features:
    - Lossless Conversion: A value keeps its own unit; converting to the same
      unit is an exact identity
    - Mixed Arithmetic: ``Degrees(50) + Radians(pi / 6)`` is ``Degrees(80)``
    - No Silent Comparison: Ordering angles of different units is an error
    - Normalization: Wrap any value into ``[0, full turn)``
    - Shortest-Arc Interpolation: Blends through the wrap boundary when shorter
    - Generic Scalars: ``int``, ``float``, ``Fraction``, NumPy scalars and arrays

Available Units:
    - Radians (``Rad``): 2π per turn, the canonical unit
    - Degrees (``Deg``): 360 per turn
    - Gradians (``Grad``): 400 per turn
    - Turns: 1 per turn
    - ArcMinutes: 21600 per turn
    - ArcSeconds: 1296000 per turn

Example:
    >>> from math import pi
    >>> from angular_units import Deg, Rad, Turns
    >>>
    >>> heading = Deg(350)
    >>> heading.interpolate(Deg(10))  # through north, not through south
    Degrees(0.0)
    >>> Turns(0.25).into_angle(Deg)
    Degrees(90.0)
    >>> (Deg(-10)).normalize()
    Degrees(350)
"""

import logging

from .serialize import from_json, to_json
from .unit_angle import Angle, ArcMinutes, ArcSeconds, Degrees, Gradians, Radians, Turns
from .unit_base import Unit

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Short aliases
Deg = Degrees
Rad = Radians
Grad = Gradians

# Define public API
__all__ = [
    # Base classes
    "Unit",
    "Angle",
    # Angular units
    "Radians",
    "Degrees",
    "Gradians",
    "Turns",
    "ArcMinutes",
    "ArcSeconds",
    "Deg",
    "Rad",
    "Grad",
    # Serialization
    "to_json",
    "from_json",
]
