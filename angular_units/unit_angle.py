"""Angular unit definitions with lossless conversion and wrap-aware arithmetic.

This module provides the Angle family root and its six concrete units. Each
angle wraps exactly one scalar in its own unit: a Degrees value stores
degrees, a Radians value stores radians. Nothing is rescaled on construction,
so converting a value to its own unit is an exact identity and each unit
keeps the full precision of its scalar type.

Conversion between units goes through the fraction of a full turn: the
scalar is divided by the source unit's full turn and multiplied by the
target's. One rule covers every pair of units, and radians serve as the
canonical pivot for trigonometry and for ``from_radians``.

Classes:
    Angle: Family root holding the scalar and all shared behaviour.
    Radians: Canonical unit, 2π per turn.
    Degrees: 360 per turn, with degree/minute/second decomposition.
    Gradians: 400 per turn.
    Turns: 1 per turn.
    ArcMinutes: 21600 per turn (1/60 degree).
    ArcSeconds: 1296000 per turn (1/60 arc minute).

Arithmetic:
    Addition and subtraction take two angles in any units; the right operand
    is converted into the left one's unit and the result keeps the left type.
    Multiplication and division are between an angle and a scalar.

Normalization:
    Operations do not normalize automatically. ``normalize()`` maps a value
    into ``[0, full turn)``. Ordering comparisons look at raw scalars of a
    single unit, so 350° and -10° compare as different values until both are
    normalized.

Example:
    >>> from math import pi
    >>> angle = Degrees(50) + Radians(pi / 6)
    >>> round(angle.value, 9)
    80.0
    >>> Degrees(350).interpolate(Degrees(10))
    Degrees(0.0)
    >>> Degrees(-90).normalize()
    Degrees(270)
"""

from __future__ import annotations

import math
from typing import ClassVar, TypeVar

import numpy as np

from .config import BASE_TYPE, DEFAULT_ABS_TOL, DEFAULT_INTERPOLATION_POSITION, DEFAULT_REL_TOL
from .scalar import as_scalar, cast_like, floor, floor_mod, is_scalar, select, to_builtin
from .unit_base import Unit

A = TypeVar("A", bound="Angle")


class Angle(Unit):
    """Base class of all angle units.

    An Angle is an immutable wrapper around one scalar. The scalar has no
    unit of its own; the concrete subclass records it. Angles cannot be
    instantiated from this class directly, only from a concrete unit.

    Attributes:
        IS_FAMILY_ROOT (bool): True, every angle unit shares this family.
        PERIOD (ClassVar): Scalar value of one full rotation in the unit.
    """

    __slots__ = ("_value",)
    __array_ufunc__ = None
    __array_priority__ = 1000

    IS_FAMILY_ROOT = True
    PERIOD: ClassVar[int | float]

    def __init__(self, value: BASE_TYPE | Angle):
        """Create an angle from a raw scalar or from another angle.

        Args:
            value: Scalar in this unit, or an angle of any unit which is
                converted into this one.

        Raises:
            TypeError: If called on the abstract family class, or value is
                not a real number, numeric array or angle.
        """
        if not type(self).is_concrete():
            msg = f"{type(self).__name__} is abstract; construct a concrete unit such as Degrees"
            raise TypeError(msg)
        if isinstance(value, Angle):
            value = value.to(type(self))
        object.__setattr__(self, "_value", as_scalar(value))

    @property
    def value(self) -> BASE_TYPE:
        """The raw scalar, in this angle's unit."""
        return self._value

    def __setattr__(self, name, value):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self):
        return type(self), (self._value,)

    # -------------------------------- Conversion --------------------------------
    def to(self, unit_type: type[Angle]) -> BASE_TYPE:
        """Convert to another angle unit, returning only the scalar.

        The value is turned into a fraction of a full turn and scaled by the
        target's full turn. Converting to the own unit returns the scalar
        unchanged.

        Args:
            unit_type: Concrete target angle class.

        Returns:
            The scalar expressed in the target unit.

        Raises:
            TypeError: If unit_type is not a concrete angle class.
        """
        self._check_same_root(unit_type)
        value = self._value
        if unit_type is type(self):
            return value
        fraction = value / cast_like(type(self).PERIOD, value)
        return fraction * cast_like(unit_type.PERIOD, value)

    def into_angle(self, unit_type: type[A]) -> A:
        """Convert to another angle unit.

        Args:
            unit_type: Concrete target angle class.

        Returns:
            An instance of unit_type representing the same rotation. When
            unit_type is this angle's own class, the angle itself.

        Raises:
            TypeError: If unit_type is not a concrete angle class.

        Example:
            >>> Turns(0.25).into_angle(Degrees)
            Degrees(90.0)
        """
        if unit_type is type(self):
            return self
        return unit_type(self.to(unit_type))

    as_unit = into_angle

    def to_radians(self) -> BASE_TYPE:
        """Return the scalar converted to the canonical unit."""
        return self.to(Radians)

    @classmethod
    def from_radians(cls: type[A], radians: BASE_TYPE) -> A:
        """Create an angle of this unit from a value in radians."""
        return cls(Radians(radians))

    def _coerce(self, other: Angle) -> BASE_TYPE:
        if not isinstance(other, Angle):
            msg = f"Expected an angle, got {type(other).__name__}"
            raise TypeError(msg)
        return other.to(type(self))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: Angle) -> Angle:
        """Add an angle of any unit, keeping this angle's unit.

        Args:
            other: Angle to add, converted into this unit first.

        Returns:
            Angle: Sum in this angle's unit.
        """
        if not isinstance(other, Angle):
            return NotImplemented
        return type(self)(self._value + other.to(type(self)))

    def __sub__(self, other: Angle) -> Angle:
        """Subtract an angle of any unit, keeping this angle's unit.

        Args:
            other: Angle to subtract, converted into this unit first.

        Returns:
            Angle: Difference in this angle's unit.
        """
        if not isinstance(other, Angle):
            return NotImplemented
        return type(self)(self._value - other.to(type(self)))

    def __mul__(self, k: BASE_TYPE) -> Angle:
        """Scale the angle by a unitless factor."""
        if isinstance(k, Angle) or not is_scalar(k):
            return NotImplemented
        return type(self)(self._value * k)

    __rmul__ = __mul__

    def __truediv__(self, k: BASE_TYPE) -> Angle:
        """Divide the angle by a unitless factor."""
        if isinstance(k, Angle) or not is_scalar(k):
            return NotImplemented
        return type(self)(self._value / k)

    def __mod__(self, other: Angle) -> Angle:
        """Remainder after dividing by another angle (floor semantics)."""
        if not isinstance(other, Angle):
            return NotImplemented
        return type(self)(self._value % other.to(type(self)))

    def __neg__(self) -> Angle:
        return type(self)(-self._value)

    def __pos__(self) -> Angle:
        return self

    def __abs__(self) -> Angle:
        return type(self)(abs(self._value))

    # -------------------------------- Comparison --------------------------------
    def __eq__(self, other):
        """Compare scalars of two angles of the same unit.

        Angles of different units never compare equal; convert one of them
        first, or use ``isclose`` which converts for you. For array angles
        the result is elementwise.
        """
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash((type(self), self._value))

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._value >= other._value

    def isclose(self, other: Angle, rel_tol: float = DEFAULT_REL_TOL, abs_tol: float = DEFAULT_ABS_TOL):
        """Tolerant equality against an angle of any unit.

        The other angle is converted into this unit before comparing raw
        scalars; no normalization is applied.

        Args:
            other: Angle to compare with.
            rel_tol: Relative tolerance.
            abs_tol: Absolute tolerance, in this angle's unit.

        Returns:
            bool, or a boolean array for array angles.

        Raises:
            TypeError: If other is not an angle.
        """
        other_value = self._coerce(other)
        if isinstance(self._value, np.ndarray) or isinstance(other_value, np.ndarray):
            return np.isclose(self._value, other_value, rtol=rel_tol, atol=abs_tol)
        return math.isclose(self._value, other_value, rel_tol=rel_tol, abs_tol=abs_tol)

    # -------------------------------- Normalization --------------------------------
    def is_normalized(self):
        """Whether the angle lies in ``[0, full turn)``."""
        value = self._value
        return (value >= 0) & (value < cast_like(type(self).PERIOD, value))

    def normalize(self) -> Angle:
        """Wrap the angle into the standard domain ``[0, full turn)``.

        Uses mathematical (floor) modulo, so negative values wrap up from the
        top of the range: ``Degrees(-1)`` becomes ``Degrees(359)``.
        Normalizing an already normalized angle leaves it unchanged.

        Returns:
            Angle: Equivalent angle of the same unit in the standard domain.
        """
        value = self._value
        return type(self)(floor_mod(value, cast_like(type(self).PERIOD, value)))

    def delta_to(self, other: Angle) -> Angle:
        """Signed shortest rotation from this angle to another.

        Args:
            other: Target angle of any unit.

        Returns:
            Angle: Rotation in this unit within ``(-half turn, half turn]``.
                Adding it to this angle reaches other modulo a full turn.
        """
        start = self._value
        period = cast_like(type(self).PERIOD, start)
        delta = floor_mod(self._coerce(other) - start, period)
        return type(self)(select(delta > period / 2, delta - period, delta))

    # -------------------------------- Interpolation --------------------------------
    def interpolate(self, other: Angle, t: BASE_TYPE = DEFAULT_INTERPOLATION_POSITION) -> Angle:
        """Linear interpolation along the shorter arc between two angles.

        When the two angles are at most half a turn apart, the result is the
        plain blend ``self * (1 - t) + other * t`` and is not normalized. When
        they are further apart, the shorter arc crosses the wrap boundary and
        the result walks along it from self. If self is normalized the result
        is folded back into the standard domain; otherwise it is left
        unrolled, so ``t=0`` always returns self and ``t=1`` returns other
        modulo a full turn. At exactly half a turn apart the plain blend is
        used.

        Args:
            other: End angle, in any unit.
            t: Blend position, 0 gives self and 1 gives other. Defaults to
                the midpoint.

        Returns:
            Angle: Interpolated angle in this angle's unit.

        Example:
            >>> Degrees(240).interpolate(Degrees(180))
            Degrees(210.0)
            >>> Degrees(350).interpolate(Degrees(10), 0.25)
            Degrees(355.0)
        """
        start = self._value
        end = self._coerce(other)
        period = cast_like(type(self).PERIOD, start)

        direct = end - start
        wraps = abs(direct) > period / 2
        shortest = floor_mod(direct, period)
        shortest = select(shortest > period / 2, shortest - period, shortest)

        # walk the minor arc from start; fold back only if start was in range
        unrolled = start + shortest * t
        unrolled = select(self.is_normalized(), floor_mod(unrolled, period), unrolled)

        blended = start * (1 - t) + end * t
        return type(self)(select(wraps, unrolled, blended))

    def interpolate_forward(self, other: Angle, t: BASE_TYPE = DEFAULT_INTERPOLATION_POSITION) -> Angle:
        """Plain linear blend of the raw scalars.

        Unlike ``interpolate`` this never takes the shortcut across the wrap
        boundary, even if it is the shorter path. The output stays normalized
        when both inputs are.

        Args:
            other: End angle, in any unit.
            t: Blend position, 0 gives self and 1 gives other.

        Returns:
            Angle: Interpolated angle in this angle's unit.
        """
        end = self._coerce(other)
        return type(self)(self._value * (1 - t) + end * t)

    # -------------------------------- Constants --------------------------------
    @classmethod
    def full_turn(cls: type[A]) -> A:
        """One full rotation in this unit."""
        return cls(cls.PERIOD)

    @classmethod
    def half_turn(cls: type[A]) -> A:
        return cls(cls.PERIOD / 2)

    @classmethod
    def quarter_turn(cls: type[A]) -> A:
        return cls(cls.PERIOD / 4)

    @classmethod
    def zero(cls: type[A]) -> A:
        return cls(0)

    def invert(self) -> Angle:
        """Return the opposite direction, half a turn away.

        The result is not normalized: ``Degrees(270).invert()`` is
        ``Degrees(450.0)``.
        """
        return self + type(self).half_turn()

    # -------------------------------- Trigonometry --------------------------------
    def sin(self):
        return np.sin(self.to_radians())

    def cos(self):
        return np.cos(self.to_radians())

    def tan(self):
        return np.tan(self.to_radians())

    def sin_cos(self) -> tuple:
        """Compute sine and cosine together."""
        radians = self.to_radians()
        return np.sin(radians), np.cos(radians)

    @classmethod
    def asin(cls: type[A], value: BASE_TYPE) -> A:
        return cls.from_radians(np.arcsin(value))

    @classmethod
    def acos(cls: type[A], value: BASE_TYPE) -> A:
        return cls.from_radians(np.arccos(value))

    @classmethod
    def atan(cls: type[A], value: BASE_TYPE) -> A:
        return cls.from_radians(np.arctan(value))

    @classmethod
    def atan2(cls: type[A], y: BASE_TYPE, x: BASE_TYPE) -> A:
        """Angle of the point (x, y), using both signs to pick the quadrant."""
        return cls.from_radians(np.arctan2(y, x))

    # -------------------------------- Serialization --------------------------------
    def to_dict(self) -> dict:
        """Structural form of the angle: its unit tag and plain scalar.

        Returns:
            dict: ``{"unit": <tag>, "value": <number or nested list>}``.
        """
        return {"unit": type(self).NAME, "value": to_builtin(self._value)}

    @classmethod
    def from_dict(cls, data: dict) -> Angle:
        """Rebuild an angle from its structural form.

        Called on the family class, the result has the unit recorded in data.
        Called on a concrete unit, the decoded angle is converted into it.

        Args:
            data: Mapping with ``"unit"`` and ``"value"`` keys.

        Returns:
            Angle: The decoded angle.

        Raises:
            ValueError: If keys are missing, the unit tag is unknown or not a
                string, or the value is not a real number or numeric array.
        """
        try:
            name = data["unit"]
            value = data["value"]
        except (KeyError, TypeError) as e:
            msg = f"Angle data must be a mapping with 'unit' and 'value', got {data!r}"
            raise ValueError(msg) from e
        try:
            unit_type = cls.lookup(name)
            angle = unit_type(value)
        except TypeError as e:
            msg = f"Invalid angle data {data!r}: {e}"
            raise ValueError(msg) from e
        if cls.is_concrete():
            return angle.into_angle(cls)
        return angle

    # -------------------------------- Display --------------------------------
    def __str__(self) -> str:
        """Return value and symbol in the unit's own scale (e.g., "90 °")."""
        return f"{self._value} {type(self).SYMBOL}".strip()

    def __format__(self, format_spec: str) -> str:
        """Apply format_spec to the value; for arrays, to each element."""
        if not format_spec:
            return str(self)
        if isinstance(self._value, np.ndarray):
            text = np.array2string(self._value, formatter={"all": lambda x: format(x, format_spec)})
        else:
            text = format(self._value, format_spec)
        return f"{text} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class Radians(Angle):
    """Angular unit: Radian, the canonical unit for angles.

    One radian is the angle subtended by an arc equal in length to the
    radius. Radians are uniquely defined in ``[0, 2π)`` and are the pivot
    used for trigonometry.

    Example:
        >>> Radians(math.pi).into_angle(Degrees)
        Degrees(180.0)
    """

    __slots__ = ()
    NAME = "radians"
    SYMBOL = "rad"
    PERIOD = math.tau


class Degrees(Angle):
    """Angular unit: Degree (1/360 of a full rotation).

    Degrees are uniquely defined in ``[0, 360)``. This unit can also be
    split into and assembled from degrees, arc minutes and arc seconds.

    Example:
        >>> Degrees(90).into_angle(Turns)
        Turns(0.25)
    """

    __slots__ = ()
    NAME = "degrees"
    SYMBOL = "°"
    PERIOD = 360

    @classmethod
    def from_components(cls, degrees, minutes, seconds) -> Degrees:
        """Assemble an angle from degrees, arc minutes and arc seconds.

        The opposite of ``decompose``. Each component may be a raw scalar in
        its own unit or an angle.

        Example:
            >>> Degrees.from_components(50, 30, 0).isclose(Degrees(50.5))
            True
        """
        return cls(degrees) + ArcMinutes(minutes) + ArcSeconds(seconds)

    def decompose(self) -> tuple[Degrees, ArcMinutes, ArcSeconds]:
        """Split into whole degrees, whole arc minutes and arc seconds.

        Degrees and minutes are floored; any remainder is left as a
        fractional number of seconds.

        Returns:
            tuple: ``(Degrees, ArcMinutes, ArcSeconds)`` summing to self.
        """
        degrees = floor(self._value)
        minutes_total = (self._value - degrees) * 60
        minutes = floor(minutes_total)
        seconds = (minutes_total - minutes) * 60
        return Degrees(degrees), ArcMinutes(minutes), ArcSeconds(seconds)


class Gradians(Angle):
    """Angular unit: Gradian (1/400 of a full rotation), also known as gon.

    A right angle is exactly 100 gradians.
    """

    __slots__ = ()
    NAME = "gradians"
    SYMBOL = "grad"
    PERIOD = 400


class Turns(Angle):
    """Angular unit: Turn, one full rotation.

    Turns are uniquely defined in ``[0, 1)``.
    """

    __slots__ = ()
    NAME = "turns"
    SYMBOL = "tr"
    PERIOD = 1


class ArcMinutes(Angle):
    """Angular unit: Arc minute (1/60 of a degree)."""

    __slots__ = ()
    NAME = "arcminutes"
    SYMBOL = "'"
    PERIOD = 360 * 60


class ArcSeconds(Angle):
    """Angular unit: Arc second (1/60 of an arc minute)."""

    __slots__ = ()
    NAME = "arcseconds"
    SYMBOL = '"'
    PERIOD = 360 * 3600
