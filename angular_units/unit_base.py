"""Unit family foundation for the angle types.

This module provides the Unit base class shared by every angle type. It
implements the unit family system using automatic ROOT class assignment,
plus a registry of concrete units keyed by their serialization tag.

A unit family groups the units that measure the same quantity. Values of the
same family can be converted into each other and combined, while a type from
outside the family (or a non-unit type) is rejected as a conversion target.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the root class of each family
- NAME: Serialization tag of a concrete unit, registered on class creation
- Automatic Assignment: ROOT classes are determined automatically via MRO

Classes:
    Unit: Base class for all unit types with family and registry management.

Example:
    >>> class Angle(Unit):
    ...     IS_FAMILY_ROOT = True  # ROOT for every angle unit
    >>> class Degrees(Angle):
    ...     NAME = "degrees"  # ROOT = Angle, registered as "degrees"
    >>> Unit.lookup("degrees") is Degrees
    True
"""

from __future__ import annotations

import logging
from typing import ClassVar

logger = logging.getLogger(__name__)


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        NAME (ClassVar[str]): Serialization tag, empty for abstract classes.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    NAME: ClassVar[str] = ""
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    _registry: ClassVar[dict[str, type[Unit]]] = {}

    def __init_subclass__(cls, **kwargs):
        """Set the ROOT class and register concrete units.

        The ROOT class is the first ancestor with IS_FAMILY_ROOT=True, or the
        class itself if it declares the flag. A class that defines its own
        NAME is registered under it.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.

        Raises:
            ValueError: If another class is already registered under NAME.
        """
        super().__init_subclass__(**kwargs)
        cls.ROOT = cls._find_root()

        name = cls.__dict__.get("NAME")
        if name:
            existing = Unit._registry.get(name)
            if existing is not None and existing is not cls:
                msg = f"Unit name {name!r} already registered by {existing.__name__}"
                raise ValueError(msg)
            Unit._registry[name] = cls
            logger.debug(f"Registered unit {cls.__name__} as {name!r}")

    @classmethod
    def _find_root(cls) -> type[Unit]:
        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            return cls
        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                return base
        return cls

    @classmethod
    def is_concrete(cls) -> bool:
        """Whether this class is a registered unit or a subclass of one.

        A subclass of a concrete unit inherits its NAME and serializes under
        it; family bases have no registered NAME and are abstract.
        """
        registered = Unit._registry.get(cls.NAME)
        return registered is not None and issubclass(cls, registered)

    @classmethod
    def _check_same_root(cls, unit_type: object):
        """Check that unit_type is a concrete unit of this class's family.

        Args:
            unit_type: The candidate target type.

        Raises:
            TypeError: If unit_type is not a unit class, belongs to another
                family, or is an abstract family base.
        """
        if not (isinstance(unit_type, type) and issubclass(unit_type, Unit)):
            msg = f"Expected a unit class, got {unit_type!r}"
            raise TypeError(msg)
        if cls.ROOT is not unit_type.ROOT:
            msg = f"Incompatible unit families: {cls.ROOT.__name__}, {unit_type.ROOT.__name__}"
            raise TypeError(msg)
        if not unit_type.is_concrete():
            msg = f"{unit_type.__name__} is not a concrete unit"
            raise TypeError(msg)

    @classmethod
    def lookup(cls, name: str) -> type[Unit]:
        """Return the registered unit class for a serialization tag.

        Args:
            name: Tag such as ``"degrees"``.

        Returns:
            type[Unit]: The registered class.

        Raises:
            ValueError: If no unit is registered under name, or the unit is
                outside this class's family.
        """
        if not isinstance(name, str):
            msg = f"Unit name must be a string, got {name!r}"
            raise ValueError(msg)
        unit_type = Unit._registry.get(name)
        if unit_type is None:
            known = ", ".join(sorted(Unit._registry))
            msg = f"Unknown unit {name!r} (known: {known})"
            raise ValueError(msg)
        if cls is not Unit and unit_type.ROOT is not cls.ROOT:
            msg = f"Unit {name!r} is not a {cls.ROOT.__name__} unit"
            raise ValueError(msg)
        return unit_type

    @classmethod
    def registered(cls) -> dict[str, type[Unit]]:
        """Return the registered units of this family keyed by tag."""
        return {
            name: unit_type
            for name, unit_type in Unit._registry.items()
            if cls is Unit or unit_type.ROOT is cls.ROOT
        }
