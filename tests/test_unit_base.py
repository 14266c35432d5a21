"""
Tests for unit families and the unit registry.
"""

import unittest

from angular_units import Angle, Degrees, Gradians, Turns, Unit


class Length(Unit):
    IS_FAMILY_ROOT = True


class Meter(Length):
    NAME = "test-meters"
    SYMBOL = "m"


class HeadingDegrees(Degrees):
    __slots__ = ()


ANGLE_NAMES = {"degrees", "radians", "gradians", "turns", "arcminutes", "arcseconds"}


class TestFamily(unittest.TestCase):
    """Test ROOT assignment."""

    def test_root(self):
        """Test every angle unit shares the Angle root."""
        self.assertIs(Angle.ROOT, Angle)
        self.assertIs(Degrees.ROOT, Angle)
        self.assertIs(Meter.ROOT, Length)

    def test_concrete(self):
        """Test registered units are concrete and family bases are not."""
        self.assertTrue(Degrees.is_concrete())
        self.assertFalse(Angle.is_concrete())
        self.assertFalse(Length.is_concrete())

    def test_concrete_subclass(self):
        """Test a subclass of a registered unit behaves as that unit."""
        self.assertTrue(HeadingDegrees.is_concrete())
        heading = HeadingDegrees(90)
        self.assertAlmostEqual(heading.into_angle(Turns).value, 0.25)
        self.assertAlmostEqual(Turns(0.5).into_angle(HeadingDegrees).value, 180.0)
        self.assertEqual(heading.to_dict()["unit"], "degrees")

    def test_cross_family_conversion(self):
        """Test converting an angle into another family fails."""
        with self.assertRaises(TypeError):
            Degrees(1).to(Meter)


class TestRegistry(unittest.TestCase):
    """Test the unit tag registry."""

    def test_lookup(self):
        """Test looking up units by tag."""
        self.assertIs(Unit.lookup("degrees"), Degrees)
        self.assertIs(Angle.lookup("gradians"), Gradians)
        self.assertIs(Unit.lookup("test-meters"), Meter)

    def test_lookup_unknown(self):
        """Test unknown tags and tags of another family."""
        with self.assertRaises(ValueError):
            Unit.lookup("furlongs")
        with self.assertRaises(ValueError):
            Angle.lookup("test-meters")

    def test_registered(self):
        """Test listing the units of a family."""
        angle_units = Angle.registered()
        self.assertTrue(ANGLE_NAMES <= set(angle_units))
        self.assertNotIn("test-meters", angle_units)

    def test_duplicate_name(self):
        """Test two units cannot share a tag."""
        with self.assertRaises(ValueError):
            class Duplicate(Angle):
                __slots__ = ()
                NAME = "degrees"
                PERIOD = 360

    def test_new_unit(self):
        """Test a new angle unit registers, logs, and converts."""
        with self.assertLogs("angular_units.unit_base", level="DEBUG") as logs:
            class Sextants(Angle):
                __slots__ = ()
                NAME = "test-sextants"
                SYMBOL = "sxt"
                PERIOD = 6

        self.assertIn("test-sextants", logs.output[0])
        self.assertIs(Angle.lookup("test-sextants"), Sextants)
        self.assertAlmostEqual(Sextants(1).into_angle(Degrees).value, 60.0)


if __name__ == '__main__':
    unittest.main()
