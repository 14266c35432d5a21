"""
Tests for interpolation between angles.
"""

import math
import unittest

from angular_units import Deg, Degrees, Radians, Turns


class TestInterpolate(unittest.TestCase):
    """Test shortest-arc interpolation."""

    def test_plain_blend(self):
        """Test angles close together blend linearly."""
        self.assertEqual(Degrees(60).interpolate(Degrees(120), 0.5), Degrees(90))
        self.assertEqual(Degrees(60).interpolate(Degrees(120), 0.25), Degrees(75))

    def test_midpoint_default(self):
        """Test the unweighted midpoint."""
        self.assertEqual(Deg(240).interpolate(Deg(180)), Deg(210))

    def test_mixed_units(self):
        """Test the end angle may use another unit."""
        result = Degrees(50).interpolate(Radians(math.pi), 0.75)
        self.assertIsInstance(result, Degrees)
        self.assertAlmostEqual(result.value, 147.5)
        self.assertAlmostEqual(Turns(0.50).interpolate(Degrees(30), 0.25).value, 0.39583333333)

    def test_across_zero(self):
        """Test angles straddling zero pass through it, not through 180."""
        self.assertEqual(Deg(350).interpolate(Deg(10), 0.5), Deg(0))
        self.assertEqual(Deg(350).interpolate(Deg(10), 0.25), Deg(355))
        self.assertEqual(Deg(350).interpolate(Deg(10), 0.75), Deg(5))
        self.assertEqual(Deg(10).interpolate(Deg(350), 0.5), Deg(0))
        self.assertEqual(Deg(10).interpolate(Deg(350), 0.25), Deg(5))

    def test_backward_shorter(self):
        """Test a backward path is taken when it is shorter."""
        result = Degrees(100).interpolate(Degrees(310), 0.5)
        self.assertAlmostEqual(result.normalize().value, 25.0)

    def test_endpoints(self):
        """Test t=0 gives the start and t=1 gives the end."""
        start, end = Degrees(30.5), Degrees(100.25)
        self.assertEqual(start.interpolate(end, 0), start)
        self.assertEqual(start.interpolate(end, 1), end)

    def test_endpoints_across_zero(self):
        """Test endpoints when the arc crosses the wrap boundary."""
        start, end = Degrees(350), Degrees(10)
        self.assertAlmostEqual(start.interpolate(end, 0).value, 350.0)
        self.assertAlmostEqual(start.interpolate(end, 1).value, 10.0)

    def test_endpoints_unnormalized(self):
        """Test endpoints when the start lies outside one turn."""
        start, end = Degrees(700), Degrees(10)
        self.assertAlmostEqual(start.interpolate(end, 0).value, 700.0)
        self.assertAlmostEqual(start.interpolate(end, 1).normalize().value, 10.0)
        self.assertAlmostEqual(start.interpolate(end, 0.5).normalize().value, 355.0)

    def test_half_turn_tie(self):
        """Test angles exactly half a turn apart blend directly."""
        self.assertEqual(Degrees(0).interpolate(Degrees(180)), Degrees(90))
        self.assertEqual(Degrees(180).interpolate(Degrees(0)), Degrees(90))

    def test_radians_across_zero(self):
        """Test the midpoint of two radian angles near zero."""
        result = Radians(math.tau - 0.1).interpolate(Radians(0.1))
        self.assertTrue(result.is_normalized())
        self.assertAlmostEqual(result.delta_to(Radians(0)).value, 0.0)

    def test_non_angle(self):
        """Test interpolating towards a bare number is rejected."""
        with self.assertRaises(TypeError):
            Degrees(10).interpolate(20)


class TestInterpolateForward(unittest.TestCase):
    """Test direct interpolation without the wrap shortcut."""

    def test_forward(self):
        """Test the raw scalars are blended."""
        result = Degrees(100).interpolate_forward(Degrees(310), 0.5)
        self.assertEqual(result.normalize(), Degrees(205))
        self.assertEqual(Deg(350).interpolate_forward(Deg(10)), Deg(180))

    def test_mixed_units(self):
        """Test the end angle may use another unit."""
        self.assertAlmostEqual(Degrees(0).interpolate_forward(Turns(0.5), 0.5).value, 90.0)


if __name__ == '__main__':
    unittest.main()
