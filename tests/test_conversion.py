import sys
import unittest

from exactrational import OutOfRangeWarning, Rational, RoundingMode
from exactrational.conversion import (
    ratio_to_float,
    round_half_down,
    round_half_even,
    round_half_up,
    round_ratio,
    simplest_between,
)


class FloatConversionTests(unittest.TestCase):
    def test_small_values(self):
        self.assertEqual(float(Rational(1, 2)), 0.5)
        self.assertEqual(float(Rational(-3, 4)), -0.75)
        self.assertEqual(float(Rational(0)), 0.0)
        self.assertEqual(Rational(1, 3).to_float(), 1 / 3)

    def test_wide_components_stay_in_range(self):
        value = Rational(2**5000 + 1, 2**4990)
        self.assertEqual(float(value), 1024.0)
        self.assertEqual(ratio_to_float(3 * 2**2000, 2**2000), 3.0)

    def test_overflow_saturates_with_warning(self):
        with self.assertWarns(OutOfRangeWarning):
            result = float(Rational(2**5000))
        self.assertEqual(result, sys.float_info.max)
        with self.assertWarns(OutOfRangeWarning):
            result = float(Rational(-(2**5000)))
        self.assertEqual(result, -sys.float_info.max)

    def test_underflow_saturates_with_warning(self):
        with self.assertWarns(OutOfRangeWarning):
            result = float(Rational(1, 2**5000))
        self.assertEqual(result, 0.0)

    def test_out_of_range_warning_is_runtime_warning(self):
        self.assertTrue(issubclass(OutOfRangeWarning, RuntimeWarning))


class RoundingTests(unittest.TestCase):
    def test_half_up(self):
        self.assertEqual(round_half_up(5, 2), 3)
        self.assertEqual(round_half_up(-5, 2), -3)
        self.assertEqual(round_half_up(4, 3), 1)

    def test_half_down(self):
        self.assertEqual(round_half_down(5, 2), 2)
        self.assertEqual(round_half_down(-5, 2), -2)
        self.assertEqual(round_half_down(7, 4), 2)

    def test_half_even(self):
        self.assertEqual(round_half_even(5, 2), 2)
        self.assertEqual(round_half_even(7, 2), 4)
        self.assertEqual(round_half_even(-7, 2), -4)
        self.assertEqual(round_half_even(1, 3), 0)

    def test_round_ratio_modes(self):
        self.assertEqual(round_ratio(-7, 2, RoundingMode.FLOOR), -4)
        self.assertEqual(round_ratio(-7, 2, RoundingMode.CEILING), -3)
        self.assertEqual(round_ratio(7, 2), 4)
        self.assertEqual(round_ratio(7, 2, "half_even"), 4)
        self.assertEqual(round_ratio(5, 1, RoundingMode.UNNECESSARY), 5)
        with self.assertRaises(ValueError):
            round_ratio(5, 2, RoundingMode.UNNECESSARY)

    def test_mode_coercion(self):
        self.assertIs(RoundingMode.coerce(None), RoundingMode.HALF_UP)
        self.assertIs(RoundingMode.coerce("even"), RoundingMode.HALF_EVEN)
        self.assertIs(RoundingMode.coerce(" Half_Down "), RoundingMode.HALF_DOWN)
        self.assertIs(RoundingMode.coerce("ceil"), RoundingMode.CEILING)
        with self.assertRaises(ValueError):
            RoundingMode.coerce("sideways")
        with self.assertRaises(TypeError):
            RoundingMode.coerce(1)

    def test_rational_round_unnecessary(self):
        self.assertEqual(Rational(4, 2).round(mode=RoundingMode.UNNECESSARY), 2)
        with self.assertRaises(ValueError):
            Rational(1, 2).round(mode=RoundingMode.UNNECESSARY)


class SimplestBetweenTests(unittest.TestCase):
    def test_picks_smallest_denominator(self):
        self.assertEqual(simplest_between(29, 100, 31, 100), (3, 10))
        self.assertEqual(simplest_between(323, 1000, 343, 1000), (1, 3))

    def test_integer_inside_interval(self):
        self.assertEqual(simplest_between(2, 5, 12, 5), (1, 1))
        self.assertEqual(simplest_between(-1, 10, 1, 10), (0, 1))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
