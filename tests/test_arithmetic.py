import math
import sys
import unittest

from exactrational.arithmetic import add_sub, compare_pairs, imul, mul_div, power_pair


class ArithmeticKernelTests(unittest.TestCase):
    def test_imul_shortcuts(self):
        self.assertEqual(imul(0, 12345), 0)
        self.assertEqual(imul(1, -7), -7)
        self.assertEqual(imul(-7, 1), -7)
        self.assertEqual(imul(6, 7), 42)

    def test_add_sub_returns_reduced_pairs(self):
        self.assertEqual(add_sub(1, 2, 1, 3), (5, 6))
        self.assertEqual(add_sub(1, 6, 1, 3), (1, 2))
        self.assertEqual(add_sub(1, 2, 1, 2, False), (0, 1))
        self.assertEqual(add_sub(1, 4, 3, 4, False), (-1, 2))

    def test_add_sub_over_grid(self):
        pairs = [(n, d) for n in range(-6, 7) for d in range(1, 7) if math.gcd(n, d) == 1]
        for an, ad in pairs:
            for bn, bd in pairs:
                for plus in (True, False):
                    num, den = add_sub(an, ad, bn, bd, plus)
                    expected = an * bd + bn * ad if plus else an * bd - bn * ad
                    self.assertGreater(den, 0)
                    self.assertEqual(math.gcd(num, den), 1)
                    self.assertEqual(num * ad * bd, expected * den)

    def test_mul_div(self):
        self.assertEqual(mul_div(2, 3, 3, 4), (1, 2))
        self.assertEqual(mul_div(2, 3, 3, 4, False), (8, 9))
        self.assertEqual(mul_div(1, 2, -1, 3, False), (-3, 2))
        self.assertEqual(mul_div(0, 1, 5, 7), (0, 1))
        with self.assertRaises(ZeroDivisionError):
            mul_div(1, 2, 0, 1, False)

    def test_compare_pairs(self):
        self.assertEqual(compare_pairs(1, 2, 1, 3), 1)
        self.assertEqual(compare_pairs(1, 3, 1, 2), -1)
        self.assertEqual(compare_pairs(2, 5, 2, 5), 0)
        self.assertEqual(compare_pairs(-1, 5, 1, 5), -1)

    def test_power_pair(self):
        self.assertEqual(power_pair(2, 3, 3), (8, 27))
        self.assertEqual(power_pair(2, 3, 0), (1, 1))
        self.assertEqual(power_pair(-2, 3, -1), (-3, 2))
        self.assertEqual(power_pair(-2, 3, -2), (9, 4))
        with self.assertRaises(ZeroDivisionError):
            power_pair(0, 1, -2)
        with self.assertRaises(ValueError):
            power_pair(2, 3, sys.maxsize + 1)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
