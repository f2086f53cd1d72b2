import unittest
from fractions import Fraction
import numpy as np
from pycfrac import round_fraction, ContinuedFraction


class TestRoundFraction(unittest.TestCase):

    def assertWithinBound(self, result, precision):
        bound = 2**precision - 1
        self.assertLessEqual(abs(result.numerator), bound)
        self.assertLessEqual(result.denominator, bound)

    def test_large_integer(self):
        result = round_fraction(Fraction(1000000, 1), 8)
        self.assertWithinBound(result, 8)
        # a single partial quotient that does not fit leaves nothing
        self.assertEqual(result, Fraction(0))

    def test_truncates_to_convergent(self):
        self.assertEqual(round_fraction(Fraction(355, 113), 8), Fraction(22, 7))
        self.assertEqual(round_fraction(Fraction(-355, 113), 8), Fraction(-22, 7))
        self.assertEqual(round_fraction(Fraction(355, 113), 9), Fraction(355, 113))

    def test_fits_unchanged(self):
        self.assertEqual(round_fraction(Fraction(3, 4)), Fraction(3, 4))
        self.assertEqual(round_fraction(0), Fraction(0))

    def test_default_precision(self):
        self.assertEqual(round_fraction(Fraction(2**30 + 1, 2**30)), Fraction(1))
        self.assertEqual(round_fraction(Fraction(2**20 + 1, 2**20)), Fraction(2**20 + 1, 2**20))

    def test_precision_zero(self):
        self.assertEqual(round_fraction(Fraction(1, 2), 0), round_fraction(Fraction(1, 2), 1))
        self.assertEqual(round_fraction(Fraction(1), 0), Fraction(1))

    def test_negative_precision(self):
        with self.assertRaises(ValueError):
            round_fraction(Fraction(1, 2), -1)

    def test_continued_fraction_input(self):
        cf = ContinuedFraction(Fraction(355, 113))
        self.assertEqual(round_fraction(cf, 8), Fraction(22, 7))

    def test_bound(self):
        rng = np.random.default_rng(2013)
        for _ in range(200):
            q = Fraction(int(rng.integers(-10**12, 10**12)), int(rng.integers(1, 10**12)))
            precision = int(rng.integers(1, 40))
            with self.subTest(q=q, precision=precision):
                self.assertWithinBound(round_fraction(q, precision), precision)

    def test_logging(self):
        with self.assertLogs("pycfrac.numerics.rounding", level="DEBUG") as cm:
            round_fraction(Fraction(355, 113), 8)
        self.assertIn("Dropped 1 of 3 terms", cm.output[0])

if __name__ == '__main__':
    unittest.main()
