import unittest
from fractions import Fraction
import numpy as np
from pycfrac.utils import expandcf, fromcf, convergents

# Define a list of test cases, each case is a tuple of (NUM, FRAC, CI)
# where NUM is the rational number to be expanded into a continued fraction
# where FRAC is a tuple of (numerator, denominator) equal to NUM
# and CI is the list of coefficients of the continued fraction expansion
test_cases = [
    (Fraction(5, 7), (5, 7), [0, 1, 2, 2]),
    (Fraction(355, 113), (355, 113), [3, 7, 16]),
# Content is available under The OEIS End-User License Agreement: http://oeis.org/LICENSE
    # OEIS A010124: Continued fraction for sqrt(19)
    (Fraction(1421, 326), (1421, 326), [4, 2, 1, 3, 1, 2, 8]),
    # OEIS A001203: Continued fraction for pi
    (Fraction(833719, 265381), (833719, 265381), [3, 7, 15, 1, 292, 1, 1, 1, 2]),
]

class TestContinuedFractionFunctions(unittest.TestCase):
    def test_expandcf(self):
        for num, frac, ci in test_cases:
            with self.subTest(ci=ci, frac=frac, num=num):
                result = expandcf(num)
                expected = ci
                np.testing.assert_array_equal(result, expected, f"Failed to correctly expand num={num} into ci={ci}.")

    def test_expandcf_max_terms(self):
        result = expandcf(Fraction(833719, 265381), 4)
        np.testing.assert_array_equal(result, [3, 7, 15, 1])

    def test_expandcf_float(self):
        # floats are expanded exactly
        np.testing.assert_array_equal(expandcf(0.5), [0, 2])
        np.testing.assert_array_equal(expandcf(np.pi, 4), [3, 7, 15, 1])

    def test_expandcf_negative_and_zero(self):
        np.testing.assert_array_equal(expandcf(Fraction(-5, 7)), [0, 1, 2, 2])
        self.assertEqual(len(expandcf(0)), 0)

    def test_fromcf(self):
        for num, frac, ci in test_cases:
            with self.subTest(ci=ci, frac=frac, num=num):
                result = fromcf(ci)
                expected = frac
                self.assertEqual(result, expected, f"Failed to correctly convert ci={ci} back to fraction frac={frac}.")

    def test_fromcf_empty(self):
        self.assertEqual(fromcf([]), (0, 1))

    def test_fromcf_big_integers(self):
        # object arrays keep arbitrary precision
        ci = [10**30, 10**30]
        self.assertEqual(fromcf(ci), (10**60 + 1, 10**30))

    def test_convergents(self):
        result = convergents([3, 7, 16])
        self.assertEqual(result.shape, (3, 2))
        self.assertEqual([tuple(row) for row in result], [(3, 1), (22, 7), (355, 113)])

if __name__ == '__main__':
    unittest.main()
