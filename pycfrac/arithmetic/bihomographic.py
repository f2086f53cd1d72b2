"""
bihomographic.py
==================

Contains the working state of Gosper's algorithm, the bihomographic transform

.. math::
    T(x, y) = \\frac{a + b x + c y + d x y}{e + f x + g y + h x y}

The eight coefficients are stored as a numpy array of shape ``(2, 2, 2)`` indexed ``[row, power of y, power of x]``, row 0 being the numerator and row 1 the denominator. Flattened, the array reads :math:`(a, b, c, d, e, f, g, h)`. The array has ``dtype=object`` so that the coefficients are Python integers and can not overflow.

Binding :math:`x` to :math:`P + 1/x'` acts on the last axis as the matrix :math:`\\begin{bmatrix} 0 & 1 \\\\ 1 & P \\end{bmatrix}`, binding :math:`y` acts the same way on the middle axis.
"""

from fractions import Fraction
import numpy as np


def _ingest_matrix(term):
    return np.array([[0, 1], [1, int(term)]], dtype=object)


# limit of the ingest matrix as the term goes to infinity, up to a common factor
_INFINITY_MATRIX = np.array([[0, 0], [1, 1]], dtype=object)


class BihomographicState:
    """
    The 8-coefficient transform :math:`(a, b, c, d, e, f, g, h)` of Gosper's algorithm.

    The transitions return new states, a state is never modified in place.
    """

    def __init__(self, a, b, c, d, e, f, g, h):
        self.coefficients = np.array(
            [[[a, b], [c, d]], [[e, f], [g, h]]], dtype=object
        )

    @classmethod
    def _from_array(cls, array):
        state = cls.__new__(cls)
        state.coefficients = array
        return state

    ## Seeds

    @classmethod
    def addition(cls):
        """:math:`T = x + y`"""
        return cls(0, 1, 1, 0, 1, 0, 0, 0)

    @classmethod
    def subtraction(cls):
        """:math:`T = x - y`"""
        return cls(0, 1, -1, 0, 1, 0, 0, 0)

    @classmethod
    def multiplication(cls):
        """:math:`T = x y`"""
        return cls(0, 0, 0, 1, 1, 0, 0, 0)

    @classmethod
    def division(cls):
        """:math:`T = x / y`"""
        return cls(0, 1, 0, 0, 0, 0, 1, 0)

    ## Properties

    @property
    def numerator(self):
        """
        The numerator coefficients :math:`(a, b, c, d)`.
        """
        return tuple(self.coefficients[0].ravel())

    @property
    def denominator(self):
        """
        The denominator coefficients :math:`(e, f, g, h)`.
        """
        return tuple(self.coefficients[1].ravel())

    def as_tuple(self):
        return self.numerator + self.denominator

    def corner_ratios(self):
        """
        The values of the transform at the corners of :math:`[0, \\infty]^2`.

        Returns:
            tuple: :math:`(a/e, b/f, c/g, d/h)` as fractions, that is :math:`T(0, 0)`, :math:`T(\\infty, 0)`, :math:`T(0, \\infty)` and :math:`T(\\infty, \\infty)`. An entry is None where the divisor is zero.
        """
        return tuple(
            Fraction(n, m) if m != 0 else None
            for n, m in zip(self.numerator, self.denominator)
        )

    def determined_term(self):
        """
        Returns the next output term if the transform already determines it, None otherwise.

        The term is determined when the denominator can not vanish on :math:`[0, \\infty]^2`, i.e. :math:`e, f, g, h` are non-zero and share one sign, and the four corner values have the same floor. The transform is monotone in each variable, so its value then lies between the corners.
        """
        den = self.coefficients[1].ravel()
        if not (all(m > 0 for m in den) or all(m < 0 for m in den)):
            return None

        floors = self.coefficients[0].ravel() // den
        if all(r == floors[0] for r in floors):
            return int(floors[0])
        return None

    def is_exhausted(self):
        """
        True when the denominator row is zero: the transform has been fully emitted.
        """
        return all(m == 0 for m in self.coefficients[1].ravel())

    ## Sign folding

    def negate_x(self):
        """
        Substitutes :math:`x \\to -x`, flipping the sign of :math:`b, d, f, h`.
        """
        array = self.coefficients.copy()
        array[:, :, 1] *= -1
        return self._from_array(array)

    def negate_y(self):
        """
        Substitutes :math:`y \\to -y`, flipping the sign of :math:`c, d, g, h`.
        """
        array = self.coefficients.copy()
        array[:, 1, :] *= -1
        return self._from_array(array)

    ## Transitions

    def insert_x(self, term):
        """
        Binds :math:`x \\to P + 1/x`:
        :math:`(b, a + bP, d, c + dP, f, e + fP, h, g + hP)`.
        """
        return self._from_array(self.coefficients @ _ingest_matrix(term))

    def insert_x_infinity(self):
        """
        Lets :math:`x \\to \\infty`, leaving :math:`T(\\infty, y) = (b + d y)/(f + h y)`:
        :math:`(b, b, d, d, f, f, h, h)`.
        """
        return self._from_array(self.coefficients @ _INFINITY_MATRIX)

    def insert_y(self, term):
        """
        Binds :math:`y \\to Q + 1/y`:
        :math:`(c, d, a + cQ, b + dQ, g, h, e + gQ, f + hQ)`.
        """
        return self._from_array(_ingest_matrix(term).T @ self.coefficients)

    def insert_y_infinity(self):
        """
        Lets :math:`y \\to \\infty`, leaving :math:`T(x, \\infty) = (c + d x)/(g + h x)`:
        :math:`(c, d, c, d, g, h, g, h)`.
        """
        return self._from_array(_INFINITY_MATRIX.T @ self.coefficients)

    def output(self, term):
        """
        Emits the term :math:`R`, replacing :math:`T` by :math:`1/(T - R)`:
        :math:`(e, f, g, h, a - eR, b - fR, c - gR, d - hR)`.
        """
        num, den = self.coefficients
        return self._from_array(np.stack((den, num - den * int(term))))

    def __eq__(self, other):
        if not isinstance(other, BihomographicState):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return f"BihomographicState{self.as_tuple()!r}"
