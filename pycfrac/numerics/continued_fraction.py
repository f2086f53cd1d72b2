"""
continued_fraction.py
==================

Contains the class representing exact rational numbers as simple continued fractions.

A continued fraction is stored as a sign flag and the magnitudes of its partial quotients, so that

.. math::
    \\pm [c_0; c_1, c_2, \\ldots, c_{n-1}] = \\pm \\left(c_0 + \\frac{1}{c_1 + \\frac{1}{c_2 + \\ldots}}\\right)

The representation is kept canonical: the last of two or more coefficients is never 1, since :math:`[\\ldots, a, 1] = [\\ldots, a + 1]`.
"""

from fractions import Fraction
from itertools import zip_longest
import numbers

from ..exceptions import DivisionByZero
from ..utils.continued_fraction import convergents
from .constants import Constant, compare_constant


def _compare_magnitudes(p, q):
    """
    Compares two canonical coefficient sequences. A sequence that stops has an infinite tail, and the order flips at every odd position.
    """
    for k, (pk, qk) in enumerate(zip_longest(p, q)):
        if pk == qk:
            continue
        if pk is None:
            result = 1
        elif qk is None:
            result = -1
        else:
            result = 1 if pk > qk else -1
        return result if k % 2 == 0 else -result
    return 0


class ContinuedFraction:
    """
    Exact rational number in simple continued fraction form.

    Attributes:
        negative (bool): Whether the whole value is negative. The coefficients themselves are always non-negative.
    """

    def __init__(self, value=0):
        """
        Initializes the ContinuedFraction object.

        Args:
            value (int, Fraction, ContinuedFraction, float or str): The value to represent. Integers give a single term, other continued fractions are copied and everything else is converted to a :class:`~fractions.Fraction` and expanded.

        Raises:
            ValueError: If the value can not be converted to a fraction.
        """
        self.negative = False
        self._coefficients = []

        if isinstance(value, ContinuedFraction):
            self.negative = value.negative
            self._coefficients = list(value._coefficients)
        elif isinstance(value, numbers.Integral):
            if value != 0:
                self.append(value)
        else:
            try:
                fraction = Fraction(value)
            except (TypeError, ValueError, OverflowError) as e:
                raise ValueError(f"Cannot build a continued fraction from {value!r}: {e}") from e
            self._expand(fraction)

    ## Construction

    @classmethod
    def from_fraction(cls, fraction):
        """
        Expands a fraction into its canonical continued fraction.
        """
        return cls(Fraction(fraction))

    @classmethod
    def from_coefficients(cls, coefficients, negative=False):
        """
        Builds a continued fraction from its partial quotients.

        Args:
            coefficients (iterable of int): The partial quotients :math:`[c_0, c_1, ...]`.
            negative (bool): Whether the value is negative.

        Returns:
            ContinuedFraction: the canonical continued fraction.
        """
        cf = cls()
        for c in coefficients:
            cf.append(c)
        cf.negative = cf.negative or bool(negative)
        return cf.canonicalize()

    def _expand(self, fraction):
        # Euclid on the magnitude, the sign belongs to the whole value
        num, den = abs(fraction.numerator), fraction.denominator
        while num != 0 and den != 0:
            int_part, rem = divmod(num, den)
            self._coefficients.append(int_part)
            num, den = den, rem

        self.negative = fraction < 0
        self.canonicalize()

    def append(self, term):
        """
        Appends a partial quotient. A negative term marks the whole value as negative and its magnitude is stored.

        The result is not canonicalized, call :meth:`canonicalize` once the construction is finished.

        Args:
            term (int): The next partial quotient.

        Returns:
            ContinuedFraction: self, to allow chaining.

        Raises:
            ValueError: If the term is not an integer, or is zero while not being the first term.
        """
        if not isinstance(term, numbers.Integral):
            raise ValueError(f"Partial quotients should be integers, got {term!r}.")
        term = int(term)
        if term < 0:
            self.negative = True
            term = -term
        if term == 0 and self._coefficients:
            raise ValueError("Only the first partial quotient can be zero.")

        self._coefficients.append(term)
        return self

    def canonicalize(self):
        """
        Folds a trailing 1 into the previous coefficient, and normalizes the single term :math:`[0]` to the empty zero. Idempotent.

        Returns:
            ContinuedFraction: self, to allow chaining.
        """
        if len(self._coefficients) > 1 and self._coefficients[-1] == 1:
            self._coefficients.pop()
            self._coefficients[-1] += 1
        if self._coefficients == [0]:
            self._coefficients = []
        if not self._coefficients:
            self.negative = False
        return self

    ## Properties

    @property
    def coefficients(self):
        """
        The partial quotients as a tuple of non-negative integers.
        """
        return tuple(self._coefficients)

    @property
    def count(self):
        """
        The number of partial quotients, 0 for the value zero.
        """
        return len(self._coefficients)

    def __len__(self):
        return len(self._coefficients)

    def __iter__(self):
        return iter(self._coefficients)

    def __getitem__(self, index):
        return self._coefficients[index]

    ## Conversions

    def to_fraction(self):
        """
        Collapses the continued fraction into the :class:`~fractions.Fraction` it denotes, evaluating it from the last coefficient backwards.
        """
        if not self._coefficients:
            return Fraction(0)

        result = Fraction(self._coefficients[-1])
        for c in reversed(self._coefficients[:-1]):
            result = 1 / result + c

        return -result if self.negative else result

    def __float__(self):
        return float(self.to_fraction())

    def __int__(self):
        return int(self.to_fraction())

    def truncate(self, count):
        """
        Returns the continued fraction made of the first `count` partial quotients, i.e. the `count`-th convergent.
        """
        if count < 0:
            raise ValueError(f"count should be non-negative, got {count}.")
        cf = ContinuedFraction()
        cf._coefficients = self._coefficients[:count]
        cf.negative = self.negative
        return cf.canonicalize()

    def convergents(self):
        """
        Yields the successive convergents as fractions, the last one being the value itself.
        """
        sign = -1 if self.negative else 1
        for h, k in convergents(self._coefficients):
            yield Fraction(sign * h, k)

    def reciprocal(self):
        """
        Returns :math:`1/x`, obtained by shifting the coefficients.

        Raises:
            DivisionByZero: If the value is zero.
        """
        if self.is_zero():
            raise DivisionByZero("The reciprocal of zero is undefined.")

        cf = ContinuedFraction()
        cf.negative = self.negative
        if self._coefficients[0] == 0:
            cf._coefficients = self._coefficients[1:]
        else:
            cf._coefficients = [0] + self._coefficients
        return cf.canonicalize()

    def __str__(self):
        if not self._coefficients:
            return "[ 0 ]"

        r = "[ " + str(self._coefficients[0])
        if len(self._coefficients) > 1:
            r += "; " + ", ".join(str(c) for c in self._coefficients[1:])
        r += " ]"

        return "- " + r if self.negative else r

    def __repr__(self):
        return f"ContinuedFraction.from_coefficients({self._coefficients!r}, negative={self.negative})"

    ## Distinguished constants

    def is_zero(self):
        return compare_constant(self, Constant.ZERO) == 0

    def is_one(self):
        return compare_constant(self, Constant.ONE) == 0

    def is_negative_one(self):
        return compare_constant(self, Constant.NEGATIVE_ONE) == 0

    def __bool__(self):
        return not self.is_zero()

    ## Comparisons

    @staticmethod
    def _coerce(other):
        if isinstance(other, ContinuedFraction):
            return other
        if isinstance(other, numbers.Rational):
            return ContinuedFraction(other)
        return None

    def _compare(self, other):
        s = compare_constant(self, Constant.ZERO)
        t = compare_constant(other, Constant.ZERO)
        if s != t:
            return -1 if s < t else 1
        if s == 0:
            return 0

        m = _compare_magnitudes(self._coefficients, other._coefficients)
        return -m if s < 0 else m

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) == 0

    def __hash__(self):
        return hash(self.to_fraction())

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) >= 0

    ## Arithmetic

    def _binary(self, other, operation_name, reflected=False):
        # the merge driver builds its results with this class
        from ..arithmetic.merge import Operation, merge

        other = self._coerce(other)
        if other is None:
            return NotImplemented

        operation = Operation[operation_name]
        if reflected:
            return merge(other, self, operation)
        return merge(self, other, operation)

    def __add__(self, other):
        return self._binary(other, "ADDITION")

    def __radd__(self, other):
        return self._binary(other, "ADDITION", reflected=True)

    def __sub__(self, other):
        return self._binary(other, "SUBTRACTION")

    def __rsub__(self, other):
        return self._binary(other, "SUBTRACTION", reflected=True)

    def __mul__(self, other):
        return self._binary(other, "MULTIPLICATION")

    def __rmul__(self, other):
        return self._binary(other, "MULTIPLICATION", reflected=True)

    def __truediv__(self, other):
        return self._binary(other, "DIVISION")

    def __rtruediv__(self, other):
        return self._binary(other, "DIVISION", reflected=True)

    def __neg__(self):
        cf = ContinuedFraction(self)
        cf.negative = not self.negative
        return cf.canonicalize()

    def __pos__(self):
        return ContinuedFraction(self)

    def __abs__(self):
        cf = ContinuedFraction(self)
        cf.negative = False
        return cf
