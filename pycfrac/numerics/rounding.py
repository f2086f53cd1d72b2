"""
rounding.py
==================

Contains the precision bounding of fractions by continued fraction truncation.

Truncating a continued fraction gives the best rational approximation with that many terms, and the numerator and denominator of the successive convergents grow monotonically, so dropping terms from the tail until both fit the budget gives the closest fraction reachable that way.
"""

from fractions import Fraction
import logging

from .continued_fraction import ContinuedFraction

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 24


def round_fraction(q, precision=DEFAULT_PRECISION):
    """
    Approximates `q` by a fraction whose numerator and denominator fit in `precision` bits.

    Args:
        q (Fraction, int or ContinuedFraction): The value to approximate.
        precision (int, optional): The number of bits, both :math:`|n|` and :math:`m` of the result satisfy :math:`\\leq 2^{precision} - 1`. A precision of 0 is treated as 1. Default to 24.

    Returns:
        Fraction: the approximation. It is 0 when even the first partial quotient does not fit.

    Raises:
        ValueError: If the precision is negative.
    """
    precision = int(precision)
    if precision < 0:
        raise ValueError(f"The precision should be non-negative, got {precision}.")
    if precision == 0:
        precision = 1

    bound = (1 << precision) - 1

    cf = ContinuedFraction(q)
    count = cf.count
    result = cf.to_fraction()
    while abs(result.numerator) > bound or result.denominator > bound:
        count -= 1
        if count <= 0:
            result = Fraction(0)
            break
        result = cf.truncate(count).to_fraction()

    if count < cf.count:
        logger.debug(f"Dropped {cf.count - max(count, 0)} of {cf.count} terms of {cf} to fit {precision} bits.")
    return result
