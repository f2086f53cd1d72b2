"""
constants.py
==================

Contains the distinguished constants (zero, one and negative one) and the comparison of a continued fraction against them.

The comparisons only look at the sign flag and at the first one or two partial quotients, so they are much cheaper than collapsing the continued fraction and comparing the resulting fraction.
"""

from enum import Enum


class Constant(Enum):
    """
    The distinguished constants a continued fraction can be compared against without being collapsed.
    """

    ZERO = 0
    ONE = 1
    NEGATIVE_ONE = -1


def _sign(cf):
    if cf.count == 0 or (cf.count == 1 and cf.coefficients[0] == 0):
        return 0
    return -1 if cf.negative else 1


def _magnitude_versus_one(cf):
    # only called for non-zero values, so the first coefficient exists
    c0 = cf.coefficients[0]
    if c0 == 0:
        return -1
    if c0 == 1 and cf.count == 1:
        return 0
    return 1


def compare_constant(cf, constant: Constant) -> int:
    """
    Compares a continued fraction with one of the distinguished constants.

    Args:
        cf (ContinuedFraction): The continued fraction, assumed to be in canonical form.
        constant (Constant): The constant to compare against.

    Returns:
        int: -1, 0 or 1 if `cf` is respectively smaller than, equal to or greater than the constant.

    Raises:
        ValueError: If `constant` is not a :class:`Constant`.
    """
    if not isinstance(constant, Constant):
        raise ValueError(f"Cannot compare against {constant!r}, expected a Constant.")

    sign = _sign(cf)

    if constant is Constant.ZERO:
        return sign
    if constant is Constant.ONE:
        if sign <= 0:
            return -1
        return _magnitude_versus_one(cf)

    # negative one
    if sign >= 0:
        return 1
    return -_magnitude_versus_one(cf)
