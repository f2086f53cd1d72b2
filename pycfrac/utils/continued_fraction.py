"""
This module provides functions working on raw continued fraction coefficient lists. Reference in Ivan Niven, Irrational Numbers (Cambridge University Press, 2005).

All the arrays are numpy arrays of ``dtype=object`` so that the entries stay arbitrary-precision Python integers.
"""

from fractions import Fraction
import numpy as np


def expandcf(realnumber, n=100):
    """
    Expands the absolute value of a number in its continued fraction.

    The expansion is exact: floats are first converted to the rational number they represent, so it always terminates for finite input.

    Args:
        realnumber (int, float, Fraction or str): The number to expand. An absolute value will be taken if negative.
        n (int, optional): The maximum number of terms in the expansion. Default to 100.

    Returns:
        np.ndarray: A NumPy array containing the continued fraction expansion of the number up to the `nth` term or until the expansion terminates.
    """
    residue = abs(Fraction(realnumber))
    num, den = residue.numerator, residue.denominator

    ais = []
    while num != 0 and den != 0 and len(ais) < n:
        int_part, rem = divmod(num, den)
        ais.append(int_part)
        num, den = den, rem

    return np.array(ais, dtype=object)


def convergents(ai):
    """
    Computes all the convergents of the continued fraction :math:`[a_0, a_1, ..., a_m]`.

    Args:
        ai (list of int): An integer list containing ai for the continued fraction expansion.

    Returns:
        np.ndarray: An array of shape ``(len(ai), 2)``, the row `i` holds the numerator and the denominator :math:`(h_i, k_i)` of the `ith` convergent.
    """

    # Use the relation of the Gaussian bracket to get the fractions
    h, k = np.zeros(len(ai) + 2, dtype=object), np.zeros(len(ai) + 2, dtype=object)

    h[0], h[1] = 0, 1
    k[0], k[1] = 1, 0

    for i, a in enumerate(ai):
        h[i + 2] = int(a) * h[i + 1] + h[i]
        k[i + 2] = int(a) * k[i + 1] + k[i]

    return np.stack((h[2:], k[2:]), axis=-1)


def fromcf(ai):
    """
    Obtains the fraction :math:`n/m` from the coefficients :math:`[a_0, a_1, ..., a_m]` of the continued fraction.

    Args:
        ai (list of int): An integer list containing ai for the continued fraction expansion.

    Returns:
        tuple: A tuple :math:`(n, m)`, representing the fraction. The empty list gives :math:`(0, 1)`.
    """
    if len(ai) == 0:
        return 0, 1

    h, k = convergents(ai)[-1]
    return int(h), int(k)
