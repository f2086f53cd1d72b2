"""
This submodule provides the continued fraction number type.
"""

from .constants import Constant, compare_constant
from .continued_fraction import ContinuedFraction
from .rounding import round_fraction, DEFAULT_PRECISION
