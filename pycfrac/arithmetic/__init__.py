"""
This submodule provides the arithmetic on continued fractions.
"""

from .bihomographic import BihomographicState
from .merge import Operation, Side, merge, add, subtract, multiply, divide
