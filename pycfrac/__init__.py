from importlib import metadata

__version__ = metadata.version('pycfrac')

from . import utils
from . import numerics
from . import arithmetic

from .exceptions import DivisionByZero
from .numerics import ContinuedFraction, Constant, compare_constant, round_fraction
from .arithmetic import Operation, merge, add, subtract, multiply, divide
