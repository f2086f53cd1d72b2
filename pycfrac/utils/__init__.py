"""
This submodule provides various utility functions for the pycfrac package.
"""

from .continued_fraction import *
