"""
exceptions.py
==================

Contains the exceptions raised by the continued fraction engine.
"""


class DivisionByZero(ZeroDivisionError):
    """
    Raised when a continued fraction is divided by zero, or when the reciprocal of zero is requested.

    Derives from :class:`ZeroDivisionError` so that callers treating continued fractions like any other number can catch it the usual way.
    """

    pass
