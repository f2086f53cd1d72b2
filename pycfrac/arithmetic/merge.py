"""
merge.py
==================

Contains the driver of Gosper's algorithm: arithmetic performed directly on two continued fractions, ingesting their partial quotients one at a time into a :class:`BihomographicState` and emitting the partial quotients of the result as soon as they are determined.

The signs of the operands are folded into the initial state, so only magnitudes are ingested and both variables range over :math:`[0, \\infty]`. The terms are emitted as regular (floor) partial quotients, only the first one can be negative, and the result is turned into sign and magnitude form at the end.
"""

from enum import Enum
from fractions import Fraction
import logging

from ..exceptions import DivisionByZero
from ..numerics.continued_fraction import ContinuedFraction
from .bihomographic import BihomographicState

logger = logging.getLogger(__name__)


class Operation(Enum):
    """
    The four arithmetic operations, each mapped to the seed of the transform computing it.
    """

    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    MULTIPLICATION = "multiplication"
    DIVISION = "division"

    def seed(self):
        return getattr(BihomographicState, self.value)()


class Side(Enum):
    """
    The operand a term is ingested from.
    """

    X = "x"
    Y = "y"


class _Operand:
    """
    Read cursor over the partial quotients of an operand. Zero is read as the single term 0.
    """

    def __init__(self, cf):
        self.terms = cf.coefficients or (0,)
        self.position = 0
        self.infinite = False

    def next_term(self):
        if self.position >= len(self.terms):
            return None
        term = self.terms[self.position]
        self.position += 1
        return term


def _floor_terms(value):
    num, den = value.numerator, value.denominator
    terms = []
    while den != 0:
        int_part, rem = divmod(num, den)
        terms.append(int_part)
        num, den = den, rem
    return terms


def _to_continued_fraction(terms):
    """
    Turns regular partial quotients :math:`[r_0; r_1, ...]` with :math:`r_0` of any sign into a ContinuedFraction.

    For :math:`r_0 < 0`, :math:`-(r_0 + 1/t) = [-r_0 - 1; 1, t - 1]`, and a zero partial quotient is merged away using :math:`[\\ldots, a, 0, b, \\ldots] = [\\ldots, a + b, \\ldots]`.
    """
    if not terms:
        return ContinuedFraction()

    negative = terms[0] < 0
    if negative:
        if len(terms) == 1:
            terms = [-terms[0]]
        else:
            head = [-terms[0] - 1, 1]
            tail = [terms[1] - 1] + list(terms[2:])
            if tail[0] != 0:
                terms = head + tail
            elif len(tail) == 1:
                terms = head[:-1]
            else:
                terms = head[:-1] + [1 + tail[1]] + tail[2:]

    return ContinuedFraction.from_coefficients(terms, negative=negative)


def _decide_side(state):
    """
    Chooses the operand whose next term is ingested: the one contributing the wider uncertainty, unless the corners of the other one are not defined yet.
    """
    _, _, _, _, e, f, g, h = state.as_tuple()
    if f == 0 or h == 0:
        return Side.Y
    if e == 0 or g == 0:
        return Side.X

    ae, bf, cg, _ = state.corner_ratios()
    if abs(bf - ae) > abs(cg - ae):
        return Side.X
    return Side.Y


def _ingest(state, side, x, y):
    # an operand already at infinity hands over to the other one
    if side is Side.X and x.infinite:
        side = Side.Y
    elif side is Side.Y and y.infinite:
        side = Side.X

    operand = x if side is Side.X else y
    term = operand.next_term()

    if term is None:
        operand.infinite = True
        logger.debug(f"Operand {side.value} exhausted.")
        if side is Side.X:
            return state.insert_x_infinity()
        return state.insert_y_infinity()

    logger.debug(f"Ingesting {term} from {side.value}.")
    if side is Side.X:
        return state.insert_x(term)
    return state.insert_y(term)


def merge(x, y, operation):
    """
    Computes `x` `operation` `y` with Gosper's algorithm.

    Args:
        x (ContinuedFraction): The left operand. Integers and fractions are expanded first.
        y (ContinuedFraction): The right operand. Integers and fractions are expanded first.
        operation (Operation): The operation to perform.

    Returns:
        ContinuedFraction: the canonical continued fraction of the result.

    Raises:
        DivisionByZero: If `operation` is a division and `y` is zero.
        ValueError: If `operation` is not an :class:`Operation`.
    """
    if not isinstance(operation, Operation):
        raise ValueError(f"Unknown operation {operation!r}.")
    if not isinstance(x, ContinuedFraction):
        x = ContinuedFraction(x)
    if not isinstance(y, ContinuedFraction):
        y = ContinuedFraction(y)

    if operation is Operation.DIVISION and y.is_zero():
        raise DivisionByZero(f"Cannot divide {x} by zero.")

    state = operation.seed()
    if x.negative:
        state = state.negate_x()
    if y.negative:
        state = state.negate_y()

    px, py = _Operand(x), _Operand(y)
    terms = []

    while True:
        term = state.determined_term()
        if term is not None:
            logger.debug(f"Emitting {term}.")
            terms.append(term)
            state = state.output(term)
            continue

        if state.is_exhausted():
            break

        if px.infinite and py.infinite:
            _, _, _, d, _, _, _, h = state.as_tuple()
            if h != 0:
                terms.extend(_floor_terms(Fraction(d, h)))
            break

        state = _ingest(state, _decide_side(state), px, py)

    result = _to_continued_fraction(terms)
    logger.debug(f"{x} {operation.value} {y} = {result} ({len(terms)} terms emitted).")
    return result


def add(x, y):
    return merge(x, y, Operation.ADDITION)


def subtract(x, y):
    return merge(x, y, Operation.SUBTRACTION)


def multiply(x, y):
    return merge(x, y, Operation.MULTIPLICATION)


def divide(x, y):
    """
    Raises:
        DivisionByZero: If `y` is zero.
    """
    return merge(x, y, Operation.DIVISION)
