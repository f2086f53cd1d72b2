from pycfrac import ContinuedFraction, round_fraction
from pycfrac.arithmetic import Operation, merge
from fractions import Fraction
import logging

logging.basicConfig(level=logging.INFO)

if __name__ == "__main__":
    ### Expanding fractions into continued fractions

    af, bf = Fraction(6, 11), Fraction(4, 5)
    a, b = ContinuedFraction(af), ContinuedFraction(bf)
    print(f"{af} = {a}")
    print(f"{bf} = {b}")

    ### Arithmetic directly on the continued fractions

    print("\nArithmetic on the terms\n")

    for operation, symbol, oracle in [
        (Operation.ADDITION, "+", af + bf),
        (Operation.SUBTRACTION, "-", af - bf),
        (Operation.MULTIPLICATION, "*", af * bf),
        (Operation.DIVISION, "/", af / bf),
    ]:
        r = merge(a, b, operation)
        print(f"{a} {symbol} {b} = {r} = {r.to_fraction()} (expected {oracle})")

    ### Watching the algorithm ingest and emit terms

    logging.getLogger("pycfrac.arithmetic.merge").setLevel(logging.DEBUG)
    c = ContinuedFraction(Fraction(76, 131)) - ContinuedFraction(Fraction(54, 92))
    logging.getLogger("pycfrac.arithmetic.merge").setLevel(logging.INFO)
    print(f"76/131 - 54/92 = {c} = {c.to_fraction()}")

    ### Bounding the precision of a fraction

    print("\nBest approximations of 833719/265381\n")

    q = Fraction(833719, 265381)
    for precision in (2, 4, 8, 12, 16, 24):
        print(f"{precision:>2} bits: {round_fraction(q, precision)}")
