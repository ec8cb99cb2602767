"""A single term c*x^e of a one-variable polynomial.

Terms are ordered by exponent alone, but Python's comparison operators on a
Term mean full value equality.  Code that wants "same exponent" semantics
asks for it by name:
 - by_exponent: a `key=` function for sorted/min/max
 - compare_exponents: a cmp-style comparator (see `functools.cmp_to_key`)
 - same_exponent: the matching equality test

Adding or subtracting two terms with different exponents is an expected
failure, so `Term.add` and `Term.subtract` return `Ok`/`Err` results rather
than raising.  The `+` and `-` operators unwrap them and raise
`ExponentMismatch`.
"""

import math
import operator

from sparsepoly.common import Ok, Err, compare_with_lt

class ExponentMismatch(ValueError):
    """Two terms with different exponents were combined."""
    def __init__(self, left, right):
        super().__init__("exponent is not equal ({} != {})".format(left, right))
        self.left = left
        self.right = right

class Term(object):
    __slots__ = ("coefficient", "exponent")

    def __init__(self, coefficient=0.0, exponent=0):
        self.coefficient = float(coefficient)
        self.exponent = operator.index(exponent)

    @classmethod
    def coerce(cls, x):
        """Accept a Term or a (coefficient, exponent) pair; always copies."""
        if isinstance(x, Term):
            return x.copy()
        coefficient, exponent = x
        return cls(coefficient, exponent)

    def set_coefficient(self, c):
        self.coefficient = float(c)

    def set_exponent(self, e):
        self.exponent = operator.index(e)

    def copy(self):
        return Term(self.coefficient, self.exponent)

    def is_zero(self):
        return self.coefficient == 0

    def add(self, other):
        if self.exponent != other.exponent:
            return Err(ExponentMismatch(self.exponent, other.exponent))
        c = self.coefficient + other.coefficient
        if c == 0:
            # canonical zero; the exponent is meaningless here
            return Ok(Term(0.0, 0))
        return Ok(Term(c, self.exponent))

    def subtract(self, other):
        return self.add(-other)

    def __neg__(self):
        return Term(-self.coefficient, self.exponent)

    def __add__(self, other):
        return self.add(other).unwrap()

    def __sub__(self, other):
        return self.subtract(other).unwrap()

    def evaluate_at(self, x):
        x = float(x)
        try:
            return self.coefficient * x ** self.exponent
        except OverflowError:
            # |x^e| is past the float range; saturate like IEEE arithmetic
            if self.coefficient == 0:
                return 0.0
            negative = (self.coefficient < 0) != (x < 0 and self.exponent % 2 == 1)
            return -math.inf if negative else math.inf

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.coefficient == other.coefficient and self.exponent == other.exponent

    def __ne__(self, other):
        res = self.__eq__(other)
        return res if res is NotImplemented else not res

    # mutable, so not hashable
    __hash__ = None

    def __str__(self):
        return "{:g}x^{}".format(self.coefficient, self.exponent)

    def __repr__(self):
        return "Term({!r}, {!r})".format(self.coefficient, self.exponent)

def by_exponent(t):
    return t.exponent

def compare_exponents(lhs, rhs):
    return compare_with_lt(lhs.exponent, rhs.exponent)

def same_exponent(lhs, rhs):
    return lhs.exponent == rhs.exponent
