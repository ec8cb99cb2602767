"""Sparse polynomials of one variable.

A Polynomial is a list of Terms kept in ascending exponent order.  The
arithmetic operations maintain three properties:
 - no two terms share an exponent
 - terms are sorted by ascending exponent
 - a term whose coefficient cancels to exactly zero is removed

Construction from a list copies the terms verbatim (after sorting); use
`Polynomial.merged` to combine duplicate exponents as well.

Important functions:
 - merge_terms: the exponent-keyed merge behind + and -
 - format_terms: the textual form written by `print`
"""

import functools
import sys

from ordered_set import OrderedSet

from sparsepoly.common import FrozenDict
from sparsepoly.opts import Option
from sparsepoly.terms import Term, by_exponent, compare_exponents
from sparsepoly import logging

print_precision = Option("print-precision", int, 2, description="Significant digits of printed coefficients", metavar="N")
print_width = Option("print-width", int, 6, description="Field width of printed coefficients", metavar="N")

def merge_terms(lhs, rhs):
    """Add two exponent-sorted term sequences.

    Both inputs must already be sorted by ascending exponent with unique
    exponents; this is not checked.  Neither input is modified.  Runs in
    O(len(lhs) + len(rhs)) and returns a new list of new Terms.
    """
    res = []
    i = 0
    j = 0
    while i < len(lhs) and j < len(rhs):
        a = lhs[i]
        b = rhs[j]
        if a.exponent < b.exponent:
            res.append(a.copy())
            i += 1
        elif b.exponent < a.exponent:
            res.append(b.copy())
            j += 1
        else:
            s = (a + b)
            if s.is_zero():
                logging.event("x^{} cancels".format(a.exponent))
            else:
                res.append(s)
            i += 1
            j += 1
    res.extend(t.copy() for t in lhs[i:])
    res.extend(t.copy() for t in rhs[j:])
    return res

def format_terms(terms, precision=None, width=None):
    if precision is None:
        precision = print_precision.value
    if width is None:
        width = print_width.value
    return "".join(
        "{c:>{w}.{p}g}x^{e} ".format(c=t.coefficient, e=t.exponent, w=width, p=precision)
        for t in terms)

class Polynomial(object):
    __slots__ = ("terms",)

    def __init__(self, terms=()):
        self.terms = sorted((Term.coerce(t) for t in terms), key=by_exponent)

    @classmethod
    def merged(cls, terms):
        """Build a polynomial by inserting each term in turn.

        Unlike the constructor, duplicate exponents are summed and cancelled
        terms are dropped.
        """
        p = cls()
        for t in terms:
            p.insert(t)
        return p

    def copy(self):
        return Polynomial(self.terms)

    def sort(self, cmp=compare_exponents):
        """Re-sort the terms in place with a cmp-style comparator.

        Only needed after callers edit exponents through iteration.
        """
        self.terms.sort(key=functools.cmp_to_key(cmp))

    def insert(self, term):
        t = Term.coerce(term)
        for i, existing in enumerate(self.terms):
            if existing.exponent == t.exponent:
                existing.coefficient += t.coefficient
                if existing.is_zero():
                    del self.terms[i]
                return
            if existing.exponent > t.exponent:
                if not t.is_zero():
                    self.terms.insert(i, t)
                return
        if not t.is_zero():
            self.terms.append(t)

    def add(self, other):
        if not isinstance(other, Polynomial):
            raise TypeError("cannot add {} to a Polynomial".format(type(other).__name__))
        with logging.task("add", lhs=len(self.terms), rhs=len(other.terms)):
            res = Polynomial()
            res.terms = merge_terms(self.terms, other.terms)
            return res

    def subtract(self, other):
        return self.add(-other)

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        res = Polynomial()
        res.terms = [-t for t in self.terms]
        return res

    def evaluate_at(self, x):
        res = 0.0
        for t in self.terms:
            res += t.evaluate_at(x)
        return res

    __call__ = evaluate_at

    def size(self):
        return len(self.terms)

    def is_empty(self):
        return not self.terms

    def __len__(self):
        return len(self.terms)

    def __iter__(self):
        return iter(self.terms)

    def __getitem__(self, i):
        return self.terms[i]

    def degree(self):
        """The largest exponent, or None for the empty polynomial."""
        return self.terms[-1].exponent if self.terms else None

    def coefficients(self):
        """exponent -> coefficient, hashable and independent of term order."""
        return FrozenDict([(t.exponent, t.coefficient) for t in self.terms])

    def exponents(self):
        return OrderedSet(t.exponent for t in self.terms)

    def format(self, precision=None, width=None):
        return format_terms(self.terms, precision, width)

    def print(self, precision=None, width=None, file=None):
        if file is None:
            file = sys.stdout
        file.write(self.format(precision, width))
        file.write("\n")

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.terms == other.terms

    def __ne__(self, other):
        res = self.__eq__(other)
        return res if res is NotImplemented else not res

    __hash__ = None

    def __str__(self):
        if not self.terms:
            return "0"
        return " + ".join(str(t) for t in self.terms)

    def __repr__(self):
        return "Polynomial({!r})".format(self.terms)
