"""Polynomials whose term count is fixed when they are built.

`FixedPolynomial.sized(n)` returns the class of polynomials with exactly n
terms; the same class object is returned for the same n.  Calling the
unsized `FixedPolynomial(terms)` picks the class from the number of terms.

Instances are immutable: the terms live in a tuple and indexing or iterating
hands out copies.  There is no `insert`.  Addition and subtraction use the
same merge as `Polynomial`, and their result is sized to the number of terms
the merge produced.
"""

import sys

from sparsepoly.terms import Term, by_exponent
from sparsepoly.polynomials import Polynomial, merge_terms, format_terms

_SIZED = {}

class FixedPolynomial(object):
    __slots__ = ("_terms",)

    # None on the unsized base class
    capacity = None

    @classmethod
    def sized(cls, n):
        assert n >= 0, "capacity must be non-negative, not {}".format(n)
        t = _SIZED.get(n)
        if t is None:
            t = type("FixedPolynomial{}".format(n), (FixedPolynomial,), {
                "__slots__": (),
                "capacity": n })
            _SIZED[n] = t
        return t

    def __new__(cls, terms=()):
        terms = tuple(sorted((Term.coerce(t) for t in terms), key=by_exponent))
        if cls.capacity is None:
            cls = FixedPolynomial.sized(len(terms))
        elif len(terms) != cls.capacity:
            raise ValueError("{} holds exactly {} terms, was given {}".format(
                cls.__name__, cls.capacity, len(terms)))
        self = object.__new__(cls)
        self._terms = terms
        return self

    @staticmethod
    def from_polynomial(p):
        return FixedPolynomial(p.terms)

    def to_polynomial(self):
        return Polynomial(self._terms)

    def add(self, other):
        if not isinstance(other, FixedPolynomial):
            raise TypeError("cannot add {} to a FixedPolynomial".format(type(other).__name__))
        return FixedPolynomial(merge_terms(self._terms, other._terms))

    def subtract(self, other):
        return self.add(-other)

    def __add__(self, other):
        if not isinstance(other, FixedPolynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, FixedPolynomial):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return type(self)(-t for t in self._terms)

    def evaluate_at(self, x):
        res = 0.0
        for t in self._terms:
            res += t.evaluate_at(x)
        return res

    __call__ = evaluate_at

    def size(self):
        return len(self._terms)

    def is_empty(self):
        return not self._terms

    def __len__(self):
        return len(self._terms)

    def __getitem__(self, i):
        return self._terms[i].copy()

    def __iter__(self):
        for t in self._terms:
            yield t.copy()

    def format(self, precision=None, width=None):
        return format_terms(self._terms, precision, width)

    def print(self, precision=None, width=None, file=None):
        if file is None:
            file = sys.stdout
        file.write(self.format(precision, width))
        file.write("\n")

    def __eq__(self, other):
        if not isinstance(other, FixedPolynomial):
            return NotImplemented
        return self._terms == other._terms

    def __ne__(self, other):
        res = self.__eq__(other)
        return res if res is NotImplemented else not res

    def __hash__(self):
        return hash(tuple((t.coefficient, t.exponent) for t in self._terms))

    def __repr__(self):
        return "FixedPolynomial({!r})".format(list(self._terms))
