import io
import unittest

from sparsepoly.fixed import FixedPolynomial
from sparsepoly.polynomials import Polynomial
from sparsepoly.terms import Term

class TestFixedPolynomials(unittest.TestCase):

    def test_sized_classes(self):
        assert FixedPolynomial.sized(3) is FixedPolynomial.sized(3)
        assert FixedPolynomial.sized(3) is not FixedPolynomial.sized(2)
        self.assertEqual(FixedPolynomial.sized(3).capacity, 3)
        p = FixedPolynomial([(1, 0), (2, 1)])
        assert type(p) is FixedPolynomial.sized(2)
        assert isinstance(p, FixedPolynomial)

    def test_wrong_size(self):
        with self.assertRaises(ValueError):
            FixedPolynomial.sized(3)([(1, 0)])

    def test_construction_sorts(self):
        p = FixedPolynomial.sized(3)([Term(1, 3), Term(2, 0), Term(3, 1)])
        self.assertEqual([t.exponent for t in p], [0, 1, 3])
        self.assertEqual(p[1], Term(3, 1))
        self.assertEqual(p.size(), 3)
        assert not p.is_empty()

    def test_immutable(self):
        p = FixedPolynomial([(1, 0)])
        p[0].coefficient = 10
        for t in p:
            t.coefficient = 10
        self.assertEqual(p[0], Term(1, 0))
        with self.assertRaises(AttributeError):
            p.insert

    def test_add(self):
        p = FixedPolynomial([(3, 2), (5, 0)])
        q = FixedPolynomial([(-3, 2), (2, 1)])
        s = p + q
        self.assertEqual(s, FixedPolynomial([(5, 0), (2, 1)]))
        self.assertEqual(s.capacity, 2)

    def test_add_grows(self):
        p = FixedPolynomial([(1, 0), (1, 2)])
        q = FixedPolynomial([(1, 1), (1, 3)])
        s = p.add(q)
        self.assertEqual(s.capacity, 4)
        self.assertEqual([t.exponent for t in s], [0, 1, 2, 3])

    def test_subtract(self):
        p = FixedPolynomial([(1, 0), (1, 1), (1, 2)])
        d = p - p
        assert d.is_empty()
        self.assertEqual(d.capacity, 0)
        self.assertEqual(-p, FixedPolynomial([(-1, 0), (-1, 1), (-1, 2)]))

    def test_evaluate(self):
        p = FixedPolynomial([(1, 0), (1, 1), (1, 2)])
        self.assertEqual(p.evaluate_at(2), 7)
        self.assertEqual(p(2), 7)

    def test_add_other_kinds(self):
        with self.assertRaises(TypeError):
            FixedPolynomial([(1, 0)]).add(Polynomial([(1, 0)]))
        with self.assertRaises(TypeError):
            FixedPolynomial([(1, 0)]) + Polynomial([(1, 0)])

    def test_hash(self):
        a = FixedPolynomial([(1, 0), (2, 1)])
        b = FixedPolynomial([(2, 1), (1, 0)])
        self.assertEqual(a, b)
        self.assertEqual(len({a, b}), 1)

    def test_conversions(self):
        p = Polynomial([(3, 2), (5, 0)])
        f = FixedPolynomial.from_polynomial(p)
        self.assertEqual(f.capacity, 2)
        self.assertEqual(f.to_polynomial(), p)
        self.assertEqual(eval(repr(f)), f)

    def test_print(self):
        out = io.StringIO()
        FixedPolynomial([(3, 2), (5, 0)]).print(2, 6, file=out)
        self.assertEqual(out.getvalue(), "     5x^0      3x^2 \n")
