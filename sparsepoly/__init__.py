"""Sparse one-variable polynomial arithmetic.

Important modules:
 - terms: Term and the exponent comparators
 - polynomials: Polynomial, the growable sorted term list
 - fixed: FixedPolynomial, the immutable fixed-size variant
"""
