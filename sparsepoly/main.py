#!/usr/bin/env python

"""
Command-line calculator for sparse polynomials. Run with --help for options.

Polynomials are given term by term, e.g.

    sparsepoly -t 3 2 -t 5 0 -o -3 2 -o 2 1 -x 2

adds 3x^2 + 5 and -3x^2 + 2x, prints the sum and evaluates it at x=2.
"""

import argparse
import sys

from sparsepoly import logging
from sparsepoly import opts
from sparsepoly.polynomials import Polynomial

def _read_terms(parser, pairs):
    terms = []
    for c, e in pairs:
        try:
            terms.append((float(c), int(e)))
        except ValueError:
            parser.error("bad term {} {}: expected a number and an integer exponent".format(c, e))
    return terms

def run(argv=None):
    """Entry point for the sparsepoly executable.

    This procedure reads `argv` (default: sys.argv) and prints the result.
    """

    parser = argparse.ArgumentParser(description='Sparse polynomial calculator.')
    parser.add_argument("-t", "--term", nargs=2, metavar=("COEF", "EXP"), action="append", default=[],
                        help="Add a term to the polynomial; repeatable. Terms with equal exponents are summed")
    parser.add_argument("-o", "--other", nargs=2, metavar=("COEF", "EXP"), action="append", default=[],
                        help="Add a term to a second polynomial, which is added to the first")
    parser.add_argument("-s", "--subtract", action="store_true", help="Subtract the second polynomial instead of adding it")
    parser.add_argument("-x", "--at", metavar="X", type=float, action="append", default=[],
                        help="Evaluate the result at X; repeatable")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    args = parser.parse_args(argv)
    opts.read(args)

    if args.subtract and not args.other:
        parser.error("--subtract needs a second polynomial (--other)")

    with logging.task("build"):
        p = Polynomial.merged(_read_terms(parser, args.term))
        q = Polynomial.merged(_read_terms(parser, args.other))
    logging.event("p = {}".format(p))

    if args.other:
        logging.event("q = {}".format(q))
        result = p.subtract(q) if args.subtract else p.add(q)
    else:
        result = p

    result.print()

    with logging.task("evaluate", points=len(args.at)):
        for x in args.at:
            try:
                y = result.evaluate_at(x)
            except ZeroDivisionError:
                print("Error: result is undefined at x={:g}".format(x), file=sys.stderr)
                return 1
            print("p({:g}) = {:g}".format(x, y))

    logging.log(logging.format_profile())
    return 0

def main():
    sys.exit(run())

if __name__ == "__main__":
    main()
