#!/usr/bin/env python3
##############################################################################
##                                                                          ##
##                                EXACTQ                                    ##
##                                                                          ##
##              Copyright (C) 2019-2026, Florian Schanda                    ##
##                                                                          ##
##  This file is part of ExactQ.                                            ##
##                                                                          ##
##  ExactQ is free software: you can redistribute it and/or modify          ##
##  it under the terms of the GNU General Public License as published by    ##
##  the Free Software Foundation, either version 3 of the License, or       ##
##  (at your option) any later version.                                     ##
##                                                                          ##
##  ExactQ is distributed in the hope that it will be useful,               ##
##  but WITHOUT ANY WARRANTY; without even the implied warranty of          ##
##  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the           ##
##  GNU General Public License for more details.                            ##
##                                                                          ##
##  You should have received a copy of the GNU General Public License       ##
##  along with ExactQ. If not, see <http://www.gnu.org/licenses/>.          ##
##                                                                          ##
##############################################################################

# Command-line evaluator for exact rational expressions, written in
# reverse Polish notation. For example:
#
#    $ exactq-eval 1 3 / 3 '*'
#    1/1
#    $ exactq-eval --float 1/3
#    0.3333333333333333
#
# Operands are canonical rationals ("n/d"), integers, or decimal
# literals ("0.1", "1.5E-3"). Negative operands need a "--" in front
# of the expression so they are not mistaken for options.

import argparse
import logging
import operator
import sys

from .errors import Exact_Error, Malformed_Input
from .rationals import (RM_RNE, ROUNDING_MODES, DECIMAL_LITERAL,
                        q_from_string, q_from_decimal_string)
from .decimals import DEFAULT_DECIMAL_PRECISION, q_to_decimal

logger = logging.getLogger(__name__)

# 10 ** exponent is built exactly, so operands bound it
MAX_OPERAND_EXPONENT = 100000

class Rational_Operation(object):
    def __init__(self, name, arity, function):
        self.name     = name
        self.arity    = arity
        self.function = function

Q_OPS = {
    "+"   : Rational_Operation("+",   2, operator.add),
    "-"   : Rational_Operation("-",   2, operator.sub),
    "*"   : Rational_Operation("*",   2, operator.mul),
    "/"   : Rational_Operation("/",   2, operator.truediv),
    "pow" : Rational_Operation("pow", 2, operator.pow),
    "neg" : Rational_Operation("neg", 1, operator.neg),
    "abs" : Rational_Operation("abs", 1, operator.abs),
    "inv" : Rational_Operation("inv", 1, lambda q: q.reciprocal()),
}

def q_parse_operand(token):
    """Read one operand, as a fraction or as a decimal literal

    A decimal exponent larger than MAX_OPERAND_EXPONENT in magnitude
    raises :class:`.Malformed_Input`.
    """
    if "/" in token:
        return q_from_string(token)

    match = DECIMAL_LITERAL.fullmatch(token)
    if match is not None and match.group(4) is not None:
        digits = match.group(4).lstrip("+-").lstrip("0")
        if (len(digits) > len(str(MAX_OPERAND_EXPONENT)) or
            int(digits or "0") > MAX_OPERAND_EXPONENT):
            raise Malformed_Input(token,
                                  "exponent beyond %u" % MAX_OPERAND_EXPONENT)
    return q_from_decimal_string(token)

def q_eval(tokens):
    """Evaluate a list of RPN tokens, returns a Rational"""
    stack = []
    for token in tokens:
        if token in Q_OPS:
            op = Q_OPS[token]
            if len(stack) < op.arity:
                raise Malformed_Input(token,
                                      "needs %u operand(s), stack has %u" %
                                      (op.arity, len(stack)))
            args = stack[-op.arity:]
            del stack[-op.arity:]
            try:
                stack.append(op.function(*args))
            except TypeError as err:
                # e.g. a non-integral exponent
                raise Malformed_Input(token, str(err)) from err
            logger.debug("%s %s -> %s",
                         op.name, " ".join(map(str, args)), stack[-1])
        else:
            stack.append(q_parse_operand(token))

    if len(stack) != 1:
        raise Malformed_Input(" ".join(tokens),
                              "expression leaves %u values" % len(stack))
    return stack[0]

def main(argv=None):
    ap = argparse.ArgumentParser(
        description="Evaluate an exact rational expression in RPN.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    ap.add_argument("tokens", metavar="TOKEN", nargs="+",
                    help=("Operands (n/d, integers, decimals) and "
                          "operators (%s)." % " ".join(sorted(Q_OPS))))
    output = ap.add_mutually_exclusive_group()
    output.add_argument("--float", action="store_true",
                        help="Print the nearest binary64 float.")
    output.add_argument("--decimal", action="store_true",
                        help="Print the nearest decimal.")
    ap.add_argument("--precision", metavar="N", type=int,
                    default=DEFAULT_DECIMAL_PRECISION,
                    help="Significant digits for --decimal.")
    ap.add_argument("--rounding", choices=ROUNDING_MODES,
                    default=RM_RNE,
                    help="Rounding mode for --float and --decimal.")
    ap.add_argument("--no-suffix", dest="whole_suffix",
                    action="store_false", default=True,
                    help="Print whole numbers without '/1'.")
    ap.add_argument("--verbose", action="store_true",
                    help="Log each evaluation step.")
    options = ap.parse_args(argv)

    if options.precision < 1:
        ap.error("--precision must be at least 1")

    logging.basicConfig(level=(logging.DEBUG if options.verbose
                               else logging.WARNING),
                        format="%(name)s: %(levelname)s: %(message)s")

    try:
        q = q_eval(options.tokens)
    except Exact_Error as err:
        logger.error("%s", err)
        return 1

    if options.float:
        print(repr(q.to_python_float(options.rounding)))
    elif options.decimal:
        print(q_to_decimal(q, options.precision, options.rounding))
    else:
        print(q.to_string(options.whole_suffix))
    return 0

if __name__ == "__main__":
    sys.exit(main())
