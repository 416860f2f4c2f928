"""
Copyright (c) 2020 Eduardo Bart
Distributed under the MIT software license, see the LICENSE file

Command line entry point - evaluate one fixed-width integer operation
"""

import argparse
import operator
import sys
from typing import List, Optional

from wideint.bigint import BigInt, ult, ule
from wideint.division import udiv, umod
from wideint.radix import from_base_string
from wideint.util import error
from wideint.width import DEFAULT_BITS, DEFAULT_WORD_BITS, make_scale

OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "//": operator.floordiv,
    "%": operator.mod,
    "**": operator.pow,
    "&": operator.and_,
    "|": operator.or_,
    "^": operator.xor,
    "<<": operator.lshift,
    ">>": operator.rshift,
    "udiv": udiv,
    "umod": umod,
    "ult": ult,
    "ule": ule,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wideint",
        description="Evaluate an operation on fixed-width integers",
    )
    parser.add_argument("x", help="left operand")
    parser.add_argument("op", nargs="?", choices=list(OPERATORS), help="operator")
    parser.add_argument("y", nargs="?", help="right operand")
    parser.add_argument("--bits", type=int, default=DEFAULT_BITS, help="integer width")
    parser.add_argument(
        "--word-bits", type=int, default=DEFAULT_WORD_BITS, help="internal word width"
    )
    parser.add_argument("--input-base", type=int, default=10, help="base of the operands")
    parser.add_argument("--base", type=int, default=10, help="base of the result")
    parser.add_argument(
        "--unsigned",
        action="store_true",
        default=None,
        help="print the result as unsigned (the default for bases other than 10)",
    )
    return parser


def format_result(result, base: int, unsigned: Optional[bool]) -> Optional[str]:
    """Render an operation result, None if base is invalid"""
    if isinstance(result, bool):
        return "true" if result else "false"
    if isinstance(result, BigInt):
        return result.to_base_string(base, unsigned)
    return repr(result)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        int_scale = make_scale(args.bits, args.word_bits)
    except ValueError as e:
        error("invalid integer width: %s", e)
        return 1

    x = from_base_string(args.x, args.input_base, int_scale)
    if x is None:
        error("invalid number %r in base %d", args.x, args.input_base)
        return 1

    if args.op is None:
        result = x
    else:
        if args.y is None:
            error("operator %s needs a right operand", args.op)
            return 1
        y = from_base_string(args.y, args.input_base, int_scale)
        if y is None:
            error("invalid number %r in base %d", args.y, args.input_base)
            return 1
        try:
            result = OPERATORS[args.op](x, y)
        except (ArithmeticError, ValueError) as e:
            error("%s %s %s : %s", args.x, args.op, args.y, e)
            return 1

    text = format_result(result, args.base, args.unsigned)
    if text is None:
        error("invalid output base %d", args.base)
        return 1
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
