"""
Wideint - fixed-width integers built from native words

Signed and unsigned integers of a width chosen at configuration time
(256 bits by default), with wraparound and two's complement semantics.
"""

__version__ = "0.1.0"

from wideint.bigint import (
    BigInt,
    assert_convert,
    convert,
    dec,
    eq,
    inc,
    new,
    one,
    parse,
    ult,
    ule,
    zero,
)
from wideint.dispatch import PROMOTION, Kind, classify, promote
from wideint.division import idiv, idivmod, imod, ipow, udiv, udivmod, umod
from wideint.native import NATIVE_BITS, NATIVE_MAX, NATIVE_MIN, base_step
from wideint.radix import from_base_string, to_base_string
from wideint.width import DEFAULT_BITS, DEFAULT_WORD_BITS, Scale, get_scale, make_scale, scale

from_unsigned = BigInt.from_unsigned
from_signed = BigInt.from_signed
from_float = BigInt.from_float
from_bytes = BigInt.from_bytes

__all__ = [
    # BigInt
    "BigInt",
    "assert_convert",
    "convert",
    "dec",
    "eq",
    "inc",
    "new",
    "one",
    "parse",
    "ult",
    "ule",
    "zero",
    # Construction
    "from_bytes",
    "from_float",
    "from_signed",
    "from_unsigned",
    # Base conversion
    "from_base_string",
    "to_base_string",
    # Division
    "idiv",
    "idivmod",
    "imod",
    "ipow",
    "udiv",
    "udivmod",
    "umod",
    # Dispatch
    "Kind",
    "PROMOTION",
    "classify",
    "promote",
    # Native
    "NATIVE_BITS",
    "NATIVE_MAX",
    "NATIVE_MIN",
    "base_step",
    # Scale
    "DEFAULT_BITS",
    "DEFAULT_WORD_BITS",
    "Scale",
    "get_scale",
    "make_scale",
    "scale",
]
