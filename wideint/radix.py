"""
Copyright (c) 2020 Eduardo Bart
Distributed under the MIT software license, see the LICENSE file

Base 2 to 36 string conversion

Digits are read and written in chunks of base_step(base) digits so that most
of the work happens on native integers instead of on the word array.
"""

import re
from typing import Optional

from wideint.bigint import BigInt, convert, zero
from wideint.division import udivmod
from wideint.native import BASE_DIGITS, MAX_BASE, MIN_BASE, base_step
from wideint.width import Scale

_INTEGER_RE = re.compile(r"([+-]?)([0-9a-z]+)")
_DIGIT_VALUES = {c: i for i, c in enumerate(BASE_DIGITS)}


def from_base_string(s: str, base: int = 10, scale: Optional[Scale] = None) -> Optional[BigInt]:
    """
    Create a BigInt from a string in the desired base

    Args:
        s: Optional sign followed by alphanumeric digits, case insensitive
        base: Number base, at least 2 and at most 36
        scale: Width of the result, defaults to get_scale()

    Returns:
        A new BigInt, or None if s is not a valid number in base
    """
    if not isinstance(s, str):
        return None
    if not MIN_BASE <= base <= MAX_BASE:
        return None
    # lower() would fold some non-ASCII letters into digits
    if not s.isascii():
        return None
    match = _INTEGER_RE.fullmatch(s.lower())
    if match is None:
        return None
    sign, digits = match.groups()
    if any(_DIGIT_VALUES[c] >= base for c in digits):
        return None

    n = zero(scale)
    step = base_step(base)
    for i in range(0, len(digits), step):
        part = digits[i : i + step]
        n.mul_(base ** len(part)).add_(int(part, base))
    if sign == "-":
        n.neg_()
    return n


def to_base_string(x, base: int = 10, unsigned: Optional[bool] = None) -> Optional[str]:
    """
    Convert a value to a string in the desired base

    Args:
        x: A BigInt, or a value convertible to one
        base: Number base, at least 2 and at most 36
        unsigned: Whether to output as unsigned, defaults to True except for base 10

    Returns:
        The digits, lowercase, with a '-' prefix for negative signed output,
        or None if x or base is invalid
    """
    x = convert(x)
    if x is None:
        return None
    if not MIN_BASE <= base <= MAX_BASE:
        return None
    if unsigned is None:
        unsigned = base != 10
    neg = not unsigned and x.is_negative()
    if neg:
        x = abs(x)
    if x.is_zero():
        return "0"

    step = base_step(base)
    divisor = base**step
    digits = []
    stop = False
    while not stop:
        x, rem = udivmod(x, divisor)
        chunk = rem.to_signed()
        stop = x.is_zero()
        for _ in range(step):
            chunk, d = divmod(chunk, base)
            # Leading zeros of the most significant chunk
            if stop and chunk == 0 and d == 0:
                break
            digits.append(BASE_DIGITS[d])
    if neg:
        digits.append("-")
    return "".join(reversed(digits))
