"""
Copyright (c) 2020 Eduardo Bart
Distributed under the MIT software license, see the LICENSE file

Native integer model - the 64-bit machine integer the word arithmetic is built on
"""

import math
import numbers
from typing import Dict, Optional, Union

NATIVE_BITS = 64
NATIVE_MAX = (1 << (NATIVE_BITS - 1)) - 1
NATIVE_MIN = -(1 << (NATIVE_BITS - 1))
NATIVE_MASK = (1 << NATIVE_BITS) - 1

# Digits used by base conversions, index == digit value
BASE_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = 36

_base_steps: Dict[int, int] = {}


def wrap_native(n: int) -> int:
    """Wrap an int into the signed native range (two's complement)"""
    n &= NATIVE_MASK
    if n > NATIVE_MAX:
        n -= 1 << NATIVE_BITS
    return n


def is_native(n: int) -> bool:
    """Check if an int fits the signed native range"""
    return NATIVE_MIN <= n <= NATIVE_MAX


def to_integer(x) -> Optional[int]:
    """
    Convert a value to an int without losing precision

    Floats are accepted only when they have no fractional part.

    Returns:
        The int, or None if x has no integer representation
    """
    if isinstance(x, numbers.Integral):
        return int(x)
    if isinstance(x, numbers.Real):
        x = float(x)
        if not math.isfinite(x) or not x.is_integer():
            return None
        return int(x)
    return None


def to_number(x) -> Optional[Union[int, float]]:
    """
    Convert a value to a native number

    Accepts ints, floats and numeric strings (as int() or float() read them).
    """
    if isinstance(x, numbers.Integral):
        return int(x)
    if isinstance(x, numbers.Real):
        return float(x)
    if isinstance(x, str):
        try:
            return int(x)
        except ValueError:
            pass
        try:
            return float(x)
        except ValueError:
            return None
    return None


def base_step(base: int) -> int:
    """
    Number of digits of a base processed per native chunk

    The smallest step where base ** step reaches NATIVE_MAX // base, so
    base ** step itself still fits a native integer.
    """
    step = _base_steps.get(base)
    if step is not None:
        return step
    step = 0
    dmax = 1
    limit = NATIVE_MAX // base
    while True:
        step += 1
        dmax *= base
        if dmax >= limit:
            break
    _base_steps[base] = step
    return step
