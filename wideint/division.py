"""
Copyright (c) 2020 Eduardo Bart
Distributed under the MIT software license, see the LICENSE file

Division, modulo and integer power

Unsigned division is binary long division over the word array; signed floor
division and power are built on top of it and on multiplication.
"""

from typing import Tuple

from wideint.bigint import BigInt, assert_convert, new, one, scale_of, zero


def _operands(x, y) -> Tuple[BigInt, BigInt]:
    scale = scale_of(x, y)
    return assert_convert(x, scale), assert_convert(y, scale)


def _udivmod(x: BigInt, y: BigInt) -> Tuple[BigInt, BigInt]:
    """
    Binary restoring long division

    The denominator is shifted up next to the dividend's top bit, then walked
    back down one bit at a time, subtracting it wherever it still fits. What
    is left of the dividend is the remainder.
    """
    scale = x.scale
    current = one(scale)
    dividend = BigInt(x)
    denom = BigInt(y)
    if denom.is_zero():
        raise ZeroDivisionError("attempt to divide by zero")

    overflow = False
    while denom.ule(dividend):
        # Another shift would push the top bit out of the word array
        if denom.words[-1] >= scale.half_max:
            overflow = True
            break
        current.shl_one_()
        denom.shl_one_()
    if not overflow:
        current.shr_one_()
        denom.shr_one_()

    quot = zero(scale)
    while not current.is_zero():
        if denom.ule(dividend):
            dividend.sub_(denom)
            quot.or_(current)
        current.shr_one_()
        denom.shr_one_()
    return quot, dividend


def udiv(x, y) -> BigInt:
    """
    Unsigned division

    Args:
        x: The numerator, a BigInt or native integer
        y: The denominator, a BigInt or native integer

    Raises:
        ZeroDivisionError: If y is zero
        ValueError: If an input has no integer representation
    """
    return _udivmod(*_operands(x, y))[0]


def umod(x, y) -> BigInt:
    """Unsigned remainder"""
    return _udivmod(*_operands(x, y))[1]


def udivmod(x, y) -> Tuple[BigInt, BigInt]:
    """Unsigned quotient and remainder in a single division pass"""
    return _udivmod(*_operands(x, y))


def idiv(x, y) -> BigInt:
    """
    Signed floor division

    The quotient rounds towards minus infinity, as the // operator does for
    native ints.

    Raises:
        ZeroDivisionError: If y is zero
    """
    x, y = _operands(x, y)
    if y.is_minus_one():
        return -x
    quot = _udivmod(abs(x), abs(y))[0]
    if x.is_negative() != y.is_negative():
        quot.neg_()
        rem = x - y * quot
        if not rem.is_zero():
            quot.dec_()
    return quot


def idivmod(x, y) -> Tuple[BigInt, BigInt]:
    """Signed floor quotient and remainder, x == y * quot + rem"""
    x, y = _operands(x, y)
    quot = idiv(x, y)
    return quot, x - quot * y


def imod(x, y) -> BigInt:
    """Signed floor modulo, the remainder takes the sign of y"""
    return idivmod(x, y)[1]


def ipow(x, y) -> BigInt:
    """
    Integer power by squaring

    Args:
        x: The base, a BigInt or native integer
        y: The exponent, a BigInt or native integer, not negative

    Raises:
        ValueError: If y is negative or an input has no integer representation
    """
    scale = scale_of(x, y)
    y = assert_convert(y, scale)
    if y.is_negative():
        raise ValueError("attempt to pow to a negative power")
    if y.is_zero():
        return one(y.scale)
    if y.is_one():
        return new(x, y.scale)

    x, y = new(x, y.scale), BigInt(y)
    z = one(y.scale)
    while True:
        if y.is_even():
            x = x * x
            y.shr_one_()
        else:
            z = x * z
            x = x * x
            y.dec_().shr_one_()
        if y.is_one():
            break
    return x * z
