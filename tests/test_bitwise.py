"""
Tests for bitwise and shift operations
"""

import pytest

from .context import wideint

BigInt = wideint.BigInt


def test_bitwise_ops():
    """Test AND, OR and XOR"""
    a = BigInt(0b1100)
    assert a & 0b1010 == BigInt(0b1000)
    assert a | 0b1010 == BigInt(0b1110)
    assert a ^ 0b1010 == BigInt(0b0110)
    assert 0b1010 & a == BigInt(0b1000)
    assert 0b1010 | a == BigInt(0b1110)
    assert 0b1010 ^ a == BigInt(0b0110)
    assert a == BigInt(0b1100)

    assert BigInt(-1) & (BigInt(1) << 200) == BigInt(1) << 200
    assert (BigInt(-1) ^ BigInt(-1)).is_zero()


def test_invert():
    """Test NOT keeps every word within the word mask"""
    assert (~wideint.zero()).is_minus_one()
    assert ~BigInt(5) == BigInt(-6)
    assert all(w <= 0xFFFFFFFF for w in (~BigInt(5)).words)


def test_bitwise_in_place():
    """Test augmented bitwise assignment"""
    a = BigInt(0b1100)
    b = a
    a &= 0b0110
    a |= 0b0001
    a ^= 0b1000
    assert a is b
    assert a == BigInt(0b1101)
    assert a.invert_() is a
    assert a == BigInt(~0b1101)


def test_bitwise_rejects_floats():
    """Test floats take no part in bitwise operations"""
    with pytest.raises(TypeError):
        BigInt(1) & 1.0
    with pytest.raises(TypeError):
        1.0 | BigInt(1)


def test_shift_left():
    """Test left shifts across word boundaries"""
    n = BigInt(1) << 64
    assert n.words == [0, 0, 1, 0, 0, 0, 0, 0]
    n = BigInt(0xFFFFFFFF) << 4
    assert n.words[0] == 0xFFFFFFF0
    assert n.words[1] == 0xF
    assert n == BigInt(0xFFFFFFFF0)
    assert BigInt(3) << 0 == BigInt(3)


def test_shift_right():
    """Test logical right shifts"""
    assert (BigInt(1) << 70) >> 70 == BigInt(1)
    assert BigInt(0xFFFFFFFF0) >> 4 == BigInt(0xFFFFFFFF)
    # Zero fill, even for negative values
    assert BigInt(-1) >> 255 == BigInt(1)
    assert BigInt(-1) >> 224 == BigInt(0xFFFFFFFF)


def test_shift_out_of_range():
    """Test shifting past the width clears the value"""
    assert (BigInt(1) << 256).is_zero()
    assert (BigInt(-1) << 1000).is_zero()
    assert (BigInt(-1) >> 300).is_zero()
    assert (BigInt(1) << 255).is_negative()


def test_shift_negative_amount():
    """Test negative amounts shift the other way"""
    assert BigInt(8) << -2 == BigInt(2)
    assert BigInt(2) >> -2 == BigInt(8)
    assert BigInt(1) >> -64 == BigInt(1) << 64


def test_shift_inverse():
    """Test (x << n) >> n == x while no bits are shifted out"""
    x = BigInt(0x123456789ABCDEF)
    assert x.bit_length() == 57
    for n in [0, 1, 31, 32, 33, 64, 100, 198]:
        assert (x << n) >> n == x


def test_shift_amounts():
    """Test the kinds of shift amounts accepted"""
    assert BigInt(1) << BigInt(3) == BigInt(8)
    assert BigInt(1) << 2.0 == BigInt(4)
    result = 1 << BigInt(3)
    assert isinstance(result, BigInt)
    assert result == BigInt(8)
    assert 256 >> BigInt(4) == BigInt(16)

    with pytest.raises(OverflowError):
        BigInt(1) << 2**63
    with pytest.raises(OverflowError):
        BigInt(1) >> -(2**63) - 1
    with pytest.raises(OverflowError):
        BigInt(1) << (BigInt(1) << 64)
    with pytest.raises(OverflowError):
        BigInt(1) >> -(BigInt(1) << 63) - 1
    assert BigInt(1) << -(BigInt(1) << 63) == wideint.zero()
    with pytest.raises(ValueError):
        BigInt(1) << 1.5
    with pytest.raises(TypeError):
        BigInt(1) << "1"


def test_shift_in_place():
    """Test augmented shift assignment"""
    a = BigInt(1)
    b = a
    a <<= 40
    assert a is b
    assert a == BigInt(2**40)
    a >>= 8
    assert a == BigInt(2**32)
    assert a.shl_(1) is a
    assert a.shr_(33) is a
    assert a.is_one()
