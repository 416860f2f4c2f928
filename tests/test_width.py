"""
Tests for the integer width configuration
"""

import pytest

from .context import wideint


def test_make_scale_default():
    """Test the default 256-bit configuration"""
    s = wideint.make_scale(256)
    assert s.bits == 256
    assert s.word_bits == 32
    assert s.word_count == 8
    assert s.word_mask == 0xFFFFFFFF
    assert s.sign_bit == 0x80000000
    assert s.half_max == 0x80000000
    assert s.byte_count == 32
    assert s.struct_format == "<8I"


def test_make_scale_small_words():
    """Test configurations with 8 and 16 bit words"""
    s = wideint.make_scale(64, 8)
    assert s.word_count == 8
    assert s.word_mask == 0xFF
    assert s.sign_bit == 0x80
    assert s.half_max == 0x80
    assert s.struct_format == "<8B"

    s = wideint.make_scale(128, 16)
    assert s.word_count == 8
    assert s.word_mask == 0xFFFF
    assert s.struct_format == "<8H"


def test_make_scale_rejects():
    """Test invalid width configurations are rejected"""
    with pytest.raises(ValueError, match="multiple"):
        wideint.make_scale(100)
    with pytest.raises(ValueError, match="half"):
        wideint.make_scale(128, 64)
    with pytest.raises(ValueError, match=">= 64"):
        wideint.make_scale(32)
    with pytest.raises(ValueError):
        wideint.make_scale(96, 24)


def test_get_scale_default():
    """Test values default to the process-wide scale"""
    assert wideint.BigInt(1).scale == wideint.get_scale()
    assert len(wideint.BigInt(1).words) == wideint.get_scale().word_count


def test_scale_sets_default():
    """Test scale() changes the width of values created afterwards"""
    previous = wideint.get_scale()
    old = wideint.BigInt(5)
    try:
        s = wideint.scale(512)
        assert wideint.get_scale() is s
        assert s.word_count == 16
        assert len(wideint.BigInt(1).words) == 16

        # Old values keep their own width
        assert old.scale == previous
        assert int(old + 1) == 6
    finally:
        wideint.scale(previous.bits, previous.word_bits)


def test_mixed_scales_rejected():
    """Test values of different widths cannot be combined"""
    small = wideint.BigInt(1, scale=wideint.make_scale(64))
    large = wideint.BigInt(1)

    with pytest.raises(ValueError):
        small + large
    with pytest.raises(ValueError):
        small.add_(large)
    with pytest.raises(ValueError):
        wideint.BigInt(large, scale=small.scale)
    assert small != large


def test_scale_str():
    """Test scale description"""
    assert str(wideint.make_scale(256)) == "256-bit (8 x 32-bit words)"
