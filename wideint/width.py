"""
Copyright (c) 2020 Eduardo Bart
Distributed under the MIT software license, see the LICENSE file

Integer width configuration - word count and masks every value is built with
"""

from threading import Lock
from typing import NamedTuple, Optional

from wideint.native import NATIVE_BITS

DEFAULT_BITS = 256
DEFAULT_WORD_BITS = NATIVE_BITS // 2

# Word sizes the struct packing in to_bytes()/from_bytes() can express
WORD_FORMATS = {8: "B", 16: "H", 32: "I"}


class Scale(NamedTuple):
    """Fixed width of a family of integers"""

    bits: int
    word_bits: int
    word_count: int
    word_mask: int
    sign_bit: int
    half_max: int

    @property
    def byte_count(self) -> int:
        return self.bits // 8

    @property
    def struct_format(self) -> str:
        """Little-endian struct format packing all words"""
        return f"<{self.word_count}{WORD_FORMATS[self.word_bits]}"

    def __str__(self):
        return f"{self.bits}-bit ({self.word_count} x {self.word_bits}-bit words)"


def make_scale(bits: int, word_bits: int = DEFAULT_WORD_BITS) -> Scale:
    """
    Build the configuration for integers of the desired bit size

    Args:
        bits: Total width, a multiple of word_bits and at least 64
        word_bits: Width of one internal word, at most half the native width

    Raises:
        ValueError: If the combination cannot be represented
    """
    if word_bits <= 0 or bits % word_bits != 0:
        raise ValueError("bitsize is not multiple of word bitsize")
    if 2 * word_bits > NATIVE_BITS:
        raise ValueError("word bitsize must be half of the native integer bitsize")
    if word_bits not in WORD_FORMATS:
        raise ValueError("word bitsize must be 8, 16 or 32")
    if bits < 64:
        raise ValueError("bitsize must be >= 64")

    word_mask = (1 << word_bits) - 1
    return Scale(
        bits=bits,
        word_bits=word_bits,
        word_count=bits // word_bits,
        word_mask=word_mask,
        sign_bit=1 << (word_bits - 1),
        half_max=1 + word_mask // 2,
    )


# Default scale used by constructors not given one explicitly
_default_scale: Optional[Scale] = None
_scale_lock = Lock()


def scale(bits: int, word_bits: Optional[int] = None) -> Scale:
    """
    Set the default integer width for values created from now on

    Values created earlier keep the scale they were built with; mixing them
    with values of the new scale raises ValueError.
    """
    global _default_scale
    new_scale = make_scale(bits, DEFAULT_WORD_BITS if word_bits is None else word_bits)
    with _scale_lock:
        _default_scale = new_scale
    return new_scale


def get_scale() -> Scale:
    """Get the default integer width"""
    global _default_scale
    with _scale_lock:
        if _default_scale is None:
            _default_scale = make_scale(DEFAULT_BITS, DEFAULT_WORD_BITS)
        return _default_scale
