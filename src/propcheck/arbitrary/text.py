# src/propcheck/arbitrary/text.py
"""Characters and strings.

Strings are sequences of characters joined together, so they shrink like
sequences: first to the empty string, then by dropping characters, then
by moving retained characters toward the lowest code point of their
domain.
"""

from __future__ import annotations

from propcheck.arbitrary.array import DEFAULT_MAX_LENGTH, SequenceArbitrary
from propcheck.arbitrary.base import Arbitrary
from propcheck.arbitrary.numeric import IntegerArbitrary

PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E
ASCII_MAX = 0x7F
MAX_CODE_POINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_COUNT = 0x800


def _skip_surrogates(index: int) -> str:
    """Map 0..(MAX_CODE_POINT - SURROGATE_COUNT) onto non-surrogate characters."""
    return chr(index if index < SURROGATE_MIN else index + SURROGATE_COUNT)


def char() -> Arbitrary[str]:
    """Printable ASCII characters (space to tilde)."""
    return IntegerArbitrary(PRINTABLE_MIN, PRINTABLE_MAX).map(chr)


def ascii_char() -> Arbitrary[str]:
    """Any 7-bit ASCII character, control characters included."""
    return IntegerArbitrary(0, ASCII_MAX).map(chr)


def unicode_char() -> Arbitrary[str]:
    """Any Unicode code point except UTF-16 surrogates."""
    return IntegerArbitrary(0, MAX_CODE_POINT - SURROGATE_COUNT).map(_skip_surrogates)


def string_of(characters: Arbitrary[str], max_length: int = DEFAULT_MAX_LENGTH) -> Arbitrary[str]:
    """Strings of up to ``max_length`` characters drawn from ``characters``."""
    return SequenceArbitrary(characters, max_length).map("".join)


def string(max_length: int = DEFAULT_MAX_LENGTH) -> Arbitrary[str]:
    """Printable ASCII strings."""
    return string_of(char(), max_length)


def ascii_string(max_length: int = DEFAULT_MAX_LENGTH) -> Arbitrary[str]:
    """7-bit ASCII strings."""
    return string_of(ascii_char(), max_length)


def unicode_string(max_length: int = DEFAULT_MAX_LENGTH) -> Arbitrary[str]:
    """Strings over the full (non-surrogate) Unicode range."""
    return string_of(unicode_char(), max_length)
