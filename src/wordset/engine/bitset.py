"""Single-word bit arithmetic helpers."""
from __future__ import annotations

import os
import sys


def _detect_word_bits() -> int:
    override = os.getenv("WORDSET_WORD_BITS", "").strip()
    if override:
        try:
            return int(override)
        except ValueError:
            raise RuntimeError(f"word size must be 32 or 64 bits, got {override!r}") from None
    return sys.maxsize.bit_length() + 1


WORD_BITS = _detect_word_bits()
if WORD_BITS not in (32, 64):
    raise RuntimeError(f"word size must be 32 or 64 bits, got {WORD_BITS}")

WORD_BYTES = WORD_BITS // 8
WORD_MASK = (1 << WORD_BITS) - 1


def all_ones(bits: int = WORD_BITS) -> int:
    return (1 << bits) - 1


def word_index(i: int, bits: int = WORD_BITS) -> tuple[int, int]:
    """Return the word holding integer ``i`` and the bit selecting it.

    Only defined for ``i >= 0``; callers reject or ignore negative indexes.
    """
    return i // bits, 1 << (i % bits)


def low_mask(low: int, bits: int = WORD_BITS) -> int:
    """Mask of the bits at or above ``low`` within its word."""
    return (all_ones(bits) << (low % bits)) & all_ones(bits)


def high_mask(hi: int, bits: int = WORD_BITS) -> int:
    """Mask of the bits strictly below ``hi`` within the word holding ``hi - 1``."""
    return all_ones(bits) >> ((bits - hi) % bits)


# Optimize bit counting based on Python version (cached at module load time)
if sys.version_info >= (3, 10):
    def count_bits(value: int) -> int:
        """Count the number of set bits using native int.bit_count() (Python 3.10+)."""
        return value.bit_count()
else:
    def count_bits(value: int) -> int:
        """Count the number of set bits using bin().count('1') (Python 3.9)."""
        return bin(value).count('1')


def leading_zeros(word: int, bits: int = WORD_BITS) -> int:
    return bits - word.bit_length()


def trailing_zeros(word: int, bits: int = WORD_BITS) -> int:
    if word == 0:
        return bits
    return (word & -word).bit_length() - 1


def reverse_bits(word: int, bits: int = WORD_BITS) -> int:
    """Reverse the order of all ``bits`` bits of ``word``, end to end."""
    return int(format(word, f"0{bits}b")[::-1], 2)


def word_to_bytes(word: int, bits: int = WORD_BITS) -> bytes:
    return word.to_bytes(bits // 8, "big")


def word_from_bytes(chunk: bytes) -> int:
    return int.from_bytes(chunk, "big")
