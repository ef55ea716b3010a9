"""Dense integer sets stored as packed machine words."""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from . import bitset
from .bitset import WORD_BITS, WORD_BYTES, WORD_MASK


class IntegerSet:
    """A set of non-negative integers.

    Integer ``i`` is a member when bit ``i % WORD_BITS`` of word
    ``i // WORD_BITS`` is set. Memory usage is proportional to the largest
    member, not to the number of members.

    The word list may carry trailing zero words after removals; equality and
    serialization ignore them.
    """

    __slots__ = ("_words",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._words: list[int] = []
        for item in items:
            self.add(item)

    # ---- single elements ----
    def _grow(self, w: int) -> None:
        if w >= len(self._words):
            self._words.extend([0] * (w + 1 - len(self._words)))

    def add(self, i: int) -> None:
        """Add ``i`` to the set. Raises ``ValueError`` if ``i`` is negative."""
        if i < 0:
            raise ValueError(f"cannot add negative integer {i} to set")
        w, mask = bitset.word_index(i)
        self._grow(w)
        self._words[w] |= mask

    def remove(self, i: int) -> None:
        """Remove ``i`` from the set, doing nothing if it is not a member."""
        if i < 0:
            return
        w, mask = bitset.word_index(i)
        if w < len(self._words):
            self._words[w] &= ~mask

    def test(self, i: int) -> bool:
        if i < 0:
            return False
        w, mask = bitset.word_index(i)
        if w >= len(self._words):
            return False
        return self._words[w] & mask != 0

    def __contains__(self, i: object) -> bool:
        return isinstance(i, int) and self.test(i)

    # ---- ranges ----
    def add_range(self, low: int, hi: int) -> None:
        """Add every integer in ``[low, hi)``.

        Raises ``ValueError`` if ``low`` is negative. An empty range
        (``hi <= low``) leaves the set unchanged.
        """
        if low < 0:
            raise ValueError(f"cannot add negative integer {low} to set")
        if hi <= low:
            return
        first, last = low // WORD_BITS, (hi - 1) // WORD_BITS
        self._grow(last)
        left, right = bitset.low_mask(low), bitset.high_mask(hi)
        words = self._words
        if first == last:
            words[first] |= left & right
            return
        words[first] |= left
        for j in range(first + 1, last):
            words[j] = WORD_MASK
        words[last] |= right

    def remove_range(self, low: int, hi: int) -> None:
        """Remove every integer in ``[low, hi)``.

        ``low`` is clamped to 0 and ``hi`` to the current capacity; the set
        never grows.
        """
        low = max(low, 0)
        hi = min(hi, len(self._words) * WORD_BITS)
        if hi <= low:
            return
        first, last = low // WORD_BITS, (hi - 1) // WORD_BITS
        left, right = bitset.low_mask(low), bitset.high_mask(hi)
        words = self._words
        if first == last:
            words[first] &= ~(left & right)
            return
        words[first] &= ~left
        for j in range(first + 1, last):
            words[j] = 0
        words[last] &= ~right

    # ---- set algebra ----
    def intersect(self, other: IntegerSet) -> None:
        """Remove members of this set that are not also in ``other``."""
        n = min(len(self._words), len(other._words))
        for i in range(n):
            self._words[i] &= other._words[i]
        del self._words[n:]

    def subtract(self, other: IntegerSet) -> None:
        """Remove members of this set that are also in ``other``."""
        n = min(len(self._words), len(other._words))
        for i in range(n):
            self._words[i] &= ~other._words[i]

    def union(self, other: IntegerSet) -> None:
        """Add the members of ``other`` to this set."""
        n = min(len(self._words), len(other._words))
        for i in range(n):
            self._words[i] |= other._words[i]
        if len(other._words) > n:
            self._words.extend(other._words[n:])

    def symmetric_difference(self, other: IntegerSet) -> None:
        """Keep members in exactly one of this set and ``other``."""
        n = min(len(self._words), len(other._words))
        for i in range(n):
            self._words[i] ^= other._words[i]
        if len(other._words) > n:
            self._words.extend(other._words[n:])

    def __iand__(self, other: object) -> IntegerSet:
        if not isinstance(other, IntegerSet):
            return NotImplemented
        self.intersect(other)
        return self

    def __isub__(self, other: object) -> IntegerSet:
        if not isinstance(other, IntegerSet):
            return NotImplemented
        self.subtract(other)
        return self

    def __ior__(self, other: object) -> IntegerSet:
        if not isinstance(other, IntegerSet):
            return NotImplemented
        self.union(other)
        return self

    def __ixor__(self, other: object) -> IntegerSet:
        if not isinstance(other, IntegerSet):
            return NotImplemented
        self.symmetric_difference(other)
        return self

    def __and__(self, other: object) -> IntegerSet:
        if not isinstance(other, IntegerSet):
            return NotImplemented
        result = self.copy()
        result.intersect(other)
        return result

    def __sub__(self, other: object) -> IntegerSet:
        if not isinstance(other, IntegerSet):
            return NotImplemented
        result = self.copy()
        result.subtract(other)
        return result

    def __or__(self, other: object) -> IntegerSet:
        if not isinstance(other, IntegerSet):
            return NotImplemented
        result = self.copy()
        result.union(other)
        return result

    def __xor__(self, other: object) -> IntegerSet:
        if not isinstance(other, IntegerSet):
            return NotImplemented
        result = self.copy()
        result.symmetric_difference(other)
        return result

    # ---- queries ----
    def cardinality(self) -> int:
        return sum(bitset.count_bits(word) for word in self._words)

    def __len__(self) -> int:
        return self.cardinality()

    def __bool__(self) -> bool:
        return any(self._words)

    def max(self) -> int:
        """Return the largest member, or -1 if the set is empty."""
        for n in range(len(self._words) - 1, -1, -1):
            word = self._words[n]
            if word == 0:
                continue
            return WORD_BITS * (n + 1) - bitset.leading_zeros(word) - 1
        return -1

    def next_after(self, i: int) -> int:
        """Return the smallest member ``>= i``, or -1 if there is none."""
        if i < 0:
            i = 0
        mask = bitset.low_mask(i)
        for j in range(i // WORD_BITS, len(self._words)):
            word = self._words[j] & mask
            mask = WORD_MASK
            if word:
                return j * WORD_BITS + bitset.trailing_zeros(word)
        return -1

    def iter_from(self, start: int) -> Iterator[int]:
        """Yield the members ``>= start`` in ascending order."""
        i = self.next_after(start)
        while i >= 0:
            yield i
            i = self.next_after(i + 1)

    def __iter__(self) -> Iterator[int]:
        return self.iter_from(0)

    def _canonical_length(self) -> int:
        n = len(self._words)
        while n > 0 and self._words[n - 1] == 0:
            n -= 1
        return n

    def word_count(self) -> int:
        """Number of words up to and including the last nonzero one."""
        return self._canonical_length()

    def copy(self) -> IntegerSet:
        """Return an independent copy without trailing zero words."""
        result = IntegerSet()
        result._words = self._words[: self._canonical_length()]
        return result

    def equal(self, other: IntegerSet) -> bool:
        n = self._canonical_length()
        if n != other._canonical_length():
            return False
        return self._words[:n] == other._words[:n]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegerSet):
            return NotImplemented
        return self.equal(other)

    def __str__(self) -> str:
        return "[" + " ".join(str(i) for i in self) + "]"

    def __repr__(self) -> str:
        return f"IntegerSet({self})"

    # ---- serialization ----
    def to_bytes(self) -> bytes:
        """Serialize the set as a bit array.

        The most significant bit of the first byte represents 0, the next bit
        1, and so on. Trailing zero bytes are stripped.
        """
        data = b"".join(
            bitset.word_to_bytes(bitset.reverse_bits(word)) for word in self._words
        )
        return data.rstrip(b"\x00")

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> IntegerSet:
        """Build a set from the format produced by :meth:`to_bytes`."""
        data = bytes(data)
        data += b"\x00" * (-len(data) % WORD_BYTES)
        result = cls()
        result._words = [
            bitset.reverse_bits(bitset.word_from_bytes(data[k : k + WORD_BYTES]))
            for k in range(0, len(data), WORD_BYTES)
        ]
        return result
