"""Sets of small non-negative integers kept as bit masks."""

from __future__ import annotations

from typing import Iterable, Iterator

WORD_BITS = 64
_WORD_MASK = (1 << WORD_BITS) - 1


def _set_bits(mask: int) -> Iterator[int]:
    while mask:
        lowest = mask & -mask
        yield lowest.bit_length() - 1
        mask ^= lowest


def iter_int_slices(words: Iterable[int]) -> Iterator[int]:
    """Yield the numbers of the set bits in consecutive 64-bit words, ascending."""
    for index, word in enumerate(words):
        base = index * WORD_BITS
        for bit in _set_bits(word & _WORD_MASK):
            yield base + bit


def _checked(value: int) -> int:
    if value < 0:
        raise ValueError(f"negative value {value} cannot be stored")
    return value


class IntSet:
    """A growable set of non-negative integers."""

    __slots__ = ("_mask",)

    def __init__(self, values: Iterable[int] = ()):
        self._mask = 0
        for value in values:
            self.insert(value)

    @classmethod
    def with_maximum(cls, maximum: int) -> IntSet:
        """Create an empty set meant to hold values up to maximum."""
        _checked(maximum)
        return cls()

    def insert(self, value: int) -> bool:
        """Add value; return True if it was not present before."""
        bit = 1 << _checked(value)
        if self._mask & bit:
            return False
        self._mask |= bit
        return True

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or value < 0:
            return False
        return bool((self._mask >> value) & 1)

    def __iter__(self) -> Iterator[int]:
        return _set_bits(self._mask)

    def __len__(self) -> int:
        return bin(self._mask).count("1")

    def copy(self) -> IntSet:
        """Return an independent copy."""
        duplicate = IntSet()
        duplicate._mask = self._mask
        return duplicate

    __copy__ = copy

    def __repr__(self) -> str:
        return f"IntSet(len={len(self)})"


class ArraySet64:
    """A set of integers below a fixed capacity of 64 bits per word."""

    __slots__ = ("capacity", "_mask")

    def __init__(self, words: int = 1):
        if words < 0:
            raise ValueError("word count must not be negative")
        self.capacity = words * WORD_BITS
        self._mask = 0

    def _bit(self, value: int) -> int:
        if not 0 <= value < self.capacity:
            raise ValueError(f"{value} outside the range 0..{self.capacity}")
        return 1 << value

    def insert(self, value: int) -> None:
        """Add value, which must be below the capacity."""
        self._mask |= self._bit(value)

    def __contains__(self, value: int) -> bool:
        return bool(self._mask & self._bit(value))

    def __iter__(self) -> Iterator[int]:
        return _set_bits(self._mask)

    def __len__(self) -> int:
        return bin(self._mask).count("1")

    def __repr__(self) -> str:
        return f"ArraySet64(capacity={self.capacity}, len={len(self)})"