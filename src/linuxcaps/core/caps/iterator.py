"""Iterator over the members of a capability set.

The iterator snapshots the set's bitmask when it is created and keeps a
cursor (the next bit position to examine). Everything it reports about
the remaining members is derived from ``bits >> cursor``, so the
remaining count and the last member are O(1) queries rather than scans.
"""

from __future__ import annotations

from typing import Iterator

from linuxcaps.core.caps.enumeration import NUM_CAPS, Cap


class CapSetIterator(Iterator[Cap]):
    """Yields the capabilities of a set in ascending bit order.

    Supports ``len()`` (members not yet yielded), ``count()``, ``last()``
    and ``copy()``. Once exhausted it stays exhausted.

    Examples:
        >>> it = capset(Cap.CHOWN, Cap.FOWNER).iter()
        >>> len(it)
        2
        >>> it.last()
        <Cap.FOWNER: 3>
        >>> next(it)
        <Cap.CHOWN: 0>
        >>> len(it)
        1
    """

    __slots__ = ("_bits", "_pos")

    def __init__(self, bits: int, pos: int = 0) -> None:
        self._bits = bits
        self._pos = pos

    def __iter__(self) -> CapSetIterator:
        return self

    def __next__(self) -> Cap:
        rest = self._bits >> self._pos
        if not rest:
            self._pos = NUM_CAPS
            raise StopIteration
        # Isolate the lowest set bit to jump straight to it.
        bit = self._pos + (rest & -rest).bit_length() - 1
        self._pos = bit + 1
        return Cap(bit)

    def __len__(self) -> int:
        return (self._bits >> self._pos).bit_count()

    def __length_hint__(self) -> int:
        return len(self)

    def remaining(self) -> int:
        """Number of members not yet yielded."""
        return len(self)

    def count(self) -> int:
        """Number of members not yet yielded. Does not advance."""
        return len(self)

    def last(self) -> Cap | None:
        """The final member this iterator would yield, without advancing.

        Computed from the bit length of the remaining mask, so it costs the
        same on a fresh iterator as on a nearly exhausted one.
        """
        n = self._bits.bit_length()
        if self._pos < n:
            return Cap.from_bit(n - 1)
        return None

    def copy(self) -> CapSetIterator:
        """An independent iterator positioned at the same cursor."""
        return CapSetIterator(self._bits, self._pos)

    __copy__ = copy

    def __repr__(self) -> str:
        return f"CapSetIterator(remaining={len(self)})"
