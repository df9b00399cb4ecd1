"""CapSet: a set of Linux capabilities stored as a 64-bit bitmask.

The kernel represents every capability set as a bitmask where bit ``n``
stands for the capability numbered ``n``. ``CapSet`` keeps that
representation, which makes membership tests, set algebra and counting
constant-time integer operations instead of hash-set work.

Masking Policy
--------------
No bit outside ``[0, NUM_CAPS)`` is ever stored. Sets built from raw
integers (``from_bitmask_truncate``, ``from_bitmasks_u32``) silently drop
the bits this build does not know about rather than failing. A newer
kernel exposing more capabilities therefore never breaks decoding on an
older build; the unknown capabilities are simply not represented.

Complement is truncated the same way, so ``~CapSet.full()`` is empty.
"""

from __future__ import annotations

from typing import Iterable

from linuxcaps.core.caps.enumeration import CAP_BITMASK, Cap
from linuxcaps.core.caps.iterator import CapSetIterator

_U32_MASK = 0xFFFF_FFFF


class CapSet:
    """A set of capabilities backed by an integer bitmask.

    Single-capability mutations (``add``, ``drop``, ``set_state``,
    ``add_all``, ``drop_all``, ``clear``) and the augmented operators
    (``|=``, ``&=``, ``^=``, ``-=``) change the set in place. The binary
    operators (``|``, ``&``, ``^``, ``-``, ``~``) and the named methods
    ``union`` / ``intersection`` return new sets.

    Equality and hashing compare the bitmask.

    Examples:
        >>> s = CapSet.empty()
        >>> s.add(Cap.NET_RAW)
        >>> s.add(Cap.CHOWN)
        >>> str(s)
        '{CHOWN, NET_RAW}'
        >>> Cap.NET_RAW in s
        True
    """

    __slots__ = ("_bits",)

    def __init__(self, caps: Iterable[Cap] = ()) -> None:
        self._bits = 0
        self.add_all(caps)

    # -- construction --------------------------------------------------

    @classmethod
    def empty(cls) -> CapSet:
        """Create an empty capability set."""
        return cls()

    @classmethod
    def full(cls) -> CapSet:
        """Create a set holding every capability this build knows about."""
        return cls.from_bitmask_truncate(CAP_BITMASK)

    @classmethod
    def from_iterable(cls, caps: Iterable[Cap]) -> CapSet:
        """Create a set from any iterable of capabilities."""
        return cls(caps)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> CapSet:
        """Create a set from capability names (see ``Cap.from_name``).

        Raises:
            ValueError: If any name is not a known capability.
        """
        return cls(Cap.from_name(name) for name in names)

    @classmethod
    def from_bitmask_truncate(cls, bitmask: int) -> CapSet:
        """Create a set from a raw bitmask, discarding unknown bits."""
        res = cls()
        res._bits = bitmask & CAP_BITMASK
        return res

    @classmethod
    def from_bitmasks_u32(cls, lower: int, upper: int) -> CapSet:
        """Create a set from the low and high 32-bit halves of a bitmask."""
        return cls.from_bitmask_truncate(
            ((upper & _U32_MASK) << 32) | (lower & _U32_MASK)
        )

    @property
    def bits(self) -> int:
        """The underlying bitmask."""
        return self._bits

    def copy(self) -> CapSet:
        """Return an independent set with the same members."""
        return CapSet.from_bitmask_truncate(self._bits)

    __copy__ = copy

    # -- queries -------------------------------------------------------

    def is_empty(self) -> bool:
        """Return True if the set has no members."""
        return self._bits == 0

    def size(self) -> int:
        """Return the number of capabilities in the set."""
        return self._bits.bit_count()

    def has(self, cap: Cap) -> bool:
        """Return True if ``cap`` is in the set."""
        return self._bits & cap.bitmask != 0

    # -- single-capability mutation ------------------------------------

    def add(self, cap: Cap) -> None:
        """Add ``cap`` to the set."""
        self._bits |= cap.bitmask

    def drop(self, cap: Cap) -> None:
        """Remove ``cap`` from the set. Removing an absent member is a no-op."""
        self._bits &= ~cap.bitmask

    def set_state(self, cap: Cap, val: bool) -> None:
        """Add ``cap`` if ``val`` is true, otherwise remove it."""
        if val:
            self.add(cap)
        else:
            self.drop(cap)

    def add_all(self, caps: Iterable[Cap]) -> None:
        """Add every capability yielded by ``caps``.

        To merge another ``CapSet`` use ``a | b`` (or ``a |= b``); passing a
        set here works but walks it member by member.
        """
        for cap in caps:
            self.add(cap)

    def drop_all(self, caps: Iterable[Cap]) -> None:
        """Remove every capability yielded by ``caps``.

        To subtract another ``CapSet`` use ``a - b`` (or ``a & ~b``).
        """
        for cap in caps:
            self.drop(cap)

    def clear(self) -> None:
        """Remove all capabilities from the set."""
        self._bits = 0

    # -- set algebra ---------------------------------------------------

    def union(self, other: CapSet) -> CapSet:
        """Capabilities in either set."""
        return CapSet.from_bitmask_truncate(self._bits | other._bits)

    def intersection(self, other: CapSet) -> CapSet:
        """Capabilities in both sets."""
        return CapSet.from_bitmask_truncate(self._bits & other._bits)

    def __or__(self, other: object) -> CapSet:
        if not isinstance(other, CapSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> CapSet:
        if not isinstance(other, CapSet):
            return NotImplemented
        return self.intersection(other)

    def __xor__(self, other: object) -> CapSet:
        if not isinstance(other, CapSet):
            return NotImplemented
        return CapSet.from_bitmask_truncate(self._bits ^ other._bits)

    def __sub__(self, other: object) -> CapSet:
        if not isinstance(other, CapSet):
            return NotImplemented
        return CapSet.from_bitmask_truncate(self._bits & ~other._bits)

    def __invert__(self) -> CapSet:
        return CapSet.from_bitmask_truncate(~self._bits)

    def __ior__(self, other: object) -> CapSet:
        if not isinstance(other, CapSet):
            return NotImplemented
        self._bits |= other._bits
        return self

    def __iand__(self, other: object) -> CapSet:
        if not isinstance(other, CapSet):
            return NotImplemented
        self._bits &= other._bits
        return self

    def __ixor__(self, other: object) -> CapSet:
        if not isinstance(other, CapSet):
            return NotImplemented
        self._bits ^= other._bits
        return self

    def __isub__(self, other: object) -> CapSet:
        if not isinstance(other, CapSet):
            return NotImplemented
        self._bits &= ~other._bits
        return self

    # -- container protocol --------------------------------------------

    def iter(self) -> CapSetIterator:
        """Return an iterator over the members in ascending bit order."""
        return CapSetIterator(self._bits)

    def __iter__(self) -> CapSetIterator:
        return self.iter()

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self._bits != 0

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Cap):
            return False
        return self.has(item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CapSet):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __str__(self) -> str:
        return "{" + ", ".join(cap.name for cap in self) + "}"

    def __repr__(self) -> str:
        return f"CapSet({self})"


def capset(*caps: Cap) -> CapSet:
    """Build a ``CapSet`` from a fixed list of capabilities.

    The set-literal helper: ``capset(Cap.CHOWN, Cap.SYSLOG)`` is the set
    ``{CHOWN, SYSLOG}`` and ``capset()`` is the empty set. Suitable for
    module-level constants.
    """
    bits = 0
    for cap in caps:
        bits |= 1 << cap
    return CapSet.from_bitmask_truncate(bits)
