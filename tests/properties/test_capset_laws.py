"""Property-based tests for CapSet algebra and iteration.

Verifies the boolean-algebra identities over the capability universe,
the agreement between size() and iteration, and the O(1) iterator
queries (remaining length, last()) against brute-force answers.
"""
from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from linuxcaps.core.caps import CAP_BITMASK, Cap, CapSet


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

caps = st.sampled_from(list(Cap))
capsets = st.integers(min_value=0, max_value=CAP_BITMASK).map(CapSet.from_bitmask_truncate)
raw_bitmasks = st.integers(min_value=0, max_value=(1 << 64) - 1)


# ---------------------------------------------------------------------------
# Boolean algebra
# ---------------------------------------------------------------------------


class TestAlgebraLaws:
    """Identities every Boolean algebra satisfies."""

    @given(a=capsets)
    def test_complement_union_is_full(self, a: CapSet) -> None:
        """a | ~a == full."""
        assert a | ~a == CapSet.full()

    @given(a=capsets)
    def test_complement_intersection_is_empty(self, a: CapSet) -> None:
        """a & ~a == empty."""
        assert a & ~a == CapSet.empty()

    @given(a=capsets)
    def test_double_complement(self, a: CapSet) -> None:
        assert ~~a == a

    @given(a=capsets, b=capsets)
    def test_difference_is_and_not(self, a: CapSet, b: CapSet) -> None:
        """a - b == a & ~b."""
        assert a - b == a & ~b

    @given(a=capsets, b=capsets)
    def test_xor_is_union_minus_intersection(self, a: CapSet, b: CapSet) -> None:
        assert a ^ b == (a | b) - (a & b)

    @given(a=capsets, b=capsets)
    def test_commutativity(self, a: CapSet, b: CapSet) -> None:
        assert a | b == b | a
        assert a & b == b & a
        assert a ^ b == b ^ a

    @given(a=capsets, b=capsets)
    def test_de_morgan(self, a: CapSet, b: CapSet) -> None:
        assert ~(a | b) == ~a & ~b
        assert ~(a & b) == ~a | ~b

    @given(a=capsets, b=capsets)
    def test_in_place_matches_binary(self, a: CapSet, b: CapSet) -> None:
        for op, iop in (
            (lambda x, y: x | y, "__ior__"),
            (lambda x, y: x & y, "__iand__"),
            (lambda x, y: x ^ y, "__ixor__"),
            (lambda x, y: x - y, "__isub__"),
        ):
            d = a.copy()
            getattr(d, iop)(b)
            assert d == op(a, b)


# ---------------------------------------------------------------------------
# Membership
# ---------------------------------------------------------------------------


class TestMembership:
    """Single-capability mutation laws."""

    @given(c=caps)
    def test_empty_has_nothing(self, c: Cap) -> None:
        assert not CapSet.empty().has(c)

    @given(c=caps)
    def test_add_then_drop_is_empty(self, c: Cap) -> None:
        s = CapSet.empty()
        s.add(c)
        assert s.has(c)
        s.drop(c)
        assert s == CapSet.empty()

    @given(a=capsets, c=caps)
    def test_add_preserves_others(self, a: CapSet, c: Cap) -> None:
        s = a.copy()
        s.add(c)
        assert s - a == (CapSet([c]) - a)
        assert a - s == CapSet.empty()

    @given(raw=raw_bitmasks)
    def test_truncation_never_exposes_unknown_bits(self, raw: int) -> None:
        s = CapSet.from_bitmask_truncate(raw)
        assert s.bits & ~CAP_BITMASK == 0
        assert s.bits == raw & CAP_BITMASK
        assert (~s).bits & ~CAP_BITMASK == 0


# ---------------------------------------------------------------------------
# Iteration
# ---------------------------------------------------------------------------


class TestIterationLaws:
    """Iterator results agree with brute force."""

    @given(a=capsets)
    def test_size_equals_iteration_count(self, a: CapSet) -> None:
        assert a.size() == len(list(a))

    @given(a=capsets)
    def test_iteration_is_ascending_and_exact(self, a: CapSet) -> None:
        expected = [c for c in Cap if a.has(c)]
        assert list(a) == expected

    @given(a=capsets)
    def test_last_is_highest_member(self, a: CapSet) -> None:
        members = list(a)
        expected = members[-1] if members else None
        assert a.iter().last() == expected

    @given(a=capsets)
    def test_remaining_and_last_while_advancing(self, a: CapSet) -> None:
        it = a.iter()
        remaining = list(a)
        while remaining:
            assert len(it) == len(remaining)
            assert it.last() == remaining[-1]
            assert next(it) == remaining.pop(0)
        assert len(it) == 0
        assert it.last() is None
        assert next(it, None) is None

    @given(a=capsets)
    def test_from_iterable_round_trip(self, a: CapSet) -> None:
        assert CapSet.from_iterable(a.iter()) == a
