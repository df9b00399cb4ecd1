"""Tests for CapSetIterator -- ordering, remaining length, last() and copy()."""

from __future__ import annotations

import copy
import operator

import pytest

from linuxcaps.core.caps import Cap, CapSet, capset

SETS = [
    CapSet.empty(),
    capset(Cap.CHOWN, Cap.FOWNER),
    capset(Cap.SETFCAP, Cap.MAC_OVERRIDE),
    capset(Cap.CHECKPOINT_RESTORE),
    CapSet.full(),
]


class TestOrdering:
    """Members come out in ascending bit order."""

    def test_full_set_yields_catalog_order(self) -> None:
        assert list(CapSet.full().iter()) == list(Cap)

    def test_members_cross_the_32_bit_boundary(self) -> None:
        s = capset(Cap.SYSLOG, Cap.CHOWN, Cap.SETFCAP, Cap.MAC_OVERRIDE)
        assert list(s) == [Cap.CHOWN, Cap.SETFCAP, Cap.MAC_OVERRIDE, Cap.SYSLOG]

    def test_empty(self) -> None:
        assert list(CapSet.empty()) == []

    def test_iterator_is_its_own_iterator(self) -> None:
        it = capset(Cap.KILL).iter()
        assert iter(it) is it

    def test_snapshot_ignores_later_mutation(self) -> None:
        s = capset(Cap.CHOWN)
        it = s.iter()
        s.add(Cap.KILL)
        assert list(it) == [Cap.CHOWN]

    def test_exhausted_stays_exhausted(self) -> None:
        it = capset(Cap.CHOWN).iter()
        assert next(it) is Cap.CHOWN
        with pytest.raises(StopIteration):
            next(it)
        with pytest.raises(StopIteration):
            next(it)


class TestRemaining:
    """len(), count(), remaining() and the length hint."""

    @pytest.mark.parametrize("s", SETS, ids=str)
    def test_len_decreases_by_one(self, s: CapSet) -> None:
        count = s.size()
        it = s.iter()
        assert len(it) == count
        assert it.copy().count() == count
        assert operator.length_hint(it) == count

        for _cap in it:
            count -= 1
            assert len(it) == count
            assert it.remaining() == count
            assert it.copy().count() == count

        assert count == 0
        assert len(it) == 0
        assert operator.length_hint(it) == 0

    @pytest.mark.parametrize("s", SETS, ids=str)
    def test_size_matches_iteration(self, s: CapSet) -> None:
        assert s.size() == len(list(s))

    def test_count_does_not_consume(self) -> None:
        it = capset(Cap.CHOWN, Cap.KILL).iter()
        assert it.count() == 2
        assert list(it) == [Cap.CHOWN, Cap.KILL]


class TestLast:
    """last() finds the highest member without iterating."""

    def test_full_and_empty(self) -> None:
        last_cap = list(Cap)[-1]
        assert CapSet.full().iter().last() is last_cap
        assert CapSet.empty().iter().last() is None

    def test_last_while_advancing_full(self) -> None:
        last_cap = list(Cap)[-1]
        it = CapSet.full().iter()
        assert it.last() is last_cap
        while next(it, None) is not None:
            if len(it):
                assert it.last() is last_cap
            else:
                assert it.last() is None
        assert it.last() is None

    def test_single_member(self) -> None:
        it = capset(Cap.FOWNER).iter()
        assert it.last() is Cap.FOWNER
        assert next(it) is Cap.FOWNER
        assert it.last() is None

    def test_chown_only(self) -> None:
        it = capset(Cap.CHOWN).iter()
        assert it.last() is Cap.CHOWN
        assert next(it) is Cap.CHOWN
        assert it.last() is None

    def test_two_members(self) -> None:
        it = capset(Cap.CHOWN, Cap.FOWNER).iter()
        assert it.last() is Cap.FOWNER
        assert next(it) is Cap.CHOWN
        assert it.last() is Cap.FOWNER
        assert next(it) is Cap.FOWNER
        assert it.last() is None
        assert next(it, None) is None
        assert it.last() is None

    def test_last_does_not_advance(self) -> None:
        it = capset(Cap.CHOWN, Cap.SYSLOG).iter()
        it.last()
        assert list(it) == [Cap.CHOWN, Cap.SYSLOG]


class TestCopy:
    """Iterators are restartable via copy()."""

    def test_copy_keeps_cursor(self) -> None:
        it = capset(Cap.CHOWN, Cap.KILL, Cap.SYSLOG).iter()
        next(it)
        clone = it.copy()
        assert list(clone) == [Cap.KILL, Cap.SYSLOG]
        assert list(it) == [Cap.KILL, Cap.SYSLOG]

    def test_copy_module(self) -> None:
        it = capset(Cap.CHOWN, Cap.KILL).iter()
        clone = copy.copy(it)
        assert list(it) == list(clone)
