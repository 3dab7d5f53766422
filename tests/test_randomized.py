import random
from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.randomized import RandomizedCollection, RandomizedSet


def test_set_worked_example():
    rs = RandomizedSet()
    assert rs.insert(3) is True
    assert rs.remove(3) is True
    assert rs.remove(0) is False
    assert rs.insert(3) is True
    assert rs.get_random() == 3
    assert rs.remove(0) is False


def test_set_duplicate_insert_rejected():
    rs = RandomizedSet()
    rs.insert(5)
    assert rs.insert(5) is False
    assert len(rs) == 1


def test_set_random_covers_all_members():
    rs = RandomizedSet(random.Random(1))
    for value in (1, 2, 3, 4):
        rs.insert(value)
    rs.remove(2)
    draws = {rs.get_random() for _ in range(200)}
    assert draws == {1, 3, 4}


def test_set_empty_random_raises():
    with pytest.raises(IndexError):
        RandomizedSet().get_random()


@given(st.lists(st.tuples(st.booleans(), st.integers(0, 6)), max_size=50))
def test_set_matches_builtin_set(ops):
    rs = RandomizedSet(random.Random(0))
    reference: set[int] = set()
    for adding, value in ops:
        if adding:
            assert rs.insert(value) == (value not in reference)
            reference.add(value)
        else:
            assert rs.remove(value) == (value in reference)
            reference.discard(value)
        assert len(rs) == len(reference)
        assert all(v in rs for v in reference)
        if reference:
            assert rs.get_random() in reference


def test_collection_worked_example():
    rc = RandomizedCollection()
    assert rc.insert(0) is True
    assert rc.remove(0) is True
    assert rc.insert(-1) is True
    assert rc.remove(0) is False
    assert {rc.get_random() for _ in range(6)} == {-1}


def test_collection_duplicates():
    rc = RandomizedCollection()
    assert rc.insert(1) is True
    assert rc.insert(1) is False
    assert rc.insert(2) is True
    assert rc.remove(1) is True
    assert 1 in rc
    assert len(rc) == 2


def test_collection_empty_random_raises():
    with pytest.raises(IndexError):
        RandomizedCollection().get_random()


@given(st.lists(st.tuples(st.booleans(), st.integers(0, 4)), max_size=60))
def test_collection_matches_counter(ops):
    rc = RandomizedCollection(random.Random(0))
    reference: Counter[int] = Counter()
    for adding, value in ops:
        if adding:
            assert rc.insert(value) == (reference[value] == 0)
            reference[value] += 1
        else:
            assert rc.remove(value) == (reference[value] > 0)
            if reference[value]:
                reference[value] -= 1
        live = +reference
        assert len(rc) == sum(live.values())
        assert all(v in rc for v in live)
        if live:
            assert rc.get_random() in live