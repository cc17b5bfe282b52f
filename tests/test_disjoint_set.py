import pytest

from dsakit.disjoint_set import DisjointSet


def _chain(size):
    sets = DisjointSet()
    for item in range(1, size + 1):
        sets.make_set(item)
    for item in range(1, size):
        sets.union(item, item + 1)
    return sets


def test_chain_of_unions_shares_one_root():
    sets = _chain(6)
    roots = {sets.find(item) for item in range(1, 7)}
    assert roots == {2}


def test_union_with_unknown_item_raises():
    sets = _chain(6)
    with pytest.raises(KeyError):
        sets.union(6, 7)
    with pytest.raises(KeyError):
        sets.find(7)


def test_union_reports_whether_it_merged():
    sets = DisjointSet()
    for item in "abc":
        sets.make_set(item)
    assert sets.union("a", "b") is True
    assert sets.union("b", "a") is False
    assert sets.find("a") == sets.find("b")
    assert sets.find("c") == "c"


def test_singletons_are_their_own_root():
    sets = DisjointSet()
    sets.make_set(10)
    assert sets.find(10) == 10
    assert 10 in sets
    assert 11 not in sets


def test_partition_is_consistent():
    sets = DisjointSet()
    for item in range(20):
        sets.make_set(item)
    for item in range(20):
        sets.union(item, item % 4)
    for item in range(20):
        for other in range(20):
            same = sets.find(item) == sets.find(other)
            assert same == (item % 4 == other % 4)


def test_make_set_resets_item():
    sets = DisjointSet()
    sets.make_set(1)
    sets.make_set(2)
    sets.union(1, 2)
    sets.make_set(2)
    assert sets.find(2) == 2