import random

import pytest
from hypothesis import given, strategies as st

from kbiolib.rmqtree import RMQTree


def _keyed_tree():
    return RMQTree(key=lambda t: t[0], value=lambda t: t[1])


def _chars():
    return [i for i in range(33, 127) if chr(i) not in "().;"]


def _brute_min(items, lo, hi):
    inside = [t for t in items if lo <= t[0] <= hi]
    if not inside:
        return None
    return min(t[1] for t in inside)


@pytest.fixture
def krmq_tree():
    rng = random.Random(123)
    buf = _chars()
    rng.shuffle(buf)
    tree = _keyed_tree()
    for i, c in enumerate(buf):
        assert tree.insert((c, i)) == (c, i)
        assert tree.validate() == i + 1
    rng.shuffle(buf)
    for c in buf[: len(buf) // 2]:
        removed = tree.erase(c)
        assert removed is not None and removed[0] == c
        tree.validate()
    return tree, rng, len(buf)


def test_krmq_structure_after_inserts_and_erases(krmq_tree):
    tree, _, n = krmq_tree
    assert len(tree) == n - n // 2
    assert tree.validate() == len(tree)
    keys = [t[0] for t in tree]
    assert keys == sorted(keys)


@pytest.mark.parametrize("lo,hi", [("0", "9"), ("!", "~"), ("A", "Z"), ("F", "G"), ("a", "z")])
def test_krmq_range_min_named_ranges(krmq_tree, lo, hi):
    tree, _, _ = krmq_tree
    items = list(tree)
    got = tree.range_min(ord(lo), ord(hi))
    expected = _brute_min(items, ord(lo), ord(hi))
    if expected is None:
        assert got is None
    else:
        assert got[1] == expected
        assert ord(lo) <= got[0] <= ord(hi)


def test_krmq_range_min_random_ranges(krmq_tree):
    tree, rng, n = krmq_tree
    items = list(tree)
    for _ in range(n):
        lo = int(rng.random() * n)
        hi = int(rng.random() * n)
        got = tree.range_min(lo, hi)
        expected = _brute_min(items, lo, hi)
        assert (got[1] if got is not None else None) == expected
    for _ in range(200):
        lo = rng.randint(30, 130)
        hi = rng.randint(lo, 130)
        got = tree.range_min(lo, hi)
        expected = _brute_min(items, lo, hi)
        assert (got[1] if got is not None else None) == expected


def test_range_min_empty_and_inverted():
    tree = _keyed_tree()
    assert tree.range_min(0, 100) is None
    for k, v in [(1, 5), (2, 3), (3, 9)]:
        tree.insert((k, v))
    assert tree.range_min(3, 1) is None
    assert tree.range_min(1, 3) == (2, 3)
    assert tree.range_min(3, 3) == (3, 9)


def test_insert_duplicate_returns_existing():
    tree = _keyed_tree()
    assert tree.insert((5, 1)) == (5, 1)
    assert tree.insert((5, 2)) == (5, 1)
    assert len(tree) == 1
    assert tree.find(5) == (5, 1)


def test_find_contains_and_rank():
    tree = RMQTree()
    for x in [10, 20, 30, 40]:
        tree.insert(x)
    assert tree.find(30) == 30
    assert tree.find(25) is None
    assert 20 in tree
    assert 21 not in tree
    assert tree.rank(5) == 0
    assert tree.rank(10) == 1
    assert tree.rank(25) == 2
    assert tree.rank(40) == 4
    assert tree.rank(100) == 4


def test_interval():
    tree = RMQTree()
    for x in [10, 20, 30]:
        tree.insert(x)
    assert tree.interval(20) == (20, 20)
    assert tree.interval(25) == (20, 30)
    assert tree.interval(5) == (None, 10)
    assert tree.interval(35) == (30, None)


def test_erase_and_erase_first():
    tree = RMQTree()
    for x in [5, 3, 8, 1, 4]:
        tree.insert(x)
    assert tree.erase(7) is None
    assert tree.erase(3) == 3
    assert list(tree) == [1, 4, 5, 8]
    assert tree.erase_first() == 1
    assert tree.erase_first() == 4
    assert list(tree) == [5, 8]
    tree.erase_first()
    tree.erase_first()
    assert tree.erase_first() is None
    assert len(tree) == 0


def test_iter_from_and_reversed():
    tree = RMQTree()
    for x in [50, 10, 40, 20, 30]:
        tree.insert(x)
    assert list(tree.iter_from(25)) == [30, 40, 50]
    assert list(tree.iter_from(30)) == [30, 40, 50]
    assert list(tree.iter_from(60)) == []
    assert list(tree.iter_from(0)) == [10, 20, 30, 40, 50]
    assert list(reversed(tree)) == [50, 40, 30, 20, 10]


@given(
    st.lists(
        st.tuples(st.booleans(), st.integers(0, 40), st.integers(-100, 100)),
        max_size=120,
    )
)
def test_matches_dict_model(ops):
    tree = _keyed_tree()
    model = {}
    for is_insert, k, v in ops:
        if is_insert:
            got = tree.insert((k, v))
            model.setdefault(k, v)
            assert got == (k, model[k])
        else:
            got = tree.erase(k)
            expected = (k, model.pop(k)) if k in model else None
            assert got == expected
    assert tree.validate() == len(model)
    assert list(tree) == sorted(model.items())
    items = sorted(model.items())
    for lo in range(0, 41, 7):
        for hi in range(lo, 41, 5):
            got = tree.range_min(lo, hi)
            assert (got[1] if got is not None else None) == _brute_min(items, lo, hi)
        assert tree.rank(lo) == sum(1 for k in model if k <= lo)