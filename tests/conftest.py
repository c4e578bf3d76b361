"""Shared pytest fixtures for the skip list tests."""
import random

import pytest

from pyskiplist import SkipList, bytes_comparator


class ConstantRandom(random.Random):
    """Generator whose ``random()`` always returns the same number."""

    def __init__(self, value: float):
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value


def check_invariants(lst: SkipList) -> None:
    """Assert the structural invariants of a skip list."""
    cmp = lst._comparator
    levels = lst.levels()
    assert len(levels) == lst.highest_level + 1
    # level 0 strictly ascending, one entry per live key
    for a, b in zip(levels[0], levels[0][1:]):
        assert cmp(a, b) < 0
    assert len(levels[0]) == lst.key_count() == len(lst)
    # monotone membership
    for h in range(1, len(levels)):
        assert levels[h]
        assert set(levels[h]) <= set(levels[h - 1])
    for h in range(lst.highest_level + 1, len(lst._sentinel.forward)):
        assert lst._sentinel.forward[h] is None
    x = lst._sentinel.forward[0]
    while x is not None:
        assert 1 <= len(x.forward) <= len(lst._sentinel.forward)
        x = x.forward[0]


@pytest.fixture
def five_keys():
    """Keys inserted out of order together with their values."""
    return [
        (b"baaa", b"test_b2"),
        (b"aaab", b"test_b1"),
        (b"aaad", b"test_d1"),
        (b"aaaa", b"test_a1"),
        (b"aaac", b"test_c1"),
    ]


@pytest.fixture
def five_key_list(five_keys):
    """Provide a byte-keyed skip list holding the five sample keys."""
    lst = SkipList(bytes_comparator, seed=1)
    for k, v in five_keys:
        lst.set(k, v)
    return lst


@pytest.fixture
def seeded_list():
    """Provide an empty, deterministically promoted skip list."""
    return SkipList(seed=1234)
