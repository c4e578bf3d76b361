"""Unit tests for the forward Iterator cursor."""
from pyskiplist import Iterator, SkipList, bytes_comparator


def test_empty_list():
    it = SkipList(bytes_comparator).iterator()
    assert isinstance(it, Iterator)
    assert it.next() is False
    assert it.next() is False
    assert it.key() is None
    assert it.value() is None


def test_next(five_key_list):
    it = five_key_list.iterator()
    for _ in range(5):
        assert it.next() is True
    assert it.next() is False
    # exhausted is terminal
    assert it.next() is False


def test_key(five_key_list):
    it = five_key_list.iterator()
    assert it.key() is None  # before start
    keys = []
    while it.next():
        keys.append(it.key())
    assert keys == [b"aaaa", b"aaab", b"aaac", b"aaad", b"baaa"]
    assert it.key() is None


def test_value(five_key_list):
    it = five_key_list.iterator()
    assert it.value() is None
    values = []
    while it.next():
        values.append(it.value())
    assert values == [b"test_a1", b"test_b1", b"test_c1", b"test_d1", b"test_b2"]
    assert it.value() is None


def test_python_protocol_is_one_shot(five_key_list):
    it = five_key_list.iterator()
    assert list(it) == list(five_key_list)
    assert list(it) == []
    # a fresh cursor re-scans
    assert len(list(five_key_list.iterator())) == 5


def test_independent_cursors(five_key_list):
    a = five_key_list.iterator()
    b = five_key_list.iterator()
    a.next()
    a.next()
    b.next()
    assert a.key() == b"aaab"
    assert b.key() == b"aaaa"


def test_after_deletes():
    lst = SkipList(seed=2)
    for i in range(50):
        lst.set(i, i * i)
    for i in range(0, 50, 2):
        lst.delete(i)
    it = lst.iterator()
    seen = []
    while it.next():
        seen.append((it.key(), it.value()))
    assert seen == [(i, i * i) for i in range(1, 50, 2)]
    assert len(seen) == lst.key_count()
