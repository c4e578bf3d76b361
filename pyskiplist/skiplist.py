"""Skip list: an ordered map with expected O(log n) search, insert and delete.

Keys are ordered by a caller supplied comparator, so the structure never
depends on a concrete key type. Every node lives on level 0; each insert then
flips a fair coin per level to decide how many "express lanes" above level 0
the new node joins.

Complexities (average case):
    • get      – O(log n)
    • set      – O(log n)
    • delete   – O(log n)
    • iterate  – O(n)

Not thread-safe: callers serialise access themselves, and an iterator is only
valid while the list is not mutated.
"""
from __future__ import annotations

import logging
import os
import random
from collections.abc import Generator
from typing import Any, Generic, Optional, TypeVar

from .comparator import Comparator, natural_comparator
from .iterator import Iterator

__all__ = ["SkipList", "MAX_LEVEL", "new"]

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

MAX_LEVEL = 32  # Enough for ~4 billion elements on average.
_P = 0.5

_SIZED = (bytes, bytearray, memoryview, str)


def _sizeof(obj: Any) -> int:
    return len(obj) if isinstance(obj, _SIZED) else 0


class _Node(Generic[K, V]):
    __slots__ = ("key", "value", "forward")

    def __init__(self, key: Optional[K], value: Optional[V], level: int):
        self.key = key
        self.value = value
        self.forward: list[Optional[_Node[K, V]]] = [None] * level

    def __repr__(self) -> str:  # pragma: no cover
        return f"Node<{self.key!r}:{self.value!r}>"


class SkipList(Generic[K, V]):
    """Skip list mapping comparator-ordered keys to arbitrary values.

    Parameters
    ----------
    comparator: Comparator | None
        ``cmp(a, b)`` returning <0, 0 or >0. Defaults to Python's natural
        ordering of the keys.
    rng: random.Random | None
        Source of the coin flips used for level promotion.
    seed: int | None
        Shortcut for ``rng=random.Random(seed)``; reproduces level assignments.
    """

    def __init__(
        self,
        comparator: Optional[Comparator] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        if rng is None:
            rng = random.Random(seed if seed is not None else os.urandom(16))
        self._comparator: Comparator = comparator or natural_comparator
        self._rng = rng
        self._highest_level = 0
        self._count = 0
        self._raw_size = 0
        self._sentinel: _Node[K, V] = _Node(None, None, MAX_LEVEL)

    # ---------------------------------------------------------------------
    # Mutation API
    # ---------------------------------------------------------------------
    def set(self, key: K, value: V) -> None:
        """Insert `key` or replace the value already stored under it."""
        cmp = self._comparator
        # Predecessor per level; levels the search never visits fall back to
        # the sentinel.
        update: list[_Node[K, V]] = [self._sentinel] * MAX_LEVEL
        x = self._sentinel
        for h in range(self._highest_level, -1, -1):
            while (nxt := x.forward[h]) is not None and cmp(nxt.key, key) < 0:
                x = nxt
            update[h] = x
        nxt = x.forward[0]
        if nxt is not None and cmp(nxt.key, key) == 0:  # Update
            self._raw_size += _sizeof(value) - _sizeof(nxt.value)
            nxt.value = value
            return

        self._count += 1
        self._raw_size += _sizeof(key) + _sizeof(value)
        new_node: _Node[K, V] = _Node(key, value, 1)
        new_node.forward[0] = nxt
        x.forward[0] = new_node

        lvl = self._random_level()
        if lvl - 1 > self._highest_level:
            logger.debug("highest level raised %d -> %d", self._highest_level, lvl - 1)
            self._highest_level = lvl - 1
        for h in range(1, lvl):
            pred = update[h]
            new_node.forward.append(pred.forward[h])
            pred.forward[h] = new_node

    def delete(self, key: K) -> bool:
        """Unlink `key` from every level; return False if it was absent."""
        cmp = self._comparator
        sentinel = self._sentinel
        target: Optional[_Node[K, V]] = None
        x = sentinel
        for h in range(self._highest_level, -1, -1):
            while (nxt := x.forward[h]) is not None and cmp(nxt.key, key) < 0:
                x = nxt
            if nxt is None or not (nxt is target or cmp(nxt.key, key) == 0):
                continue
            target = nxt
            x.forward[h] = nxt.forward[h] if h < len(nxt.forward) else None
            if x is sentinel and sentinel.forward[h] is None and h > 0:
                logger.debug("highest level dropped %d -> %d", h, h - 1)
                self._highest_level -= 1

        if target is None:
            return False
        self._count -= 1
        self._raw_size -= _sizeof(target.key) + _sizeof(target.value)
        return True

    # ---------------------------------------------------------------------
    # Query API
    # ---------------------------------------------------------------------
    def get(self, key: K) -> Optional[V]:
        """Return the value stored under `key`, or None when absent."""
        node = self._find(key)
        return node.value if node is not None else None

    def key_count(self) -> int:
        return self._count

    def raw_size(self) -> int:
        """Summed length of every live ``bytes``/``str`` key and value."""
        return self._raw_size

    def iterator(self) -> Iterator[K, V]:
        """Return a cursor positioned before the first element."""
        return Iterator(self)

    @property
    def highest_level(self) -> int:
        return self._highest_level

    def __contains__(self, key: K) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"SkipList<count={self._count}, highest_level={self._highest_level}>"

    # ------------------------------------------------------------------
    # Iteration helpers (ordered)
    # ------------------------------------------------------------------
    def __iter__(self) -> Generator[tuple[K, V], None, None]:
        x = self._sentinel.forward[0]
        while x is not None:
            yield x.key, x.value  # type: ignore[misc]
            x = x.forward[0]

    # ------------------------------------------------------------------
    # Debug helpers
    # ------------------------------------------------------------------
    def levels(self) -> list[list[K]]:
        """Keys linked at each level, level 0 first. Don't use on big lists."""
        out: list[list[K]] = []
        for h in range(self._highest_level + 1):
            keys: list[K] = []
            x = self._sentinel.forward[h]
            while x is not None:
                keys.append(x.key)  # type: ignore[arg-type]
                x = x.forward[h]
            out.append(keys)
        return out

    def dump(self) -> None:
        logger.debug("%r", self)
        for h, keys in enumerate(self.levels()):
            logger.debug("level %d: %s", h, " ".join(map(repr, keys)))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _find(self, key: K) -> Optional[_Node[K, V]]:
        # Returns on the first equal key met during descent; keys are unique so
        # this is the same node level 0 would reach.
        cmp = self._comparator
        x = self._sentinel
        for h in range(self._highest_level, -1, -1):
            while (nxt := x.forward[h]) is not None:
                c = cmp(nxt.key, key)
                if c == 0:
                    return nxt
                if c > 0:
                    break
                x = nxt
        return None

    def _random_level(self) -> int:
        lvl = 1
        while self._rng.random() < _P and lvl < MAX_LEVEL:
            lvl += 1
        return lvl


def new(comparator: Optional[Comparator] = None, **kwargs: Any) -> SkipList[Any, Any]:
    """Return an empty skip list ordered by `comparator`."""
    return SkipList(comparator, **kwargs)
