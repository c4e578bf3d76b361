"""Forward cursor over the level-0 chain of a skip list.

Example usage::

    it = lst.iterator()
    while it.next():
        print(it.key(), it.value())

The cursor is one-shot and holds no snapshot: ask the list for a new one to
re-scan, and do not mutate the list while a cursor is in use.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from .skiplist import SkipList, _Node

__all__ = ["Iterator"]

K = TypeVar("K")
V = TypeVar("V")


class Iterator(Generic[K, V]):
    """Cursor that starts before the first element and ends exhausted."""

    __slots__ = ("_list", "_cur")

    def __init__(self, lst: SkipList[K, V]) -> None:
        self._list = lst
        # sentinel = before start, None = exhausted
        self._cur: Optional[_Node[K, V]] = lst._sentinel

    def next(self) -> bool:
        """Advance to the next element; False once there is none."""
        if self._list._count == 0:
            return False
        if self._cur is not None:
            self._cur = self._cur.forward[0]
        return self._cur is not None

    def key(self) -> Optional[K]:
        if self._cur is None:
            return None
        return self._cur.key

    def value(self) -> Optional[V]:
        if self._cur is None:
            return None
        return self._cur.value

    # ------------------------------------------------------------------
    # Python iterator protocol
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[K, V]:
        return self

    def __next__(self) -> tuple[K, V]:
        if not self.next():
            raise StopIteration
        return self._cur.key, self._cur.value  # type: ignore[union-attr,return-value]
