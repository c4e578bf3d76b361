"""pyskiplist: an in-memory ordered map backed by a skip list.

The package exposes :class:`SkipList` (get/set/delete/key_count/iterator), the
forward :class:`Iterator` cursor and a handful of ready-made comparators for
byte strings, strings and fixed-width integers.
"""

from __future__ import annotations

import logging

__all__ = [
    "MAX_LEVEL",
    "Iterator",
    "SkipList",
    "new",
    "Comparator",
    "natural_comparator",
    "bytes_comparator",
    "str_comparator",
    "int32_comparator",
    "int64_comparator",
]

from .comparator import (
    Comparator,
    bytes_comparator,
    int32_comparator,
    int64_comparator,
    natural_comparator,
    str_comparator,
)
from .iterator import Iterator
from .skiplist import MAX_LEVEL, SkipList, new

logging.getLogger(__name__).addHandler(logging.NullHandler())
