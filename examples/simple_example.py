#!/usr/bin/env python3
"""Small usage demos: basic get/set and a word-occurrence counter."""

import argparse
import re
import sys

from pyskiplist import SkipList, str_comparator


def simple_usage() -> None:
    lst = SkipList(str_comparator)
    lst.set("test-key-1", b"1-data")
    lst.set("test-key-2", b"2-data")
    print(lst.get("test-key-2"))


def word_occurrence(text: str) -> None:
    lst = SkipList(str_comparator)
    for w in re.split(r"\s+", text):
        if not w:
            continue
        lst.set(w, (lst.get(w) or 0) + 1)

    it = lst.iterator()
    while it.next():
        print(f"{it.key()} = {it.value()}")
    print(lst.key_count())


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("path", nargs="?", help="Text file to count words in (default: stdin)")
    args = parser.parse_args()

    simple_usage()
    if args.path:
        with open(args.path, encoding="utf-8") as fp:
            word_occurrence(fp.read())
    else:
        word_occurrence(sys.stdin.read())


if __name__ == "__main__":
    main()
