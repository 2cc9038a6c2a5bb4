"""Comparators for PriorityHeap.

A comparator takes two elements and returns a negative number when the first
has higher priority, zero when they tie and a positive number otherwise.
"""
from typing import Any, Callable

Comparator = Callable[[Any, Any], int]


def ascending(a, b) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def descending(a, b) -> int:
    return ascending(b, a)


def by_key(key: Callable[[Any], Any], reverse: bool = False) -> Comparator:
    base = descending if reverse else ascending

    def compare(a, b) -> int:
        return base(key(a), key(b))

    return compare


def by_attr(attr: str, reverse: bool = False) -> Comparator:
    return by_key(lambda item: getattr(item, attr), reverse=reverse)
