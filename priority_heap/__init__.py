from priority_heap.comparators import ascending, by_attr, by_key, descending
from priority_heap.errors import EmptyHeap, HeapError, InvalidIndex
from priority_heap.heap import PriorityHeap
from priority_heap.logger import init_logger

__all__ = [
    "PriorityHeap",
    "HeapError",
    "InvalidIndex",
    "EmptyHeap",
    "ascending",
    "descending",
    "by_attr",
    "by_key",
    "init_logger",
]
