from types import SimpleNamespace

from priority_heap import PriorityHeap, ascending, by_attr, by_key, descending


def test_ascending_and_descending():
    assert ascending(1, 2) < 0
    assert ascending(2, 1) > 0
    assert ascending(2, 2) == 0
    assert descending(1, 2) > 0
    assert descending(2, 2) == 0


def test_descending_makes_max_heap():
    heap = PriorityHeap(descending, [5, 3, 8, 1])
    assert heap.peek() == 8
    assert [heap.pop() for _ in range(4)] == [8, 5, 3, 1]


def test_by_key():
    heap = PriorityHeap(by_key(len), ["ccc", "a", "bb"])
    assert heap.peek() == "a"
    heap = PriorityHeap(by_key(len, reverse=True), ["ccc", "a", "bb"])
    assert heap.peek() == "ccc"


def test_by_attr():
    items = [SimpleNamespace(cost=c) for c in (4, 2, 6)]
    heap = PriorityHeap(by_attr("cost"), items)
    assert heap.peek().cost == 2
    heap = PriorityHeap(by_attr("cost", reverse=True), items)
    assert heap.peek().cost == 6
