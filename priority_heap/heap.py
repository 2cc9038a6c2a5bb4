"""
Array-backed binary priority heap.

The tree is stored level by level in a list: the children of index i sit at
2i + 1 and 2i + 2, and the parent of i > 0 is i // 2 for odd i and i // 2 - 1
for even i. The comparator decides priority, the element comparing lowest sits
at the root.

Ex (ascending):

[] insert 2 -> [2]
[2] insert 0 -> [0, 2]
[0, 2] insert -10 -> [-10, 2, 0]
[-11, -10, 0, 1, 0, 2, 1] remove_at(1) -> [-11, 0, 0, 1, 1, 2]
"""
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

from priority_heap.config import config
from priority_heap.errors import EmptyHeap, InvalidIndex
from priority_heap.logger import init_logger

logger = init_logger(__name__)

P = TypeVar("P")


def parent_index(index: int) -> int:
    # left children are odd indexed, right children even indexed
    if index % 2 == 1:
        return index // 2
    return index // 2 - 1


def left_child_index(index: int) -> int:
    return 2 * index + 1


def right_child_index(index: int) -> int:
    return 2 * index + 2


# a decorator which re-checks the heap property after a mutation
def check_invariants(func):
    def wrapper(self, *args, **kwargs):
        result = func(self, *args, **kwargs)
        if config.check_invariants:
            assert self.is_valid(), f"Heap property broken after {func.__name__}"
        return result

    return wrapper


class PriorityHeap(Generic[P]):
    def __init__(
        self,
        comparator: Callable[[P, P], int],
        items: Iterable[P] = (),
        position_attr: Optional[str] = None,
    ) -> None:
        self._comparator = comparator
        self._position_attr = position_attr
        self._heap: List[P] = []
        for item in items:
            self.insert(item)

    @property
    def comparator(self) -> Callable[[P, P], int]:
        return self._comparator

    @property
    def position_attr(self) -> Optional[str]:
        return self._position_attr

    def _higher_priority(self, a: P, b: P) -> bool:
        return self._comparator(a, b) < 0

    def _swap_in_heap(self, index1: int, index2: int) -> None:
        item1 = self._heap[index1]
        item2 = self._heap[index2]
        # Positions go first so a failing setattr leaves the list untouched.
        if self._position_attr is not None:
            setattr(item1, self._position_attr, index2)
            setattr(item2, self._position_attr, index1)
        self._heap[index1] = item2
        self._heap[index2] = item1

    def _in_range(self, index) -> bool:
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._heap)
        )

    def _check_index(self, index: int) -> None:
        if not self._in_range(index):
            raise InvalidIndex(index, len(self._heap))

    def _sift_up_heap(self, index: int) -> int:
        while index > 0:
            parent = parent_index(index)
            if not self._higher_priority(self._heap[index], self._heap[parent]):
                break
            self._swap_in_heap(index, parent)
            index = parent
        return index

    def _sift_down_heap(self, index: int) -> int:
        size = len(self._heap)
        while index < size:
            left = left_child_index(index)
            right = right_child_index(index)
            if left >= size:
                # No children, a leaf.
                break
            current = self._heap[index]
            left_child = self._heap[left]
            if right < size:
                right_child = self._heap[right]
                # Right wins only when strictly lower than both left and current.
                if self._higher_priority(right_child, left_child) and self._higher_priority(
                    right_child, current
                ):
                    self._swap_in_heap(index, right)
                    index = right
                    continue
            if self._higher_priority(left_child, current):
                self._swap_in_heap(index, left)
                index = left
                continue
            break
        return index

    def _restore(self, index: int) -> int:
        new_index = self._sift_down_heap(index)
        if new_index == index:
            # The element may come from another subtree and beat its new parent.
            new_index = self._sift_up_heap(index)
        return new_index

    @check_invariants
    def insert(self, item: P) -> None:
        index = len(self._heap)
        if self._position_attr is not None:
            setattr(item, self._position_attr, index)
        self._heap.append(item)
        final_index = self._sift_up_heap(index)
        logger.debug(f"Inserted at {index}, settled at {final_index}, size {len(self._heap)}")

    @check_invariants
    def remove_at(self, index: int) -> P:
        self._check_index(index)
        last = len(self._heap) - 1
        self._swap_in_heap(index, last)
        removed = self._heap.pop()
        if self._position_attr is not None:
            setattr(removed, self._position_attr, -1)
        if index < len(self._heap):
            self._restore(index)
        logger.debug(f"Removed element at {index}, size {len(self._heap)}")
        return removed

    def remove(self, item: P) -> P:
        return self.remove_at(self.index_of(item))

    def pop(self) -> P:
        if not self._heap:
            raise EmptyHeap()
        return self.remove_at(0)

    @check_invariants
    def update(self, index: int) -> int:
        """Re-sift the element at index after its priority changed in place.

        Returns the element's new index.
        """
        self._check_index(index)
        if index > 0 and self._higher_priority(
            self._heap[index], self._heap[parent_index(index)]
        ):
            # Was in shape before, so it cannot also need to go down.
            return self._sift_up_heap(index)
        return self._sift_down_heap(index)

    def peek(self) -> P:
        if not self._heap:
            raise EmptyHeap()
        return self._heap[0]

    def size(self) -> int:
        return len(self._heap)

    def index_of(self, item: P) -> int:
        if self._position_attr is not None:
            index = getattr(item, self._position_attr, -1)
            if self._in_range(index) and self._heap[index] is item:
                return index
            raise InvalidIndex(index, len(self._heap))
        for index, candidate in enumerate(self._heap):
            if candidate is item:
                return index
        raise InvalidIndex(None, len(self._heap))

    def sort(self) -> List[P]:
        """Every element in reverse priority order, lowest priority first.

        Works on a copy by repeated extraction of the root, O(n log n). The
        heap itself is left untouched.
        """
        scratch: PriorityHeap[P] = PriorityHeap(self._comparator)
        # Already in heap order, no sifting needed.
        scratch._heap = list(self._heap)
        ordered = [scratch.remove_at(0) for _ in range(len(self._heap))]
        ordered.reverse()
        logger.debug(f"Sorted {len(ordered)} elements")
        return ordered

    def items(self) -> List[P]:
        return list(self._heap)

    def is_valid(self) -> bool:
        for index in range(1, len(self._heap)):
            if self._comparator(self._heap[parent_index(index)], self._heap[index]) > 0:
                return False
        return True

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return len(self._heap) > 0

    def __contains__(self, item: Any) -> bool:
        return any(candidate is item for candidate in self._heap)

    def __repr__(self) -> str:
        return f"PriorityHeap({self._heap!r})"
