class HeapError(Exception):
    pass


class InvalidIndex(HeapError, IndexError):
    def __init__(self, index, size: int):
        super().__init__(f"Invalid index {index} for heap of size {size}")
        self.index = index
        self.size = size


class EmptyHeap(HeapError, IndexError):
    def __init__(self):
        super().__init__("Heap is empty, no highest priority element")
