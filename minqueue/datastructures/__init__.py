from .dynamic_array import DynamicArray, KeyArray, SlotArray
from .indexed_heap import IndexedMinHeap

__all__ = [
    "DynamicArray",
    "KeyArray",
    "SlotArray",
    "IndexedMinHeap",
]
