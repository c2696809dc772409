"""Mutable minimum-value priority queue with O(log n) removal by object."""

from .datastructures import IndexedMinHeap
from .errors import CapacityExceeded, InvalidKey, NotConfigured, QueueError

__version__ = "1.0.0"

__all__ = [
    "IndexedMinHeap",
    "QueueError",
    "NotConfigured",
    "CapacityExceeded",
    "InvalidKey",
]
