from __future__ import annotations
import ctypes
import logging
from typing import Generic, Iterator, TypeVar

from ..config import DEFAULT_INITIAL_CAPACITY

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DynamicArray(Generic[T]):
    """A fixed-element-type dynamic array backed by a raw ctypes buffer.

    Implementation notes
    --------------------
    • Storage is a ctypes array of ``_ctype`` (``py_object`` here, ``c_double``
      in :class:`KeyArray`), not Python's built-in list.
    • Capacity grows geometrically (x2) when full, so ``append`` is amortized
      O(1). Shrinking only happens through an explicit :meth:`compact`.
    • Only non-negative indices are accepted; the heap never needs the
      negative-index conveniences of ``list``.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    _ctype = ctypes.py_object
    _empty = None

    def __init__(self, capacity: int = DEFAULT_INITIAL_CAPACITY) -> None:
        self._capacity = max(capacity, 1)
        self._buf = self._make_array(self._capacity)
        self._size = 0

    # ------------------------------- internals -------------------------------

    @classmethod
    def _make_array(cls, capacity: int):
        """Allocate a raw ctypes array of length `capacity`."""
        return (capacity * cls._ctype)()

    def _resize(self, new_capacity: int) -> None:
        """Move the live items into a new buffer of `new_capacity` cells."""
        if new_capacity < self._size:
            raise ValueError("new capacity must be >= size")

        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]

        logger.debug("%s resized %d -> %d", type(self).__name__, self._capacity, new_capacity)
        self._buf = new_buf
        self._capacity = new_capacity

    def _check_index(self, idx: int) -> int:
        if idx < 0 or idx >= self._size:
            raise IndexError("array index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, value: T) -> None:
        """Append `value` to the end. Amortized O(1)."""
        if self._size >= self._capacity:
            self._resize(self._capacity * 2)
        self._buf[self._size] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the last item. O(1).

        Raises:
            IndexError: if the array is empty.
        """
        if self._size == 0:
            raise IndexError("pop from empty array")
        self._size -= 1
        val = self._buf[self._size]
        self._buf[self._size] = self._empty
        return val

    def truncate(self, size: int) -> None:
        """Drop every item at index >= `size`. Capacity is kept."""
        while self._size > size:
            self.pop()

    def compact(self, minimum: int = DEFAULT_INITIAL_CAPACITY) -> None:
        """Shrink the buffer to fit the live items (but never below `minimum`)."""
        target = max(self._size, minimum, 1)
        if target < self._capacity:
            self._resize(target)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._buf[i]

    def __getitem__(self, idx: int) -> T:
        return self._buf[self._check_index(idx)]

    def __setitem__(self, idx: int, value: T) -> None:
        self._buf[self._check_index(idx)] = value

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{type(self).__name__}({list(self)!r})"


class SlotArray(DynamicArray[T]):
    """Slot -> object storage for the indexed heap."""

    __slots__ = ()


class KeyArray(DynamicArray[float]):
    """Dense array of double-precision keys.

    Any numeric value assigned is stored as a C double, so integers wider than
    53 bits lose precision.
    """

    __slots__ = ()

    _ctype = ctypes.c_double
    _empty = 0.0
