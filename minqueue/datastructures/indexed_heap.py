from __future__ import annotations
import logging
import math
from typing import Callable, Dict, Generic, Iterable, Iterator, Optional, TypeVar, Union

from ..config import DEFAULT_INITIAL_CAPACITY, DEFAULT_MAX_SIZE
from ..errors import CapacityExceeded, InvalidKey, NotConfigured
from .dynamic_array import KeyArray, SlotArray

T = TypeVar("T")

Number = Union[int, float]
KeyFunc = Callable[[T], Number]

logger = logging.getLogger(__name__)


class IndexedMinHeap(Generic[T]):
    """A binary min-heap of distinct objects that supports removal by object.

    Each object is ordered by ``key(obj)``, evaluated once when the object is
    added and cached as a double. Three structures move in lock-step:

    - ``_keys``: the heap array of keys, 1-based (slot 0 is a placeholder),
    - ``_slots``: slot -> object,
    - ``_positions``: object -> slot.

    ``_positions`` makes ``remove(obj)`` O(log n): the slot is found in O(1)
    and only a single sift is needed afterwards. Objects are matched with
    ``__hash__``/``__eq__``, so adding an object equal to a stored one
    replaces the stored entry.

    If an object's ordering value changes after it was added, the cached key
    is stale until the object is added again.

    Not thread-safe: guard the whole queue with one lock if it is shared.
    """

    __slots__ = ("_key", "_keys", "_slots", "_positions", "_max_size", "_initial_capacity")

    def __init__(
        self,
        key: KeyFunc,
        items: Optional[Iterable[T]] = None,
        *,
        max_size: Optional[int] = None,
        initial_capacity: Optional[int] = None,
    ) -> None:
        self._key: KeyFunc = self._validate_key(key)
        self._max_size: int = self._validate_size(
            "max_size", DEFAULT_MAX_SIZE if max_size is None else max_size, 1)
        self._initial_capacity: int = self._validate_size(
            "initial_capacity", DEFAULT_INITIAL_CAPACITY if initial_capacity is None else initial_capacity, 2)

        self._keys = KeyArray(self._initial_capacity)
        self._slots: SlotArray[Optional[T]] = SlotArray(self._initial_capacity)
        self._positions: Dict[T, int] = {}
        # Slot 0 is never used so that children of slot i are 2i and 2i+1.
        self._keys.append(0.0)
        self._slots.append(None)

        if items is not None:
            for obj in items:
                self.add(obj)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _validate_key(key: KeyFunc) -> KeyFunc:
        if key is None or not callable(key):
            raise NotConfigured(f"key extractor must be callable, got {key!r}")
        return key

    @staticmethod
    def _validate_size(name: str, value: int, minimum: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an integer, got {value!r}")
        if value < minimum:
            raise ValueError(f"{name} must be >= {minimum}, got {value}")
        return value

    def _extract(self, obj: T) -> float:
        """Run the extractor once and convert its result to a float key."""
        raw = self._key(obj)
        if isinstance(raw, (str, bytes, bytearray)):
            raise InvalidKey(obj, raw)
        try:
            value = float(raw)
        except (TypeError, ValueError, OverflowError):
            raise InvalidKey(obj, raw) from None
        if math.isnan(value):
            raise InvalidKey(obj, raw)
        return value

    def _swap(self, i: int, j: int) -> None:
        keys, slots, positions = self._keys, self._slots, self._positions
        keys[i], keys[j] = keys[j], keys[i]
        a, b = slots[j], slots[i]
        slots[i], slots[j] = a, b
        positions[a] = i
        positions[b] = j

    def _sift_up(self, slot: int) -> None:
        keys = self._keys
        while slot > 1:
            parent = slot // 2
            if keys[parent] <= keys[slot]:
                break
            self._swap(parent, slot)
            slot = parent

    def _sift_down(self, slot: int) -> None:
        keys = self._keys
        last = len(keys) - 1
        while True:
            child = 2 * slot
            if child > last:
                break
            # Ties keep the left child.
            if child < last and keys[child + 1] < keys[child]:
                child += 1
            if keys[slot] <= keys[child]:
                break
            self._swap(slot, child)
            slot = child

    # -----------------------------
    # Public API
    # -----------------------------
    def configure(self, key: KeyFunc) -> "IndexedMinHeap[T]":
        """Use `key` for objects added from now on.

        Keys already stored are not recomputed; re-add an object to rekey it.
        """
        self._key = self._validate_key(key)
        return self

    def add(self, obj: T) -> None:
        """Insert `obj`, replacing any stored entry equal to it (O(log n)).

        Raises:
            CapacityExceeded: the queue already holds ``max_size`` entries.
            InvalidKey: the extractor result is not a number (or is NaN).
        """
        if obj is None:
            raise TypeError("None cannot be added to the queue")
        present = obj in self._positions
        if not present and self.size() >= self._max_size:
            raise CapacityExceeded(self._max_size)

        key = self._extract(obj)
        if present:
            self.remove(obj)
            logger.debug("re-adding %r with key %r", obj, key)

        self._keys.append(key)
        self._slots.append(obj)
        slot = len(self._keys) - 1
        self._positions[obj] = slot
        self._sift_up(slot)

    def remove(self, obj: T) -> bool:
        """Remove `obj` if present and report whether it was (O(log n))."""
        slot = self._positions.get(obj)
        if slot is None:
            return False

        keys, slots = self._keys, self._slots
        last = len(keys) - 1
        removed_key = keys[slot]
        last_key = keys[last]

        del self._positions[obj]
        if slot != last:
            moved = slots[last]
            keys[slot] = last_key
            slots[slot] = moved
            self._positions[moved] = slot
        keys.pop()
        slots.pop()

        if slot != last:
            if removed_key < last_key:
                self._sift_down(slot)
            elif removed_key > last_key:
                self._sift_up(slot)
        return True

    def pop_min(self) -> Optional[T]:
        """Remove and return the object with the smallest key, or None if empty."""
        if self.is_empty():
            return None
        first = self._slots[1]
        self.remove(first)
        return first

    def peek_min(self) -> Optional[T]:
        """Return the object with the smallest key without removing it (O(1))."""
        return None if self.is_empty() else self._slots[1]

    def key_of(self, obj: T) -> float:
        """Return the key cached for `obj` (KeyError if it is not queued)."""
        return self._keys[self._positions[obj]]

    def is_empty(self) -> bool:
        return not self._positions

    def size(self) -> int:
        return len(self._positions)

    def clear(self) -> None:
        """Drop every entry. Capacity is kept."""
        self._keys.truncate(1)
        self._slots.truncate(1)
        self._positions.clear()

    def compact(self) -> None:
        """Release unused backing storage."""
        self._keys.compact(self._initial_capacity)
        self._slots.compact(self._initial_capacity)

    def check_invariant(self) -> bool:
        """Debug helper: True if every parent key is <= its children's keys.

        Also checks that no live key is below the root key. Only meant for
        tests and debugging, never for regular call paths.
        """
        keys = self._keys
        last = len(keys) - 1
        if last == 0:
            return True
        root = keys[1]
        for i in range(1, last + 1):
            if keys[i] < root:
                return False
            for child in (2 * i, 2 * i + 1):
                if child <= last and keys[child] < keys[i]:
                    return False
        return True

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return len(self._positions)

    def __bool__(self) -> bool:
        return bool(self._positions)

    def __contains__(self, obj: object) -> bool:
        return obj in self._positions

    def __iter__(self) -> Iterator[T]:
        # Heap order, not sorted order.
        for slot in range(1, len(self._slots)):
            yield self._slots[slot]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{obj!r}: {self._keys[slot]!r}" for slot, obj in enumerate(self, 1))
        return f"IndexedMinHeap({{{pairs}}})"
