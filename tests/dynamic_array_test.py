import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from minqueue.datastructures.dynamic_array import KeyArray, SlotArray


def test_append_grows_by_doubling():
    a = SlotArray(2)
    capacities = []
    for i in range(9):
        a.append(f"v{i}")
        capacities.append(a.capacity)
    assert capacities == [2, 2, 4, 4, 8, 8, 8, 8, 16]
    assert list(a) == [f"v{i}" for i in range(9)]


def test_get_set_and_bounds():
    a = SlotArray()
    a.append("x")
    a[0] = "y"
    assert a[0] == "y"
    with pytest.raises(IndexError):
        a[1]
    with pytest.raises(IndexError):
        a[-1]
    with pytest.raises(IndexError):
        a[3] = "z"


def test_pop_and_truncate():
    a = SlotArray()
    for v in "abcde":
        a.append(v)
    assert a.pop() == "e"
    a.truncate(2)
    assert list(a) == ["a", "b"]
    a.truncate(0)
    assert len(a) == 0
    with pytest.raises(IndexError):
        a.pop()


def test_compact_never_drops_items():
    a = SlotArray(4)
    for i in range(40):
        a.append(i)
    a.truncate(5)
    a.compact(minimum=4)
    assert a.capacity == 5
    assert list(a) == [0, 1, 2, 3, 4]
    a.compact(minimum=8)
    assert a.capacity == 5


def test_key_array_stores_doubles():
    k = KeyArray(2)
    k.append(3)
    k.append(2.5)
    k.append(2**63)
    assert list(k) == [3.0, 2.5, float(2**63)]
    assert all(isinstance(v, float) for v in k)
    assert k.pop() == float(2**63)
