"""Timing and space measurements for IndexedMinHeap operations.

Each operation is run on random integer inputs of exponentially growing size
and the averages are written to a CSV file, one row per (size, operation).
"""

from __future__ import annotations

import csv
import logging
import random
import statistics
import sys
import time
from typing import Callable, Dict, List, Tuple

from .datastructures import IndexedMinHeap

logger = logging.getLogger(__name__)

Operation = Callable[[List[int]], IndexedMinHeap[int]]

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int) -> List[int]:
    """Generate `size` distinct random integers (distinct so every add inserts)."""
    return random.sample(range(size * 10), size)


def _identity(x: int) -> int:
    return x


def measure_space(heap: IndexedMinHeap) -> int:
    """Approximate bytes held by the queue: buffers, position map and entries."""
    total = sys.getsizeof(heap)
    total += sys.getsizeof(heap._keys._buf) + sys.getsizeof(heap._slots._buf)
    total += sys.getsizeof(heap._positions)
    for obj in heap:
        total += sys.getsizeof(obj)
    return total


def measure_operation(operation: Operation, input_size: int, iterations: int = 5) -> Tuple[float, float, float]:
    """Run the operation several times; return (avg ms, std dev ms, avg bytes)."""
    times = []
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        heap = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)
        sizes.append(measure_space(heap))

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev, statistics.mean(sizes)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def run_add(data: List[int]) -> IndexedMinHeap[int]:
    heap = IndexedMinHeap(_identity)
    for item in data:
        heap.add(item)
    return heap


def run_pop_min(data: List[int]) -> IndexedMinHeap[int]:
    heap = run_add(data)
    while heap.pop_min() is not None:
        pass
    return heap


def run_remove(data: List[int]) -> IndexedMinHeap[int]:
    """Remove every item in random order: the case a plain heap does in O(n) each."""
    heap = run_add(data)
    order = list(data)
    random.shuffle(order)
    for item in order:
        heap.remove(item)
    return heap


OPERATIONS: Dict[str, Operation] = {
    "add": run_add,
    "pop_min": run_pop_min,
    "remove": run_remove,
}

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 8, iterations: int = 5) -> int:
    """Write one CSV row per (operation, size); return the number of rows."""
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = 0

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
            "Average Space (bytes)"
        ])

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time, avg_space = measure_operation(op_func, size, iterations)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                logger.info("%s size=%d avg=%.3fms std=%.3fms", op_name, size, avg_time, std_time)
                print(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")
                rows += 1

    return rows
