"""
bubble_sort.py — Bubble Sort
=============================
Generator-based bubble sort.  Yields a Frame at every meaningful event:
  1. Compare an adjacent pair  →  highlights.compared
  2. Swap an out-of-order pair  →  highlights.swapped (after the swap)

pc_line values index the catalog pseudocode (1-based):
    1  for i = 0 to n-2
    2    for j = 0 to n-i-2
    3      if arr[j] > arr[j+1]
    4        swap arr[j] and arr[j+1]
"""

from typing import Any, Iterator, List, Optional

from algorithms.frame import Frame, FrameBuilder, Highlights, format_value
from algorithms.inputs import as_array


def bubble_sort(data: Any, seed: Optional[int] = None) -> Iterator[Frame]:
    """
    Yields Frame snapshots for every comparison and swap.

    Args:
        data : Sequence of numbers.  Copied on entry, never mutated.
        seed : Accepted for a uniform driver signature; unused.
    """
    return _run(as_array(data))


def _run(arr: List) -> Iterator[Frame]:
    fb = FrameBuilder()
    n  = len(arr)

    yield fb.start(arr, "Starting Bubble Sort")

    for i in range(n - 1):
        for j in range(n - i - 1):
            fb.count_comparison()
            yield fb.emit(
                arr, Highlights.compare(j, j + 1), 3,
                f"Comparing {format_value(arr[j])} with {format_value(arr[j + 1])}",
            )

            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                fb.count_swap()
                yield fb.emit(
                    arr, Highlights.swap(j, j + 1), 4,
                    f"Swapped {format_value(arr[j + 1])} and {format_value(arr[j])}",
                )

    yield fb.finish(arr, "Bubble Sort completed!")
