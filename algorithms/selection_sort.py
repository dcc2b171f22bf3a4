"""
selection_sort.py — Selection Sort
===================================
Each pass scans the unsorted suffix for its minimum and swaps it into
place.  One frame per scan start, per comparison, per new minimum and
per swap.

pc_line values (1-based):
    1  for i = 0 to n-2
    2    minIndex = i
    3    for j = i+1 to n-1
    4      if arr[j] < arr[minIndex]
    5        minIndex = j
    6    swap arr[i] and arr[minIndex]
"""

from typing import Any, Iterator, List, Optional

from algorithms.frame import Frame, FrameBuilder, Highlights, format_value
from algorithms.inputs import as_array


def selection_sort(data: Any, seed: Optional[int] = None) -> Iterator[Frame]:
    return _run(as_array(data))


def _run(arr: List) -> Iterator[Frame]:
    fb = FrameBuilder()
    n  = len(arr)

    yield fb.start(arr, "Starting Selection Sort")

    for i in range(n - 1):
        min_index = i
        yield fb.emit(
            arr, Highlights.at(i), 2,
            f"Finding minimum element starting from position {i}",
        )

        for j in range(i + 1, n):
            fb.count_comparison()
            yield fb.emit(
                arr, Highlights.compare(min_index, j), 4,
                f"Comparing {format_value(arr[min_index])} with {format_value(arr[j])}",
            )

            if arr[j] < arr[min_index]:
                min_index = j
                yield fb.emit(
                    arr, Highlights.at(min_index), 5,
                    f"New minimum found: {format_value(arr[min_index])} at position {min_index}",
                )

        if min_index != i:
            arr[i], arr[min_index] = arr[min_index], arr[i]
            fb.count_swap()
            yield fb.emit(
                arr, Highlights.swap(i, min_index), 6,
                f"Swapped {format_value(arr[min_index])} and {format_value(arr[i])}",
            )

    yield fb.finish(arr, "Selection Sort completed!")
