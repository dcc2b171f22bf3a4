"""
find_maximum.py — Find Maximum
===============================
Single left-to-right pass keeping the running maximum and its index.
An empty array has no maximum: only the two banners are emitted.

pc_line values (1-based):
    1  max = arr[0]
    2  maxIndex = 0
    3  for i = 1 to n-1
    4    if arr[i] > max
    5      max = arr[i]
    6      maxIndex = i
    7  return max, maxIndex
"""

from typing import Any, Iterator, List, Optional

from algorithms.frame import Frame, FrameBuilder, Highlights, format_value
from algorithms.inputs import as_array


def find_maximum(data: Any, seed: Optional[int] = None) -> Iterator[Frame]:
    return _run(as_array(data))


def _run(arr: List) -> Iterator[Frame]:
    fb = FrameBuilder()

    yield fb.start(arr, "Starting Find Maximum")

    if not arr:
        yield fb.finish(arr, "Find Maximum completed: the array is empty")
        return

    max_value = arr[0]
    max_index = 0
    yield fb.emit(
        arr, Highlights.at(0), 1,
        f"Starting with first element as maximum: {format_value(max_value)}",
    )

    for i in range(1, len(arr)):
        fb.count_comparison()
        yield fb.emit(
            arr, Highlights.at(i, max_index), 4,
            f"Comparing {format_value(arr[i])} with current maximum {format_value(max_value)}",
        )

        if arr[i] > max_value:
            max_value = arr[i]
            max_index = i
            yield fb.emit(
                arr, Highlights.at(i), 5,
                f"Found new maximum: {format_value(max_value)} at index {i}",
            )

    yield fb.emit(
        arr, Highlights.at(max_index), 7,
        f"Maximum value {format_value(max_value)} found at index {max_index}",
    )
    yield fb.finish(
        arr, f"Find Maximum completed: {format_value(max_value)} at index {max_index}",
    )
