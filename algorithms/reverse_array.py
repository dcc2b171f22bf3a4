"""
reverse_array.py — Reverse Array
=================================
Two pointers walk in from both ends, swapping as they go.

pc_line values (1-based):
    1  left = 0
    2  right = n-1
    3  while left < right
    4    swap arr[left] and arr[right]
    5    left = left + 1
    6    right = right - 1
"""

from typing import Any, Iterator, List, Optional

from algorithms.frame import Frame, FrameBuilder, Highlights, format_value
from algorithms.inputs import as_array


def reverse_array(data: Any, seed: Optional[int] = None) -> Iterator[Frame]:
    return _run(as_array(data))


def _run(arr: List) -> Iterator[Frame]:
    fb = FrameBuilder()
    left, right = 0, len(arr) - 1

    yield fb.start(arr, "Starting array reversal")

    while left < right:
        yield fb.emit(
            arr, Highlights.at(left, right), 3,
            f"Swapping elements at indices {left} and {right}",
        )

        arr[left], arr[right] = arr[right], arr[left]
        fb.count_swap()
        yield fb.emit(
            arr, Highlights.swap(left, right), 4,
            f"Swapped {format_value(arr[right])} and {format_value(arr[left])}",
        )

        left  += 1
        right -= 1

    yield fb.finish(arr, "Array reversal completed!")
