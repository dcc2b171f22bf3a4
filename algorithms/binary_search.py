"""
binary_search.py — Binary Search
=================================
Halves the search window [left, right] until the target is found or
the window is empty.  Assumes the caller passes a sorted array; on an
unsorted one it still terminates, it just may miss the target.

pc_line values (1-based):
    1  left = 0, right = n-1
    2  while left <= right
    3    mid = (left + right) / 2
    4    if arr[mid] == target
    5      return mid
    6    else if arr[mid] < target
    7      left = mid + 1
    8    else
    9      right = mid - 1
   10  return -1
"""

from typing import Any, Iterator, Optional

from algorithms.frame import Frame, FrameBuilder, Highlights, format_value
from algorithms.inputs import SearchInput, as_search_input


def binary_search(data: Any, seed: Optional[int] = None) -> Iterator[Frame]:
    return _run(as_search_input(data))


def _run(search: SearchInput) -> Iterator[Frame]:
    fb     = FrameBuilder()
    arr    = search.array
    target = format_value(search.target)
    left, right = 0, len(arr) - 1

    yield fb.start(arr, f"Starting Binary Search for target: {target}")

    while left <= right:
        mid = (left + right) // 2
        fb.count_comparison()
        yield fb.emit(
            arr, Highlights.at(left, mid, right), 3,
            f"Checking middle element at index {mid}: {format_value(arr[mid])} "
            f"(range: {left}-{right})",
        )

        if arr[mid] == search.target:
            yield fb.emit(arr, Highlights.at(mid), 5, f"Found target {target} at index {mid}!")
            yield fb.finish(arr, f"Binary Search completed: {target} is at index {mid}")
            return

        if arr[mid] < search.target:
            left = mid + 1
            yield fb.emit(
                arr, Highlights.at(mid), 7,
                f"{format_value(arr[mid])} < {target}, searching right half",
            )
        else:
            right = mid - 1
            yield fb.emit(
                arr, Highlights.at(mid), 9,
                f"{format_value(arr[mid])} > {target}, searching left half",
            )

    yield fb.emit(arr, Highlights.none(), 10, f"Target {target} not found in the array")
    yield fb.finish(arr, f"Binary Search completed: {target} is not in the array")
