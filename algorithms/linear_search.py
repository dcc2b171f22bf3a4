"""
linear_search.py — Linear Search
=================================
Checks every element in order until the target turns up.  The array
is never modified; every frame carries the same snapshot.

pc_line values (1-based):
    1  for i = 0 to n-1
    2    if arr[i] == target
    3      return i
    4  return -1
"""

from typing import Any, Iterator, Optional

from algorithms.frame import Frame, FrameBuilder, Highlights, format_value
from algorithms.inputs import SearchInput, as_search_input


def linear_search(data: Any, seed: Optional[int] = None) -> Iterator[Frame]:
    """
    Args:
        data : SearchInput, {"array": [...], "target": x} or (array, target).
        seed : Unused.
    """
    return _run(as_search_input(data))


def _run(search: SearchInput) -> Iterator[Frame]:
    fb     = FrameBuilder()
    arr    = search.array
    target = format_value(search.target)

    yield fb.start(arr, f"Starting Linear Search for target: {target}")

    for i, value in enumerate(arr):
        fb.count_comparison()
        yield fb.emit(
            arr, Highlights.at(i), 2,
            f"Checking element at index {i}: {format_value(value)}",
        )

        if value == search.target:
            yield fb.emit(arr, Highlights.at(i), 3, f"Found target {target} at index {i}!")
            yield fb.finish(arr, f"Linear Search completed: {target} is at index {i}")
            return

    yield fb.emit(arr, Highlights.none(), 4, f"Target {target} not found in the array")
    yield fb.finish(arr, f"Linear Search completed: {target} is not in the array")
