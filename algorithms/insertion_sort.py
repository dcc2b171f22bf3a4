"""
insertion_sort.py — Insertion Sort
===================================
Grows a sorted prefix one key at a time.  Every comparison that leads
to a shift, every shift and the final placement of the key get their
own frame.

pc_line values (1-based):
    1  for i = 1 to n-1
    2    key = arr[i]
    3    j = i - 1
    4    while j >= 0 and arr[j] > key
    5      arr[j+1] = arr[j]
    6      j = j - 1
    7    arr[j+1] = key
"""

from typing import Any, Iterator, List, Optional

from algorithms.frame import Frame, FrameBuilder, Highlights, format_value
from algorithms.inputs import as_array


def insertion_sort(data: Any, seed: Optional[int] = None) -> Iterator[Frame]:
    return _run(as_array(data))


def _run(arr: List) -> Iterator[Frame]:
    fb = FrameBuilder()

    yield fb.start(arr, "Starting Insertion Sort")

    for i in range(1, len(arr)):
        key = arr[i]
        j   = i - 1

        yield fb.emit(
            arr, Highlights.at(i), 2,
            f"Selecting element {format_value(key)} at position {i}",
        )

        while j >= 0 and arr[j] > key:
            fb.count_comparison()
            yield fb.emit(
                arr, Highlights.compare(j, j + 1), 4,
                f"Comparing {format_value(arr[j])} with {format_value(key)}",
            )

            arr[j + 1] = arr[j]
            fb.count_write()
            yield fb.emit(
                arr, Highlights.at(j + 1), 5,
                f"Shifting {format_value(arr[j])} to position {j + 1}",
            )
            j -= 1

        arr[j + 1] = key
        fb.count_write()
        yield fb.emit(
            arr, Highlights.at(j + 1), 7,
            f"Inserted {format_value(key)} at position {j + 1}",
        )

    yield fb.finish(arr, "Insertion Sort completed!")
