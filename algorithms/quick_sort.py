"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
The last element of each range is the pivot.  Ranges are kept on an
explicit work-stack instead of recursing, so an already sorted input
(the O(n) deep case) cannot hit the interpreter's recursion limit.
Popping the left range before the right one reproduces the recursive
pre-order exactly.

Frames per partition:
  • pivot chosen     – pivot = high
  • comparison       – compared [j, high], pivot = high
  • boundary swap    – swapped [i, j], pivot = high
  • pivot swap       – swapped [i+1, high]
  • pivot placed     – pivot = final index, before descending

A swap of a position with itself is shown as an `indices` frame so
that every swapped pair names two distinct positions.

pc_line values (1-based):
    1  if low < high
    2    pivotIndex = partition(arr, low, high)
    3    quickSort(arr, low, pivotIndex-1)
    4    quickSort(arr, pivotIndex+1, high)
    5  partition(arr, low, high):
    6    pivot = arr[high], i = low - 1
    7    for j = low to high-1
    8      if arr[j] < pivot
    9        i = i + 1, swap arr[i] and arr[j]
   10    swap arr[i+1] and arr[high]
   11    return i + 1
"""

from typing import Any, Generator, Iterator, List, Optional, Tuple

from algorithms.frame import Frame, FrameBuilder, Highlights, format_value
from algorithms.inputs import as_array


def quick_sort(data: Any, seed: Optional[int] = None) -> Iterator[Frame]:
    return _run(as_array(data))


def _run(arr: List) -> Iterator[Frame]:
    fb = FrameBuilder()
    yield fb.start(arr, "Starting Quick Sort")

    pending: List[Tuple[int, int]] = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue

        pivot_index = yield from _partition(fb, arr, low, high)
        yield fb.emit(
            arr, Highlights.pivot_at(pivot_index), 2,
            f"Pivot {format_value(arr[pivot_index])} placed at position {pivot_index}",
        )

        # right first so the left range is popped (sorted) first
        pending.append((pivot_index + 1, high))
        pending.append((low, pivot_index - 1))

    yield fb.finish(arr, "Quick Sort completed!")


def _partition(
    fb: FrameBuilder, arr: List, low: int, high: int,
) -> Generator[Frame, None, int]:
    pivot = arr[high]
    i     = low - 1

    yield fb.emit(
        arr, Highlights.pivot_at(high), 6,
        f"Partitioning [{low}...{high}] with pivot {format_value(pivot)}",
    )

    for j in range(low, high):
        fb.count_comparison()
        yield fb.emit(
            arr, Highlights.compare(j, high, pivot=high), 8,
            f"Comparing {format_value(arr[j])} with pivot {format_value(pivot)}",
        )

        if arr[j] < pivot:
            i += 1
            if i != j:
                arr[i], arr[j] = arr[j], arr[i]
                fb.count_swap()
                yield fb.emit(
                    arr, Highlights.swap(i, j, pivot=high), 9,
                    f"Swapped {format_value(arr[j])} and {format_value(arr[i])}",
                )
            else:
                yield fb.emit(
                    arr, Highlights.at(i, pivot=high), 9,
                    f"{format_value(arr[i])} is smaller than the pivot and already in place",
                )

    final = i + 1
    if final != high:
        arr[final], arr[high] = arr[high], arr[final]
        fb.count_swap()
        yield fb.emit(
            arr, Highlights.swap(final, high), 10,
            f"Placed pivot {format_value(pivot)} in final position {final}",
        )
    else:
        yield fb.emit(
            arr, Highlights.at(final), 10,
            f"Pivot {format_value(pivot)} is already in final position {final}",
        )

    return final
