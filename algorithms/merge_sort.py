"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort.  Recursive sub-sequences are flattened into one
frame stream with `yield from`; recursion depth is log2(n), so the
plain recursive form is kept.

Frames:
  • split        – indices [left, mid, right] before recursing
  • merge start  – indices [left, right]
  • placement    – indices [k] for every element written back
  • tail copy    – indices [k] for leftovers of either half

Ties take the LEFT element, which is what makes the sort stable.

pc_line values (1-based):
    1  if left < right
    2    mid = (left + right) / 2
    3    mergeSort(arr, left, mid)
    4    mergeSort(arr, mid+1, right)
    5    merge(arr, left, mid, right)
    6  merge: L = arr[left..mid], R = arr[mid+1..right]
    7    while L and R both have elements
    8      arr[k] = smaller head (L wins ties), k = k + 1
    9    copy what is left of L, then of R, into arr[k..]
"""

from typing import Any, Iterator, List, Optional

from algorithms.frame import Frame, FrameBuilder, Highlights, format_value
from algorithms.inputs import as_array


def merge_sort(data: Any, seed: Optional[int] = None) -> Iterator[Frame]:
    return _run(as_array(data))


def _run(arr: List) -> Iterator[Frame]:
    fb = FrameBuilder()
    yield fb.start(arr, "Starting Merge Sort")
    yield from _sort(fb, arr, 0, len(arr) - 1)
    yield fb.finish(arr, "Merge Sort completed!")


def _sort(fb: FrameBuilder, arr: List, left: int, right: int) -> Iterator[Frame]:
    if left >= right:
        return

    mid = (left + right) // 2
    yield fb.emit(
        arr, Highlights.at(left, mid, right), 2,
        f"Dividing array: [{left}...{mid}] and [{mid + 1}...{right}]",
    )

    yield from _sort(fb, arr, left, mid)
    yield from _sort(fb, arr, mid + 1, right)
    yield from _merge(fb, arr, left, mid, right)


def _merge(fb: FrameBuilder, arr: List, left: int, mid: int, right: int) -> Iterator[Frame]:
    left_half  = arr[left:mid + 1]
    right_half = arr[mid + 1:right + 1]

    yield fb.emit(
        arr, Highlights.at(left, right), 5,
        f"Merging subarrays [{left}...{mid}] and [{mid + 1}...{right}]",
    )

    i = j = 0
    k = left
    while i < len(left_half) and j < len(right_half):
        fb.count_comparison()
        if left_half[i] <= right_half[j]:
            arr[k] = left_half[i]
            i += 1
        else:
            arr[k] = right_half[j]
            j += 1
        fb.count_write()
        yield fb.emit(
            arr, Highlights.at(k), 8,
            f"Placed {format_value(arr[k])} at position {k}",
        )
        k += 1

    for rest in (left_half[i:], right_half[j:]):
        for value in rest:
            arr[k] = value
            fb.count_write()
            yield fb.emit(
                arr, Highlights.at(k), 9,
                f"Copying remaining element {format_value(value)} to position {k}",
            )
            k += 1
