"""
inputs.py — Driver Input Coercion
==================================
Drivers validate and copy their input when they are CALLED, not when the
first frame is pulled, so a bad input surfaces immediately at the call
site instead of halfway through a playback.

Sorting and array drivers take a plain numeric sequence.  Searching
drivers take an array plus a target, packaged as a SearchInput, a
mapping {"array": [...], "target": x} or a 2-tuple (array, target).
"""

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, List, Mapping


class InvalidInputError(ValueError):
    """Raised when a driver receives something it cannot visualize."""


@dataclass
class SearchInput:
    array:  List[Real] = field(default_factory=list)
    target: Real       = 0


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def as_array(data: Any) -> List[Real]:
    """Return a private working copy of a numeric sequence."""
    if isinstance(data, (str, bytes, Mapping)) or not hasattr(data, "__iter__"):
        raise InvalidInputError(f"Expected a sequence of numbers, got {type(data).__name__}")

    arr = list(data)
    for i, value in enumerate(arr):
        if not _is_number(value):
            raise InvalidInputError(
                f"Element {i} is not a number: {value!r}"
            )
    return arr


def as_search_input(data: Any) -> SearchInput:
    """Normalise the accepted search-input shapes into a SearchInput."""
    if isinstance(data, SearchInput):
        array, target = data.array, data.target
    elif isinstance(data, Mapping):
        if "target" not in data:
            raise InvalidInputError("Search input is missing 'target'")
        array, target = data.get("array", []), data["target"]
    elif isinstance(data, tuple) and len(data) == 2:
        array, target = data
    else:
        raise InvalidInputError(
            f"Expected {{'array': [...], 'target': x}}, got {type(data).__name__}"
        )

    if not _is_number(target):
        raise InvalidInputError(f"Search target is not a number: {target!r}")
    return SearchInput(array=as_array(array), target=target)
