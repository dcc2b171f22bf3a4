"""
frame.py — Algorithm Frame Snapshot
====================================
Every driver is a generator that yields Frame objects.
A Frame is a frozen-in-time picture of everything a renderer needs to
draw one step of an array algorithm:

    • The full array contents (a snapshot, never a diff)
    • Which positions matter right now (compared / swapped / pivot / indices)
    • Which line of pseudocode is executing (1-based, NO_LINE for banners)
    • A plain-English explanation of what just happened
    • Running counters (comparisons, swaps, writes)

Design decisions:
  - Frame and Highlights are frozen dataclasses.  Frames are SNAPSHOTS:
    the driver is the only writer, the stepper / recorder are readers.
  - Highlights is a small tagged payload.  Its `kind` is derived from
    which field is set; `pivot` can ride along with a compared / swapped
    pair (quick-sort partition frames need both).
  - Each frame owns a private copy of the array, so a materialized list
    of frames can be scrubbed backward and forward freely.
"""

from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Any, Dict, List, Optional, Sequence, Tuple


NO_LINE = -1

COUNTER_NAMES = ("comparisons", "swaps", "writes")


class HighlightKind(Enum):
    NONE     = "none"
    INDICES  = "indices"
    COMPARED = "compared"
    SWAPPED  = "swapped"
    PIVOT    = "pivot"


@dataclass(frozen=True)
class Highlights:
    """
    Attributes:
        indices  : Positions being inspected (selection point, split bounds, …).
        compared : Exactly two distinct positions under comparison.
        swapped  : Exactly two distinct positions just exchanged.
        pivot    : Partition pivot position.
    """

    indices:  Tuple[int, ...]           = ()
    compared: Optional[Tuple[int, int]] = None
    swapped:  Optional[Tuple[int, int]] = None
    pivot:    Optional[int]             = None

    def __post_init__(self):
        for name in ("compared", "swapped"):
            pair = getattr(self, name)
            if pair is None:
                continue
            if len(pair) != 2 or pair[0] == pair[1]:
                raise ValueError(f"{name} needs two distinct positions, got {pair!r}")

    # -- constructors --
    @classmethod
    def none(cls) -> "Highlights":
        return cls()

    @classmethod
    def at(cls, *indices: int, pivot: Optional[int] = None) -> "Highlights":
        return cls(indices=tuple(indices), pivot=pivot)

    @classmethod
    def compare(cls, a: int, b: int, pivot: Optional[int] = None) -> "Highlights":
        return cls(compared=(a, b), pivot=pivot)

    @classmethod
    def swap(cls, a: int, b: int, pivot: Optional[int] = None) -> "Highlights":
        return cls(swapped=(a, b), pivot=pivot)

    @classmethod
    def pivot_at(cls, index: int) -> "Highlights":
        return cls(pivot=index)

    # -- queries --
    @property
    def kind(self) -> HighlightKind:
        if self.compared is not None:
            return HighlightKind.COMPARED
        if self.swapped is not None:
            return HighlightKind.SWAPPED
        if self.indices:
            return HighlightKind.INDICES
        if self.pivot is not None:
            return HighlightKind.PIVOT
        return HighlightKind.NONE

    def is_empty(self) -> bool:
        return self.kind is HighlightKind.NONE

    def positions(self) -> List[int]:
        """Every index referenced by this payload, in field order."""
        out = list(self.indices)
        if self.compared is not None:
            out.extend(self.compared)
        if self.swapped is not None:
            out.extend(self.swapped)
        if self.pivot is not None:
            out.append(self.pivot)
        return out

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {}
        if self.indices:
            d["indices"] = list(self.indices)
        if self.compared is not None:
            d["compared"] = list(self.compared)
        if self.swapped is not None:
            d["swapped"] = list(self.swapped)
        if self.pivot is not None:
            d["pivot"] = self.pivot
        return d


@dataclass(frozen=True)
class Frame:
    """
    Attributes:
        array       : Full snapshot of the working array at this step.
        highlights  : Positions that matter in this frame.
        pc_line     : 1-based pseudocode line executing now, NO_LINE for banners.
        explain     : Human-readable description of the step.
        counters    : Running tally of comparisons / swaps / writes so far.
        step_number : 0-based index of this frame in the run.
        is_final    : True on the completion banner only.
    """

    array:        List[Real]     = field(default_factory=list)
    highlights:   Highlights     = field(default_factory=Highlights)
    pc_line:      int            = NO_LINE
    explain:      str            = ""
    counters:     Dict[str, int] = field(default_factory=dict)
    step_number:  int            = 0
    is_final:     bool           = False

    def is_banner(self) -> bool:
        return self.highlights.is_empty() and self.pc_line == NO_LINE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "array":      list(self.array),
            "highlights": self.highlights.to_dict(),
            "pcLine":     self.pc_line,
            "explain":    self.explain,
            "counters":   dict(self.counters),
            "stepNumber": self.step_number,
            "isFinal":    self.is_final,
        }


def format_value(value: Real) -> str:
    """Render 5.0 as '5' so explanations read naturally."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# Builder so drivers don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class FrameBuilder:
    """
    Mutable scratch-pad that drivers use to construct Frames.

    Usage inside a driver generator:
        fb = FrameBuilder()
        yield fb.start(arr, "Starting Bubble Sort")
        fb.count_comparison()
        yield fb.emit(arr, Highlights.compare(0, 1), 3, "Comparing 5 with 3")
        yield fb.finish(arr, "Bubble Sort completed!")
    """

    def __init__(self):
        self.step_number: int            = 0
        self.counters:    Dict[str, int] = {name: 0 for name in COUNTER_NAMES}

    # -- counters --
    def count_comparison(self) -> None:
        self.counters["comparisons"] += 1

    def count_swap(self) -> None:
        self.counters["swaps"] += 1

    def count_write(self) -> None:
        self.counters["writes"] += 1

    # -- frames --
    def emit(
        self,
        array: Sequence[Real],
        highlights: Optional[Highlights] = None,
        pc_line: int = NO_LINE,
        explain: str = "",
        is_final: bool = False,
    ) -> Frame:
        frame = Frame(
            array=list(array),
            highlights=highlights if highlights is not None else Highlights.none(),
            pc_line=pc_line,
            explain=explain,
            counters=dict(self.counters),
            step_number=self.step_number,
            is_final=is_final,
        )
        self.step_number += 1
        return frame

    def start(self, array: Sequence[Real], explain: str) -> Frame:
        return self.emit(array, Highlights.none(), NO_LINE, explain)

    def finish(self, array: Sequence[Real], explain: str) -> Frame:
        return self.emit(array, Highlights.none(), NO_LINE, explain, is_final=True)
