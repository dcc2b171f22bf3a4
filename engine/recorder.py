"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete driver run (all Frames), then computes the metrics
the analytics panel and comparison mode need.

Usage:
    rec = Recorder()
    rec.start("quick-sort", [5, 3, 8, 1])
    rec.run_to_completion()          # exhausts the driver
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot for save/replay

Comparison Mode:
    Run two Recorders on the SAME input, then compare(rec1, rec2).
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from algorithms import AlgoMeta, UnknownAlgorithmError, get_algorithm
from algorithms.frame import Frame
from engine.stepper import Stepper
from shared.logger import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    slug:          str   = ""
    title:         str   = ""
    input_size:    int   = 0
    total_frames:  int   = 0
    comparisons:   int   = 0
    swaps:         int   = 0
    writes:        int   = 0
    wall_time_ms:  float = 0.0        # wall-clock time to exhaust the driver
    sorted_ok:     bool  = False      # final array is ascending


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""
    winner_swaps:       str = ""
    winner_frames:      str = ""


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        frames  : Full list of Frames from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        stepper : The underlying Stepper, positioned on the last frame after a run.
    """

    def __init__(self):
        self.frames:  List[Frame]          = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None

        self._algo:  Optional[AlgoMeta] = None
        self._input: Any                = None
        self._seed:  Optional[int]      = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, slug: str, data: Any, seed: Optional[int] = None) -> None:
        """Resolve the driver and attach it to a fresh Stepper.

        Raises InvalidInputError right here if the driver rejects `data`.
        """
        algo = get_algorithm(slug)
        if algo is None:
            raise UnknownAlgorithmError(slug)

        frames = algo.run(data, seed=seed)

        self._algo   = algo
        self._input  = data
        self._seed   = seed
        self.frames  = []
        self.metrics = None

        self.stepper = Stepper()
        self.stepper.start(frames)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the driver, record every frame, compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.stepper.jump_to_end()
        self.frames = list(self.stepper.frames)
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.info(
            "Recorded %s: %d frames, %d comparisons, %d swaps",
            self.metrics.slug, self.metrics.total_frames,
            self.metrics.comparisons, self.metrics.swaps,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "slug":    self._algo.slug if self._algo else "",
            "seed":    self._seed,
            "metrics": asdict(self.metrics) if self.metrics else {},
            "frames":  [f.to_dict() for f in self.frames],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        algo     = self._algo
        last     = self.frames[-1] if self.frames else None
        counters = last.counters if last else {}
        final    = list(last.array) if last else []

        return RunMetrics(
            slug=algo.slug if algo else "",
            title=algo.title if algo else "",
            input_size=len(self.frames[0].array) if self.frames else 0,
            total_frames=len(self.frames),
            comparisons=counters.get("comparisons", 0),
            swaps=counters.get("swaps", 0),
            writes=counters.get("writes", 0),
            wall_time_ms=round(wall_ms, 2),
            sorted_ok=all(a <= b for a, b in zip(final, final[1:])),
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.title if l_val < r_val else r.title

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_swaps=winner(l.swaps, r.swaps),
        winner_frames=winner(l.total_frames, r.total_frames),
    )
