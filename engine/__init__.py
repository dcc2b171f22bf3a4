"""
engine/
-------
Consumers of driver frame streams: interactive playback (Stepper) and
whole-run recording with analytics (Recorder).

    from engine import Stepper, Recorder, compare
"""

from engine.stepper import MIN_INTERVAL, SPEED_PRESETS, Stepper, StepperState
from engine.recorder import ComparisonResult, Recorder, RunMetrics, compare

__all__ = [
    "MIN_INTERVAL",
    "SPEED_PRESETS",
    "Stepper",
    "StepperState",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
