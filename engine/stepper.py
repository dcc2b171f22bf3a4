"""
stepper.py — Frame-by-Frame Playback Engine
============================================
The Stepper is the playback adapter between a driver and whatever draws
the frames.  It owns the frame iterator, buffers every Frame it has
pulled (enabling rewind and seek), and exposes a play/pause/next/prev/
speed API.  It never looks inside a frame beyond handing it on.

State machine:
    IDLE     →  start()  →  PAUSED
    PAUSED   →  play()   →  PLAYING
    PLAYING  →  pause()  →  PAUSED
    PLAYING  →  (frames exhausted) → FINISHED
    any      →  reset()  →  IDLE

Thread safety:
  This class is NOT thread-safe.  Call it from one thread (a request
  handler, a timer callback or an event loop).
"""

import time
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional

from algorithms.frame import Frame


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per frame)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.0,    # teaching mode
    "medium": 0.4,
    "fast":   0.15,
    "turbo":  0.05,
}

MIN_INTERVAL = 0.02


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        frames      : Every Frame pulled so far (buffer for rewind / seek).
        current_idx : Index into `frames` that is currently displayed.
        speed       : Seconds between auto-advance ticks.
        on_frame    : Optional callback(Frame) fired whenever the current frame changes.
    """

    def __init__(self, on_frame: Optional[Callable[[Frame], None]] = None):
        self._source:     Optional[Iterator[Frame]] = None
        self.frames:      List[Frame]  = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = SPEED_PRESETS["medium"]
        self.on_frame:    Optional[Callable[[Frame], None]] = on_frame

        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, frames: Iterable[Frame]) -> None:
        """Attach a driver's frame iterator (or a materialized list) and show frame 0."""
        self._source     = iter(frames)
        self.frames      = []
        self.current_idx = -1
        self.state       = StepperState.PAUSED
        if self._fetch_next():
            self._goto(0)

    def reset(self) -> None:
        """Back to IDLE — caller must call start() again."""
        self._source     = None
        self.frames      = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one frame.  Returns False if already at the end."""
        target = self.current_idx + 1
        if target >= len(self.frames) and not self._fetch_next():
            self.state = StepperState.FINISHED
            return False
        self._goto(target)
        return True

    def prev_step(self) -> bool:
        """Rewind one frame.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        """Seek to frame `idx`, pulling forward from the driver if needed."""
        while idx >= len(self.frames):
            if not self._fetch_next():
                break
        if 0 <= idx < len(self.frames):
            self._goto(idx)
            if self.state == StepperState.FINISHED and idx < len(self.frames) - 1:
                self.state = StepperState.PAUSED
            return True
        return False

    def rewind(self) -> None:
        """Jump back to frame 0."""
        if self.frames:
            self._goto(0)
            if self.state == StepperState.FINISHED:
                self.state = StepperState.PAUSED

    def jump_to_end(self) -> None:
        """Exhaust the driver and jump to the final frame."""
        while self._fetch_next():
            pass
        if self.frames:
            self._goto(len(self.frames) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self, now: Optional[float] = None) -> None:
        if self.state in (StepperState.FINISHED, StepperState.IDLE):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic() if now is None else now

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically (e.g. every 50 ms).  If playing and enough
        time has elapsed, advances one frame.  Returns True if a frame
        was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        return self.next_step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(MIN_INTERVAL, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_frame(self) -> Optional[Frame]:
        if 0 <= self.current_idx < len(self.frames):
            return self.frames[self.current_idx]
        return None

    @property
    def total_frames(self) -> int:
        """Frames pulled so far (the full count once the driver is exhausted)."""
        return len(self.frames)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> bool:
        """Pull one Frame from the driver into the buffer."""
        if self._source is None:
            return False
        frame = next(self._source, None)
        if frame is None:
            self._source = None
            return False
        self.frames.append(frame)
        return True

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_frame is not None:
            self.on_frame(self.frames[idx])
