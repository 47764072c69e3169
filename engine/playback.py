"""
playback.py — Trace Playback Controller
=======================================
Playback is the only object a renderer talks to once a trace exists.
It owns the Trace, a cursor into its timeline, and the autoplay timer,
and exposes play / pause / step / seek / speed / reset.

State machine:
    IDLE     →  load()     →  PAUSED
    PAUSED   →  play()     →  PLAYING
    PLAYING  →  pause()    →  PAUSED
    PLAYING  →  (last frame reached) → FINISHED
    any      →  reset()    →  PAUSED at frame 0   (IDLE if nothing loaded)
    any      →  unload()   →  IDLE

Timing:
  Autoplay is driven from outside: the caller's timer (a browser
  setInterval, a Qt timer, a test) calls tick() periodically.  A tick
  advances one frame once `interval` (= 1 / speed seconds) has passed
  since the previous advance.

Thread safety:
  Not thread-safe.  One logical actor drives editing and playback.
"""

import logging
import time
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from config import SPEED_PRESETS, DEFAULT_SPEED
from errors import TraceInputError
from algorithms.frame import Trace

logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


class Playback:
    """
    Attributes:
        trace    : The loaded Trace, or None.
        index    : Cursor into trace.timeline (-1 when nothing is loaded).
        state    : Current PlaybackState.
        speed    : Multiplier; autoplay advances every 1 / speed seconds.
        on_frame : Optional callback(frame) fired whenever the cursor moves.
    """

    def __init__(self, on_frame: Optional[Callable[[Any], None]] = None):
        self.trace:    Optional[Trace]  = None
        self.index:    int              = -1
        self.state:    PlaybackState    = PlaybackState.IDLE
        self.speed:    float            = DEFAULT_SPEED
        self.on_frame: Optional[Callable[[Any], None]] = on_frame

        self._last_tick: float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, trace: Trace) -> None:
        """Take ownership of a fresh trace and show its first frame."""
        self.trace = trace
        self.state = PlaybackState.PAUSED
        self._goto(0)
        logger.debug("Loaded %s: %d frames", trace.algorithm, len(trace))

    def unload(self) -> None:
        """Drop the trace (the structure was edited)."""
        self.trace = None
        self.index = -1
        self.state = PlaybackState.IDLE

    def reset(self) -> None:
        if self.trace is None:
            self.state = PlaybackState.IDLE
            return
        self.state = PlaybackState.PAUSED
        self._goto(0)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step(self, delta: int = 1) -> bool:
        """Move the cursor by `delta`.  Returns False (cursor unchanged) at either end."""
        if self.trace is None:
            return False
        target = self.index + delta
        if not 0 <= target < len(self.trace):
            if delta > 0:
                self.state = PlaybackState.FINISHED
            return False
        self._goto(target)
        if self.at_end:
            self.state = PlaybackState.FINISHED
        elif self.state == PlaybackState.FINISHED:
            self.state = PlaybackState.PAUSED
        return True

    def seek(self, index: int) -> bool:
        """Jump to `index`.  Out-of-range requests are refused."""
        if self.trace is None or not 0 <= index < len(self.trace):
            return False
        self._goto(index)
        if self.at_end:
            self.state = PlaybackState.FINISHED
        elif self.state == PlaybackState.FINISHED:
            self.state = PlaybackState.PAUSED
        return True

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.trace is None:
            return
        if self.at_end:
            self.state = PlaybackState.FINISHED
            return
        self.state      = PlaybackState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == PlaybackState.PLAYING:
            self.state = PlaybackState.PAUSED

    def toggle_play(self) -> None:
        if self.state == PlaybackState.PLAYING:
            self.pause()
        else:
            self.play()

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Timer callback.  If playing and a full interval has elapsed,
        advances one frame and returns True.
        """
        if self.state != PlaybackState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick < self.interval:
            return False
        self._last_tick = now
        return self.step(1)

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, multiplier: Union[float, str]) -> None:
        """Any positive multiplier, or a preset name such as '2x'."""
        if isinstance(multiplier, str) and multiplier in SPEED_PRESETS:
            value = SPEED_PRESETS[multiplier]
        else:
            try:
                value = float(multiplier)
            except (TypeError, ValueError):
                raise TraceInputError(f"Invalid speed: {multiplier!r}") from None
        if not value > 0:
            raise TraceInputError("Speed must be greater than zero.")
        self.speed = value

    @property
    def interval(self) -> float:
        return 1.0 / self.speed

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_frame(self):
        if self.trace is not None and 0 <= self.index < len(self.trace):
            return self.trace[self.index]
        return None

    @property
    def total(self) -> int:
        return len(self.trace) if self.trace is not None else 0

    @property
    def at_end(self) -> bool:
        return self.trace is not None and self.index == len(self.trace) - 1

    @property
    def is_playing(self) -> bool:
        return self.state == PlaybackState.PLAYING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "index": self.index,
            "total": self.total,
            "speed": self.speed,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.index = idx
        if self.on_frame is not None:
            self.on_frame(self.trace[idx])
