"""Phase timing and rolling frame-rate measurement.

Neither class is safe to share between threads; keep one instance per call site.
"""
from __future__ import annotations

from collections import deque
import time
from typing import Deque, Optional

from loguru import logger

MAX_SAMPLES = 100


class PhaseTimer:
    """Bracket labelled phases with :meth:`start` / :meth:`stop`.

    Durations are logged at DEBUG level, so they only show up when the sink is
    configured for it. A disabled timer does no clock reads at all.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._start_ms: Optional[float] = None

    @staticmethod
    def time() -> float:
        """Monotonic clock in milliseconds."""
        return time.perf_counter() * 1000.0

    @staticmethod
    def time_in_seconds() -> float:
        return time.perf_counter()

    def start(self) -> None:
        if self.enabled:
            self._start_ms = self.time()

    def stop(self, label: str) -> float:
        """Log and return the milliseconds elapsed since the last :meth:`start`."""
        if not self.enabled:
            return 0.0
        if self._start_ms is None:
            raise RuntimeError(f"PhaseTimer.stop({label!r}) called before start()")
        elapsed = self.time() - self._start_ms
        logger.debug("{} = {:.6f} ms", label, elapsed)
        return elapsed


class FramerateProfiler:
    """Rolling average frame rate over the last ``max_samples`` frames.

    The average ramps up until the window is full.
    """

    def __init__(self, max_samples: int = MAX_SAMPLES) -> None:
        if max_samples < 1:
            raise ValueError(f"max_samples must be >= 1, got {max_samples}")
        self.max_samples = max_samples
        self._samples: Deque[float] = deque(maxlen=max_samples)
        self._frame_start = 0.0

    @property
    def samples_collected(self) -> int:
        return len(self._samples)

    def start_frame(self) -> None:
        self._frame_start = PhaseTimer.time_in_seconds()

    def finish_frame(self) -> None:
        self.profile_frame(PhaseTimer.time_in_seconds() - self._frame_start)

    def profile_frame(self, frame_time: float) -> None:
        """Record one frame duration in seconds, evicting the oldest when full."""
        self._samples.append(float(frame_time))

    @property
    def framerate(self) -> float:
        """Frames per second over the window, or 0.0 before any time has elapsed."""
        total = sum(self._samples)
        if total == 0:
            return 0.0
        return len(self._samples) / total
