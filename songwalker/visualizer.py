"""Output level and waveform state shared between the audio and UI threads."""

from __future__ import annotations

import threading

_PEAK_FLOOR = 0.001


class VisualizerState:
    """Peak/RMS levels plus a stereo waveform ring buffer.

    Level updates never block. Waveform access uses a non-blocking lock on
    both sides, so a contended push or read is skipped rather than waited on.
    """

    def __init__(self, width: int) -> None:
        if width <= 0:
            raise ValueError(f"waveform width must be positive, got {width}")
        self._width = width
        self._left = [0.0] * width
        self._right = [0.0] * width
        self._cursor = 0
        self._lock = threading.Lock()
        self._peak_left = 0.0
        self._peak_right = 0.0
        self._rms_left = 0.0
        self._rms_right = 0.0

    @property
    def width(self) -> int:
        """Number of samples held by the waveform buffer."""
        return self._width

    def try_push(self, left: float, right: float) -> bool:
        """Append a stereo sample pair; return False if the buffer was busy."""
        if not self._lock.acquire(blocking=False):
            return False
        try:
            self._left[self._cursor] = left
            self._right[self._cursor] = right
            self._cursor = (self._cursor + 1) % self._width
        finally:
            self._lock.release()
        return True

    def update_levels(self, peak_l: float, peak_r: float, rms_l: float, rms_r: float) -> None:
        """Raise the held peaks to at least the given values and set RMS levels."""
        self._peak_left = max(self._peak_left, peak_l)
        self._peak_right = max(self._peak_right, peak_r)
        self._rms_left = rms_l
        self._rms_right = rms_r

    def decay_levels(self, amount: float) -> None:
        """Scale the held peaks by ``amount``, snapping tiny values to zero."""
        pl = self._peak_left * amount
        pr = self._peak_right * amount
        self._peak_left = 0.0 if pl < _PEAK_FLOOR else pl
        self._peak_right = 0.0 if pr < _PEAK_FLOOR else pr

    def peak_levels(self) -> tuple[float, float]:
        """Current (left, right) peak levels."""
        return self._peak_left, self._peak_right

    def rms_levels(self) -> tuple[float, float]:
        """Current (left, right) RMS levels."""
        return self._rms_left, self._rms_right

    def waveform(self) -> tuple[list[float], list[float], int] | None:
        """Snapshot of (left, right, cursor), or None if the buffer was busy."""
        if not self._lock.acquire(blocking=False):
            return None
        try:
            return list(self._left), list(self._right), self._cursor
        finally:
            self._lock.release()

    def clear(self) -> None:
        """Reset levels and, if the buffer is free, the waveform."""
        self._peak_left = 0.0
        self._peak_right = 0.0
        self._rms_left = 0.0
        self._rms_right = 0.0
        if not self._lock.acquire(blocking=False):
            return
        try:
            self._left = [0.0] * self._width
            self._right = [0.0] * self._width
            self._cursor = 0
        finally:
            self._lock.release()