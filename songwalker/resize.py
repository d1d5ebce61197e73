"""Window resize handle that changes the window's size rather than its scale."""

from __future__ import annotations

import math
import threading

Bounds = tuple[float, float, float, float]


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


class SharedWindowSize:
    """Window dimensions shared between the resize handle and the host window."""

    def __init__(self, width: int, height: int) -> None:
        self._lock = threading.Lock()
        self._width = 0
        self._height = 0
        self.store(width, height)

    def load(self) -> tuple[int, int]:
        """Current (width, height)."""
        with self._lock:
            return self._width, self._height

    def store(self, width: int, height: int) -> None:
        """Replace the dimensions."""
        if width < 0 or height < 0:
            raise ValueError(f"window size must not be negative, got {width}x{height}")
        with self._lock:
            self._width = int(width)
            self._height = int(height)


class WindowResizeHandle:
    """Drag logic of a bottom-right resize handle.

    The new size is the size at the start of the drag plus the pointer's
    movement, never below ``min_size``.
    """

    def __init__(self, shared_size: SharedWindowSize, min_size: tuple[int, int]) -> None:
        self.shared_size = shared_size
        self.min_size = min_size
        self._drag_active = False
        self._start_pos = (0.0, 0.0)
        self._start_size = (0, 0)

    @property
    def drag_active(self) -> bool:
        """Whether a drag is in progress."""
        return self._drag_active

    def begin_drag(self, x: float, y: float) -> None:
        """Start a drag with the pointer at (x, y)."""
        self._drag_active = True
        self._start_pos = (x, y)
        self._start_size = self.shared_size.load()

    def drag_to(self, x: float, y: float) -> bool:
        """Follow the pointer to (x, y); return True if the window size changed."""
        if not self._drag_active:
            return False
        dx = x - self._start_pos[0]
        dy = y - self._start_pos[1]
        new_w = int(max(_round_half_away(self._start_size[0] + dx), self.min_size[0]))
        new_h = int(max(_round_half_away(self._start_size[1] + dy), self.min_size[1]))
        if self.shared_size.load() == (new_w, new_h):
            return False
        self.shared_size.store(new_w, new_h)
        return True

    def end_drag(self) -> None:
        """Finish the drag."""
        self._drag_active = False


def intersects_triangle(bounds: Bounds, x: float, y: float) -> bool:
    """Whether (x, y) lies on the handle's side of its diagonal.

    ``bounds`` is (x, y, width, height) with y growing downwards; the diagonal
    runs from the bottom-left to the top-right corner, and points on it count.
    """
    bx, by, bw, bh = bounds
    p1x, p1y = bx, by + bh
    p2x, p2y = bx + bw, by
    v1x, v1y = p2x - p1x, p2y - p1y
    return (x - p1x) * v1y - (y - p1y) * v1x >= 0.0