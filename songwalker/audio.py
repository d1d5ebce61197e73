"""Block mixing: per-slot gain/pan, master gain/pan and visualizer metering."""

from __future__ import annotations

import math
from typing import Sequence

from songwalker.visualizer import VisualizerState

MAX_BLOCK_SIZE = 8192
"""Largest number of samples processed in a single block."""

_WAVEFORM_POINTS_PER_BLOCK = 64


def constant_power_pan(pan: float) -> tuple[float, float]:
    """Constant-power pan law returning (left_gain, right_gain).

    ``pan`` runs from -1.0 (hard left) through 0.0 (centre) to 1.0 (hard right).
    """
    angle = (pan + 1.0) * 0.25 * math.pi
    return math.cos(angle), math.sin(angle)


def measure_levels(
    left: Sequence[float], right: Sequence[float]
) -> tuple[float, float, float, float]:
    """Return (peak_left, peak_right, rms_left, rms_right) of a stereo block.

    An empty block measures as silence.
    """
    if len(left) != len(right):
        raise ValueError(
            f"channel lengths differ: left={len(left)} right={len(right)}"
        )
    if not left:
        return 0.0, 0.0, 0.0, 0.0
    n = len(left)
    peak_l = max(abs(s) for s in left)
    peak_r = max(abs(s) for s in right)
    rms_l = math.sqrt(math.fsum(s * s for s in left) / n)
    rms_r = math.sqrt(math.fsum(s * s for s in right) / n)
    return peak_l, peak_r, rms_l, rms_r


def feed_visualizer(
    visualizer: VisualizerState, left: Sequence[float], right: Sequence[float]
) -> None:
    """Send a block's levels and a decimated waveform to ``visualizer``."""
    if not left:
        return
    visualizer.update_levels(*measure_levels(left, right))
    step = max(len(left) // _WAVEFORM_POINTS_PER_BLOCK, 1)
    for l_sample, r_sample in zip(left[::step], right[::step]):
        visualizer.try_push(l_sample, r_sample)


class AudioEngine:
    """Stereo mix bus with buffers sized once at initialisation.

    Each block, call :meth:`mix_slot` for every audible slot and then
    :meth:`finish_block`, which applies the master stage and returns the
    block's output. The next block starts from silence.
    """

    def __init__(self) -> None:
        self._sample_rate = 44100.0
        self._max_buffer_size = MAX_BLOCK_SIZE
        self.output_left = [0.0] * MAX_BLOCK_SIZE
        self.output_right = [0.0] * MAX_BLOCK_SIZE
        self._needs_clear = True

    @property
    def sample_rate(self) -> float:
        """Current sample rate in Hz."""
        return self._sample_rate

    @property
    def max_buffer_size(self) -> int:
        """Largest block the engine will process."""
        return self._max_buffer_size

    def initialize(self, sample_rate: float, max_buffer_size: int) -> None:
        """Set the sample rate and resize the output buffers."""
        if sample_rate <= 0:
            raise ValueError(f"sample rate must be positive, got {sample_rate}")
        if max_buffer_size < 0:
            raise ValueError(
                f"buffer size must not be negative, got {max_buffer_size}"
            )
        self._sample_rate = float(sample_rate)
        self._max_buffer_size = max_buffer_size
        self.output_left = [0.0] * max_buffer_size
        self.output_right = [0.0] * max_buffer_size
        self._needs_clear = True

    def reset(self) -> None:
        """Silence the output buffers."""
        self.output_left = [0.0] * self._max_buffer_size
        self.output_right = [0.0] * self._max_buffer_size
        self._needs_clear = True

    def _block_length(self, num_samples: int) -> int:
        if num_samples < 0:
            raise ValueError(f"sample count must not be negative, got {num_samples}")
        return min(num_samples, self._max_buffer_size)

    def _start_block(self) -> None:
        if self._needs_clear:
            self.reset()
            self._needs_clear = False

    def mix_slot(
        self,
        left: Sequence[float],
        right: Sequence[float],
        num_samples: int,
        gain: float,
        pan: float,
    ) -> None:
        """Add a rendered slot block to the mix with the slot's gain and pan."""
        n = self._block_length(num_samples)
        if n == 0:
            return
        if len(left) < n or len(right) < n:
            raise ValueError(
                f"slot buffers hold fewer than {n} samples "
                f"(left={len(left)}, right={len(right)})"
            )
        self._start_block()
        pan_l, pan_r = constant_power_pan(pan)
        gain_l = gain * pan_l
        gain_r = gain * pan_r
        out_l = self.output_left
        out_r = self.output_right
        for i, (l_sample, r_sample) in enumerate(zip(left[:n], right[:n])):
            out_l[i] += l_sample * gain_l
            out_r[i] += r_sample * gain_r

    def finish_block(
        self,
        num_samples: int,
        master_gain: float,
        master_pan: float,
        visualizer: VisualizerState | None,
    ) -> tuple[list[float], list[float]]:
        """Apply master gain and pan, meter the result and return it.

        Returns the (left, right) output of the block, clamped to
        :attr:`max_buffer_size` samples.
        """
        n = self._block_length(num_samples)
        if n == 0:
            return [], []
        self._start_block()
        pan_l, pan_r = constant_power_pan(master_pan)
        gain_l = master_gain * pan_l
        gain_r = master_gain * pan_r
        left = [s * gain_l for s in self.output_left[:n]]
        right = [s * gain_r for s in self.output_right[:n]]
        self.output_left[:n] = left
        self.output_right[:n] = right
        if visualizer is not None:
            feed_visualizer(visualizer, left, right)
        self._needs_clear = True
        return left, right