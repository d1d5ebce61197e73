"""Automatable parameters: ranges, value formatting and the instrument's parameter sets."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import partial
from typing import Callable

MINUS_INFINITY_DB = -100.0
"""Decibel level treated as silence."""

MINUS_INFINITY_GAIN = 1e-5
"""Linear gain treated as silence when converting to decibels."""


def db_to_gain(db: float) -> float:
    """Convert decibels to linear gain; levels at or below -100 dB give 0.0."""
    if db > MINUS_INFINITY_DB:
        return 10.0 ** (db * 0.05)
    return 0.0


def gain_to_db(gain: float) -> float:
    """Convert linear gain to decibels, treating tiny gains as -100 dB."""
    return math.log10(max(gain, MINUS_INFINITY_GAIN)) * 20.0


def format_gain_db(gain: float, digits: int = 2) -> str:
    """Render a linear gain as decibels with ``digits`` decimals, or "-inf"."""
    db = gain_to_db(gain)
    if db <= MINUS_INFINITY_DB:
        return "-inf"
    if abs(db) < 1e-6:
        db = 0.0
    return f"{db:.{digits}f}"


def parse_gain_db(text: str) -> float:
    """Parse a decibel string such as "-6 dB" or "-inf" into linear gain."""
    stripped = text.strip().rstrip(" dDbB")
    if stripped.lower() == "-inf":
        return 0.0
    try:
        db = float(stripped)
    except ValueError:
        raise ValueError(f"not a decibel value: {text!r}") from None
    return db_to_gain(db)


def format_pan(value: float) -> str:
    """Render a pan position as "C", "<n>L" or "<n>R"."""
    if abs(value) < 0.01:
        return "C"
    if value < 0.0:
        return f"{-value * 100.0:.0f}L"
    return f"{value * 100.0:.0f}R"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class FloatRange:
    """A continuous range, linear when ``factor`` is 1.0 and skewed otherwise."""

    min: float
    max: float
    factor: float = 1.0

    def __post_init__(self) -> None:
        if not self.min < self.max:
            raise ValueError(f"range minimum {self.min} must be below maximum {self.max}")
        if self.factor <= 0.0:
            raise ValueError(f"skew factor must be positive, got {self.factor}")

    @classmethod
    def linear(cls, min: float, max: float) -> "FloatRange":
        """A range mapped linearly onto 0.0–1.0."""
        return cls(min, max)

    @classmethod
    def skewed(cls, min: float, max: float, factor: float) -> "FloatRange":
        """A range mapped onto 0.0–1.0 through ``normalized ** factor``."""
        return cls(min, max, factor)

    @staticmethod
    def skew_factor(factor: float) -> float:
        """Skew factor from a friendlier exponent; negative values favour the low end."""
        return 2.0 ** factor

    @staticmethod
    def gain_skew_factor(min_db: float, max_db: float) -> float:
        """Skew factor that puts the midpoint in decibels at the middle of a gain range."""
        min_gain = db_to_gain(min_db)
        max_gain = db_to_gain(max_db)
        middle_gain = db_to_gain((min_db + max_db) / 2.0)
        return math.log(0.5) / math.log((middle_gain - min_gain) / (max_gain - min_gain))

    def clamp(self, value: float) -> float:
        """Limit ``value`` to the range."""
        return min(max(value, self.min), self.max)

    def normalize(self, value: float) -> float:
        """Map a plain value to 0.0–1.0."""
        proportion = (self.clamp(value) - self.min) / (self.max - self.min)
        return proportion ** self.factor

    def unnormalize(self, normalized: float) -> float:
        """Map a 0.0–1.0 value back onto the range."""
        n = min(max(normalized, 0.0), 1.0)
        return n ** (1.0 / self.factor) * (self.max - self.min) + self.min


@dataclass(frozen=True)
class IntRange:
    """An inclusive integer range mapped linearly onto 0.0–1.0."""

    min: int
    max: int

    def __post_init__(self) -> None:
        if not self.min < self.max:
            raise ValueError(f"range minimum {self.min} must be below maximum {self.max}")

    def clamp(self, value: int) -> int:
        """Limit ``value`` to the range."""
        return min(max(value, self.min), self.max)

    def normalize(self, value: int) -> float:
        """Map a plain value to 0.0–1.0."""
        return (self.clamp(value) - self.min) / (self.max - self.min)

    def unnormalize(self, normalized: float) -> int:
        """Map a 0.0–1.0 value back onto the nearest step of the range."""
        n = min(max(normalized, 0.0), 1.0)
        return _round_half_up(n * (self.max - self.min)) + self.min


def _strip_unit(text: str, unit: str) -> str:
    stripped = text.strip()
    unit = unit.strip()
    if unit and stripped.endswith(unit):
        stripped = stripped[: -len(unit)].strip()
    return stripped


@dataclass
class FloatParam:
    """A continuous parameter whose value always lies within its range."""

    name: str
    default: float
    range: FloatRange
    unit: str = ""
    value_to_string: Callable[[float], str] | None = None
    string_to_value: Callable[[str], float] | None = None
    value: float = field(init=False)

    def __post_init__(self) -> None:
        self.value = self.range.clamp(self.default)

    def set(self, value: float) -> float:
        """Set the value, clamped to the range; return what was stored."""
        self.value = self.range.clamp(value)
        return self.value

    @property
    def normalized_value(self) -> float:
        """The current value mapped to 0.0–1.0."""
        return self.range.normalize(self.value)

    def set_normalized(self, normalized: float) -> float:
        """Set the value from a 0.0–1.0 position; return what was stored."""
        return self.set(self.range.unnormalize(normalized))

    def reset(self) -> None:
        """Return to the default value."""
        self.value = self.range.clamp(self.default)

    def format(self) -> str:
        """Display text of the current value, with its unit."""
        text = self.value_to_string(self.value) if self.value_to_string else f"{self.value}"
        return f"{text}{self.unit}"

    def parse(self, text: str) -> float:
        """Parse display text into a value clamped to the range."""
        if self.string_to_value is not None:
            return self.range.clamp(self.string_to_value(text))
        try:
            return self.range.clamp(float(_strip_unit(text, self.unit)))
        except ValueError:
            raise ValueError(f"not a value for {self.name}: {text!r}") from None


@dataclass
class IntParam:
    """An integer parameter whose value always lies within its range."""

    name: str
    default: int
    range: IntRange
    unit: str = ""
    value: int = field(init=False)

    def __post_init__(self) -> None:
        self.value = self.range.clamp(self.default)

    def set(self, value: int) -> int:
        """Set the value, clamped to the range; return what was stored."""
        self.value = self.range.clamp(int(value))
        return self.value

    @property
    def normalized_value(self) -> float:
        """The current value mapped to 0.0–1.0."""
        return self.range.normalize(self.value)

    def set_normalized(self, normalized: float) -> int:
        """Set the value from a 0.0–1.0 position; return what was stored."""
        return self.set(self.range.unnormalize(normalized))

    def reset(self) -> None:
        """Return to the default value."""
        self.value = self.range.clamp(self.default)

    def format(self) -> str:
        """Display text of the current value, with its unit."""
        return f"{self.value}{self.unit}"

    def parse(self, text: str) -> int:
        """Parse display text into a value clamped to the range."""
        try:
            return self.range.clamp(int(_strip_unit(text, self.unit)))
        except ValueError:
            raise ValueError(f"not a value for {self.name}: {text!r}") from None


@dataclass
class BoolParam:
    """An on/off parameter."""

    name: str
    default: bool
    value: bool = field(init=False)

    def __post_init__(self) -> None:
        self.value = self.default


def _gain_param(name: str) -> FloatParam:
    return FloatParam(
        name,
        db_to_gain(0.0),
        FloatRange.skewed(
            db_to_gain(-60.0),
            db_to_gain(6.0),
            FloatRange.gain_skew_factor(-60.0, 6.0),
        ),
        unit=" dB",
        value_to_string=partial(format_gain_db, digits=2),
        string_to_value=parse_gain_db,
    )


def _seconds_param(name: str, default: float) -> FloatParam:
    return FloatParam(
        name,
        default,
        FloatRange.skewed(0.001, 10.0, FloatRange.skew_factor(-2.0)),
        unit=" s",
    )


@dataclass
class SongWalkerParams:
    """Global controls exposed for automation."""

    master_volume: FloatParam = field(default_factory=lambda: _gain_param("Master Volume"))
    master_pan: FloatParam = field(
        default_factory=lambda: FloatParam(
            "Master Pan",
            0.0,
            FloatRange.linear(-1.0, 1.0),
            value_to_string=format_pan,
        )
    )
    max_voices: IntParam = field(
        default_factory=lambda: IntParam("Max Voices", 256, IntRange(8, 1024))
    )
    pitch_bend_range: IntParam = field(
        default_factory=lambda: IntParam("Pitch Bend Range", 2, IntRange(1, 48), unit=" st")
    )


@dataclass
class SlotParams:
    """Controls belonging to one slot of the rack."""

    volume: FloatParam = field(default_factory=lambda: _gain_param("Slot Volume"))
    pan: FloatParam = field(
        default_factory=lambda: FloatParam("Slot Pan", 0.0, FloatRange.linear(-1.0, 1.0))
    )
    mute: BoolParam = field(default_factory=lambda: BoolParam("Mute", False))
    solo: BoolParam = field(default_factory=lambda: BoolParam("Solo", False))
    midi_channel: IntParam = field(
        default_factory=lambda: IntParam("MIDI Channel", 0, IntRange(0, 16))
    )
    polyphony: IntParam = field(
        default_factory=lambda: IntParam("Polyphony", 64, IntRange(1, 256))
    )
    attack: FloatParam = field(default_factory=lambda: _seconds_param("Attack", 0.01))
    decay: FloatParam = field(default_factory=lambda: _seconds_param("Decay", 0.1))
    sustain: FloatParam = field(
        default_factory=lambda: FloatParam("Sustain", 0.8, FloatRange.linear(0.0, 1.0))
    )
    release: FloatParam = field(default_factory=lambda: _seconds_param("Release", 0.3))
    filter_cutoff: FloatParam = field(
        default_factory=lambda: FloatParam(
            "Filter Cutoff",
            20000.0,
            FloatRange.skewed(20.0, 20000.0, FloatRange.skew_factor(-2.0)),
            unit=" Hz",
        )
    )
    filter_resonance: FloatParam = field(
        default_factory=lambda: FloatParam(
            "Filter Resonance", 0.0, FloatRange.linear(0.0, 1.0)
        )
    )