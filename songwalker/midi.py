"""MIDI events, routing to instrument slots, and note/velocity helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class NoteOn:
    """A note being pressed."""

    channel: int
    note: int
    velocity: float
    timing: int = 0
    voice_id: int | None = None


@dataclass(frozen=True)
class NoteOff:
    """A note being released."""

    channel: int
    note: int
    velocity: float = 0.0
    timing: int = 0
    voice_id: int | None = None


@dataclass(frozen=True)
class PolyPressure:
    """Per-note aftertouch."""

    channel: int
    note: int
    pressure: float
    timing: int = 0
    voice_id: int | None = None


@dataclass(frozen=True)
class MidiCC:
    """A control change message; ``value`` is normalised to 0.0–1.0."""

    channel: int
    cc: int
    value: float
    timing: int = 0


@dataclass(frozen=True)
class MidiPitchBend:
    """A pitch bend message; ``value`` is normalised to 0.0–1.0."""

    channel: int
    value: float
    timing: int = 0


@dataclass(frozen=True)
class MidiChannelPressure:
    """Channel-wide aftertouch."""

    channel: int
    pressure: float
    timing: int = 0


_CHANNEL_EVENTS = (NoteOn, NoteOff, PolyPressure, MidiCC, MidiPitchBend, MidiChannelPressure)


def event_channel(event: Any) -> int:
    """Return the event's MIDI channel (0–15), or 0 for events without one."""
    if isinstance(event, _CHANNEL_EVENTS):
        return event.channel
    return 0


def route_event(event: Any, slots: Iterable[Any], transport: Any) -> None:
    """Deliver ``event`` to every slot listening on its channel.

    A slot's ``midi_channel`` of 0 receives all channels; 1–16 receives only
    that channel.
    """
    channel = event_channel(event) + 1
    for slot in slots:
        slot_channel = slot.midi_channel
        if slot_channel == 0 or slot_channel == channel:
            slot.handle_midi_event(event, transport)


def midi_to_freq(note: int) -> float:
    """Frequency in Hz of a MIDI note number, with A4 (69) at 440 Hz."""
    return 440.0 * 2.0 ** ((note - 69.0) / 12.0)


def velocity_to_float(velocity: float) -> float:
    """Clamp a velocity to the range 0.0–1.0."""
    return min(max(velocity, 0.0), 1.0)