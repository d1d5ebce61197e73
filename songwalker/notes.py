"""Note naming, key colours and the slot rack's selection state."""

from __future__ import annotations

from dataclasses import dataclass

_NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
_BLACK_SEMITONES = frozenset({1, 3, 6, 8, 10})


@dataclass
class SlotRackState:
    """Selection state of the slot rack."""

    selected_slot: int = 0
    editor_expanded: bool = False


def note_name(note: int) -> str:
    """Name of a MIDI note number, e.g. 60 -> "C4"."""
    if note < 0:
        raise ValueError(f"note number must not be negative, got {note}")
    octave = note // 12 - 1
    return f"{_NOTE_NAMES[note % 12]}{octave}"


def is_black_key(semitone: int) -> bool:
    """Whether a semitone offset from C falls on a black key."""
    return semitone % 12 in _BLACK_SEMITONES