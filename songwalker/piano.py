"""On-screen piano keyboard: key layout and press/release state."""

from __future__ import annotations

from dataclasses import dataclass, field

from songwalker.notes import is_black_key, note_name

NUM_WHITE_KEYS = 14
"""White keys across the two displayed octaves."""

NUM_SEMITONES = 24
"""Semitones across the two displayed octaves."""

PRESS_VELOCITY = 0.8
"""Velocity used for notes pressed on the keyboard."""

_DEFAULT_BASE_NOTE = 48
_MAX_BASE_NOTE = 108
_MIN_OCTAVE_OFFSET = -4
_MAX_OCTAVE_OFFSET = 4


@dataclass(frozen=True)
class PianoEvent:
    """A note pressed (``pressed`` true) or released on the keyboard."""

    note: int
    pressed: bool
    velocity: float = 0.0


@dataclass
class PianoState:
    """Visibility, octave shift and currently held notes of the keyboard."""

    visible: bool = False
    octave_offset: int = 0
    active_notes: set[int] = field(default_factory=set)
    last_mouse_note: int | None = None

    def base_note(self) -> int:
        """MIDI note of the leftmost key."""
        note = _DEFAULT_BASE_NOTE + self.octave_offset * 12
        return min(max(note, 0), _MAX_BASE_NOTE)

    def range_label(self) -> str:
        """Label of the displayed range, e.g. "C3–B4"."""
        base = self.base_note()
        return f"{note_name(base)}–{note_name(base + NUM_SEMITONES - 1)}"

    def shift_octave(self, delta: int) -> int:
        """Shift the range by ``delta`` octaves within ±4; return the new offset."""
        self.octave_offset = min(
            max(self.octave_offset + delta, _MIN_OCTAVE_OFFSET), _MAX_OCTAVE_OFFSET
        )
        return self.octave_offset

    def press(self, note: int) -> list[PianoEvent]:
        """Start a new press on ``note``."""
        self.active_notes.add(note)
        self.last_mouse_note = note
        return [PianoEvent(note, True, PRESS_VELOCITY)]

    def drag_to(self, note: int) -> list[PianoEvent]:
        """Move a held press onto ``note``, releasing the previous key."""
        if self.last_mouse_note == note:
            return []
        events: list[PianoEvent] = []
        old = self.last_mouse_note
        if old is not None:
            self.active_notes.discard(old)
            events.append(PianoEvent(old, False))
        events.extend(self.press(note))
        return events

    def release_all(self) -> list[PianoEvent]:
        """Release every held note."""
        events = [PianoEvent(note, False) for note in sorted(self.active_notes)]
        self.active_notes.clear()
        self.last_mouse_note = None
        return events


Rect = tuple[float, float, float, float]


def keyboard_layout(
    base_note: int, width: float, height: float
) -> tuple[list[tuple[int, Rect]], list[tuple[int, Rect]]]:
    """Key rectangles of a two-octave keyboard starting at ``base_note``.

    Returns (white_keys, black_keys), each a list of (note, (x, y, w, h)) with
    the origin at the keyboard's top-left corner. Black keys hang from the
    bottom edge and are drawn over the white keys.
    """
    white_w = width / NUM_WHITE_KEYS
    black_w = white_w * 0.6
    black_h = height * 0.6
    white_keys: list[tuple[int, Rect]] = []
    black_keys: list[tuple[int, Rect]] = []
    white_index = 0
    for semitone in range(NUM_SEMITONES):
        note = base_note + semitone
        if is_black_key(semitone):
            x = white_index * white_w - black_w * 0.5
            black_keys.append((note, (x, height - black_h, black_w, black_h)))
        else:
            white_keys.append((note, (white_index * white_w, 0.0, white_w, height)))
            white_index += 1
    return white_keys, black_keys