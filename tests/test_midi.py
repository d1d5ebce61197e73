import pytest

from songwalker.midi import (
    MidiCC,
    MidiChannelPressure,
    MidiPitchBend,
    NoteOff,
    NoteOn,
    PolyPressure,
    event_channel,
    midi_to_freq,
    route_event,
    velocity_to_float,
)


class _Slot:
    def __init__(self, midi_channel):
        self.midi_channel = midi_channel
        self.received = []

    def handle_midi_event(self, event, transport):
        self.received.append((event, transport))


def test_midi_to_freq_a4():
    assert midi_to_freq(69) == pytest.approx(440.0, abs=0.01)


def test_midi_to_freq_c4():
    assert midi_to_freq(60) == pytest.approx(261.63, abs=0.1)


def test_midi_to_freq_boundaries():
    assert midi_to_freq(0) > 0.0
    assert midi_to_freq(127) < 20000.0
    assert midi_to_freq(72) / midi_to_freq(60) == pytest.approx(2.0, abs=0.01)


def test_velocity_to_float_normal():
    assert velocity_to_float(0.0) == 0.0
    assert velocity_to_float(0.5) == 0.5
    assert velocity_to_float(1.0) == 1.0


def test_velocity_to_float_clamp():
    assert velocity_to_float(-0.5) == 0.0
    assert velocity_to_float(1.5) == 1.0


def test_event_channel_note_on():
    event = NoteOn(timing=0, voice_id=None, channel=5, note=60, velocity=0.8)
    assert event_channel(event) == 5


def test_event_channel_note_off():
    event = NoteOff(timing=0, voice_id=None, channel=10, note=60, velocity=0.0)
    assert event_channel(event) == 10


def test_event_channel_cc():
    event = MidiCC(timing=0, channel=3, cc=1, value=0.5)
    assert event_channel(event) == 3


@pytest.mark.parametrize(
    "event, expected",
    [
        (PolyPressure(channel=7, note=64, pressure=0.3), 7),
        (MidiPitchBend(channel=2, value=0.5), 2),
        (MidiChannelPressure(channel=15, pressure=1.0), 15),
    ],
)
def test_event_channel_other_kinds(event, expected):
    assert event_channel(event) == expected


def test_event_channel_unknown_event_is_zero():
    assert event_channel(object()) == 0


def test_route_event_respects_slot_channels():
    omni = _Slot(0)
    ch4 = _Slot(4)
    ch5 = _Slot(5)
    event = NoteOn(channel=3, note=60, velocity=0.8)
    route_event(event, [omni, ch4, ch5], "transport")
    assert omni.received == [(event, "transport")]
    assert ch4.received == [(event, "transport")]
    assert ch5.received == []


def test_route_event_unknown_event_goes_to_channel_one():
    ch1 = _Slot(1)
    ch2 = _Slot(2)
    marker = object()
    route_event(marker, [ch1, ch2], None)
    assert len(ch1.received) == 1
    assert ch2.received == []