# songwalker

Building blocks for a multi-slot, multi-timbral instrument. The package
covers stereo mixing with a constant-power pan law and MIDI event routing by
channel. It also has peak and RMS level metering with a waveform ring buffer,
a two-octave piano keyboard model, automatable parameter definitions and the
drag logic of a window resize handle.

The package has no runtime dependencies. It needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `songwalker.audio`

- `constant_power_pan(pan)` returns `(left_gain, right_gain)` for a pan
  position from -1.0 (hard left) to 1.0 (hard right). At the centre both
  gains are about 0.707.
- `measure_levels(left, right)` returns `(peak_left, peak_right, rms_left,
  rms_right)` for a stereo block. An empty block measures as silence. Channels
  of different lengths raise `ValueError`.
- `feed_visualizer(visualizer, left, right)` updates a `VisualizerState` with
  the block's levels. It also pushes about 64 evenly spaced samples of the
  block into its waveform buffer.
- `AudioEngine` is a stereo mix bus. `initialize(sample_rate,
  max_buffer_size)` sets it up. Each block, call `mix_slot(left, right,
  num_samples, gain, pan)` for every audible slot. Then call
  `finish_block(num_samples, master_gain, master_pan, visualizer)`. It applies
  the master gain and pan and meters the result into the visualizer, if one
  is given. It returns the `(left, right)` output, and the next block starts
  from silence. Blocks are clamped to `max_buffer_size` samples. `reset()`
  silences the buffers. `MAX_BLOCK_SIZE` (8192) is the default buffer size.

### `songwalker.midi`

- Frozen dataclass events: `NoteOn`, `NoteOff`, `PolyPressure`, `MidiCC`,
  `MidiPitchBend` and `MidiChannelPressure`. Each event carries a 0-based
  `channel`.
- `event_channel(event)` returns the event's channel, or 0 for other objects.
- `route_event(event, slots, transport)` calls `slot.handle_midi_event(event,
  transport)` on every slot whose `midi_channel` is 0 (all channels). It does
  the same for every slot whose `midi_channel` equals the event's channel
  plus one (channels 1–16).
- `midi_to_freq(note)` gives the frequency in Hz, with A4 (69) at 440 Hz.
- `velocity_to_float(velocity)` clamps a velocity to 0.0–1.0.

### `songwalker.visualizer`

`VisualizerState(width)` keeps the following state:

- held peak levels, raised by `update_levels(...)` and scaled down by
  `decay_levels(amount)`. Values below 0.001 snap to zero.
- the latest RMS levels.
- a stereo waveform ring buffer of `width` samples.

Reading the state:

- `peak_levels()` and `rms_levels()` return `(left, right)` pairs.
- `try_push(left, right)` appends a sample pair. It returns `False` if the
  buffer was busy.
- `waveform()` returns a snapshot `(left, right, cursor)`, or `None` if the
  buffer was busy.
- `clear()` resets everything.

### `songwalker.piano`

- `PianoState` holds `visible`, `octave_offset`, `active_notes` and
  `last_mouse_note`. It offers these methods:
  - `base_note()` returns C3 (48) shifted by whole octaves and clamped to
    0–108.
  - `range_label()` returns a label such as `"C3–B4"`.
  - `shift_octave(delta)` shifts the range, limited to ±4 octaves.
  - `press(note)`, `drag_to(note)` and `release_all()` return lists of
    `PianoEvent(note, pressed, velocity)`. Presses use velocity 0.8.
- `keyboard_layout(base_note, width, height)` returns the `(x, y, w, h)`
  rectangles of the 14 white and 10 black keys of a two-octave keyboard. Black
  keys hang from the bottom edge.

### `songwalker.notes`

`note_name(note)` returns a name such as `"C4"` for 60. `is_black_key(semitone)`
tells whether a semitone offset from C falls on a black key. `SlotRackState`
holds the selected slot index and `editor_expanded`.

### `songwalker.params`

- Gain helpers:
  - `db_to_gain` returns 0.0 at or below -100 dB.
  - `gain_to_db`.
  - `format_gain_db(gain, digits)` returns a string such as `"-6.02"`, or
    `"-inf"`.
  - `parse_gain_db(text)` accepts `"-6 dB"` or `"-inf"`.
- `format_pan(value)` returns `"C"`, `"50L"`, `"25R"` and so on.
- `FloatRange` is linear or skewed and provides `skew_factor` and
  `gain_skew_factor`. `IntRange` is an inclusive integer range. Both offer
  `clamp`, `normalize` and `unnormalize`.
- `FloatParam`, `IntParam` and `BoolParam` keep their value within range.
  `set()` returns the value that was stored. The float and integer parameters
  also offer `set_normalized`, `reset`, `format` and `parse`.
- `SongWalkerParams` holds the global controls: master volume, master pan,
  max voices and pitch bend range. `SlotParams` holds a slot's controls:
  volume, pan, mute, solo, MIDI channel, polyphony, attack, decay, sustain,
  release, filter cutoff and filter resonance.

### `songwalker.resize`

- `SharedWindowSize(width, height)` offers thread-safe `load()` and
  `store(width, height)`.
- `WindowResizeHandle(shared_size, min_size)` offers `begin_drag(x, y)`,
  `drag_to(x, y)` and `end_drag()`. `drag_to` sets the size to the starting
  size plus the pointer movement, never below `min_size`. It returns `True`
  when the size changed.
- `intersects_triangle(bounds, x, y)` tests whether a point lies on the
  handle's side of the diagonal of `(x, y, width, height)` bounds.

## Example

```python
from songwalker.audio import AudioEngine, constant_power_pan
from songwalker.midi import midi_to_freq
from songwalker.visualizer import VisualizerState

left_gain, right_gain = constant_power_pan(0.0)   # about 0.707 each
freq = midi_to_freq(69)                           # 440.0

engine = AudioEngine()
engine.initialize(48000.0, 512)
vis = VisualizerState(64)
block = [0.5] * 512
engine.mix_slot(block, block, 512, 1.0, 0.0)
out_left, out_right = engine.finish_block(512, 1.0, 0.0, vis)
peak_left, peak_right = vis.peak_levels()
```

## What the package does not do

The package has no sound generation of its own. It has no voices, samplers,
envelopes or preset loading, so `mix_slot` expects blocks that were already
rendered. `route_event` expects slot objects that provide `midi_channel` and
`handle_midi_event`.

The package does not open audio or MIDI devices. It does not draw a user
interface and has no plugin host integration. It has no command-line program.