import pytest

from songwalker.params import (
    BoolParam,
    FloatParam,
    FloatRange,
    IntParam,
    IntRange,
    SlotParams,
    SongWalkerParams,
    db_to_gain,
    format_gain_db,
    format_pan,
    gain_to_db,
    parse_gain_db,
)


@pytest.mark.parametrize("db", [-60.0, -12.5, -6.0, 0.0, 3.0, 6.0])
def test_db_gain_round_trip(db):
    assert gain_to_db(db_to_gain(db)) == pytest.approx(db, abs=1e-9)


def test_db_to_gain_is_monotonic():
    gains = [db_to_gain(db) for db in (-60.0, -30.0, 0.0, 6.0)]
    assert gains == sorted(gains)


def test_db_to_gain_silence_floor():
    assert db_to_gain(-100.0) == 0.0
    assert db_to_gain(-200.0) == 0.0


def test_gain_to_db_of_zero_is_floor():
    assert gain_to_db(0.0) == pytest.approx(-100.0)


def test_format_gain_db_unity():
    assert format_gain_db(1.0, 2) == "0.00"


def test_format_gain_db_silence():
    assert format_gain_db(0.0, 2) == "-inf"


def test_format_gain_db_digits():
    text = format_gain_db(db_to_gain(-6.0), 1)
    assert text == "-6.0"


@pytest.mark.parametrize("db", [-40.0, -6.0, 0.0, 6.0])
def test_gain_format_parse_round_trip(db):
    gain = db_to_gain(db)
    assert parse_gain_db(format_gain_db(gain, 2) + " dB") == pytest.approx(gain, rel=1e-3)


def test_parse_gain_db_inf():
    assert parse_gain_db("-inf") == 0.0
    assert parse_gain_db("-INF dB") == 0.0


def test_parse_gain_db_invalid():
    with pytest.raises(ValueError):
        parse_gain_db("loud")


def test_format_pan_center():
    assert format_pan(0.0) == "C"
    assert format_pan(0.005) == "C"
    assert format_pan(-0.005) == "C"


def test_format_pan_sides():
    assert format_pan(-0.5) == "50L"
    assert format_pan(0.25).endswith("R")
    assert format_pan(-1.0).endswith("L")


def test_format_pan_mirror():
    assert format_pan(0.3)[:-1] == format_pan(-0.3)[:-1]


@pytest.mark.parametrize("value", [0.001, 0.05, 1.0, 5.0, 10.0])
def test_skewed_range_round_trip(value):
    rng = FloatRange.skewed(0.001, 10.0, FloatRange.skew_factor(-2.0))
    assert rng.unnormalize(rng.normalize(value)) == pytest.approx(value, rel=1e-9)


def test_range_endpoints():
    rng = FloatRange.skewed(20.0, 20000.0, FloatRange.skew_factor(-2.0))
    assert rng.normalize(20.0) == 0.0
    assert rng.normalize(20000.0) == pytest.approx(1.0)
    assert rng.normalize(1.0) == 0.0
    assert rng.unnormalize(2.0) == pytest.approx(20000.0)


def test_gain_skew_puts_db_midpoint_at_half():
    factor = FloatRange.gain_skew_factor(-60.0, 6.0)
    rng = FloatRange.skewed(db_to_gain(-60.0), db_to_gain(6.0), factor)
    assert rng.normalize(db_to_gain(-27.0)) == pytest.approx(0.5)


def test_range_rejects_bad_bounds():
    with pytest.raises(ValueError):
        FloatRange.linear(1.0, 1.0)
    with pytest.raises(ValueError):
        FloatRange.skewed(0.0, 1.0, 0.0)
    with pytest.raises(ValueError):
        IntRange(5, 2)


def test_int_range_round_trip():
    rng = IntRange(8, 1024)
    for value in (8, 256, 1024):
        assert rng.unnormalize(rng.normalize(value)) == value


def test_float_param_set_clamps():
    param = FloatParam("Pan", 0.0, FloatRange.linear(-1.0, 1.0))
    assert param.set(5.0) == 1.0
    assert param.value == 1.0
    assert param.set(-5.0) == -1.0
    param.reset()
    assert param.value == 0.0


def test_float_param_normalized():
    param = FloatParam("Pan", 0.0, FloatRange.linear(-1.0, 1.0))
    param.set_normalized(1.0)
    assert param.value == 1.0
    assert param.normalized_value == 1.0


def test_float_param_parse_plain():
    param = FloatParam("Cut", 100.0, FloatRange.linear(20.0, 20000.0), unit=" Hz")
    assert param.parse("440 Hz") == 440.0
    assert param.parse("1") == 20.0
    with pytest.raises(ValueError):
        param.parse("abc")


def test_int_param_set_clamps():
    param = IntParam("Voices", 256, IntRange(8, 1024))
    assert param.set(2000) == 1024
    assert param.set(0) == 8
    assert param.parse("300") == 300
    with pytest.raises(ValueError):
        param.parse("many")


def test_bool_param_default():
    param = BoolParam("Mute", True)
    assert param.value is True


def test_songwalker_defaults():
    params = SongWalkerParams()
    assert params.master_volume.value == pytest.approx(db_to_gain(0.0))
    assert params.master_pan.value == 0.0
    assert params.max_voices.value == 256
    assert params.pitch_bend_range.value == 2
    assert params.pitch_bend_range.set(100) == 48
    assert params.max_voices.set(1) == 8


def test_master_volume_format_round_trip():
    params = SongWalkerParams()
    params.master_volume.set(db_to_gain(-12.0))
    text = params.master_volume.format()
    assert text.endswith(" dB")
    assert params.master_volume.parse(text) == pytest.approx(params.master_volume.value, rel=1e-3)


def test_master_pan_format():
    params = SongWalkerParams()
    assert params.master_pan.format() == "C"


def test_slot_defaults():
    slot = SlotParams()
    assert slot.polyphony.value == 64
    assert slot.midi_channel.value == 0
    assert slot.filter_cutoff.value == 20000.0
    assert slot.sustain.value == 0.8
    assert slot.attack.value == 0.01
    assert slot.release.value == 0.3
    assert slot.mute.value is False
    assert slot.solo.value is False
    assert slot.midi_channel.set(17) == 16


def test_slot_params_are_independent():
    a = SlotParams()
    b = SlotParams()
    a.volume.set(db_to_gain(-20.0))
    assert b.volume.value == pytest.approx(db_to_gain(0.0))