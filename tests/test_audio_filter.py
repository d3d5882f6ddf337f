import pytest

from spectrum.audio_filter import MAX_GAIN, MIN_GAIN, AudioFilter

FREQUENCIES = [32, 64, 125, 250, 500, 1000, 2000, 4000, 8000, 16000]


def test_preset_names_in_order():
    assert list(AudioFilter.create_presets()) == ["Custom", "Electronic", "Pop", "Rock"]


@pytest.mark.parametrize(
    ("genre", "gains"),
    [
        ("Custom", [0, 0, 0, 0, 0, 0, 0, 0, 0, 0]),
        ("Electronic", [2, 3, 2, -2, 0, 1, 3, 1, 2, 2]),
        ("Pop", [1, 2, 1, 0, 0, 2, 1, 1, 2, 3]),
        ("Rock", [1, 2, 1, -1, -3, -1, 0, 1, 2, 3]),
    ],
)
def test_preset_gains(genre, gains):
    preset = AudioFilter.create_presets()[genre]
    assert [f.gain for f in preset] == gains
    assert [f.frequency for f in preset] == FREQUENCIES


def test_only_custom_is_modifiable():
    presets = AudioFilter.create_presets()
    assert all(f.modifiable for f in presets["Custom"])
    assert not any(f.modifiable for genre in ("Electronic", "Pop", "Rock") for f in presets[genre])


def test_modified_custom_equals_expected_filters():
    custom = AudioFilter.create_presets()["Custom"]
    custom[1].set_normalized_gain(5)
    custom[3].set_normalized_gain(-2)
    custom[5].set_normalized_gain(-3)
    custom[7].set_normalized_gain(7)
    expected = [
        AudioFilter(frequency=32),
        AudioFilter(frequency=64, gain=5),
        AudioFilter(frequency=125),
        AudioFilter(frequency=250, gain=-2),
        AudioFilter(frequency=500),
        AudioFilter(frequency=1000, gain=-3),
        AudioFilter(frequency=2000),
        AudioFilter(frequency=4000, gain=7),
        AudioFilter(frequency=8000),
        AudioFilter(frequency=16000),
    ]
    assert custom == expected


def test_equality_ignores_modifiable_flag():
    assert AudioFilter(frequency=64, modifiable=True) == AudioFilter(frequency=64)


def test_inequality_on_gain():
    assert not (AudioFilter(frequency=64, gain=1) == AudioFilter(frequency=64, gain=2))


@pytest.mark.parametrize(
    ("frequency", "label"),
    [(32, "32 Hz"), (125, "125 Hz"), (1000, "1 kHz"), (16000, "16 kHz")],
)
def test_frequency_label(frequency, label):
    assert AudioFilter(frequency=frequency).frequency_label() == label


def test_name():
    assert AudioFilter(frequency=32).name() == "freq_32"


@pytest.mark.parametrize("gain, text", [(0, "0 dB"), (5, "5 dB"), (-2, "-2 dB"), (-3, "-3 dB")])
def test_gain_label_text(gain, text):
    assert AudioFilter(frequency=64, gain=gain).gain_label().strip() == text


def test_gain_label_padding():
    assert AudioFilter(gain=0).gain_label() == "   0 dB   "
    assert AudioFilter(gain=-2).gain_label() == "  -2 dB  "


def test_gain_label_is_centred():
    label = AudioFilter(gain=7).gain_label()
    assert len(label) - len(label.lstrip()) == len(label) - len(label.rstrip())


def test_set_normalized_gain_clamps():
    f = AudioFilter()
    f.set_normalized_gain(MAX_GAIN + 10)
    assert f.gain == MAX_GAIN
    f.set_normalized_gain(MIN_GAIN - 10)
    assert f.gain == MIN_GAIN
    f.set_normalized_gain(3)
    assert f.gain == 3


def test_gain_percentage_bounds():
    assert AudioFilter(gain=MAX_GAIN).gain_percentage() == 1.0
    assert AudioFilter(gain=MIN_GAIN).gain_percentage() == 0.001


def test_gain_percentage_grows_with_gain():
    assert AudioFilter(gain=-1).gain_percentage() < AudioFilter(gain=2).gain_percentage()


def test_str():
    assert str(AudioFilter(frequency=32, gain=2)) == "{frequency:32Q:1.41 gain:2}"