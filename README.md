# spectrum

The data model of a music player: the song being played and its playback
state, the equalizer's audio filters with their built-in presets, and a
helper that formats quantities with SI prefixes for display.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Songs and playback state

```python
from spectrum.song import Song, CurrentInformation, MediaState, time_to_string

song = Song(
    filepath="/music/song.mp3",
    artist="Deko",
    title="Phantasy Star Online",
    num_channels=2,
    sample_rate=44100,
    bit_rate=256000,
    bit_depth=32,
    duration=193,
)

print(song)                  # {artist:Deko title:Phantasy Star Online duration:193 ...}
print(song.describe())       # Artist, Title, Channels, Sample rate, Bit rate, ...
print(time_to_string(193))   # "03:13"
print(time_to_string(3725))  # "01:02:05"

info = CurrentInformation(state=MediaState.Play, position=103)
print(info)                  # {state:Play position:103}
```

`MediaState` has the members `Empty`, `Play`, `Pause`, `Stop` and
`Finished`, each printing as its name.

`Song.describe()` returns one line per field. While `filepath` is empty every
field reads `<Empty>`; otherwise a missing artist or title reads
`<Unknown>`, and rates, bit depth and duration carry SI prefixes
(`44.1 kHz`, `256 kbps`).

Two `CurrentInformation` values compare equal when their states are equal;
the position is not compared.

## Equalizer filters and presets

```python
from spectrum.audio_filter import AudioFilter

presets = AudioFilter.create_presets()
print(list(presets))           # ['Custom', 'Electronic', 'Pop', 'Rock']

band = presets["Custom"][1]
band.set_normalized_gain(5)    # clamped to the range -12 .. 12 dB
print(band.name())             # "freq_64"
print(band.frequency_label())  # "64 Hz"
print(band.gain_label())       # "   5 dB   " (centred for display)
print(band.gain_percentage())  # 0.7083..., position of the gain within its range
```

Every preset has ten bands, from 32 Hz to 16 kHz, with a Q of 1.41. Only the
bands of the "Custom" preset are marked `modifiable`. Filters compare equal
when frequency, Q and gain are equal. `gain_percentage()` returns 0.001
instead of zero, so a bar drawn from it is never empty.

## Formatting helper

```python
from spectrum.formatting import format_with_prefix

format_with_prefix(44100, "Hz")   # "44.1 kHz"
format_with_prefix(1000, "Hz")    # "1 kHz"
format_with_prefix(500, "Hz")     # "500 Hz"
```

Values are rounded to one decimal place, and a trailing `.0` is dropped.

## What this package does not do

It only models songs, playback state and equalizer settings. It does not
decode or play audio, apply the filters to sound, analyse a spectrum, fetch
lyrics or draw a screen, and it installs no command to run.