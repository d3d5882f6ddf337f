"""Equalizer band filters and the built-in presets."""

from dataclasses import dataclass

from spectrum.formatting import format_with_prefix

SAMPLE_RATE = 44100
MIN_GAIN = -12.0
MAX_GAIN = 12.0


def _number(value):
    return f"{value:g}"


@dataclass(eq=False)
class AudioFilter:
    """A peaking filter centred on one equalizer frequency."""

    frequency: float = 0.0
    Q: float = 1.41
    gain: float = 0.0
    modifiable: bool = False

    def __eq__(self, other):
        if not isinstance(other, AudioFilter):
            return NotImplemented
        return (self.frequency, self.Q, self.gain) == (other.frequency, other.Q, other.gain)

    __hash__ = None

    def __str__(self):
        return (
            f"{{frequency:{_number(self.frequency)}Q:{_number(self.Q)}"
            f" gain:{_number(self.gain)}}}"
        )

    @staticmethod
    def create_presets():
        """Return the built-in equalizer presets keyed by genre name."""
        frequencies = (32, 64, 125, 250, 500, 1000, 2000, 4000, 8000, 16000)
        fixed_gains = {
            "Electronic": (2, 3, 2, -2, 0, 1, 3, 1, 2, 2),
            "Pop": (1, 2, 1, 0, 0, 2, 1, 1, 2, 3),
            "Rock": (1, 2, 1, -1, -3, -1, 0, 1, 2, 3),
        }
        presets = {"Custom": [AudioFilter(frequency=f, modifiable=True) for f in frequencies]}
        for genre, gains in fixed_gains.items():
            presets[genre] = [
                AudioFilter(frequency=f, gain=g) for f, g in zip(frequencies, gains)
            ]
        return presets

    def name(self):
        """Identifier of this filter, based on its frequency."""
        return f"freq_{_number(self.frequency)}"

    def frequency_label(self):
        """Frequency formatted for display, e.g. "1 kHz"."""
        return format_with_prefix(self.frequency, "Hz")

    def gain_label(self):
        """Gain in dB, centred with spaces for display."""
        gain_str = f"{self.gain:.0f}"
        max_length = 6 if self.gain < 0 else 7
        spaces = " " * max(0, (max_length - len(gain_str)) // 2)
        return f"{spaces}{gain_str} dB{spaces}"

    def gain_percentage(self):
        """Gain as a fraction of the allowed range, never quite zero."""
        value = (self.gain - MIN_GAIN) / (MAX_GAIN - MIN_GAIN)
        return value if value > 0 else 0.001

    def set_normalized_gain(self, value):
        """Set the gain, clamped to the allowed range."""
        self.gain = max(MIN_GAIN, min(MAX_GAIN, value))