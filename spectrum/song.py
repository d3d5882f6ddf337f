"""Song metadata and playback state."""

from dataclasses import dataclass, field
from enum import Enum

from spectrum.formatting import format_with_prefix


class MediaState(Enum):
    """Playback state of the current song."""

    Empty = 0
    Play = 1
    Pause = 2
    Stop = 3
    Finished = 4

    def __str__(self):
        return self.name


@dataclass(eq=False)
class CurrentInformation:
    """Snapshot of the playback state and position in seconds."""

    state: MediaState = MediaState.Empty
    position: int = 0

    def __eq__(self, other):
        # Only the state takes part in comparison; position changes constantly.
        if not isinstance(other, CurrentInformation):
            return NotImplemented
        return self.state == other.state

    __hash__ = None

    def __str__(self):
        return f"{{state:{self.state} position:{self.position}}}"


@dataclass
class Song:
    """Metadata of an audio file together with its playback state."""

    filepath: str = ""
    artist: str = ""
    title: str = ""
    num_channels: int = 0
    sample_rate: int = 0
    bit_rate: int = 0
    bit_depth: int = 0
    duration: int = 0
    curr_info: CurrentInformation = field(default_factory=CurrentInformation)

    def __str__(self):
        artist = self.artist or "<unknown>"
        title = self.title or "<unknown>"
        return (
            f"{{artist:{artist} title:{title} duration:{self.duration}"
            f" sample_rate:{self.sample_rate} bit_rate:{self.bit_rate}"
            f" bit_depth:{self.bit_depth}}}"
        )

    def describe(self):
        """Multi-line description of the song for display."""
        if not self.filepath:
            values = ["<Empty>"] * 7
        else:
            values = [
                self.artist or "<Unknown>",
                self.title or "<Unknown>",
                str(self.num_channels),
                format_with_prefix(self.sample_rate, "Hz"),
                format_with_prefix(self.bit_rate, "bps"),
                format_with_prefix(self.bit_depth, "bits"),
                format_with_prefix(self.duration, "sec"),
            ]
        labels = (
            "Artist",
            "Title",
            "Channels",
            "Sample rate",
            "Bit rate",
            "Bits per sample",
            "Duration",
        )
        return "".join(f"{label}: {value}\n" for label, value in zip(labels, values))


def time_to_string(seconds):
    """Format seconds as MM:SS, or HH:MM:SS when at least one hour."""
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"