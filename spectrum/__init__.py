"""Data model for a music player: songs, playback state and equalizer presets."""

__version__ = "0.1.0"

__all__ = ["audio_filter", "formatting", "song"]