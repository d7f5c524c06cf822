"""ElevenLabs text-to-speech proxy that hands out short-lived audio URLs."""

__version__ = "0.1.0"
