"""WavRecorder - capture 16-bit PCM audio and save it as a WAV file."""

__version__ = "0.1.0"
