"""Audio capture, decoding and WAV serialization."""

from .capture import AudioCapture, CaptureSession
from .decoder import append_buffer, decode_buffer
from .wav_writer import build_wav_header, encode_wav, write_wav_file

__all__ = [
    'AudioCapture',
    'CaptureSession',
    'append_buffer',
    'decode_buffer',
    'build_wav_header',
    'encode_wav',
    'write_wav_file',
]
