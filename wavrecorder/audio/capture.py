"""Audio capture sessions backed by PyAudio input streams."""

import logging
from typing import Optional

import pyaudio

from ..errors import CaptureError, CaptureOpenError

logger = logging.getLogger(__name__)


class CaptureSession:
    """An open input stream that fills fixed-size byte buffers on blocking reads."""

    def __init__(
        self,
        pyaudio_instance: "pyaudio.PyAudio",
        stream: "pyaudio.Stream",
        sample_width: int,
        channels: int,
        exception_on_overflow: bool = False,
    ):
        self.pyaudio_instance: Optional["pyaudio.PyAudio"] = pyaudio_instance
        self.stream: Optional["pyaudio.Stream"] = stream
        self.frame_width = sample_width * channels
        self.exception_on_overflow = exception_on_overflow
        self.total_reads = 0

    def read_into(self, buffer: bytearray) -> None:
        """Fill the whole buffer with captured audio.

        Blocks until enough frames are available. On error the buffer contents
        are undefined.

        Raises:
            CaptureError: If the device read fails or returns a short buffer
        """
        if self.stream is None:
            raise CaptureError("Capture session is closed")

        num_frames = len(buffer) // self.frame_width
        try:
            audio_chunk = self.stream.read(
                num_frames,
                exception_on_overflow=self.exception_on_overflow
            )
        except OSError as e:
            raise CaptureError(f"Audio read failed: {e}") from e

        usable = num_frames * self.frame_width
        if len(audio_chunk) != usable:
            raise CaptureError(f"Short read: expected {usable} bytes, got {len(audio_chunk)}")

        buffer[:usable] = audio_chunk
        self.total_reads += 1

    def close(self) -> None:
        """Stop the stream and release PyAudio resources."""
        try:
            if self.stream is not None:
                try:
                    self.stream.stop_stream()
                    self.stream.close()
                finally:
                    self.stream = None
        finally:
            if self.pyaudio_instance is not None:
                self.pyaudio_instance.terminate()
                self.pyaudio_instance = None
        logger.info(f"Capture session closed after {self.total_reads} reads")

    def __enter__(self) -> "CaptureSession":
        return self

    def __exit__(self, *args) -> None:
        self.close()


class AudioCapture:
    """Opens PyAudio capture sessions in a fixed 16-bit sample format."""

    def __init__(self, format: int = pyaudio.paInt16, exception_on_overflow: bool = False):
        """Initialize audio capture.

        Args:
            format: PyAudio sample format (16-bit signed int)
            exception_on_overflow: Report input overflows as read errors
        """
        self.format = format
        self.exception_on_overflow = exception_on_overflow

    def open(self, channels: int, sample_rate: int, frames_per_buffer: int = 1024) -> CaptureSession:
        """Open the default input device.

        Raises:
            CaptureOpenError: If the format is invalid or the device is unavailable
        """
        pyaudio_instance = pyaudio.PyAudio()
        try:
            stream = pyaudio_instance.open(
                format=self.format,
                channels=channels,
                rate=sample_rate,
                input=True,
                frames_per_buffer=frames_per_buffer,
                stream_callback=None
            )
        except (OSError, ValueError) as e:
            pyaudio_instance.terminate()
            logger.error(f"Could not open audio input: {e}")
            raise CaptureOpenError(
                f"Could not open audio input ({channels} channels, {sample_rate}Hz): {e}"
            ) from e

        logger.info(f"Audio stream opened: {sample_rate}Hz, {channels} channels, "
                    f"{frames_per_buffer} frames/buffer")
        return CaptureSession(
            pyaudio_instance,
            stream,
            sample_width=pyaudio_instance.get_sample_size(self.format),
            channels=channels,
            exception_on_overflow=self.exception_on_overflow,
        )
