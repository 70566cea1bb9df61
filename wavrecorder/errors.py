"""Exception hierarchy for WavRecorder.

All exceptions inherit from RecorderError so callers can handle recorder
failures at one boundary while keeping the specific failure context.
"""

from typing import Optional


class RecorderError(Exception):
    """Base exception for all recorder errors."""


class ConfigError(RecorderError, ValueError):
    """Raised when the recording configuration is invalid."""


class CaptureError(RecorderError):
    """Raised when reading a buffer from the capture device fails."""


class CaptureOpenError(CaptureError):
    """Raised when the capture device cannot be opened with the requested format."""


class SerializationIOError(RecorderError, OSError):
    """Raised when the WAV file cannot be created or written.

    A failed write is not cleaned up, so a truncated file may remain on disk.
    """

    def __init__(self, message: str, output_path: Optional[str] = None):
        self.output_path = output_path
        super().__init__(message)

    def __str__(self) -> str:
        if self.output_path:
            return f"[path={self.output_path}] {super().__str__()}"
        return super().__str__()
