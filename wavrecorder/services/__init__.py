"""Service layer for WavRecorder."""

from .recording_service import RecordingService

__all__ = ['RecordingService']
