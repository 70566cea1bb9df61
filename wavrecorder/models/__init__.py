"""Data models for the WavRecorder application."""

from .audio import (
    AudioFrame,
    CaptureStats,
    FrameSequence,
    MonoFrame,
    RecordingResult,
    StereoFrame,
)

__all__ = [
    "AudioFrame",
    "CaptureStats",
    "FrameSequence",
    "MonoFrame",
    "RecordingResult",
    "StereoFrame",
]
