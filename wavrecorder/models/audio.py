"""Audio-related data models."""

from dataclasses import dataclass
from typing import List, Optional, Union

INT16_MIN = -32768
INT16_MAX = 32767


def _check_int16(name: str, value: int) -> None:
    if not INT16_MIN <= value <= INT16_MAX:
        raise ValueError(f"{name} out of 16-bit range: {value}")


@dataclass(frozen=True)
class MonoFrame:
    """A single-channel sample at one sampling instant."""
    sample: int

    def __post_init__(self):
        _check_int16("sample", self.sample)


@dataclass(frozen=True)
class StereoFrame:
    """A left/right sample pair at one sampling instant."""
    left: int
    right: int

    def __post_init__(self):
        _check_int16("left", self.left)
        _check_int16("right", self.right)


AudioFrame = Union[MonoFrame, StereoFrame]
FrameSequence = List[AudioFrame]


@dataclass
class CaptureStats:
    """Audio capture statistics for one recording."""
    sample_rate: int
    channels: int
    buffer_size: int
    total_reads: int = 0
    failed_reads: int = 0
    frames_captured: int = 0
    duration_seconds: float = 0.0


@dataclass
class RecordingResult:
    """Outcome of a finished recording."""
    output_path: str
    frame_count: int
    bytes_written: int
    stats: Optional[CaptureStats] = None
