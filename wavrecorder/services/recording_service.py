"""Recording service that captures a fixed duration of audio and saves it as WAV."""

import time
import logging
from typing import Optional

from ..audio.capture import AudioCapture
from ..audio.decoder import append_buffer
from ..audio.wav_writer import write_wav_file
from ..config import RecordingConfig
from ..errors import CaptureError
from ..models.audio import CaptureStats, FrameSequence, RecordingResult

logger = logging.getLogger(__name__)


class RecordingService:
    """Runs the capture loop and hands the finished frame sequence to the WAV writer."""

    def __init__(self, config: RecordingConfig, capture: Optional[AudioCapture] = None):
        """Initialize recording service.

        Args:
            config: Validated recording settings
            capture: Object with an ``open(channels, sample_rate, frames_per_buffer)``
                method returning a capture session. Defaults to a PyAudio capture.
        """
        self.config = config
        self.capture = capture or AudioCapture(
            exception_on_overflow=config.exception_on_overflow
        )
        self.stats: Optional[CaptureStats] = None

    def capture_frames(self) -> FrameSequence:
        """Read from the capture device until the target frame count is reached.

        Failed reads are logged and skipped. Statistics for this run replace
        those of any previous run in ``self.stats``. The last buffer may take the
        sequence past the target; those frames are kept.

        Raises:
            CaptureOpenError: If the capture device cannot be opened
        """
        config = self.config
        target = config.target_frames
        frames: FrameSequence = []
        buffer = bytearray(config.buffer_size)
        stats = CaptureStats(
            sample_rate=config.sample_rate,
            channels=config.channels,
            buffer_size=config.buffer_size,
        )
        self.stats = stats

        logger.info(f"Recording {config.duration_seconds}s: {config.sample_rate}Hz, "
                    f"{config.channels} channel(s), {config.buffer_size} bytes/read, "
                    f"target {target} frames")

        start_time = time.monotonic()
        session = self.capture.open(
            config.channels,
            config.sample_rate,
            config.buffer_size // config.frame_width,
        )
        try:
            while len(frames) < target:
                stats.total_reads += 1
                try:
                    session.read_into(buffer)
                except CaptureError as e:
                    stats.failed_reads += 1
                    logger.warning(f"error: {e}")
                    continue
                append_buffer(frames, buffer, config.stereo)
        finally:
            session.close()

        stats.frames_captured = len(frames)
        stats.duration_seconds = time.monotonic() - start_time
        logger.info(f"Capture finished: {len(frames)} frames, "
                    f"{stats.failed_reads} failed reads of {stats.total_reads}")
        return frames

    def record(self) -> RecordingResult:
        """Capture audio and write it to the configured output path.

        Raises:
            CaptureOpenError: If the capture device cannot be opened
            SerializationIOError: If the WAV file cannot be written
        """
        frames = self.capture_frames()
        bytes_written = write_wav_file(
            frames,
            self.config.sample_rate,
            self.config.channels,
            self.config.output_path,
        )
        return RecordingResult(
            output_path=self.config.output_path,
            frame_count=len(frames),
            bytes_written=bytes_written,
            stats=self.stats,
        )
