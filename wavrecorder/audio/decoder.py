"""Decode raw 16-bit PCM capture buffers into audio frames."""

import logging

import numpy as np

from ..models.audio import FrameSequence, MonoFrame, StereoFrame

logger = logging.getLogger(__name__)

BYTES_PER_SAMPLE = 2  # 16-bit audio

# Samples are read most-significant byte first.
SAMPLE_DTYPE = np.dtype(">i2")


def frame_width(stereo: bool) -> int:
    """Bytes occupied by one frame."""
    return BYTES_PER_SAMPLE * (2 if stereo else 1)


def decode_buffer(buffer: bytes, stereo: bool) -> FrameSequence:
    """Decode a raw buffer into a list of frames.

    Args:
        buffer: Interleaved big-endian 16-bit PCM bytes
        stereo: True for two channels (left, right), False for mono

    Returns:
        One frame per complete group of bytes. A trailing partial frame is dropped.
    """
    width = frame_width(stereo)
    usable = len(buffer) - len(buffer) % width
    if usable != len(buffer):
        logger.debug(f"Dropping {len(buffer) - usable} trailing bytes of partial frame")
    if not usable:
        return []

    samples = np.frombuffer(buffer, dtype=SAMPLE_DTYPE, count=usable // BYTES_PER_SAMPLE)

    if stereo:
        return [StereoFrame(left, right) for left, right in samples.reshape(-1, 2).tolist()]
    return [MonoFrame(sample) for sample in samples.tolist()]


def append_buffer(frames: FrameSequence, buffer: bytes, stereo: bool) -> int:
    """Decode a buffer and append its frames to the running sequence.

    Returns:
        Number of frames appended
    """
    decoded = decode_buffer(buffer, stereo)
    frames.extend(decoded)
    return len(decoded)
