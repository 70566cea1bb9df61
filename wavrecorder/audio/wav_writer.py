"""WAV container serialization for decoded 16-bit PCM frames."""

import logging
import struct
from typing import Sequence

import numpy as np

from ..errors import SerializationIOError
from ..models.audio import AudioFrame, MonoFrame, StereoFrame

logger = logging.getLogger(__name__)

BITS_PER_SAMPLE = 16
HEADER_SIZE = 44
PCM_FORMAT = 1
FMT_CHUNK_SIZE = 16
MAX_DATA_SIZE = 0xFFFFFFFF - 36  # ChunkSize must fit in 32 bits

# RIFF header fields are little-endian regardless of host byte order
HEADER_STRUCT = struct.Struct('<4sI4s4sIHHIIHH4sI')


def _validate_format(sample_rate: int, num_channels: int) -> None:
    if num_channels not in (1, 2):
        raise ValueError(f"Unsupported channel count: {num_channels}")
    if sample_rate <= 0:
        raise ValueError(f"Sample rate must be positive: {sample_rate}")


def build_wav_header(sample_rate: int, num_channels: int, data_size: int) -> bytes:
    """Build the 44-byte canonical RIFF/WAVE header.

    Args:
        sample_rate: Samples per second
        num_channels: Number of interleaved channels
        data_size: Size of the sample data in bytes

    Returns:
        Header bytes
    """
    _validate_format(sample_rate, num_channels)
    if not 0 <= data_size <= MAX_DATA_SIZE:
        raise ValueError(f"Data size does not fit in a WAV header: {data_size}")

    byte_rate = sample_rate * num_channels * BITS_PER_SAMPLE // 8
    block_align = num_channels * BITS_PER_SAMPLE // 8

    return HEADER_STRUCT.pack(
        b'RIFF',
        36 + data_size,
        b'WAVE',
        b'fmt ',
        FMT_CHUNK_SIZE,
        PCM_FORMAT,
        num_channels,
        sample_rate,
        byte_rate,
        block_align,
        BITS_PER_SAMPLE,
        b'data',
        data_size,
    )


def encode_samples(frames: Sequence[AudioFrame], num_channels: int) -> bytes:
    """Encode frames as big-endian 16-bit sample data.

    Stereo frames are written right channel first, then left.
    """
    expected = MonoFrame if num_channels == 1 else StereoFrame
    for index, frame in enumerate(frames):
        if not isinstance(frame, expected):
            raise ValueError(
                f"Frame {index} is {type(frame).__name__}, expected {expected.__name__} "
                f"for {num_channels} channel(s)"
            )

    if num_channels == 1:
        values = [frame.sample for frame in frames]
    else:
        values = [(frame.right, frame.left) for frame in frames]

    return np.asarray(values, dtype='>i2').tobytes()


def encode_wav(frames: Sequence[AudioFrame], sample_rate: int, num_channels: int) -> bytes:
    """Encode a complete WAV file (header and sample data) in memory."""
    _validate_format(sample_rate, num_channels)
    data = encode_samples(frames, num_channels)
    return build_wav_header(sample_rate, num_channels, len(data)) + data


def write_wav_file(
    frames: Sequence[AudioFrame],
    sample_rate: int,
    num_channels: int,
    output_filename: str,
) -> int:
    """Write frames to a WAV file.

    Args:
        frames: Complete frame sequence, all of the variant matching num_channels
        sample_rate: Samples per second
        num_channels: 1 for mono, 2 for stereo
        output_filename: Path of the file to create (overwritten if it exists)

    Returns:
        Number of bytes written

    Raises:
        ValueError: If the format or frames are invalid; nothing is written
        SerializationIOError: If the file cannot be created or written. A
            partially written file is left on disk.
    """
    _validate_format(sample_rate, num_channels)
    data = encode_samples(frames, num_channels)
    header = build_wav_header(sample_rate, num_channels, len(data))

    try:
        with open(output_filename, 'wb') as f:
            f.write(header)
            f.write(data)
    except OSError as e:
        logger.error(f"Error saving audio file: {e}")
        raise SerializationIOError(str(e), output_path=str(output_filename)) from e

    total = len(header) + len(data)
    logger.info(f"Audio saved to {output_filename} ({len(frames)} frames, {total} bytes)")
    return total
