"""Pytest configuration and fixtures for WavRecorder tests."""

import pytest
import tempfile
import logging
from unittest.mock import Mock, patch
import numpy as np

from wavrecorder.errors import CaptureError


# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without audio hardware")
    config.addinivalue_line("markers", "integration: end-to-end recording workflow tests")


@pytest.fixture
def temp_data_dir():
    """Create temporary directory for test data."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def mock_pyaudio():
    """Mock PyAudio for testing without actual audio hardware."""
    with patch('pyaudio.PyAudio') as mock_pyaudio_class:
        mock_pyaudio_instance = Mock()
        mock_stream = Mock()

        # Configure mock stream
        mock_stream.read.side_effect = lambda num_frames, exception_on_overflow=False: b'\x00' * (num_frames * 4)
        mock_stream.stop_stream.return_value = None
        mock_stream.close.return_value = None

        # Configure mock PyAudio instance
        mock_pyaudio_instance.open.return_value = mock_stream
        mock_pyaudio_instance.terminate.return_value = None
        mock_pyaudio_instance.get_sample_size.return_value = 2

        mock_pyaudio_class.return_value = mock_pyaudio_instance

        yield {
            'class': mock_pyaudio_class,
            'instance': mock_pyaudio_instance,
            'stream': mock_stream
        }


class FakeCaptureSession:
    """Capture session that replays scripted reads.

    Each script entry is either bytes to copy into the buffer or an exception
    to raise. Once the script is exhausted the last entry repeats.
    """

    def __init__(self, script):
        self.script = list(script)
        self.reads = 0
        self.closed = False

    def read_into(self, buffer):
        item = self.script[min(self.reads, len(self.script) - 1)]
        self.reads += 1
        if isinstance(item, BaseException):
            raise item
        buffer[:] = item

    def close(self):
        self.closed = True


class FakeCapture:
    """Capture factory handing out a single FakeCaptureSession."""

    def __init__(self, script):
        self.session = FakeCaptureSession(script)
        self.open_calls = []

    def open(self, channels, sample_rate, frames_per_buffer=1024):
        self.open_calls.append((channels, sample_rate, frames_per_buffer))
        return self.session


@pytest.fixture
def fake_capture():
    """Factory for scripted capture collaborators."""
    return FakeCapture


@pytest.fixture
def capture_error():
    return CaptureError("Input overflowed")


@pytest.fixture
def audio_test_data():
    """Generate big-endian 16-bit test signals."""
    def generate_audio(pattern="sine", num_samples=1024, sample_rate=16000):
        """Generate audio data for testing.

        Args:
            pattern: Type of audio pattern ('sine', 'noise', 'silence')
            num_samples: Number of 16-bit samples
            sample_rate: Sample rate in Hz

        Returns:
            bytes: Big-endian sample data
        """
        if pattern == "sine":
            t = np.arange(num_samples) / sample_rate
            wave_data = np.sin(2 * np.pi * 440 * t)  # 440 Hz sine wave
        elif pattern == "noise":
            wave_data = np.random.default_rng(1234).uniform(-1, 1, num_samples)
        elif pattern == "silence":
            wave_data = np.zeros(num_samples)
        else:
            raise ValueError(f"Unknown pattern: {pattern}")

        return (wave_data * 32767).astype('>i2').tobytes()

    return generate_audio
