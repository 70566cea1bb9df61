"""Simple YAML configuration loader for WavRecorder."""

import copy
import os
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional
import logging

from ..errors import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


DEFAULT_CONFIG: Dict[str, Any] = {
    'audio': {
        'channels': 2,            # 1 = mono, 2 = stereo
        'sample_rate': 44100,
        'duration_seconds': 5,
        'buffer_size': 16,        # bytes per capture read
        'exception_on_overflow': False,
    },
    'output': {
        'path': 'foobar.wav',
    },
    'logging': {
        'level': 'INFO',
        'file_path': 'logs/wavrecorder.log',
        'console_output': True,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


class WavRecorderConfig:
    """WavRecorder configuration loader."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to YAML config file. If None, built-in defaults are used.
        """
        self.config_file = Path(config_path) if config_path else None
        self.config = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_file is None:
            logger.info("No configuration file given, using defaults")
            return

        if not self.config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        logger.info(f"Loading configuration from: {self.config_file}")
        _merge(self.config, self._load_config())
        self._resolve_paths(self.config)

    def _load_config(self) -> Dict[str, Any]:
        """Load and parse YAML configuration file."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")

        if not config:
            raise ValueError("Configuration file is empty")
        if not isinstance(config, dict):
            raise ValueError("Configuration file must contain a mapping")

        logger.info("Configuration loaded successfully")
        return config

    def _resolve_paths(self, config: Dict[str, Any]) -> None:
        """Resolve relative paths in configuration relative to config file location."""
        config_dir = self.config_file.parent

        for section, key in (('output', 'path'), ('logging', 'file_path')):
            value = config.get(section, {}).get(key)
            if value and not os.path.isabs(value):
                config[section][key] = str(config_dir / value)

    def get(self, key_path: str, default: Any = None) -> Any:
        """Look up a dotted key such as 'audio.sample_rate', or return default."""
        value: Any = self.config
        for key in key_path.split('.'):
            if not isinstance(value, dict) or key not in value:
                return default
            value = value[key]
        return value

    def set(self, key_path: str, value: Any) -> None:
        """Override a dotted key, creating missing sections.

        Raises:
            ConfigError: If a section on the path already holds a plain value
        """
        *sections, leaf = key_path.split('.')
        section = self.config
        for key in sections:
            section = section.setdefault(key, {})
            if not isinstance(section, dict):
                raise ConfigError(f"Cannot set '{key_path}': '{key}' is not a section")
        section[leaf] = value
        logger.debug(f"Configuration key '{key_path}' set to: {value}")

    def log_level(self, override: Optional[str] = None) -> str:
        """Return the validated log level name, preferring an explicit override.

        Raises:
            ConfigError: If the level is not one of LOG_LEVELS
        """
        level = override or self.get('logging.level', 'INFO')
        name = str(level).upper()
        if name not in LOG_LEVELS:
            raise ConfigError(
                f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
            )
        return name


def _as_int(name: str, value: Any) -> int:
    """Accept ints, whole floats and integer strings; anything else is a ConfigError."""
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ConfigError(f"{name} must be a whole number, got {value!r}")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ConfigError(f"{name} must be an integer, got {value!r}")


def _as_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{name} must be true or false, got {value!r}")
    return value


@dataclass(frozen=True)
class RecordingConfig:
    """Validated settings for a single recording."""
    channels: int = 2
    sample_rate: int = 44100
    duration_seconds: int = 5
    buffer_size: int = 16
    output_path: str = 'foobar.wav'
    exception_on_overflow: bool = False

    def __post_init__(self):
        if self.channels not in (1, 2):
            raise ConfigError(f"channels must be 1 or 2, got {self.channels}")
        if self.sample_rate <= 0:
            raise ConfigError(f"sample_rate must be positive, got {self.sample_rate}")
        if self.duration_seconds <= 0:
            raise ConfigError(f"duration_seconds must be positive, got {self.duration_seconds}")
        if self.buffer_size <= 0 or self.buffer_size % self.frame_width:
            raise ConfigError(
                f"buffer_size must be a positive multiple of {self.frame_width} bytes, "
                f"got {self.buffer_size}"
            )
        if not self.output_path:
            raise ConfigError("output_path must not be empty")

    @property
    def stereo(self) -> bool:
        return self.channels > 1

    @property
    def frame_width(self) -> int:
        """Bytes per frame (BlockAlign)."""
        return 2 * self.channels

    @property
    def target_frames(self) -> int:
        return self.duration_seconds * self.sample_rate

    @classmethod
    def from_config(cls, config: WavRecorderConfig) -> "RecordingConfig":
        """Build recording settings from a loaded configuration."""
        output_path = config.get('output.path')
        if not isinstance(output_path, str):
            raise ConfigError(f"output.path must be a string, got {output_path!r}")
        return cls(
            channels=_as_int('audio.channels', config.get('audio.channels')),
            sample_rate=_as_int('audio.sample_rate', config.get('audio.sample_rate')),
            duration_seconds=_as_int('audio.duration_seconds', config.get('audio.duration_seconds')),
            buffer_size=_as_int('audio.buffer_size', config.get('audio.buffer_size')),
            output_path=output_path,
            exception_on_overflow=_as_bool(
                'audio.exception_on_overflow', config.get('audio.exception_on_overflow', False)
            ),
        )
