"""Application configuration model."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from linnlights.utils.persistence import PydanticPersistence

from .enums import MemorySlot

logger = logging.getLogger(__name__)

DEFAULT_DEVICE_NAME = "LinnStrument MIDI"


def default_config_dir() -> Path:
    """Directory holding config.json and logs."""
    return Path.home() / ".linnlights"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Device discovery
    device_name: str = Field(
        default=DEFAULT_DEVICE_NAME,
        min_length=1,
        description="Exact MIDI output port name of the LinnStrument",
    )
    midi_backend: str | None = Field(
        default=None,
        description=(
            "mido backend module (e.g. 'mido.backends.rtmidi'). "
            "None uses mido's default or the MIDO_BACKEND environment variable."
        ),
    )
    discovery_timeout: float | None = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait for MIDI access before giving up (None = wait forever)",
    )

    # Light pattern memories
    default_memory: MemorySlot = Field(
        default=MemorySlot.A,
        description="Scale Select memory used when none is given (0=A, 1=A#, 2=B)",
    )

    @classmethod
    def default_path(cls) -> Path:
        return default_config_dir() / "config.json"

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.linnlights/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or cls.default_path(), cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or self.default_path())
