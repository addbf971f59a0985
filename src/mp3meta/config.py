"""Configuration management for mp3meta.

Handles loading and saving the settings that control how tags are written:
ID3 version, ID3v1 handling, padding and the cover art encoding.
"""

import copy
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

import tomli_w

from .constants import ID3V1_MODES, PICTURE_MIME_TYPES, SUPPORTED_ID3_VERSIONS
from .errors import ConfigError

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.mp3meta on all platforms)
    """
    return Path.home() / ".mp3meta"


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


@dataclass(frozen=True)
class WriteOptions:
    """Settings used when saving a tag.

    Attributes:
        id3_version: ID3v2 minor version to write (3 or 4)
        id3v1: What to do with an ID3v1 tag ("keep", "remove" or "create")
        padding: Bytes of padding after the frames, None for mutagen's default
        cover_format: Image format for embedded cover art ("PNG" or "JPEG")
        jpeg_quality: Quality used when cover_format is "JPEG"
    """

    id3_version: int = 3
    id3v1: str = "keep"
    padding: Optional[int] = None
    cover_format: str = "PNG"
    jpeg_quality: int = 95

    def __post_init__(self):
        validate_id3_version(self.id3_version)
        validate_id3v1_mode(self.id3v1)
        validate_cover_format(self.cover_format)
        validate_jpeg_quality(self.jpeg_quality)
        validate_padding(self.padding)

    @property
    def id3v1_flag(self) -> int:
        """The value mutagen expects for ID3.save(v1=...)."""
        return ID3V1_MODES[self.id3v1]


def _is_int(value: Any) -> bool:
    # bool is an int subclass, but never a valid setting here
    return isinstance(value, int) and not isinstance(value, bool)


def validate_id3_version(version: int) -> None:
    if not _is_int(version) or version not in SUPPORTED_ID3_VERSIONS:
        raise ConfigError(f"Unsupported ID3 version: {version} (use 3 or 4)")


def validate_id3v1_mode(mode: str) -> None:
    if not isinstance(mode, str) or mode not in ID3V1_MODES:
        raise ConfigError(
            f"Invalid ID3v1 mode: {mode!r} (use one of {', '.join(ID3V1_MODES)})"
        )


def validate_cover_format(image_format: str) -> None:
    if not isinstance(image_format, str) or image_format.upper() not in PICTURE_MIME_TYPES:
        raise ConfigError(f"Unsupported cover art format: {image_format}")


def validate_jpeg_quality(quality: int) -> None:
    if not _is_int(quality) or not 1 <= quality <= 95:
        raise ConfigError(f"JPEG quality must be between 1 and 95: {quality}")


def validate_padding(padding: Optional[int]) -> None:
    if padding is not None and (not _is_int(padding) or padding < 0):
        raise ConfigError(f"Padding must be a non-negative integer: {padding!r}")


class Config:
    """Configuration manager for tag writing settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "write": {
            # ID3v2.3 is the most widely supported version
            "id3_version": 3,
            # keep: update an existing ID3v1 tag, remove: strip it,
            # create: always write one
            "id3v1": "keep",
            # -1 lets mutagen pick the padding
            "padding": -1,
        },
        "cover": {
            # PNG is lossless, so cover art survives repeated saves unchanged
            "format": "PNG",
            "jpeg_quality": 95,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Config file to use (default: ~/.mp3meta/config.toml)
        """
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if the file doesn't exist

        Raises:
            ConfigError: If the file isn't valid TOML
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {self.config_path}: {e}") from e

        # Merge with defaults (in case new keys were added)
        self._merge_config(self.data, loaded_data)
        for section in self.DEFAULT_CONFIG:
            if not isinstance(self.data[section], dict):
                raise ConfigError(
                    f"Invalid config file {self.config_path}: [{section}] must be a table"
                )
        self._dirty = False
        logger.debug("Loaded configuration from %s", self.config_path)
        return True

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
        except OSError as e:
            logger.error("Error saving config to %s: %s", self.config_path, e)
            return False
        self._dirty = False
        return True

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        """Check if configuration has unsaved changes."""
        return self._dirty

    # Write settings
    def get_id3_version(self) -> int:
        """Get the ID3v2 version used when writing."""
        return self.data["write"]["id3_version"]

    def set_id3_version(self, version: int) -> None:
        """Set the ID3v2 version used when writing (3 or 4)."""
        validate_id3_version(version)
        self.data["write"]["id3_version"] = version
        self._dirty = True

    def get_id3v1_mode(self) -> str:
        """Get the ID3v1 handling mode."""
        return self.data["write"]["id3v1"]

    def set_id3v1_mode(self, mode: str) -> None:
        """Set the ID3v1 handling mode ("keep", "remove" or "create")."""
        validate_id3v1_mode(mode)
        self.data["write"]["id3v1"] = mode
        self._dirty = True

    def get_padding(self) -> Optional[int]:
        """Get the tag padding in bytes, or None for mutagen's default."""
        padding = self.data["write"]["padding"]
        if padding is None or padding == -1:
            return None
        validate_padding(padding)
        return padding

    def set_padding(self, padding: Optional[int]) -> None:
        """Set the tag padding in bytes (None for mutagen's default)."""
        validate_padding(padding)
        # TOML has no null, so the default is stored as -1
        self.data["write"]["padding"] = -1 if padding is None else padding
        self._dirty = True

    # Cover art settings
    def get_cover_format(self) -> str:
        """Get the image format used for embedded cover art."""
        image_format = self.data["cover"]["format"]
        validate_cover_format(image_format)
        return image_format.upper()

    def set_cover_format(self, image_format: str) -> None:
        """Set the image format used for embedded cover art."""
        validate_cover_format(image_format)
        self.data["cover"]["format"] = image_format.upper()
        self._dirty = True

    def get_jpeg_quality(self) -> int:
        """Get the JPEG quality for cover art."""
        return self.data["cover"]["jpeg_quality"]

    def set_jpeg_quality(self, quality: int) -> None:
        """Set the JPEG quality for cover art (1-95)."""
        validate_jpeg_quality(quality)
        self.data["cover"]["jpeg_quality"] = quality
        self._dirty = True

    def get_write_options(self) -> WriteOptions:
        """Build the WriteOptions described by this configuration.

        Raises:
            ConfigError: If the loaded file holds invalid values
        """
        return WriteOptions(
            id3_version=self.get_id3_version(),
            id3v1=self.get_id3v1_mode(),
            padding=self.get_padding(),
            cover_format=self.get_cover_format(),
            jpeg_quality=self.get_jpeg_quality(),
        )
