"""mp3meta.

Read and write ID3 metadata of MP3 files: text fields, year and BPM,
disc and track numbers with their totals, and embedded cover art.

Main modules:
    tag: MP3Tag record, parsing and saving
    cli: Command-line interface (mp3meta command)

Core modules:
    config: Configuration management
    constants: Frame tables
    errors: Exception classes
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("mp3meta")
except PackageNotFoundError:
    __version__ = "unknown"

from .config import Config, WriteOptions
from .errors import (
    ConfigError,
    MP3MetaError,
    NumericFieldError,
    ParseError,
    SaveError,
)
from .tag import MP3Tag, parse_mp3, save_mp3, read, write

__all__ = [
    "__version__",
    "Config",
    "WriteOptions",
    "MP3Tag",
    "parse_mp3",
    "save_mp3",
    "read",
    "write",
    "MP3MetaError",
    "ParseError",
    "NumericFieldError",
    "SaveError",
    "ConfigError",
]
