"""Utility functions for CLI operations."""

import argparse
import logging
import sys
from enum import IntEnum
from pathlib import Path
from typing import NoReturn, Optional

from pydantic import BaseModel

from ..config import Config, WriteOptions
from ..errors import ConfigError, ParseError, SaveError
from ..tag import MP3Tag, SUPPORTED_EXTENSIONS, read, write
from .schemas import ErrorResponse


class ExitCode(IntEnum):
    """Process exit codes used by every command."""

    SUCCESS = 0
    INVALID_INPUT = 10
    DATA_ERROR = 20
    WRITE_FAILED = 30
    INTERRUPTED = 130


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger().setLevel(numeric_level)


def non_negative_int(value: str) -> int:
    """argparse type for counts and numbers that can't be negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def json_output(response: BaseModel, code: ExitCode = ExitCode.SUCCESS) -> NoReturn:
    """Print a response model as JSON and exit with code."""
    print(response.model_dump_json(exclude_none=True, indent=2))
    sys.exit(code)


def fail(
    args: argparse.Namespace, error: str, message: str, code: ExitCode
) -> NoReturn:
    """Report an error (as JSON when requested) and exit."""
    if getattr(args, "json", False):
        json_output(ErrorResponse(error=error, message=message), code)
    logging.error(message)
    sys.exit(code)


def load_write_options(args: argparse.Namespace) -> WriteOptions:
    """Build WriteOptions from the config file given with -c (or the default one)."""
    config_path = getattr(args, "config", None)
    if config_path and not Path(config_path).exists():
        fail(args, "invalid_input", f"Config file does not exist: {config_path}", ExitCode.INVALID_INPUT)
    try:
        config = Config(Path(config_path) if config_path else None)
        return config.get_write_options()
    except ConfigError as e:
        fail(args, "invalid_config", str(e), ExitCode.INVALID_INPUT)


def load_tag(args: argparse.Namespace) -> MP3Tag:
    """Read the tag of args.file, exiting on failure."""
    path = Path(args.file)
    if not path.is_file():
        fail(args, "invalid_input", f"File does not exist: {path}", ExitCode.INVALID_INPUT)
    if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        logging.warning("%s does not have an .mp3 extension, reading it anyway", path)

    logging.info("Reading tag from: %s", path)
    try:
        return read(path)
    except ParseError as e:
        fail(args, "data_error", f"Failed to read {path}: {e}", ExitCode.DATA_ERROR)


def save_tag(args: argparse.Namespace, tag: MP3Tag) -> Path:
    """Write tag to args.output (or back to args.file), exiting on failure."""
    output: Optional[str] = getattr(args, "output", None)
    path = Path(output) if output else Path(args.file)
    options = load_write_options(args)

    logging.info("Writing tag to: %s", path)
    try:
        write(tag, path, options)
    except SaveError as e:
        fail(args, "write_failed", f"Failed to write {path}: {e}", ExitCode.WRITE_FAILED)
    return path
