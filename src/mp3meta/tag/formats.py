"""Entry points for reading and writing MP3 tags from streams and files."""

import io
import logging
from typing import BinaryIO, Optional, Union
from os import PathLike

from ..config import WriteOptions
from ..errors import ParseError, SaveError
from .core import MP3Tag

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {'.mp3'}


def parse_mp3(source: BinaryIO) -> MP3Tag:
    """
    Parse the ID3 tag of an MP3 stream.

    Args:
        source: Readable, seekable binary stream, positioned at the tag

    Returns:
        MP3Tag holding a reference to source

    Raises:
        ParseError: If the tag can't be read
        NumericFieldError: If a disc or track number isn't numeric
    """
    return MP3Tag.parse(source)


def save_mp3(
    tag: MP3Tag,
    destination: Optional[BinaryIO] = None,
    options: Optional[WriteOptions] = None,
) -> None:
    """
    Write tag (and the audio data of its source) to destination.

    Raises:
        SaveError: If anything goes wrong while reading or writing
    """
    tag.save(destination, options)


def read(filename: Union[str, PathLike]) -> MP3Tag:
    """
    Read the tag of an MP3 file.

    The whole file is loaded into memory so the returned tag doesn't
    depend on an open file handle.

    Args:
        filename: Path to the MP3 file

    Raises:
        ParseError: If the file can't be opened or its tag can't be read
    """
    try:
        with open(filename, "rb") as f:
            data = f.read()
    except OSError as e:
        raise ParseError(f"Error reading {filename}: {e}") from e
    logger.debug("Read %d bytes from %s", len(data), filename)
    return MP3Tag.parse(io.BytesIO(data))


def write(
    tag: MP3Tag,
    filename: Union[str, PathLike],
    options: Optional[WriteOptions] = None,
) -> None:
    """
    Write tag to an MP3 file, creating or replacing it.

    filename may be the file the tag was read from: the output is built in
    memory before the file is opened.

    Raises:
        SaveError: If the file can't be written
    """
    buf = io.BytesIO()
    tag.save(buf, options)
    try:
        with open(filename, "wb") as f:
            f.write(buf.getvalue())
    except OSError as e:
        raise SaveError(f"Error writing {filename}: {e}") from e
