"""
Tag subpackage - MP3 tag reading and writing.

This package maps the ID3 frames of an MP3 file onto the MP3Tag record
and writes the record back out again.
"""

from .core import MP3Tag
from .formats import parse_mp3, save_mp3, read, write, SUPPORTED_EXTENSIONS

__all__ = [
    'MP3Tag',
    'parse_mp3',
    'save_mp3',
    'read',
    'write',
    'SUPPORTED_EXTENSIONS',
]
