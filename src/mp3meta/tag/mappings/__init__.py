"""Field mappings between MP3Tag and ID3 frames."""

from .id3 import (
    get_first_picture_data,
    get_pictures,
    get_text,
    read_fields,
    set_picture,
    set_text,
    write_fields,
)

__all__ = [
    'get_first_picture_data',
    'get_pictures',
    'get_text',
    'read_fields',
    'set_picture',
    'set_text',
    'write_fields',
]
