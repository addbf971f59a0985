"""Reading and writing mapped fields on a mutagen ID3 object."""

from typing import Any, Dict, List, Optional

import mutagen.id3
from mutagen.id3 import ID3, Encoding

from ...constants import (
    MULTI_VALUE_SEPARATOR,
    NUMBER_PAIR_FRAMES,
    NUMERIC_FRAMES,
    PICTURE_FRAME,
    PICTURE_TYPE_FRONT_COVER,
    TEXT_FRAMES,
)
from ..utils import conv_int, join_number_pair


def get_text(id3: ID3, frameid: str) -> str:
    """Return the text of a frame, or "" if it is missing.

    Multiple values are joined the way ID3v2.3 stores them ("A/B").
    """
    frame = id3.get(frameid)
    if frame is None:
        return ""
    return MULTI_VALUE_SEPARATOR.join(str(t) for t in frame.text)


def set_text(id3: ID3, frameid: str, text: str) -> None:
    """Replace a text frame, or remove it when text is empty."""
    id3.delall(frameid)
    if text:
        id3.add(mutagen.id3.Frames[frameid](encoding=Encoding.UTF8, text=[text]))


def get_pictures(id3: ID3) -> List[Any]:
    """Return all attached picture frames, in file order."""
    return id3.getall(PICTURE_FRAME)


def get_first_picture_data(id3: ID3) -> Optional[bytes]:
    """Return the payload of the first attached picture, if any."""
    pictures = get_pictures(id3)
    if not pictures:
        return None
    return pictures[0].data


def set_picture(id3: ID3, data: Optional[bytes], mime: str = "") -> None:
    """Replace all attached pictures with a single front cover.

    Passing None for data just removes the pictures.
    """
    id3.delall(PICTURE_FRAME)
    if data is None:
        return
    id3.add(
        mutagen.id3.APIC(
            encoding=Encoding.UTF8,
            mime=mime,
            type=PICTURE_TYPE_FRONT_COVER,
            desc="",
            data=data,
        )
    )


def read_fields(id3: ID3) -> Dict[str, Any]:
    """Collect every mapped field from an ID3 object.

    Number pairs are returned as their raw strings, keyed by the number
    field name with a "_string" suffix; splitting them is left to the
    caller since a malformed value has to abort the parse.
    """
    values: Dict[str, Any] = {}
    for name, frameid in TEXT_FRAMES.items():
        text = get_text(id3, frameid)
        if text:
            values[name] = text
    for name, frameid in NUMERIC_FRAMES.items():
        text = get_text(id3, frameid)
        if text:
            values[name] = conv_int(text)
    for (number_name, _total_name), frameid in NUMBER_PAIR_FRAMES.items():
        text = get_text(id3, frameid)
        if text:
            values[number_name + "_string"] = text
    return values


def write_fields(id3: ID3, values: Dict[str, Any]) -> None:
    """Write every mapped field back into an ID3 object.

    Fields holding their zero value remove the frame instead of writing
    "" or "0".
    """
    for name, frameid in TEXT_FRAMES.items():
        set_text(id3, frameid, values.get(name) or "")
    for name, frameid in NUMERIC_FRAMES.items():
        number = values.get(name) or 0
        set_text(id3, frameid, str(number) if number else "")
    for (number_name, total_name), frameid in NUMBER_PAIR_FRAMES.items():
        text = join_number_pair(values.get(number_name) or 0, values.get(total_name) or 0)
        set_text(id3, frameid, text)
