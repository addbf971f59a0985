"""Core MP3Tag class holding the metadata of one MP3 file."""

import io
import logging
from typing import Any, BinaryIO, Dict, Optional, Tuple

from mutagen import MutagenError
from mutagen.id3 import ID3, ID3NoHeaderError
from PIL import Image

from ..config import WriteOptions
from ..constants import NUMBER_PAIR_FRAMES, NUMERIC_FRAMES, TEXT_FRAMES
from ..errors import NumericFieldError, ParseError, SaveError
from .mappings import get_first_picture_data, read_fields, set_picture, write_fields
from .picture import decode_picture, encode_picture
from .utils import split_number_pair

logger = logging.getLogger(__name__)

TEXT_FIELDS: Tuple[str, ...] = tuple(TEXT_FRAMES)
INT_FIELDS: Tuple[str, ...] = tuple(NUMERIC_FRAMES) + tuple(
    name for pair in NUMBER_PAIR_FRAMES for name in pair
)


def _text_field(name: str, doc: str) -> property:
    def getter(self) -> str:
        return self._values.get(name, "")

    def setter(self, value: str) -> None:
        self._values[name] = value

    def deleter(self) -> None:
        self._values.pop(name, None)

    getter.__name__ = name
    return property(getter, setter, deleter, doc)


def _int_field(name: str, doc: str) -> property:
    def getter(self) -> int:
        return self._values.get(name, 0)

    def setter(self, value: int) -> None:
        self._values[name] = value

    def deleter(self) -> None:
        self._values.pop(name, None)

    getter.__name__ = name
    return property(getter, setter, deleter, doc)


def _write_all(sink: BinaryIO, data: bytes) -> None:
    """Write data to sink, retrying short writes."""
    offset = 0
    while offset < len(data):
        written = sink.write(data[offset:])
        if written is None:
            # Not a raw stream; writers that don't report a count take it all
            break
        if written <= 0:
            raise OSError(f"Destination accepted no data at offset {offset}")
        offset += written


class MP3Tag:
    """
    Typed view of the ID3 tag of one MP3 file.

    The known text frames are exposed as plain properties (strings or
    ints), the "N/M" disc and track frames are split into number and total,
    and the first attached picture is decoded into a Pillow image.

    Every property can also be reached by name: tag["artist"].

    The underlying mutagen ID3 object is kept, so frames that aren't
    modeled here (comments, TXXX, ...) survive a parse/save cycle. The
    stream the tag was parsed from is kept as well, since saving needs the
    audio data behind the tag.

    Not safe for concurrent use.
    """

    artist = _text_field("artist", "Lead artist (TPE1).")
    album = _text_field("album", "Album title (TALB).")
    album_artist = _text_field("album_artist", "Album artist / band (TPE2).")
    title = _text_field("title", "Track title (TIT2).")
    subtitle = _text_field("subtitle", "Subtitle / description refinement (TIT3).")
    genre = _text_field("genre", "Genre, stored as written (TCON).")
    composer = _text_field("composer", "Composer (TCOM).")
    lyricist = _text_field("lyricist", "Lyricist / text writer (TEXT).")
    publisher = _text_field("publisher", "Publisher (TPUB).")
    encoder = _text_field("encoder", "Encoded by (TENC).")
    copyright = _text_field("copyright", "Copyright message (TCOP).")
    language = _text_field("language", "Language(s) (TLAN).")
    isrc = _text_field("isrc", "International Standard Recording Code (TSRC).")
    date = _text_field("date", "Recording date as DDMM (TDAT).")
    length = _text_field("length", "Length in milliseconds, as text (TLEN).")
    year = _int_field("year", "Recording year (TYER).")
    bpm = _int_field("bpm", "Beats per minute (TBPM).")
    disc_number = _int_field("disc_number", "Disc number (TPOS, before the slash).")
    disc_total = _int_field("disc_total", "Number of discs (TPOS, after the slash).")
    track_number = _int_field("track_number", "Track number (TRCK, before the slash).")
    track_total = _int_field("track_total", "Number of tracks (TRCK, after the slash).")

    def __init__(self, id3: Optional[ID3] = None, source: Optional[BinaryIO] = None):
        self._id3 = id3 if id3 is not None else ID3()
        self._values: Dict[str, Any] = {}
        self._raw_pairs: Dict[str, str] = {}
        self.cover_art: Optional[Image.Image] = None
        self.source = source

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------
    @classmethod
    def parse(cls, source: BinaryIO) -> "MP3Tag":
        """
        Parse the ID3 tag from a readable, seekable stream.

        Reading starts at the current position of the stream. A stream
        without any ID3 tag gives an empty MP3Tag.

        Raises:
            ParseError: If the tag is corrupt or the stream fails
            NumericFieldError: If a disc or track number isn't numeric
        """
        try:
            # Always translate to the v2.3 frame set (TDRC -> TYER/TDAT)
            id3 = ID3(source, v2_version=3)
        except ID3NoHeaderError:
            logger.debug("No ID3 tag found, starting with an empty tag")
            id3 = ID3()
        except (MutagenError, OSError, ValueError) as e:
            raise ParseError(f"Error parsing MP3 tag: {e}") from e
        return cls.from_id3(id3, source)

    @classmethod
    def from_id3(cls, id3: ID3, source: Optional[BinaryIO] = None) -> "MP3Tag":
        """Build an MP3Tag from an already loaded mutagen ID3 object."""
        tag = cls(id3, source)
        values = read_fields(id3)

        for (number_name, total_name) in NUMBER_PAIR_FRAMES:
            raw = values.pop(number_name + "_string", "")
            tag._raw_pairs[number_name] = raw
            if not raw:
                continue
            number, total = split_number_pair(raw)
            if total is not None:
                values[total_name] = int(total)
            try:
                values[number_name] = int(number)
            except ValueError:
                raise NumericFieldError(number_name, raw) from None

        tag._values.update(values)

        data = get_first_picture_data(id3)
        if data is not None:
            tag.cover_art = decode_picture(data)

        logger.debug(
            "Parsed ID3v2.%d tag: %d frames, cover art: %s",
            id3.version[1],
            len(id3),
            "yes" if tag.cover_art is not None else "no",
        )
        return tag

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------
    @property
    def disc_number_string(self) -> str:
        """TPOS text as it was read, before splitting."""
        return self._raw_pairs.get("disc_number", "")

    @property
    def track_number_string(self) -> str:
        """TRCK text as it was read, before splitting."""
        return self._raw_pairs.get("track_number", "")

    @property
    def id3(self) -> ID3:
        """The underlying mutagen ID3 object."""
        return self._id3

    @classmethod
    def fields(cls) -> Tuple[str, ...]:
        """Names of all scalar fields, text fields first."""
        return TEXT_FIELDS + INT_FIELDS

    def _check_field(self, name: str) -> None:
        if name not in TEXT_FIELDS and name not in INT_FIELDS:
            raise KeyError(name)

    def __getitem__(self, name: str) -> Any:
        self._check_field(name)
        return self._values.get(name, 0 if name in INT_FIELDS else "")

    def __setitem__(self, name: str, value: Any) -> None:
        self._check_field(name)
        self._values[name] = value

    def __delitem__(self, name: str) -> None:
        self._check_field(name)
        self._values.pop(name, None)

    def as_dict(self) -> Dict[str, Any]:
        """Return every scalar field plus whether cover art is present."""
        result = {name: self[name] for name in self.fields()}
        result["has_cover_art"] = self.cover_art is not None
        return result

    def clear_all_tags(self) -> None:
        """Reset every field to its zero value and drop the cover art.

        The source stream and frames that aren't modeled are left alone.
        """
        self._values.clear()
        self.cover_art = None

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} artist={self.artist!r} "
            f"album={self.album!r} title={self.title!r}>"
        )

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------
    def save(
        self,
        destination: Optional[BinaryIO] = None,
        options: Optional[WriteOptions] = None,
    ) -> None:
        """
        Write the file with the current tag to destination.

        The audio data is copied from the source stream. Without a
        destination (or when destination is the source itself) the source
        is rewritten in place and must be writable.

        Raises:
            SaveError: If the source can't be read, the tag can't be
                built or the destination fails. The destination may hold
                partial output afterwards.
        """
        if options is None:
            options = WriteOptions()

        self._update_frames(options)
        data = self._render(options)

        in_place = destination is None or destination is self.source
        target = self.source if in_place else destination
        if target is None:
            raise SaveError("No destination given and the tag has no source stream")

        try:
            if in_place:
                target.seek(0)
            _write_all(target, data)
            if in_place:
                target.truncate()
        except (OSError, ValueError) as e:
            raise SaveError(f"Error writing MP3 data: {e}") from e

        logger.debug(
            "Saved ID3v2.%d tag (%d bytes total)%s",
            options.id3_version,
            len(data),
            " in place" if in_place else "",
        )

    def _update_frames(self, options: WriteOptions) -> None:
        """Push the field values and cover art into the ID3 object."""
        write_fields(self._id3, self._values)

        if self.cover_art is None:
            set_picture(self._id3, None)
            return
        try:
            picture, mime = encode_picture(
                self.cover_art, options.cover_format, options.jpeg_quality
            )
        except (OSError, ValueError) as e:
            raise SaveError(f"Error encoding cover art: {e}") from e
        set_picture(self._id3, picture, mime)

    def _render(self, options: WriteOptions) -> bytes:
        """Return the complete file: new tag followed by the source audio."""
        original = b""
        if self.source is not None:
            try:
                self.source.seek(0)
                original = self.source.read() or b""
            except (OSError, ValueError) as e:
                raise SaveError(f"Error reading source stream: {e}") from e

        padding = None
        if options.padding is not None:
            def padding(info, _size=options.padding):
                return _size

        buf = io.BytesIO(original)
        try:
            # mutagen replaces (or inserts) the tag and keeps what follows
            self._id3.save(
                buf,
                v1=options.id3v1_flag,
                v2_version=options.id3_version,
                padding=padding,
            )
        except (MutagenError, OSError, ValueError) as e:
            raise SaveError(f"Error building ID3 tag: {e}") from e
        return buf.getvalue()
