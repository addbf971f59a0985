"""Pytest configuration and fixtures."""

import io
import sys
from pathlib import Path

import mutagen.id3
import pytest
from mutagen.id3 import APIC, ID3, Encoding
from PIL import Image

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

# A few MPEG-1 Layer III frame headers followed by silence. mutagen's ID3
# code never decodes audio, so this only has to survive a save untouched.
MPEG_PAYLOAD = (b"\xff\xfb\x90\x64" + b"\x00" * 413) * 3


def make_image(size=(8, 6), mode="RGB"):
    """Create a small image whose pixels all differ."""
    image = Image.new(mode, size)
    width, height = size
    for x in range(width):
        for y in range(height):
            value = (x * 31 + y * 7) % 256
            if mode == "RGB":
                image.putpixel((x, y), (value, 255 - value, (x * y) % 256))
            else:
                image.putpixel((x, y), value)
    return image


def encode_image(image, image_format="PNG"):
    buf = io.BytesIO()
    image.save(buf, format=image_format)
    return buf.getvalue()


def build_mp3(frames=None, pictures=(), payload=MPEG_PAYLOAD, v2_version=3):
    """Build MP3 file contents: an ID3 tag holding frames, then payload.

    Args:
        frames: Mapping of frame ID to text, e.g. {"TPE1": "Artist"}
        pictures: Raw APIC payloads, in the order they should appear
        payload: Bytes following the tag
        v2_version: ID3v2 minor version of the tag
    """
    id3 = ID3()
    for frameid, text in (frames or {}).items():
        id3.add(mutagen.id3.Frames[frameid](encoding=Encoding.UTF8, text=[text]))
    for i, data in enumerate(pictures):
        id3.add(APIC(encoding=Encoding.UTF8, mime="image/png", type=3,
                     desc=f"picture {i}", data=data))
    buf = io.BytesIO(payload)
    id3.save(buf, v2_version=v2_version)
    return buf.getvalue()


@pytest.fixture
def cover_image():
    """A small RGB image for cover art tests."""
    return make_image()


@pytest.fixture
def empty_mp3():
    """MP3 data without any ID3 tag."""
    return MPEG_PAYLOAD


@pytest.fixture
def nonempty_mp3(cover_image):
    """MP3 data with a few fields set and a PNG cover."""
    return build_mp3(
        {
            "TPE1": "Sample Artist",
            "TALB": "Sample Album",
            "TIT2": "Sample Title",
            "TYER": "1999",
            "TBPM": "120",
            "TPOS": "1/2",
            "TRCK": "3/12",
        },
        pictures=[encode_image(cover_image)],
    )


@pytest.fixture
def mp3_file(tmp_path, nonempty_mp3):
    """An MP3 file on disk holding nonempty_mp3."""
    path = tmp_path / "song.mp3"
    path.write_bytes(nonempty_mp3)
    return path
