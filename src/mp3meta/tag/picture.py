"""Cover art conversion between APIC payloads and Pillow images."""

import io
import logging
from typing import Optional, Tuple

from PIL import Image

from ..constants import PICTURE_MIME_TYPES

logger = logging.getLogger(__name__)

# Modes each output format can store without conversion
_SAVEABLE_MODES = {
    "PNG": {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"},
    "JPEG": {"L", "RGB", "CMYK"},
}


def decode_picture(data: bytes) -> Optional[Image.Image]:
    """Decode raw picture bytes, sniffing the format.

    Returns None if Pillow can't make sense of the data.
    """
    try:
        image = Image.open(io.BytesIO(data))
        # Image.open is lazy; force the decode so truncated data fails here
        image.load()
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        logger.debug("Ignoring undecodable cover art (%d bytes): %s", len(data), e)
        return None
    return image


def encode_picture(
    image: Image.Image, image_format: str = "PNG", quality: int = 95
) -> Tuple[bytes, str]:
    """Encode an image for embedding.

    Args:
        image: Image to encode
        image_format: "PNG" or "JPEG"
        quality: JPEG quality, ignored for PNG

    Returns:
        (encoded bytes, MIME type)

    Raises:
        ValueError: If the format is not supported
        OSError: If Pillow fails to encode the image
    """
    image_format = image_format.upper()
    try:
        mime = PICTURE_MIME_TYPES[image_format]
    except KeyError:
        raise ValueError(f"Unsupported cover art format: {image_format}") from None

    if image.mode not in _SAVEABLE_MODES[image_format]:
        has_alpha = "A" in image.getbands() or "transparency" in image.info
        if image_format == "PNG" and has_alpha:
            image = image.convert("RGBA")
        else:
            image = image.convert("RGB")

    buf = io.BytesIO()
    if image_format == "JPEG":
        image.save(buf, format="JPEG", quality=quality)
    else:
        image.save(buf, format="PNG")
    return buf.getvalue(), mime
