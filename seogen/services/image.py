import io
import base64
import binascii
import logging
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from ..config import settings

logger = logging.getLogger(__name__)


class ImageError(ValueError):
    pass


PNG_MODES = {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}


def _strip_data_url(b64: str) -> str:
    # "data:image/png;base64,AAAA" -> "AAAA"
    if b64.startswith("data:") and "," in b64:
        return b64.split(",", 1)[1]
    return b64


def decode_image(base64_image: str) -> bytes:
    try:
        raw = base64.b64decode(_strip_data_url(base64_image.strip()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageError("Invalid image data") from e

    if len(raw) > settings.image_max_mb * 1024 * 1024:
        raise ImageError(f"Image exceeds {settings.image_max_mb:g} MB limit")

    try:
        with Image.open(io.BytesIO(raw)) as img:
            img.verify()
    except Image.DecompressionBombError as e:
        raise ImageError("Image has too many pixels") from e
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ImageError("Invalid image data") from e
    return raw


def prepare_image(base64_image: str, mime_type: str) -> Tuple[str, str]:
    """
    Validate an uploaded creative and shrink it to fit settings.image_max_dims().
    Returns (base64, mime_type) ready to inline in a model request.
    """
    raw = decode_image(base64_image)
    max_size = settings.image_max_dims()

    with Image.open(io.BytesIO(raw)) as img:
        if img.width <= max_size[0] and img.height <= max_size[1]:
            return base64.b64encode(raw).decode(), mime_type

        fmt, out_mime = ("JPEG", "image/jpeg") if img.format == "JPEG" else ("PNG", "image/png")
        try:
            if fmt == "JPEG":
                out = img.convert("RGB")
            elif img.mode not in PNG_MODES:
                out = img.convert("RGBA")
            else:
                out = img.copy()
            out.thumbnail(max_size)
            buf = io.BytesIO()
            out.save(buf, format=fmt, **({"quality": 88} if fmt == "JPEG" else {}))
        except (OSError, ValueError) as e:
            raise ImageError("Could not resize image") from e

    logger.info("Downscaled creative to %sx%s", out.width, out.height)
    return base64.b64encode(buf.getvalue()).decode(), out_mime
