"""Quote attachment compression and data-URI encoding."""

import base64
import logging
from io import BytesIO

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from sofaclean.config import settings

logger = logging.getLogger(__name__)

MIN_QUALITY = 30
QUALITY_STEP = 10


def compress_image(
    raw: bytes,
    content_type: str | None = None,
    *,
    max_bytes: int | None = None,
    max_dimension: int | None = None,
    initial_quality: float | None = None,
) -> tuple[bytes, str]:
    """Shrink an image to fit the size and dimension limits.

    Returns ``(bytes, mime_type)``. When the input cannot be decoded or
    re-encoded, the original bytes and content type come back untouched.
    """
    max_bytes = max_bytes or settings.IMAGE_MAX_BYTES
    max_dimension = max_dimension or settings.IMAGE_MAX_DIMENSION
    quality = int((initial_quality or settings.IMAGE_INITIAL_QUALITY) * 100)
    fallback_type = content_type or "application/octet-stream"

    try:
        with PILImage.open(BytesIO(raw)) as opened:
            opened.load()
            img = opened.convert("RGB") if opened.mode not in ("RGB", "L") else opened.copy()
        img.thumbnail((max_dimension, max_dimension))

        while True:
            buf = BytesIO()
            img.save(buf, format="JPEG", quality=quality, optimize=True)
            data = buf.getvalue()
            if len(data) <= max_bytes or quality <= MIN_QUALITY:
                break
            quality = max(MIN_QUALITY, quality - QUALITY_STEP)
        return data, "image/jpeg"
    except (UnidentifiedImageError, PILImage.DecompressionBombError, OSError, ValueError) as exc:
        logger.warning("[quotes] image compression failed, uploading original: %s", exc)
        return raw, fallback_type


def to_data_uri(data: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def compress_to_data_uri(raw: bytes, content_type: str | None = None) -> str:
    data, mime_type = compress_image(raw, content_type)
    return to_data_uri(data, mime_type)
