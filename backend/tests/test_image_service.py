import base64
from io import BytesIO

from PIL import Image as PILImage

from sofaclean.services import image_service
from tests.conftest import make_image_bytes


def test_compress_image_resizes_to_max_dimension():
    data, mime_type = image_service.compress_image(make_image_bytes(size=(1600, 1200)), "image/png")
    assert mime_type == "image/jpeg"
    with PILImage.open(BytesIO(data)) as img:
        assert max(img.size) <= 800
        assert img.size == (800, 600)
        assert img.format == "JPEG"


def test_compress_image_keeps_small_images_small():
    data, _ = image_service.compress_image(make_image_bytes(size=(200, 100)), "image/png")
    with PILImage.open(BytesIO(data)) as img:
        assert img.size == (200, 100)


def test_compress_image_respects_byte_budget():
    data, _ = image_service.compress_image(make_image_bytes(size=(1600, 1200)), "image/png")
    assert len(data) <= 512 * 1024


def test_compress_image_converts_rgba():
    buf = BytesIO()
    PILImage.new("RGBA", (100, 100), color=(0, 0, 0, 0)).save(buf, format="PNG")
    data, mime_type = image_service.compress_image(buf.getvalue(), "image/png")
    assert mime_type == "image/jpeg"


def test_invalid_bytes_returned_unchanged():
    raw = b"definitely not an image"
    data, mime_type = image_service.compress_image(raw, "image/heic")
    assert data == raw
    assert mime_type == "image/heic"


def test_compress_to_data_uri():
    uri = image_service.compress_to_data_uri(make_image_bytes(), "image/png")
    header, payload = uri.split(",", 1)
    assert header == "data:image/jpeg;base64"
    assert base64.b64decode(payload)[:2] == b"\xff\xd8"


def test_oversized_image_returned_unchanged(monkeypatch):
    monkeypatch.setattr(PILImage, "MAX_IMAGE_PIXELS", 1000)
    raw = make_image_bytes(size=(100, 100))
    data, mime_type = image_service.compress_image(raw, "image/png")
    assert data == raw
    assert mime_type == "image/png"
