import io
import base64

import pytest
from PIL import Image

from seogen.config import settings
from seogen.services.image import ImageError, decode_image, prepare_image


def _size(b64):
    return Image.open(io.BytesIO(base64.b64decode(b64))).size


def test_small_image_passes_through(make_image):
    b64 = make_image((40, 30))
    out, mime = prepare_image(b64, "image/png")
    assert out == b64
    assert mime == "image/png"


def test_data_url_accepted(make_image):
    raw = decode_image("data:image/png;base64," + make_image())
    assert raw.startswith(b"\x89PNG")


def test_large_png_downscaled(monkeypatch, make_image):
    monkeypatch.setattr(settings, "image_max_size", "100,100")
    out, mime = prepare_image(make_image((400, 200)), "image/png")
    assert mime == "image/png"
    assert _size(out) == (100, 50)


def test_large_jpeg_stays_jpeg(monkeypatch, make_image):
    monkeypatch.setattr(settings, "image_max_size", "50,50")
    out, mime = prepare_image(make_image((200, 200), fmt="JPEG"), "image/jpeg")
    assert mime == "image/jpeg"
    assert _size(out) == (50, 50)


def test_large_webp_reencoded_as_png(monkeypatch, make_image):
    monkeypatch.setattr(settings, "image_max_size", "50,50")
    out, mime = prepare_image(make_image((100, 100), fmt="WEBP"), "image/webp")
    assert mime == "image/png"
    assert base64.b64decode(out).startswith(b"\x89PNG")


def test_invalid_base64():
    with pytest.raises(ImageError, match="Invalid image data"):
        decode_image("not base64 at all!!")


def test_not_an_image():
    with pytest.raises(ImageError, match="Invalid image data"):
        decode_image(base64.b64encode(b"plain text, not pixels").decode())


def test_too_large(monkeypatch, make_image):
    monkeypatch.setattr(settings, "image_max_mb", 0.00001)
    with pytest.raises(ImageError, match="MB limit"):
        decode_image(make_image())


def _cmyk_tiff_b64(size):
    buf = io.BytesIO()
    Image.new("CMYK", size, color=(0, 128, 255, 0)).save(buf, format="TIFF")
    return base64.b64encode(buf.getvalue()).decode()


def test_large_cmyk_tiff_converted_for_png(monkeypatch):
    monkeypatch.setattr(settings, "image_max_size", "40,40")
    out, mime = prepare_image(_cmyk_tiff_b64((120, 80)), "image/tiff")
    assert mime == "image/png"
    img = Image.open(io.BytesIO(base64.b64decode(out)))
    assert img.mode == "RGBA"
    assert img.size == (40, 27)


def test_decompression_bomb_rejected(monkeypatch, make_image):
    image = make_image((40, 30))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    with pytest.raises(ImageError, match="too many pixels"):
        decode_image(image)


def test_resize_failure_is_image_error(monkeypatch, make_image):
    image = make_image((100, 100))
    monkeypatch.setattr(settings, "image_max_size", "10,10")

    def broken_save(self, *args, **kwargs):
        raise OSError("cannot write mode")
    monkeypatch.setattr(Image.Image, "save", broken_save)

    with pytest.raises(ImageError, match="Could not resize image"):
        prepare_image(image, "image/png")
