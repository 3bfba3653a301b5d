import io
from collections.abc import Callable

import pytest
from PIL import Image

from media_ingest.ingestion.models import SourceFile

ImageFactory = Callable[..., bytes]


def _image_bytes(
    width: int,
    height: int,
    fmt: str = "JPEG",
    mode: str = "RGB",
) -> bytes:
    buf = io.BytesIO()
    color = (200, 80, 40, 255)[: len(mode)] if mode in ("RGB", "RGBA") else 128
    Image.new(mode, (width, height), color=color).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture()
def make_image() -> ImageFactory:
    """Return a factory producing encoded image bytes of a given size and format."""
    return _image_bytes


@pytest.fixture()
def jpeg_file() -> SourceFile:
    """A small valid JPEG source file."""
    return SourceFile(data=_image_bytes(800, 600), mime_type="image/jpeg", filename="photo.jpg")


@pytest.fixture()
def png_file() -> SourceFile:
    """A small valid PNG source file with alpha."""
    return SourceFile(
        data=_image_bytes(300, 300, fmt="PNG", mode="RGBA"),
        mime_type="image/png",
        filename="logo.png",
    )
