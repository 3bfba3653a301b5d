import io
from typing import ClassVar

from PIL import Image, ImageOps

from media_ingest.codec.base import BaseImageCodec, Raster
from media_ingest.ingestion.exceptions import DecodeError, EncodeError


class PillowCodecAdapter(BaseImageCodec):
    """Decodes, resizes and encodes images using Pillow."""

    FORMATS: ClassVar[dict[str, str]] = {
        "image/jpeg": "JPEG",
        "image/jpg": "JPEG",
        "image/png": "PNG",
        "image/webp": "WEBP",
    }
    # JPEG has no alpha channel
    _JPEG_MODES: ClassVar[frozenset[str]] = frozenset({"RGB", "L", "CMYK"})

    def decode(self, data: bytes) -> Raster:
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
            image = ImageOps.exif_transpose(image)
        except Exception as exc:
            raise DecodeError(f"Failed to load image: {exc}") from exc
        return Raster(width=image.width, height=image.height, image=image)

    def resize(self, raster: Raster, width: int, height: int) -> Raster:
        if (width, height) == (raster.width, raster.height):
            return raster
        resized = raster.image.resize((width, height), Image.Resampling.LANCZOS)
        return Raster(width=width, height=height, image=resized)

    def encode(self, raster: Raster, mime_type: str, quality: float) -> bytes:
        fmt = self.FORMATS.get(mime_type)
        if fmt is None:
            raise EncodeError(f"Cannot encode to unsupported type '{mime_type}'")

        image = raster.image
        buf = io.BytesIO()
        try:
            if fmt == "JPEG" and image.mode not in self._JPEG_MODES:
                image = image.convert("RGB")
            # PNG ignores quality; output size for PNG is not bounded by it
            image.save(buf, format=fmt, quality=round(quality * 100))
        except Exception as exc:
            raise EncodeError(f"Failed to compress image: {exc}") from exc

        blob = buf.getvalue()
        if not blob:
            raise EncodeError("Failed to compress image: encoder produced no output")
        return blob
