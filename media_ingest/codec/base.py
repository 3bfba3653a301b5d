from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Raster:
    """Decoded in-memory image with known pixel dimensions."""

    width: int
    height: int
    image: Any


class BaseImageCodec(ABC):
    """Contract for all image decode/render/encode adapters."""

    @abstractmethod
    def decode(self, data: bytes) -> Raster:
        """Decode raw bytes into a raster.

        Raises:
            DecodeError: if the bytes are not a decodable image.
        """

    @abstractmethod
    def resize(self, raster: Raster, width: int, height: int) -> Raster:
        """Render the raster onto an off-screen surface of the given size."""

    @abstractmethod
    def encode(self, raster: Raster, mime_type: str, quality: float) -> bytes:
        """Encode a raster into a binary blob.

        Args:
            raster: Image to encode.
            mime_type: Output format.
            quality: Compression quality in (0, 1]; lossless formats ignore it.

        Raises:
            EncodeError: if encoding produces no output.
        """
