import math

from media_ingest.codec.base import BaseImageCodec
from media_ingest.ingestion.models import SourceFile, TranscodedAsset
from media_ingest.logging.logger import Log
from media_ingest.policy.models import Policy


def scale_factor(width: int, height: int, policy: Policy) -> float:
    """Return the single downscale factor for a source of the given size.

    An absent bound leaves its axis unconstrained. Never greater than 1.
    """
    factors = [1.0]
    if policy.max_width is not None:
        factors.append(policy.max_width / width)
    if policy.max_height is not None:
        factors.append(policy.max_height / height)
    return min(factors)


def target_size(width: int, height: int, policy: Policy) -> tuple[int, int]:
    """Compute bounded, aspect-preserving target dimensions."""
    s = scale_factor(width, height, policy)
    return _round_half_up(width * s), _round_half_up(height * s)


def _round_half_up(value: float) -> int:
    return max(1, math.floor(value + 0.5))


class ImageTranscoder:
    """Decodes, downsizes and re-encodes a source image into an upload-ready blob."""

    def __init__(self, codec: BaseImageCodec) -> None:
        self._codec = codec

    def transcode(self, file: SourceFile, policy: Policy) -> TranscodedAsset:
        """Transcode a validated file under the given policy.

        Raises:
            DecodeError: if the bytes cannot be decoded.
            EncodeError: if re-encoding produces no output.
        """
        raster = self._codec.decode(file.data)
        width, height = target_size(raster.width, raster.height, policy)
        Log.debug(
            f"Scaling {file.filename} from {raster.width}x{raster.height} to {width}x{height}"
        )

        surface = self._codec.resize(raster, width, height)
        blob = self._codec.encode(surface, file.mime_type, policy.compression_quality)
        Log.info(
            f"Transcoded {file.filename}: {file.byte_length} -> {len(blob)} bytes "
            f"({width}x{height}, {file.mime_type})"
        )
        return TranscodedAsset(blob=blob, width=width, height=height, mime_type=file.mime_type)
