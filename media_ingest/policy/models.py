from dataclasses import dataclass
from enum import Enum

MEGABYTE = 1024 * 1024


class AssetClass(str, Enum):
    """Category of uploaded media; each one maps to exactly one Policy."""

    PROFILE_PHOTO = "profile_photo"
    VENDOR_LOGO = "vendor_logo"
    VENDOR_BANNER = "vendor_banner"
    VENDOR_GALLERY_IMAGE = "vendor_gallery_image"


@dataclass(frozen=True)
class Policy:
    """Size, type, dimension and quality constraints for one asset class."""

    max_size_bytes: int
    allowed_mime_types: frozenset[str]
    compression_quality: float
    max_width: int | None = None
    max_height: int | None = None

    def __post_init__(self) -> None:
        if not 0.0 < self.compression_quality <= 1.0:
            raise ValueError(
                f"compression_quality must be in (0, 1], got {self.compression_quality}"
            )

    @property
    def max_size_mb(self) -> float:
        return self.max_size_bytes / MEGABYTE

