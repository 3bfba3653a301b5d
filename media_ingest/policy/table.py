from types import MappingProxyType

from media_ingest.policy.models import MEGABYTE, AssetClass, Policy

_BASIC_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png"})
_WEB_TYPES = _BASIC_TYPES | {"image/webp"}

POLICIES: MappingProxyType[AssetClass, Policy] = MappingProxyType(
    {
        AssetClass.PROFILE_PHOTO: Policy(
            max_size_bytes=2 * MEGABYTE,
            allowed_mime_types=_BASIC_TYPES,
            max_width=500,
            max_height=500,
            compression_quality=0.85,
        ),
        AssetClass.VENDOR_LOGO: Policy(
            max_size_bytes=2 * MEGABYTE,
            allowed_mime_types=_BASIC_TYPES,
            max_width=400,
            max_height=400,
            compression_quality=0.90,
        ),
        AssetClass.VENDOR_BANNER: Policy(
            max_size_bytes=5 * MEGABYTE,
            allowed_mime_types=_WEB_TYPES,
            max_width=1920,
            max_height=600,
            compression_quality=0.85,
        ),
        AssetClass.VENDOR_GALLERY_IMAGE: Policy(
            max_size_bytes=3 * MEGABYTE,
            allowed_mime_types=_WEB_TYPES,
            max_width=1200,
            max_height=1200,
            compression_quality=0.80,
        ),
    }
)


def policy_for(asset_class: AssetClass) -> Policy:
    """Return the policy for an asset class.

    A missing entry is a programming error and surfaces as KeyError.
    """
    return POLICIES[asset_class]
