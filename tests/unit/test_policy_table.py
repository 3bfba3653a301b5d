import pytest

from media_ingest.policy.models import MEGABYTE, AssetClass, Policy
from media_ingest.policy.table import POLICIES, policy_for


class TestPolicyTable:
    def test_every_asset_class_has_a_policy(self) -> None:
        for asset_class in AssetClass:
            assert isinstance(policy_for(asset_class), Policy)

    def test_profile_photo_policy(self) -> None:
        policy = policy_for(AssetClass.PROFILE_PHOTO)
        assert policy.max_size_bytes == 2 * MEGABYTE
        assert policy.allowed_mime_types == {"image/jpeg", "image/jpg", "image/png"}
        assert (policy.max_width, policy.max_height) == (500, 500)
        assert policy.compression_quality == 0.85

    def test_vendor_logo_policy(self) -> None:
        policy = policy_for(AssetClass.VENDOR_LOGO)
        assert policy.max_size_bytes == 2 * MEGABYTE
        assert (policy.max_width, policy.max_height) == (400, 400)
        assert policy.compression_quality == 0.90

    def test_vendor_banner_accepts_webp(self) -> None:
        policy = policy_for(AssetClass.VENDOR_BANNER)
        assert policy.max_size_bytes == 5 * MEGABYTE
        assert "image/webp" in policy.allowed_mime_types
        assert (policy.max_width, policy.max_height) == (1920, 600)

    def test_vendor_gallery_policy(self) -> None:
        policy = policy_for(AssetClass.VENDOR_GALLERY_IMAGE)
        assert policy.max_size_bytes == 3 * MEGABYTE
        assert (policy.max_width, policy.max_height) == (1200, 1200)
        assert policy.compression_quality == 0.80

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            POLICIES[AssetClass.VENDOR_LOGO] = policy_for(AssetClass.PROFILE_PHOTO)  # type: ignore[index]


class TestPolicy:
    def test_is_immutable(self) -> None:
        policy = policy_for(AssetClass.PROFILE_PHOTO)
        with pytest.raises(AttributeError):
            policy.max_size_bytes = 1  # type: ignore[misc]

    @pytest.mark.parametrize("quality", [0.0, -0.5, 1.5])
    def test_rejects_quality_outside_range(self, quality: float) -> None:
        with pytest.raises(ValueError, match="compression_quality"):
            Policy(
                max_size_bytes=1,
                allowed_mime_types=frozenset({"image/png"}),
                compression_quality=quality,
            )

    def test_max_size_mb(self) -> None:
        assert policy_for(AssetClass.VENDOR_BANNER).max_size_mb == 5
