from media_ingest.ingestion.models import TranscodedAsset
from media_ingest.policy.models import AssetClass
from media_ingest.storage.example_client_adapter import ExampleStorageClient


def _asset(blob: bytes = b"data") -> TranscodedAsset:
    return TranscodedAsset(blob=blob, width=1, height=1, mime_type="image/png")


class TestExampleStorageClient:
    def test_returns_folder_specific_urls(self) -> None:
        client = ExampleStorageClient()
        logo = client.upload(AssetClass.VENDOR_LOGO, _asset(), filename="l.png", owner_email="v")
        photo = client.upload(AssetClass.PROFILE_PHOTO, _asset(), filename="p.png", owner_email="c")

        assert logo.startswith("/uploads/vendors/logos/")
        assert logo.endswith("_l.png")
        assert photo.startswith("/uploads/customers/")

    def test_stores_uploaded_blob(self) -> None:
        client = ExampleStorageClient()
        url = client.upload(
            AssetClass.VENDOR_BANNER, _asset(b"banner"), filename="b.png", owner_email="v"
        )
        assert client.blobs[url] == b"banner"

    def test_gallery_uploads_are_tracked_per_owner(self) -> None:
        client = ExampleStorageClient()
        first = client.upload(
            AssetClass.VENDOR_GALLERY_IMAGE, _asset(), filename="1.png", owner_email="v"
        )
        second = client.upload(
            AssetClass.VENDOR_GALLERY_IMAGE, _asset(), filename="2.png", owner_email="v"
        )
        assert client.galleries["v"] == [first, second]

    def test_delete_removes_matching_gallery_entries(self) -> None:
        client = ExampleStorageClient()
        keep = client.upload(
            AssetClass.VENDOR_GALLERY_IMAGE, _asset(), filename="keep.png", owner_email="v"
        )
        drop = client.upload(
            AssetClass.VENDOR_GALLERY_IMAGE, _asset(), filename="drop.png", owner_email="v"
        )

        client.delete_gallery_image(drop, owner_email="v")

        assert client.galleries["v"] == [keep]

    def test_delete_for_unknown_owner_is_noop(self) -> None:
        client = ExampleStorageClient()
        client.delete_gallery_image("missing", owner_email="nobody")
        assert client.galleries["nobody"] == []
