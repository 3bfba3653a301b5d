"""Offline storage client.

Mirrors the Storage API's URL layout without any network calls. Useful for
local development and tests, and as a template for new storage adapters.
"""

import uuid
from typing import ClassVar

from media_ingest.ingestion.models import TranscodedAsset
from media_ingest.policy.models import AssetClass
from media_ingest.storage.client_base import BaseStorageClient


class ExampleStorageClient(BaseStorageClient):
    """In-memory storage client returning `/uploads/...` URLs."""

    FOLDERS: ClassVar[dict[AssetClass, str]] = {
        AssetClass.PROFILE_PHOTO: "customers",
        AssetClass.VENDOR_LOGO: "vendors/logos",
        AssetClass.VENDOR_BANNER: "vendors/banners",
        AssetClass.VENDOR_GALLERY_IMAGE: "vendors/gallery",
    }

    def __init__(self) -> None:
        self.blobs: dict[str, bytes] = {}
        self.galleries: dict[str, list[str]] = {}

    def upload(
        self,
        asset_class: AssetClass,
        asset: TranscodedAsset,
        *,
        filename: str,
        owner_email: str,
    ) -> str:
        url = f"/uploads/{self.FOLDERS[asset_class]}/{uuid.uuid4()}_{filename}"
        self.blobs[url] = asset.blob
        if asset_class is AssetClass.VENDOR_GALLERY_IMAGE:
            self.galleries.setdefault(owner_email, []).append(url)
        return url

    def delete_gallery_image(self, image_id: str, *, owner_email: str) -> None:
        gallery = self.galleries.get(owner_email, [])
        self.galleries[owner_email] = [url for url in gallery if image_id not in url]
