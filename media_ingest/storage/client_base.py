from abc import ABC, abstractmethod
from types import MappingProxyType

from media_ingest.ingestion.models import TranscodedAsset
from media_ingest.policy.models import AssetClass

UPLOAD_ENDPOINTS: MappingProxyType[AssetClass, str] = MappingProxyType(
    {
        AssetClass.PROFILE_PHOTO: "/customer/upload/photo",
        AssetClass.VENDOR_LOGO: "/vendor/upload/logo",
        AssetClass.VENDOR_BANNER: "/vendor/upload/banner",
        AssetClass.VENDOR_GALLERY_IMAGE: "/vendor/upload/gallery",
    }
)


class BaseStorageClient(ABC):
    """Contract for Storage API clients."""

    @abstractmethod
    def upload(
        self,
        asset_class: AssetClass,
        asset: TranscodedAsset,
        *,
        filename: str,
        owner_email: str,
    ) -> str:
        """Store a transcoded asset and return its public URL.

        Raises:
            StorageServerError: on transport failure, non-2xx status,
                or a response without a URL.
        """

    @abstractmethod
    def delete_gallery_image(self, image_id: str, *, owner_email: str) -> None:
        """Remove one image from the owner's vendor gallery.

        Raises:
            StorageServerError: on transport failure or non-2xx status.
        """

    def close(self) -> None:
        """Release any underlying connections."""
