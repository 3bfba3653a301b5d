from media_ingest.config.settings import Settings
from media_ingest.storage.client_base import BaseStorageClient
from media_ingest.storage.example_client_adapter import ExampleStorageClient
from media_ingest.storage.http_client_adapter import HttpStorageClient


class StorageClientFactory:
    """Creates the configured storage client."""

    @classmethod
    def create(cls, settings: Settings) -> BaseStorageClient:
        provider = settings.storage_provider.lower()
        if provider == "example":
            return ExampleStorageClient()
        if provider == "http":
            return HttpStorageClient(
                base_url=settings.storage_api_base_url,
                timeout_seconds=settings.storage_api_timeout_seconds,
                token=settings.storage_api_token,
            )
        raise ValueError(
            f"Unknown storage provider '{provider}'. Choose from: ['example', 'http']"
        )
