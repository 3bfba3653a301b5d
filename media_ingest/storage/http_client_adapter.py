from urllib.parse import quote

import httpx

from media_ingest.ingestion.exceptions import StorageServerError
from media_ingest.ingestion.models import TranscodedAsset
from media_ingest.logging.logger import Log
from media_ingest.policy.models import AssetClass
from media_ingest.storage.client_base import UPLOAD_ENDPOINTS, BaseStorageClient


class HttpStorageClient(BaseStorageClient):
    """Storage API client that posts multipart uploads over HTTP."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        token: str = "",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            headers=headers,
            transport=transport,
        )

    def __enter__(self) -> "HttpStorageClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def upload(
        self,
        asset_class: AssetClass,
        asset: TranscodedAsset,
        *,
        filename: str,
        owner_email: str,
    ) -> str:
        endpoint = UPLOAD_ENDPOINTS[asset_class]
        Log.info(f"Uploading {filename} ({len(asset.blob)} bytes) to {endpoint}")
        response = self._send(
            "POST",
            endpoint,
            files={"file": (filename, asset.blob, asset.mime_type)},
            data={"email": owner_email},
        )

        try:
            payload = response.json()
        except ValueError as exc:
            raise StorageServerError(
                f"Storage API returned invalid JSON: {exc}",
                status_code=response.status_code,
            ) from exc

        url = payload.get("url") if isinstance(payload, dict) else None
        if not isinstance(url, str) or not url:
            raise StorageServerError(
                "Storage API response has no 'url' field",
                status_code=response.status_code,
            )
        return url

    def delete_gallery_image(self, image_id: str, *, owner_email: str) -> None:
        # gallery ids are storage URLs, so keep them in a single path segment
        path = f"/vendor/gallery/{quote(image_id, safe='')}"
        self._send("DELETE", path, params={"email": owner_email})

    def _send(self, method: str, path: str, **kwargs: object) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)  # type: ignore[arg-type]
        except httpx.HTTPError as exc:
            raise StorageServerError(f"Storage API network error: {exc}") from exc

        if not response.is_success:
            raise StorageServerError(
                f"Storage API error {response.status_code}: {_error_detail(response)}",
                status_code=response.status_code,
            )
        return response


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        return payload["error"]
    return response.reason_phrase
