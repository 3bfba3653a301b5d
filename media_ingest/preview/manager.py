import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from media_ingest.ingestion.models import SourceFile


@dataclass(frozen=True)
class PreviewHandle:
    """Opaque local reference to not-yet-uploaded file bytes."""

    url: str


class PreviewManager:
    """Creates and releases transient preview handles.

    The owner must revoke every handle it creates; nothing is revoked
    automatically.
    """

    SCHEME = "blob:media-ingest/"

    def __init__(self) -> None:
        self._previews: dict[str, SourceFile] = {}

    def create_preview(self, file: SourceFile) -> PreviewHandle:
        """Register a file for preview. No validation is applied."""
        handle = PreviewHandle(url=f"{self.SCHEME}{uuid.uuid4()}")
        self._previews[handle.url] = file
        return handle

    def revoke_preview(self, handle: PreviewHandle) -> None:
        """Release a handle. Unknown or already revoked handles are ignored."""
        self._previews.pop(handle.url, None)

    def resolve(self, handle: PreviewHandle) -> SourceFile | None:
        return self._previews.get(handle.url)

    @property
    def active_count(self) -> int:
        return len(self._previews)

    @contextmanager
    def scoped_preview(self, file: SourceFile) -> Iterator[PreviewHandle]:
        """Yield a preview handle that is revoked when the block exits."""
        handle = self.create_preview(file)
        try:
            yield handle
        finally:
            self.revoke_preview(handle)
