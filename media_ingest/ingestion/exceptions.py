from typing import ClassVar

from media_ingest.ingestion.models import FailureKind


class IngestionError(Exception):
    """Base exception for all ingestion failures; carries a discoverable kind."""

    kind: ClassVar[FailureKind]


class InvalidTypeError(IngestionError):
    """Raised when a file's MIME type is not allowed by the policy."""

    kind = FailureKind.INVALID_TYPE


class InvalidSizeError(IngestionError):
    """Raised when a file exceeds the policy's byte limit."""

    kind = FailureKind.INVALID_SIZE


class DecodeError(IngestionError):
    """Raised when the bytes cannot be decoded as an image."""

    kind = FailureKind.DECODE_ERROR


class EncodeError(IngestionError):
    """Raised when re-encoding a decoded image produces no output."""

    kind = FailureKind.ENCODE_ERROR


class StorageServerError(IngestionError):
    """Raised when the Storage API rejects the request or cannot be reached."""

    kind = FailureKind.SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
