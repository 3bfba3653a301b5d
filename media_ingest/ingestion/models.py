import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FailureKind(str, Enum):
    """Discoverable reason an upload did not complete."""

    INVALID_TYPE = "invalid_type"
    INVALID_SIZE = "invalid_size"
    DECODE_ERROR = "decode_error"
    ENCODE_ERROR = "encode_error"
    SERVER_ERROR = "server_error"


@dataclass(frozen=True)
class SourceFile:
    """Raw user-selected bytes with their declared MIME type.

    Never persisted; consumed once by the transcoder.
    """

    data: bytes
    mime_type: str
    filename: str = "upload"

    @property
    def byte_length(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, path: Path, mime_type: str | None = None) -> "SourceFile":
        """Read a local file, guessing its MIME type from the extension if not given."""
        if mime_type is None:
            guessed, _ = mimetypes.guess_type(path.name)
            mime_type = guessed or "application/octet-stream"
        return cls(data=path.read_bytes(), mime_type=mime_type, filename=path.name)


@dataclass(frozen=True)
class TranscodedAsset:
    """Upload-ready blob produced by the transcoder."""

    blob: bytes
    width: int
    height: int
    mime_type: str


@dataclass(frozen=True)
class UploadSuccess:
    url: str

    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class UploadFailure:
    kind: FailureKind
    message: str

    ok: bool = field(default=False, init=False)


UploadOutcome = UploadSuccess | UploadFailure


@dataclass(frozen=True)
class BatchFailure:
    """First failure in a batch; `index` is 0-based in submission order."""

    index: int
    kind: FailureKind
    message: str

    @property
    def position(self) -> int:
        """1-based position for user-facing messages."""
        return self.index + 1


@dataclass(frozen=True)
class BatchOutcome:
    """Partial-success result of a sequential batch upload.

    `succeeded_urls` holds every item before `failure.index`, in order.
    Items after the failure were never attempted.
    """

    succeeded_urls: list[str] = field(default_factory=list)
    failure: BatchFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def succeeded_count(self) -> int:
        return len(self.succeeded_urls)

    @property
    def attempted(self) -> int:
        return self.succeeded_count + (0 if self.failure is None else 1)

    def summary(self, total: int) -> str:
        text = f"{self.succeeded_count} of {total} uploaded"
        if self.failure is not None:
            text += (
                f"; item {self.failure.position} failed "
                f"({self.failure.kind.value}): {self.failure.message}"
            )
        return text


@dataclass(frozen=True)
class DeleteOutcome:
    image_id: str
    failure: UploadFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
