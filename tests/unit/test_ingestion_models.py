from pathlib import Path

from media_ingest.ingestion.models import (
    BatchFailure,
    BatchOutcome,
    DeleteOutcome,
    FailureKind,
    SourceFile,
    UploadFailure,
)


class TestSourceFile:
    def test_byte_length(self) -> None:
        assert SourceFile(data=b"12345", mime_type="image/png").byte_length == 5

    def test_from_path_guesses_mime_type(self, tmp_path: Path) -> None:
        path = tmp_path / "photo.jpg"
        path.write_bytes(b"abc")

        file = SourceFile.from_path(path)

        assert file.mime_type == "image/jpeg"
        assert file.filename == "photo.jpg"
        assert file.data == b"abc"

    def test_from_path_uses_explicit_mime_type(self, tmp_path: Path) -> None:
        path = tmp_path / "blob"
        path.write_bytes(b"abc")
        assert SourceFile.from_path(path, mime_type="image/webp").mime_type == "image/webp"

    def test_from_path_unknown_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "mystery.zzz"
        path.write_bytes(b"abc")
        assert SourceFile.from_path(path).mime_type == "application/octet-stream"


class TestBatchOutcome:
    def test_success_summary(self) -> None:
        outcome = BatchOutcome(succeeded_urls=["/a", "/b"])
        assert outcome.ok
        assert outcome.attempted == 2
        assert outcome.summary(2) == "2 of 2 uploaded"

    def test_failure_summary(self) -> None:
        outcome = BatchOutcome(
            succeeded_urls=["/a", "/b", "/c"],
            failure=BatchFailure(
                index=3,
                kind=FailureKind.INVALID_SIZE,
                message="File size exceeds 3MB limit. Current size: 4.00MB",
            ),
        )
        assert not outcome.ok
        assert outcome.attempted == 4
        assert outcome.summary(5) == (
            "3 of 5 uploaded; item 4 failed (invalid_size): "
            "File size exceeds 3MB limit. Current size: 4.00MB"
        )


class TestDeleteOutcome:
    def test_ok_without_failure(self) -> None:
        assert DeleteOutcome(image_id="x").ok

    def test_not_ok_with_failure(self) -> None:
        failure = UploadFailure(kind=FailureKind.SERVER_ERROR, message="down")
        assert not DeleteOutcome(image_id="x", failure=failure).ok
