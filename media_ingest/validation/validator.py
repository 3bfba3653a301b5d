"""Cheap pre-flight checks run before any decode or network work."""

from media_ingest.ingestion.exceptions import InvalidSizeError, InvalidTypeError
from media_ingest.ingestion.models import SourceFile
from media_ingest.policy.models import MEGABYTE, Policy


class FileValidator:
    """Checks a candidate file against a policy."""

    def validate(self, file: SourceFile, policy: Policy) -> None:
        """Validate MIME type, then byte size.

        Raises:
            InvalidTypeError: if the MIME type is not allowed.
            InvalidSizeError: if the file is larger than the policy allows.
        """
        if file.mime_type not in policy.allowed_mime_types:
            allowed = ", ".join(sorted(policy.allowed_mime_types))
            raise InvalidTypeError(f"Invalid file type. Allowed types: {allowed}")

        if file.byte_length > policy.max_size_bytes:
            size_mb = file.byte_length / MEGABYTE
            raise InvalidSizeError(
                f"File size exceeds {policy.max_size_mb:g}MB limit. "
                f"Current size: {size_mb:.2f}MB"
            )
