from collections.abc import Sequence

from media_ingest.codec.factory import ImageCodecFactory
from media_ingest.config.settings import Settings
from media_ingest.ingestion.exceptions import IngestionError
from media_ingest.ingestion.models import (
    BatchFailure,
    BatchOutcome,
    DeleteOutcome,
    FailureKind,
    SourceFile,
    UploadFailure,
    UploadOutcome,
    UploadSuccess,
)
from media_ingest.ingestion.pipeline import PipelineStep, UploadContext
from media_ingest.ingestion.steps import (
    ResolvePolicyStep,
    TranscodeStep,
    UploadStep,
    ValidateStep,
)
from media_ingest.logging.logger import Log
from media_ingest.policy.models import AssetClass
from media_ingest.storage.client_base import BaseStorageClient
from media_ingest.storage.factory import StorageClientFactory
from media_ingest.transcoding.transcoder import ImageTranscoder
from media_ingest.validation.validator import FileValidator


class UploadOrchestrator:
    """Runs validate -> transcode -> upload for single files and gallery batches.

    Every IngestionError is converted into a typed outcome at this boundary;
    anything else is a programming error and propagates.
    """

    def __init__(
        self,
        validator: FileValidator,
        transcoder: ImageTranscoder,
        storage_client: BaseStorageClient,
    ) -> None:
        self._storage_client = storage_client
        self._steps: list[PipelineStep] = [
            ResolvePolicyStep(),
            ValidateStep(validator),
            TranscodeStep(transcoder),
            UploadStep(storage_client),
        ]

    def upload_single(
        self,
        file: SourceFile,
        asset_class: AssetClass,
        owner_email: str,
    ) -> UploadOutcome:
        """Validate, transcode and upload one file."""
        context = UploadContext(file=file, asset_class=asset_class, owner_email=owner_email)
        try:
            for step in self._steps:
                context = step.run(context)
        except IngestionError as exc:
            self._log_failure(file, asset_class, exc)
            return UploadFailure(kind=exc.kind, message=str(exc))
        return UploadSuccess(url=context.url)

    def upload_batch(
        self,
        files: Sequence[SourceFile],
        asset_class: AssetClass,
        owner_email: str,
    ) -> BatchOutcome:
        """Upload files strictly one after another, stopping at the first failure.

        Sequential on purpose: at most one decoded image is held in memory.
        Items after the first failure are never attempted.
        """
        succeeded: list[str] = []
        for index, file in enumerate(files):
            outcome = self.upload_single(file, asset_class, owner_email)
            if isinstance(outcome, UploadFailure):
                Log.warning(
                    f"Batch stopped at item {index + 1} of {len(files)}: "
                    f"{len(succeeded)} uploaded before {outcome.kind.value}"
                )
                return BatchOutcome(
                    succeeded_urls=succeeded,
                    failure=BatchFailure(
                        index=index, kind=outcome.kind, message=outcome.message
                    ),
                )
            succeeded.append(outcome.url)

        Log.info(f"Batch complete: {len(succeeded)} of {len(files)} uploaded")
        return BatchOutcome(succeeded_urls=succeeded)

    def upload_profile_photo(self, file: SourceFile, owner_email: str) -> UploadOutcome:
        return self.upload_single(file, AssetClass.PROFILE_PHOTO, owner_email)

    def upload_vendor_logo(self, file: SourceFile, owner_email: str) -> UploadOutcome:
        return self.upload_single(file, AssetClass.VENDOR_LOGO, owner_email)

    def upload_vendor_banner(self, file: SourceFile, owner_email: str) -> UploadOutcome:
        return self.upload_single(file, AssetClass.VENDOR_BANNER, owner_email)

    def upload_vendor_gallery_image(
        self, file: SourceFile, owner_email: str
    ) -> UploadOutcome:
        return self.upload_single(file, AssetClass.VENDOR_GALLERY_IMAGE, owner_email)

    def delete_gallery_image(self, image_id: str, owner_email: str) -> DeleteOutcome:
        """Remove one image from the owner's vendor gallery."""
        try:
            self._storage_client.delete_gallery_image(image_id, owner_email=owner_email)
        except IngestionError as exc:
            Log.error(f"Failed to delete gallery image {image_id}: {exc}")
            return DeleteOutcome(
                image_id=image_id,
                failure=UploadFailure(kind=exc.kind, message=str(exc)),
            )
        Log.info(f"Deleted gallery image {image_id}")
        return DeleteOutcome(image_id=image_id)

    def close(self) -> None:
        self._storage_client.close()

    @staticmethod
    def _log_failure(file: SourceFile, asset_class: AssetClass, exc: IngestionError) -> None:
        message = (
            f"Upload of {file.filename} as {asset_class.value} failed "
            f"({exc.kind.value}): {exc}"
        )
        if exc.kind is FailureKind.SERVER_ERROR:
            Log.error(message)
        else:
            Log.warning(message)


def build_orchestrator(settings: Settings) -> UploadOrchestrator:
    """Build an UploadOrchestrator with all required adapters."""
    codec = ImageCodecFactory.create(settings)
    return UploadOrchestrator(
        validator=FileValidator(),
        transcoder=ImageTranscoder(codec),
        storage_client=StorageClientFactory.create(settings),
    )
