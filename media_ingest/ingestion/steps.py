from media_ingest.ingestion.pipeline import PipelineStep, UploadContext
from media_ingest.logging.logger import Log
from media_ingest.policy.table import policy_for
from media_ingest.storage.client_base import BaseStorageClient
from media_ingest.transcoding.transcoder import ImageTranscoder
from media_ingest.validation.validator import FileValidator


class ResolvePolicyStep(PipelineStep):
    def run(self, context: UploadContext) -> UploadContext:
        context.policy = policy_for(context.asset_class)
        return context


class ValidateStep(PipelineStep):
    def __init__(self, validator: FileValidator) -> None:
        self._validator = validator

    def run(self, context: UploadContext) -> UploadContext:
        if context.policy is None:
            raise ValueError("UploadContext.policy must be set before validation")
        self._validator.validate(context.file, context.policy)
        return context


class TranscodeStep(PipelineStep):
    def __init__(self, transcoder: ImageTranscoder) -> None:
        self._transcoder = transcoder

    def run(self, context: UploadContext) -> UploadContext:
        if context.policy is None:
            raise ValueError("UploadContext.policy must be set before transcoding")
        context.asset = self._transcoder.transcode(context.file, context.policy)
        return context


class UploadStep(PipelineStep):
    def __init__(self, storage_client: BaseStorageClient) -> None:
        self._storage_client = storage_client

    def run(self, context: UploadContext) -> UploadContext:
        if context.asset is None:
            raise ValueError("UploadContext.asset must be set before upload")
        context.url = self._storage_client.upload(
            context.asset_class,
            context.asset,
            filename=context.file.filename,
            owner_email=context.owner_email,
        )
        Log.info(
            f"Uploaded {context.file.filename} as {context.asset_class.value}: {context.url}"
        )
        return context
