from abc import ABC, abstractmethod
from dataclasses import dataclass

from media_ingest.ingestion.models import SourceFile, TranscodedAsset
from media_ingest.policy.models import AssetClass, Policy


@dataclass(slots=True)
class UploadContext:
    file: SourceFile
    asset_class: AssetClass
    owner_email: str
    policy: Policy | None = None
    asset: TranscodedAsset | None = None
    url: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: UploadContext) -> UploadContext:
        raise NotImplementedError
