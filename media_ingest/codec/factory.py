from media_ingest.codec.base import BaseImageCodec
from media_ingest.codec.pillow_adapter import PillowCodecAdapter
from media_ingest.config.settings import Settings


class ImageCodecFactory:
    """Creates the correct image codec based on settings."""

    ADAPTERS: dict[str, type[BaseImageCodec]] = {
        "pillow": PillowCodecAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseImageCodec:
        name = settings.image_codec.lower()
        adapter_cls = cls.ADAPTERS.get(name)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown image codec '{name}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
