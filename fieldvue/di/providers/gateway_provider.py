"""Gateway provider: blob store, vision detection client and image fetcher."""
import logging
from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.gateways.blob_store import BlobStore
from ...domain.gateways.detection_client import DetectionClient
from ...domain.gateways.image_fetcher import ImageFetcher
from ...infrastructure.storage.local_blob_store import LocalBlobStore
from ...infrastructure.storage.image_fetcher import BlobImageFetcher
from ...infrastructure.external.gemini_detection_client import GeminiDetectionClient
from ...infrastructure.external.http_detection_client import HttpDetectionClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class GatewayProvider:
    """Registers the external-system gateways as singletons"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()

        blob_store = LocalBlobStore()
        blob_store.ensure_dirs()
        container.register_singleton(BlobStore, blob_store)
        container.register_singleton(ImageFetcher, BlobImageFetcher(blob_store=blob_store))

        if settings.detection_backend == "http":
            detection_client: DetectionClient = HttpDetectionClient()
        elif settings.detection_backend == "gemini":
            detection_client = GeminiDetectionClient()
        else:
            raise ValueError(f"Unknown DETECTION_BACKEND: {settings.detection_backend}")
        container.register_singleton(DetectionClient, detection_client)

        logger.info(f"Registered gateways (detection backend: {settings.detection_backend})")
