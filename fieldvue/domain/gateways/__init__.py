from .blob_store import BlobStore, StoredBlob
from .detection_client import DetectionClient
from .image_fetcher import ImageFetcher

__all__ = ["BlobStore", "StoredBlob", "DetectionClient", "ImageFetcher"]
