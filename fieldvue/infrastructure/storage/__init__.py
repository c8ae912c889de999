from .local_blob_store import LocalBlobStore
from .image_fetcher import BlobImageFetcher

__all__ = ["LocalBlobStore", "BlobImageFetcher"]
