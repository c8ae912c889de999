# Standard library imports
import logging
from typing import Optional, Tuple

# External package imports
import httpx

# Local application imports
from ...core.exceptions import ImageFetchError, StorageError
from ...domain.gateways.blob_store import BlobStore
from ...domain.gateways.image_fetcher import ImageFetcher
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class BlobImageFetcher(ImageFetcher):
    """
    Loads room images for analysis.

    URLs that belong to the blob store are read from it directly; other
    http(s) URLs are downloaded. gs:// URIs are rejected (not retryable).
    """

    def __init__(self, blob_store: BlobStore, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self.blob_store = blob_store
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client if self._http_client is not None else get_shared_http_client()

    async def fetch(self, url: str) -> Tuple[bytes, str]:
        if not url:
            raise ImageFetchError("Image URL is empty", retryable=False)

        if self.blob_store.owns(url):
            try:
                data, content_type = await self.blob_store.read(url)
            except StorageError as e:
                raise ImageFetchError(f"Failed to read stored image {url}: {e.message}", retryable=False) from e
            return data, content_type or "image/jpeg"

        if url.startswith("gs://"):
            raise ImageFetchError(f"Detection requires an HTTP-accessible image; got {url}", retryable=False)
        if not url.startswith(("http://", "https://")):
            raise ImageFetchError(f"Unsupported image URL: {url}", retryable=False)

        try:
            response = await self.http_client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise ImageFetchError(
                f"Failed to fetch image: HTTP {status}",
                retryable=status >= 500 or status == 429,
            ) from e
        except httpx.HTTPError as e:
            raise ImageFetchError(f"Failed to fetch image {url}: {e}") from e

        content_type = response.headers.get("content-type", "image/jpeg").split(";")[0].strip()
        return response.content, content_type
