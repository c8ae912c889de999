"""
Unit tests for the local blob store and the image fetcher.
"""

import httpx
import pytest

from fieldvue.core.exceptions import ImageFetchError, StorageError
from fieldvue.infrastructure.storage.image_fetcher import BlobImageFetcher
from fieldvue.infrastructure.storage.local_blob_store import LocalBlobStore

BASE_URL = "http://testserver/files"


@pytest.fixture
def store(tmp_path):
    blob_store = LocalBlobStore(root_dir=str(tmp_path), public_base_url=BASE_URL)
    blob_store.ensure_dirs()
    return blob_store


class TestLocalBlobStore:
    @pytest.mark.asyncio
    async def test_public_save_read_delete(self, store):
        stored = await store.save(b"png-bytes", "uploads/u/no-job/no-room/1-a.png", make_public=True)

        assert stored.uri == "local://public/uploads/u/no-job/no-room/1-a.png"
        assert stored.public_url == f"{BASE_URL}/uploads/u/no-job/no-room/1-a.png"
        assert (store.public_dir / "uploads/u/no-job/no-room/1-a.png").read_bytes() == b"png-bytes"

        data, content_type = await store.read(stored.public_url)
        assert data == b"png-bytes"
        assert content_type == "image/png"

        assert await store.delete(stored.uri) is True
        assert await store.delete(stored.uri) is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("extension, expected", [("jpg", "image/jpeg"), ("webp", "image/webp")])
    async def test_read_type_follows_extension(self, store, extension, expected):
        stored = await store.save(b"bytes", f"uploads/u/no-job/no-room/1-a.{extension}", make_public=True)
        _, content_type = await store.read(stored.uri)
        assert content_type == expected

    @pytest.mark.asyncio
    async def test_private_has_no_public_url(self, store):
        stored = await store.save(b"x", "uploads/u/doc.pdf")
        assert stored.public_url is None
        assert stored.uri.startswith("local://private/")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", ["../outside.png", "/abs.png", "a/../../b.png", ""])
    async def test_rejects_escaping_keys(self, store, key):
        with pytest.raises(StorageError):
            await store.save(b"x", key)

    @pytest.mark.asyncio
    async def test_read_missing(self, store):
        with pytest.raises(StorageError):
            await store.read("local://public/nope.png")

    def test_owns(self, store):
        assert store.owns("local://public/a.png")
        assert store.owns(f"{BASE_URL}/a.png")
        assert not store.owns("https://cdn.example.com/a.png")
        assert not store.owns("")


class TestBlobImageFetcher:
    @pytest.mark.asyncio
    async def test_reads_owned_urls_from_store(self, store):
        stored = await store.save(b"jpeg", "k/a.jpg", make_public=True)
        data, mime = await BlobImageFetcher(store).fetch(stored.public_url)
        assert data == b"jpeg"
        assert mime == "image/jpeg"

    @pytest.mark.asyncio
    async def test_missing_owned_image_not_retryable(self, store):
        with pytest.raises(ImageFetchError) as exc_info:
            await BlobImageFetcher(store).fetch(f"{BASE_URL}/missing.jpg")
        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_gs_uri_rejected(self, store):
        with pytest.raises(ImageFetchError) as exc_info:
            await BlobImageFetcher(store).fetch("gs://bucket/a.jpg")
        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_http_download(self, store):
        def handler(request):
            return httpx.Response(200, content=b"remote", headers={"content-type": "image/webp; q=1"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            data, mime = await BlobImageFetcher(store, http_client=client).fetch("https://cdn.example.com/a.webp")
        assert data == b"remote"
        assert mime == "image/webp"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status, retryable", [(503, True), (429, True), (404, False)])
    async def test_http_errors(self, store, status, retryable):
        async with httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(status))) as client:
            with pytest.raises(ImageFetchError) as exc_info:
                await BlobImageFetcher(store, http_client=client).fetch("https://cdn.example.com/a.jpg")
        assert exc_info.value.retryable is retryable
