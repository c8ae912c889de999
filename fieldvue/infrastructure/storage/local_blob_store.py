"""
Filesystem blob store.

Objects live under ``{storage_dir}/public/<key>`` or ``{storage_dir}/private/<key>``
and are addressed by ``local://public/<key>`` / ``local://private/<key>`` URIs.
The public tree is served by the app under /files, so a public object is also
reachable at ``{public_base_url}/<key>``.
"""

# Standard library imports
import asyncio
import logging
import mimetypes
from pathlib import Path
from typing import Optional, Tuple
from urllib.parse import quote, unquote

# Local application imports
from ...core.config import get_settings
from ...core.exceptions import StorageError
from ...domain.gateways.blob_store import BlobStore, StoredBlob

logger = logging.getLogger(__name__)

URI_SCHEME = "local://"
PUBLIC = "public"
PRIVATE = "private"

mimetypes.add_type("image/webp", ".webp")

class LocalBlobStore(BlobStore):
    """BlobStore backed by a local directory"""

    def __init__(self, root_dir: Optional[str] = None, public_base_url: Optional[str] = None) -> None:
        settings = get_settings()
        self.root = Path(root_dir or settings.storage_dir).resolve()
        self.public_base_url = (public_base_url or settings.public_base_url).rstrip("/")

    @property
    def public_dir(self) -> Path:
        return self.root / PUBLIC

    def ensure_dirs(self) -> None:
        (self.root / PUBLIC).mkdir(parents=True, exist_ok=True)
        (self.root / PRIVATE).mkdir(parents=True, exist_ok=True)

    def owns(self, url: str) -> bool:
        if not url:
            return False
        return url.startswith(URI_SCHEME) or url.startswith(self.public_base_url + "/")

    async def save(
        self,
        data: bytes,
        key: str,
        content_type: Optional[str] = None,
        make_public: bool = False,
    ) -> StoredBlob:
        """
        Write bytes under a key

        Args:
            data: Object contents
            key: Slash-separated destination key (no leading slash, no "..")
            content_type: Unused on disk; the type is derived from the key's extension on read
            make_public: Store under the public tree and return a public URL

        Returns:
            StoredBlob with the local:// URI and, for public objects, the public URL
        """
        visibility = PUBLIC if make_public else PRIVATE
        path = self._path_for(visibility, key)
        try:
            await asyncio.to_thread(self._write, path, data)
        except OSError as e:
            raise StorageError(f"Failed to store {key}: {e}", details={"key": key}) from e

        logger.info(f"Stored {len(data)} bytes at {visibility}/{key}")
        public_url = f"{self.public_base_url}/{quote(key)}" if make_public else None
        return StoredBlob(uri=f"{URI_SCHEME}{visibility}/{key}", public_url=public_url)

    async def read(self, uri: str) -> Tuple[bytes, Optional[str]]:
        path = self._resolve(uri)
        try:
            data = await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError as e:
            raise StorageError(f"Object not found: {uri}", details={"uri": uri}) from e
        except OSError as e:
            raise StorageError(f"Failed to read {uri}: {e}", details={"uri": uri}) from e
        content_type, _ = mimetypes.guess_type(path.name)
        return data, content_type

    async def delete(self, uri: str) -> bool:
        path = self._resolve(uri)
        try:
            existed = path.exists()
            await asyncio.to_thread(path.unlink, True)
        except OSError as e:
            raise StorageError(f"Failed to delete {uri}: {e}", details={"uri": uri}) from e
        return existed

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(path.name + ".part")
        tmp_path.write_bytes(data)
        tmp_path.replace(path)

    def _resolve(self, uri: str) -> Path:
        """Map a local:// URI or a public URL to a path inside the store"""
        if uri.startswith(URI_SCHEME):
            visibility, _, key = uri[len(URI_SCHEME):].partition("/")
            if visibility not in (PUBLIC, PRIVATE):
                raise StorageError(f"Unknown storage area in {uri}")
            return self._path_for(visibility, key)
        if uri.startswith(self.public_base_url + "/"):
            return self._path_for(PUBLIC, unquote(uri[len(self.public_base_url) + 1:]))
        raise StorageError(f"Not a local storage URI: {uri}")

    def _path_for(self, visibility: str, key: str) -> Path:
        if not key or key.startswith("/"):
            raise StorageError(f"Invalid storage key: {key!r}")
        base = (self.root / visibility).resolve()
        path = (base / key).resolve()
        if path == base or base not in path.parents:
            raise StorageError(f"Storage key escapes the store: {key!r}")
        return path
