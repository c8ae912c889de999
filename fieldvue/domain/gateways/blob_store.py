from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class StoredBlob:
    """Where a saved object lives; ``public_url`` is set only for public objects."""
    uri: str
    public_url: Optional[str] = None


class BlobStore(ABC):
    """Gateway interface for object storage"""

    @abstractmethod
    async def save(
        self,
        data: bytes,
        key: str,
        content_type: Optional[str] = None,
        make_public: bool = False,
    ) -> StoredBlob:
        """Store bytes under a key"""
        pass

    @abstractmethod
    async def read(self, uri: str) -> Tuple[bytes, Optional[str]]:
        """Read an object back as (bytes, content type)"""
        pass

    @abstractmethod
    async def delete(self, uri: str) -> bool:
        """Delete an object; True when it existed"""
        pass

    @abstractmethod
    def owns(self, url: str) -> bool:
        """Whether a URI or public URL refers to an object in this store"""
        pass
