from abc import ABC, abstractmethod
from typing import Tuple


class ImageFetcher(ABC):
    """Gateway interface for loading a room image by URL"""

    @abstractmethod
    async def fetch(self, url: str) -> Tuple[bytes, str]:
        """
        Load image bytes and MIME type.

        Raises:
            ImageFetchError: If the image cannot be loaded
        """
        pass
