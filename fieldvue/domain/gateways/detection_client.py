from abc import ABC, abstractmethod
from typing import Any, Dict

from ..constants.enums import SceneType


class DetectionClient(ABC):
    """Gateway interface for the external vision detection model"""

    @abstractmethod
    async def detect(
        self,
        image_bytes: bytes,
        mime_type: str,
        scene_type: SceneType,
        zoom: float = 1.0,
    ) -> Dict[str, Any]:
        """
        Run object detection on one image.

        Returns:
            The decoded JSON payload

        Raises:
            DetectionServiceError: Transport failures and non-2xx answers
            MalformedDetectionError: Answers that are not a usable JSON object
        """
        pass
