# Standard library imports
import logging
import math
from typing import Optional

# Local application imports
from ....domain.constants.enums import SceneType
from ....domain.gateways.detection_client import DetectionClient
from ...dto.detection_dto import ObjectDetectionResponse
from ...dto.upload_dto import UploadedFile
from ..upload.file_validation import validate_image

logger = logging.getLogger(__name__)


class DetectObjectsUseCase:
    """
    Run the vision detector on a single uploaded image.

    The raw analysis is returned as-is; nothing is stored or aggregated.
    """

    def __init__(self, detection_client: DetectionClient, max_bytes: int) -> None:
        self.detection_client = detection_client
        self.max_bytes = max_bytes

    async def execute(
        self,
        image: Optional[UploadedFile],
        scene_type: Optional[str],
        zoom: float = 1.0,
    ) -> ObjectDetectionResponse:
        """
        Raises:
            ValueError: Missing image, bad scene type, bad zoom or unreadable image
            DetectionServiceError / MalformedDetectionError: Detector failures
        """
        if image is None:
            raise ValueError("Image is required")
        try:
            scene = SceneType((scene_type or "").strip().lower())
        except ValueError:
            raise ValueError("Type must be 'interior' or 'exterior'")
        if not math.isfinite(zoom) or zoom <= 0:
            raise ValueError("Zoom must be a positive number")

        mime_type = validate_image(image, self.max_bytes)
        analysis = await self.detection_client.detect(image.data, mime_type, scene, zoom=zoom)
        logger.info(f"Object detection on {image.filename} ({scene.value}, zoom {zoom:g}) succeeded")
        return ObjectDetectionResponse(type=scene, analysis=analysis)
