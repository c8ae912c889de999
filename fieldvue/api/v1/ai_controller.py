# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status

# Local application imports
from ...application.dto.detection_dto import ObjectDetectionResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.detection import DetectObjectsUseCase
from ...core.exceptions import ExternalServiceError
from ...di.container import get_container
from .dependencies import get_current_user, read_upload, to_http_exception


router = APIRouter(tags=["ai"])

logger = logging.getLogger(__name__)


@router.post("/object-detection", response_model=ObjectDetectionResponse)
async def detect_objects(
    image: Optional[UploadFile] = File(None),
    scene_type: Optional[str] = Query(None, alias="type", description="interior or exterior"),
    zoom: float = Query(1.0),
    current_user: UserResponse = Depends(get_current_user),
) -> ObjectDetectionResponse:
    """
    Run object detection on one image and return the raw analysis

    Nothing is stored; use /rooms/{room_id}/images for room measurements.
    """
    container = get_container()
    detect_use_case = container.get(DetectObjectsUseCase)

    upload = await read_upload(image)
    try:
        return await detect_use_case.execute(upload, scene_type, zoom=zoom)
    except ValueError as exception:
        raise to_http_exception(exception)
    except ExternalServiceError as exception:
        logger.error(f"Object detection failed for user {current_user.id}: {exception.message}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=exception.user_message,
        )
