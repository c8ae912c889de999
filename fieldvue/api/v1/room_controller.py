# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, File, UploadFile, status

# Local application imports
from ...application.dto.room_dto import (
    AnalysisRequestResponse,
    RoomImageDeleteRequest,
    RoomImageListResponse,
    RoomImagesUploadResponse,
    RoomResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.room import (
    DeleteRoomImageUseCase,
    GetRoomUseCase,
    ListRoomImagesUseCase,
    ReanalyzeRoomUseCase,
)
from ...application.use_cases.upload import UploadRoomImagesUseCase
from ...di.container import get_container
from .dependencies import get_current_user, read_uploads, to_http_exception


router = APIRouter(tags=["rooms"])


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(
    room_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> RoomResponse:
    """
    Get a room with its latest aggregate

    Args:
        room_id: ID of the room
        current_user: Current authenticated user (from dependency)

    Returns:
        RoomResponse including the aggregate (None until first analysis)
    """
    container = get_container()
    get_room_use_case = container.get(GetRoomUseCase)

    try:
        return await get_room_use_case.execute(room_id, current_user)
    except (ValueError, PermissionError, LookupError) as exception:
        raise to_http_exception(exception)


@router.post(
    "/{room_id}/images",
    response_model=RoomImagesUploadResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def upload_room_images(
    room_id: str,
    files: List[UploadFile] = File(...),
    current_user: UserResponse = Depends(get_current_user),
) -> RoomImagesUploadResponse:
    """
    Upload images to a room

    Responds once the images are stored; detection and the room aggregate
    are computed in the background.
    """
    container = get_container()
    upload_use_case = container.get(UploadRoomImagesUseCase)

    uploads = await read_uploads(files)
    try:
        return await upload_use_case.execute(room_id, uploads, current_user)
    except (ValueError, PermissionError, LookupError) as exception:
        raise to_http_exception(exception)


@router.get("/{room_id}/images", response_model=RoomImageListResponse)
async def list_room_images(
    room_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> RoomImageListResponse:
    container = get_container()
    list_images_use_case = container.get(ListRoomImagesUseCase)

    try:
        return await list_images_use_case.execute(room_id, current_user)
    except (ValueError, PermissionError, LookupError) as exception:
        raise to_http_exception(exception)


@router.delete("/{room_id}/images", response_model=RoomResponse)
async def delete_room_image(
    room_id: str,
    request: RoomImageDeleteRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> RoomResponse:
    container = get_container()
    delete_image_use_case = container.get(DeleteRoomImageUseCase)

    try:
        return await delete_image_use_case.execute(room_id, request.image_url, current_user)
    except (ValueError, PermissionError, LookupError) as exception:
        raise to_http_exception(exception)


@router.post(
    "/{room_id}/analyze",
    response_model=AnalysisRequestResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def analyze_room(
    room_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> AnalysisRequestResponse:
    """Queue a fresh analysis of every image in the room"""
    container = get_container()
    reanalyze_use_case = container.get(ReanalyzeRoomUseCase)

    try:
        return await reanalyze_use_case.execute(room_id, current_user)
    except (ValueError, PermissionError, LookupError) as exception:
        raise to_http_exception(exception)
