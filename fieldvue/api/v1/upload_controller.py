# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, UploadFile, status

# Local application imports
from ...application.dto.upload_dto import UploadResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.upload import UploadFileUseCase
from ...di.container import get_container
from .dependencies import get_current_user, read_upload, to_http_exception


router = APIRouter(tags=["uploads"])


@router.post("", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_file(
    file: UploadFile = File(...),
    job_id: Optional[str] = Form(None),
    room_id: Optional[str] = Form(None),
    public: bool = Form(True),
    current_user: UserResponse = Depends(get_current_user),
) -> UploadResponse:
    """
    Upload a single file to blob storage

    Returns:
        UploadResponse with the storage URI and, for public files, a URL
    """
    container = get_container()
    upload_use_case = container.get(UploadFileUseCase)

    upload = await read_upload(file)
    try:
        return await upload_use_case.execute(
            upload,
            current_user,
            job_id=job_id or None,
            room_id=room_id or None,
            make_public=public,
        )
    except (ValueError, PermissionError, LookupError) as exception:
        raise to_http_exception(exception)
