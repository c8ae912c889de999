# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.job_dto import (
    JobCreateRequest,
    JobListResponse,
    JobResponse,
    JobStatusUpdateRequest,
    JobUpdateRequest,
)
from ...application.dto.room_dto import RoomCreateRequest, RoomListResponse, RoomResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.job import (
    CreateJobUseCase,
    GetJobUseCase,
    ListJobsUseCase,
    UpdateJobStatusUseCase,
    UpdateJobUseCase,
)
from ...application.use_cases.room import CreateRoomUseCase, ListRoomsUseCase
from ...di.container import get_container
from .dependencies import get_current_user, to_http_exception


router = APIRouter(tags=["jobs"])


@router.get("", response_model=JobListResponse)
async def list_jobs(current_user: UserResponse = Depends(get_current_user)) -> JobListResponse:
    """
    List jobs visible to the current user, newest first

    Admins see every job, contractors the jobs assigned to them and
    customers the jobs they own.
    """
    container = get_container()
    list_jobs_use_case = container.get(ListJobsUseCase)
    return await list_jobs_use_case.execute(current_user)


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    request: JobCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> JobResponse:
    container = get_container()
    create_job_use_case = container.get(CreateJobUseCase)

    try:
        return await create_job_use_case.execute(request, current_user)
    except (ValueError, PermissionError, LookupError) as exception:
        raise to_http_exception(exception)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> JobResponse:
    """
    Get a job by ID

    Args:
        job_id: ID of the job
        current_user: Current authenticated user (from dependency)

    Returns:
        JobResponse with job information
    """
    container = get_container()
    get_job_use_case = container.get(GetJobUseCase)

    try:
        return await get_job_use_case.execute(job_id, current_user)
    except (ValueError, PermissionError, LookupError) as exception:
        raise to_http_exception(exception)


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: str,
    request: JobUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> JobResponse:
    container = get_container()
    update_job_use_case = container.get(UpdateJobUseCase)

    try:
        return await update_job_use_case.execute(job_id, request, current_user)
    except (ValueError, PermissionError, LookupError) as exception:
        raise to_http_exception(exception)


@router.patch("/{job_id}/status", response_model=JobResponse)
async def update_job_status(
    job_id: str,
    request: JobStatusUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> JobResponse:
    container = get_container()
    update_status_use_case = container.get(UpdateJobStatusUseCase)

    try:
        return await update_status_use_case.execute(job_id, request.status, current_user)
    except (ValueError, PermissionError, LookupError) as exception:
        raise to_http_exception(exception)


@router.post("/{job_id}/rooms", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def create_room(
    job_id: str,
    request: RoomCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> RoomResponse:
    container = get_container()
    create_room_use_case = container.get(CreateRoomUseCase)

    try:
        return await create_room_use_case.execute(job_id, request, current_user)
    except (ValueError, PermissionError, LookupError) as exception:
        raise to_http_exception(exception)


@router.get("/{job_id}/rooms", response_model=RoomListResponse)
async def list_rooms(
    job_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> RoomListResponse:
    container = get_container()
    list_rooms_use_case = container.get(ListRoomsUseCase)

    try:
        return await list_rooms_use_case.execute(job_id, current_user)
    except (ValueError, PermissionError, LookupError) as exception:
        raise to_http_exception(exception)
