from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse, MessageResponse
from .user_dto import UserResponse
from .customer_dto import CustomerCreateRequest, CustomerResponse, CustomerListResponse
from .job_dto import (
    JobCreateRequest,
    JobUpdateRequest,
    JobStatusUpdateRequest,
    JobResponse,
    JobListResponse,
)
from .room_dto import (
    RoomCreateRequest,
    RoomImageDeleteRequest,
    RoomResponse,
    RoomListResponse,
    RoomAggregateResponse,
    RoomImageResponse,
    RoomImageListResponse,
    RoomImagesUploadResponse,
    AnalysisRequestResponse,
)
from .upload_dto import UploadedFile, UploadResponse
from .detection_dto import ObjectDetectionResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "MessageResponse",
    "UserResponse",
    "CustomerCreateRequest",
    "CustomerResponse",
    "CustomerListResponse",
    "JobCreateRequest",
    "JobUpdateRequest",
    "JobStatusUpdateRequest",
    "JobResponse",
    "JobListResponse",
    "RoomCreateRequest",
    "RoomImageDeleteRequest",
    "RoomResponse",
    "RoomListResponse",
    "RoomAggregateResponse",
    "RoomImageResponse",
    "RoomImageListResponse",
    "RoomImagesUploadResponse",
    "AnalysisRequestResponse",
    "UploadedFile",
    "UploadResponse",
    "ObjectDetectionResponse",
]
