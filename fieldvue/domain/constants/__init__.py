"""Constants for domain model field names and shared enumerations"""

from .user_fields import UserFields
from .customer_fields import CustomerFields
from .job_fields import JobFields
from .room_fields import RoomFields, RoomImageFields
from .enums import UserRole, JobStatus, SceneType, ConfidenceLevel
from .media_constants import ALLOWED_IMAGE_EXTENSIONS, IMAGE_MIME_EXTENSIONS, UPLOADS_KEY_PREFIX

__all__ = [
    "UserFields",
    "CustomerFields",
    "JobFields",
    "RoomFields",
    "RoomImageFields",
    "UserRole",
    "JobStatus",
    "SceneType",
    "ConfidenceLevel",
    "ALLOWED_IMAGE_EXTENSIONS",
    "IMAGE_MIME_EXTENSIONS",
    "UPLOADS_KEY_PREFIX",
]
