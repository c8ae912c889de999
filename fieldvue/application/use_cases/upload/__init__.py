from .upload_file import UploadFileUseCase
from .upload_room_images import UploadRoomImagesUseCase
from .file_validation import FileTooLargeError, validate_image, check_size
from .upload_keys import build_upload_key

__all__ = [
    "UploadFileUseCase",
    "UploadRoomImagesUseCase",
    "FileTooLargeError",
    "validate_image",
    "check_size",
    "build_upload_key",
]
