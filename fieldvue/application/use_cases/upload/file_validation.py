# Standard library imports
from io import BytesIO
from pathlib import PurePosixPath

# External package imports
from PIL import Image, UnidentifiedImageError

# Local application imports
from ....domain.constants import ALLOWED_IMAGE_EXTENSIONS
from ...dto.upload_dto import UploadedFile

_PIL_FORMAT_MIME = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
}


class FileTooLargeError(ValueError):
    """Raised when an upload exceeds the configured size limit"""
    pass


def check_size(file: UploadedFile, max_bytes: int) -> None:
    if not file.data:
        raise ValueError("File is empty")
    if len(file.data) > max_bytes:
        raise FileTooLargeError(f"File too large. Max {max_bytes // (1024 * 1024)} MB.")


def validate_image(file: UploadedFile, max_bytes: int) -> str:
    """
    Check an uploaded image and return its MIME type.

    The extension must be an allowed image extension and Pillow must be able
    to identify the bytes as JPEG, PNG or WebP; the MIME type is taken from
    the decoded format, not from the client's header.

    Raises:
        FileTooLargeError: If the file exceeds max_bytes
        ValueError: If the file is empty, has a disallowed extension or is not a readable image
    """
    check_size(file, max_bytes)

    extension = PurePosixPath(file.filename or "").suffix.lower()
    if extension not in ALLOWED_IMAGE_EXTENSIONS:
        allowed = ", ".join(sorted(ext.lstrip(".") for ext in ALLOWED_IMAGE_EXTENSIONS))
        raise ValueError(f"Invalid image file. Use: {allowed}")

    try:
        with Image.open(BytesIO(file.data)) as image:
            image_format = image.format
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ValueError(f"File {file.filename} is not a readable image") from e

    mime_type = _PIL_FORMAT_MIME.get(image_format or "")
    if mime_type is None:
        raise ValueError(f"Unsupported image format: {image_format}")
    return mime_type
