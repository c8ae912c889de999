# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import Depends, HTTPException, UploadFile, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.use_cases.auth.register_user import EmailAlreadyRegisteredError
from ...application.use_cases.upload.file_validation import FileTooLargeError
from ...application.dto.upload_dto import UploadedFile
from ...application.dto.user_dto import UserResponse
from ...di.container import get_container


security_scheme = HTTPBearer(auto_error=True)


async def get_bearer_token(
    credentials: HTTPAuthorizationCredentials = Depends(security_scheme),
) -> str:
    return credentials.credentials


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from JWT token
    
    Args:
        credentials: HTTP Bearer token credentials
        
    Returns:
        UserResponse with user information
        
    Raises:
        HTTPException: If token is invalid or user not found
    """
    token: str = credentials.credentials
    
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    
    try:
        user = await get_current_user_use_case.execute(token)
        return user
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exception)
        )


def to_http_exception(exception: Exception) -> HTTPException:
    """
    Translate a use case exception into the matching HTTP error

    FileTooLargeError → 413, EmailAlreadyRegisteredError → 409,
    other ValueError → 400, PermissionError → 403, LookupError → 404.
    """
    if isinstance(exception, FileTooLargeError):
        code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    elif isinstance(exception, EmailAlreadyRegisteredError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(exception, PermissionError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(exception, LookupError):
        code = status.HTTP_404_NOT_FOUND
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(exception))


async def read_upload(file: Optional[UploadFile]) -> Optional[UploadedFile]:
    """Read a multipart upload into memory"""
    if file is None:
        return None
    data = await file.read()
    return UploadedFile(
        filename=file.filename or "upload",
        content_type=file.content_type,
        data=data,
    )


async def read_uploads(files: List[UploadFile]) -> List[UploadedFile]:
    return [await read_upload(file) for file in files]
