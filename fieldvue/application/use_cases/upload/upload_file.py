# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.gateways.blob_store import BlobStore
from ....domain.repositories.job_repository import JobRepository
from ...dto.upload_dto import UploadedFile, UploadResponse
from ...dto.user_dto import UserResponse
from ..job.job_access import load_accessible_job
from .file_validation import check_size
from .upload_keys import build_upload_key

logger = logging.getLogger(__name__)


class UploadFileUseCase:
    """Store a single file in the blob store, optionally filed under a job and room"""

    def __init__(self, blob_store: BlobStore, job_repository: JobRepository, max_bytes: int) -> None:
        self.blob_store = blob_store
        self.job_repository = job_repository
        self.max_bytes = max_bytes

    async def execute(
        self,
        file: UploadedFile,
        current_user: UserResponse,
        job_id: Optional[str] = None,
        room_id: Optional[str] = None,
        make_public: bool = True,
    ) -> UploadResponse:
        """
        Raises:
            FileTooLargeError: If the file exceeds the size limit
            ValueError: If the file is empty
            LookupError / PermissionError: If job_id names a job the user cannot access
        """
        check_size(file, self.max_bytes)
        if job_id:
            await load_accessible_job(self.job_repository, job_id, current_user)

        key = build_upload_key(current_user.id, file.filename, job_id=job_id, room_id=room_id)
        stored = await self.blob_store.save(
            file.data,
            key,
            content_type=file.content_type,
            make_public=make_public,
        )
        logger.info(f"User {current_user.id} uploaded {file.filename} as {key}")
        return UploadResponse(
            uri=stored.uri,
            public_url=stored.public_url,
            key=key,
            content_type=file.content_type,
            size=len(file.data),
        )
