# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.gateways.blob_store import BlobStore
from ....domain.repositories.job_repository import JobRepository
from ....domain.repositories.room_repository import RoomRepository
from ...dto.room_dto import RoomImagesUploadResponse, RoomResponse
from ...dto.upload_dto import UploadedFile
from ...dto.user_dto import UserResponse
from ...services.analysis_queue import AnalysisQueue
from ..room.room_access import load_accessible_room
from .file_validation import validate_image
from .upload_keys import build_upload_key

logger = logging.getLogger(__name__)


class UploadRoomImagesUseCase:
    """
    Store images for a room and queue their analysis.

    Returns as soon as the images are stored and attached to the room;
    detection and aggregation run on the analysis queue.
    """

    def __init__(
        self,
        job_repository: JobRepository,
        room_repository: RoomRepository,
        blob_store: BlobStore,
        analysis_queue: AnalysisQueue,
        max_bytes: int,
    ) -> None:
        self.job_repository = job_repository
        self.room_repository = room_repository
        self.blob_store = blob_store
        self.analysis_queue = analysis_queue
        self.max_bytes = max_bytes

    async def execute(
        self,
        room_id: str,
        files: List[UploadedFile],
        current_user: UserResponse,
    ) -> RoomImagesUploadResponse:
        """
        Raises:
            ValueError: If no files are given or a file is not a valid image
            FileTooLargeError: If a file exceeds the size limit
            LookupError / PermissionError: Room or job access failures
        """
        if not files:
            raise ValueError("At least one image is required")

        room, job = await load_accessible_room(self.room_repository, self.job_repository, room_id, current_user)

        # Validate everything before storing anything
        mime_types = [validate_image(file, self.max_bytes) for file in files]

        uploaded: List[str] = []
        for file, mime_type in zip(files, mime_types):
            key = build_upload_key(
                current_user.id, file.filename, job_id=job.id, room_id=room_id, content_type=mime_type
            )
            stored = await self.blob_store.save(file.data, key, content_type=mime_type, make_public=True)
            uploaded.append(stored.public_url or stored.uri)

        updated = await self.room_repository.add_image_urls(room_id, uploaded)
        if updated is None:
            raise LookupError("Room not found")

        queued = self.analysis_queue.submit(room_id, uploaded, updated.room_type)
        logger.info(
            f"Stored {len(uploaded)} image(s) for room {room_id}; analysis {'queued' if queued else 'not queued'}"
        )
        return RoomImagesUploadResponse(
            room=RoomResponse.from_domain(updated),
            uploaded=uploaded,
            analysis_queued=queued,
        )
