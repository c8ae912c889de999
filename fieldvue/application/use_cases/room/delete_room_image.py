# Standard library imports
import logging

# Local application imports
from ....core.exceptions import FieldVueError, StorageError
from ....domain.gateways.blob_store import BlobStore
from ....domain.repositories.job_repository import JobRepository
from ....domain.repositories.measurement_repository import MeasurementRepository
from ....domain.repositories.room_repository import RoomRepository
from ...dto.room_dto import RoomResponse
from ...dto.user_dto import UserResponse
from ...services.room_analysis_service import RoomAnalysisService
from .room_access import load_accessible_room

logger = logging.getLogger(__name__)


class DeleteRoomImageUseCase:
    """
    Remove an image from a room.

    The image's measurement is deleted and the aggregate recomputed from the
    remaining images, so no counts from the removed image survive.
    """

    def __init__(
        self,
        job_repository: JobRepository,
        room_repository: RoomRepository,
        measurement_repository: MeasurementRepository,
        blob_store: BlobStore,
        analysis_service: RoomAnalysisService,
    ) -> None:
        self.job_repository = job_repository
        self.room_repository = room_repository
        self.measurement_repository = measurement_repository
        self.blob_store = blob_store
        self.analysis_service = analysis_service

    async def execute(self, room_id: str, image_url: str, current_user: UserResponse) -> RoomResponse:
        """
        Raises:
            LookupError: If the room, its job or the image does not exist
            PermissionError: If the user has no access to the job
        """
        room, _ = await load_accessible_room(self.room_repository, self.job_repository, room_id, current_user)
        if image_url not in room.image_urls:
            raise LookupError("Image not found in room")

        updated = await self.room_repository.remove_image_url(room_id, image_url)
        if updated is None:
            raise LookupError("Room not found")
        await self.measurement_repository.delete(room_id, image_url)

        if self.blob_store.owns(image_url):
            try:
                await self.blob_store.delete(image_url)
            except StorageError as e:
                logger.warning(f"Could not delete stored image {image_url}: {e.message}")

        try:
            aggregate = await self.analysis_service.reaggregate(room_id)
        except FieldVueError as e:
            logger.error(f"Re-aggregation after image delete failed for room {room_id}: {e}", exc_info=True)
        else:
            updated.aggregate = aggregate

        logger.info(f"Removed image {image_url} from room {room_id}")
        return RoomResponse.from_domain(updated)
