# Standard library imports
import logging

# Local application imports
from ....domain.models.room import Room
from ....domain.repositories.job_repository import JobRepository
from ....domain.repositories.room_repository import RoomRepository
from ...dto.room_dto import RoomCreateRequest, RoomResponse
from ...dto.user_dto import UserResponse
from ..job.job_access import load_accessible_job

logger = logging.getLogger(__name__)


class CreateRoomUseCase:
    """Add a room (or exterior elevation) to a job; its aggregate starts empty"""

    def __init__(self, job_repository: JobRepository, room_repository: RoomRepository) -> None:
        self.job_repository = job_repository
        self.room_repository = room_repository

    async def execute(self, job_id: str, request: RoomCreateRequest, current_user: UserResponse) -> RoomResponse:
        job = await load_accessible_job(self.job_repository, job_id, current_user)
        room = Room(id=None, job_id=job.id or job_id, name=request.name.strip(), room_type=request.room_type)
        saved = await self.room_repository.save(room)
        logger.info(f"Room {saved.id} ({saved.room_type.value}) created on job {job_id}")
        return RoomResponse.from_domain(saved)
