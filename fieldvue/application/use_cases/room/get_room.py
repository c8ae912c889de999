# Local application imports
from ....domain.repositories.job_repository import JobRepository
from ....domain.repositories.room_repository import RoomRepository
from ...dto.room_dto import RoomResponse
from ...dto.user_dto import UserResponse
from .room_access import load_accessible_room


class GetRoomUseCase:
    """Read a room with its current aggregate"""

    def __init__(self, job_repository: JobRepository, room_repository: RoomRepository) -> None:
        self.job_repository = job_repository
        self.room_repository = room_repository

    async def execute(self, room_id: str, current_user: UserResponse) -> RoomResponse:
        room, _ = await load_accessible_room(self.room_repository, self.job_repository, room_id, current_user)
        return RoomResponse.from_domain(room)
