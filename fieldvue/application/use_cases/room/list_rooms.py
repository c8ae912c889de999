# Local application imports
from ....domain.repositories.job_repository import JobRepository
from ....domain.repositories.room_repository import RoomRepository
from ...dto.room_dto import RoomListResponse, RoomResponse
from ...dto.user_dto import UserResponse
from ..job.job_access import load_accessible_job


class ListRoomsUseCase:
    def __init__(self, job_repository: JobRepository, room_repository: RoomRepository) -> None:
        self.job_repository = job_repository
        self.room_repository = room_repository

    async def execute(self, job_id: str, current_user: UserResponse) -> RoomListResponse:
        await load_accessible_job(self.job_repository, job_id, current_user)
        rooms = await self.room_repository.find_by_job(job_id)
        return RoomListResponse(rooms=[RoomResponse.from_domain(room) for room in rooms], count=len(rooms))
