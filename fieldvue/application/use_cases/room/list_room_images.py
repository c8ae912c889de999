# Local application imports
from ....domain.repositories.job_repository import JobRepository
from ....domain.repositories.measurement_repository import MeasurementRepository
from ....domain.repositories.room_repository import RoomRepository
from ...dto.room_dto import RoomImageListResponse, RoomImageResponse
from ...dto.user_dto import UserResponse
from .room_access import load_accessible_room


class ListRoomImagesUseCase:
    """Per-image measurements of a room, in the room's image order"""

    def __init__(
        self,
        job_repository: JobRepository,
        room_repository: RoomRepository,
        measurement_repository: MeasurementRepository,
    ) -> None:
        self.job_repository = job_repository
        self.room_repository = room_repository
        self.measurement_repository = measurement_repository

    async def execute(self, room_id: str, current_user: UserResponse) -> RoomImageListResponse:
        room, _ = await load_accessible_room(self.room_repository, self.job_repository, room_id, current_user)
        by_url = {m.image_url: m for m in await self.measurement_repository.find_by_room(room_id)}
        return RoomImageListResponse(
            room_id=room_id,
            images=[RoomImageResponse.from_domain(url, by_url.get(url)) for url in room.image_urls],
        )
