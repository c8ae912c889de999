# Local application imports
from ....domain.repositories.job_repository import JobRepository
from ....domain.repositories.room_repository import RoomRepository
from ...dto.room_dto import AnalysisRequestResponse
from ...dto.user_dto import UserResponse
from ...services.analysis_queue import AnalysisQueue
from .room_access import load_accessible_room


class ReanalyzeRoomUseCase:
    """Queue a fresh analysis of every image currently on a room"""

    def __init__(
        self,
        job_repository: JobRepository,
        room_repository: RoomRepository,
        analysis_queue: AnalysisQueue,
    ) -> None:
        self.job_repository = job_repository
        self.room_repository = room_repository
        self.analysis_queue = analysis_queue

    async def execute(self, room_id: str, current_user: UserResponse) -> AnalysisRequestResponse:
        """
        Raises:
            ValueError: If the room has no images
        """
        room, _ = await load_accessible_room(self.room_repository, self.job_repository, room_id, current_user)
        if not room.image_urls:
            raise ValueError("Room has no images to analyze")

        queued = self.analysis_queue.submit(room_id, room.image_urls, room.room_type)
        return AnalysisRequestResponse(
            room_id=room_id,
            image_count=len(room.image_urls),
            analysis_queued=queued,
        )
