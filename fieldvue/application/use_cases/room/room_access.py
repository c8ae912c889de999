# Standard library imports
from typing import Tuple

# Local application imports
from ....domain.models.job import Job
from ....domain.models.room import Room
from ....domain.repositories.job_repository import JobRepository
from ....domain.repositories.room_repository import RoomRepository
from ...dto.user_dto import UserResponse
from ..job.job_access import load_accessible_job


async def load_accessible_room(
    room_repository: RoomRepository,
    job_repository: JobRepository,
    room_id: str,
    current_user: UserResponse,
) -> Tuple[Room, Job]:
    """
    Load a room and its job, enforcing the job's access rules.

    Raises:
        LookupError: If the room or its job does not exist
        PermissionError: If the user has no access to the job
    """
    room = await room_repository.find_by_id(room_id)
    if room is None:
        raise LookupError("Room not found")
    job = await load_accessible_job(job_repository, room.job_id, current_user)
    return room, job
