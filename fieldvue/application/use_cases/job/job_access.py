# Local application imports
from ....domain.models.job import Job
from ....domain.repositories.job_repository import JobRepository
from ...dto.user_dto import UserResponse


async def load_accessible_job(job_repository: JobRepository, job_id: str, current_user: UserResponse) -> Job:
    """
    Load a job the current user may see.

    Raises:
        LookupError: If the job does not exist
        PermissionError: If the user has no access to it
    """
    job = await job_repository.find_by_id(job_id)
    if job is None:
        raise LookupError("Job not found")
    if not job.is_accessible_by(current_user.id, current_user.role):
        raise PermissionError("Access denied")
    return job
