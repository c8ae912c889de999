# Local application imports
from ....domain.constants.enums import JobStatus
from ....domain.repositories.job_repository import JobRepository
from ...dto.job_dto import JobResponse
from ...dto.user_dto import UserResponse
from .job_access import load_accessible_job


class UpdateJobStatusUseCase:
    """Move a job to another lifecycle status"""

    def __init__(self, job_repository: JobRepository) -> None:
        self.job_repository = job_repository

    async def execute(self, job_id: str, status: str, current_user: UserResponse) -> JobResponse:
        """
        Raises:
            ValueError: If the status is not a known JobStatus
            LookupError: If the job does not exist
            PermissionError: If the user has no access to the job
        """
        try:
            new_status = JobStatus((status or "").strip().lower())
        except ValueError:
            allowed = ", ".join(s.value for s in JobStatus)
            raise ValueError(f"Invalid status. Must be one of: {allowed}")

        job = await load_accessible_job(self.job_repository, job_id, current_user)
        job.status = new_status
        saved = await self.job_repository.save(job)
        return JobResponse.from_domain(saved)
