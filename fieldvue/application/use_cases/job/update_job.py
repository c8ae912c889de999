# Standard library imports
import logging

# Local application imports
from ....domain.repositories.job_repository import JobRepository
from ...dto.job_dto import JobResponse, JobUpdateRequest
from ...dto.user_dto import UserResponse
from .job_access import load_accessible_job

logger = logging.getLogger(__name__)


class UpdateJobUseCase:
    """Partial update of a job's descriptive fields"""

    def __init__(self, job_repository: JobRepository) -> None:
        self.job_repository = job_repository

    async def execute(self, job_id: str, request: JobUpdateRequest, current_user: UserResponse) -> JobResponse:
        """
        Apply the fields set on the request; unset fields keep their value

        Raises:
            ValueError: If nothing to update or the title would become blank
            LookupError: If the job does not exist
            PermissionError: If the user has no access to the job
        """
        job = await load_accessible_job(self.job_repository, job_id, current_user)

        changes = request.model_dump(exclude_unset=True)
        if not changes:
            raise ValueError("No fields to update")
        if "title" in changes and not (changes["title"] or "").strip():
            raise ValueError("Job title is required")

        for name, value in changes.items():
            setattr(job, name, value)

        saved = await self.job_repository.save(job)
        logger.info(f"Job {job_id} updated ({', '.join(sorted(changes))})")
        return JobResponse.from_domain(saved)
