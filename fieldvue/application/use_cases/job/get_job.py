# Local application imports
from ....domain.repositories.job_repository import JobRepository
from ...dto.job_dto import JobResponse
from ...dto.user_dto import UserResponse
from .job_access import load_accessible_job


class GetJobUseCase:
    """Use case for reading one job"""

    def __init__(self, job_repository: JobRepository) -> None:
        self.job_repository = job_repository

    async def execute(self, job_id: str, current_user: UserResponse) -> JobResponse:
        job = await load_accessible_job(self.job_repository, job_id, current_user)
        return JobResponse.from_domain(job)
