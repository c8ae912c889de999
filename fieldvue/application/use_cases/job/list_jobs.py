# Local application imports
from ....domain.constants.enums import UserRole
from ....domain.repositories.job_repository import JobRepository
from ...dto.job_dto import JobListResponse, JobResponse
from ...dto.user_dto import UserResponse


class ListJobsUseCase:
    """Role-scoped job listing: admin all, contractor assigned, customer own (newest first)"""

    def __init__(self, job_repository: JobRepository) -> None:
        self.job_repository = job_repository

    async def execute(self, current_user: UserResponse) -> JobListResponse:
        if current_user.role == UserRole.ADMIN:
            jobs = await self.job_repository.find_all()
        elif current_user.role == UserRole.CONTRACTOR:
            jobs = await self.job_repository.find_by_contractor(current_user.id)
        else:
            jobs = await self.job_repository.find_by_customer(current_user.id)

        return JobListResponse(
            jobs=[JobResponse.from_domain(job) for job in jobs],
            count=len(jobs),
            user=current_user,
        )
