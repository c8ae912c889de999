# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.constants.enums import UserRole
from ....domain.models.job import Job
from ....domain.repositories.job_repository import JobRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.job_dto import JobCreateRequest, JobResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class CreateJobUseCase:
    """
    Use case for creating a job.

    Customers book a named contractor and own the job; contractors create
    jobs for themselves; admins must name the contractor.
    """

    def __init__(self, job_repository: JobRepository, user_repository: UserRepository) -> None:
        self.job_repository = job_repository
        self.user_repository = user_repository

    async def execute(self, request: JobCreateRequest, current_user: UserResponse) -> JobResponse:
        """
        Raises:
            ValueError: If a required contractor ID is missing
            LookupError: If the named contractor does not exist
        """
        customer_id: Optional[str] = None
        if current_user.role == UserRole.CONTRACTOR:
            contractor_id = current_user.id
        else:
            contractor_id = await self._require_contractor(request.contractor_id)
            if current_user.role == UserRole.CUSTOMER:
                customer_id = current_user.id

        job = Job(
            id=None,
            title=request.title.strip(),
            contractor_id=contractor_id,
            description=request.description,
            customer_name=request.customer_name,
            customer_address=request.customer_address,
            customer_phone=request.customer_phone,
            appointment_date=request.appointment_date,
            estimated_cost=request.estimated_cost,
            customer_id=customer_id,
        )
        saved = await self.job_repository.save(job)
        logger.info(f"Job {saved.id} created by {current_user.role.value} {current_user.id}")
        return JobResponse.from_domain(saved)

    async def _require_contractor(self, contractor_id: Optional[str]) -> str:
        if not contractor_id:
            raise ValueError("contractor_id is required")
        if await self.user_repository.find_contractor(contractor_id) is None:
            raise LookupError("Contractor not found")
        return contractor_id
