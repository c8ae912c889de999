from typing import TYPE_CHECKING
from ...domain.repositories.job_repository import JobRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.job import (
    CreateJobUseCase,
    GetJobUseCase,
    ListJobsUseCase,
    UpdateJobStatusUseCase,
    UpdateJobUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class JobProvider:
    """Job use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreateJobUseCase,
            lambda: CreateJobUseCase(
                job_repository=container.get(JobRepository),
                user_repository=container.get(UserRepository),
            )
        )
        container.register_factory(
            ListJobsUseCase,
            lambda: ListJobsUseCase(job_repository=container.get(JobRepository))
        )
        container.register_factory(
            GetJobUseCase,
            lambda: GetJobUseCase(job_repository=container.get(JobRepository))
        )
        container.register_factory(
            UpdateJobUseCase,
            lambda: UpdateJobUseCase(job_repository=container.get(JobRepository))
        )
        container.register_factory(
            UpdateJobStatusUseCase,
            lambda: UpdateJobStatusUseCase(job_repository=container.get(JobRepository))
        )
