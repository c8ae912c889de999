from .create_job import CreateJobUseCase
from .list_jobs import ListJobsUseCase
from .get_job import GetJobUseCase
from .update_job import UpdateJobUseCase
from .update_job_status import UpdateJobStatusUseCase
from .job_access import load_accessible_job

__all__ = [
    "CreateJobUseCase",
    "ListJobsUseCase",
    "GetJobUseCase",
    "UpdateJobUseCase",
    "UpdateJobStatusUseCase",
    "load_accessible_job",
]
