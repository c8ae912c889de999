from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.job import Job


class JobRepository(ABC):
    """Repository interface - defines contract for job data access"""

    @abstractmethod
    async def find_by_id(self, job_id: str) -> Optional[Job]:
        """Find job by ID"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Job]:
        """All jobs, newest first"""
        pass

    @abstractmethod
    async def find_by_contractor(self, contractor_id: str) -> List[Job]:
        """Jobs assigned to a contractor, newest first"""
        pass

    @abstractmethod
    async def find_by_customer(self, customer_id: str) -> List[Job]:
        """Jobs owned by a customer account, newest first"""
        pass

    @abstractmethod
    async def save(self, job: Job) -> Job:
        """Save job (create or update)"""
        pass
