# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING

# Local application imports
from ...core.exceptions import DatabaseError
from ...domain.repositories.job_repository import JobRepository
from ...domain.models.job import Job
from ...domain.constants import JobFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_job_collection


class MongoJobRepository(JobRepository):
    """MongoDB implementation of JobRepository"""

    def __init__(self, job_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.job_collection = job_collection if job_collection is not None else get_job_collection()

    async def find_by_id(self, job_id: str) -> Optional[Job]:
        """
        Find job by ID

        Args:
            job_id: The job ID to find

        Returns:
            Job domain model if found, None otherwise (including malformed IDs)
        """
        if not job_id:
            return None
        try:
            object_id = ObjectId(job_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.job_collection.find_one({JobFields.MONGO_ID: object_id})
        except Exception as e:
            raise DatabaseError(f"Error finding job by ID: {str(e)}", operation="find_by_id")
        return self._document_to_job(document) if document else None

    async def find_all(self) -> List[Job]:
        return await self._find({}, "find_all")

    async def find_by_contractor(self, contractor_id: str) -> List[Job]:
        if not contractor_id:
            return []
        return await self._find({JobFields.CONTRACTOR_ID: contractor_id}, "find_by_contractor")

    async def find_by_customer(self, customer_id: str) -> List[Job]:
        if not customer_id:
            return []
        return await self._find({JobFields.CUSTOMER_ID: customer_id}, "find_by_customer")

    async def save(self, job: Job) -> Job:
        """
        Save job (create new or update existing)

        Args:
            job: Job domain model to save

        Returns:
            Saved Job domain model with ID and timestamps set
        """
        if not job:
            raise ValueError("Job cannot be None")

        job_dict = self._job_to_dict(job)
        job_dict[JobFields.UPDATED_AT] = utc_now()

        try:
            if job.id:
                try:
                    object_id = ObjectId(job.id)
                except (InvalidId, TypeError):
                    raise ValueError(f"Invalid job ID format: {job.id}")
                update_result = await self.job_collection.update_one(
                    {JobFields.MONGO_ID: object_id}, {"$set": job_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"Job with ID {job.id} not found")
                document = await self.job_collection.find_one({JobFields.MONGO_ID: object_id})
            else:
                job_dict[JobFields.CREATED_AT] = job.created_at or job_dict[JobFields.UPDATED_AT]
                result = await self.job_collection.insert_one(job_dict)
                document = await self.job_collection.find_one({JobFields.MONGO_ID: result.inserted_id})
        except ValueError:
            raise
        except Exception as e:
            raise DatabaseError(f"Error saving job: {str(e)}", operation="save")

        if document is None:
            raise DatabaseError("Job was saved but could not be retrieved", operation="save")
        return self._document_to_job(document)

    async def _find(self, query: Dict[str, Any], operation: str) -> List[Job]:
        try:
            cursor = self.job_collection.find(query).sort(JobFields.CREATED_AT, DESCENDING)
            jobs = []
            async for document in cursor:
                jobs.append(self._document_to_job(document))
            return jobs
        except Exception as e:
            raise DatabaseError(f"Error listing jobs: {str(e)}", operation=operation)

    def _document_to_job(self, document: Dict[str, Any]) -> Job:
        estimated_cost = document.get(JobFields.ESTIMATED_COST)
        return Job(
            id=str(document[JobFields.MONGO_ID]),
            title=document.get(JobFields.TITLE, ""),
            contractor_id=document.get(JobFields.CONTRACTOR_ID, ""),
            status=document.get(JobFields.STATUS, "pending"),
            description=document.get(JobFields.DESCRIPTION),
            customer_name=document.get(JobFields.CUSTOMER_NAME),
            customer_address=document.get(JobFields.CUSTOMER_ADDRESS),
            customer_phone=document.get(JobFields.CUSTOMER_PHONE),
            appointment_date=document.get(JobFields.APPOINTMENT_DATE),
            estimated_cost=float(estimated_cost) if estimated_cost is not None else None,
            customer_id=document.get(JobFields.CUSTOMER_ID),
            created_at=ensure_utc(document.get(JobFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(JobFields.UPDATED_AT)),
        )

    def _job_to_dict(self, job: Job) -> Dict[str, Any]:
        return {
            JobFields.TITLE: job.title.strip(),
            JobFields.DESCRIPTION: job.description,
            JobFields.STATUS: job.status.value,
            JobFields.CUSTOMER_NAME: job.customer_name,
            JobFields.CUSTOMER_ADDRESS: job.customer_address,
            JobFields.CUSTOMER_PHONE: job.customer_phone,
            JobFields.APPOINTMENT_DATE: job.appointment_date,
            JobFields.ESTIMATED_COST: job.estimated_cost,
            JobFields.CUSTOMER_ID: job.customer_id,
            JobFields.CONTRACTOR_ID: job.contractor_id,
        }
