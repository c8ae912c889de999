from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ...domain.constants.enums import JobStatus
from ...domain.models.job import Job
from .user_dto import UserResponse


class JobCreateRequest(BaseModel):
    """DTO for job creation request"""
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=5000)
    customer_name: Optional[str] = Field(default=None, max_length=200)
    customer_address: Optional[str] = Field(default=None, max_length=500)
    customer_phone: Optional[str] = Field(default=None, max_length=50)
    appointment_date: Optional[str] = None
    estimated_cost: Optional[float] = Field(default=None, ge=0)
    contractor_id: Optional[str] = None


class JobUpdateRequest(BaseModel):
    """DTO for partial job updates; unset fields are left alone"""
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=5000)
    customer_name: Optional[str] = Field(default=None, max_length=200)
    customer_address: Optional[str] = Field(default=None, max_length=500)
    customer_phone: Optional[str] = Field(default=None, max_length=50)
    appointment_date: Optional[str] = None
    estimated_cost: Optional[float] = Field(default=None, ge=0)


class JobStatusUpdateRequest(BaseModel):
    status: str


class JobResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    status: JobStatus
    customer_name: Optional[str] = None
    customer_address: Optional[str] = None
    customer_phone: Optional[str] = None
    appointment_date: Optional[str] = None
    estimated_cost: Optional[float] = None
    customer_id: Optional[str] = None
    contractor_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, job: Job) -> "JobResponse":
        return cls(
            id=job.id or "",
            title=job.title,
            description=job.description,
            status=job.status,
            customer_name=job.customer_name,
            customer_address=job.customer_address,
            customer_phone=job.customer_phone,
            appointment_date=job.appointment_date,
            estimated_cost=job.estimated_cost,
            customer_id=job.customer_id,
            contractor_id=job.contractor_id,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )


class JobListResponse(BaseModel):
    jobs: List[JobResponse]
    count: int
    user: UserResponse
