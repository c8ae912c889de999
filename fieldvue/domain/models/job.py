# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..constants.enums import JobStatus, UserRole


@dataclass
class Job:
    """
    Pure domain model for a field-service job.

    A job is assigned to exactly one contractor and optionally linked to a
    customer account. Rooms hang off jobs.
    """
    id: Optional[str]
    title: str
    contractor_id: str
    status: JobStatus = JobStatus.PENDING
    description: Optional[str] = None
    customer_name: Optional[str] = None
    customer_address: Optional[str] = None
    customer_phone: Optional[str] = None
    appointment_date: Optional[str] = None
    estimated_cost: Optional[float] = None
    customer_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.title or len(self.title.strip()) < 1:
            raise ValueError("Job title is required")
        if not self.contractor_id:
            raise ValueError("Contractor ID is required")
        self.status = JobStatus(self.status)

    def is_accessible_by(self, user_id: str, role: UserRole) -> bool:
        """Admins see every job, contractors their assigned jobs, customers their own."""
        role = UserRole(role)
        if role == UserRole.ADMIN:
            return True
        if role == UserRole.CONTRACTOR:
            return self.contractor_id == user_id
        if role == UserRole.CUSTOMER:
            return self.customer_id is not None and self.customer_id == user_id
        return False
