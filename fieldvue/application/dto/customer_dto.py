from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from ...domain.models.customer import Customer


class CustomerCreateRequest(BaseModel):
    """DTO for customer creation request (a missing name is rejected by the use case)"""
    name: Optional[str] = Field(default=None, max_length=200)
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = Field(default=None, max_length=500)
    field: Optional[str] = Field(default=None, max_length=100)


class CustomerResponse(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    field: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id or "",
            name=customer.name,
            email=customer.email,
            phone_number=customer.phone_number,
            address=customer.address,
            field=customer.field,
            created_by=customer.created_by,
            created_at=customer.created_at,
        )


class CustomerListResponse(BaseModel):
    customers: List[CustomerResponse]
    count: int
