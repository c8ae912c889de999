from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr

from ...domain.constants.enums import UserRole
from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: EmailStr
    role: UserRole
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            name=user.name,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
        )
