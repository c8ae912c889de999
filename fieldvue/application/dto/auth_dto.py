from pydantic import BaseModel, EmailStr, Field

from ...domain.constants.enums import UserRole
from .user_dto import UserResponse


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=8, max_length=256)
    role: UserRole = UserRole.CUSTOMER


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)


class AuthResponse(BaseModel):
    """DTO for register/login responses: token plus the user it belongs to"""
    message: str
    token: str
    token_type: str = "bearer"
    user: UserResponse


class MessageResponse(BaseModel):
    message: str
