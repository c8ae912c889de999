# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import create_access_token, verify_password
from ...dto.auth_dto import UserLoginRequest, AuthResponse
from ...dto.user_dto import UserResponse


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> Optional[AuthResponse]:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            AuthResponse if authentication successful, None otherwise
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            return None

        if not verify_password(request.password, user.hashed_password):
            return None

        return AuthResponse(
            message="Login successful",
            token=create_access_token(user),
            user=UserResponse.from_domain(user),
        )
