# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import decode_access_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token

        Args:
            token: JWT access token

        Returns:
            UserResponse with user information

        Raises:
            ValueError: If token is invalid or user not found
        """
        try:
            claims = decode_access_token(token)
        except ValueError as exception:
            raise ValueError(f"Invalid or expired token: {str(exception)}")

        user = await self.user_repository.find_by_id(claims.user_id)
        if user is None:
            raise ValueError("User not found")

        return UserResponse.from_domain(user)
