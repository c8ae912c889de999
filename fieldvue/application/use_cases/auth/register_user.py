# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.security import hash_password, create_access_token
from ...dto.auth_dto import UserRegistrationRequest, AuthResponse
from ...dto.user_dto import UserResponse


class EmailAlreadyRegisteredError(ValueError):
    """Raised when registering an email that already has an account"""
    pass


class RegisterUserUseCase:
    """Use case for registering a new user and signing them in"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user

        Args:
            request: Registration request with name, email, password and role

        Returns:
            AuthResponse with an access token and the created user

        Raises:
            EmailAlreadyRegisteredError: If the email is already registered
        """
        email = request.email.strip().lower()
        if await self.user_repository.email_exists(email):
            raise EmailAlreadyRegisteredError("User with this email already exists")

        new_user = User(
            id=None,
            name=request.name.strip(),
            email=email,
            hashed_password=hash_password(request.password),
            role=request.role,
        )

        try:
            saved_user = await self.user_repository.create(new_user)
        except ValueError as e:
            # Unique index caught a concurrent registration
            raise EmailAlreadyRegisteredError(str(e))

        return AuthResponse(
            message="User registered successfully",
            token=create_access_token(saved_user),
            user=UserResponse.from_domain(saved_user),
        )
