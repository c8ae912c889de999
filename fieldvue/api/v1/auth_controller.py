# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import (
    AuthResponse,
    MessageResponse,
    UserLoginRequest,
    UserRegistrationRequest,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.logout_user import LogoutUserUseCase
from ...di.container import get_container
from .dependencies import get_bearer_token, get_current_user, to_http_exception


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> AuthResponse:
    """
    Register a new user
    
    Args:
        request: User registration request
        
    Returns:
        AuthResponse with token and created user information
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    
    try:
        return await register_use_case.execute(request)
    except ValueError as exception:
        raise to_http_exception(exception)


@router.post("/login", response_model=AuthResponse)
async def login_user(request: UserLoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token
    
    Args:
        request: User login request
        
    Returns:
        AuthResponse with access token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    
    auth_response = await login_use_case.execute(request)
    if auth_response is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    return auth_response


@router.post("/logout", response_model=MessageResponse)
async def logout_user(token: str = Depends(get_bearer_token)) -> MessageResponse:
    container = get_container()
    logout_use_case = container.get(LogoutUserUseCase)

    try:
        return await logout_use_case.execute(token)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exception)
        )


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """
    Get current authenticated user information
    
    Args:
        current_user: Current authenticated user (from dependency)
        
    Returns:
        UserResponse with user information
    """
    return current_user
