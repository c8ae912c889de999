# Standard library imports
import time
from dataclasses import dataclass

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings
from ..domain.constants.enums import UserRole
from ..domain.models.user import User

REQUIRED_CLAIMS = ["sub", "email", "role", "iat", "exp"]


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by an access token"""
    user_id: str
    email: str
    role: UserRole


def hash_password(plain_password: str) -> str:
    """Hash a password with a fresh bcrypt salt"""
    salt = bcrypt.gensalt(rounds=12)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """True when the password matches; malformed hashes never match"""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(user: User) -> str:
    """
    Issue an access token for a stored user

    The subject is the user ID; email and role ride along so clients can
    render the session without a round trip.

    Args:
        user: Persisted user (must have an ID)

    Returns:
        Encoded JWT

    Raises:
        ValueError: If the user has not been saved yet
    """
    if not user.id:
        raise ValueError("Cannot issue a token for an unsaved user")

    settings = get_settings()
    issued_at = int(time.time())
    claims = {
        "sub": user.id,
        "email": user.email,
        "role": user.role.value,
        "iat": issued_at,
        "exp": issued_at + settings.access_token_expire_minutes * 60,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> TokenClaims:
    """
    Validate an access token and return its identity claims

    Raises:
        ValueError: If the token is malformed, expired, signed with another
            key, missing a claim or carries an unknown role
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")

    user_id = payload["sub"]
    if not isinstance(user_id, str) or not user_id:
        raise ValueError("Invalid token: empty subject")
    try:
        role = UserRole(payload["role"])
    except ValueError:
        raise ValueError(f"Invalid token: unknown role {payload['role']!r}")

    return TokenClaims(user_id=user_id, email=str(payload["email"]), role=role)
