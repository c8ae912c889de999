from .config import Settings, get_settings
from .security import (
    TokenClaims,
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "TokenClaims",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
]
