# Standard library imports
import logging

# Local application imports
from ....core.security import decode_access_token
from ...dto.auth_dto import MessageResponse

logger = logging.getLogger(__name__)


class LogoutUserUseCase:
    """
    Use case for logging out.

    Tokens are stateless, so logout only confirms the token is valid; the
    client discards it.
    """

    async def execute(self, token: str) -> MessageResponse:
        """
        Raises:
            ValueError: If the token is invalid or expired
        """
        claims = decode_access_token(token)
        logger.info(f"User {claims.user_id} logged out")
        return MessageResponse(message="Logout successful")
