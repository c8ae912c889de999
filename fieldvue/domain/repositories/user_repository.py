from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """
    Accounts for customers, contractors and admins.

    Accounts are only ever created and looked up; emails are stored
    lower-cased and are unique.
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Account for a login email (case-insensitive)"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Account behind a token subject; malformed IDs are not found"""
        pass

    @abstractmethod
    async def email_exists(self, email: str) -> bool:
        pass

    @abstractmethod
    async def find_contractor(self, user_id: str) -> Optional[User]:
        """Account with this ID only if it has the contractor role"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a new account and return it with its ID

        Raises:
            ValueError: If the email is already registered
        """
        pass
