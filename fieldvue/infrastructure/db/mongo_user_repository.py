# Standard library imports
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.exceptions import DatabaseError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields, UserRole
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_user_collection


def _object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository; the unique email index comes from ensure_indexes()"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None
        return await self._find_one({UserFields.EMAIL: email.strip().lower()}, "find_by_email")

    async def find_by_id(self, user_id: str) -> Optional[User]:
        object_id = _object_id(user_id) if user_id else None
        if object_id is None:
            return None
        return await self._find_one({UserFields.MONGO_ID: object_id}, "find_by_id")

    async def email_exists(self, email: str) -> bool:
        if not email:
            return False
        try:
            count = await self.user_collection.count_documents(
                {UserFields.EMAIL: email.strip().lower()}, limit=1
            )
        except Exception as e:
            raise DatabaseError(f"Error checking email: {str(e)}", operation="email_exists")
        return count > 0

    async def find_contractor(self, user_id: str) -> Optional[User]:
        object_id = _object_id(user_id) if user_id else None
        if object_id is None:
            return None
        return await self._find_one(
            {UserFields.MONGO_ID: object_id, UserFields.ROLE: UserRole.CONTRACTOR.value},
            "find_contractor",
        )

    async def create(self, user: User) -> User:
        """
        Insert a new account

        Raises:
            ValueError: If the email is already registered
        """
        if user.id:
            raise ValueError("User is already stored")

        document = self._user_to_dict(user)
        now = utc_now()
        document[UserFields.CREATED_AT] = user.created_at or now
        document[UserFields.UPDATED_AT] = now

        try:
            result = await self.user_collection.insert_one(document)
        except DuplicateKeyError:
            raise ValueError("Email already registered")
        except Exception as e:
            raise DatabaseError(f"Error creating user: {str(e)}", operation="create")

        document[UserFields.MONGO_ID] = result.inserted_id
        return self._document_to_user(document)

    async def _find_one(self, query: Dict[str, Any], operation: str) -> Optional[User]:
        try:
            document = await self.user_collection.find_one(query)
        except Exception as e:
            raise DatabaseError(f"Error finding user: {str(e)}", operation=operation)
        return self._document_to_user(document) if document else None

    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """Convert MongoDB document to User domain model"""
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            role=document.get(UserFields.ROLE, UserRole.CUSTOMER.value),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(UserFields.UPDATED_AT)),
        )

    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """Convert User domain model to MongoDB document (without _id)"""
        return {
            UserFields.NAME: user.name.strip(),
            UserFields.EMAIL: user.email.strip().lower(),
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.ROLE: user.role.value,
        }
