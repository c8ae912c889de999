# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import CustomerFields, JobFields, RoomFields, RoomImageFields, UserFields

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_database() -> None:
    """Close the MongoDB client if one was opened."""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("Closed MongoDB client")
    _mongo_client = None
    _mongo_database = None


async def ping_database() -> None:
    """Round-trip a ping command; raises if MongoDB is unreachable."""
    await get_database().command("ping")


def get_user_collection() -> AsyncIOMotorCollection:
    """MongoDB collection for users"""
    return get_database()["users"]


def get_customer_collection() -> AsyncIOMotorCollection:
    """MongoDB collection for customer records"""
    return get_database()["customers"]


def get_job_collection() -> AsyncIOMotorCollection:
    """MongoDB collection for jobs"""
    return get_database()["jobs"]


def get_room_collection() -> AsyncIOMotorCollection:
    """MongoDB collection for rooms (aggregate embedded)"""
    return get_database()["rooms"]


def get_room_image_collection() -> AsyncIOMotorCollection:
    """MongoDB collection for per-image measurements"""
    return get_database()["room_images"]


async def ensure_indexes() -> None:
    """
    Create the indexes the repositories rely on.

    The unique (room_id, image_url) index backs measurement upserts; the
    unique email index backs registration.
    """
    await get_user_collection().create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
    await get_customer_collection().create_index(
        [(CustomerFields.CREATED_BY, ASCENDING), (CustomerFields.CREATED_AT, DESCENDING)]
    )
    await get_job_collection().create_index(
        [(JobFields.CONTRACTOR_ID, ASCENDING), (JobFields.CREATED_AT, DESCENDING)]
    )
    await get_job_collection().create_index(
        [(JobFields.CUSTOMER_ID, ASCENDING), (JobFields.CREATED_AT, DESCENDING)]
    )
    await get_room_collection().create_index([(RoomFields.JOB_ID, ASCENDING)])
    await get_room_image_collection().create_index(
        [(RoomImageFields.ROOM_ID, ASCENDING), (RoomImageFields.IMAGE_URL, ASCENDING)],
        unique=True,
    )
    logger.info("MongoDB indexes ensured")
