from .mongo_connection import (
    get_database,
    close_database,
    ping_database,
    ensure_indexes,
    get_user_collection,
    get_customer_collection,
    get_job_collection,
    get_room_collection,
    get_room_image_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_customer_repository import MongoCustomerRepository
from .mongo_job_repository import MongoJobRepository
from .mongo_room_repository import MongoRoomRepository
from .mongo_measurement_repository import MongoMeasurementRepository

__all__ = [
    "get_database",
    "close_database",
    "ping_database",
    "ensure_indexes",
    "get_user_collection",
    "get_customer_collection",
    "get_job_collection",
    "get_room_collection",
    "get_room_image_collection",
    "MongoUserRepository",
    "MongoCustomerRepository",
    "MongoJobRepository",
    "MongoRoomRepository",
    "MongoMeasurementRepository",
]
