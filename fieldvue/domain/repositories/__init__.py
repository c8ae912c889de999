from .user_repository import UserRepository
from .customer_repository import CustomerRepository
from .job_repository import JobRepository
from .room_repository import RoomRepository
from .measurement_repository import MeasurementRepository

__all__ = [
    "UserRepository",
    "CustomerRepository",
    "JobRepository",
    "RoomRepository",
    "MeasurementRepository",
]
