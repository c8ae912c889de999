from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.customer_repository import CustomerRepository
from ...domain.repositories.job_repository import JobRepository
from ...domain.repositories.room_repository import RoomRepository
from ...domain.repositories.measurement_repository import MeasurementRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_customer_repository import MongoCustomerRepository
from ...infrastructure.db.mongo_job_repository import MongoJobRepository
from ...infrastructure.db.mongo_room_repository import MongoRoomRepository
from ...infrastructure.db.mongo_measurement_repository import MongoMeasurementRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )
        container.register_singleton(
            CustomerRepository,
            MongoCustomerRepository(customer_collection=container.get("customer_collection"))
        )
        container.register_singleton(
            JobRepository,
            MongoJobRepository(job_collection=container.get("job_collection"))
        )
        container.register_singleton(
            RoomRepository,
            MongoRoomRepository(room_collection=container.get("room_collection"))
        )
        container.register_singleton(
            MeasurementRepository,
            MongoMeasurementRepository(room_image_collection=container.get("room_image_collection"))
        )
