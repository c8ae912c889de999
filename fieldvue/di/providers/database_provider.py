from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_user_collection,
    get_customer_collection,
    get_job_collection,
    get_room_collection,
    get_room_image_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """Register the database and every collection as singletons"""
        container.register_singleton("database", get_database())
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("customer_collection", get_customer_collection())
        container.register_singleton("job_collection", get_job_collection())
        container.register_singleton("room_collection", get_room_collection())
        container.register_singleton("room_image_collection", get_room_image_collection())
