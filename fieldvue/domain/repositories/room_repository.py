from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.room import Room, RoomAggregate


class RoomRepository(ABC):
    """Repository interface - defines contract for room data access"""

    @abstractmethod
    async def find_by_id(self, room_id: str) -> Optional[Room]:
        """Find room by ID"""
        pass

    @abstractmethod
    async def find_by_job(self, job_id: str) -> List[Room]:
        """Rooms of a job, oldest first"""
        pass

    @abstractmethod
    async def save(self, room: Room) -> Room:
        """Save room (create or update); never touches the aggregate of an existing room"""
        pass

    @abstractmethod
    async def add_image_urls(self, room_id: str, image_urls: List[str]) -> Optional[Room]:
        """Append image URLs not already on the room, keeping order"""
        pass

    @abstractmethod
    async def remove_image_url(self, room_id: str, image_url: str) -> Optional[Room]:
        """Remove one image URL from the room"""
        pass

    @abstractmethod
    async def set_aggregate(self, room_id: str, aggregate: RoomAggregate) -> None:
        """Replace the room aggregate in a single write"""
        pass
