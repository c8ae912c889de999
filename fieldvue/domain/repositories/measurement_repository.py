from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.measurement import PerImageMeasurement


class MeasurementRepository(ABC):
    """
    Repository interface for per-image measurements.

    Records are keyed by (room_id, image_url); writes are upserts.
    """

    @abstractmethod
    async def upsert(self, measurement: PerImageMeasurement) -> PerImageMeasurement:
        """Insert or replace the measurement for (room_id, image_url)"""
        pass

    @abstractmethod
    async def mark_failed(self, room_id: str, image_url: str, error: str) -> None:
        """Record an error marker, keeping any counts from an earlier successful analysis"""
        pass

    @abstractmethod
    async def find(self, room_id: str, image_url: str) -> Optional[PerImageMeasurement]:
        """Find the measurement for one image"""
        pass

    @abstractmethod
    async def find_by_room(self, room_id: str) -> List[PerImageMeasurement]:
        """All measurements of a room"""
        pass

    @abstractmethod
    async def delete(self, room_id: str, image_url: str) -> bool:
        """Delete one image's measurement; True when something was removed"""
        pass
