# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument

# Local application imports
from ...core.exceptions import DatabaseError
from ...domain.repositories.measurement_repository import MeasurementRepository
from ...domain.models.measurement import PerImageMeasurement, RoomDimensions
from ...domain.constants import RoomImageFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_room_image_collection


def room_dimensions_from_document(value: Any) -> Optional[RoomDimensions]:
    """Rebuild RoomDimensions from its stored sub-document."""
    if not isinstance(value, dict):
        return None
    dimensions = RoomDimensions(
        estimated_width=value.get("estimated_width"),
        estimated_height=value.get("estimated_height"),
        estimated_length=value.get("estimated_length"),
    )
    return None if dimensions.is_empty() else dimensions


class MongoMeasurementRepository(MeasurementRepository):
    """
    MongoDB implementation of MeasurementRepository.

    One document per (room_id, image_url) in ``room_images``; a unique index
    on the pair is created by ensure_indexes().
    """

    def __init__(self, room_image_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.room_image_collection = (
            room_image_collection if room_image_collection is not None else get_room_image_collection()
        )

    async def upsert(self, measurement: PerImageMeasurement) -> PerImageMeasurement:
        """
        Insert or fully replace the measurement for (room_id, image_url)

        A successful analysis clears any earlier error marker.

        Args:
            measurement: Measurement to store

        Returns:
            The stored measurement as read back from MongoDB
        """
        now = utc_now()
        document = self._measurement_to_dict(measurement)
        document[RoomImageFields.UPDATED_AT] = now
        document[RoomImageFields.ERROR] = measurement.error
        document[RoomImageFields.ERROR_AT] = measurement.error_at

        try:
            stored = await self.room_image_collection.find_one_and_update(
                self._key(measurement.room_id, measurement.image_url),
                {
                    "$set": document,
                    "$setOnInsert": {RoomImageFields.CREATED_AT: now},
                },
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise DatabaseError(f"Error upserting measurement: {str(e)}", operation="upsert")

        if stored is None:
            raise DatabaseError("Measurement was upserted but could not be retrieved", operation="upsert")
        return self._document_to_measurement(stored)

    async def mark_failed(self, room_id: str, image_url: str, error: str) -> None:
        """
        Set the error marker for one image

        Counts from an earlier successful analysis are left untouched; a new
        record starts with empty maps.
        """
        now = utc_now()
        try:
            await self.room_image_collection.update_one(
                self._key(room_id, image_url),
                {
                    "$set": {
                        RoomImageFields.ERROR: error,
                        RoomImageFields.ERROR_AT: now,
                        RoomImageFields.UPDATED_AT: now,
                    },
                    "$setOnInsert": {
                        RoomImageFields.COUNTS_BY_TYPE: {},
                        RoomImageFields.AREA_SQFT_BY_TYPE: {},
                        RoomImageFields.OBJECTS: [],
                        RoomImageFields.CREATED_AT: now,
                    },
                },
                upsert=True,
            )
        except Exception as e:
            raise DatabaseError(f"Error marking measurement failed: {str(e)}", operation="mark_failed")

    async def find(self, room_id: str, image_url: str) -> Optional[PerImageMeasurement]:
        try:
            document = await self.room_image_collection.find_one(self._key(room_id, image_url))
        except Exception as e:
            raise DatabaseError(f"Error finding measurement: {str(e)}", operation="find")
        return self._document_to_measurement(document) if document else None

    async def find_by_room(self, room_id: str) -> List[PerImageMeasurement]:
        if not room_id:
            return []
        try:
            cursor = self.room_image_collection.find({RoomImageFields.ROOM_ID: room_id}).sort(
                RoomImageFields.CREATED_AT, ASCENDING
            )
            measurements = []
            async for document in cursor:
                measurements.append(self._document_to_measurement(document))
            return measurements
        except Exception as e:
            raise DatabaseError(f"Error listing measurements: {str(e)}", operation="find_by_room")

    async def delete(self, room_id: str, image_url: str) -> bool:
        try:
            result = await self.room_image_collection.delete_one(self._key(room_id, image_url))
        except Exception as e:
            raise DatabaseError(f"Error deleting measurement: {str(e)}", operation="delete")
        return result.deleted_count > 0

    @staticmethod
    def _key(room_id: str, image_url: str) -> Dict[str, str]:
        return {RoomImageFields.ROOM_ID: room_id, RoomImageFields.IMAGE_URL: image_url}

    def _document_to_measurement(self, document: Dict[str, Any]) -> PerImageMeasurement:
        """Convert MongoDB document to PerImageMeasurement"""
        mongo_id = document.get(RoomImageFields.MONGO_ID)
        return PerImageMeasurement(
            id=str(mongo_id) if mongo_id is not None else None,
            room_id=document[RoomImageFields.ROOM_ID],
            image_url=document[RoomImageFields.IMAGE_URL],
            counts_by_type={
                key: int(value)
                for key, value in (document.get(RoomImageFields.COUNTS_BY_TYPE) or {}).items()
            },
            area_sqft_by_type={
                key: float(value)
                for key, value in (document.get(RoomImageFields.AREA_SQFT_BY_TYPE) or {}).items()
            },
            objects=list(document.get(RoomImageFields.OBJECTS) or []),
            scene=document.get(RoomImageFields.SCENE),
            summary=document.get(RoomImageFields.SUMMARY),
            room_dimensions=room_dimensions_from_document(document.get(RoomImageFields.ROOM_DIMENSIONS)),
            processed_at=ensure_utc(document.get(RoomImageFields.PROCESSED_AT)),
            error=document.get(RoomImageFields.ERROR),
            error_at=ensure_utc(document.get(RoomImageFields.ERROR_AT)),
        )

    def _measurement_to_dict(self, measurement: PerImageMeasurement) -> Dict[str, Any]:
        """Convert PerImageMeasurement to MongoDB fields (without _id and markers)"""
        return {
            RoomImageFields.ROOM_ID: measurement.room_id,
            RoomImageFields.IMAGE_URL: measurement.image_url,
            RoomImageFields.COUNTS_BY_TYPE: dict(measurement.counts_by_type),
            RoomImageFields.AREA_SQFT_BY_TYPE: dict(measurement.area_sqft_by_type),
            RoomImageFields.OBJECTS: list(measurement.objects),
            RoomImageFields.SCENE: measurement.scene,
            RoomImageFields.SUMMARY: measurement.summary,
            RoomImageFields.ROOM_DIMENSIONS: (
                measurement.room_dimensions.to_dict() if measurement.room_dimensions else None
            ),
            RoomImageFields.PROCESSED_AT: measurement.processed_at,
        }
