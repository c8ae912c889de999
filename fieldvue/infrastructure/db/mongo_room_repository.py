# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument

# Local application imports
from ...core.exceptions import DatabaseError
from ...domain.repositories.room_repository import RoomRepository
from ...domain.models.room import AggregateItem, Room, RoomAggregate
from ...domain.constants import RoomFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_room_collection
from .mongo_measurement_repository import room_dimensions_from_document


def _object_id(room_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(room_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoRoomRepository(RoomRepository):
    """MongoDB implementation of RoomRepository (aggregate embedded in the room document)"""

    def __init__(self, room_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.room_collection = room_collection if room_collection is not None else get_room_collection()

    async def find_by_id(self, room_id: str) -> Optional[Room]:
        if not room_id:
            return None
        object_id = _object_id(room_id)
        if object_id is None:
            return None

        try:
            document = await self.room_collection.find_one({RoomFields.MONGO_ID: object_id})
        except Exception as e:
            raise DatabaseError(f"Error finding room by ID: {str(e)}", operation="find_by_id")
        return self._document_to_room(document) if document else None

    async def find_by_job(self, job_id: str) -> List[Room]:
        if not job_id:
            return []
        try:
            cursor = self.room_collection.find({RoomFields.JOB_ID: job_id}).sort(
                RoomFields.CREATED_AT, ASCENDING
            )
            rooms = []
            async for document in cursor:
                rooms.append(self._document_to_room(document))
            return rooms
        except Exception as e:
            raise DatabaseError(f"Error listing rooms: {str(e)}", operation="find_by_job")

    async def save(self, room: Room) -> Room:
        """
        Save room (create new or update existing)

        Updates write name, type and image list only; the aggregate is owned
        by set_aggregate().
        """
        if not room:
            raise ValueError("Room cannot be None")

        now = utc_now()
        room_dict = {
            RoomFields.JOB_ID: room.job_id,
            RoomFields.NAME: room.name.strip(),
            RoomFields.ROOM_TYPE: room.room_type.value,
            RoomFields.IMAGE_URLS: list(room.image_urls),
            RoomFields.UPDATED_AT: now,
        }

        try:
            if room.id:
                object_id = _object_id(room.id)
                if object_id is None:
                    raise ValueError(f"Invalid room ID format: {room.id}")
                document = await self.room_collection.find_one_and_update(
                    {RoomFields.MONGO_ID: object_id},
                    {"$set": room_dict},
                    return_document=ReturnDocument.AFTER,
                )
                if document is None:
                    raise ValueError(f"Room with ID {room.id} not found")
            else:
                room_dict[RoomFields.CREATED_AT] = room.created_at or now
                room_dict[RoomFields.AGGREGATE] = (
                    self._aggregate_to_dict(room.aggregate) if room.aggregate else None
                )
                result = await self.room_collection.insert_one(room_dict)
                document = await self.room_collection.find_one({RoomFields.MONGO_ID: result.inserted_id})
        except ValueError:
            raise
        except Exception as e:
            raise DatabaseError(f"Error saving room: {str(e)}", operation="save")

        if document is None:
            raise DatabaseError("Room was saved but could not be retrieved", operation="save")
        return self._document_to_room(document)

    async def add_image_urls(self, room_id: str, image_urls: List[str]) -> Optional[Room]:
        """Append URLs with $addToSet so repeated uploads of a URL are not duplicated"""
        object_id = _object_id(room_id)
        if object_id is None:
            return None
        try:
            document = await self.room_collection.find_one_and_update(
                {RoomFields.MONGO_ID: object_id},
                {
                    "$addToSet": {RoomFields.IMAGE_URLS: {"$each": list(image_urls)}},
                    "$set": {RoomFields.UPDATED_AT: utc_now()},
                },
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise DatabaseError(f"Error adding room images: {str(e)}", operation="add_image_urls")
        return self._document_to_room(document) if document else None

    async def remove_image_url(self, room_id: str, image_url: str) -> Optional[Room]:
        object_id = _object_id(room_id)
        if object_id is None:
            return None
        try:
            document = await self.room_collection.find_one_and_update(
                {RoomFields.MONGO_ID: object_id},
                {
                    "$pull": {RoomFields.IMAGE_URLS: image_url},
                    "$set": {RoomFields.UPDATED_AT: utc_now()},
                },
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise DatabaseError(f"Error removing room image: {str(e)}", operation="remove_image_url")
        return self._document_to_room(document) if document else None

    async def set_aggregate(self, room_id: str, aggregate: RoomAggregate) -> None:
        """Replace the embedded aggregate with one $set; the previous value stays on failure"""
        object_id = _object_id(room_id)
        if object_id is None:
            raise ValueError(f"Invalid room ID format: {room_id}")
        try:
            result = await self.room_collection.update_one(
                {RoomFields.MONGO_ID: object_id},
                {"$set": {
                    RoomFields.AGGREGATE: self._aggregate_to_dict(aggregate),
                    RoomFields.UPDATED_AT: utc_now(),
                }},
            )
        except Exception as e:
            raise DatabaseError(f"Error saving room aggregate: {str(e)}", operation="set_aggregate")
        if result.matched_count == 0:
            raise ValueError(f"Room with ID {room_id} not found")

    def _document_to_room(self, document: Dict[str, Any]) -> Room:
        return Room(
            id=str(document[RoomFields.MONGO_ID]),
            job_id=document.get(RoomFields.JOB_ID, ""),
            name=document.get(RoomFields.NAME, ""),
            room_type=document.get(RoomFields.ROOM_TYPE) or "interior",
            image_urls=list(document.get(RoomFields.IMAGE_URLS) or []),
            aggregate=self._document_to_aggregate(document.get(RoomFields.AGGREGATE)),
            created_at=ensure_utc(document.get(RoomFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(RoomFields.UPDATED_AT)),
        )

    def _document_to_aggregate(self, value: Any) -> Optional[RoomAggregate]:
        if not isinstance(value, dict):
            return None
        return RoomAggregate(
            items=[
                AggregateItem(type=item["type"], count=int(item.get("count", 0)), sqft=float(item.get("sqft", 0.0)))
                for item in value.get("items") or []
            ],
            counts_by_type={k: int(v) for k, v in (value.get("counts_by_type") or {}).items()},
            area_sqft_by_type={k: float(v) for k, v in (value.get("area_sqft_by_type") or {}).items()},
            room_dimensions=room_dimensions_from_document(value.get("room_dimensions")),
            image_count=int(value.get("image_count", 0)),
            failed_images=list(value.get("failed_images") or []),
            processed_at=ensure_utc(value.get("processed_at")),
            rules_version=value.get("rules_version"),
        )

    def _aggregate_to_dict(self, aggregate: RoomAggregate) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in aggregate.items],
            "counts_by_type": dict(aggregate.counts_by_type),
            "area_sqft_by_type": dict(aggregate.area_sqft_by_type),
            "room_dimensions": aggregate.room_dimensions.to_dict() if aggregate.room_dimensions else None,
            "image_count": aggregate.image_count,
            "failed_images": list(aggregate.failed_images),
            "processed_at": aggregate.processed_at,
            "rules_version": aggregate.rules_version,
        }
