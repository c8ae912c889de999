"""
Unit tests for MongoMeasurementRepository against a mocked motor collection.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from fieldvue.core.exceptions import DatabaseError
from fieldvue.domain.models.measurement import PerImageMeasurement, RoomDimensions
from fieldvue.infrastructure.db.mongo_measurement_repository import MongoMeasurementRepository


@pytest.fixture
def collection():
    return MagicMock(
        find_one_and_update=AsyncMock(),
        update_one=AsyncMock(),
        find_one=AsyncMock(),
        delete_one=AsyncMock(),
    )


class TestMongoMeasurementRepository:
    @pytest.mark.asyncio
    async def test_upsert_keys_on_room_and_url(self, collection):
        processed_at = datetime(2024, 3, 1, tzinfo=timezone.utc)
        collection.find_one_and_update.return_value = {
            "_id": "abc",
            "room_id": "room-1",
            "image_url": "http://files/a.jpg",
            "counts_by_type": {"window": 2},
            "area_sqft_by_type": {"window": 24.0},
            "objects": [],
            "room_dimensions": {"estimated_width": 12.0},
            "processed_at": processed_at,
            "error": None,
        }
        repo = MongoMeasurementRepository(room_image_collection=collection)

        stored = await repo.upsert(PerImageMeasurement(
            room_id="room-1",
            image_url="http://files/a.jpg",
            counts_by_type={"window": 2},
            area_sqft_by_type={"window": 24.0},
            room_dimensions=RoomDimensions(estimated_width=12.0),
            processed_at=processed_at,
        ))

        filter_, update = collection.find_one_and_update.await_args.args
        assert filter_ == {"room_id": "room-1", "image_url": "http://files/a.jpg"}
        assert update["$set"]["error"] is None
        assert "created_at" in update["$setOnInsert"]
        assert collection.find_one_and_update.await_args.kwargs["upsert"] is True
        assert stored.id == "abc"
        assert stored.counts_by_type == {"window": 2}
        assert stored.room_dimensions.estimated_width == 12.0

    @pytest.mark.asyncio
    async def test_mark_failed_preserves_counts(self, collection):
        repo = MongoMeasurementRepository(room_image_collection=collection)
        await repo.mark_failed("room-1", "http://files/a.jpg", "timeout")

        _, update = collection.update_one.await_args.args
        assert update["$set"]["error"] == "timeout"
        assert "counts_by_type" not in update["$set"]
        assert update["$setOnInsert"]["counts_by_type"] == {}

    @pytest.mark.asyncio
    async def test_errors_wrapped(self, collection):
        collection.delete_one.side_effect = RuntimeError("connection reset")
        repo = MongoMeasurementRepository(room_image_collection=collection)
        with pytest.raises(DatabaseError):
            await repo.delete("room-1", "http://files/a.jpg")

    @pytest.mark.asyncio
    async def test_persisted_maps_reload_unchanged(self, collection):
        measurement = PerImageMeasurement(
            room_id="room-1",
            image_url="http://files/a.jpg",
            counts_by_type={"crown_molding": 3, "window": 2},
            area_sqft_by_type={"crown_molding": 0.1 + 0.2, "window": 24.0},
            objects=[{"type": "window", "name": "Bay window", "confidence": "high"}],
            room_dimensions=RoomDimensions(estimated_width=12.5, estimated_length=14.0),
            processed_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
        )
        repo = MongoMeasurementRepository(room_image_collection=collection)

        async def write_back(filter_, update, **kwargs):
            return {**update["$set"], "_id": "abc"}

        collection.find_one_and_update.side_effect = write_back
        await repo.upsert(measurement)
        written = collection.find_one_and_update.await_args.args[1]["$set"]
        collection.find_one.return_value = {**written, "_id": "abc"}

        reloaded = await repo.find("room-1", "http://files/a.jpg")

        assert reloaded.counts_by_type == measurement.counts_by_type
        assert reloaded.area_sqft_by_type == measurement.area_sqft_by_type
        assert reloaded.area_sqft_by_type["crown_molding"] == 0.1 + 0.2
        assert reloaded.objects == measurement.objects
        assert reloaded.room_dimensions == measurement.room_dimensions
        assert reloaded.processed_at == measurement.processed_at
        assert reloaded.error is None
