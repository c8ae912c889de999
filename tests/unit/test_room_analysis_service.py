"""
Unit tests for RoomAnalysisService (detection batch + re-aggregation).
"""
import asyncio
from typing import Dict, List, Optional, Tuple
from unittest.mock import AsyncMock

import pytest

from fieldvue.application.services.room_analysis_service import KeyedLock, RoomAnalysisService
from fieldvue.core.exceptions import DatabaseError, DetectionServiceError, ImageFetchError
from fieldvue.domain.constants.enums import SceneType
from fieldvue.domain.models.measurement import PerImageMeasurement
from fieldvue.domain.models.room import Room
from fieldvue.domain.repositories.measurement_repository import MeasurementRepository


class InMemoryMeasurementRepository(MeasurementRepository):
    """Dict-backed store keyed by (room_id, image_url)"""

    def __init__(self) -> None:
        self.items: Dict[Tuple[str, str], PerImageMeasurement] = {}

    async def upsert(self, measurement: PerImageMeasurement) -> PerImageMeasurement:
        self.items[(measurement.room_id, measurement.image_url)] = measurement
        return measurement

    async def mark_failed(self, room_id: str, image_url: str, error: str) -> None:
        existing = self.items.get((room_id, image_url))
        if existing is None:
            existing = PerImageMeasurement(room_id=room_id, image_url=image_url)
            self.items[(room_id, image_url)] = existing
        existing.error = error

    async def find(self, room_id: str, image_url: str) -> Optional[PerImageMeasurement]:
        return self.items.get((room_id, image_url))

    async def find_by_room(self, room_id: str) -> List[PerImageMeasurement]:
        return [m for (rid, _), m in self.items.items() if rid == room_id]

    async def delete(self, room_id: str, image_url: str) -> bool:
        return self.items.pop((room_id, image_url), None) is not None


def _payload(objects):
    return {"objects": objects}


def _window(area):
    return {"type": "window", "confidence": "high", "surface_area": area}


@pytest.fixture
def room():
    return Room(
        id="room-1",
        job_id="job-1",
        name="Kitchen",
        image_urls=["http://files/a.jpg", "http://files/b.jpg"],
    )


@pytest.fixture
def room_repo(room):
    repo = AsyncMock()
    repo.find_by_id.return_value = room
    return repo


@pytest.fixture
def measurement_repo():
    return InMemoryMeasurementRepository()


@pytest.fixture
def image_fetcher():
    fetcher = AsyncMock()
    fetcher.fetch.return_value = (b"bytes", "image/jpeg")
    return fetcher


@pytest.fixture
def detection_client():
    return AsyncMock()


@pytest.fixture
def service(room_repo, measurement_repo, detection_client, image_fetcher):
    return RoomAnalysisService(
        room_repository=room_repo,
        measurement_repository=measurement_repo,
        detection_client=detection_client,
        image_fetcher=image_fetcher,
        max_retries=1,
        retry_initial_delay=0,
    )


class TestAnalyze:
    @pytest.mark.asyncio
    async def test_aggregates_batch(self, service, detection_client, room_repo):
        detection_client.detect.side_effect = [
            _payload([_window(12)]),
            _payload([_window(10), _window(10)]),
        ]
        report = await service.analyze("room-1", ["http://files/a.jpg", "http://files/b.jpg"], SceneType.INTERIOR)

        assert report.ok
        assert report.aggregate.counts_by_type == {"window": 3}
        assert report.aggregate.area_sqft_by_type == {"window": 32.0}
        room_repo.set_aggregate.assert_awaited_once()
        stored = room_repo.set_aggregate.await_args.args[1]
        assert stored.image_count == 2

    @pytest.mark.asyncio
    async def test_one_failure_does_not_affect_siblings(
        self, service, detection_client, image_fetcher, measurement_repo
    ):
        async def fetch(url):
            if url.endswith("b.jpg"):
                raise ImageFetchError("404", retryable=False)
            return b"bytes", "image/jpeg"

        image_fetcher.fetch.side_effect = fetch
        detection_client.detect.return_value = _payload([_window(12)])

        report = await service.analyze("room-1", ["http://files/a.jpg", "http://files/b.jpg"], SceneType.INTERIOR)

        assert report.succeeded == ["http://files/a.jpg"]
        assert list(report.failed) == ["http://files/b.jpg"]
        assert report.aggregate.counts_by_type == {"window": 1}
        assert report.aggregate.failed_images == ["http://files/b.jpg"]
        assert measurement_repo.items[("room-1", "http://files/b.jpg")].error == "404"

    @pytest.mark.asyncio
    async def test_malformed_response_recorded_without_retry(self, service, detection_client):
        detection_client.detect.return_value = {"unexpected": True}
        report = await service.analyze("room-1", ["http://files/a.jpg"], SceneType.INTERIOR)
        assert "http://files/a.jpg" in report.failed
        assert detection_client.detect.await_count == 1

    @pytest.mark.asyncio
    async def test_transient_error_retried(self, service, detection_client):
        detection_client.detect.side_effect = [
            DetectionServiceError("HTTP 503"),
            _payload([_window(5)]),
        ]
        report = await service.analyze("room-1", ["http://files/a.jpg"], SceneType.INTERIOR)
        assert report.succeeded == ["http://files/a.jpg"]
        assert detection_client.detect.await_count == 2

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_counts(self, service, detection_client, measurement_repo):
        detection_client.detect.return_value = _payload([_window(12)])
        await service.analyze("room-1", ["http://files/a.jpg"], SceneType.INTERIOR)

        detection_client.detect.side_effect = DetectionServiceError("quota", retryable=False)
        report = await service.analyze("room-1", ["http://files/a.jpg"], SceneType.INTERIOR)

        assert report.aggregate.counts_by_type == {"window": 1}
        assert report.aggregate.failed_images == ["http://files/a.jpg"]

    @pytest.mark.asyncio
    async def test_aggregation_failure_is_reported_not_raised(self, service, detection_client, room_repo):
        detection_client.detect.return_value = _payload([_window(12)])
        room_repo.set_aggregate.side_effect = DatabaseError("write failed", operation="set_aggregate")

        report = await service.analyze("room-1", ["http://files/a.jpg"], SceneType.INTERIOR)

        assert report.aggregate is None
        assert "write failed" in report.aggregation_error
        assert not report.ok

    @pytest.mark.asyncio
    async def test_duplicate_urls_processed_once(self, service, detection_client):
        detection_client.detect.return_value = _payload([])
        await service.analyze("room-1", ["http://files/a.jpg", "http://files/a.jpg"], SceneType.INTERIOR)
        assert detection_client.detect.await_count == 1


class TestReaggregate:
    @pytest.mark.asyncio
    async def test_ignores_measurements_of_removed_images(self, service, measurement_repo, room_repo, room):
        await measurement_repo.upsert(PerImageMeasurement(
            room_id="room-1", image_url="http://files/a.jpg", counts_by_type={"door": 1}, area_sqft_by_type={"door": 0.0},
        ))
        await measurement_repo.upsert(PerImageMeasurement(
            room_id="room-1", image_url="http://files/gone.jpg", counts_by_type={"door": 5}, area_sqft_by_type={"door": 0.0},
        ))
        aggregate = await service.reaggregate("room-1")
        assert aggregate.counts_by_type == {"door": 1}
        assert await measurement_repo.find("room-1", "http://files/gone.jpg") is None
        assert await measurement_repo.find("room-1", "http://files/a.jpg") is not None

    @pytest.mark.asyncio
    async def test_image_deleted_during_analysis_leaves_no_record(
        self, service, detection_client, measurement_repo, room
    ):
        async def detect(image_bytes, mime_type, scene_type):
            room.image_urls.remove("http://files/b.jpg")
            return _payload([_window(12)])

        detection_client.detect.side_effect = detect
        report = await service.analyze("room-1", ["http://files/b.jpg"], SceneType.INTERIOR)

        assert report.succeeded == ["http://files/b.jpg"]
        assert report.aggregate.counts_by_type == {}
        assert measurement_repo.items == {}

    @pytest.mark.asyncio
    async def test_missing_room_returns_none(self, service, room_repo):
        room_repo.find_by_id.return_value = None
        assert await service.reaggregate("room-1") is None
        room_repo.set_aggregate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_serialized_per_room(self, service, measurement_repo):
        events = []
        original = measurement_repo.find_by_room

        async def slow_find_by_room(room_id):
            events.append("enter")
            await asyncio.sleep(0.01)
            events.append("exit")
            return await original(room_id)

        measurement_repo.find_by_room = slow_find_by_room
        await asyncio.gather(service.reaggregate("room-1"), service.reaggregate("room-1"))
        assert events == ["enter", "exit", "enter", "exit"]


class TestKeyedLock:
    @pytest.mark.asyncio
    async def test_lock_released_after_use(self):
        locks = KeyedLock()
        async with locks.hold("a"):
            assert len(locks) == 1
        assert len(locks) == 0
