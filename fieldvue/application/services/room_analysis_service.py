"""
Room image analysis.

One batch = one room + a list of image URLs. Every image is fetched, sent to
the detection client and reduced to a PerImageMeasurement concurrently; a
failing image gets an error marker and never affects its siblings. Once the
whole batch has settled, the room aggregate is recomputed from every stored
measurement of the room's current images, under a per-room lock.
"""

# Standard library imports
import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict, Iterable, List, Optional, Tuple

# Local application imports
from ...core.exceptions import ExternalServiceError, FieldVueError
from ...core.retry import async_retry_on_exception
from ...domain.constants.enums import SceneType
from ...domain.detection import ConfidencePolicy, aggregate_room, build_measurement
from ...domain.gateways.detection_client import DetectionClient
from ...domain.gateways.image_fetcher import ImageFetcher
from ...domain.models.room import RoomAggregate
from ...domain.repositories.measurement_repository import MeasurementRepository
from ...domain.repositories.room_repository import RoomRepository

logger = logging.getLogger(__name__)


class KeyedLock:
    """asyncio.Lock per key; locks are dropped once nobody holds or waits on them."""

    def __init__(self) -> None:
        self._locks: Dict[str, asyncio.Lock] = {}
        self._users: Dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)


@dataclass
class AnalysisReport:
    """Outcome of one analysis batch (internal; not exposed over HTTP)."""
    room_id: str
    succeeded: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)
    aggregate: Optional[RoomAggregate] = None
    aggregation_error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.failed and self.aggregation_error is None


class RoomAnalysisService:
    """Runs detection for a batch of room images and refreshes the room aggregate"""

    def __init__(
        self,
        room_repository: RoomRepository,
        measurement_repository: MeasurementRepository,
        detection_client: DetectionClient,
        image_fetcher: ImageFetcher,
        confidence_policy: Optional[ConfidencePolicy] = None,
        max_retries: int = 2,
        retry_initial_delay: float = 1.0,
    ) -> None:
        self.room_repository = room_repository
        self.measurement_repository = measurement_repository
        self.detection_client = detection_client
        self.image_fetcher = image_fetcher
        self.confidence_policy = confidence_policy or ConfidencePolicy()
        self._room_locks = KeyedLock()
        self._fetch_and_detect = async_retry_on_exception(
            max_retries=max_retries,
            initial_delay=retry_initial_delay,
            exceptions=(ExternalServiceError,),
        )(self._fetch_and_detect_once)

    async def analyze(
        self,
        room_id: str,
        image_urls: Iterable[str],
        scene_type: SceneType,
    ) -> AnalysisReport:
        """
        Analyze a batch of images for one room, then re-aggregate the room.

        Never raises for per-image or aggregation failures; they are logged,
        recorded as error markers and reflected in the returned report.

        Args:
            room_id: Room the images belong to
            image_urls: Images to (re)analyze; duplicates are processed once
            scene_type: Rule set for canonicalization and confidence filtering

        Returns:
            AnalysisReport describing per-image outcomes and the new aggregate
        """
        scene_type = SceneType(scene_type)
        urls = list(dict.fromkeys(url for url in image_urls if url))
        report = AnalysisReport(room_id=room_id)
        logger.info(f"Analyzing {len(urls)} image(s) for room {room_id} ({scene_type.value})")

        outcomes = await asyncio.gather(
            *(self._process_image(room_id, url, scene_type) for url in urls)
        )
        for url, error in outcomes:
            if error is None:
                report.succeeded.append(url)
            else:
                report.failed[url] = error

        try:
            report.aggregate = await self.reaggregate(room_id)
        except Exception as e:
            report.aggregation_error = str(e)
            logger.error(
                f"Aggregation failed for room {room_id}; previous aggregate kept: {e}",
                exc_info=True,
            )

        logger.info(
            f"Room {room_id} analysis done: {len(report.succeeded)} ok, {len(report.failed)} failed"
        )
        return report

    async def reaggregate(self, room_id: str) -> Optional[RoomAggregate]:
        """
        Recompute and store the room aggregate from its stored measurements.

        Only measurements of images still listed on the room are counted;
        records left behind by images deleted mid-analysis are removed.
        Serialized per room, so overlapping batches cannot write stale totals.

        Returns:
            The new aggregate, or None when the room no longer exists

        Raises:
            FieldVueError: If the measurements cannot be read or the aggregate cannot be stored
        """
        async with self._room_locks.hold(room_id):
            room = await self.room_repository.find_by_id(room_id)
            if room is None:
                logger.warning(f"Room {room_id} disappeared before aggregation")
                return None

            current_urls = set(room.image_urls)
            measurements = []
            orphaned = []
            for measurement in await self.measurement_repository.find_by_room(room_id):
                if measurement.image_url in current_urls:
                    measurements.append(measurement)
                else:
                    orphaned.append(measurement.image_url)

            aggregate = aggregate_room(measurements)
            await self.room_repository.set_aggregate(room_id, aggregate)
            await self._remove_orphans(room_id, orphaned)
            return aggregate

    async def _process_image(
        self,
        room_id: str,
        image_url: str,
        scene_type: SceneType,
    ) -> Tuple[str, Optional[str]]:
        try:
            payload = await self._fetch_and_detect(image_url, scene_type)
            measurement = build_measurement(
                room_id, image_url, payload, scene_type, self.confidence_policy
            )
            await self.measurement_repository.upsert(measurement)
            return image_url, None
        except FieldVueError as e:
            logger.warning(f"Analysis failed for {image_url} in room {room_id}: {e.message}")
            error = e.message
        except Exception as e:
            logger.error(f"Unexpected error analyzing {image_url} in room {room_id}: {e}", exc_info=True)
            error = f"Unexpected error: {e}"

        await self._record_failure(room_id, image_url, error)
        return image_url, error

    async def _fetch_and_detect_once(self, image_url: str, scene_type: SceneType) -> Dict[str, Any]:
        image_bytes, mime_type = await self.image_fetcher.fetch(image_url)
        return await self.detection_client.detect(image_bytes, mime_type, scene_type)

    async def _record_failure(self, room_id: str, image_url: str, error: str) -> None:
        try:
            await self.measurement_repository.mark_failed(room_id, image_url, error)
        except Exception as e:
            logger.error(f"Could not record error marker for {image_url}: {e}", exc_info=True)

    async def _remove_orphans(self, room_id: str, image_urls: List[str]) -> None:
        for image_url in image_urls:
            try:
                await self.measurement_repository.delete(room_id, image_url)
                logger.info(f"Removed measurement of deleted image {image_url} in room {room_id}")
            except Exception as e:
                logger.error(f"Could not remove measurement of {image_url}: {e}", exc_info=True)
