"""
Bounded background queue for room analysis.

Started and stopped by the FastAPI lifespan. Request handlers call submit(),
which never blocks; a fixed pool of worker tasks drains the queue.
"""

# Standard library imports
import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

# Local application imports
from ...domain.constants.enums import SceneType
from .room_analysis_service import RoomAnalysisService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisJob:
    room_id: str
    image_urls: Tuple[str, ...]
    scene_type: SceneType


class AnalysisQueue:
    """Fixed worker pool over a bounded asyncio.Queue of AnalysisJobs"""

    def __init__(self, analysis_service: RoomAnalysisService, workers: int = 2, maxsize: int = 100) -> None:
        if workers < 1:
            raise ValueError("At least one analysis worker is required")
        self.analysis_service = analysis_service
        self.worker_count = workers
        self.maxsize = maxsize
        self._queue: Optional[asyncio.Queue] = None
        self._workers: List[asyncio.Task] = []
        self._accepting = False

    @property
    def running(self) -> bool:
        return self._accepting and bool(self._workers)

    @property
    def pending(self) -> int:
        return self._queue.qsize() if self._queue is not None else 0

    def start(self) -> None:
        """Create the queue and worker tasks (must be called inside a running loop)"""
        if self._workers:
            return
        self._queue = asyncio.Queue(maxsize=self.maxsize)
        self._workers = [
            asyncio.create_task(self._worker(index, self._queue), name=f"analysis-worker-{index}")
            for index in range(self.worker_count)
        ]
        self._accepting = True
        logger.info(f"Analysis queue started with {self.worker_count} worker(s)")

    def submit(self, room_id: str, image_urls: Iterable[str], scene_type: SceneType) -> bool:
        """
        Enqueue an analysis job without waiting.

        Returns:
            True if queued; False when the queue is full or not running
        """
        urls = tuple(image_urls)
        if not urls:
            return False
        if not self.running or self._queue is None:
            logger.warning(f"Analysis queue not running; dropped job for room {room_id}")
            return False

        job = AnalysisJob(room_id=room_id, image_urls=urls, scene_type=SceneType(scene_type))
        try:
            self._queue.put_nowait(job)
        except asyncio.QueueFull:
            logger.warning(f"Analysis queue full ({self.maxsize}); dropped job for room {room_id}")
            return False
        logger.debug(f"Queued analysis of {len(urls)} image(s) for room {room_id}")
        return True

    async def join(self) -> None:
        """Wait until every queued job has been processed"""
        if self._queue is not None:
            await self._queue.join()

    async def shutdown(self, timeout: float = 30.0) -> None:
        """
        Stop accepting jobs, drain in-flight work, then cancel the workers.

        Jobs still queued when the timeout expires are abandoned.
        """
        if not self._workers:
            return
        self._accepting = False

        try:
            await asyncio.wait_for(self.join(), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Analysis queue drain timed out after {timeout}s; {self.pending} job(s) abandoned")

        for task in self._workers:
            task.cancel()
        await asyncio.gather(*self._workers, return_exceptions=True)
        self._workers = []
        logger.info("Analysis queue stopped")

    async def _worker(self, index: int, queue: asyncio.Queue) -> None:
        while True:
            job = await queue.get()
            try:
                await self.analysis_service.analyze(job.room_id, job.image_urls, job.scene_type)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(f"Worker {index} failed on room {job.room_id}: {e}", exc_info=True)
            finally:
                queue.task_done()
