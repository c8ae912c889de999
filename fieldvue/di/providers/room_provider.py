from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.gateways.blob_store import BlobStore
from ...domain.gateways.detection_client import DetectionClient
from ...domain.repositories.job_repository import JobRepository
from ...domain.repositories.measurement_repository import MeasurementRepository
from ...domain.repositories.room_repository import RoomRepository
from ...application.services.analysis_queue import AnalysisQueue
from ...application.services.room_analysis_service import RoomAnalysisService
from ...application.use_cases.room import (
    CreateRoomUseCase,
    DeleteRoomImageUseCase,
    GetRoomUseCase,
    ListRoomImagesUseCase,
    ListRoomsUseCase,
    ReanalyzeRoomUseCase,
)
from ...application.use_cases.upload import UploadFileUseCase, UploadRoomImagesUseCase
from ...application.use_cases.detection import DetectObjectsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RoomProvider:
    """Room, upload and object-detection use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        max_bytes = get_settings().upload_max_mb * 1024 * 1024

        container.register_factory(
            CreateRoomUseCase,
            lambda: CreateRoomUseCase(
                job_repository=container.get(JobRepository),
                room_repository=container.get(RoomRepository),
            )
        )
        container.register_factory(
            ListRoomsUseCase,
            lambda: ListRoomsUseCase(
                job_repository=container.get(JobRepository),
                room_repository=container.get(RoomRepository),
            )
        )
        container.register_factory(
            GetRoomUseCase,
            lambda: GetRoomUseCase(
                job_repository=container.get(JobRepository),
                room_repository=container.get(RoomRepository),
            )
        )
        container.register_factory(
            ListRoomImagesUseCase,
            lambda: ListRoomImagesUseCase(
                job_repository=container.get(JobRepository),
                room_repository=container.get(RoomRepository),
                measurement_repository=container.get(MeasurementRepository),
            )
        )
        container.register_factory(
            DeleteRoomImageUseCase,
            lambda: DeleteRoomImageUseCase(
                job_repository=container.get(JobRepository),
                room_repository=container.get(RoomRepository),
                measurement_repository=container.get(MeasurementRepository),
                blob_store=container.get(BlobStore),
                analysis_service=container.get(RoomAnalysisService),
            )
        )
        container.register_factory(
            ReanalyzeRoomUseCase,
            lambda: ReanalyzeRoomUseCase(
                job_repository=container.get(JobRepository),
                room_repository=container.get(RoomRepository),
                analysis_queue=container.get(AnalysisQueue),
            )
        )
        container.register_factory(
            UploadRoomImagesUseCase,
            lambda: UploadRoomImagesUseCase(
                job_repository=container.get(JobRepository),
                room_repository=container.get(RoomRepository),
                blob_store=container.get(BlobStore),
                analysis_queue=container.get(AnalysisQueue),
                max_bytes=max_bytes,
            )
        )
        container.register_factory(
            UploadFileUseCase,
            lambda: UploadFileUseCase(
                blob_store=container.get(BlobStore),
                job_repository=container.get(JobRepository),
                max_bytes=max_bytes,
            )
        )
        container.register_factory(
            DetectObjectsUseCase,
            lambda: DetectObjectsUseCase(
                detection_client=container.get(DetectionClient),
                max_bytes=max_bytes,
            )
        )
