from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.detection import ConfidencePolicy
from ...domain.gateways.detection_client import DetectionClient
from ...domain.gateways.image_fetcher import ImageFetcher
from ...domain.repositories.measurement_repository import MeasurementRepository
from ...domain.repositories.room_repository import RoomRepository
from ...application.services.room_analysis_service import RoomAnalysisService
from ...application.services.analysis_queue import AnalysisQueue

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AnalysisProvider:
    """Registers the room analysis service and its background queue (both singletons)"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()

        policy = ConfidencePolicy.from_settings(
            settings.lenient_confidence_types_interior,
            settings.lenient_confidence_types_exterior,
        )
        container.register_singleton(ConfidencePolicy, policy)

        analysis_service = RoomAnalysisService(
            room_repository=container.get(RoomRepository),
            measurement_repository=container.get(MeasurementRepository),
            detection_client=container.get(DetectionClient),
            image_fetcher=container.get(ImageFetcher),
            confidence_policy=policy,
            max_retries=settings.detection_max_retries,
        )
        container.register_singleton(RoomAnalysisService, analysis_service)

        container.register_singleton(
            AnalysisQueue,
            AnalysisQueue(
                analysis_service,
                workers=settings.analysis_workers,
                maxsize=settings.analysis_queue_size,
            )
        )
