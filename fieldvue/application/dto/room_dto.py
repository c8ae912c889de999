from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ...domain.constants.enums import SceneType
from ...domain.models.measurement import PerImageMeasurement, RoomDimensions
from ...domain.models.room import Room, RoomAggregate


class RoomCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    room_type: SceneType = SceneType.INTERIOR


class RoomImageDeleteRequest(BaseModel):
    image_url: str = Field(min_length=1)


class RoomDimensionsResponse(BaseModel):
    estimated_width: Optional[float] = None
    estimated_height: Optional[float] = None
    estimated_length: Optional[float] = None

    @classmethod
    def from_domain(cls, dimensions: Optional[RoomDimensions]) -> Optional["RoomDimensionsResponse"]:
        if dimensions is None:
            return None
        return cls(**dimensions.to_dict())


class AggregateItemResponse(BaseModel):
    type: str
    count: int
    sqft: float


class RoomAggregateResponse(BaseModel):
    items: List[AggregateItemResponse]
    counts_by_type: Dict[str, int]
    area_sqft_by_type: Dict[str, float]
    room_dimensions: Optional[RoomDimensionsResponse] = None
    image_count: int
    failed_images: List[str]
    processed_at: Optional[datetime] = None
    rules_version: Optional[str] = None

    @classmethod
    def from_domain(cls, aggregate: RoomAggregate) -> "RoomAggregateResponse":
        return cls(
            items=[AggregateItemResponse(**item.to_dict()) for item in aggregate.items],
            counts_by_type=aggregate.counts_by_type,
            area_sqft_by_type=aggregate.area_sqft_by_type,
            room_dimensions=RoomDimensionsResponse.from_domain(aggregate.room_dimensions),
            image_count=aggregate.image_count,
            failed_images=aggregate.failed_images,
            processed_at=aggregate.processed_at,
            rules_version=aggregate.rules_version,
        )


class RoomResponse(BaseModel):
    id: str
    job_id: str
    name: str
    room_type: SceneType
    image_urls: List[str]
    aggregate: Optional[RoomAggregateResponse] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, room: Room) -> "RoomResponse":
        return cls(
            id=room.id or "",
            job_id=room.job_id,
            name=room.name,
            room_type=room.room_type,
            image_urls=list(room.image_urls),
            aggregate=RoomAggregateResponse.from_domain(room.aggregate) if room.aggregate else None,
            created_at=room.created_at,
            updated_at=room.updated_at,
        )


class RoomListResponse(BaseModel):
    rooms: List[RoomResponse]
    count: int


class RoomImageResponse(BaseModel):
    """One image of a room with its latest measurement (None until analyzed)"""
    image_url: str
    processed_at: Optional[datetime] = None
    counts_by_type: Dict[str, int] = Field(default_factory=dict)
    area_sqft_by_type: Dict[str, float] = Field(default_factory=dict)
    objects: List[Dict[str, Any]] = Field(default_factory=list)
    scene: Optional[str] = None
    summary: Optional[str] = None
    room_dimensions: Optional[RoomDimensionsResponse] = None
    error: Optional[str] = None
    error_at: Optional[datetime] = None
    analyzed: bool = False

    @classmethod
    def from_domain(cls, image_url: str, measurement: Optional[PerImageMeasurement]) -> "RoomImageResponse":
        if measurement is None:
            return cls(image_url=image_url)
        return cls(
            image_url=image_url,
            processed_at=measurement.processed_at,
            counts_by_type=measurement.counts_by_type,
            area_sqft_by_type=measurement.area_sqft_by_type,
            objects=measurement.objects,
            scene=measurement.scene,
            summary=measurement.summary,
            room_dimensions=RoomDimensionsResponse.from_domain(measurement.room_dimensions),
            error=measurement.error,
            error_at=measurement.error_at,
            analyzed=measurement.processed_at is not None,
        )


class RoomImageListResponse(BaseModel):
    room_id: str
    images: List[RoomImageResponse]


class RoomImagesUploadResponse(BaseModel):
    """Returned as soon as images are stored; analysis runs in the background"""
    room: RoomResponse
    uploaded: List[str]
    analysis_queued: bool


class AnalysisRequestResponse(BaseModel):
    room_id: str
    image_count: int
    analysis_queued: bool
